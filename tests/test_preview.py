"""Tests for the preview projection."""

from __future__ import annotations

import pytest

from resume_builder.models import (
    Certificate,
    Document,
    Education,
    PersonalInfo,
    Project,
    WorkExperience,
)
from resume_builder.services.builder import ResumeBuilder
from resume_builder.services.preview import (
    PreviewRenderer,
    format_date_range,
    format_month,
    render_preview,
)


@pytest.mark.parametrize(
    ("start", "end", "current", "expected"),
    [
        ("2020-01", "2022-06", False, "Jan 2020 - Jun 2022"),
        ("2020-01", "", True, "Jan 2020 - Present"),
        ("2020-01", "2022-06", True, "Jan 2020 - Present"),
        ("", "", False, ""),
        ("2020-01", "", False, "Jan 2020"),
        ("", "2022-06", False, "Jun 2022"),
        ("", "", True, "Present"),
        ("Fall 2019", "2023-12-01", False, "Fall 2019 - Dec 2023"),
    ],
)
def test_format_date_range(start: str, end: str, current: bool, expected: str) -> None:
    assert format_date_range(start, end, current) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("2021-09", "Sep 2021"), ("2021-13", "2021-13"), ("2021", "2021"), ("", "")],
)
def test_format_month(value: str, expected: str) -> None:
    assert format_month(value) == expected


def test_empty_document_renders_bare_header() -> None:
    preview = render_preview(Document())

    assert preview == {"header": {"name": "", "details": [], "links": []}, "sections": []}


def test_full_document_projection() -> None:
    document = Document(
        personal_info=PersonalInfo(
            name="Jane Doe",
            email="jane@example.com",
            location="Berlin",
            linkedin="linkedin.com/in/jane",
            summary="Engineer.",
        ),
        work_experience=(
            WorkExperience(
                title="Engineer",
                company="Acme",
                start_date="2020-01",
                current=True,
                description="Built things.",
            ),
        ),
        education=(
            Education(
                institution="TU Berlin",
                degree="BSc",
                field_of_study="Computer Science",
                start_date="2015-10",
                end_date="2019-07",
            ),
        ),
        projects=(Project(title="Compiler", technologies="Rust", link="github.com/jane/cc"),),
        certificates=(Certificate(name="CKA", issuer="CNCF", date="2023-03"),),
        skills=("Python", "Go"),
    )

    preview = render_preview(document)

    assert preview["header"] == {
        "name": "Jane Doe",
        "details": ["Berlin", "jane@example.com"],
        "links": ["linkedin.com/in/jane"],
    }
    assert preview["summary"] == "Engineer."
    assert [s["title"] for s in preview["sections"]] == [
        "Work Experience",
        "Projects",
        "Education",
        "Certificates",
    ]
    work, projects, education, certificates = (s["entries"][0] for s in preview["sections"])
    assert work == {
        "heading": "Engineer",
        "subheading": "Acme",
        "date_range": "Jan 2020 - Present",
        "body": "Built things.",
    }
    assert projects == {
        "heading": "Compiler",
        "subheading": "Rust",
        "link": "github.com/jane/cc",
    }
    assert education["heading"] == "BSc in Computer Science"
    assert education["date_range"] == "Oct 2015 - Jul 2019"
    assert certificates == {"heading": "CKA", "subheading": "CNCF", "date_range": "Mar 2023"}
    assert preview["skills"] == ["Python", "Go"]


def test_empty_fields_are_omitted() -> None:
    preview = render_preview(Document(work_experience=(WorkExperience(company="Acme"),)))

    assert "summary" not in preview
    assert "skills" not in preview
    assert preview["sections"][0]["entries"] == [{"subheading": "Acme"}]


class TestPreviewRenderer:
    def test_follows_published_snapshots(self, builder: ResumeBuilder) -> None:
        renderer = PreviewRenderer(builder)
        assert renderer.attached

        builder.update_personal_info_field("name", "Jane")

        assert renderer.preview is not None
        assert renderer.preview["header"]["name"] == "Jane"

    def test_detach_stops_updates(self, builder: ResumeBuilder) -> None:
        renderer = PreviewRenderer(builder)
        renderer.detach()
        renderer.detach()

        builder.update_personal_info_field("name", "Jane")

        assert not renderer.attached
        assert renderer.preview is None
