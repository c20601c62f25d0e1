"""Tests for the export utility module."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from resume_builder.errors import ExportError
from resume_builder.models import WorkExperience
from resume_builder.services.builder import ResumeBuilder
from resume_builder.services.preview import PreviewRenderer, ResumePreview, render_preview
from resume_builder.utils import export as export_module
from resume_builder.utils.export import (
    LETTER_HEIGHT_MM,
    _sanitize_filename,
    export_filename,
    export_resume,
    export_to_pdf,
    get_export_dir,
    page_height,
    render_pdf,
)


@pytest.fixture
def preview() -> ResumePreview:
    builder = ResumeBuilder()
    builder.update_personal_info_field("name", "Jane Doe")
    builder.update_personal_info_field("email", "jane@example.com")
    builder.replace_work_experience(
        [WorkExperience(title="Engineer", company="Acme", start_date="2020-01", current=True)]
    )
    builder.replace_skills(["Python", "Go"])
    return render_preview(builder.document)


class TestSanitizeFilename:
    """Tests for _sanitize_filename function."""

    def test_removes_invalid_characters(self) -> None:
        assert _sanitize_filename('test<>:"/\\|?*file') == "test_________file"

    def test_strips_leading_trailing_dots_spaces(self) -> None:
        assert _sanitize_filename("  ..test.. ") == "test"

    def test_preserves_valid_filename(self) -> None:
        assert _sanitize_filename("my_project-2024") == "my_project-2024"


class TestExportFilename:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Jane Q. Doe", "Jane_Q._Doe_Resume.pdf"),
            ("", "Resume.pdf"),
            ("   ", "Resume.pdf"),
            ("  Jane   Doe ", "Jane_Doe_Resume.pdf"),
            ("Jane/Doe", "Jane_Doe_Resume.pdf"),
        ],
    )
    def test_export_filename(self, name: str, expected: str) -> None:
        assert export_filename(name) == expected


def test_export_dir_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("RESUME_EXPORT_DIR", str(tmp_path))
    assert get_export_dir() == tmp_path

    monkeypatch.delenv("RESUME_EXPORT_DIR")
    assert get_export_dir().name == "resume_builder_exports"


class TestRenderPdf:
    def test_returns_pdf_bytes(self, preview: ResumePreview) -> None:
        data = render_pdf(preview)
        assert data.startswith(b"%PDF")

    def test_short_resume_uses_letter_height(self, preview: ResumePreview) -> None:
        assert page_height(preview) == LETTER_HEIGHT_MM

    def test_long_resume_grows_the_page(self) -> None:
        builder = ResumeBuilder()
        builder.replace_work_experience(
            [
                WorkExperience(title=f"Role {i}", company="Acme", description="Did work. " * 20)
                for i in range(40)
            ]
        )
        long_preview = render_preview(builder.document)

        assert page_height(long_preview) > LETTER_HEIGHT_MM
        assert render_pdf(long_preview).startswith(b"%PDF")

    def test_non_latin_text_is_rendered(self) -> None:
        builder = ResumeBuilder()
        builder.update_personal_info_field("name", "Zoë Łukasz 山田")
        assert render_pdf(render_preview(builder.document)).startswith(b"%PDF")

    def test_empty_preview(self) -> None:
        assert render_pdf(render_preview(ResumeBuilder().document)).startswith(b"%PDF")


class TestExportToPdf:
    def test_writes_file(self, preview: ResumePreview, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "Jane_Doe_Resume.pdf"

        result = export_to_pdf(preview, target)

        assert result == target
        assert target.read_bytes().startswith(b"%PDF")
        assert [p.name for p in target.parent.iterdir()] == ["Jane_Doe_Resume.pdf"]

    def test_render_failure_raises_export_error(
        self, preview: ResumePreview, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def boom(_: ResumePreview) -> bytes:
            raise RuntimeError("font missing")

        monkeypatch.setattr(export_module, "render_pdf", boom)

        with pytest.raises(ExportError, match="problem exporting your resume"):
            export_to_pdf(preview, tmp_path / "out.pdf")
        assert list(tmp_path.iterdir()) == []

    def test_write_failure_leaves_no_partial_file(
        self, preview: ResumePreview, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail_replace(src: str, dst: os.PathLike[str]) -> None:
            raise OSError("disk full")

        monkeypatch.setattr(export_module.os, "replace", fail_replace)

        with pytest.raises(ExportError):
            export_to_pdf(preview, tmp_path / "out.pdf")
        assert list(tmp_path.iterdir()) == []


class TestExportResume:
    def test_uses_attached_preview(self, tmp_path: Path) -> None:
        builder = ResumeBuilder()
        renderer = PreviewRenderer(builder)
        builder.update_personal_info_field("name", "Jane Q. Doe")

        path = export_resume(builder, tmp_path, renderer)

        assert path == tmp_path / "Jane_Q._Doe_Resume.pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_detached_renderer_falls_back_to_fresh_render(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        builder = ResumeBuilder()
        renderer = PreviewRenderer(builder)
        renderer.detach()
        builder.update_personal_info_field("name", "Sam Lee")

        seen: list[ResumePreview] = []
        real_export = export_module.export_to_pdf

        def spy(preview: ResumePreview, output_path: Path) -> Path:
            seen.append(preview)
            return real_export(preview, output_path)

        monkeypatch.setattr(export_module, "export_to_pdf", spy)

        path = export_resume(builder, tmp_path, renderer)

        assert path.name == "Sam_Lee_Resume.pdf"
        assert seen[0]["header"]["name"] == "Sam Lee"

    def test_defaults_to_configured_export_dir(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("RESUME_EXPORT_DIR", str(tmp_path / "exports"))
        builder = ResumeBuilder()

        path = export_resume(builder)

        assert path == tmp_path / "exports" / "Resume.pdf"
        assert path.exists()
