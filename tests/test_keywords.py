from __future__ import annotations

from resume_builder.models import Certificate, Document, PersonalInfo, Project
from resume_builder.services.keywords import document_text, extract_keywords, keyword_overlap


def test_extract_keywords_keeps_order_and_drops_stop_words() -> None:
    text = "Experience with machine learning and Python. Python preferred."
    assert extract_keywords(text) == ["machine learning", "machine", "learning", "python"]


def test_extract_keywords_keeps_technical_tokens() -> None:
    assert extract_keywords("Node.js, CI/CD and ASP.NET") == ["node.js", "ci/cd", "asp.net"]


def test_document_text_includes_every_section() -> None:
    document = Document(
        personal_info=PersonalInfo(name="Jane", summary="Builder of things"),
        projects=(Project(title="Compiler", technologies="Rust, LLVM"),),
        certificates=(Certificate(name="CKA", issuer="CNCF"),),
        skills=("Go",),
    )
    text = document_text(document)
    for fragment in ("Jane", "Builder of things", "Compiler", "Rust, LLVM", "CKA", "CNCF", "Go"):
        assert fragment in text


def test_keyword_overlap_counts_phrases() -> None:
    score, matched, missing = keyword_overlap(
        "Led project management for a machine learning platform",
        "Machine learning engineer with project management skills",
    )
    assert "machine learning" in matched
    assert "project management" in matched
    assert "engineer" in missing
    assert 0 < score < 100


def test_keyword_overlap_limits_reported_keywords() -> None:
    job = " ".join(f"skill{i:02d}" for i in range(30))
    score, matched, missing = keyword_overlap("", job)
    assert score == 0
    assert matched == []
    assert len(missing) == 10


def test_keyword_overlap_without_job_keywords() -> None:
    assert keyword_overlap("Python", "") == (0, [], [])
