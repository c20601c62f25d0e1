"""Keyword overlap between a resume and a job description.

Used as the offline job-match heuristic when the language model cannot be
reached.  Pure functions over strings; no I/O.
"""

from __future__ import annotations

import re

from resume_builder.models import Document

__all__ = ["document_text", "extract_keywords", "keyword_overlap"]

MAX_REPORTED_KEYWORDS = 10

_WORD_RE = re.compile(r"\b[a-z][a-z0-9\+\#\./-]{2,}\b")
_MULTI_WORD_RE = re.compile(
    r"\b(?:machine learning|deep learning|data science|project management|"
    r"full stack|front end|back end|cloud computing|cross-functional teams|"
    r"agile methodology|continuous integration|continuous delivery|"
    r"problem solving|team leadership)\b"
)

_STOP_WORDS = frozenset(
    {
        "the", "and", "for", "are", "but", "not", "you", "all", "can", "was",
        "our", "out", "has", "have", "been", "will", "with", "this", "that",
        "from", "they", "were", "which", "their", "about", "would", "there",
        "what", "also", "into", "more", "other", "than", "then", "them",
        "these", "some", "such", "only", "over", "very", "just", "being",
        "through", "during", "while", "must", "should", "could", "does",
        "work", "working", "looking", "seeking", "ability", "able",
        "including", "using", "strong", "excellent", "good", "great", "well",
        "team", "role", "position", "company", "join", "ideal", "candidate",
        "required", "preferred", "minimum", "years", "year", "experience",
        "who", "your", "its", "etc", "any", "per", "new",
    }
)  # fmt: skip


def extract_keywords(text: str) -> list[str]:
    """Return meaningful lower-cased keywords of *text* in first-seen order."""
    lowered = text.lower()
    found = _MULTI_WORD_RE.findall(lowered) + [
        w.rstrip(".") for w in _WORD_RE.findall(lowered)
    ]
    keywords: list[str] = []
    for word in found:
        if len(word) < 3 or word in _STOP_WORDS or word in keywords:
            continue
        keywords.append(word)
    return keywords


def document_text(document: Document) -> str:
    """Flatten every user-entered string of *document* into one text."""
    info = document.personal_info
    parts: list[str] = [info.name, info.summary]
    for work in document.work_experience:
        parts += [work.title, work.company, work.description]
    for edu in document.education:
        parts += [edu.degree, edu.field_of_study, edu.institution, edu.description]
    for project in document.projects:
        parts += [project.title, project.technologies, project.description]
    for cert in document.certificates:
        parts += [cert.name, cert.issuer, cert.description]
    parts += list(document.skills)
    return "\n".join(p for p in parts if p)


def keyword_overlap(resume_text: str, job_description: str) -> tuple[int, list[str], list[str]]:
    """Score how many job-description keywords the resume text covers.

    Returns:
        ``(score, matched, missing)`` where *score* is the covered share of
        job keywords as a percentage (0 when the description has none).
    """
    job_keywords = extract_keywords(job_description)
    if not job_keywords:
        return 0, [], []

    resume_lower = resume_text.lower()
    resume_keywords = set(extract_keywords(resume_text))
    matched = [k for k in job_keywords if k in resume_keywords or (" " in k and k in resume_lower)]
    missing = [k for k in job_keywords if k not in matched]
    score = round(100 * len(matched) / len(job_keywords))
    return (
        score,
        matched[:MAX_REPORTED_KEYWORDS],
        missing[:MAX_REPORTED_KEYWORDS],
    )
