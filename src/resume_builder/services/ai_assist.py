"""AI assist: text suggestions, summary generation and job matching.

Each operation asks the configured language model first.  When no model is
configured (no ``GEMINI_API_KEY``), or the call fails, times out or returns
something that cannot be parsed, a deterministic local heuristic produces a
result of exactly the same shape, so callers never need a special case.
"""

from __future__ import annotations

import json
import logging
import re
import uuid
from typing import Any, Literal, TypedDict

from resume_builder.models import Document
from resume_builder.services.keywords import document_text, keyword_overlap
from resume_builder.services.llm_providers import LLMError
from resume_builder.services.llm_service import LLMService

logger = logging.getLogger(__name__)

__all__ = [
    "AIAssistant",
    "JobMatch",
    "Suggestion",
    "SuggestionKind",
    "extract_json",
]

SuggestionKind = Literal["improve", "keywords", "general"]


class Suggestion(TypedDict):
    """One rewrite proposal for a piece of resume text."""

    id: str
    original: str
    suggestion: str
    reason: str


class JobMatch(TypedDict):
    """How well the resume covers a job description."""

    score: int
    matched_keywords: list[str]
    missing_keywords: list[str]


# (temperature, top_k, top_p, max_tokens)
_SUGGESTION_SAMPLING = (0.4, 32, 1.0, 1024)
_ANALYSIS_SAMPLING = (0.2, 40, 0.95, 1024)

_ACTION_VERBS = {
    "managed": "led",
    "responsible for": "spearheaded",
    "worked on": "developed",
}
_ACTION_VERB_RE = re.compile(r"managed|responsible for|worked on", re.IGNORECASE)

_PROMPTS: dict[str, str] = {
    "improve": (
        'Improve this resume text to make it more impactful and professional: "{text}"\n'
        "If context is provided, consider this context: {context}\n"
        "Return exactly three suggestions in this JSON format:\n"
        '[{{"suggestion": "improved version", "reason": "reason for this improvement"}}]'
    ),
    "keywords": (
        "Suggest relevant keywords and industry terms to add to this resume text "
        'to make it more ATS-friendly: "{text}"\n'
        "Return suggestions in this JSON format:\n"
        '[{{"suggestion": "text with added keyword", "reason": "reason for adding this keyword"}}]'
    ),
    "general": (
        'Give general improvement suggestions for this resume text: "{text}"\n'
        "Return suggestions in this JSON format:\n"
        '[{{"suggestion": "improved version", "reason": "reason for this improvement"}}]'
    ),
}


def extract_json(text: str, opener: str) -> Any:
    """Return the first well-formed JSON value starting with *opener* in *text*.

    Models tend to wrap JSON in prose or markdown fences, so the reply is
    scanned for the first ``[`` (or ``{``) that begins a decodable value.

    Raises:
        LLMError: If no such value exists.
    """
    decoder = json.JSONDecoder()
    start = text.find(opener)
    while start != -1:
        try:
            value, _ = decoder.raw_decode(text, start)
            return value
        except json.JSONDecodeError:
            start = text.find(opener, start + 1)
    raise LLMError("Could not parse model response")


def _format_experience(document: Document) -> str:
    return "\n".join(
        f"- {exp.title} at {exp.company} "
        f"({exp.start_date} - {'Present' if exp.current else exp.end_date})\n"
        f"  {exp.description}"
        for exp in document.work_experience
    )


def _format_education(document: Document) -> str:
    return "\n".join(
        f"- {edu.degree} in {edu.field_of_study} from {edu.institution}"
        for edu in document.education
    )


class AIAssistant:
    """Facade over the language model with local fallbacks."""

    def __init__(self, service: LLMService | None = None) -> None:
        self._service = service
        self._service_unavailable = False

    def _get_service(self) -> LLMService | None:
        if self._service is None and not self._service_unavailable:
            try:
                self._service = LLMService()
            except LLMError as e:
                logger.warning("AI assist running on local suggestions: %s", e)
                self._service_unavailable = True
        return self._service

    def _ask(self, prompt: str, sampling: tuple[float, int, float, int]) -> str:
        service = self._get_service()
        if service is None:
            raise LLMError("No language model configured")
        temperature, top_k, top_p, max_tokens = sampling
        return service.generate_llm_response(
            prompt,
            temperature=temperature,
            max_tokens=max_tokens,
            top_k=top_k,
            top_p=top_p,
        )

    # ------------------------------------------------------------------
    # Text suggestions
    # ------------------------------------------------------------------

    def improve_text(
        self,
        text: str,
        context: str | None = None,
        kind: SuggestionKind = "improve",
    ) -> list[Suggestion]:
        """Return rewrite suggestions for *text*.

        Args:
            text: The resume text to improve.
            context: Optional extra context such as job title and company.
            kind: ``improve``, ``keywords`` or ``general``; selects the prompt.
        """
        if kind not in _PROMPTS:
            raise ValueError(f"Unknown suggestion kind: {kind!r}")

        prompt = _PROMPTS[kind].format(text=text, context=context or "No context provided")
        try:
            reply = self._ask(prompt, _SUGGESTION_SAMPLING)
            raw = extract_json(reply, "[")
            suggestions = [
                Suggestion(
                    id=str(uuid.uuid4()),
                    original=text,
                    suggestion=item["suggestion"],
                    reason=str(item.get("reason", "")),
                )
                for item in raw
                if isinstance(item, dict) and isinstance(item.get("suggestion"), str)
            ]
            if not suggestions:
                raise LLMError("Model returned no usable suggestions")
            return suggestions
        except LLMError as e:
            logger.warning("Falling back to local %s suggestions: %s", kind, e)
        except Exception:
            logger.exception("Unexpected failure getting %s suggestions", kind)
        return self._local_suggestions(text, kind)

    @staticmethod
    def _local_suggestions(text: str, kind: SuggestionKind) -> list[Suggestion]:
        def make(suggestion: str, reason: str) -> Suggestion:
            return Suggestion(
                id=str(uuid.uuid4()), original=text, suggestion=suggestion, reason=reason
            )

        if kind == "improve":
            if len(text) > 20:
                body = text[0].upper() + text[1:]
                if body.endswith("."):
                    body = body[:-1]
                expanded = f"{body} with a focus on quantifiable achievements and outcomes."
            else:
                expanded = "Consider expanding this with more specific details and achievements."
            stronger = _ACTION_VERB_RE.sub(
                lambda m: _ACTION_VERBS.get(m.group(0).lower(), m.group(0)), text
            )
            return [
                make(expanded, "Adding specific achievements makes your resume more impactful"),
                make(
                    stronger,
                    "Using stronger action verbs demonstrates leadership and initiative",
                ),
            ]

        if kind == "keywords":
            if text:
                enriched = text + " Proficient in industry-standard methodologies and tools."
            else:
                enriched = "Consider adding relevant technical skills and methodologies."
            return [
                make(enriched, "Including industry keywords improves visibility to ATS systems")
            ]

        if len(text) > 30:
            words = text.split(" ")
            revised = " ".join(words[: int(len(words) * 0.8)]) + "..."
        else:
            revised = text + " Consider expanding this section with more relevant details."
        if len(text) > 100:
            reason = "Keeping content concise improves readability"
        else:
            reason = "Adding more relevant information strengthens your profile"
        return [make(revised, reason)]

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def generate_summary(self, document: Document) -> str:
        """Write a short professional summary from the resume content."""
        prompt = (
            "Create a professional summary paragraph for a resume with these details:\n\n"
            f"Name: {document.personal_info.name}\n"
            f"Skills: {', '.join(document.skills)}\n\n"
            f"Work Experience:\n{_format_experience(document)}\n\n"
            f"Education:\n{_format_education(document)}\n\n"
            "Write a concise, professional summary paragraph (maximum 3-4 sentences) "
            "that highlights strengths, experience, and career focus."
        )
        try:
            summary = self._ask(prompt, _ANALYSIS_SAMPLING).strip()
            if not summary:
                raise LLMError("Model returned an empty summary")
            return summary
        except LLMError as e:
            logger.warning("Falling back to local summary: %s", e)
        except Exception:
            logger.exception("Unexpected failure generating a summary")
        return self._local_summary(document)

    @staticmethod
    def _local_summary(document: Document) -> str:
        name = document.personal_info.name.strip() or "the candidate"
        role = "professional"
        if document.work_experience and document.work_experience[0].title:
            role = document.work_experience[0].title
        skills = ", ".join(document.skills) or "various skills"
        first_name = name.split(" ")[0]
        return (
            f"{name} is a dedicated {role} with expertise in {skills}. With a proven track "
            "record of delivering results and a commitment to excellence, "
            f"{first_name} brings valuable experience and a forward-thinking approach to "
            "solving complex challenges."
        )

    # ------------------------------------------------------------------
    # Job matching
    # ------------------------------------------------------------------

    def score_against_job(self, document: Document, job_description: str) -> JobMatch:
        """Compare the resume with *job_description*."""
        info = document.personal_info
        prompt = (
            "Compare this resume information:\n\n"
            f"Name: {info.name}\n"
            f"Professional Summary: {info.summary}\n\n"
            f"Work Experience:\n{_format_experience(document)}\n\n"
            f"Education:\n{_format_education(document)}\n\n"
            f"Skills: {', '.join(document.skills)}\n\n"
            f"To this job description:\n{job_description}\n\n"
            "Return a JSON object with the following:\n"
            "{\n"
            '  "optimizationScore": [a number between 0-100 representing match percentage],\n'
            '  "keywordMatches": [array of keywords from the resume that match well with '
            "the job description],\n"
            '  "missingKeywords": [array of important keywords from the job description '
            "that are not in the resume]\n"
            "}"
        )
        try:
            reply = self._ask(prompt, _ANALYSIS_SAMPLING)
            raw = extract_json(reply, "{")
            if not isinstance(raw, dict):
                raise LLMError("Model response is not an object")
            score = int(float(raw["optimizationScore"]))
            return JobMatch(
                score=max(0, min(100, score)),
                matched_keywords=[str(k) for k in raw.get("keywordMatches") or []],
                missing_keywords=[str(k) for k in raw.get("missingKeywords") or []],
            )
        except (LLMError, KeyError, TypeError, ValueError) as e:
            logger.warning("Falling back to local job match: %s", e)
        except Exception:
            logger.exception("Unexpected failure scoring against the job description")
        return self._local_job_match(document, job_description)

    @staticmethod
    def _local_job_match(document: Document, job_description: str) -> JobMatch:
        score, matched, missing = keyword_overlap(document_text(document), job_description)
        return JobMatch(score=score, matched_keywords=matched, missing_keywords=missing)
