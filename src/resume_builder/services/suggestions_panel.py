"""AI suggestions panel: summary generation and job-description matching."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_builder.errors import MissingFieldError
from resume_builder.services.ai_assist import AIAssistant, JobMatch
from resume_builder.services.editors import BusyFlag

if TYPE_CHECKING:
    from resume_builder.models import Document
    from resume_builder.services.builder import ResumeBuilder

__all__ = ["SuggestionsPanel"]


class SuggestionsPanel:
    """Holds pending AI output until the user applies or discards it.

    Nothing here writes to the document except :meth:`apply_summary`.
    """

    def __init__(self, builder: ResumeBuilder, assistant: AIAssistant | None = None) -> None:
        self.builder = builder
        self.assistant = assistant or AIAssistant()
        self.generated_summary = ""
        self.job_match: JobMatch | None = None
        self.summary_busy = BusyFlag("Generating a summary")
        self.optimize_busy = BusyFlag("Matching against the job description")

    def generate_summary(self) -> str:
        """Generate a summary; needs a name and a first work-experience title."""
        document = self.builder.document
        first_title = document.work_experience[0].title if document.work_experience else ""
        if not document.personal_info.name or not first_title:
            raise MissingFieldError(
                "Please add your name and at least one work experience first."
            )

        with self.summary_busy.hold():
            self.generated_summary = self.assistant.generate_summary(document)
        return self.generated_summary

    def apply_summary(self) -> Document | None:
        if not self.generated_summary:
            return None
        document = self.builder.update_summary(self.generated_summary)
        self.generated_summary = ""
        return document

    def optimize_for_job(self, job_description: str) -> JobMatch:
        if not job_description.strip():
            raise MissingFieldError("Please enter a job description to optimize for.")

        with self.optimize_busy.hold():
            self.job_match = self.assistant.score_against_job(
                self.builder.document, job_description
            )
        return self.job_match
