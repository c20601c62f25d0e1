"""Wiring of one resume document with its editors, preview and AI panel."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from resume_builder.services.ai_assist import AIAssistant
from resume_builder.services.builder import ResumeBuilder
from resume_builder.services.editors import (
    CertificatesEditor,
    EducationEditor,
    EntityListEditor,
    PersonalInfoEditor,
    ProjectsEditor,
    WorkExperienceEditor,
)
from resume_builder.services.preview import PreviewRenderer
from resume_builder.services.skills import SkillEditor
from resume_builder.services.suggestions_panel import SuggestionsPanel

__all__ = ["SECTIONS", "ResumeSession"]

# URL slug -> ResumeSession attribute of the list editor
SECTIONS: dict[str, str] = {
    "work-experience": "work_experience",
    "education": "education",
    "projects": "projects",
    "certificates": "certificates",
}


@dataclass
class ResumeSession:
    """Everything a front end needs to edit and export one resume.

    ``lock`` serialises document mutations when the session is shared
    between request threads.
    """

    builder: ResumeBuilder = field(default_factory=ResumeBuilder)
    assistant: AIAssistant = field(default_factory=AIAssistant)
    lock: threading.RLock = field(default_factory=threading.RLock)

    def __post_init__(self) -> None:
        self.personal_info = PersonalInfoEditor(self.builder, self.assistant)
        self.work_experience = WorkExperienceEditor(self.builder, self.assistant)
        self.education = EducationEditor(self.builder)
        self.projects = ProjectsEditor(self.builder)
        self.certificates = CertificatesEditor(self.builder)
        self.skills = SkillEditor(self.builder)
        self.suggestions = SuggestionsPanel(self.builder, self.assistant)
        self.renderer = PreviewRenderer(self.builder)

    def list_editor(self, section: str) -> EntityListEditor:
        """Return the list editor for the URL slug *section*.

        Raises:
            KeyError: If *section* is not a list section.
        """
        return getattr(self, SECTIONS[section])
