"""Services"""

from resume_builder.services.ai_assist import AIAssistant, JobMatch, Suggestion
from resume_builder.services.builder import ResumeBuilder
from resume_builder.services.editors import (
    CertificatesEditor,
    EducationEditor,
    PersonalInfoEditor,
    ProjectsEditor,
    WorkExperienceEditor,
)
from resume_builder.services.preview import PreviewRenderer, format_date_range, render_preview
from resume_builder.services.skills import SkillEditor
from resume_builder.services.suggestions_panel import SuggestionsPanel

__all__ = [
    "AIAssistant",
    "CertificatesEditor",
    "EducationEditor",
    "JobMatch",
    "PersonalInfoEditor",
    "PreviewRenderer",
    "ProjectsEditor",
    "ResumeBuilder",
    "SkillEditor",
    "Suggestion",
    "SuggestionsPanel",
    "WorkExperienceEditor",
    "format_date_range",
    "render_preview",
]
