"""Skill list editor.

Skills are plain strings kept as an ordered set: insertion order is
preserved and an exact (case-sensitive) duplicate is rejected.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from resume_builder.errors import DuplicateSkillError

if TYPE_CHECKING:
    from resume_builder.services.builder import ResumeBuilder

logger = logging.getLogger(__name__)

__all__ = ["REFERENCE_SKILLS", "SkillEditor"]

MAX_SUGGESTIONS = 5

# Candidates offered by ``suggest()``; a static heuristic, no model involved.
REFERENCE_SKILLS: tuple[str, ...] = (
    "TypeScript",
    "React Native",
    "NextJS",
    "GraphQL",
    "MongoDB",
    "AWS",
    "Docker",
    "Kubernetes",
    "CI/CD",
    "Agile Methodologies",
    "Problem Solving",
    "Team Leadership",
    "Project Management",
    "UX/UI Design",
    "RESTful APIs",
    "Microservices",
)


class SkillEditor:
    """Add, remove and suggest skills on the builder's skill slice."""

    def __init__(self, builder: ResumeBuilder, *, rng: random.Random | None = None) -> None:
        self.builder = builder
        self._rng = rng or random.Random()
        self.suggested: list[str] = []

    @property
    def skills(self) -> tuple[str, ...]:
        return self.builder.document.skills

    def add(self, value: str) -> tuple[str, ...]:
        """Append the trimmed *value*.

        Blank input is ignored.

        Raises:
            DuplicateSkillError: If the trimmed value is already present.
        """
        skill = value.strip()
        if not skill:
            return self.skills
        if skill in self.skills:
            raise DuplicateSkillError(skill)
        self.builder.replace_skills((*self.skills, skill))
        return self.skills

    def remove(self, value: str) -> tuple[str, ...]:
        self.builder.replace_skills(tuple(s for s in self.skills if s != value))
        return self.skills

    def suggest(self) -> list[str]:
        """Return up to five reference skills the resume does not list yet."""
        candidates = [s for s in REFERENCE_SKILLS if s not in self.skills]
        self._rng.shuffle(candidates)
        self.suggested = candidates[:MAX_SUGGESTIONS]
        if not self.suggested:
            logger.info("No new skills to suggest")
        return list(self.suggested)

    def add_suggested(self, value: str) -> tuple[str, ...]:
        """Accept one suggested skill; silently skips it if already present."""
        if value not in self.skills:
            self.builder.replace_skills((*self.skills, value))
        self.suggested = [s for s in self.suggested if s != value]
        return self.skills
