"""Tests for the skill list editor."""

from __future__ import annotations

import random

import pytest

from resume_builder.errors import DuplicateSkillError
from resume_builder.services.builder import ResumeBuilder
from resume_builder.services.skills import REFERENCE_SKILLS, SkillEditor


@pytest.fixture
def skills(builder: ResumeBuilder) -> SkillEditor:
    return SkillEditor(builder, rng=random.Random(0))


def test_add_trims_and_appends(builder: ResumeBuilder, skills: SkillEditor) -> None:
    skills.add("  Python ")
    skills.add("SQL")
    assert builder.document.skills == ("Python", "SQL")


def test_blank_input_is_ignored(builder: ResumeBuilder, skills: SkillEditor) -> None:
    before = builder.document
    assert skills.add("   ") == ()
    assert builder.document is before


def test_duplicate_is_rejected_and_list_unchanged(
    builder: ResumeBuilder, skills: SkillEditor
) -> None:
    skills.add("Python")
    before = builder.document.skills

    with pytest.raises(DuplicateSkillError) as exc_info:
        skills.add(" Python")

    assert exc_info.value.skill == "Python"
    assert builder.document.skills is before


def test_duplicate_check_is_case_sensitive(skills: SkillEditor) -> None:
    skills.add("python")
    skills.add("Python")
    assert skills.skills == ("python", "Python")


def test_remove_by_exact_value(skills: SkillEditor) -> None:
    skills.add("Go")
    skills.add("Rust")
    assert skills.remove("go") == ("Go", "Rust")
    assert skills.remove("Go") == ("Rust",)


def test_suggest_returns_five_unlisted_reference_skills(skills: SkillEditor) -> None:
    skills.add("Docker")
    skills.add("AWS")

    suggested = skills.suggest()

    assert len(suggested) == 5
    assert len(set(suggested)) == 5
    assert set(suggested) <= set(REFERENCE_SKILLS)
    assert not {"Docker", "AWS"} & set(suggested)


def test_suggest_is_deterministic_for_a_seeded_rng(builder: ResumeBuilder) -> None:
    first = SkillEditor(builder, rng=random.Random(42)).suggest()
    second = SkillEditor(builder, rng=random.Random(42)).suggest()
    assert first == second


def test_suggest_with_everything_listed_is_empty(
    builder: ResumeBuilder, skills: SkillEditor
) -> None:
    builder.replace_skills(REFERENCE_SKILLS)
    assert skills.suggest() == []


def test_add_suggested_skips_duplicates_and_clears_suggestion(skills: SkillEditor) -> None:
    suggested = skills.suggest()
    pick = suggested[0]

    skills.add_suggested(pick)
    skills.add_suggested(pick)

    assert skills.skills == (pick,)
    assert pick not in skills.suggested
    assert len(skills.suggested) == 4
