"""Data models and type definitions"""

from resume_builder.models.document import (
    Certificate,
    Document,
    Education,
    Entity,
    PersonalInfo,
    Project,
    WorkExperience,
    new_entity_id,
    replace_fields,
)

__all__ = [
    "Certificate",
    "Document",
    "Education",
    "Entity",
    "PersonalInfo",
    "Project",
    "WorkExperience",
    "new_entity_id",
    "replace_fields",
]
