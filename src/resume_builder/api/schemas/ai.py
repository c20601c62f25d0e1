"""Pydantic schemas for AI assist endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ImproveTextRequest(BaseModel):
    text: str = Field(..., description="Resume text to improve")
    context: str | None = Field(None, description="Optional context such as job title")
    kind: Literal["improve", "keywords", "general"] = Field(
        "improve", description="Prompt template to use"
    )


class SuggestionResponse(BaseModel):
    id: str
    original: str
    suggestion: str
    reason: str


class SummaryResponse(BaseModel):
    summary: str


class JobMatchRequest(BaseModel):
    job_description: str = Field(..., description="Job posting text to compare against")


class JobMatchResponse(BaseModel):
    score: int = Field(..., ge=0, le=100, description="Match percentage")
    matched_keywords: list[str]
    missing_keywords: list[str]
