"""Health check routes."""

from __future__ import annotations

import os

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Return the API status and whether AI assist can reach a model."""
    ai_mode = "model" if os.environ.get("GEMINI_API_KEY") else "local"
    return {"status": "healthy", "ai_assist": ai_mode}
