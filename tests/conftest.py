from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from resume_builder.api.main import app
from resume_builder.services.ai_assist import AIAssistant
from resume_builder.services.builder import ResumeBuilder
from resume_builder.services.llm_providers import LLMError, LLMProvider
from resume_builder.services.llm_service import LLMService
from resume_builder.services.session import ResumeSession


class FakeProvider(LLMProvider):
    """Provider returning canned replies (or raising) and recording prompts."""

    def __init__(self, response: str = "", error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.prompts: list[str] = []
        self.configs: list[dict] = []

    def send_prompt(self, prompt: str, config: dict) -> str:
        self.prompts.append(prompt)
        self.configs.append(config)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def _no_llm_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Never let a developer's real key reach the network during tests."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("LLM_PROVIDER", raising=False)


@pytest.fixture
def builder() -> ResumeBuilder:
    return ResumeBuilder()


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def model_assistant(fake_provider: FakeProvider) -> AIAssistant:
    """Assistant wired to the fake provider instead of Gemini."""
    return AIAssistant(LLMService(provider=fake_provider))


@pytest.fixture
def offline_assistant() -> AIAssistant:
    """Assistant whose provider always fails, forcing the local fallbacks."""
    return AIAssistant(LLMService(provider=FakeProvider(error=LLMError("offline"))))


@pytest.fixture
def api_session(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[ResumeSession]:
    """Install a fresh in-memory resume session for API tests."""
    monkeypatch.setenv("RESUME_EXPORT_DIR", (tmp_path / "exports").as_posix())
    session = ResumeSession(
        assistant=AIAssistant(LLMService(provider=FakeProvider(error=LLMError("offline"))))
    )
    app.state.resume_session = session
    yield session
    app.state.resume_session = None

