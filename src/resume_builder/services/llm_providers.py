from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod

from dotenv import load_dotenv

"""LLM provider implementations."""

# Load environment variables for LLM API keys (GEMINI_API_KEY, LLM_MODEL, etc.)
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_TIMEOUT_SECONDS = 30.0


class LLMError(RuntimeError):
    """Raised when LLM service cannot be used or fails."""


def get_timeout_seconds() -> float:
    """Return the per-call timeout from ``LLM_TIMEOUT_SECONDS``."""
    raw = os.environ.get("LLM_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid LLM_TIMEOUT_SECONDS=%r", raw)
        return DEFAULT_TIMEOUT_SECONDS
    return timeout if timeout > 0 else DEFAULT_TIMEOUT_SECONDS


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    def generate_llm_config(
        self,
        temperature: float | None,
        max_tokens: int | None,
        seed: int | None,
        top_k: int | None = None,
        top_p: float | None = None,
    ) -> dict:
        """Generate llm configs

        Args:
            temperature: Controls randomness
            max_tokens: Maximum response length
            seed: Random seed for reproducibility
            top_k: Sample from the k most likely tokens
            top_p: Nucleus sampling probability mass

        Returns:
            Configuration dictionary with common parameters
        """
        config = {}

        if temperature is not None:
            config["temperature"] = temperature
        if max_tokens is not None:
            config["max_tokens"] = max_tokens
        if seed is not None:
            config["seed"] = seed
        if top_k is not None:
            config["top_k"] = top_k
        if top_p is not None:
            config["top_p"] = top_p

        return config

    @abstractmethod
    def send_prompt(self, prompt: str, config: dict) -> str:
        """Send a prompt to the LLM and return the text response.

        Args:
            prompt: The full prompt string to send to the LLM.
            config: Configuration dictionary for the LLM request.

        Returns:
            The text response from the LLM.
        """


class GeminiProvider(LLMProvider):
    """Gemini implementation."""

    def __init__(self) -> None:
        """Initialize Gemini provider with API key from environment.

        Note: Environment variables are loaded via load_dotenv() at module import.
        """
        from google import genai
        from google.genai import types

        self.api_key = os.environ.get("GEMINI_API_KEY")
        if not self.api_key:
            raise LLMError("Missing GEMINI_API_KEY environment variable")

        self.model = os.environ.get("LLM_MODEL", DEFAULT_MODEL)
        self.timeout = get_timeout_seconds()
        self.client = genai.Client(
            api_key=self.api_key,
            http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
        )

    def generate_llm_config(
        self,
        temperature: float | None,
        max_tokens: int | None,
        seed: int | None,
        top_k: int | None = None,
        top_p: float | None = None,
    ) -> dict:
        """Generate Gemini-specific configuration dictionary."""
        config = super().generate_llm_config(temperature, max_tokens, seed, top_k, top_p)

        # Map common 'max_tokens' to Gemini's 'max_output_tokens'
        if "max_tokens" in config:
            config["max_output_tokens"] = config.pop("max_tokens")

        return config

    def send_prompt(self, prompt: str, config: dict) -> str:
        """Send prompt to Gemini and return response text.

        Args:
            prompt: The full prompt string.
            config: Configuration dictionary for the Gemini API.

        Returns:
            The response text from Gemini.
        """
        try:
            response = self.client.models.generate_content(
                model=self.model, contents=prompt, config=config
            )
            return (response.text or "").strip()
        except Exception as e:
            raise LLMError(f"Gemini API call failed: {e}") from e
