from __future__ import annotations

import os

from resume_builder.services.llm_providers import (
    GeminiProvider,
    LLMError,
    LLMProvider,
)

"""LLM service with provider support (currently Gemini)."""


class LLMService:
    def __init__(self, provider: LLMProvider | None = None) -> None:
        """Initialize LLM service with a specific provider.
        Args:
            provider: LLM provider instance
        """
        self.provider = provider or LLMService._get_default_llm_provider_from_env()

    @staticmethod
    def _get_default_llm_provider_from_env() -> LLMProvider:
        """Get the configured LLM provider.

        Returns:
            An instance of the configured LLM provider.

        Raises:
            LLMError: If the provider is unknown or cannot be configured.
        """
        provider_name = os.environ.get("LLM_PROVIDER", "gemini").lower()

        if provider_name == "gemini":
            return GeminiProvider()
        raise LLMError(f"Unknown LLM provider: {provider_name}.")

    def generate_llm_response(
        self,
        prompt: str,
        temperature: float | None = 0.4,
        max_tokens: int | None = 1024,
        seed: int | None = None,
        top_k: int | None = None,
        top_p: float | None = None,
    ) -> str:
        """Send *prompt* to the LLM with the given sampling settings.

        Args:
            prompt: The complete prompt text.
            temperature: Controls randomness (0.0-2.0). Lower = more deterministic.
            max_tokens: Maximum response length. None = provider default.
            seed: Random seed for reproducibility (if supported by provider).
            top_k: Top-k sampling cutoff.
            top_p: Top-p (nucleus) sampling cutoff.

        Returns:
            The text response from the LLM.
        """
        config = self.provider.generate_llm_config(temperature, max_tokens, seed, top_k, top_p)
        return self.provider.send_prompt(prompt, config)
