"""Base LLM provider abstraction."""

from abc import ABC, abstractmethod
from typing import Literal

from langchain_core.language_models import BaseChatModel

# Default timeout in seconds for API requests
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 1  # 1 retry = 2 total attempts max

# Sampling temperatures per use
SUMMARY_TEMPERATURE = 0.7
EXTRACTION_TEMPERATURE = 0.3

DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "anthropic": "claude-sonnet-4-5-20250929",
    "google": "gemini-2.5-flash",
}


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Implements model caching to avoid repeated instantiation overhead.
    Models are cached on first access and reused for subsequent calls.
    """

    def __init__(
        self,
        model: str,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self.max_retries = max_retries
        self._summary_model: BaseChatModel | None = None
        self._extraction_model: BaseChatModel | None = None

    def get_summary_model(self) -> BaseChatModel:
        """Get a cached model for free-text match summaries."""
        if self._summary_model is None:
            self._summary_model = self._create_model(SUMMARY_TEMPERATURE)
        return self._summary_model

    def get_extraction_model(self) -> BaseChatModel:
        """Get a cached model optimized for structured extraction."""
        if self._extraction_model is None:
            self._extraction_model = self._create_model(EXTRACTION_TEMPERATURE)
        return self._extraction_model

    @abstractmethod
    def _create_model(self, temperature: float) -> BaseChatModel:
        """Create a new chat model instance. Override in subclasses."""
        pass


def get_llm_provider(
    provider: Literal["openai", "anthropic", "google"],
    model: str | None = None,
    api_key: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> LLMProvider:
    """Factory function to get an LLM provider instance."""
    if provider not in DEFAULT_MODELS:
        raise ValueError(f"Unknown provider: {provider}")

    kwargs = {
        "model": model or DEFAULT_MODELS[provider],
        "api_key": api_key,
        "timeout": timeout,
        "max_retries": max_retries,
    }
    if provider == "openai":
        from matchwise.llm.openai import OpenAIProvider

        return OpenAIProvider(**kwargs)
    elif provider == "anthropic":
        from matchwise.llm.anthropic import AnthropicProvider

        return AnthropicProvider(**kwargs)
    else:
        from matchwise.llm.google import GoogleProvider

        return GoogleProvider(**kwargs)


def provider_from_settings() -> LLMProvider | None:
    """Build the provider configured in settings, or None without an API key."""
    from matchwise.config import get_settings

    settings = get_settings()
    if not settings.has_api_key:
        return None
    return get_llm_provider(
        settings.provider,
        model=settings.model,
        api_key=settings.api_key,
        timeout=settings.summary_timeout_seconds,
        max_retries=settings.summary_max_retries,
    )
