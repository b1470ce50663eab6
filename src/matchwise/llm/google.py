"""Google Gemini LLM provider."""

import os

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from matchwise.llm.base import DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT, LLMProvider


class GoogleProvider(LLMProvider):
    """Google Gemini provider using langchain-google-genai."""

    def __init__(
        self,
        model: str = "gemini-2.5-flash",
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        """Initialize the Google provider.

        Args:
            model: Model name (default: gemini-2.5-flash).
            api_key: Google API key. If not provided, uses GOOGLE_API_KEY env var.
            timeout: Request timeout in seconds.
            max_retries: Maximum number of retries on failure.
        """
        super().__init__(
            model=model,
            api_key=api_key or os.getenv("GOOGLE_API_KEY"),
            timeout=timeout,
            max_retries=max_retries,
        )

    def _create_model(self, temperature: float) -> BaseChatModel:
        """Create a Gemini chat model."""
        return ChatGoogleGenerativeAI(
            model=self.model,
            temperature=temperature,
            google_api_key=self.api_key,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
