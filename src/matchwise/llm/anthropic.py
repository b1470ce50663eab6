"""Anthropic Claude LLM provider."""

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel

from matchwise.llm.base import LLMProvider


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider with model caching."""

    def _create_model(self, temperature: float) -> BaseChatModel:
        """Create an Anthropic chat model."""
        return ChatAnthropic(
            model=self.model,
            api_key=self.api_key,
            temperature=temperature,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
