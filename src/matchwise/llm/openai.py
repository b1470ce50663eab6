"""OpenAI LLM provider."""

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from matchwise.llm.base import LLMProvider


class OpenAIProvider(LLMProvider):
    """OpenAI GPT provider."""

    def _create_model(self, temperature: float) -> BaseChatModel:
        """Create an OpenAI chat model."""
        return ChatOpenAI(
            model=self.model,
            temperature=temperature,
            api_key=self.api_key,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
