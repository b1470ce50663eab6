"""LLM provider abstraction."""

from matchwise.llm.base import LLMProvider, get_llm_provider, provider_from_settings

__all__ = ["LLMProvider", "get_llm_provider", "provider_from_settings"]
