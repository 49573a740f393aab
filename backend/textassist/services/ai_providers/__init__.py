"""
AI provider implementations. Callers go through the adapter entrypoints
(get_suggestions, complete, generate_next_step, resolve_completion) with a
resolved ProviderConfig.
"""

from .adapter import complete, generate_next_step, get_suggestions, resolve_completion
from .interface import LLMProvider, PromptSpec
from .llm_factory import ProviderKind, get_llm_provider, list_llm_provider_names

__all__ = [
    "LLMProvider",
    "PromptSpec",
    "ProviderKind",
    "complete",
    "generate_next_step",
    "get_llm_provider",
    "get_suggestions",
    "list_llm_provider_names",
    "resolve_completion",
]
