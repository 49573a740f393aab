"""
Factory for live LLM providers. Builds the implementation from the resolved
provider configuration.
"""

from enum import Enum
from typing import Dict, Optional, Type

import httpx

from textassist.core.config import ProviderConfig
from textassist.services.ai_providers.error_mapper import missing_credential, unknown_provider
from textassist.services.ai_providers.interface import LLMProvider
from textassist.services.ai_providers.llm_gemini import GeminiLLMProvider
from textassist.services.ai_providers.llm_huggingface import HuggingFaceLLMProvider
from textassist.services.ai_providers.llm_openai import OpenAILLMProvider


class ProviderKind(str, Enum):
    """Closed set of provider variants."""

    MOCK = "mock"
    OPENAI = "openai"
    HUGGINGFACE = "huggingface"
    GEMINI = "gemini"

    @classmethod
    def parse(cls, selector: str) -> "ProviderKind":
        """
        Match a selector case-insensitively. Surrounding whitespace is not
        trimmed, so " openai" is rejected.

        Raises:
            AdapterError: BAD_CONFIG for anything outside the closed set.
        """
        try:
            return cls(str(selector).lower())
        except ValueError:
            raise unknown_provider(selector) from None

    @property
    def is_live(self) -> bool:
        return self is not ProviderKind.MOCK


_LLM_PROVIDER_MAP: Dict[ProviderKind, Type] = {
    ProviderKind.OPENAI: OpenAILLMProvider,
    ProviderKind.HUGGINGFACE: HuggingFaceLLMProvider,
    ProviderKind.GEMINI: GeminiLLMProvider,
}


def get_llm_provider(
    kind: ProviderKind,
    config: ProviderConfig,
    client: Optional[httpx.AsyncClient] = None,
) -> LLMProvider:
    """
    Return a live provider instance for `kind`.

    Raises:
        AdapterError: NO_API_KEY when the provider's credential is missing,
            BAD_CONFIG when `kind` has no live implementation.
    """
    cls = _LLM_PROVIDER_MAP.get(kind)
    if cls is None:
        raise unknown_provider(kind.value)
    api_key = config.credential(kind.value)
    if not api_key:
        raise missing_credential(kind.value)
    return cls(api_key, client=client)


def list_llm_provider_names() -> list[str]:
    """Return every accepted selector value, sorted."""
    return sorted(kind.value for kind in ProviderKind)
