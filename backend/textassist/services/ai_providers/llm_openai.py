"""
OpenAI LLM provider (Chat Completions API over HTTP).
"""

from typing import Any, Dict, List, Optional

import httpx

from textassist.core.logging import get_logger
from textassist.services.ai_providers._http import post_json
from textassist.services.ai_providers.interface import PromptSpec
from textassist.services.ai_providers.normalizer import extract_openai_text

logger = get_logger()

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o-mini"


class OpenAILLMProvider:
    """OpenAI provider implementing the LLM interface."""

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._api_key = api_key
        self._model = (model or DEFAULT_MODEL).strip()
        self._client = client

    def build_payload(self, prompt: PromptSpec) -> Dict[str, Any]:
        messages: List[Dict[str, str]] = []
        if prompt.system_prompt:
            messages.append({"role": "system", "content": prompt.system_prompt})
        messages.append({"role": "user", "content": prompt.user_prompt})
        return {
            "model": self._model,
            "messages": messages,
            "temperature": 0.2,
        }

    async def complete(self, prompt: PromptSpec) -> str:
        logger.debug("OpenAI complete: model=%s", self._model)
        data = await post_json(
            self.name,
            OPENAI_CHAT_URL,
            self.build_payload(prompt),
            headers={"Authorization": f"Bearer {self._api_key}"},
            client=self._client,
        )
        return extract_openai_text(data)
