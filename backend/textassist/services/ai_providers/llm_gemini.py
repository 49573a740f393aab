"""
Google Gemini LLM provider (generateContent REST API).
"""

from typing import Any, Dict, Optional

import httpx

from textassist.core.logging import get_logger
from textassist.services.ai_providers._http import post_json
from textassist.services.ai_providers.interface import PromptSpec
from textassist.services.ai_providers.normalizer import extract_gemini_text

logger = get_logger()

GEMINI_GENERATE_URL = "https://generativelanguage.googleapis.com/v1/models/{model}:generateContent"
DEFAULT_MODEL = "gemini-1.5-flash"


class GeminiLLMProvider:
    """Google Gemini provider implementing the LLM interface."""

    name = "gemini"

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
        # The v1 endpoint has no system role; instructions go in front of the user text.
        text = prompt.user_prompt
        if prompt.system_prompt:
            text = f"{prompt.system_prompt}\n\n{text}"
        generation_config: Dict[str, Any] = {"temperature": 0.2}
        if prompt.max_output_tokens:
            generation_config["maxOutputTokens"] = prompt.max_output_tokens
        return {
            "contents": [{"parts": [{"text": text}]}],
            "generationConfig": generation_config,
        }

    async def complete(self, prompt: PromptSpec) -> str:
        logger.debug("Gemini complete: model=%s", self._model)
        data = await post_json(
            self.name,
            GEMINI_GENERATE_URL.format(model=self._model),
            self.build_payload(prompt),
            params={"key": self._api_key},
            client=self._client,
        )
        return extract_gemini_text(data)
