"""
HuggingFace Inference API provider (text-generation models).
"""

from typing import Any, Dict, Optional

import httpx

from textassist.core.logging import get_logger
from textassist.services.ai_providers._http import post_json
from textassist.services.ai_providers.interface import PromptSpec
from textassist.services.ai_providers.normalizer import extract_huggingface_text

logger = get_logger()

HF_INFERENCE_URL = "https://api-inference.huggingface.co/models/{model}"
DEFAULT_MODEL = "gpt2"

# Plain text-generation models get the raw input, not an instruction prompt.
MAX_INPUT_CHARS = 128


class HuggingFaceLLMProvider:
    """HuggingFace provider implementing the LLM interface."""

    name = "huggingface"

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
        return {"inputs": prompt.source_text[:MAX_INPUT_CHARS]}

    async def complete(self, prompt: PromptSpec) -> str:
        logger.debug("HuggingFace complete: model=%s", self._model)
        data = await post_json(
            self.name,
            HF_INFERENCE_URL.format(model=self._model),
            self.build_payload(prompt),
            headers={"Authorization": f"Bearer {self._api_key}"},
            client=self._client,
        )
        return extract_huggingface_text(data, fallback=prompt.source_text)
