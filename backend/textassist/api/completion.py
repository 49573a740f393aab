"""
Text completion API routes.
"""

from fastapi import APIRouter, Depends

from textassist.core.config import ProviderConfig, get_provider_config
from textassist.core.errors import bad_input
from textassist.schemas import ErrorResponse, PromptRequest, TextCompletion
from textassist.services.ai_providers import complete

router = APIRouter(prefix="/ai", tags=["AI Completion"])


@router.post(
    "/complete",
    response_model=TextCompletion,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or unknown AI provider"},
        502: {"model": ErrorResponse, "description": "AI service error"},
        503: {"model": ErrorResponse, "description": "Missing API key"},
    },
)
async def complete_text(
    body: PromptRequest,
    config: ProviderConfig = Depends(get_provider_config),
):
    """Complete text using the configured AI provider (OpenAI, HuggingFace, Gemini or mock)."""
    prompt = body.prompt.strip()
    if not prompt:
        raise bad_input("'prompt' is required")
    return await complete(prompt, config)
