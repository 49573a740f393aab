"""
Autocomplete suggestion API routes.
"""

from fastapi import APIRouter, Depends

from textassist.core.config import ProviderConfig, get_provider_config
from textassist.schemas import ErrorResponse, SuggestionRequest, SuggestionResult
from textassist.services.ai_providers import get_suggestions

router = APIRouter(prefix="/api", tags=["Autocomplete"])


@router.post(
    "/suggestions",
    response_model=SuggestionResult,
    responses={
        400: {"model": ErrorResponse, "description": "Unknown AI provider"},
        502: {"model": ErrorResponse, "description": "AI service error"},
        503: {"model": ErrorResponse, "description": "Missing API key"},
    },
)
async def suggest(
    body: SuggestionRequest,
    config: ProviderConfig = Depends(get_provider_config),
):
    """
    Get up to three autocomplete continuations for the typed text.

    Blank text returns an empty list.
    """
    return await get_suggestions(body.text, config)
