"""
Workflow step generator API routes.
"""

from fastapi import APIRouter, Depends

from textassist.core.config import ProviderConfig, get_provider_config
from textassist.schemas import ErrorResponse, TaskRequest, WorkflowStep
from textassist.services.ai_providers import generate_next_step

router = APIRouter(tags=["Workflow"])


@router.post(
    "/generate-step",
    response_model=WorkflowStep,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or unknown AI provider"},
        502: {"model": ErrorResponse, "description": "AI service error"},
        503: {"model": ErrorResponse, "description": "Missing API key"},
    },
)
async def generate_step(
    body: TaskRequest,
    config: ProviderConfig = Depends(get_provider_config),
):
    """Use AI to generate the next actionable step for a given task."""
    return await generate_next_step(body.task, config)
