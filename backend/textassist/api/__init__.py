"""
API routes package initialization.
"""

from fastapi import APIRouter

from textassist.api.completion import router as completion_router
from textassist.api.suggestions import router as suggestions_router
from textassist.api.workflow import router as workflow_router

api_router = APIRouter()

api_router.include_router(suggestions_router)
api_router.include_router(completion_router)
api_router.include_router(workflow_router)

__all__ = ["api_router"]
