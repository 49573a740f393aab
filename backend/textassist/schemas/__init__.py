"""
Schemas package initialization.
"""

from textassist.schemas.completion import (
    MAX_SUGGESTIONS,
    CompletionShape,
    CompletionRequest,
    SuggestionRequest,
    PromptRequest,
    TaskRequest,
    SuggestionResult,
    TextCompletion,
    WorkflowStep,
    CompletionResult,
    ErrorResponse,
)

__all__ = [
    "MAX_SUGGESTIONS",
    "CompletionShape",
    "CompletionRequest",
    "SuggestionRequest",
    "PromptRequest",
    "TaskRequest",
    "SuggestionResult",
    "TextCompletion",
    "WorkflowStep",
    "CompletionResult",
    "ErrorResponse",
]
