"""
Pydantic schemas for the completion endpoints and adapter results.
"""

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_SUGGESTIONS = 3


class CompletionShape(str, Enum):
    """Output contract requested from the adapter."""

    SUGGESTIONS = "suggestions"
    TEXT = "text"
    NEXT_STEP = "next_step"


class CompletionRequest(BaseModel):
    """Free text handed to the adapter."""

    text: str


# Request bodies


class SuggestionRequest(BaseModel):
    """Autocomplete input. Blank text is allowed and yields no suggestions."""

    text: str = ""


class PromptRequest(BaseModel):
    """Prompt for a single text completion."""

    prompt: str = ""


class TaskRequest(BaseModel):
    """Task description for the workflow step generator."""

    task: str = Field(..., min_length=1)


# Results


class SuggestionResult(BaseModel):
    """Up to three non-empty suggestions plus the provider that produced them."""

    suggestions: List[str] = Field(default_factory=list)
    provider: str

    @field_validator("suggestions")
    @classmethod
    def cap_suggestions(cls, value: List[str]) -> List[str]:
        return [s for s in value if s][:MAX_SUGGESTIONS]


class TextCompletion(BaseModel):
    """Single text completion."""

    text: str = ""


class WorkflowStep(BaseModel):
    """Next actionable step and a one-sentence rationale."""

    model_config = ConfigDict(populate_by_name=True)

    next_step: str = Field("", alias="nextStep")
    rationale: str = ""


CompletionResult = Union[SuggestionResult, TextCompletion, WorkflowStep]


class ErrorResponse(BaseModel):
    """Error body rendered for every failed request."""

    error: str
    code: str
