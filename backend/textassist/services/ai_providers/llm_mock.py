"""
Mock provider: deterministic, credential-free results for local development
and tests. Never touches the network.
"""

from textassist.schemas import SuggestionResult, TextCompletion, WorkflowStep

MOCK_NEXT_STEP = "Create customer record"
MOCK_RATIONALE = "First step to enable downstream actions"


def mock_suggestions(text: str) -> SuggestionResult:
    base = text.strip()
    return SuggestionResult(
        suggestions=[
            f"{base} — please help with this",
            f"{base} — steps to resolve",
            f"{base} — summary",
        ],
        provider="mock",
    )


def mock_completion(text: str) -> TextCompletion:
    return TextCompletion(text=f"{text.strip()} → mock completion")


def mock_next_step(task: str) -> WorkflowStep:
    """Fixed pair; the task is not inspected."""
    return WorkflowStep(next_step=MOCK_NEXT_STEP, rationale=MOCK_RATIONALE)
