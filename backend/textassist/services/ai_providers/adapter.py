"""
Provider adapter: one entrypoint per completion shape.

Selects the provider from the resolved configuration, sends at most one
request, and normalizes the answer into the shape's result model. Every
failure surfaces as AdapterError; nothing is retried or cached.
"""

from typing import Optional

import httpx

from textassist.core.config import ProviderConfig
from textassist.core.errors import bad_input
from textassist.core.logging import get_logger
from textassist.schemas import (
    CompletionRequest,
    CompletionResult,
    CompletionShape,
    SuggestionResult,
    TextCompletion,
    WorkflowStep,
)
from textassist.services import ai_prompts
from textassist.services.ai_providers.interface import PromptSpec
from textassist.services.ai_providers.llm_factory import ProviderKind, get_llm_provider
from textassist.services.ai_providers.llm_mock import (
    mock_completion,
    mock_next_step,
    mock_suggestions,
)
from textassist.services.ai_providers.normalizer import (
    huggingface_suggestions,
    parse_next_step,
    split_suggestions,
)

logger = get_logger()


async def get_suggestions(
    text: str,
    config: ProviderConfig,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> SuggestionResult:
    """
    Up to three autocomplete continuations for `text`.

    Blank input returns an empty list without checking the provider.
    """
    if not text or not text.strip():
        return SuggestionResult(suggestions=[], provider=config.selector)

    kind = ProviderKind.parse(config.selector)
    logger.debug("Suggestions via %s", kind.value)
    if not kind.is_live:
        return mock_suggestions(text)

    provider = get_llm_provider(kind, config, client)
    raw = await provider.complete(
        PromptSpec(
            source_text=text,
            user_prompt=ai_prompts.SUGGESTIONS_USER_PROMPT.format(text=text),
            system_prompt=ai_prompts.SUGGESTIONS_SYSTEM_PROMPT,
            max_output_tokens=ai_prompts.SUGGESTIONS_MAX_OUTPUT_TOKENS,
        )
    )

    if kind is ProviderKind.HUGGINGFACE:
        suggestions = huggingface_suggestions(text, raw)
    else:
        suggestions = split_suggestions(raw, numbered=kind is ProviderKind.GEMINI)
    return SuggestionResult(suggestions=suggestions, provider=kind.value)


async def complete(
    prompt: str,
    config: ProviderConfig,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> TextCompletion:
    """Single text completion; the prompt is expected to be non-blank."""
    kind = ProviderKind.parse(config.selector)
    logger.debug("Completion via %s", kind.value)
    if not kind.is_live:
        return mock_completion(prompt)

    provider = get_llm_provider(kind, config, client)
    text = await provider.complete(
        PromptSpec(
            source_text=prompt,
            user_prompt=prompt,
            max_output_tokens=ai_prompts.TEXT_MAX_OUTPUT_TOKENS,
        )
    )
    return TextCompletion(text=text)


async def generate_next_step(
    task: str,
    config: ProviderConfig,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> WorkflowStep:
    """Next actionable step and rationale for a task description."""
    kind = ProviderKind.parse(config.selector)
    logger.debug("Next step via %s", kind.value)
    if not kind.is_live:
        return mock_next_step(task)

    provider = get_llm_provider(kind, config, client)
    text = await provider.complete(
        PromptSpec(
            source_text=task,
            user_prompt=ai_prompts.NEXT_STEP_USER_PROMPT.format(task=task),
            system_prompt=ai_prompts.NEXT_STEP_SYSTEM_PROMPT,
            max_output_tokens=ai_prompts.NEXT_STEP_MAX_OUTPUT_TOKENS,
        )
    )
    next_step, rationale = parse_next_step(text)
    return WorkflowStep(next_step=next_step, rationale=rationale)


_SHAPE_HANDLERS = {
    CompletionShape.SUGGESTIONS: get_suggestions,
    CompletionShape.TEXT: complete,
    CompletionShape.NEXT_STEP: generate_next_step,
}


async def resolve_completion(
    request: CompletionRequest,
    config: ProviderConfig,
    shape: CompletionShape = CompletionShape.SUGGESTIONS,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> CompletionResult:
    """
    Resolve `request` into the result model for `shape`.

    Args:
        request: Input text.
        config: Resolved provider configuration.
        shape: Output contract to produce.
        client: Optional httpx client for the outbound call.

    Returns:
        SuggestionResult, TextCompletion or WorkflowStep.

    Raises:
        AdapterError: BAD_INPUT for an unknown shape; NO_API_KEY,
            BAD_CONFIG or UPSTREAM_ERROR from the provider.
    """
    try:
        handler = _SHAPE_HANDLERS[CompletionShape(shape)]
    except ValueError:
        raise bad_input(f"Unknown completion shape: {shape}") from None
    return await handler(request.text, config, client=client)
