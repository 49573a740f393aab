"""
Common interface for the live AI providers.

The adapter only talks to providers through this interface. Implementations
hide payload construction, authentication and envelope extraction.
"""

from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel


class PromptSpec(BaseModel):
    """
    What to ask a provider.

    Attributes:
        source_text: The caller's original input.
        user_prompt: User message embedding the input and instructions.
        system_prompt: Optional instruction message.
        max_output_tokens: Output budget for providers that accept one.
    """

    source_text: str
    user_prompt: str
    system_prompt: Optional[str] = None
    max_output_tokens: Optional[int] = None


@runtime_checkable
class LLMProvider(Protocol):
    """
    Live provider interface.

    Implementations are created from a resolved credential and perform exactly
    one outbound request per call.
    """

    name: str

    async def complete(self, prompt: PromptSpec) -> str:
        """
        Send the prompt and return the provider's raw generated text.

        Args:
            prompt: Prompt to send.

        Returns:
            Plain text extracted from the provider envelope (never None).

        Raises:
            AdapterError: UPSTREAM_ERROR on any upstream or transport failure.
        """
        ...
