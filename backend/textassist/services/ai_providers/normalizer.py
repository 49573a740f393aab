"""
Response normalization for provider envelopes.

Pure functions only: pull plain text out of each provider's JSON shape and
reshape it into suggestions or a (next step, rationale) pair. Nothing here
touches the network or configuration.
"""

import re
from typing import Any, List, Optional, Tuple

from textassist.schemas import MAX_SUGGESTIONS

# Leading bullet markers ("- ", "* ") and whitespace.
BULLET_CHARS = re.compile(r"^[-*\s]+")
# Same, plus numbering such as "1." or "2. ".
NUMBERED_BULLET_CHARS = re.compile(r"^[-*\d.\s]+")

LINE_BREAK = re.compile(r"\n|\r")

HF_SUGGESTION_PREFIX_LENGTH = 60

DEFAULT_NEXT_STEP = "Create a task breakdown"
DEFAULT_RATIONALE = "AI-generated workflow step"

NEXT_STEP_LABEL = re.compile(r"next step:", re.IGNORECASE)
RATIONALE_LABEL = re.compile(r"rationale:", re.IGNORECASE)


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _field(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key)
    return None


def _as_text(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def extract_openai_text(data: Any) -> str:
    """choices[0].message.content, or "" when absent."""
    message = _field(_first(_field(data, "choices")), "message")
    return _as_text(_field(message, "content"), "")


def extract_huggingface_text(data: Any, fallback: str) -> str:
    """[0].generated_text, or the original input when absent."""
    return _as_text(_field(_first(data), "generated_text"), fallback)


def extract_gemini_text(data: Any) -> str:
    """candidates[0].content.parts[0].text, or "" when absent."""
    content = _field(_first(_field(data, "candidates")), "content")
    part = _first(_field(content, "parts"))
    return _as_text(_field(part, "text"), "")


def strip_bullet(line: str, numbered: bool = False) -> str:
    """
    Remove leading bullet markers and surrounding whitespace.

    With numbered=True digits and periods are stripped too, so "1. Foo" -> "Foo".
    Applying it twice gives the same result as applying it once.
    """
    pattern = NUMBERED_BULLET_CHARS if numbered else BULLET_CHARS
    return pattern.sub("", line, count=1).strip()


def split_suggestions(text: str, numbered: bool = False) -> List[str]:
    """Split raw model text into at most three non-empty, unbulleted lines."""
    lines = (strip_bullet(line, numbered) for line in LINE_BREAK.split(text or ""))
    return [line for line in lines if line][:MAX_SUGGESTIONS]


def truncate(text: str, limit: int) -> str:
    """Hard cut at `limit` characters."""
    return text[:limit]


def huggingface_suggestions(source_text: str, generated_text: str) -> List[str]:
    """Two templated continuations plus the first 60 characters of the generation."""
    suggestions = [
        f"{source_text} — please assist",
        f"{source_text} — next steps",
        truncate(generated_text, HF_SUGGESTION_PREFIX_LENGTH),
    ]
    return [s for s in suggestions if s][:MAX_SUGGESTIONS]


def parse_next_step(text: str) -> Tuple[str, str]:
    """
    Read a (next step, rationale) pair out of model text.

    Lines containing "Next Step:" / "Rationale:" (any case) win, with the label
    removed; later matches replace earlier ones. Without either label the first
    line is the step and the second the rationale.
    """
    lines = [line.strip() for line in (text or "").split("\n")]
    lines = [line for line in lines if line]

    next_step: Optional[str] = None
    rationale: Optional[str] = None
    for line in lines:
        if NEXT_STEP_LABEL.search(line):
            next_step = NEXT_STEP_LABEL.sub("", line, count=1).strip()
        elif RATIONALE_LABEL.search(line):
            rationale = RATIONALE_LABEL.sub("", line, count=1).strip()

    if next_step is None and rationale is None:
        if not lines:
            return DEFAULT_NEXT_STEP, DEFAULT_RATIONALE
        return lines[0], lines[1] if len(lines) > 1 else DEFAULT_RATIONALE

    return (
        next_step if next_step is not None else DEFAULT_NEXT_STEP,
        rationale if rationale is not None else DEFAULT_RATIONALE,
    )
