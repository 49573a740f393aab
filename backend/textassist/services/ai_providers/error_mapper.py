"""
Translate adapter failure conditions into AdapterError.
"""

import json
from typing import Optional

import httpx

from textassist.core.errors import AdapterError, ErrorCode

# Display labels used in error messages.
PROVIDER_LABELS = {
    "openai": "OpenAI",
    "huggingface": "HF",
    "gemini": "Gemini",
}

MISSING_CREDENTIAL_MESSAGES = {
    "openai": "Missing OpenAI API key",
    "huggingface": "Missing HuggingFace token",
    "gemini": "Missing Gemini API key",
}


def provider_label(provider: str) -> str:
    return PROVIDER_LABELS.get(provider, provider)


def missing_credential(provider: str) -> AdapterError:
    message = MISSING_CREDENTIAL_MESSAGES.get(provider, f"Missing {provider} API key")
    return AdapterError(message, status=503, code=ErrorCode.NO_API_KEY)


def unknown_provider(selector: str) -> AdapterError:
    return AdapterError(
        f"Unknown AI provider: {selector}", status=400, code=ErrorCode.BAD_CONFIG
    )


def upstream_error_detail(body: str) -> Optional[str]:
    """
    Pull a human-readable message out of an upstream error body.

    Understands {"error": {"message": "..."}} (OpenAI, Gemini) and
    {"error": "..."} (HuggingFace). Returns None for anything else.
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return message if isinstance(message, str) and message else None
    if isinstance(error, str) and error:
        return error
    return None


def upstream_status_error(provider: str, response: httpx.Response) -> AdapterError:
    """Non-2xx upstream response."""
    label = provider_label(provider)
    detail = upstream_error_detail(response.text)
    message = f"{label} error {response.status_code}"
    if detail:
        message = f"{message}: {detail}"
    return AdapterError(message, status=502, code=ErrorCode.UPSTREAM_ERROR)


def upstream_transport_error(provider: str, exc: httpx.HTTPError) -> AdapterError:
    """Connect failure, timeout or other transport problem."""
    label = provider_label(provider)
    return AdapterError(
        f"{label} request failed: {exc.__class__.__name__}",
        status=502,
        code=ErrorCode.UPSTREAM_ERROR,
    )


def upstream_invalid_body(provider: str) -> AdapterError:
    """2xx response whose body is not JSON."""
    label = provider_label(provider)
    return AdapterError(
        f"{label} returned an invalid response", status=502, code=ErrorCode.UPSTREAM_ERROR
    )
