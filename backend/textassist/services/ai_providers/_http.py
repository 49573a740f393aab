"""
Internal helper for httpx-based provider implementations.
Do not import from outside ai_providers package.
"""

from typing import Any, Dict, Optional

import httpx

from textassist.core.logging import get_logger
from textassist.services.ai_providers.error_mapper import (
    upstream_invalid_body,
    upstream_status_error,
    upstream_transport_error,
)

logger = get_logger()


async def post_json(
    provider: str,
    url: str,
    payload: Dict[str, Any],
    *,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """
    Send one JSON POST to a provider and return the decoded response body.

    Args:
        provider: Provider name, used for error messages and logging.
        url: Endpoint URL.
        payload: JSON body.
        headers: Extra request headers.
        params: Query parameters (never logged; may carry the API key).
        client: Optional shared client; a short-lived one is opened otherwise.

    Returns:
        Parsed JSON body of a 2xx response.

    Raises:
        AdapterError: UPSTREAM_ERROR for non-2xx responses, transport failures
            and non-JSON bodies.
    """
    request_headers = {"Content-Type": "application/json"}
    if headers:
        request_headers.update(headers)

    try:
        if client is not None:
            response = await client.post(url, json=payload, headers=request_headers, params=params)
        else:
            async with httpx.AsyncClient() as owned_client:
                response = await owned_client.post(
                    url, json=payload, headers=request_headers, params=params
                )
    except httpx.HTTPError as e:
        logger.warning("%s request failed: %s", provider, e.__class__.__name__)
        raise upstream_transport_error(provider, e) from e

    if not response.is_success:
        logger.warning("%s upstream error: HTTP %s", provider, response.status_code)
        raise upstream_status_error(provider, response)

    try:
        return response.json()
    except ValueError as e:
        logger.warning("%s returned a non-JSON body", provider)
        raise upstream_invalid_body(provider) from e
