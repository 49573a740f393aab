"""
Application error type and its HTTP rendering.

Every failure the adapter reports is an AdapterError carrying a human-readable
message, an HTTP status and a machine-readable code. The HTTP layer renders it
as {"error": message, "code": code}.
"""

from enum import Enum
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from textassist.core.logging import get_logger

logger = get_logger()


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    NO_API_KEY = "NO_API_KEY"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    BAD_CONFIG = "BAD_CONFIG"
    BAD_INPUT = "BAD_INPUT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AdapterError(Exception):
    """Typed failure with an HTTP status and an error code."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[ErrorCode] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status if status is not None else 500
        self.code = ErrorCode(code) if code is not None else ErrorCode.INTERNAL_ERROR

    def to_body(self) -> dict:
        return {"error": self.message, "code": self.code.value}

    def __repr__(self) -> str:
        return f"AdapterError({self.message!r}, status={self.status}, code={self.code.value})"


# Messages for rejected request bodies, keyed by route path.
BAD_INPUT_MESSAGES = {
    "/generate-step": "Invalid input: 'task' required",
    "/ai/complete": "'prompt' is required",
    "/api/suggestions": "'text' must be a string",
}


def bad_input(message: str) -> AdapterError:
    return AdapterError(message, status=400, code=ErrorCode.BAD_INPUT)


async def adapter_error_handler(request: Request, exc: AdapterError) -> JSONResponse:
    if exc.status >= 500:
        logger.warning("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.code.value)
    else:
        logger.info("%s %s rejected: %s (%s)", request.method, request.url.path, exc.message, exc.code.value)
    return JSONResponse(status_code=exc.status, content=exc.to_body())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = BAD_INPUT_MESSAGES.get(request.url.path, "Invalid request body")
    return await adapter_error_handler(request, bad_input(message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Unexpected error", "code": ErrorCode.INTERNAL_ERROR.value},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the {error, code} renderers to a FastAPI app."""
    app.add_exception_handler(AdapterError, adapter_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
