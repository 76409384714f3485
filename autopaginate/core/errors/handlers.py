from collections.abc import Awaitable, Callable
from typing import Any, cast

from fastapi import Request
from fastapi.responses import JSONResponse
import sentry_sdk
from starlette.responses import Response

from autopaginate.core.errors.exceptions import CoreException, InvalidInputException
from autopaginate.loggers import get_logger

response_logger = get_logger("autopaginate.request.error_response", plain_format=True)

HandlerCallable = Callable[[Request, Exception], Awaitable[Response]]

SENSITIVE_KEYS = frozenset(
    {"authorization", "token", "password", "secret", "api_key", "api-key"}
)


def as_exception_handler(handler: Any) -> HandlerCallable:
    """
    Convert a handler class instance to a compatible exception handler callable.

    Args:
        handler: An instance of an exception handler class with __call__ method

    Returns:
        A callable with the correct type signature for FastAPI exception handlers
    """
    return cast(HandlerCallable, handler.__call__)


def format_error_response(error_type: str, message: str | None) -> dict[str, Any]:
    """
    Format error response content for JSONResponse

    Args:
        error_type: Type of error (e.g., "Bad request", "Invalid input")
        message: Detailed error message

    Returns:
        Dictionary with error information
    """
    return {
        "error": error_type,
        "message": message or "No additional details available",
    }


def format_log_message(
    request: Request,
    error_type: str,
    message: str | None,
    additional_info: dict[str, Any] | None = None,
    include_request_path: bool = False,
) -> str:
    """
    Format error message for logging

    Args:
        request: FastAPI Request object
        error_type: Type of error
        message: Error message
        additional_info: Additional context information for logs only (not shown to clients)
        include_request_path: Include request path and method in the log message

    Returns:
        Formatted log message
    """
    raw_msg = message or "No additional details available"
    msg = " ".join(raw_msg.split())
    if len(msg) > 500:
        msg = msg[:497] + "..."

    et = (error_type or "").strip()
    err = (et[:1].upper() + et[1:]) if et else "Error"

    request_id = request.headers.get("x-request-id") or getattr(
        getattr(request, "state", object()), "request_id", None
    )

    prefix = f"[{request_id}] " if request_id else ""
    log_msg = f"{prefix}[{err}] {msg}"

    if include_request_path:
        log_msg = f"{prefix}[{err}] {request.method} {request.url.path} | {msg}"

    if additional_info:

        def mask(k: str, v: Any) -> str:
            return "***" if k.lower() in SENSITIVE_KEYS else repr(v)

        additional_str = ", ".join(
            f"{k}={mask(k, additional_info[k])}" for k in sorted(additional_info)
        )
        log_msg = f"{log_msg} | Additional info: {additional_str}"

    return log_msg


class CoreExceptionHandler:
    async def __call__(self, request: Request, exc: CoreException) -> JSONResponse:
        error_type = "Bad request"
        log_msg = format_log_message(
            request, error_type, exc.message, exc.additional_info
        )
        response_logger.info(log_msg)
        return JSONResponse(
            status_code=400,
            content=format_error_response(error_type, exc.message),
        )


class InvalidInputExceptionHandler:
    """Unsupported pagination input comes from handler code and maps to a 500."""

    async def __call__(
        self, request: Request, exc: InvalidInputException
    ) -> JSONResponse:
        error_type = "Invalid input"
        log_msg = format_log_message(
            request,
            error_type,
            exc.message,
            exc.additional_info,
            include_request_path=True,
        )
        response_logger.error(log_msg)
        sentry_sdk.capture_exception(exc)
        return JSONResponse(
            status_code=500,
            content=format_error_response(error_type, exc.message),
        )
