"""
Request validation and service error handlers.

Invalid request bodies are answered with 400 and the first violation's
message as ``detail``. Service-layer errors are answered with the status
code they carry.
"""

from typing import Any, Dict, Sequence

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fivimedia_llc.core.errors import ServiceError
from fivimedia_llc.core.logging_config import get_logger

logger = get_logger(__name__)


def first_error_message(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Message of the first validation error.

    Messages raised by our own validators are returned as written; pydantic's
    built-in messages are prefixed with the offending field.
    """
    if not errors:
        return "Invalid input"
    error = errors[0]
    ctx_error = (error.get("ctx") or {}).get("error")
    if error.get("type") == "value_error" and ctx_error is not None:
        return str(ctx_error)

    if error.get("type") == "json_invalid":
        return "Invalid JSON body"

    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    message = error.get("msg", "Invalid input")
    return f"{'.'.join(location)}: {message}" if location else message


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = first_error_message(exc.errors())
    logger.info(f"Rejected invalid request {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"detail": message})


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
