"""
Error taxonomy and HTTP error responses.

Services raise the exceptions defined here; ``register_exception_handlers``
turns them into the uniform ``{"error": message}`` body with the
matching status code.  Request validation failures raised by FastAPI
and pydantic are folded into the same 400 shape, and anything
unclassified becomes a 500 whose details are only written to the log.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .db import RecordNotFound, UniqueViolation

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(ApiError):
    """Malformed, missing or wrongly typed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """The target, or a record it depends on, has no live row."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ApiError):
    """A uniqueness constraint in the store was violated."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = "Unique constraint failed", fields: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.fields = fields or []

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, "fields": self.fields}


@contextmanager
def store_errors(not_found_message: str = "Record not found") -> Iterator[None]:
    """Translate store failures raised inside the block into API errors.

    Uniqueness violations become conflicts and a row vanishing during
    a write becomes a 404.  Any other ``StoreError`` propagates and
    ends up as a 500.
    """
    try:
        yield
    except UniqueViolation as exc:
        raise ConflictError(fields=exc.fields) from exc
    except RecordNotFound as exc:
        raise NotFoundError(not_found_message) from exc


def _describe_validation_error(error: Dict[str, Any]) -> str:
    loc = [str(part) for part in error.get("loc", ())]
    if loc and loc[0] == "path":
        # ``publication_id`` -> ``Invalid publication id``
        return f"Invalid {loc[-1].replace('_', ' ')}"
    field = ".".join(part for part in loc[1:] if part)
    if error.get("type") == "missing":
        return f"{field} is required" if field else "Request body is required"
    cause = (error.get("ctx") or {}).get("error")
    if isinstance(cause, ValueError):
        return str(cause)
    message = str(error.get("msg", "Invalid request")).removeprefix("Value error, ")
    return f"{field}: {message}" if field else message


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = _describe_validation_error(errors[0]) if errors else "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler above to ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
