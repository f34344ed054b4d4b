"""
Exception hierarchy for dashkit.

Rule: every error has a machine-readable `code` string so clients
can branch on it without parsing English messages.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

from dashkit.core.config import settings
from dashkit.schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

PathSegment = Union[str, int]


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Issue:
    """One validation failure: where in the input, and what went wrong."""
    path: tuple[PathSegment, ...]
    message: str
    code: str | None = None

    @classmethod
    def from_error_dict(cls, error: dict[str, Any], drop_prefix: Iterable[str] = ()) -> "Issue":
        """Build an issue from a pydantic / FastAPI error dict (`loc`, `msg`, `type`)."""
        skip = set(drop_prefix)
        loc = list(error.get("loc", ()))
        if loc and loc[0] in skip:
            loc.pop(0)
        return cls(path=tuple(loc), message=str(error["msg"]), code=error.get("type"))

    @property
    def field(self) -> str:
        return ".".join(str(seg) for seg in self.path)


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class DashkitException(Exception):
    """Base class for all package-level errors."""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        return _response_payload(self.code, self.message, self.details)


class ValidationError(DashkitException):
    """Input did not conform to a schema. Carries every issue, in schema order."""
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "VALIDATION_ERROR"

    def __init__(self, message: str | None = None, issues: Sequence[Issue] = ()):
        self.issues: tuple[Issue, ...] = tuple(issues)
        super().__init__(
            message=message if message is not None else settings.VALIDATION_ERROR_MESSAGE,
            details={"errors": [_issue_payload(i) for i in self.issues]} if self.issues else {},
        )

    def __repr__(self) -> str:
        return f"ValidationError({self.message!r}, issues={len(self.issues)})"


def _issue_payload(issue: Issue) -> dict[str, Any]:
    return ErrorDetail(field=issue.field, message=issue.message, type=issue.code).model_dump()


def _response_payload(code: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    payload = ErrorResponse(code=code, message=message, details=details or None).model_dump()
    if payload["details"] is None:
        del payload["details"]
    return payload


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _envelope(exc: DashkitException) -> dict[str, Any]:
    payload = exc.to_dict()
    if isinstance(exc, ValidationError) and not settings.EXPOSE_VALIDATION_DETAILS:
        payload.pop("details", None)
    return payload


async def dashkit_exception_handler(request: Request, exc: DashkitException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=_envelope(exc),
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return structured 422 with machine-readable field errors."""
    issues = [Issue.from_error_dict(error, drop_prefix=("body",)) for error in exc.errors()]
    err = ValidationError(message="Request validation failed.", issues=issues)
    return JSONResponse(
        status_code=err.http_status,
        content=_envelope(err),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_response_payload("INTERNAL_ERROR", "An unexpected error occurred."),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the `{code, message, details}` envelope on `app` (most specific first)."""
    app.add_exception_handler(DashkitException, dashkit_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
