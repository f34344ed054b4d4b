"""
Validation adapter: run a schema's non-raising check and reshape the outcome.

    validate(schema, data)            -> Valid(value) | Invalid(error)
    validate_or_throw(schema, data)   -> value, or raises ValidationError
    format_validation_errors(issues)  -> ["user.name: Field required", ...]
    create_user_error_message(issues) -> one display string

`schema` is anything with `safe_parse(data) -> ParseOutcome`. Pydantic model
classes, TypeAdapters and plain annotations are wrapped in `PydanticSchema`.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, Protocol, TypeVar, Union, runtime_checkable

import pydantic
from pydantic import TypeAdapter

from dashkit.core.errors import Issue, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

MULTIPLE_ERRORS_HEADER = "Multiple validation errors:"


# ---------------------------------------------------------------------------
# Schema capability
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParseOutcome(Generic[T]):
    """What a schema's safe check reports: a value, or the issues that blocked it."""
    success: bool
    data: T | None = None
    issues: tuple[Issue, ...] = ()


@runtime_checkable
class SafeParser(Protocol):
    def safe_parse(self, data: Any) -> ParseOutcome: ...


class PydanticSchema(Generic[T]):
    """`SafeParser` backed by a pydantic TypeAdapter."""

    def __init__(self, target: Any):
        self.adapter: TypeAdapter = target if isinstance(target, TypeAdapter) else TypeAdapter(target)

    def safe_parse(self, data: Any) -> ParseOutcome[T]:
        try:
            value = self.adapter.validate_python(data)
        except pydantic.ValidationError as exc:
            issues = tuple(Issue.from_error_dict(e) for e in exc.errors(include_url=False))
            return ParseOutcome(success=False, issues=issues)
        return ParseOutcome(success=True, data=value)

    def __repr__(self) -> str:
        return f"PydanticSchema({self.adapter!r})"


def as_schema(schema: Any) -> SafeParser:
    """Return `schema` unchanged if it already has `safe_parse`, else wrap it for pydantic."""
    if isinstance(schema, SafeParser):
        return schema
    return PydanticSchema(schema)


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T
    ok: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class Invalid:
    error: ValidationError
    ok: Literal[False] = field(default=False, init=False)


ValidationResult = Union[Valid[T], Invalid]


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def validate(schema: SafeParser | type[T] | Any, data: Any) -> ValidationResult[T]:
    """Check `data` against `schema` without raising for non-conforming input."""
    outcome = as_schema(schema).safe_parse(data)
    if outcome.success:
        return Valid(outcome.data)

    logger.debug("Validation failed with %d issue(s)", len(outcome.issues))
    return Invalid(ValidationError(issues=outcome.issues))


def validate_or_throw(schema: SafeParser | type[T] | Any, data: Any) -> T:
    """Like `validate`, but return the value directly and raise ValidationError on failure."""
    result = validate(schema, data)
    if not result.ok:
        raise result.error
    return result.value


def _issues_of(error: ValidationError | Sequence[Issue]) -> Sequence[Issue]:
    if isinstance(error, ValidationError):
        return error.issues
    return error


def format_validation_errors(error: ValidationError | Sequence[Issue]) -> list[str]:
    """One line per issue, `path: message`, or just `message` for root-level issues."""
    lines = []
    for issue in _issues_of(error):
        path = issue.field
        lines.append(f"{path}: {issue.message}" if path else str(issue.message))
    return lines


def create_user_error_message(error: ValidationError | Sequence[Issue]) -> str:
    errors = format_validation_errors(error)
    if not errors:
        return ""
    if len(errors) == 1:
        return errors[0]
    return MULTIPLE_ERRORS_HEADER + "\n" + "\n".join(f"- {e}" for e in errors)
