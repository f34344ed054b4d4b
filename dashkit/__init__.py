"""
dashkit shared: dashboard domain models and the validation adapter used
against them.
"""
from dashkit.core.errors import DashkitException, Issue, ValidationError
from dashkit.services.validation import (
    Invalid,
    ParseOutcome,
    PydanticSchema,
    SafeParser,
    Valid,
    ValidationResult,
    create_user_error_message,
    format_validation_errors,
    validate,
    validate_or_throw,
)

__all__ = [
    "DashkitException",
    "Invalid",
    "Issue",
    "ParseOutcome",
    "PydanticSchema",
    "SafeParser",
    "Valid",
    "ValidationError",
    "ValidationResult",
    "create_user_error_message",
    "format_validation_errors",
    "validate",
    "validate_or_throw",
]
