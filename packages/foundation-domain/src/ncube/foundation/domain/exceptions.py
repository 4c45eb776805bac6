"""Domain exception hierarchy for type-safe error handling.

Exceptions carry a machine-readable error code and structured context so
callers can report and log failures consistently.

Example:
    >>> from ncube.foundation.domain.exceptions import ValidationError
    >>> raise ValidationError("version", "Version must follow major.minor.revision")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "DomainError",
    "ValidationError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information (field names, values).

    Example:
        >>> raise DomainError("Operation failed", context={"account": "acme"})
        DomainError: Operation failed (account=acme)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ValidationError(DomainError, ValueError):
    """Raised when an argument fails domain validation rules.

    This is an argument error: it also derives from ``ValueError`` so code
    that guards on the builtin keeps working. It is never transient, so
    retrying with the same input fails the same way.

    Attributes:
        error_code: "VALIDATION_ERROR" (class constant).
        field: Name of the field that failed validation.
        reason: Human-readable validation failure reason.

    Example:
        >>> raise ValidationError("app", "App cannot be null or empty")
        ValidationError: Validation failed for 'app': App cannot be null or empty
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        field: str,
        reason: str,
        **extra_context: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation.
            reason: Human-readable validation failure reason.
            **extra_context: Additional debugging context (e.g., the rejected value).
        """
        self.field = field
        self.reason = reason
        message = f"Validation failed for '{field}': {reason}"
        context = {
            "field": field,
            "reason": reason,
            **extra_context,
        }
        super().__init__(message, context)
