"""
Exception hierarchy for the presentation layer.

The layer computes over already-validated values, so every error here is a
contract violation by the caller. All exceptions carry a details dict for
logging.

Dependencies: None (pure domain layer)
System role: Centralized error types for derivation, sorting and coordinators
"""

from typing import Any


class PresentationError(Exception):
    """Base exception for all presentation layer errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UnknownStatusError(PresentationError):
    """Raised when an enumerated status value is outside its declared domain."""

    def __init__(
        self,
        field: str,
        value: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize unknown status error.

        Args:
            field: Name of the status field
            value: Offending value
            details: Additional context
        """
        details = details or {}
        details["field"] = field
        details["value"] = repr(value)
        self.field = field
        self.value = value
        super().__init__(f"Unrecognized {field}: {value!r}", details)


class SortKeyError(PresentationError):
    """Raised when a sort key has no extractor."""

    def __init__(self, key: Any, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["key"] = repr(key)
        self.key = key
        super().__init__(f"No extractor for sort key: {key!r}", details)


class RecordNotFoundError(PresentationError):
    """Raised when a coordinator is asked to update a record it does not hold."""

    def __init__(
        self,
        kind: str,
        identifier: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize record not found error.

        Args:
            kind: Record kind (course, session, student)
            identifier: Identifier that was looked up
            details: Additional context
        """
        details = details or {}
        details["kind"] = kind
        details["identifier"] = repr(identifier)
        super().__init__(f"{kind.capitalize()} not found: {identifier!r}", details)
