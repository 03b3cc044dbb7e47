"""Domain exceptions for itdocs.

Defines domain-level exceptions that represent business rule violations
and unavailable collaborators. Presentation layer maps them to HTTP
responses in exception handlers.
"""

from typing import Any


class ItDocsException(Exception):
    """Base exception for all itdocs application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, table).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ItDocsException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or parameter that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class SourceQueryException(ItDocsException):
    """Raised when a tabular source cannot answer a query (backend error, unknown table)."""

    def __init__(self, table: str, reason: str) -> None:
        super().__init__(
            f"Query against {table} failed: {reason}",
            "SOURCE_QUERY_ERROR",
            {"table": table},
        )


class SqlNotConfiguredException(ItDocsException):
    """Raised when an operation requires the SQL backend but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
