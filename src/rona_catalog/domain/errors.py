"""Domain error classes.

Protocol-agnostic errors that represent catalog failures.
HTTP adapters translate them into status codes; the catalog view
surfaces TransportError to its callers.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a machine-readable error code plus free-form context that
    protocol adapters can serialize.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - min_price > max_price
        - page < 1
        - page_size above the allowed maximum

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "min_price", "message": "Must be >= 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Product")
            identifier: Resource identifier (e.g., UUID)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class TransportError(DomainError):
    """The catalog backend could not be reached or answered with a failure.

    Raised by catalog query adapters for timeouts, connection failures and
    non-success responses. The catalog view surfaces it as ``error`` unless
    the view runs in silent-empty mode.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "TRANSPORT_ERROR"

    def __init__(self, message: str, status_code: int | None = None, **context: Any) -> None:
        self.status_code = status_code
        if status_code is not None:
            context["status_code"] = status_code
        super().__init__(message, **context)

