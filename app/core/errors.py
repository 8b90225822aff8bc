from __future__ import annotations

"""Domain-specific exception hierarchy for the admissions scoring core."""

from typing import Any

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidInputError",
    "NotFoundError",
    "SchoolNotFoundError",
    "ConfigurationError",
    "ReferenceDataError",
]


class DomainError(Exception):
    """Base class for recoverable domain-level errors."""

    status_code: int = 400
    error_code: str = "domain_error"
    default_message: str = "Domain error"

    def __init__(
        self,
        message: str | None = None,
        *,
        detail: Any | None = None,
        status_code: int | None = None,
    ) -> None:
        final_message = message or self.default_message
        super().__init__(final_message)
        self.message = final_message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class ValidationError(DomainError, ValueError):
    """Raised when caller-provided data fails validation."""

    error_code = "validation_error"
    default_message = "Invalid data"
    status_code = 400


class InvalidInputError(ValidationError):
    """Raised when scoring inputs are contradictory or incomplete."""

    error_code = "invalid_input"
    default_message = "Invalid scoring input"


class NotFoundError(DomainError):
    """Base class for missing domain resources."""

    error_code = "not_found"
    status_code = 404
    default_message = "Resource not found"


class SchoolNotFoundError(NotFoundError):
    """Raised when a school id is not present in the catalog."""

    error_code = "school_not_found"
    default_message = "School not found"


class ConfigurationError(DomainError):
    """Raised when server-side configuration is invalid or incomplete."""

    error_code = "configuration_error"
    status_code = 500
    default_message = "Invalid system configuration"


class ReferenceDataError(ConfigurationError):
    """Raised when reference statistics are missing or malformed."""

    error_code = "reference_data_error"
    default_message = "Invalid reference statistics"
