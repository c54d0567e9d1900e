"""Exception hierarchy for strapi-migrate.

All errors raised by this package derive from StrapiMigrateError so callers
can catch a single base class. Per-entry and per-content-type failures are
reported through results and logs rather than raised.
"""

from typing import Any


class StrapiMigrateError(Exception):
    """Base exception for all strapi-migrate errors.

    Attributes:
        message: Human-readable error message
        details: Optional extra context (e.g. a server error payload)
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(StrapiMigrateError):
    """Raised when required settings are missing or invalid."""


class ImportExportError(StrapiMigrateError):
    """Raised when export files cannot be found, read or written."""


class StrapiConnectionError(StrapiMigrateError):
    """Raised on transport-level failures (DNS, refused connection, reset)."""
