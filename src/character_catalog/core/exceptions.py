"""
Exception hierarchy for the Character Catalog.

Provides structured error handling with specific error types for the data
source, export and configuration failure modes.
"""

from typing import Any, Callable, Dict, Optional, TypeVar

import requests

F = TypeVar("F", bound=Callable[..., Any])


class CatalogError(Exception):
    """Base exception for all catalog-related errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        component: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.component = component

    def __str__(self) -> str:
        """String representation of the error."""
        base_msg = f"[{self.component or 'CharacterCatalog'}] {self.message}"
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "component": self.component,
            "details": self.details,
        }


class ConfigurationError(CatalogError):
    """Exception raised when configuration is invalid or missing."""

    pass


class SourceLoadError(CatalogError):
    """Exception raised when a database source cannot be reached or read."""

    def __init__(self, source: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Failed to load database from {source}: {reason}",
            error_code="SOURCE_LOAD_ERROR",
            details={"source": source, "reason": reason},
            **kwargs,
        )


class ExportError(CatalogError):
    """Exception raised when the character table cannot be exported."""

    @classmethod
    def empty(cls, **kwargs: Any) -> "ExportError":
        """Error for an export attempted before any character was loaded."""
        return cls(
            "No data to export. Load or reload the database first.",
            error_code="EXPORT_ERROR",
            details={"row_count": 0},
            **kwargs,
        )


class ValidationError(CatalogError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Validation failed for field '{field}': {reason}",
            error_code="VALIDATION_ERROR",
            details={
                "field": field,
                "value": str(value),
                "reason": reason,
            },
            **kwargs,
        )


# Error handling utilities


def handle_source_error(func: F) -> F:
    """Decorator translating I/O and HTTP failures into SourceLoadError.

    The wrapped callable must be a method of an object exposing ``describe()``.
    """

    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            return func(self, *args, **kwargs)
        except SourceLoadError:
            raise
        except requests.RequestException as e:
            raise SourceLoadError(
                self.describe(), str(e), component=func.__name__
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise SourceLoadError(
                self.describe(), str(e), component=func.__name__
            ) from e

    return wrapper  # type: ignore
