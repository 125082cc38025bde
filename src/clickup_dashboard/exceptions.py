"""
ClickUp Dashboard Exceptions.

All errors raised by the package derive from ClickUpError. The string form
of every error is a human-readable message suitable for showing directly
to the user.
"""

from __future__ import annotations

from typing import Any


class ClickUpError(Exception):
    """Base exception for all ClickUp dashboard errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ClickUpNetworkError(ClickUpError):
    """The ClickUp API could not be reached (DNS, refused connection, timeout)."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message, details={"cause": repr(cause)} if cause else None)
        self.cause = cause


class ClickUpAPIError(ClickUpError):
    """The ClickUp API answered with an error or an unusable payload."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code
        self.response_body = response_body


class ClickUpEmptyResultError(ClickUpError):
    """The request succeeded but the list holds no tasks."""


class ClickUpValidationError(ClickUpError):
    """Caller-supplied input was rejected before any request was made."""


class ClickUpConfigurationError(ClickUpError):
    """The package is misconfigured or used before being connected."""
