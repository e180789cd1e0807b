"""Exception types raised by the Smashcast client."""

from __future__ import annotations

from typing import Optional


class SmashcastApiError(RuntimeError):
    """Raised when a Smashcast API request fails."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SmashcastAuthError(SmashcastApiError):
    """Raised when a call needs a user auth token but none is configured."""


class SmashcastFetchError(SmashcastApiError):
    """Raised when a remote resource cannot be materialized."""


class SmashcastUsageError(Exception):
    """Base class for client-side precondition violations."""


class InvalidOperationError(SmashcastUsageError):
    """The requested operation makes no sense for the current state."""


class InvalidArgumentError(SmashcastUsageError, ValueError):
    """An argument was rejected before any request was made."""
