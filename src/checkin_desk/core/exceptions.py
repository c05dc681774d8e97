from __future__ import annotations

from enum import Enum
from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""

    def __init__(self, message: str = "", *, code: Optional[Enum] = None):
        super().__init__(message)
        self.code = code


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when credentials or session tokens are invalid."""


class AuthorizationError(DomainError):
    """Raised when the caller lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class StorageError(DomainError):
    """Raised when a backing file cannot be read or parsed."""


class PersistenceError(StorageError):
    """Raised when a backing file cannot be written."""


class StartupError(Exception):
    """Raised when the service cannot start (missing roster, bad config)."""
