from __future__ import annotations

from enum import Enum


class OutcomeCode(str, Enum):
    """Kết quả của một lần quét điểm danh."""

    RECORDED = "RECORDED"
    ALREADY_RECORDED = "ALREADY_RECORDED"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_DAY = "INVALID_DAY"
    NOT_FOUND = "NOT_FOUND"
    PERSIST_ERROR = "PERSIST_ERROR"


class AuthFailure(str, Enum):
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"
