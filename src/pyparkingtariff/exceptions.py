"""Library exceptions."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Stable numeric error codes."""

    EMPTY_RULES = 1
    INVALID_DURATION = 2
    DURATION_TOO_LONG = 3
    INVALID_RULE = 4
    INVALID_TIMESTAMP = 5
    INVALID_ROUNDING = 6
    CONFIG_ERROR = 7
    INVARIANT = 99


class DomainError(Exception):
    """Base exception for the library.

    Callers should branch on ``code`` rather than on the message text.
    """

    code: int = ErrorCode.INVARIANT
    default_detail = "Parking price calculation failed."

    def __init__(self, message: str | None = None, *, detail: str | None = None) -> None:
        self.detail = detail or message or self.default_detail
        super().__init__(message or self.detail)


class EmptyRulesError(DomainError):
    """Raised when no pricing rules are supplied."""

    code = ErrorCode.EMPTY_RULES
    default_detail = "Rules cannot be empty."


class InvalidDurationError(DomainError):
    """Raised when the end timestamp is not after the start timestamp."""

    code = ErrorCode.INVALID_DURATION
    default_detail = "end_at must be after start_at."


class DurationTooLongError(DomainError):
    """Raised when the parking session exceeds the maximum duration."""

    code = ErrorCode.DURATION_TOO_LONG
    default_detail = "Parking time cannot be longer than 72 hours."


class InvalidRuleError(DomainError):
    """Raised when a pricing rule is malformed."""

    code = ErrorCode.INVALID_RULE
    default_detail = "Pricing rule is invalid."


class InvalidTimestampError(DomainError):
    """Raised when a timestamp cannot be parsed."""

    code = ErrorCode.INVALID_TIMESTAMP
    default_detail = "Timestamp is not a valid ISO 8601 value."


class InvalidRoundingError(DomainError):
    """Raised when a rounding strategy returns an unusable value."""

    code = ErrorCode.INVALID_ROUNDING
    default_detail = "Rounding strategy must return a non-negative integer."


class ConfigError(DomainError):
    """Raised when the calculator is misconfigured."""

    code = ErrorCode.CONFIG_ERROR
    default_detail = "Calculator configuration is invalid."


class InvariantError(DomainError):
    """Raised when an internal invariant is violated."""

    code = ErrorCode.INVARIANT
    default_detail = "No pricing rule could be selected."
