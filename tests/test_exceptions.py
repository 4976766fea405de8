import pytest

from pyparkingtariff.exceptions import (
    ConfigError,
    DomainError,
    DurationTooLongError,
    EmptyRulesError,
    ErrorCode,
    InvalidDurationError,
    InvalidRoundingError,
    InvalidRuleError,
    InvalidTimestampError,
    InvariantError,
)


def test_error_defaults() -> None:
    exc = EmptyRulesError()
    assert exc.code == 1
    assert exc.detail == "Rules cannot be empty."
    assert str(exc) == "Rules cannot be empty."


def test_error_detail_fallback() -> None:
    exc = InvalidRuleError(detail="short detail")
    assert str(exc) == "short detail"
    assert exc.detail == "short detail"


def test_error_message_overrides_default() -> None:
    exc = DurationTooLongError("too long")
    assert exc.detail == "too long"
    assert str(exc) == "too long"


@pytest.mark.parametrize(
    ("error_cls", "code"),
    [
        (EmptyRulesError, 1),
        (InvalidDurationError, 2),
        (DurationTooLongError, 3),
        (InvalidRuleError, 4),
        (InvalidTimestampError, 5),
        (InvalidRoundingError, 6),
        (ConfigError, 7),
        (InvariantError, 99),
    ],
)
def test_error_types_have_codes(error_cls: type[DomainError], code: int) -> None:
    exc = error_cls("nope")
    assert isinstance(exc, DomainError)
    assert exc.code == code
    assert ErrorCode(code) is exc.code
