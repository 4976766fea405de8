"""pyParkingTariff package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .calculator import ParkingPriceCalculator, calculate
from .exceptions import (
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
from .models import ParkingCalculationResult, PeriodBreakdown, PricingRule, RuleEvaluation
from .rounding import RoundingStrategy, ceil_strategy, floor_strategy, half_up_strategy
from .rules import rule_from_mapping, rules_from_json

try:
    __version__ = version("pyparkingtariff")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "ConfigError",
    "DomainError",
    "DurationTooLongError",
    "EmptyRulesError",
    "ErrorCode",
    "InvalidDurationError",
    "InvalidRoundingError",
    "InvalidRuleError",
    "InvalidTimestampError",
    "InvariantError",
    "ParkingCalculationResult",
    "ParkingPriceCalculator",
    "PeriodBreakdown",
    "PricingRule",
    "RoundingStrategy",
    "RuleEvaluation",
    "__version__",
    "calculate",
    "ceil_strategy",
    "floor_strategy",
    "half_up_strategy",
    "rule_from_mapping",
    "rules_from_json",
]
