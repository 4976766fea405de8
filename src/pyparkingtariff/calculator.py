"""Calculator facade for parking price calculation."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .const import CURRENCY, MAX_PARKING_TIME_IN_MINUTES, REFERENCE_ZONE
from .exceptions import (
    ConfigError,
    DurationTooLongError,
    EmptyRulesError,
    InvalidRoundingError,
)
from .models import ParkingCalculationResult, PeriodBreakdown, PricingRule, RuleEvaluation
from .rounding import RoundingStrategy, ceil_strategy
from .rules import normalize_rule
from .tariff import select_best
from .util import load_zone, resolve_duration_minutes

_LOGGER = logging.getLogger(__name__)

RuleInput = PricingRule | Mapping[str, Any]


class ParkingPriceCalculator:
    """Compute the cheapest fee for a parking session across pricing rules."""

    def __init__(
        self,
        *,
        zone: str = REFERENCE_ZONE,
        max_duration_minutes: int = MAX_PARKING_TIME_IN_MINUTES,
        rounding_strategy: RoundingStrategy = ceil_strategy,
    ) -> None:
        if (
            isinstance(max_duration_minutes, bool)
            or not isinstance(max_duration_minutes, int)
            or max_duration_minutes <= 0
        ):
            raise ConfigError("max_duration_minutes must be a positive integer.")
        if not callable(rounding_strategy):
            raise ConfigError("rounding_strategy must be callable.")
        self._zone = load_zone(zone)
        self._max_duration_minutes = max_duration_minutes
        self._rounding_strategy = rounding_strategy

    @property
    def zone(self) -> str:
        return self._zone.key

    @property
    def max_duration_minutes(self) -> int:
        return self._max_duration_minutes

    def __call__(
        self,
        rules: Sequence[RuleInput],
        start_at: str,
        end_at: str,
        currency: str = CURRENCY,
        rounding_strategy: RoundingStrategy | None = None,
    ) -> ParkingCalculationResult:
        if not rules:
            raise EmptyRulesError("Rules cannot be empty.")
        minutes = resolve_duration_minutes(start_at, end_at, zone=self._zone)
        if minutes > self._max_duration_minutes:
            raise DurationTooLongError(
                f"Parking time cannot be longer than {self._max_duration_minutes} minutes."
            )
        normalized = [normalize_rule(rule) for rule in rules]
        _LOGGER.debug("Calculation started for %s rules over %s minutes", len(normalized), minutes)
        if rounding_strategy is None:
            rounding_strategy = self._rounding_strategy
        elif not callable(rounding_strategy):
            raise InvalidRoundingError("rounding_strategy must be callable.")
        best = select_best(normalized, minutes, rounding_strategy)
        _LOGGER.debug("Calculation completed with rule %s total %s", best.index, best.total)
        return self._build_result(best, currency)

    def _build_result(self, best: RuleEvaluation, currency: str) -> ParkingCalculationResult:
        rule = best.rule
        return ParkingCalculationResult(
            total=best.total,
            currency=CURRENCY,
            rule_index=best.index,
            periods=PeriodBreakdown(
                period=rule.period,
                first_period_price=rule.price_first_period,
                next_periods_price=rule.price_next_periods,
                consumed_first=best.consumed_first,
                consumed_next=best.consumed_next,
            ),
            notes=self._build_notes(rule, currency),
        )

    def _build_notes(self, rule: PricingRule, currency: str) -> tuple[str, ...]:
        notes: list[str] = []
        if currency != CURRENCY:
            notes.append(
                f"Currency {currency} is not supported; amounts are reported in {CURRENCY}."
            )
        unevaluated = rule.unevaluated_fields
        if unevaluated:
            notes.append(f"Rule fields {', '.join(unevaluated)} are not evaluated.")
        return tuple(notes)


_DEFAULT_CALCULATOR: ParkingPriceCalculator | None = None


def _default_calculator() -> ParkingPriceCalculator:
    global _DEFAULT_CALCULATOR
    if _DEFAULT_CALCULATOR is None:
        _DEFAULT_CALCULATOR = ParkingPriceCalculator()
    return _DEFAULT_CALCULATOR


def calculate(
    rules: Sequence[RuleInput],
    start_at: str,
    end_at: str,
    currency: str = CURRENCY,
    rounding_strategy: RoundingStrategy | None = None,
) -> ParkingCalculationResult:
    """Compute the fee with the default Europe/Warsaw calculator."""
    return _default_calculator()(rules, start_at, end_at, currency, rounding_strategy)
