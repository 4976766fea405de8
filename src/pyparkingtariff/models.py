"""Public data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any


@dataclass(frozen=True, slots=True)
class PricingRule:
    """Tariff with a first period price and a flat price for each next period.

    ``days_mask``, ``time_window`` and ``blackout_dates`` are accepted for input
    compatibility only; the evaluator never looks at them.
    """

    period: int
    price_first_period: int
    price_next_periods: int
    days_mask: int | None = None
    time_window: str | None = None
    blackout_dates: tuple[date, ...] = ()

    @property
    def unevaluated_fields(self) -> tuple[str, ...]:
        fields: list[str] = []
        if self.days_mask is not None:
            fields.append("days_mask")
        if self.time_window is not None:
            fields.append("time_window")
        if self.blackout_dates:
            fields.append("blackout_dates")
        return tuple(fields)


@dataclass(frozen=True, slots=True)
class RuleEvaluation:
    total: int
    consumed_first: int
    consumed_next: int
    rule: PricingRule
    index: int = 0


@dataclass(frozen=True, slots=True)
class PeriodBreakdown:
    period: int
    first_period_price: int
    next_periods_price: int
    consumed_first: int
    consumed_next: int


@dataclass(frozen=True, slots=True)
class ParkingCalculationResult:
    total: int
    currency: str
    rule_index: int
    periods: PeriodBreakdown
    notes: tuple[str, ...] = field(default=())

    def as_dict(self) -> dict[str, Any]:
        """Return the result as plain data."""
        data = asdict(self)
        data["notes"] = list(self.notes)
        return data
