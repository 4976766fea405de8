"""Per-rule scoring and optimal rule selection."""

from __future__ import annotations

from collections.abc import Sequence
from fractions import Fraction

from .exceptions import InvalidRoundingError, InvariantError
from .models import PricingRule, RuleEvaluation
from .rounding import RoundingStrategy


def _billed_periods(rounding: RoundingStrategy, quotient: Fraction) -> int:
    consumed = rounding(quotient)
    if isinstance(consumed, bool) or not isinstance(consumed, int):
        raise InvalidRoundingError(
            f"Rounding strategy returned {type(consumed).__name__}, expected int."
        )
    if consumed < 0:
        raise InvalidRoundingError("Rounding strategy returned a negative period count.")
    return consumed


def evaluate_rule(
    rule: PricingRule,
    minutes: int,
    rounding: RoundingStrategy,
    *,
    index: int = 0,
) -> RuleEvaluation:
    """Price ``minutes`` of parking under a single rule.

    The first period is charged once; everything past it is billed in units of the
    same ``period`` at ``price_next_periods``, counted by ``rounding``.
    """
    consumed_first = 1 if minutes > 0 else 0
    remaining = max(0, minutes - rule.period)
    consumed_next = _billed_periods(rounding, Fraction(remaining, rule.period))
    total = (rule.price_first_period if consumed_first else 0)
    total += consumed_next * rule.price_next_periods
    return RuleEvaluation(
        total=total,
        consumed_first=consumed_first,
        consumed_next=consumed_next,
        rule=rule,
        index=index,
    )


def is_better(candidate: RuleEvaluation, best: RuleEvaluation | None) -> bool:
    """Return True when ``candidate`` should replace ``best``.

    Each criterion only applies when every earlier one is equal; a full tie keeps
    ``best``.
    """
    if best is None:
        return True
    if candidate.total != best.total:
        return candidate.total < best.total
    if candidate.rule.price_first_period != best.rule.price_first_period:
        return candidate.rule.price_first_period < best.rule.price_first_period
    if candidate.rule.period != best.rule.period:
        return candidate.rule.period < best.rule.period
    return False


def select_best(
    rules: Sequence[PricingRule],
    minutes: int,
    rounding: RoundingStrategy,
) -> RuleEvaluation:
    best: RuleEvaluation | None = None
    for index, rule in enumerate(rules):
        evaluation = evaluate_rule(rule, minutes, rounding, index=index)
        if is_better(evaluation, best):
            best = evaluation
    if best is None:
        raise InvariantError("No pricing rule could be selected.")
    return best
