"""Rounding strategies for counting next periods."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Protocol

_HALF = Fraction(1, 2)


class RoundingStrategy(Protocol):
    """Turn a fractional count of next periods into a billed count."""

    def __call__(self, value: Fraction, /) -> int: ...


def ceil_strategy(value: Fraction) -> int:
    """Bill every started period in full."""
    return math.ceil(value)


def floor_strategy(value: Fraction) -> int:
    return math.floor(value)


def half_up_strategy(value: Fraction) -> int:
    """Bill a partial period only when at least half of it was used."""
    whole = math.floor(value)
    if value - whole >= _HALF:
        return whole + 1
    return whole
