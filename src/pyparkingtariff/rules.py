"""Pricing rule loading and validation."""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from datetime import date
from importlib import resources
from typing import Any

import jsonschema
from jsonschema.exceptions import best_match

from .const import RULE_SCHEMA_FILENAME
from .exceptions import InvalidRuleError
from .models import PricingRule

_VALIDATOR_CACHE: jsonschema.Draft202012Validator | None = None


def read_rule_schema() -> dict:
    schema_path = resources.files("pyparkingtariff") / RULE_SCHEMA_FILENAME
    return json.loads(schema_path.read_text(encoding="utf-8"))


def _rule_validator() -> jsonschema.Draft202012Validator:
    global _VALIDATOR_CACHE
    if _VALIDATOR_CACHE is None:
        _VALIDATOR_CACHE = jsonschema.Draft202012Validator(read_rule_schema())
    return _VALIDATOR_CACHE


def load_rule_schema() -> dict:
    return copy.deepcopy(_rule_validator().schema)


def clear_schema_cache() -> None:
    """Clear the cached rule schema validator (used in tests)."""
    global _VALIDATOR_CACHE
    _VALIDATOR_CACHE = None


def _plain_rule_data(data: Mapping[str, Any]) -> dict[str, Any]:
    plain = dict(data)
    blackout_dates = plain.get("blackout_dates")
    if isinstance(blackout_dates, (list, tuple)):
        plain["blackout_dates"] = [
            value.isoformat() if isinstance(value, date) else value for value in blackout_dates
        ]
    return plain


def _parse_blackout_dates(values: list[str]) -> tuple[date, ...]:
    try:
        return tuple(date.fromisoformat(value) for value in values)
    except ValueError as exc:
        raise InvalidRuleError("Pricing rule blackout_dates must be ISO 8601 dates.") from exc


def rule_from_mapping(data: Mapping[str, Any]) -> PricingRule:
    """Build a ``PricingRule`` from plain data, validating it against the rule schema."""
    if not isinstance(data, Mapping):
        raise InvalidRuleError("Pricing rule must be a mapping.")
    plain = _plain_rule_data(data)
    error = best_match(_rule_validator().iter_errors(plain))
    if error is not None:
        location = ".".join(str(part) for part in error.absolute_path) or "rule"
        raise InvalidRuleError(f"Pricing rule {location}: {error.message}")
    days_mask = plain.get("days_mask")
    return PricingRule(
        period=int(plain["period"]),
        price_first_period=int(plain["price_first_period"]),
        price_next_periods=int(plain["price_next_periods"]),
        days_mask=int(days_mask) if days_mask is not None else None,
        time_window=plain.get("time_window"),
        blackout_dates=_parse_blackout_dates(plain.get("blackout_dates") or []),
    )


def rules_from_json(text: str) -> list[PricingRule]:
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as exc:
        raise InvalidRuleError("Pricing rules are not valid JSON.") from exc
    if not isinstance(data, list):
        raise InvalidRuleError("Pricing rules must be a JSON array.")
    return [rule_from_mapping(entry) for entry in data]


def _check_rule(rule: PricingRule) -> PricingRule:
    for name, minimum in (("period", 1), ("price_first_period", 0), ("price_next_periods", 0)):
        value = getattr(rule, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise InvalidRuleError(f"Pricing rule {name} must be an integer >= {minimum}.")
    return rule


def normalize_rule(entry: PricingRule | Mapping[str, Any]) -> PricingRule:
    if isinstance(entry, PricingRule):
        return _check_rule(entry)
    return rule_from_mapping(entry)
