import json
from datetime import date
from importlib import resources

import jsonschema
import pytest

from pyparkingtariff import rules as rules_module
from pyparkingtariff.exceptions import InvalidRuleError
from pyparkingtariff.models import PricingRule
from pyparkingtariff.rules import normalize_rule, rule_from_mapping, rules_from_json

BASE_RULE = {"period": 30, "price_first_period": 500, "price_next_periods": 200}


def test_rule_schema_is_valid() -> None:
    root = resources.files("pyparkingtariff")
    schema = json.loads((root / "pricing_rule.schema.json").read_text(encoding="utf-8"))
    jsonschema.Draft202012Validator.check_schema(schema)


def test_rule_validator_uses_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    rules_module.clear_schema_cache()
    calls = {"count": 0}
    original = rules_module.read_rule_schema

    def wrapped():
        calls["count"] += 1
        return original()

    monkeypatch.setattr(rules_module, "read_rule_schema", wrapped)

    rule_from_mapping(BASE_RULE)
    rule_from_mapping(BASE_RULE)
    rules_module.load_rule_schema()

    assert calls["count"] == 1


def test_clear_schema_cache_forces_reload(monkeypatch: pytest.MonkeyPatch) -> None:
    rules_module.clear_schema_cache()
    calls = {"count": 0}
    original = rules_module.read_rule_schema

    def wrapped():
        calls["count"] += 1
        return original()

    monkeypatch.setattr(rules_module, "read_rule_schema", wrapped)

    rules_module.load_rule_schema()
    rules_module.clear_schema_cache()
    rules_module.load_rule_schema()

    assert calls["count"] == 2


def test_load_rule_schema_returns_copy() -> None:
    rules_module.clear_schema_cache()
    schema = rules_module.load_rule_schema()
    schema["required"].remove("period")

    assert "period" in rules_module.load_rule_schema()["required"]
    with pytest.raises(InvalidRuleError):
        rule_from_mapping({"price_first_period": 500, "price_next_periods": 200})


def test_rule_from_mapping_required_fields() -> None:
    rule = rule_from_mapping({"period": 30, "price_first_period": 500, "price_next_periods": 200})
    assert rule == PricingRule(period=30, price_first_period=500, price_next_periods=200)
    assert rule.unevaluated_fields == ()


def test_rule_from_mapping_optional_fields() -> None:
    rule = rule_from_mapping(
        {
            "period": 60,
            "price_first_period": 0,
            "price_next_periods": 100,
            "days_mask": 31,
            "time_window": "08:00-18:00",
            "blackout_dates": ["2025-12-24", date(2025, 12, 25)],
        }
    )
    assert rule.days_mask == 31
    assert rule.time_window == "08:00-18:00"
    assert rule.blackout_dates == (date(2025, 12, 24), date(2025, 12, 25))
    assert rule.unevaluated_fields == ("days_mask", "time_window", "blackout_dates")


@pytest.mark.parametrize(
    "data",
    [
        {"price_first_period": 500, "price_next_periods": 200},
        {"period": 30, "price_next_periods": 200},
        {"period": 30, "price_first_period": 500},
        {"period": 0, "price_first_period": 500, "price_next_periods": 200},
        {"period": 30, "price_first_period": -1, "price_next_periods": 200},
        {"period": True, "price_first_period": 500, "price_next_periods": 200},
        {"period": "30", "price_first_period": 500, "price_next_periods": 200},
        {"period": 30.5, "price_first_period": 500, "price_next_periods": 200},
        {**BASE_RULE, "days_mask": 128},
        {**BASE_RULE, "time_window": "8-18"},
        {**BASE_RULE, "time_window": "08:00-24:59"},
        {**BASE_RULE, "blackout_dates": ["2025-02-30"]},
        {**BASE_RULE, "blackout_dates": "2025-12-24"},
        {**BASE_RULE, "unknown": 1},
        [],
    ],
)
def test_rule_from_mapping_invalid(data) -> None:
    with pytest.raises(InvalidRuleError) as exc_info:
        rule_from_mapping(data)
    assert exc_info.value.code == 4


def test_rules_from_json() -> None:
    text = json.dumps(
        [
            {"period": 30, "price_first_period": 500, "price_next_periods": 200},
            {"period": 1440, "price_first_period": 10000, "price_next_periods": 4000},
        ]
    )
    rules = rules_from_json(text)
    assert [rule.period for rule in rules] == [30, 1440]


@pytest.mark.parametrize("text", ["not json", "{}", '[{"period": 30}]'])
def test_rules_from_json_invalid(text: str) -> None:
    with pytest.raises(InvalidRuleError):
        rules_from_json(text)


def test_normalize_rule_keeps_instances() -> None:
    rule = PricingRule(period=30, price_first_period=500, price_next_periods=200)
    assert normalize_rule(rule) is rule


@pytest.mark.parametrize(
    "rule",
    [
        PricingRule(period=0, price_first_period=500, price_next_periods=200),
        PricingRule(period=30, price_first_period=-5, price_next_periods=200),
        PricingRule(period=True, price_first_period=500, price_next_periods=200),
    ],
)
def test_normalize_rule_rejects_invalid_instances(rule: PricingRule) -> None:
    with pytest.raises(InvalidRuleError):
        normalize_rule(rule)


def test_rule_from_mapping_accepts_null_optional_fields() -> None:
    rule = rule_from_mapping(
        {**BASE_RULE, "days_mask": None, "time_window": None, "blackout_dates": None}
    )
    assert rule == PricingRule(period=30, price_first_period=500, price_next_periods=200)
    assert rule.unevaluated_fields == ()


def test_rule_from_mapping_time_window_until_midnight() -> None:
    rule = rule_from_mapping({**BASE_RULE, "time_window": "18:00-24:00"})
    assert rule.time_window == "18:00-24:00"
