"""Constants for parking price calculation."""

REFERENCE_ZONE = "Europe/Warsaw"

MAX_PARKING_TIME_IN_MINUTES = 60 * 24 * 3

CURRENCY = "PLN"

RULE_SCHEMA_FILENAME = "pricing_rule.schema.json"
