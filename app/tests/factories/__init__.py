"""Test data factories for deterministic test data generation."""

from tests.factories.localization import (
    make_bundle,
    make_language,
    make_market,
    make_record,
    make_settings,
    make_value,
)

__all__ = [
    "make_bundle",
    "make_language",
    "make_market",
    "make_record",
    "make_settings",
    "make_value",
]
