"""Locale-aware formatting of currency, numbers, dates, phones and addresses."""

from localization.formatting.contact import AddressValidation
from localization.formatting.formatter import LocaleFormatter
from localization.formatting.numbers import convert_numbers
from localization.formatting.profiles import FORMAT_PROFILES, FormatProfile, get_profile

__all__ = [
    "AddressValidation",
    "LocaleFormatter",
    "FORMAT_PROFILES",
    "FormatProfile",
    "convert_numbers",
    "get_profile",
]
