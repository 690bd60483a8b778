"""Built-in language and market catalog.

The registry is seeded from these entries unless the caller supplies its own.
"""

from typing import Tuple

from localization.i18n.models import (
    CurrencyPosition,
    Language,
    Market,
    NumberFormatRules,
    TextDirection,
)

DEFAULT_LANGUAGES: Tuple[Language, ...] = (
    Language(
        code="fr",
        name="French",
        native_name="Français",
        direction=TextDirection.LTR,
        is_default=True,
        market_code="FR",
        flag="🇫🇷",
    ),
    Language(
        code="ar",
        name="Arabic",
        native_name="العربية",
        direction=TextDirection.RTL,
        market_code="MA",
        flag="🇲🇦",
    ),
    Language(
        code="en",
        name="English",
        native_name="English",
        market_code="US",
        flag="🇺🇸",
    ),
    Language(
        code="es",
        name="Spanish",
        native_name="Español",
        market_code="ES",
        flag="🇪🇸",
    ),
)

DEFAULT_MARKETS: Tuple[Market, ...] = (
    Market(
        code="FR",
        name="France",
        supported_language_codes=("fr",),
        currency_code="EUR",
        number_format=NumberFormatRules(
            decimal_places=2,
            thousands_separator=" ",
            decimal_separator=",",
            currency_symbol="€",
            currency_position=CurrencyPosition.AFTER,
        ),
        address_field_order=("street", "city", "postalCode", "country"),
        region="Europe",
        calling_code="+33",
        timezone="Europe/Paris",
        holidays=(
            "2024-01-01",
            "2024-05-01",
            "2024-05-08",
            "2024-07-14",
            "2024-08-15",
            "2024-11-01",
            "2024-11-11",
            "2024-12-25",
        ),
        vat_rate=20.0,
    ),
    Market(
        code="MA",
        name="Maroc",
        supported_language_codes=("fr", "ar"),
        currency_code="MAD",
        number_format=NumberFormatRules(
            decimal_places=2,
            thousands_separator=" ",
            decimal_separator=",",
            currency_symbol="DH",
            currency_position=CurrencyPosition.AFTER,
        ),
        address_field_order=("street", "city", "postalCode", "country"),
        region="Africa",
        calling_code="+212",
        timezone="Africa/Casablanca",
        holidays=(
            "2024-01-01",
            "2024-05-01",
            "2024-07-30",
            "2024-08-14",
            "2024-08-20",
            "2024-11-06",
            "2024-11-18",
            "2024-12-25",
        ),
        vat_rate=20.0,
    ),
    Market(
        code="US",
        name="United States",
        supported_language_codes=("en",),
        currency_code="USD",
        number_format=NumberFormatRules(
            decimal_places=2,
            thousands_separator=",",
            decimal_separator=".",
            currency_symbol="$",
            currency_position=CurrencyPosition.BEFORE,
        ),
        address_field_order=("street", "city", "state", "postalCode", "country"),
        region="Americas",
        calling_code="+1",
        timezone="America/New_York",
        holidays=(
            "2024-01-01",
            "2024-01-15",
            "2024-02-19",
            "2024-05-27",
            "2024-07-04",
            "2024-09-02",
            "2024-10-14",
            "2024-11-11",
            "2024-11-28",
            "2024-12-25",
        ),
        vat_rate=0.0,
    ),
    Market(
        code="ES",
        name="España",
        supported_language_codes=("es",),
        currency_code="EUR",
        number_format=NumberFormatRules(
            decimal_places=2,
            thousands_separator=".",
            decimal_separator=",",
            currency_symbol="€",
            currency_position=CurrencyPosition.AFTER,
        ),
        address_field_order=("street", "postalCode", "city", "country"),
        region="Europe",
        calling_code="+34",
        timezone="Europe/Madrid",
        holidays=(
            "2024-01-01",
            "2024-01-06",
            "2024-05-01",
            "2024-08-15",
            "2024-10-12",
            "2024-11-01",
            "2024-12-06",
            "2024-12-08",
            "2024-12-25",
        ),
        vat_rate=21.0,
    ),
)
