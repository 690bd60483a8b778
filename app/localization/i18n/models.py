"""Localization models.

Defines the catalog entries (languages, markets), the derived locale, and the
translation values and bundles served by the resolver.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import pytz

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


class TextDirection(str, Enum):
    """Writing direction of a language."""

    LTR = "ltr"
    RTL = "rtl"


class PluralCategory(str, Enum):
    """Plural categories selected from a count."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class Gender(str, Enum):
    """Grammatical gender attached to a translation value."""

    MASCULINE = "masculine"
    FEMININE = "feminine"


class CurrencyPosition(str, Enum):
    """Where the currency symbol goes relative to the amount."""

    BEFORE = "before"
    AFTER = "after"


class BundleSource(str, Enum):
    """Origin of a translation bundle."""

    STORE = "store"
    BUILTIN = "builtin"


@dataclass(frozen=True)
class Language:
    """Catalog entry for a supported language.

    Attributes:
        code: Language code (e.g., "fr", "ar").
        name: English name.
        native_name: Name in the language itself.
        direction: Writing direction.
        is_default: True for the single catalog-wide fallback language.
        market_code: Home market of the language.
        flag: Flag emoji shown by language pickers.
    """

    code: str
    name: str
    native_name: str
    direction: TextDirection = TextDirection.LTR
    is_default: bool = False
    market_code: Optional[str] = None
    flag: str = ""

    @property
    def is_rtl(self) -> bool:
        return self.direction == TextDirection.RTL


@dataclass(frozen=True)
class NumberFormatRules:
    """Market rules for rendering amounts."""

    decimal_places: int = 2
    thousands_separator: str = ","
    decimal_separator: str = "."
    currency_symbol: str = ""
    currency_position: CurrencyPosition = CurrencyPosition.AFTER


@dataclass(frozen=True)
class Market:
    """Catalog entry for a supported market.

    Attributes:
        code: Market code (e.g., "FR", "MA").
        name: Display name.
        supported_language_codes: Languages the market accepts.
        currency_code: ISO 4217 currency code.
        number_format: Separators, decimals and currency placement.
        address_field_order: Order of address fields.
        region: Geographic region used for statistics.
        calling_code: International dialing prefix.
        timezone: Default IANA timezone.
        holidays: Public holidays as ISO dates.
        vat_rate: Standard VAT rate in percent.
    """

    code: str
    name: str
    supported_language_codes: Tuple[str, ...]
    currency_code: str
    number_format: NumberFormatRules = field(default_factory=NumberFormatRules)
    address_field_order: Tuple[str, ...] = ()
    region: str = ""
    calling_code: str = ""
    timezone: str = "UTC"
    holidays: Tuple[str, ...] = ()
    vat_rate: float = 0.0

    def offers(self, language_code: str) -> bool:
        """Check whether the market accepts a language.

        Args:
            language_code: Language code to check.

        Returns:
            True if the language is in the market's supported list.
        """
        return language_code in self.supported_language_codes


@dataclass(frozen=True)
class BusinessCalendar:
    """Business hours, working days (ISO weekday numbers) and holidays."""

    start: str = "09:00"
    end: str = "18:00"
    working_days: Tuple[int, ...] = (1, 2, 3, 4, 5)
    holidays: Tuple[str, ...] = ()

    def is_business_day(self, day: date) -> bool:
        return day.isoweekday() in self.working_days and day.isoformat() not in self.holidays


@dataclass(frozen=True)
class Locale:
    """Validated (language, market) pair with derived properties.

    Computed on demand by LocaleRegistry.resolve_locale; never persisted.
    """

    language: Language
    market: Market
    timezone: str
    business_calendar: BusinessCalendar

    @property
    def combined_id(self) -> str:
        """Locale identifier, e.g. "fr-FR"."""
        return f"{self.language.code}-{self.market.code}"

    @property
    def is_rtl(self) -> bool:
        return self.language.is_rtl

    @property
    def tzinfo(self) -> pytz.BaseTzInfo:
        """pytz timezone of the market."""
        return pytz.timezone(self.timezone)


@dataclass
class LocaleValidation:
    """Non-raising result of a locale check."""

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass
class TranslationValue:
    """A single translated string and its metadata.

    Attributes:
        key: Dot-namespaced key (e.g., "nav.home").
        value: Translated text, may contain {name} placeholders.
        context: UI context ("button", "title"...) used by length checks.
        gender: Grammatical gender of the value.
        plural_category: Plural form the stored value is written in.
        variables: Default values for placeholders.
    """

    key: str
    value: str
    context: Optional[str] = None
    gender: Optional[Gender] = None
    plural_category: Optional[PluralCategory] = None
    variables: Dict[str, Any] = field(default_factory=dict)

    def placeholders(self) -> List[str]:
        """Placeholder names used in the value, in order of appearance."""
        return PLACEHOLDER_PATTERN.findall(self.value or "")


@dataclass
class TranslationBundle:
    """All translations for one (language, market) pair.

    Attributes:
        language: Language code.
        market: Market code.
        translations: Mapping of key to TranslationValue.
        version: Bundle format version.
        last_updated: When the bundle was built.
        source: Whether the bundle came from the store or the built-in data.
    """

    language: str
    market: str
    translations: Dict[str, TranslationValue] = field(default_factory=dict)
    version: str = "1.0.0"
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source: BundleSource = BundleSource.STORE

    def get(self, key: str) -> Optional[TranslationValue]:
        """Look up a key; None is the explicit unknown-key branch."""
        return self.translations.get(key)

    def has(self, key: str) -> bool:
        return key in self.translations

    def keys(self) -> List[str]:
        return list(self.translations.keys())

    def __len__(self) -> int:
        return len(self.translations)


@dataclass
class CacheEntry:
    """Cached bundle with its insertion time (epoch seconds) and TTL."""

    bundle: TranslationBundle
    inserted_at: float
    ttl: float

    def is_fresh(self, now: float) -> bool:
        return now - self.inserted_at <= self.ttl


@dataclass
class DirectionState:
    """Layout direction state owned by the direction adaptor."""

    enabled: bool = True
    current_direction: TextDirection = TextDirection.LTR
    mirror_icons: bool = True
    mirror_numbers: bool = False
