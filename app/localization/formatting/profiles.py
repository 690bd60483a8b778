"""Format profiles for each supported (language, market) pair."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from localization.i18n.models import CurrencyPosition


@dataclass(frozen=True)
class CurrencyFormat:
    symbol: str
    code: str
    position: CurrencyPosition
    decimals: int
    thousands: str
    decimal: str


@dataclass(frozen=True)
class NumberFormat:
    decimal: str
    thousands: str
    precision: int = 2
    percent_separator: str = " "


@dataclass(frozen=True)
class DatePatterns:
    """CLDR-style patterns describing each date style (informational)."""

    short: str
    medium: str
    long: str
    full: str


@dataclass(frozen=True)
class AddressFormat:
    template: str
    fields: Tuple[str, ...]
    order: Tuple[str, ...]
    required_fields: Tuple[str, ...]
    postal_pattern: str = r"^[0-9]{5}$"


@dataclass(frozen=True)
class PhoneFormat:
    country_code: str
    mask: str
    phone_pattern: Optional[str] = None


@dataclass(frozen=True)
class FormatProfile:
    """Everything needed to format values for one (language, market) pair.

    Attributes:
        language: Language code.
        market: Market code.
        locale_tag: Babel locale identifier (e.g. "fr_FR").
        currency: Currency rendering rules.
        number: Number and percentage separators.
        date: Date style patterns.
        address: Address template and required fields.
        phone: Phone grouping data and validation patterns.
    """

    language: str
    market: str
    locale_tag: str
    currency: CurrencyFormat
    number: NumberFormat
    date: DatePatterns
    address: AddressFormat
    phone: PhoneFormat

    @property
    def key(self) -> str:
        return f"{self.language}_{self.market}"


EUROPEAN_DATES = DatePatterns(
    short="dd/MM/yyyy",
    medium="dd MMM yyyy",
    long="dd MMMM yyyy",
    full="EEEE d MMMM yyyy",
)

US_DATES = DatePatterns(
    short="MM/dd/yyyy",
    medium="MMM dd, yyyy",
    long="MMMM dd, yyyy",
    full="EEEE, MMMM dd, yyyy",
)

POSTCODE_FIRST_ADDRESS = AddressFormat(
    template="{street}\n{postalCode} {city}\n{country}",
    fields=("street", "city", "postalCode", "country"),
    order=("street", "city", "postalCode", "country"),
    required_fields=("street", "city", "postalCode"),
)

MA_PHONE = PhoneFormat(
    country_code="+212",
    mask="+212 5 12 34 56 78",
    phone_pattern=r"^212[1-9][0-9]{8}$",
)


FORMAT_PROFILES: Dict[str, FormatProfile] = {
    profile.key: profile
    for profile in (
        FormatProfile(
            language="fr",
            market="FR",
            locale_tag="fr_FR",
            currency=CurrencyFormat("€", "EUR", CurrencyPosition.AFTER, 2, " ", ","),
            number=NumberFormat(decimal=",", thousands=" "),
            date=EUROPEAN_DATES,
            address=POSTCODE_FIRST_ADDRESS,
            phone=PhoneFormat(
                country_code="+33",
                mask="+33 1 23 45 67 89",
                phone_pattern=r"^33[1-9][0-9]{8}$",
            ),
        ),
        FormatProfile(
            language="fr",
            market="MA",
            locale_tag="fr_MA",
            currency=CurrencyFormat("DH", "MAD", CurrencyPosition.AFTER, 2, " ", ","),
            number=NumberFormat(decimal=",", thousands=" "),
            date=EUROPEAN_DATES,
            address=AddressFormat(
                template="{street}\n{city} {postalCode}\n{country}",
                fields=("street", "city", "postalCode", "country"),
                order=("street", "city", "postalCode", "country"),
                required_fields=("street", "city", "postalCode"),
            ),
            phone=MA_PHONE,
        ),
        FormatProfile(
            language="en",
            market="US",
            locale_tag="en_US",
            currency=CurrencyFormat("$", "USD", CurrencyPosition.BEFORE, 2, ",", "."),
            number=NumberFormat(decimal=".", thousands=",", percent_separator=""),
            date=US_DATES,
            address=AddressFormat(
                template="{street}\n{city}, {state} {postalCode}\n{country}",
                fields=("street", "city", "state", "postalCode", "country"),
                order=("street", "city", "state", "postalCode", "country"),
                required_fields=("street", "city", "state", "postalCode"),
                postal_pattern=r"^[0-9]{5}(-[0-9]{4})?$",
            ),
            phone=PhoneFormat(
                country_code="+1",
                mask="+1 (555) 123-4567",
                phone_pattern=r"^1[2-9][0-9]{9}$",
            ),
        ),
        FormatProfile(
            language="es",
            market="ES",
            locale_tag="es_ES",
            currency=CurrencyFormat("€", "EUR", CurrencyPosition.AFTER, 2, ".", ","),
            number=NumberFormat(decimal=",", thousands="."),
            date=EUROPEAN_DATES,
            address=AddressFormat(
                template="{street}\n{postalCode} {city}\n{country}",
                fields=("street", "city", "postalCode", "country"),
                order=("street", "postalCode", "city", "country"),
                required_fields=("street", "city", "postalCode"),
            ),
            phone=PhoneFormat(
                country_code="+34",
                mask="+34 91 123 45 67",
                phone_pattern=r"^34[6-9][0-9]{8}$",
            ),
        ),
        FormatProfile(
            language="ar",
            market="MA",
            locale_tag="ar_MA",
            currency=CurrencyFormat("درهم", "MAD", CurrencyPosition.AFTER, 2, "،", "٫"),
            number=NumberFormat(decimal="٫", thousands="،"),
            date=EUROPEAN_DATES,
            address=POSTCODE_FIRST_ADDRESS,
            phone=MA_PHONE,
        ),
    )
}


def get_profile(language: str, market: str) -> Optional[FormatProfile]:
    """Profile for a pair, or None when the pair has no formatting rules."""
    return FORMAT_PROFILES.get(f"{language}_{market}")
