"""Locale formatter.

Market-correct rendering of currency, numbers, percentages, dates, times,
phone numbers and addresses. Every method is pure with respect to the
formatter's state; pairs without a profile get generic output instead of
an error.
"""

from dataclasses import asdict
from typing import Any, Dict, List, Mapping, Optional

from localization.formatting import contact, dates, numbers
from localization.formatting.contact import AddressValidation
from localization.formatting.profiles import FORMAT_PROFILES, FormatProfile
from localization.i18n.models import CurrencyPosition
from localization.i18n.registry import LocaleRegistry
from localization.logging import get_module_logger

logger = get_module_logger()


class LocaleFormatter:
    """Formats values for (language, market) pairs.

    Attributes:
        profiles: Format profiles keyed by "<language>_<MARKET>".
        registry: Optional registry used for display names.
    """

    def __init__(
        self,
        profiles: Optional[Dict[str, FormatProfile]] = None,
        registry: Optional[LocaleRegistry] = None,
    ):
        self.profiles = dict(FORMAT_PROFILES if profiles is None else profiles)
        self.registry = registry

    def get_profile(self, language: str, market: str) -> Optional[FormatProfile]:
        profile = self.profiles.get(f"{language}_{market}")
        if profile is None:
            logger.debug("format_profile_missing", language=language, market=market)
        return profile

    def format_currency(
        self,
        amount: numbers.Number,
        language: str,
        market: str,
        currency_code: Optional[str] = None,
        show_code: bool = False,
        show_symbol: bool = True,
        decimals: Optional[int] = None,
        compact: bool = False,
    ) -> str:
        """Format a monetary amount.

        Args:
            amount: Amount in major units.
            language: Language code.
            market: Market code.
            currency_code: Code appended as " (EUR)" when show_code is set.
            show_code: Append the currency code.
            show_symbol: Place the profile's symbol before or after.
            decimals: Override the profile's decimal count.
            compact: Use the compact K/M form for large amounts.

        Returns:
            e.g. "1 234,56 €" for fr/FR, "$1,234.56" for en/US, or
            f"{amount:.2f}" when the pair has no profile.
        """
        profile = self.get_profile(language, market)
        if profile is None:
            return f"{amount:.2f}"

        currency = profile.currency
        places = currency.decimals if decimals is None else decimals
        rounded = numbers.round_half_up(amount, places)
        body = self.format_number(rounded, language, market, decimals=places, compact=compact)

        if not show_symbol:
            result = body
        elif currency.position == CurrencyPosition.BEFORE:
            result = f"{currency.symbol}{body}"
        else:
            result = f"{body} {currency.symbol}"

        if show_code and currency_code:
            result += f" ({currency_code})"
        return result

    def format_number(
        self,
        number: numbers.Number,
        language: str,
        market: str,
        decimals: Optional[int] = None,
        compact: bool = False,
    ) -> str:
        """Format a number with the pair's separators.

        Returns:
            The grouped number, the compact form when requested and the
            value is at least 1,000, or str(number) when the pair has no
            profile.
        """
        profile = self.get_profile(language, market)
        if profile is None:
            return str(number)

        if compact and numbers.is_compactable(number):
            return numbers.compact(number)

        places = profile.number.precision if decimals is None else decimals
        return numbers.group_digits(
            number, places, profile.number.thousands, profile.number.decimal
        )

    def format_percentage(
        self,
        value: numbers.Number,
        language: str,
        market: str,
        decimals: int = 1,
        show_symbol: bool = True,
    ) -> str:
        """Format a value already expressed in percent (12.5 -> "12,5 %")."""
        profile = self.get_profile(language, market)
        if profile is None:
            body = f"{float(value):.{decimals}f}"
            return f"{body}%" if show_symbol else body

        body = numbers.group_digits(
            value, decimals, profile.number.thousands, profile.number.decimal
        )
        if not show_symbol:
            return body
        return f"{body}{profile.number.percent_separator}%"

    def format_date(
        self,
        value: dates.DateInput,
        language: str,
        market: str,
        style: str = "medium",
        custom_format: Optional[str] = None,
        include_time: bool = False,
        hour12: bool = False,
        timezone: Optional[str] = None,
    ) -> str:
        """Format a date.

        Args:
            value: datetime, date, ISO 8601 string or epoch seconds.
            language: Language code.
            market: Market code.
            style: short, medium, long or full.
            custom_format: Token pattern (yyyy MM dd HH mm ss); bypasses style.
            include_time: Append hours and minutes.
            hour12: 12-hour clock for the appended time.
            timezone: IANA timezone to convert to before rendering.

        Returns:
            The rendered date; ISO format when the pair has no profile.

        Raises:
            ValueError: If style is unknown or a string value is not ISO 8601.
        """
        moment = dates.in_timezone(dates.to_datetime(value), timezone)

        profile = self.get_profile(language, market)
        if custom_format:
            return dates.render_custom(moment, custom_format)
        if profile is None:
            if include_time:
                return moment.isoformat(sep=" ", timespec="minutes")
            return moment.date().isoformat()

        rendered = dates.render_date(moment, style, profile.locale_tag)
        if include_time:
            rendered = f"{rendered} {dates.render_time(moment, profile.locale_tag, hour12)}"
        return rendered

    def format_time(
        self,
        value: dates.DateInput,
        language: str,
        market: str,
        hour12: Optional[bool] = None,
        include_seconds: bool = False,
        timezone: Optional[str] = None,
    ) -> str:
        """Format a time of day; hour12=None keeps the locale's clock."""
        moment = dates.in_timezone(dates.to_datetime(value), timezone)

        profile = self.get_profile(language, market)
        if profile is None:
            return moment.time().isoformat(
                timespec="seconds" if include_seconds else "minutes"
            )
        return dates.render_time(moment, profile.locale_tag, hour12, include_seconds)

    def format_phone_number(
        self,
        phone: str,
        language: str,
        market: str,
        include_country_code: bool = True,
        mask: bool = False,
    ) -> str:
        """Group a phone number; the input is returned unchanged for unknown pairs."""
        profile = self.get_profile(language, market)
        if profile is None:
            return phone
        return contact.format_phone(phone, profile, include_country_code, mask)

    def format_address(
        self,
        address: Mapping[str, Optional[str]],
        language: str,
        market: str,
        template: Optional[str] = None,
        include_country: bool = True,
        multiline: bool = True,
    ) -> str:
        """Render an address with the pair's template.

        Pairs without a profile and no explicit template get the non-empty
        values joined with ", ".
        """
        profile = self.get_profile(language, market)
        if profile is None and template is None:
            values = [
                str(value)
                for name, value in address.items()
                if value and (include_country or name != "country")
            ]
            return ", ".join(values)

        chosen = template or profile.address.template
        return contact.format_address(address, chosen, include_country, multiline)

    def validate_address(
        self, address: Mapping[str, Optional[str]], language: str, market: str
    ) -> AddressValidation:
        profile = self.get_profile(language, market)
        if profile is None:
            return AddressValidation(
                is_valid=False, errors=[f"Unsupported market format: {language}_{market}"]
            )
        return contact.validate_address(address, profile)

    def convert_numbers(self, text: str, source: str = "latin", target: str = "arabic") -> str:
        return numbers.convert_numbers(text, source, target)

    def get_format_info(self, language: str, market: str) -> Optional[Dict[str, Any]]:
        """Formatting rules of a pair as plain data, or None."""
        profile = self.get_profile(language, market)
        if profile is None:
            return None
        info = asdict(profile)
        info["currency"]["position"] = profile.currency.position.value
        return info

    def available_formatters(self) -> List[Dict[str, str]]:
        """Pairs with a profile, with a display name like "Français (MA)"."""
        formatters = []
        for profile in self.profiles.values():
            language = self.registry.get_language(profile.language) if self.registry else None
            display = language.native_name if language else profile.language
            formatters.append(
                {
                    "language": profile.language,
                    "market": profile.market,
                    "name": f"{display} ({profile.market})",
                }
            )
        return formatters
