"""Unit tests for localization.formatting.formatter module."""

from datetime import date, datetime

import pytest

from localization.formatting import LocaleFormatter, convert_numbers

pytestmark = pytest.mark.unit


@pytest.fixture
def formatter(registry):
    return LocaleFormatter(registry=registry)


class TestFormatCurrency:
    def test_french_france(self, formatter):
        """Space thousands, comma decimals, euro sign after."""
        result = formatter.format_currency(1234.56, "fr", "FR")

        assert "1 234,56" in result
        assert result.endswith("€")

    def test_english_us(self, formatter):
        """Dollar sign before, comma thousands, dot decimals."""
        result = formatter.format_currency(1234.56, "en", "US")

        assert result.startswith("$")
        assert "1,234.56" in result

    def test_arabic_morocco(self, formatter):
        assert formatter.format_currency(1234.56, "ar", "MA") == "1،234٫56 درهم"

    def test_show_code(self, formatter):
        result = formatter.format_currency(10, "es", "ES", currency_code="EUR", show_code=True)
        assert result == "10,00 € (EUR)"

    def test_rounds_half_up(self, formatter):
        assert formatter.format_currency(2.675, "en", "US") == "$2.68"

    def test_unknown_pair_is_generic(self, formatter):
        assert formatter.format_currency(1234.5, "de", "DE") == "1234.50"

    def test_compact(self, formatter):
        assert formatter.format_currency(1_500_000, "en", "US", compact=True) == "$1.5M"


class TestFormatNumberAndPercentage:
    def test_number_separators(self, formatter):
        assert formatter.format_number(1234567.891, "es", "ES") == "1.234.567,89"

    def test_number_unknown_pair(self, formatter):
        assert formatter.format_number(42, "de", "DE") == "42"

    def test_compact_below_threshold_is_grouped(self, formatter):
        assert formatter.format_number(999, "en", "US", compact=True) == "999.00"

    def test_percentage_spacing(self, formatter):
        assert formatter.format_percentage(12.5, "fr", "FR") == "12,5 %"
        assert formatter.format_percentage(12.5, "en", "US") == "12.5%"


class TestFormatDate:
    def test_long_french(self, formatter):
        assert formatter.format_date(date(2024, 1, 15), "fr", "FR", style="long") == (
            "15 janvier 2024"
        )

    def test_long_english(self, formatter):
        assert formatter.format_date(date(2024, 1, 15), "en", "US", style="long") == (
            "January 15, 2024"
        )

    def test_short_uses_two_digit_year(self, formatter):
        result = formatter.format_date(date(2024, 1, 15), "fr", "FR", style="short")

        assert result.endswith("/24")
        assert "2024" not in result

    def test_full_includes_weekday(self, formatter):
        assert "lundi" in formatter.format_date(date(2024, 1, 15), "fr", "FR", style="full")
        assert "Monday" in formatter.format_date(date(2024, 1, 15), "en", "US", style="full")

    def test_medium_abbreviates_month(self, formatter):
        assert formatter.format_date(date(2024, 1, 15), "en", "US", style="medium") == (
            "Jan 15, 2024"
        )

    def test_custom_format(self, formatter):
        value = datetime(2024, 1, 15, 9, 5)
        assert formatter.format_date(value, "fr", "FR", custom_format="dd/MM/yyyy HH:mm") == (
            "15/01/2024 09:05"
        )

    def test_iso_string_with_timezone(self, formatter):
        """UTC midnight is still the previous day in New York."""
        result = formatter.format_date(
            "2024-01-15T02:00:00Z",
            "en",
            "US",
            custom_format="yyyy-MM-dd",
            timezone="America/New_York",
        )
        assert result == "2024-01-14"

    def test_unknown_style_raises(self, formatter):
        with pytest.raises(ValueError):
            formatter.format_date(date(2024, 1, 15), "fr", "FR", style="tiny")

    def test_unknown_pair_is_iso(self, formatter):
        assert formatter.format_date(date(2024, 1, 15), "de", "DE") == "2024-01-15"

    def test_time_24h_and_12h(self, formatter):
        value = datetime(2024, 1, 15, 18, 30)
        assert formatter.format_time(value, "fr", "FR", hour12=False) == "18:30"
        assert formatter.format_time(value, "en", "US", hour12=True) == "6:30 PM"


class TestContactFormatting:
    def test_phone_grouping(self, formatter):
        assert formatter.format_phone_number("612345678", "fr", "FR") == "+33 6 12 34 56 78"
        assert formatter.format_phone_number("555-123-4567", "en", "US") == "+1 (555) 123-4567"

    def test_phone_mask(self, formatter):
        assert formatter.format_phone_number("", "fr", "MA", mask=True) == "+212 5 12 34 56 78"

    def test_phone_unknown_pair_unchanged(self, formatter):
        assert formatter.format_phone_number("0612", "de", "DE") == "0612"

    def test_address_us_template(self, formatter):
        address = {
            "street": "1 Main St",
            "city": "Springfield",
            "state": "IL",
            "postalCode": "62701",
            "country": "USA",
        }

        result = formatter.format_address(address, "en", "US", include_country=False)

        assert result == "1 Main St\nSpringfield, IL 62701"

    def test_address_single_line_drops_missing_fields(self, formatter):
        address = {"street": "10 rue de Rivoli", "city": "Paris", "postalCode": "75001"}

        result = formatter.format_address(address, "fr", "FR", multiline=False)

        assert "{" not in result
        assert result.startswith("10 rue de Rivoli, ")

    def test_validate_address(self, formatter):
        result = formatter.validate_address(
            {"street": "1 Main St", "city": "Springfield", "postalCode": "ABC"}, "en", "US"
        )

        assert result.is_valid is False
        assert result.missing_fields == ["state"]
        assert result.errors == ["Invalid postal code for US"]

    def test_validate_address_unknown_pair(self, formatter):
        result = formatter.validate_address({}, "de", "DE")
        assert result.errors == ["Unsupported market format: de_DE"]


class TestFormatterInfo:
    def test_convert_numbers(self):
        assert convert_numbers("123") == "١٢٣"
        assert convert_numbers("١٢٣", "arabic", "latin") == "123"

    def test_format_info_is_plain_data(self, formatter):
        info = formatter.get_format_info("fr", "FR")
        assert info["currency"]["position"] == "after"
        assert formatter.get_format_info("de", "DE") is None

    def test_available_formatters_use_native_names(self, formatter):
        names = {item["name"] for item in formatter.available_formatters()}
        assert "Français (MA)" in names
