"""Date and time rendering through Babel.

Style selectors map onto field-presence rules:
    short  - numeric day and month, 2-digit year
    medium - abbreviated month name
    long   - full month name
    full   - full month name and weekday
"""

import re
from datetime import date, datetime, time, timezone
from typing import Optional, Union

import pytz
from babel import dates as babel_dates

DateInput = Union[datetime, date, str, int, float]

DATE_STYLES = ("short", "medium", "long", "full")

CUSTOM_TOKENS = (
    ("yyyy", "%Y"),
    ("MM", "%m"),
    ("dd", "%d"),
    ("HH", "%H"),
    ("mm", "%M"),
    ("ss", "%S"),
)


def to_datetime(value: DateInput) -> datetime:
    """Coerce supported inputs to a datetime.

    Strings are parsed as ISO 8601; numbers are epoch seconds (UTC); dates
    become midnight.

    Raises:
        ValueError: If a string is not ISO 8601.
        TypeError: For unsupported input types.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    raise TypeError(f"Unsupported date value: {value!r}")


def in_timezone(value: datetime, tz_name: Optional[str]) -> datetime:
    """Convert to a named timezone. Naive datetimes are taken as UTC."""
    if not tz_name:
        return value
    target = pytz.timezone(tz_name)
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    return value.astimezone(target)


def time_pattern(hour12: bool, include_seconds: bool) -> str:
    if hour12:
        return "h:mm:ss a" if include_seconds else "h:mm a"
    return "HH:mm:ss" if include_seconds else "HH:mm"


def date_pattern(style: str, locale_tag: str) -> str:
    """CLDR pattern for a date style; short always uses a 2-digit year.

    Example:
        >>> date_pattern("short", "fr_FR")
        'dd/MM/yy'
    """
    pattern = babel_dates.get_date_format(style, locale=locale_tag).pattern
    if style == "short":
        pattern = re.sub(r"y+", "yy", pattern)
    return pattern


def render_date(value: datetime, style: str, locale_tag: str) -> str:
    """Render the date part of a datetime in one of DATE_STYLES.

    Raises:
        ValueError: If the style is unknown.
    """
    if style not in DATE_STYLES:
        raise ValueError(f"Unknown date style: {style}")
    pattern = date_pattern(style, locale_tag)
    return babel_dates.format_date(value, format=pattern, locale=locale_tag)


def render_time(
    value: datetime,
    locale_tag: str,
    hour12: Optional[bool] = None,
    include_seconds: bool = False,
) -> str:
    """Render the time part; hour12=None keeps the locale's own clock."""
    if hour12 is None:
        style = "medium" if include_seconds else "short"
        return babel_dates.format_time(value, format=style, locale=locale_tag)
    return babel_dates.format_time(
        value, format=time_pattern(hour12, include_seconds), locale=locale_tag
    )


def render_custom(value: datetime, pattern: str) -> str:
    """Substitute yyyy, MM, dd, HH, mm, ss (first occurrence of each).

    Example:
        >>> render_custom(datetime(2024, 1, 15, 9, 5), "dd/MM/yyyy HH:mm")
        '15/01/2024 09:05'
    """
    result = pattern
    for token, directive in CUSTOM_TOKENS:
        result = result.replace(token, value.strftime(directive), 1)
    return result
