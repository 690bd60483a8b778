"""Detect a visitor's language and market from request data.

Language comes from the Accept-Language header; market comes from
coordinates checked against per-market bounding boxes.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from localization.logging import get_module_logger

logger = get_module_logger()

# (min_lat, max_lat, min_lng, max_lng), checked in order
MARKET_BOUNDING_BOXES: Dict[str, Tuple[float, float, float, float]] = {
    "MA": (30.0, 36.0, -12.0, -1.0),
    "FR": (42.0, 51.0, -5.0, 8.0),
    "US": (25.0, 49.0, -125.0, -66.0),
    "ES": (35.0, 44.0, -10.0, 4.0),
}


def parse_accept_language(accept_language: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into tags by descending quality.

    "en-US,en;q=0.9,fr-FR;q=0.8" -> ["en-US", "en", "fr-FR"]. Entries with
    q=0 are dropped.
    """
    if not accept_language:
        return []

    preferences: List[Tuple[str, float, int]] = []
    for position, part in enumerate(accept_language.split(",")):
        lang_range = part.split(";")[0].strip()
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0
        if quality <= 0:
            continue
        preferences.append((lang_range, quality, position))

    preferences.sort(key=lambda pref: (-pref[1], pref[2]))
    return [lang_range for lang_range, _, _ in preferences]


def detect_language(
    accept_language: Optional[str],
    supported: Sequence[str],
    default: str,
) -> str:
    """Pick the best supported language for an Accept-Language header.

    Args:
        accept_language: Header value (may be None or empty).
        supported: Supported language codes.
        default: Returned when nothing matches.

    Returns:
        A supported language code, or default.
    """
    supported_codes = {code.lower(): code for code in supported}
    for lang_range in parse_accept_language(accept_language):
        # "fr-CA" matches "fr"
        primary = lang_range.split("-")[0].lower()
        if primary in supported_codes:
            logger.debug("language_detected", requested=lang_range, language=primary)
            return supported_codes[primary]

    logger.debug("language_detection_defaulted", header=accept_language, default=default)
    return default


def detect_market(latitude: float, longitude: float) -> Optional[str]:
    """Map coordinates to a market code.

    Boxes overlap (northern Morocco and southern Spain), so the first
    matching box in MARKET_BOUNDING_BOXES order wins.

    Returns:
        The market code, or None outside every box.
    """
    for market, (min_lat, max_lat, min_lng, max_lng) in MARKET_BOUNDING_BOXES.items():
        if min_lat <= latitude <= max_lat and min_lng <= longitude <= max_lng:
            return market
    return None
