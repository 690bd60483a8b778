"""Plural category selection and the plural-marker transform.

The marker transform is a heuristic: a stored value is treated as plural
when it ends with the language's marker. It is right for regular French,
English and Spanish nouns and wrong for irregular plurals and for Arabic,
whose plurals are not suffix-based.
"""

from typing import Callable, Dict

from localization.i18n.models import PluralCategory

PluralRule = Callable[[int], PluralCategory]


def _one_other(count: int) -> PluralCategory:
    return PluralCategory.ONE if count == 1 else PluralCategory.OTHER


def _french(count: int) -> PluralCategory:
    if count == 0:
        return PluralCategory.ZERO
    if count == 1:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def _arabic(count: int) -> PluralCategory:
    if count == 0:
        return PluralCategory.ZERO
    if count == 1:
        return PluralCategory.ONE
    if count == 2:
        return PluralCategory.TWO
    if 3 <= count <= 10:
        return PluralCategory.FEW
    if count >= 11:
        return PluralCategory.MANY
    return PluralCategory.OTHER


PLURAL_RULES: Dict[str, PluralRule] = {
    "fr": _french,
    "ar": _arabic,
    "en": _one_other,
    "es": _one_other,
}

PLURAL_MARKERS: Dict[str, str] = {"fr": "s", "ar": "s", "en": "s", "es": "s"}
DEFAULT_PLURAL_MARKER = "s"


def plural_category(count: int, language: str) -> PluralCategory:
    """Select the plural category for a count.

    Args:
        count: Item count.
        language: Language code; unknown languages use the one/other rule.

    Returns:
        The PluralCategory.
    """
    return PLURAL_RULES.get(language, _one_other)(count)


def apply_plural(value: str, count: int, language: str) -> str:
    """Adjust a value's plural marker for a count.

    Singular (``one``) strips a trailing marker; every other category
    appends the marker when missing. Applying twice gives the same result.

    Example:
        >>> apply_plural("articles", 1, "fr")
        'article'
        >>> apply_plural("article", 3, "fr")
        'articles'
    """
    marker = PLURAL_MARKERS.get(language, DEFAULT_PLURAL_MARKER)
    if not marker:
        return value

    category = plural_category(count, language)
    if category == PluralCategory.ONE:
        if value.endswith(marker):
            return value[: -len(marker)]
        return value
    if not value.endswith(marker):
        return value + marker
    return value
