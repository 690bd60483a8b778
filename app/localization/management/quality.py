"""Translation quality scoring and progress tiers."""

import re
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Set

from localization.i18n.models import TranslationValue
from localization.management.validation import ValidationRule, validate

TERMINAL_PUNCTUATION = re.compile(r"[.!?]$")

# (lower bound, tier), checked in order
QUALITY_TIERS = (
    (95, "excellent"),
    (85, "good"),
    (70, "fair"),
    (50, "poor"),
)


@dataclass
class QualityMetrics:
    """Quality scores in percent.

    overall = 0.4 * completeness + 0.2 * consistency
              + 0.3 * accuracy + 0.1 * formatting
    """

    completeness: float = 0.0
    consistency: float = 0.0
    accuracy: float = 0.0
    formatting: float = 0.0
    overall: float = 0.0


def quality_tier(percentage: float) -> str:
    for threshold, tier in QUALITY_TIERS:
        if percentage >= threshold:
            return tier
    return "incomplete"


def all_placeholders(translations: Mapping[str, TranslationValue]) -> Set[str]:
    names: Set[str] = set()
    for value in translations.values():
        names.update(value.placeholders())
    return names


def formatting_issues(key: str, value: TranslationValue) -> int:
    """ui.* texts must end with punctuation; title keys must be capitalized."""
    text = value.value
    if not text:
        return 0
    issues = 0
    if key.startswith("ui.") and not TERMINAL_PUNCTUATION.search(text):
        issues += 1
    if "title" in key and text[0] != text[0].upper():
        issues += 1
    return issues


def compute_metrics(
    translations: Mapping[str, TranslationValue],
    rules: Dict[str, ValidationRule],
    reference: Optional[Mapping[str, TranslationValue]] = None,
) -> QualityMetrics:
    """Score a set of translations.

    Args:
        translations: Key to value mapping to score.
        rules: Validation rules used for the accuracy score.
        reference: Optional reference set; any of its placeholders missing
            from ``translations`` drops consistency to 70.

    Returns:
        QualityMetrics, all zero for an empty mapping.
    """
    total = len(translations)
    if total == 0:
        return QualityMetrics()

    translated = sum(1 for value in translations.values() if value.value and value.value.strip())
    completeness = translated / total * 100

    consistency = 100.0
    if reference is not None:
        missing = all_placeholders(reference) - all_placeholders(translations)
        consistency = 70.0 if missing else 100.0

    invalid = sum(
        1 for key, value in translations.items() if not validate(key, value, rules).is_valid
    )
    accuracy = (total - invalid) / total * 100

    issues = sum(formatting_issues(key, value) for key, value in translations.items())
    formatting = (total - issues) / total * 100

    overall = completeness * 0.4 + consistency * 0.2 + accuracy * 0.3 + formatting * 0.1
    return QualityMetrics(
        completeness=completeness,
        consistency=consistency,
        accuracy=accuracy,
        formatting=formatting,
        overall=overall,
    )
