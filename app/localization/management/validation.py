"""Translation validation rules.

Each rule inspects one TranslationValue and returns a RuleResult. The
default rule set checks required text, unsafe HTML, placeholder
declarations and per-context length limits.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

from localization.i18n.models import TranslationValue

MAX_VALUE_LENGTH = 500
MAX_PLACEHOLDERS = 5

DANGEROUS_TAGS: Tuple[str, ...] = ("script", "iframe", "object", "embed", "link")
DANGEROUS_ATTRIBUTES: Tuple[str, ...] = ("onclick", "onload", "onerror", "javascript:")

# context -> (max, recommended)
CONTEXT_LENGTH_LIMITS: Dict[str, Tuple[int, int]] = {
    "button": (30, 20),
    "title": (100, 60),
    "description": (300, 200),
    "placeholder": (50, 30),
    "tooltip": (80, 50),
}


@dataclass
class RuleResult:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass
class TranslationValidation:
    """Outcome of running every rule on one translation.

    Attributes:
        key: Translation key.
        is_valid: False when any rule reported an error.
        errors: Blocking problems.
        warnings: Non-blocking problems.
        suggestions: Improvement hints.
    """

    key: str
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


ValidationRule = Callable[[TranslationValue], RuleResult]


def check_required_fields(value: TranslationValue) -> RuleResult:
    result = RuleResult()
    if not value.value or not value.value.strip():
        result.errors.append("Translation value is required")
    elif len(value.value) > MAX_VALUE_LENGTH:
        result.errors.append(f"Value must not exceed {MAX_VALUE_LENGTH} characters")
    return result


def check_html_safety(value: TranslationValue) -> RuleResult:
    """Reject script-capable tags and inline event handlers."""
    result = RuleResult()
    text = value.value or ""
    for tag in DANGEROUS_TAGS:
        if re.search(rf"<{tag}[^>]*>", text, re.IGNORECASE):
            result.errors.append(f"Dangerous tag detected: {tag}")
    lowered = text.lower()
    for attribute in DANGEROUS_ATTRIBUTES:
        if attribute in lowered:
            result.errors.append(f"Dangerous attribute detected: {attribute}")
    return result


def check_placeholders(value: TranslationValue) -> RuleResult:
    """Placeholders must be declared when the value declares variables.

    Values without declared variables accept any placeholder.
    """
    result = RuleResult()
    placeholders = value.placeholders()
    if value.variables:
        for name in placeholders:
            if name not in value.variables:
                result.errors.append(f"Placeholder {{{name}}} not declared in variables")
    if len(placeholders) > MAX_PLACEHOLDERS:
        result.warnings.append("Too many placeholders in this translation")
        result.suggestions.append("Consider splitting it into several keys")
    return result


def check_length_limits(value: TranslationValue) -> RuleResult:
    result = RuleResult()
    limits = CONTEXT_LENGTH_LIMITS.get(value.context or "")
    if not limits or not value.value:
        return result

    maximum, recommended = limits
    length = len(value.value)
    if length > maximum:
        result.errors.append(f"Text too long for context {value.context} (max: {maximum})")
    elif length > recommended:
        result.warnings.append(
            f"Text long for context {value.context} (recommended: {recommended})"
        )
    return result


DEFAULT_RULES: Dict[str, ValidationRule] = {
    "required_fields": check_required_fields,
    "html_safety": check_html_safety,
    "placeholders": check_placeholders,
    "length_limits": check_length_limits,
}


def validate(
    key: str, value: TranslationValue, rules: Dict[str, ValidationRule]
) -> TranslationValidation:
    """Run every rule and merge the results."""
    validation = TranslationValidation(key=key)
    for rule in rules.values():
        result = rule(value)
        validation.errors.extend(result.errors)
        validation.warnings.extend(result.warnings)
        validation.suggestions.extend(result.suggestions)
    validation.is_valid = not validation.errors
    return validation
