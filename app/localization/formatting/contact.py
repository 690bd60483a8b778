"""Phone number and postal address formatting and validation."""

import re
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from localization.formatting.profiles import FormatProfile

UNRESOLVED_PLACEHOLDER = re.compile(r"\{[^}]+\}")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NON_DIGITS = re.compile(r"\D")


@dataclass
class AddressValidation:
    """Result of validating an address against a market's rules."""

    is_valid: bool
    missing_fields: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def digits_only(phone: str) -> str:
    return NON_DIGITS.sub("", phone)


def group_phone(digits: str, country_code: str) -> Optional[str]:
    """Group national digits by the country's template.

    Returns:
        The grouped number with country code, or None when the digit count
        does not fit the template.
    """
    if country_code in ("+33", "+212") and len(digits) == 9:
        return (
            f"{country_code} {digits[0]} {digits[1:3]} {digits[3:5]} "
            f"{digits[5:7]} {digits[7:]}"
        )
    if country_code == "+1" and len(digits) == 10:
        return f"+1 ({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if country_code == "+34" and len(digits) == 9:
        return f"+34 {digits[:2]} {digits[2:5]} {digits[5:7]} {digits[7:]}"
    return None


def format_phone(
    phone: str,
    profile: FormatProfile,
    include_country_code: bool = True,
    mask: bool = False,
) -> str:
    """Format a phone number for a profile.

    Args:
        phone: Raw number; every non-digit is dropped.
        profile: Format profile of the pair.
        include_country_code: Prefix ungrouped numbers with the country code.
        mask: Return the profile's example mask instead.

    Returns:
        The grouped number, or the country code and raw digits when the
        digit count does not match the country's template.
    """
    if mask:
        return profile.phone.mask

    digits = digits_only(phone)
    grouped = group_phone(digits, profile.phone.country_code)
    if grouped is not None:
        return grouped
    return f"{profile.phone.country_code} {digits}" if include_country_code else digits


def format_address(
    address: Mapping[str, Optional[str]],
    template: str,
    include_country: bool = True,
    multiline: bool = True,
) -> str:
    """Fill an address template.

    Unresolved placeholders are removed. In multiline mode blank lines are
    dropped; otherwise the non-blank lines are joined with ", ".
    """
    formatted = template
    for name, value in address.items():
        if not value or (name == "country" and not include_country):
            continue
        formatted = formatted.replace(f"{{{name}}}", str(value))

    formatted = UNRESOLVED_PLACEHOLDER.sub("", formatted)
    lines = [line.strip() for line in formatted.split("\n") if line.strip()]
    if multiline:
        return "\n".join(lines)
    return ", ".join(lines)


def is_valid_postal_code(code: str, profile: FormatProfile) -> bool:
    return re.match(profile.address.postal_pattern, code.strip()) is not None


def is_valid_phone(phone: str, profile: Optional[FormatProfile]) -> bool:
    """Validate international digits (country code included).

    Markets without a pattern accept any number of at least 10 digits.
    """
    digits = digits_only(phone)
    pattern = profile.phone.phone_pattern if profile else None
    if not pattern:
        return len(digits) >= 10
    return re.match(pattern, digits) is not None


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email.strip()) is not None


def validate_address(
    address: Mapping[str, Optional[str]], profile: FormatProfile
) -> AddressValidation:
    """Check required fields and the postal code, phone and email formats."""
    missing_fields = [
        name
        for name in profile.address.required_fields
        if not (address.get(name) or "").strip()
    ]

    errors: List[str] = []
    for name, value in address.items():
        if not value or not value.strip():
            continue
        if name == "postalCode":
            if not is_valid_postal_code(value, profile):
                errors.append(f"Invalid postal code for {profile.market}")
        elif name == "phone":
            if not is_valid_phone(value, profile):
                errors.append("Invalid phone number")
        elif name == "email":
            if not is_valid_email(value):
                errors.append("Invalid email address")

    return AddressValidation(
        is_valid=not missing_fields and not errors,
        missing_fields=missing_fields,
        errors=errors,
    )
