"""Static class tables for LTR/RTL layout mirroring."""

from typing import Dict, Iterable, List, Tuple

# Each pair is swapped both ways when the layout direction flips
SWAPPED_CLASS_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("text-left", "text-right"),
    ("float-left", "float-right"),
    ("border-l", "border-r"),
    ("border-l-2", "border-r-2"),
    ("left-0", "right-0"),
    ("left-4", "right-4"),
    ("pl-4", "pr-4"),
    ("ml-4", "mr-4"),
    ("pl-8", "pr-8"),
    ("ml-8", "mr-8"),
    ("translate-x-4", "-translate-x-4"),
    ("flex-row", "flex-row-reverse"),
    ("justify-start", "justify-end"),
)

# Icons whose direction carries meaning are never mirrored
EXCLUDED_ICON_MARKERS: Tuple[str, ...] = (
    "arrow-right",
    "chevron-right",
    "angle-right",
    "play",
    "forward",
    "next",
)

RECOMMENDED_RTL_CLASSES: Dict[str, List[str]] = {
    "button": ["rtl-mirror"],
    "navbar": ["rtl-swap-margins"],
    "dropdown": ["rtl-mirror"],
    "modal": ["rtl-mirror"],
    "form": ["rtl-swap-padding"],
    "text": ["text-right"],
    "icon": ["rtl-mirror"],
}


def build_swap_table(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    """Map every class of every pair to the other class of its pair."""
    table: Dict[str, str] = {}
    for first, second in pairs:
        table[first] = second
        table[second] = first
    return table


def check_involution(table: Dict[str, str]) -> None:
    """Ensure applying the table twice gives back every class.

    Raises:
        ValueError: If a class maps to itself, or its counterpart does not
            map back to it.
    """
    for name, counterpart in table.items():
        if name == counterpart:
            raise ValueError(f"Class maps to itself: {name}")
        if table.get(counterpart) != name:
            raise ValueError(f"Class table is not its own inverse at: {name} -> {counterpart}")


LTR_TO_RTL_CLASSES: Dict[str, str] = build_swap_table(SWAPPED_CLASS_PAIRS)
check_involution(LTR_TO_RTL_CLASSES)

# The swap is its own inverse
RTL_TO_LTR_CLASSES: Dict[str, str] = dict(LTR_TO_RTL_CLASSES)


def map_classes(classes: Iterable[str], table: Dict[str, str]) -> List[str]:
    """Replace every class found in the table; others are kept as is."""
    return [table.get(name, name) for name in classes]


def is_excluded_icon(classes: Iterable[str]) -> bool:
    """True if any class contains an excluded marker (case-insensitive)."""
    joined = " ".join(classes).lower()
    return any(marker in joined for marker in EXCLUDED_ICON_MARKERS)
