"""Layout direction (LTR/RTL) adaptation."""

from localization.direction.adaptor import DirectionAdaptor
from localization.direction.mapping import (
    EXCLUDED_ICON_MARKERS,
    LTR_TO_RTL_CLASSES,
    RTL_TO_LTR_CLASSES,
)
from localization.direction.sinks import (
    InMemoryStyleSink,
    NullStyleSink,
    StyleSink,
    UINode,
)

__all__ = [
    "DirectionAdaptor",
    "EXCLUDED_ICON_MARKERS",
    "LTR_TO_RTL_CLASSES",
    "RTL_TO_LTR_CLASSES",
    "InMemoryStyleSink",
    "NullStyleSink",
    "StyleSink",
    "UINode",
]
