"""Direction adaptor: LTR/RTL state machine driving a style sink."""

from dataclasses import replace
from typing import Dict, FrozenSet, Iterable, List, Optional, Set

from localization.direction.mapping import (
    LTR_TO_RTL_CLASSES,
    RECOMMENDED_RTL_CLASSES,
    RTL_TO_LTR_CLASSES,
    is_excluded_icon,
)
from localization.direction.sinks import NullStyleSink, StyleSink, UINode
from localization.i18n.listeners import Listener, ListenerSet
from localization.i18n.models import DirectionState, Language, TextDirection
from localization.logging import get_module_logger

logger = get_module_logger()


class DirectionAdaptor:
    """Tracks the layout direction and applies it through a StyleSink.

    The state changes only when the writing direction of the active
    language changes. Sink operations the hosting UI cannot perform are
    logged; the state still updates and listeners still fire.

    Attributes:
        sink: Style sink receiving layout changes.
    """

    def __init__(
        self,
        sink: Optional[StyleSink] = None,
        enabled: bool = True,
        mirror_icons: bool = True,
        mirror_numbers: bool = False,
    ):
        self.sink = sink or NullStyleSink()
        self._state = DirectionState(
            enabled=enabled,
            current_direction=TextDirection.LTR,
            mirror_icons=mirror_icons,
            mirror_numbers=mirror_numbers,
        )
        self._language: str = ""
        self._icons: Dict[str, UINode] = {}
        self._mirrored: Set[str] = set()
        # True while the sink holds the RTL class swap
        self._rtl_applied = False
        self._listeners = ListenerSet("direction")

    @property
    def state(self) -> DirectionState:
        """Copy of the current state."""
        return replace(self._state)

    @property
    def mirror_set(self) -> FrozenSet[str]:
        """Ids of icons currently mirrored."""
        return frozenset(self._mirrored)

    def is_rtl(self) -> bool:
        return self._state.current_direction == TextDirection.RTL

    def add_listener(self, listener: Listener) -> None:
        self._listeners.add(listener)

    def remove_listener(self, listener: Listener) -> bool:
        return self._listeners.remove(listener)

    def handle_language_change(self, language: Language) -> bool:
        """React to a new active language.

        Args:
            language: The new active language.

        Returns:
            True if the direction changed (listeners were notified).
        """
        self._language = language.code
        direction = language.direction
        if direction == self._state.current_direction:
            return False

        self._state.current_direction = direction
        if self._state.enabled:
            self._apply_direction()

        logger.info(
            "direction_changed",
            language=language.code,
            direction=direction.value,
            enabled=self._state.enabled,
        )
        self._listeners.notify()
        return True

    def set_enabled(self, enabled: bool) -> None:
        """Turn RTL handling on or off; listeners are always notified."""
        self._state.enabled = enabled
        if enabled:
            self._apply_direction()
        elif self.is_rtl():
            self._reset_to_ltr()
        self._listeners.notify()

    def update_settings(
        self,
        enabled: Optional[bool] = None,
        mirror_icons: Optional[bool] = None,
        mirror_numbers: Optional[bool] = None,
        current_direction: Optional[TextDirection] = None,
    ) -> None:
        """Change settings and re-apply the direction; listeners are always notified."""
        if enabled is not None:
            self._state.enabled = enabled
        if mirror_icons is not None:
            self._state.mirror_icons = mirror_icons
        if mirror_numbers is not None:
            self._state.mirror_numbers = mirror_numbers
        if current_direction is not None:
            self._state.current_direction = current_direction

        if enabled is not None or current_direction is not None or mirror_icons is not None:
            if self._state.enabled:
                self._apply_direction()
            else:
                self._reset_to_ltr()
        self._listeners.notify()

    def adapt(self, node: UINode) -> Set[str]:
        """Adapt a newly mounted UI tree to the current direction.

        Icons in the tree are tracked so later transitions cover them.

        Args:
            node: Root of the mounted tree.

        Returns:
            Ids of icons mirrored by this call.
        """
        icons = [item for item in node.walk() if item.is_icon]
        for icon in icons:
            self._icons[icon.node_id] = icon

        if not (self._state.enabled and self.is_rtl() and self._state.mirror_icons):
            return set()

        newly_mirrored = self._mirrorable(icons) - self._mirrored
        if newly_mirrored:
            self._mirrored |= newly_mirrored
            self._sink_call("set_mirrored", sorted(newly_mirrored))
        return newly_mirrored

    def forget(self, node_id: str) -> None:
        """Stop tracking an unmounted element."""
        self._icons.pop(node_id, None)
        self._mirrored.discard(node_id)

    def recommended_classes(self, element_type: str) -> List[str]:
        return list(RECOMMENDED_RTL_CLASSES.get(element_type, []))

    def conditional_classes(self, base_classes: Iterable[str], element_type: str) -> str:
        """Base classes, plus the recommended RTL classes when RTL is active."""
        classes = list(base_classes)
        if self.is_rtl():
            classes.extend(self.recommended_classes(element_type))
        return " ".join(classes)

    def _mirrorable(self, icons: Iterable[UINode]) -> Set[str]:
        return {icon.node_id for icon in icons if not is_excluded_icon(icon.classes)}

    def _apply_direction(self) -> None:
        if self.is_rtl():
            self._enter_rtl()
        else:
            self._reset_to_ltr()

    def _enter_rtl(self) -> None:
        if not self._rtl_applied:
            self._sink_call("set_document_direction", TextDirection.RTL, self._language)
            self._sink_call("apply_class_mapping", LTR_TO_RTL_CLASSES)
            self._rtl_applied = True
        if self._state.mirror_icons:
            self._mirrored = self._mirrorable(self._icons.values())
            self._sink_call("set_mirrored", sorted(self._mirrored))
        elif self._mirrored:
            self._mirrored.clear()
            self._sink_call("clear_mirroring")

    def _reset_to_ltr(self) -> None:
        if not self._rtl_applied:
            return
        self._rtl_applied = False
        self._sink_call("set_document_direction", TextDirection.LTR, self._language)
        self._sink_call("apply_class_mapping", RTL_TO_LTR_CLASSES)
        self._mirrored.clear()
        self._sink_call("clear_mirroring")

    def _sink_call(self, operation: str, *args) -> None:
        try:
            getattr(self.sink, operation)(*args)
        except NotImplementedError:
            logger.warning(
                "style_sink_operation_unsupported",
                operation=operation,
                sink=type(self.sink).__name__,
            )
