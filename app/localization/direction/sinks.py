"""Style sinks: where the direction adaptor sends layout changes.

The hosting UI supplies a StyleSink. Operations a sink cannot perform raise
NotImplementedError; the adaptor logs them and carries on.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from localization.i18n.models import TextDirection


@dataclass
class UINode:
    """A UI element handed to DirectionAdaptor.adapt().

    Attributes:
        node_id: Stable identifier of the element.
        classes: Style classes of the element.
        is_icon: Whether the element is an icon or graphic.
        children: Child elements.
    """

    node_id: str
    classes: List[str] = field(default_factory=list)
    is_icon: bool = False
    children: List["UINode"] = field(default_factory=list)

    def walk(self):
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


class StyleSink:
    """Interface to the hosting UI's layout.

    Every operation raises NotImplementedError unless overridden.
    """

    def set_document_direction(self, direction: TextDirection, language: str) -> None:
        raise NotImplementedError

    def apply_class_mapping(self, mapping: Dict[str, str]) -> None:
        raise NotImplementedError

    def set_mirrored(self, node_ids: Iterable[str]) -> None:
        raise NotImplementedError

    def clear_mirroring(self) -> None:
        raise NotImplementedError


class NullStyleSink(StyleSink):
    """Sink for headless contexts; accepts and ignores everything."""

    def set_document_direction(self, direction: TextDirection, language: str) -> None:
        pass

    def apply_class_mapping(self, mapping: Dict[str, str]) -> None:
        pass

    def set_mirrored(self, node_ids: Iterable[str]) -> None:
        pass

    def clear_mirroring(self) -> None:
        pass


class InMemoryStyleSink(StyleSink):
    """Records every call; used by tests and server-side rendering."""

    def __init__(self):
        self.direction: Optional[TextDirection] = None
        self.language: Optional[str] = None
        self.mappings: List[Dict[str, str]] = []
        self.mirrored: Set[str] = set()
        self.clear_count = 0

    def set_document_direction(self, direction: TextDirection, language: str) -> None:
        self.direction = direction
        self.language = language

    def apply_class_mapping(self, mapping: Dict[str, str]) -> None:
        self.mappings.append(dict(mapping))

    def set_mirrored(self, node_ids: Iterable[str]) -> None:
        self.mirrored.update(node_ids)

    def clear_mirroring(self) -> None:
        self.mirrored.clear()
        self.clear_count += 1
