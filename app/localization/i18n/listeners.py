"""Change listener registry shared by the service and the direction adaptor."""

from typing import Callable, List

from localization.logging import get_module_logger

logger = get_module_logger()

Listener = Callable[[], None]


class ListenerSet:
    """Zero-argument callbacks registered by reference.

    notify() iterates a snapshot, so listeners may add or remove listeners
    while being called. A listener that raises is logged and the remaining
    listeners still run.
    """

    def __init__(self, name: str):
        self.name = name
        self._listeners: List[Listener] = []

    def add(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove(self, listener: Listener) -> bool:
        """Unregister a listener. Returns False if it was not registered."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def notify(self) -> int:
        """Call every listener once.

        Returns:
            Number of listeners that completed without raising.
        """
        completed = 0
        for listener in list(self._listeners):
            try:
                listener()
                completed += 1
            except Exception as e:
                logger.error(
                    "listener_failed",
                    listener_set=self.name,
                    listener=getattr(listener, "__name__", repr(listener)),
                    error=str(e),
                    exc_info=True,
                )
        return completed

    def __len__(self) -> int:
        return len(self._listeners)
