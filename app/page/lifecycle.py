from abc import ABC, abstractmethod
from collections.abc import Callable

DOM_CONTENT_LOADED = "DOMContentLoaded"
LOAD = "load"

Callback = Callable[[], None]


class PageLifecycle(ABC):
    """Event hub for page lifecycle signals."""

    @abstractmethod
    def subscribe(self, event: str, callback: Callback) -> None:
        """Run ``callback`` when ``event`` fires."""


class LocalPageLifecycle(PageLifecycle):
    """In-process lifecycle: events are dispatched explicitly, one at a time."""

    EVENTS: tuple[str, ...] = (DOM_CONTENT_LOADED, LOAD)

    def __init__(self) -> None:
        self._callbacks: dict[str, list[Callback]] = {event: [] for event in self.EVENTS}

    def subscribe(self, event: str, callback: Callback) -> None:
        if event not in self._callbacks:
            raise ValueError(f"Unknown lifecycle event '{event}'. Choose from: {list(self.EVENTS)}")
        self._callbacks[event].append(callback)

    def dispatch(self, event: str) -> None:
        """Fire ``event``; callbacks subscribed while it runs wait for the next dispatch."""
        if event not in self._callbacks:
            raise ValueError(f"Unknown lifecycle event '{event}'. Choose from: {list(self.EVENTS)}")
        for callback in list(self._callbacks[event]):
            callback()

    def run_page_view(self) -> None:
        """Dispatch every event in platform order."""
        for event in self.EVENTS:
            self.dispatch(event)
