import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from app.page.exceptions import MissingCapabilityError
from app.page.models import PageLoadTiming


class TimingProvider(ABC):
    """Contract for anything that can report navigation timing."""

    @abstractmethod
    def read(self) -> PageLoadTiming:
        """Return the timing of the current page view.

        Raises:
            MissingCapabilityError: if timing is unavailable or malformed.
        """


class NavigationTimingProvider(TimingProvider):
    """Reads a ``performance.timing``-shaped mapping.

    ``None`` stands for an environment without a timing facility.
    """

    REQUIRED_FIELDS: tuple[str, str] = ("navigationStart", "loadEventEnd")

    def __init__(self, performance_timing: Mapping[str, Any] | None) -> None:
        self._performance_timing = performance_timing

    def read(self) -> PageLoadTiming:
        if self._performance_timing is None:
            raise MissingCapabilityError("navigation timing facility is not available")
        start, end = (self._field(name) for name in self.REQUIRED_FIELDS)
        timing = PageLoadTiming(navigation_start_ms=start, load_event_end_ms=end)
        # loadEventEnd stays 0 until the load event has finished.
        if timing.elapsed_ms < 0:
            raise MissingCapabilityError(
                f"load has not finished (navigationStart={start}, loadEventEnd={end})"
            )
        return timing

    def _field(self, name: str) -> int:
        value = self._performance_timing.get(name) if self._performance_timing else None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MissingCapabilityError(f"navigation timing field '{name}' is missing")
        if not math.isfinite(value):
            raise MissingCapabilityError(f"navigation timing field '{name}' is not finite: {value}")
        return int(value)


class StaticTimingProvider(TimingProvider):
    """Always returns the same timing."""

    def __init__(self, timing: PageLoadTiming) -> None:
        self._timing = timing

    def read(self) -> PageLoadTiming:
        return self._timing
