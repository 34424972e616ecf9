from dataclasses import dataclass
from enum import Enum


class ReporterState(str, Enum):
    WAITING_FOR_READY = "waiting_for_ready"
    WAITING_FOR_LOAD = "waiting_for_load"
    DONE = "done"


@dataclass(frozen=True)
class PageLoadTiming:
    """Navigation timestamps for one page view, in epoch milliseconds."""

    navigation_start_ms: int
    load_event_end_ms: int

    @property
    def elapsed_ms(self) -> int:
        return self.load_event_end_ms - self.navigation_start_ms
