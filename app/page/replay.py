import json
from pathlib import Path
from typing import Any

from app.logging.sinks import LogSink
from app.page.lifecycle import LocalPageLifecycle
from app.page.reporter import DEFAULT_READY_MESSAGE, PageLoadReporter
from app.page.timing import NavigationTimingProvider


def load_timing_record(path: Path) -> dict[str, Any] | None:
    """Read a navigation-timing JSON record.

    Accepts either the bare ``performance.timing`` object or a wrapper
    ``{"timing": {...}}``. A JSON ``null`` means no timing facility.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and "timing" in data:
        data = data["timing"]
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Timing record in {path} must be a JSON object")
    return data


def replay_page_view(
    path: Path,
    sink: LogSink,
    ready_message: str = DEFAULT_READY_MESSAGE,
) -> PageLoadReporter:
    """Run one page view through a reporter using the recorded timing."""
    lifecycle = LocalPageLifecycle()
    reporter = PageLoadReporter(
        sink=sink,
        timing_provider=NavigationTimingProvider(load_timing_record(path)),
        ready_message=ready_message,
    )
    reporter.register(lifecycle)
    lifecycle.run_page_view()
    return reporter
