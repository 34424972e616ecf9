from app.logging.logger import Log
from app.logging.sinks import LogSink
from app.page.exceptions import LifecycleStateError, MissingCapabilityError
from app.page.lifecycle import DOM_CONTENT_LOADED, LOAD, PageLifecycle
from app.page.models import ReporterState
from app.page.timing import TimingProvider

DEFAULT_READY_MESSAGE = "Static website loaded via Azure CDN"


class PageLoadReporter:
    """Logs a ready message, then the page load time once everything is loaded.

    The load callback is only subscribed from inside the ready callback, so
    the two always run in order: WAITING_FOR_READY -> WAITING_FOR_LOAD -> DONE.
    """

    def __init__(
        self,
        sink: LogSink,
        timing_provider: TimingProvider,
        ready_message: str = DEFAULT_READY_MESSAGE,
    ) -> None:
        self._sink = sink
        self._timing_provider = timing_provider
        self._ready_message = ready_message
        self._lifecycle: PageLifecycle | None = None
        self.state = ReporterState.WAITING_FOR_READY

    def register(self, lifecycle: PageLifecycle) -> None:
        self._lifecycle = lifecycle
        lifecycle.subscribe(DOM_CONTENT_LOADED, self.on_ready)

    def on_ready(self) -> None:
        self._expect(ReporterState.WAITING_FOR_READY, "ready")
        self._sink.write(self._ready_message)
        self.state = ReporterState.WAITING_FOR_LOAD
        if self._lifecycle is not None:
            self._lifecycle.subscribe(LOAD, self.on_loaded)

    def on_loaded(self) -> None:
        self._expect(ReporterState.WAITING_FOR_LOAD, "load")
        try:
            timing = self._timing_provider.read()
        except MissingCapabilityError as exc:
            Log.warning(f"Page load time unavailable: {exc}")
            raise
        self._sink.write(f"Page load time: {timing.elapsed_ms}ms")
        self.state = ReporterState.DONE

    def _expect(self, state: ReporterState, callback: str) -> None:
        if self.state != state:
            raise LifecycleStateError(
                f"{callback} callback fired in state {self.state.value}, expected {state.value}"
            )
