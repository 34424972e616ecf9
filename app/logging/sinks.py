from abc import ABC, abstractmethod
from collections.abc import Callable

from app.logging.logger import Log


class LogSink(ABC):
    """Destination for the human-readable lines a component emits."""

    @abstractmethod
    def write(self, message: str) -> None:
        """Emit one line."""


class LoggerSink(LogSink):
    """Forwards lines to the application logger at info level."""

    def write(self, message: str) -> None:
        Log.info(message)


class CallableSink(LogSink):
    """Wraps a host-provided ``log(message)`` callable such as ``context.log``."""

    def __init__(self, log: Callable[[str], object]) -> None:
        self._log = log

    def write(self, message: str) -> None:
        self._log(message)


class MemorySink(LogSink):
    """Keeps every line in memory, in emission order."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, message: str) -> None:
        self.lines.append(message)
