from collections.abc import Callable, Mapping
from typing import Any, Protocol

from app.logging.sinks import CallableSink
from app.upload.exceptions import InvalidInputError
from app.upload.models import UploadEvent, UploadSummary
from app.upload.notifier import UploadNotifier


class InvocationContext(Protocol):
    """Host handle for one function invocation."""

    binding_data: Mapping[str, Any]

    def log(self, message: str) -> None: ...


class BlobInvocationContext:
    """Minimal invocation context for hosts that are not a cloud runtime."""

    def __init__(
        self,
        name: str,
        log: Callable[[str], object],
        **binding_data: Any,
    ) -> None:
        self.binding_data: dict[str, Any] = {"name": name, **binding_data}
        self._log = log

    def log(self, message: str) -> None:
        self._log(message)


def _read_blob(blob: Any) -> bytes:
    if isinstance(blob, (bytes, bytearray, memoryview)):
        return bytes(blob)
    read = getattr(blob, "read", None)
    if callable(read):
        data = read()
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
    raise InvalidInputError(
        f"blob must be bytes or a readable binary stream, got {type(blob).__name__}"
    )


def build_event(context: InvocationContext, blob: Any) -> UploadEvent:
    """Build an UploadEvent from the trigger inputs.

    Raises:
        InvalidInputError: if the binding has no name or the blob has no bytes.
    """
    binding_data = getattr(context, "binding_data", None) or {}
    if "name" not in binding_data:
        raise InvalidInputError("binding data has no 'name' for the triggering blob")
    if blob is None:
        raise InvalidInputError("triggering blob content is missing")
    return UploadEvent(file_name=binding_data["name"], content=_read_blob(blob))


def handle_blob(context: InvocationContext, blob: Any) -> UploadSummary:
    """Storage-event trigger entry point: one call per uploaded blob."""
    event = build_event(context, blob)
    return UploadNotifier(CallableSink(context.log)).notify(event)
