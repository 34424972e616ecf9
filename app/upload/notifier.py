from collections.abc import Callable
from datetime import datetime, timezone

from app.logging.sinks import LogSink
from app.upload.classifier import classify
from app.upload.models import FileCategory, UploadEvent, UploadSummary

DETECTED_LINES: dict[FileCategory, str] = {
    FileCategory.IMAGE: "Image file detected: {name}",
    FileCategory.PDF_DOCUMENT: "PDF document detected: {name}",
    FileCategory.GENERIC: "Generic file detected: {name}",
}

COMPLETED_LINES: dict[FileCategory, str] = {
    FileCategory.IMAGE: "Image processing completed successfully",
    FileCategory.PDF_DOCUMENT: "PDF processing completed successfully",
    FileCategory.GENERIC: "File processing completed successfully",
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """Format as ``2024-01-02T03:04:05.678Z`` (UTC, millisecond precision)."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class UploadNotifier:
    """Reports an uploaded file: metadata, detected category, completion.

    Nothing is transformed; the category-specific "processing" is a status
    line only.
    """

    def __init__(
        self,
        sink: LogSink,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._sink = sink
        self._clock = clock

    def notify(self, event: UploadEvent) -> UploadSummary:
        """Emit the status lines for one upload and return what was observed."""
        name = event.file_name
        size_bytes = event.size_bytes
        timestamp = iso_timestamp(self._clock())

        self._sink.write(f"Processing file: {name}")
        self._sink.write(f"File size: {size_bytes} bytes")
        self._sink.write(f"Processing time: {timestamp}")

        category = classify(name)
        self._sink.write(DETECTED_LINES[category].format(name=name))
        self._sink.write(COMPLETED_LINES[category])

        self._sink.write(f"File processing workflow completed for: {name}")
        return UploadSummary(
            file_name=name,
            size_bytes=size_bytes,
            category=category,
            processed_at=timestamp,
        )
