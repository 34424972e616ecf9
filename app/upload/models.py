from dataclasses import dataclass
from enum import Enum

from app.upload.exceptions import InvalidInputError


class FileCategory(str, Enum):
    """Coarse kind of an uploaded file, derived from its name."""

    IMAGE = "image"
    PDF_DOCUMENT = "pdf_document"
    GENERIC = "generic"


@dataclass(frozen=True)
class UploadEvent:
    """One uploaded blob as delivered by the storage-event host."""

    file_name: str
    content: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.file_name, str):
            raise InvalidInputError(
                f"file_name must be a string, got {type(self.file_name).__name__}"
            )
        if not self.file_name:
            raise InvalidInputError("file_name must not be empty")
        if not isinstance(self.content, (bytes, bytearray, memoryview)):
            raise InvalidInputError(
                f"content must be a byte sequence, got {type(self.content).__name__}"
            )
        object.__setattr__(self, "content", bytes(self.content))

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class UploadSummary:
    """What a single notifier invocation observed."""

    file_name: str
    size_bytes: int
    category: FileCategory
    processed_at: str
