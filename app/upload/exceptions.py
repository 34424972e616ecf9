class UploadError(Exception):
    """Base exception for all upload-notification errors."""


class InvalidInputError(UploadError):
    """Raised when a triggering event is missing its file name or content."""


class UnreadableBlobError(UploadError):
    """Raised when a blob cannot be read from the container directory."""
