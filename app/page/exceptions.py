class PageReportError(Exception):
    """Base exception for all page-load reporting errors."""


class MissingCapabilityError(PageReportError):
    """Raised when the environment cannot supply navigation timing."""


class LifecycleStateError(PageReportError):
    """Raised when a lifecycle callback fires out of order or more than once."""
