from typing import Optional


class FsxWindowsError(Exception):
    """Base class for errors raised by the FSx for Windows constructs"""


class ValidationError(FsxWindowsError, ValueError):
    """
    A file system property violates one of its constraints.
    Raised before any resource is added to the construct tree.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class TimeRangeError(ValidationError):
    """An hour or minute of a scheduled time is out of range"""
