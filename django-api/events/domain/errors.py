"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_TIME_WINDOW = "INVALID_TIME_WINDOW"
    VALIDATION_ERROR = "VALIDATION_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        object.__setattr__(self, "event_id", event_id)


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )
        object.__setattr__(self, "event_id", event_id)


class InvalidTimeWindowError(DomainError):
    """Raised when an event would end at or before its start."""

    field = "end_at"

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_WINDOW,
            message="The end at field must be a date after start at.",
        )
