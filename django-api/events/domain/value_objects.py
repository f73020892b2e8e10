"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("EventId must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"Not a valid event id: {value!r}")
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TimeWindow:
    """Start and end of an event; the end is strictly after the start."""

    start_at: datetime
    end_at: datetime

    def __post_init__(self) -> None:
        if self.end_at <= self.start_at:
            raise ValueError("end_at must be after start_at")
