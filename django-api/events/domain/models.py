"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).

Relations are optional: a relation that was not loaded is ``None``,
which is different from a loaded relation that happens to be empty.
"""

from dataclasses import dataclass
from datetime import datetime
from math import ceil

from events.domain.value_objects import EventId


@dataclass(frozen=True)
class User:
    """Domain representation of a referenced user."""

    id: int
    name: str
    email: str


@dataclass(frozen=True)
class Attendee:
    """Domain representation of an Attendee (event participation)."""

    id: int
    event_id: EventId
    user_id: int
    created_at: datetime
    updated_at: datetime
    user: User | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str | None
    start_at: datetime
    end_at: datetime
    user_id: int
    created_at: datetime
    updated_at: datetime
    user: User | None = None
    attendees: tuple[Attendee, ...] | None = None


@dataclass(frozen=True)
class EventDraft:
    """Validated input for a new event."""

    name: str
    start_at: datetime
    end_at: datetime
    description: str | None = None


@dataclass(frozen=True)
class Page:
    """One page of events, newest first."""

    items: tuple[Event, ...]
    page: int
    page_size: int
    total: int

    @property
    def last_page(self) -> int:
        return max(1, ceil(self.total / self.page_size))

    @property
    def first_item(self) -> int | None:
        """1-based position of the first item on this page."""
        if not self.items:
            return None
        return (self.page - 1) * self.page_size + 1

    @property
    def last_item(self) -> int | None:
        if not self.items:
            return None
        return (self.page - 1) * self.page_size + len(self.items)
