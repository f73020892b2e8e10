"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Iterable, Mapping
from typing import Any

from events.domain import Event, EventDraft, EventId, Page, TimeWindow
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidTimeWindowError,
)
from events.services.relations import ATTENDEES, DEFAULT_POLICY, USER, RelationPolicy
from events.stores.interfaces import EventStore


class EventService:
    """Service for event CRUD operations."""

    def __init__(
        self,
        store: EventStore,
        policy: RelationPolicy = DEFAULT_POLICY,
        show_relations: Iterable[str] = (USER, ATTENDEES),
    ) -> None:
        self._store = store
        self._policy = policy
        self._show_relations = frozenset(show_relations)

    def list_events(
        self, page: int = 1, page_size: int = 15, include: Iterable[str] = ()
    ) -> Page:
        """Return one page of events, newest first."""
        return self._store.list_events(
            max(1, page), max(1, page_size), self._policy.resolve(include)
        )

    def create_event(
        self, draft: EventDraft, owner_id: int, include: Iterable[str] = ()
    ) -> Event:
        """Create an event owned by owner_id.

        Raises:
            InvalidTimeWindowError: If end_at is not after start_at.
        """
        _check_window(draft.start_at, draft.end_at)
        return self._store.create_event(draft, owner_id, self._policy.resolve(include))

    def get_event(self, event_id: str, include: Iterable[str] = ()) -> Event:
        """Return an event by ID with the show relations always loaded.

        Raises:
            InvalidEventIdError: If the event_id is not a valid id.
            EventNotFoundError: If the event does not exist.
        """
        relations = self._show_relations | self._policy.resolve(include)
        event = self._store.get_event(_parse_id(event_id), relations)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def update_event(
        self, event_id: str, changes: Mapping[str, Any], include: Iterable[str] = ()
    ) -> Event:
        """Apply a partial update.

        Raises:
            InvalidEventIdError: If the event_id is not a valid id.
            EventNotFoundError: If the event does not exist.
            InvalidTimeWindowError: If the merged dates would end before they start.
        """
        parsed = _parse_id(event_id)
        if "start_at" in changes or "end_at" in changes:
            current = self._store.get_event(parsed)
            if current is None:
                raise EventNotFoundError(event_id)
            _check_window(
                changes.get("start_at", current.start_at),
                changes.get("end_at", current.end_at),
            )
        event = self._store.update_event(parsed, changes, self._policy.resolve(include))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def delete_event(self, event_id: str) -> None:
        """Permanently delete an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid id.
            EventNotFoundError: If the event does not exist.
        """
        if not self._store.delete_event(_parse_id(event_id)):
            raise EventNotFoundError(event_id)


def _parse_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise InvalidEventIdError(event_id) from None


def _check_window(start_at, end_at) -> None:
    try:
        TimeWindow(start_at=start_at, end_at=end_at)
    except ValueError:
        raise InvalidTimeWindowError() from None
