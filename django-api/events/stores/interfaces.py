"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Relation sets are already filtered through a RelationPolicy; a store loads
exactly the relations it is given.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from events.domain import Event, EventDraft, EventId, Page

EDITABLE_FIELDS = ("name", "description", "start_at", "end_at")


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(
        self, page: int, page_size: int, relations: frozenset[str] = frozenset()
    ) -> Page:
        """Return one page of events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(
        self, event_id: EventId, relations: frozenset[str] = frozenset()
    ) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create_event(
        self,
        draft: EventDraft,
        owner_id: int,
        relations: frozenset[str] = frozenset(),
    ) -> Event:
        """Persist a new event owned by owner_id."""
        ...

    @abstractmethod
    def update_event(
        self,
        event_id: EventId,
        changes: Mapping[str, Any],
        relations: frozenset[str] = frozenset(),
    ) -> Event | None:
        """Apply only the supplied fields. Return None if the event does not exist."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Hard-delete an event. Return False if nothing was deleted."""
        ...
