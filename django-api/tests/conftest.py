"""Pytest configuration and shared fixtures."""

from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from rest_framework.test import APIClient

from events.domain import Attendee, Event, EventDraft, EventId, Page, User
from events.services.relations import ATTENDEES, ATTENDEES_USER, USER
from events.stores.interfaces import EDITABLE_FIELDS, EventStore

T0 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


class InMemoryEventStore(EventStore):
    """Dict-backed store for service tests. Records the relations it was asked for."""

    def __init__(self) -> None:
        self.rows: dict[int, Event] = {}
        self.users: dict[int, User] = {1: User(id=1, name="Owner", email="owner@example.com")}
        self.attendees: dict[int, list[Attendee]] = {}
        self.relation_calls: list[frozenset[str]] = []
        self._next_id = 1
        self._clock = T0

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def _with_relations(self, event: Event, relations: frozenset[str]) -> Event:
        self.relation_calls.append(relations)
        attendees = None
        if ATTENDEES in relations:
            attendees = tuple(
                replace(a, user=self.users[a.user_id] if ATTENDEES_USER in relations else None)
                for a in self.attendees.get(event.id.value, [])
            )
        return replace(
            event,
            user=self.users[event.user_id] if USER in relations else None,
            attendees=attendees,
        )

    def list_events(self, page, page_size, relations=frozenset()):
        ordered = sorted(
            self.rows.values(), key=lambda e: (e.created_at, e.id.value), reverse=True
        )
        offset = (page - 1) * page_size
        items = tuple(
            self._with_relations(e, relations) for e in ordered[offset : offset + page_size]
        )
        return Page(items=items, page=page, page_size=page_size, total=len(ordered))

    def get_event(self, event_id, relations=frozenset()):
        event = self.rows.get(event_id.value)
        return None if event is None else self._with_relations(event, relations)

    def create_event(self, draft: EventDraft, owner_id: int, relations=frozenset()):
        now = self._tick()
        event = Event(
            id=EventId(self._next_id),
            name=draft.name,
            description=draft.description,
            start_at=draft.start_at,
            end_at=draft.end_at,
            user_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        self.rows[self._next_id] = event
        self._next_id += 1
        return self._with_relations(event, relations)

    def update_event(self, event_id, changes: Mapping[str, Any], relations=frozenset()):
        event = self.rows.get(event_id.value)
        if event is None:
            return None
        fields = {name: changes[name] for name in EDITABLE_FIELDS if name in changes}
        if fields:
            event = replace(event, **fields, updated_at=self._tick())
            self.rows[event_id.value] = event
        return self._with_relations(event, relations)

    def delete_event(self, event_id):
        return self.rows.pop(event_id.value, None) is not None


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def memory_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def owner(django_user_model, settings):
    """The user unauthenticated requests are attributed to."""
    user = django_user_model.objects.create_user(
        username="owner",
        email="owner@example.com",
        password="secret",
        first_name="Ada",
        last_name="Lovelace",
    )
    settings.EVENTS_DEFAULT_OWNER_ID = user.pk
    return user
