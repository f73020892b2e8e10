"""Django ORM implementation of the EventStore."""

from collections.abc import Mapping
from typing import Any

from django.contrib.auth.base_user import AbstractBaseUser
from django.db.models import Prefetch, QuerySet

from events import models
from events.domain import Attendee, Event, EventDraft, EventId, Page, User
from events.services.relations import ATTENDEES, ATTENDEES_USER, USER
from events.stores.interfaces import EDITABLE_FIELDS, EventStore


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def list_events(
        self, page: int, page_size: int, relations: frozenset[str] = frozenset()
    ) -> Page:
        queryset = self._queryset(relations).order_by("-created_at", "-id")
        total = queryset.count()
        offset = (page - 1) * page_size
        # Offsets past the end can overflow the database integer type.
        rows = queryset[offset : offset + page_size] if offset < total else ()
        return Page(
            items=tuple(_to_event(row, relations) for row in rows),
            page=page,
            page_size=page_size,
            total=total,
        )

    def get_event(
        self, event_id: EventId, relations: frozenset[str] = frozenset()
    ) -> Event | None:
        row = self._queryset(relations).filter(pk=event_id.value).first()
        if row is None:
            return None
        return _to_event(row, relations)

    def create_event(
        self,
        draft: EventDraft,
        owner_id: int,
        relations: frozenset[str] = frozenset(),
    ) -> Event:
        row = models.Event.objects.create(
            user_id=owner_id,
            name=draft.name,
            description=draft.description,
            start_at=draft.start_at,
            end_at=draft.end_at,
        )
        return _to_event(self._queryset(relations).get(pk=row.pk), relations)

    def update_event(
        self,
        event_id: EventId,
        changes: Mapping[str, Any],
        relations: frozenset[str] = frozenset(),
    ) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        fields = [name for name in EDITABLE_FIELDS if name in changes]
        if fields:
            for name in fields:
                setattr(row, name, changes[name])
            row.save(update_fields=[*fields, "updated_at"])
        return _to_event(self._queryset(relations).get(pk=row.pk), relations)

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0

    def _queryset(self, relations: frozenset[str]) -> QuerySet:
        queryset = models.Event.objects.all()
        if USER in relations:
            queryset = queryset.select_related("user")
        if ATTENDEES_USER in relations:
            queryset = queryset.prefetch_related(
                Prefetch(
                    "attendees",
                    queryset=models.Attendee.objects.select_related("user"),
                )
            )
        elif ATTENDEES in relations:
            queryset = queryset.prefetch_related("attendees")
        return queryset


def _to_user(row: AbstractBaseUser) -> User:
    full_name = row.get_full_name() if hasattr(row, "get_full_name") else ""
    return User(
        id=row.pk,
        name=full_name or row.get_username(),
        email=getattr(row, "email", "") or "",
    )


def _to_attendee(row: models.Attendee, with_user: bool) -> Attendee:
    return Attendee(
        id=row.pk,
        event_id=EventId(row.event_id),
        user_id=row.user_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        user=_to_user(row.user) if with_user else None,
    )


def _to_event(row: models.Event, relations: frozenset[str]) -> Event:
    attendees = None
    if ATTENDEES in relations:
        with_user = ATTENDEES_USER in relations
        attendees = tuple(_to_attendee(a, with_user) for a in row.attendees.all())
    return Event(
        id=EventId(row.pk),
        name=row.name,
        description=row.description,
        start_at=row.start_at,
        end_at=row.end_at,
        user_id=row.user_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        user=_to_user(row.user) if USER in relations else None,
        attendees=attendees,
    )
