"""Smoke tests for the back-office pages.

Run with: pytest tests/test_admin.py -v
"""

from datetime import datetime, timezone

import pytest

from events.models import Attendee, Event


@pytest.fixture
def event(admin_user) -> Event:
    event = Event.objects.create(
        user=admin_user,
        name="Launch",
        start_at=datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc),
        end_at=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
    )
    Attendee.objects.create(event=event, user=admin_user)
    return event


@pytest.mark.django_db
class TestEventAdmin:
    """Tests for the event admin pages."""

    def test_changelist_renders(self, admin_client, event):
        response = admin_client.get("/admin/events/event/")
        assert response.status_code == 200
        assert b"Launch" in response.content

    def test_change_form_renders_with_attendees(self, admin_client, event):
        response = admin_client.get(f"/admin/events/event/{event.pk}/change/")
        assert response.status_code == 200

    def test_attendee_changelist_renders(self, admin_client, event):
        assert admin_client.get("/admin/events/attendee/").status_code == 200
