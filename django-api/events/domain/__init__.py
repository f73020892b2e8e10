from events.domain.models import Attendee, Event, EventDraft, Page, User
from events.domain.value_objects import EventId, TimeWindow

__all__ = [
    "Attendee",
    "Event",
    "EventDraft",
    "Page",
    "User",
    "EventId",
    "TimeWindow",
]
