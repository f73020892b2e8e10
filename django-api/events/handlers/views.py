"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import EventDraft
from events.domain.errors import DomainError, ErrorCode, InvalidTimeWindowError
from events.handlers.pagination import (
    PAGE_PARAM,
    PAGE_SIZE_PARAM,
    paginated_payload,
    parse_positive_int,
)
from events.handlers.serializers import EventInputSerializer, EventSerializer
from events.services.event_service import EventService
from events.services.relations import parse_include
from events.stores.django_store import DjangoEventStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_TIME_WINDOW: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def get_event_service() -> EventService:
    return EventService(DjangoEventStore(), show_relations=settings.EVENTS_SHOW_RELATIONS)


def _include(request: Request) -> tuple[str, ...]:
    params = request.query_params
    return parse_include(params.getlist("include") + params.getlist("include[]"))


def _owner_id(request: Request) -> int:
    user = request.user
    if user is not None and user.is_authenticated:
        return user.pk
    return settings.EVENTS_DEFAULT_OWNER_ID


def _error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, InvalidTimeWindowError):
        body["errors"] = {error.field: [error.message]}
    return Response(body, status=ERROR_STATUS[error.code])


def _validation_response(serializer: EventInputSerializer) -> Response:
    logger.warning("Rejected event input: fields=%s", sorted(serializer.errors))
    return Response(
        {
            "code": ErrorCode.VALIDATION_ERROR.value,
            "message": "The given data was invalid.",
            "errors": serializer.errors,
        },
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


class EventListView(APIView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        page = get_event_service().list_events(
            page=parse_positive_int(params.get(PAGE_PARAM), 1),
            page_size=min(
                parse_positive_int(params.get(PAGE_SIZE_PARAM), settings.EVENTS_PAGE_SIZE),
                settings.EVENTS_MAX_PAGE_SIZE,
            ),
            include=_include(request),
        )
        data = EventSerializer(page.items, many=True).data
        return Response(paginated_payload(request, page, data))

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_response(serializer)
        try:
            event = get_event_service().create_event(
                EventDraft(**serializer.validated_data),
                owner_id=_owner_id(request),
                include=_include(request),
            )
        except DomainError as e:
            logger.warning("Event create rejected: %s", e)
            return _error_response(e)
        logger.info("Created event %s for user %s", event.id, event.user_id)
        return Response({"data": EventSerializer(event).data}, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET, PUT, PATCH and DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            event = get_event_service().get_event(event_id, include=_include(request))
        except DomainError as e:
            logger.warning("Event lookup failed: %s", e)
            return _error_response(e)
        return Response({"data": EventSerializer(event).data})

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return _validation_response(serializer)
        try:
            event = get_event_service().update_event(
                event_id, serializer.validated_data, include=_include(request)
            )
        except DomainError as e:
            logger.warning("Event update rejected: %s", e)
            return _error_response(e)
        logger.info("Updated event %s fields=%s", event.id, sorted(serializer.validated_data))
        return Response({"data": EventSerializer(event).data})

    patch = put

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_event_service().delete_event(event_id)
        except DomainError as e:
            logger.warning("Event delete failed: %s", e)
            return _error_response(e)
        logger.info("Deleted event %s", event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
