"""Paginated list envelope: ``data``, ``links`` and ``meta``."""

from rest_framework.request import Request
from rest_framework.utils.urls import replace_query_param

from events.domain import Page

PAGE_PARAM = "page"
PAGE_SIZE_PARAM = "per_page"


def parse_positive_int(raw: str | None, default: int) -> int:
    """Parse a query value, falling back to default when missing or invalid."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def paginated_payload(request: Request, page: Page, data: list) -> dict:
    url = request.build_absolute_uri()

    def page_url(number: int) -> str:
        return replace_query_param(url, PAGE_PARAM, number)

    return {
        "data": data,
        "links": {
            "first": page_url(1),
            "last": page_url(page.last_page),
            "prev": page_url(page.page - 1) if page.page > 1 else None,
            "next": page_url(page.page + 1) if page.page < page.last_page else None,
        },
        "meta": {
            "current_page": page.page,
            "from": page.first_item,
            "last_page": page.last_page,
            "path": request.build_absolute_uri(request.path),
            "per_page": page.page_size,
            "to": page.last_item,
            "total": page.total,
        },
    }
