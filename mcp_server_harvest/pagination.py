"""Pagination helpers for Harvest list responses."""

from typing import Any, Awaitable, Callable, Dict, List, Optional, TypedDict

MAX_PER_PAGE = 2000


class PaginationInfo(TypedDict):
    page: int
    per_page: int
    total_pages: int
    total_entries: int
    next_page: Optional[int]
    previous_page: Optional[int]


class PaginatedResponse(TypedDict):
    data: List[Any]
    pagination: PaginationInfo
    links: Dict[str, Optional[str]]


def build_pagination_params(page: Optional[int] = None, per_page: Optional[int] = None) -> Dict[str, str]:
    """Return the ``page``/``per_page`` query params, omitting out-of-range values."""
    params: Dict[str, str] = {}
    if page is not None and page > 0:
        params["page"] = str(page)
    if per_page is not None and 0 < per_page <= MAX_PER_PAGE:
        params["per_page"] = str(per_page)
    return params


def extract_pagination_info(response: Dict[str, Any]) -> PaginationInfo:
    return {
        "page": response.get("page") or 1,
        "per_page": response.get("per_page") or MAX_PER_PAGE,
        "total_pages": response.get("total_pages") or 1,
        "total_entries": response.get("total_entries") or 0,
        "next_page": response.get("next_page") or None,
        "previous_page": response.get("previous_page") or None,
    }


def build_paginated_response(data: List[Any], response: Dict[str, Any]) -> PaginatedResponse:
    """Split a Harvest list envelope into items, pagination info and links."""
    links = response.get("links") or {}
    return {
        "data": data,
        "pagination": extract_pagination_info(response),
        "links": {
            "first": links.get("first") or "",
            "next": links.get("next") or None,
            "previous": links.get("previous") or None,
            "last": links.get("last") or "",
        },
    }


def has_next_page(pagination: PaginationInfo) -> bool:
    return pagination["next_page"] is not None and pagination["page"] < pagination["total_pages"]


def has_previous_page(pagination: PaginationInfo) -> bool:
    return pagination["previous_page"] is not None and pagination["page"] > 1


def get_next_page_number(pagination: PaginationInfo) -> Optional[int]:
    return pagination["next_page"] if has_next_page(pagination) else None


def get_previous_page_number(pagination: PaginationInfo) -> Optional[int]:
    return pagination["previous_page"] if has_previous_page(pagination) else None


async def get_all_pages(
    fetch_page: Callable[[int, int], Awaitable[PaginatedResponse]],
    per_page: int = MAX_PER_PAGE,
) -> List[Any]:
    """Fetch pages sequentially until one reports no next page.

    Issues exactly one ``fetch_page`` call per page and returns the items in
    the order the pages delivered them.
    """
    items: List[Any] = []
    page = 1
    while True:
        response = await fetch_page(page, per_page)
        items.extend(response["data"])
        next_page = get_next_page_number(response["pagination"])
        if next_page is None:
            return items
        page = next_page if next_page > page else page + 1
