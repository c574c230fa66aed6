"""
Response envelopes.

Every JSON body the agent sends has the same outer shape:

    {"success": true,  "data": ...,  "timestamp": "..."}
    {"success": false, "error": {"code": ..., "message": ...}, "timestamp": "..."}

List endpoints add a "pagination" block. These helpers are pure: they only
build models, they never touch a store.
"""

from datetime import datetime, timezone
from typing import Any

from fastapi.responses import JSONResponse

from local_agent.core.pagination import total_pages
from local_agent.models.schemas import ApiError, ApiResponse, PaginatedResponse, Pagination


def _now() -> datetime:
    return datetime.now(timezone.utc)


def wrap_result(data: Any = None) -> ApiResponse:
    return ApiResponse(success=True, data=data, timestamp=_now())


def wrap_error(code: str, message: str, details: Any = None) -> ApiResponse:
    return ApiResponse(
        success=False,
        error=ApiError(code=code, message=message, details=details),
        timestamp=_now(),
    )


def wrap_page(items: list, page: int, page_size: int, total_items: int) -> PaginatedResponse:
    """Envelope for one page of a list. page and page_size are echoed as given."""
    return PaginatedResponse(
        success=True,
        data=items,
        pagination=Pagination(
            page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages(total_items, page_size),
        ),
        timestamp=_now(),
    )


def render(envelope: ApiResponse, status_code: int = 200) -> JSONResponse:
    """Serialize an envelope the way clients expect it: camelCase keys,
    absent fields omitted rather than sent as null."""
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True, exclude_none=True),
    )
