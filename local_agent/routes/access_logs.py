"""
/api/v1/data-access-logs -- Audit trail of data access.

Entries are append-only: there is no update or delete endpoint.
"""

import logging

from fastapi import APIRouter, Query

from local_agent.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from local_agent.core.envelope import render, wrap_page, wrap_result
from local_agent.models.schemas import AccessLogCreate, ApiResponse, PaginatedResponse
from local_agent.store import access_log_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/api/v1/data-access-logs",
    response_model=PaginatedResponse,
    summary="List access log entries",
    tags=["Access logs"],
)
async def list_access_logs(
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, alias="pageSize"),
):
    items, total = access_log_store.list(page, page_size)
    logger.info(
        "Listing access logs: page=%d pageSize=%d -> %d of %d",
        page, page_size, len(items), total,
    )
    return render(wrap_page(items, page, page_size, total))


@router.get(
    "/api/v1/data-access-logs/export",
    response_model=ApiResponse,
    summary="Export all access log entries",
    description="The full log in the order it was written, unpaginated.",
    tags=["Access logs"],
)
async def export_access_logs():
    entries = access_log_store.export_all()
    logger.info("Exporting %d access log entries", len(entries))
    return render(wrap_result(entries))


@router.post(
    "/api/v1/data-access-logs",
    response_model=ApiResponse,
    status_code=201,
    summary="Record a data access",
    description=(
        "Append one entry. serviceProviderId, serviceProviderName, dataType, "
        "action and success are required; timestamp defaults to now."
    ),
    tags=["Access logs"],
)
async def append_access_log(body: AccessLogCreate):
    entry = access_log_store.append(body)
    logger.info(
        "Logged %s of %s by %s (success=%s)",
        entry.action.value, entry.data_type, entry.service_provider_name, entry.success,
    )
    return render(wrap_result(entry), status_code=201)
