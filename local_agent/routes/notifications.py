"""
/api/v1/notifications -- User-facing notifications.
"""

import logging

from fastapi import APIRouter, Query

from local_agent.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from local_agent.core.envelope import render, wrap_page, wrap_result
from local_agent.models.schemas import ApiResponse, NotificationCreate, PaginatedResponse
from local_agent.store import notification_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/api/v1/notifications",
    response_model=PaginatedResponse,
    summary="List notifications",
    tags=["Notifications"],
)
async def list_notifications(
    unread_only: bool = Query(default=False, alias="unreadOnly"),
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, alias="pageSize"),
):
    items, total = notification_store.list(unread_only, page, page_size)
    logger.info(
        "Listing notifications: unreadOnly=%s page=%d pageSize=%d -> %d of %d",
        unread_only, page, page_size, len(items), total,
    )
    return render(wrap_page(items, page, page_size, total))


@router.post(
    "/api/v1/notifications",
    response_model=ApiResponse,
    status_code=201,
    summary="Create a notification",
    tags=["Notifications"],
)
async def create_notification(body: NotificationCreate):
    notification = notification_store.create(body)
    logger.info("Created %s notification %s", notification.type.value, notification.notification_id)
    return render(wrap_result(notification), status_code=201)


@router.post(
    "/api/v1/notifications/{notification_id}/mark-read",
    response_model=ApiResponse,
    summary="Mark a notification as read",
    tags=["Notifications"],
)
async def mark_notification_read(notification_id: str):
    return render(wrap_result(notification_store.mark_read(notification_id)))
