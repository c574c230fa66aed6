"""
User-facing notifications about consent requests, data access and security events.
"""

from __future__ import annotations

from local_agent.core.base import RecordStore
from local_agent.core.errors import ValidationError
from local_agent.core.pagination import select_page
from local_agent.models.schemas import Notification, NotificationCreate

REQUIRED_FIELDS = ("type", "title", "message")


class NotificationStore(RecordStore[Notification]):
    entity = "Notification"
    id_field = "notification_id"

    def create(self, data: NotificationCreate) -> Notification:
        missing = [name for name in REQUIRED_FIELDS if not getattr(data, name)]
        if missing:
            raise ValidationError(
                "Missing required notification data: " + ", ".join(missing),
                missing=missing,
            )

        with self._lock:
            notification = Notification(
                notification_id=self._next_id(),
                type=data.type,
                title=data.title,
                message=data.message,
                timestamp=data.timestamp or self._clock(),
                is_read=data.is_read,
                related_entity_id=data.related_entity_id,
                actions=[a.model_copy() for a in data.actions] if data.actions else None,
            )
            self._records[notification.notification_id] = notification
            return self._copy(notification)

    def list(
        self,
        unread_only: bool = False,
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[list[Notification], int]:
        predicate = (lambda n: not n.is_read) if unread_only else None
        with self._lock:
            items, total = select_page(self._snapshot(), predicate, page, page_size)
            return [self._copy(n) for n in items], total

    def mark_read(self, notification_id: str) -> Notification:
        """Flag as read. Already-read notifications are returned unchanged."""
        with self._lock:
            notification = self._require(notification_id)
            if not notification.is_read:
                notification = notification.model_copy(update={"is_read": True}, deep=True)
                self._records[notification_id] = notification
            return self._copy(notification)
