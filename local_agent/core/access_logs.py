"""
Data access log: one immutable entry per access attempt.

Append-only. There is no update or delete, and entries are not checked
against consent state -- an entry may name a consent that never existed
or has since been deleted.
"""

from __future__ import annotations

from local_agent.core.base import RecordStore
from local_agent.core.errors import ValidationError
from local_agent.core.pagination import select_page
from local_agent.models.schemas import AccessLogCreate, AccessLogEntry

REQUIRED_FIELDS = ("service_provider_id", "service_provider_name", "data_type", "action", "success")


class AccessLogStore(RecordStore[AccessLogEntry]):
    entity = "Log entry"
    id_field = "log_id"

    def append(self, data: AccessLogCreate) -> AccessLogEntry:
        # success=False is a real value, so test for None rather than truthiness
        missing = [
            name for name in REQUIRED_FIELDS
            if getattr(data, name) is None or getattr(data, name) == ""
        ]
        if missing:
            raise ValidationError(
                "Missing required log data: " + ", ".join(missing),
                missing=missing,
            )

        with self._lock:
            entry = AccessLogEntry(
                log_id=self._next_id(),
                timestamp=data.timestamp or self._clock(),
                service_provider_id=data.service_provider_id,
                service_provider_name=data.service_provider_name,
                data_type=data.data_type,
                action=data.action,
                success=data.success,
                consent_id=data.consent_id,
                details=data.details,
            )
            self._records[entry.log_id] = entry
            return self._copy(entry)

    def list(self, page: int = 1, page_size: int = 10) -> tuple[list[AccessLogEntry], int]:
        with self._lock:
            items, total = select_page(self._snapshot(), None, page, page_size)
            return [self._copy(e) for e in items], total

    def export_all(self) -> list[AccessLogEntry]:
        """Every entry, in the order it was appended. No paging."""
        with self._lock:
            return [self._copy(e) for e in self._snapshot()]
