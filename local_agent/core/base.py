"""
Shared plumbing for the in-memory record stores.

Each store owns one ordered collection (a dict keyed by record id, which
keeps insertion order) behind a lock. Records handed out are deep copies,
so callers can never mutate store state except through store operations.
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Generic, Iterable, TypeVar

from pydantic import BaseModel

from local_agent.core.errors import NotFoundError

R = TypeVar("R", bound=BaseModel)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class RecordStore(Generic[R]):
    """Base class: ordered id -> record mapping with a per-store lock."""

    # Set by subclasses
    entity = "Record"
    id_field = "id"

    def __init__(self, clock: Clock = utcnow, id_factory: Callable[[], str] = new_id):
        self._records: dict[str, R] = {}
        # Every id ever handed out, including deleted ones. Ids are not reused.
        self._issued: set[str] = set()
        self._lock = threading.Lock()
        self._clock = clock
        self._id_factory = id_factory

    def __len__(self) -> int:
        return len(self._records)

    def load(self, records: Iterable[R]) -> None:
        """Replace the collection with already-built records (used for seeding).

        Identifiers must be unique; nothing is changed if they are not."""
        loaded: dict[str, R] = {}
        for record in records:
            key = getattr(record, self.id_field)
            if key in loaded:
                raise ValueError(f"duplicate {self.id_field} {key!r}")
            loaded[key] = record.model_copy(deep=True)
        with self._lock:
            self._records = loaded
            self._issued.update(loaded)

    def clear(self) -> None:
        """Drop every record and start a fresh store lifetime."""
        with self._lock:
            self._records = {}
            self._issued = set()

    # -- helpers for subclasses (call with the lock held) --

    def _next_id(self) -> str:
        key = self._id_factory()
        while key in self._issued:
            key = self._id_factory()
        self._issued.add(key)
        return key

    def _require(self, key: str) -> R:
        record = self._records.get(key)
        if record is None:
            raise NotFoundError(self.entity, key)
        return record

    def _snapshot(self) -> list[R]:
        return list(self._records.values())

    @staticmethod
    def _copy(record: R) -> R:
        return record.model_copy(deep=True)
