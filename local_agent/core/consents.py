"""
Consent grants: who may access which categories of the citizen's data.

Status handling is deliberately loose. revoke() is the only transition the
store performs itself; any other status change is a plain field update
from the client, with no guard on which state it comes from. Nothing here
looks at expires_at -- a grant past its expiry keeps whatever status it had.
"""

from __future__ import annotations

from local_agent.core.base import Clock, RecordStore, new_id, utcnow
from local_agent.core.errors import ValidationError
from local_agent.core.pagination import select_page
from local_agent.models.schemas import ConsentCreate, ConsentGrant, ConsentStatus, ConsentUpdate

# Fields a client may overwrite with update(). Everything else (ids,
# provider identity, custodian, created_at) is fixed at creation.
UPDATABLE_FIELDS = ("purpose", "expires_at", "data_types", "status", "granted_data_types")

REQUIRED_FIELDS = ("service_provider_id", "service_provider_name", "data_types", "purpose")


class ConsentStore(RecordStore[ConsentGrant]):
    entity = "Consent"
    id_field = "consent_id"

    def __init__(self, custodian_id: str, clock: Clock = utcnow, id_factory=new_id):
        super().__init__(clock=clock, id_factory=id_factory)
        self.custodian_id = custodian_id

    def create(self, data: ConsentCreate) -> ConsentGrant:
        missing = [name for name in REQUIRED_FIELDS if not getattr(data, name)]
        if missing:
            raise ValidationError(
                "Missing or invalid required consent data. Ensure serviceProviderId, "
                "serviceProviderName, dataTypes (non-empty array), and purpose are provided.",
                missing=missing,
            )

        with self._lock:
            now = self._clock()
            consent = ConsentGrant(
                consent_id=self._next_id(),
                service_provider_id=data.service_provider_id,
                service_provider_name=data.service_provider_name,
                data_types=list(data.data_types),
                purpose=data.purpose,
                status=data.status,
                created_at=now,
                updated_at=now,
                expires_at=data.expires_at,
                data_custodian_id=self.custodian_id,
                granted_data_types=list(data.granted_data_types),
            )
            self._records[consent.consent_id] = consent
            return self._copy(consent)

    def get(self, consent_id: str) -> ConsentGrant:
        with self._lock:
            return self._copy(self._require(consent_id))

    def list(
        self,
        status: ConsentStatus | str | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[list[ConsentGrant], int]:
        """One page of grants, optionally only those with the given status.

        An unknown status string is not an error, it simply matches nothing."""
        predicate = None
        if status:
            wanted = status.value if isinstance(status, ConsentStatus) else status

            def predicate(consent: ConsentGrant) -> bool:
                return consent.status.value == wanted

        with self._lock:
            items, total = select_page(self._snapshot(), predicate, page, page_size)
            return [self._copy(c) for c in items], total

    def update(self, consent_id: str, changes: ConsentUpdate) -> ConsentGrant:
        supplied = changes.model_dump(exclude_none=True, include=set(UPDATABLE_FIELDS))
        with self._lock:
            consent = self._require(consent_id)
            updated = consent.model_copy(
                update={**supplied, "updated_at": self._advance(consent)},
                deep=True,
            )
            self._records[consent_id] = updated
            return self._copy(updated)

    def revoke(self, consent_id: str) -> ConsentGrant:
        """Set status to revoked, whatever it was. Revoking twice is fine."""
        with self._lock:
            consent = self._require(consent_id)
            updated = consent.model_copy(
                update={"status": ConsentStatus.revoked, "updated_at": self._advance(consent)},
                deep=True,
            )
            self._records[consent_id] = updated
            return self._copy(updated)

    def delete(self, consent_id: str) -> None:
        """Remove a grant for good.

        Log entries and notifications that point at it are left as they
        are; their consent links simply stop resolving."""
        with self._lock:
            self._require(consent_id)
            del self._records[consent_id]

    def _advance(self, consent: ConsentGrant):
        # updated_at never moves backwards, even if the clock does.
        return max(self._clock(), consent.updated_at)
