"""
/api/v1/consents -- Consent management.

List, inspect, create, edit, revoke and delete the grants that let service
providers access the citizen's data. Every handler calls exactly one
ConsentStore operation; NotFoundError / ValidationError raised by the store
are turned into 404 / 400 envelopes by the handlers in main.py.
"""

import logging

from fastapi import APIRouter, Query, Response

from local_agent.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from local_agent.core.envelope import render, wrap_page, wrap_result
from local_agent.models.schemas import ApiResponse, ConsentCreate, ConsentUpdate, PaginatedResponse
from local_agent.store import consent_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/api/v1/consents",
    response_model=PaginatedResponse,
    summary="List consents",
    description="One page of consent grants, optionally only those in a given status.",
    tags=["Consents"],
)
async def list_consents(
    status: str | None = Query(
        default=None,
        description="Only return grants in this status (pending, active, revoked, expired).",
    ),
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, alias="pageSize"),
):
    items, total = consent_store.list(status, page, page_size)
    logger.info(
        "Listing consents: status=%s page=%d pageSize=%d -> %d of %d",
        status, page, page_size, len(items), total,
    )
    return render(wrap_page(items, page, page_size, total))


@router.post(
    "/api/v1/consents",
    response_model=ApiResponse,
    status_code=201,
    summary="Create a consent",
    description=(
        "Record a new grant. serviceProviderId, serviceProviderName, dataTypes "
        "(non-empty) and purpose are required. Status defaults to 'active'."
    ),
    tags=["Consents"],
)
async def create_consent(body: ConsentCreate):
    consent = consent_store.create(body)
    logger.info(
        "Created consent %s for %s (%s)",
        consent.consent_id, consent.service_provider_name, consent.status.value,
    )
    return render(wrap_result(consent), status_code=201)


@router.get(
    "/api/v1/consents/{consent_id}",
    response_model=ApiResponse,
    summary="Get a consent",
    tags=["Consents"],
)
async def get_consent(consent_id: str):
    return render(wrap_result(consent_store.get(consent_id)))


@router.put(
    "/api/v1/consents/{consent_id}",
    response_model=ApiResponse,
    summary="Update a consent",
    description=(
        "Overwrite any of purpose, expiresAt, dataTypes, status and grantedDataTypes. "
        "Fields left out are unchanged. Any status may be set from any status."
    ),
    tags=["Consents"],
)
async def update_consent(consent_id: str, body: ConsentUpdate):
    consent = consent_store.update(consent_id, body)
    logger.info("Updated consent %s (status=%s)", consent_id, consent.status.value)
    return render(wrap_result(consent))


@router.post(
    "/api/v1/consents/{consent_id}/revoke",
    response_model=ApiResponse,
    summary="Revoke a consent",
    description="Set the grant's status to 'revoked'. Revoking an already revoked grant succeeds.",
    tags=["Consents"],
)
async def revoke_consent(consent_id: str):
    consent = consent_store.revoke(consent_id)
    logger.info("Revoked consent %s", consent_id)
    return render(wrap_result(consent))


@router.delete(
    "/api/v1/consents/{consent_id}",
    status_code=204,
    summary="Delete a consent",
    description=(
        "Permanently remove a grant. Access logs and notifications that "
        "reference it are kept and their links will no longer resolve."
    ),
    tags=["Consents"],
)
async def delete_consent(consent_id: str):
    consent_store.delete(consent_id)
    logger.info("Deleted consent %s", consent_id)
    return Response(status_code=204)
