"""
Local Agent -- Pydantic Data Models

Every record the agent keeps, every request body it accepts and every
response envelope it returns is defined here.

Attributes are snake_case in Python. On the wire they are camelCase
(consentId, serviceProviderName, isRead, ...) so existing dashboard clients
keep working. The alias generator on AgentModel does the translation in
both directions; populate_by_name lets Python code use the snake_case names.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AgentModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Enums -- Constrained choices for record fields
# ---------------------------------------------------------------------------

class ConsentStatus(str, Enum):
    """Lifecycle states of a consent grant.

    Only 'revoked' is ever assigned by the store itself (via revoke).
    The others change only when a client supplies them."""

    pending = "pending"
    active = "active"
    revoked = "revoked"
    expired = "expired"


class AccessAction(str, Enum):
    read = "read"
    write = "write"
    update = "update"
    delete = "delete"


class NotificationType(str, Enum):
    consent_request = "consent_request"
    data_access = "data_access"
    security_alert = "security_alert"
    system_update = "system_update"


class NotificationActionType(str, Enum):
    view_consent = "view_consent"
    mark_read = "mark_read"


# ---------------------------------------------------------------------------
# Consent grants
# ---------------------------------------------------------------------------

class ConsentGrant(AgentModel):
    """A record authorizing a service provider to access specific
    categories of the citizen's data for a stated purpose."""

    consent_id: str = Field(
        description="Unique identifier of the consent record. Never reused.",
        examples=["6f1c2a9e-3b0d-4c4e-9a55-2b7f0e8d1c11"],
    )
    service_provider_id: str = Field(
        description="DID or unique ID of the requesting service provider.",
        examples=["did:example:sp1"],
    )
    service_provider_name: str = Field(
        description="Human-readable name of the service provider.",
        examples=["Health Portal X"],
    )
    data_types: list[str] = Field(
        description="Data categories requested by the provider.",
        examples=[["profile.name", "health.heartrate"]],
    )
    purpose: str = Field(
        description="Why the provider is asking for the data.",
        examples=["Display health dashboard"],
    )
    status: ConsentStatus = Field(
        description="Current lifecycle state.",
        examples=["active"],
    )
    created_at: datetime = Field(description="When the grant was created (UTC).")
    updated_at: datetime = Field(
        description="When the grant last changed (UTC). Never earlier than created_at.",
    )
    expires_at: datetime | None = Field(
        default=None,
        description=(
            "Optional expiry. Informational only: the agent does not flip "
            "the status to 'expired' when this passes."
        ),
    )
    data_custodian_id: str = Field(
        description="Identifier of the agent holding the data.",
        examples=["did:mock:local-agent-123"],
    )
    granted_data_types: list[str] = Field(
        default_factory=list,
        description=(
            "Data categories actually authorized. Meant to be a subset of "
            "data_types, but this is not enforced."
        ),
    )


class ConsentCreate(AgentModel):
    """Request body for creating a consent grant.

    The four identifying fields are optional here on purpose: their presence
    is checked by ConsentStore.create so a missing field is reported as
    BAD_REQUEST with a readable message instead of a schema error.

    Defaults:
      status             -> active
      expires_at         -> none
      granted_data_types -> []"""

    service_provider_id: str | None = None
    service_provider_name: str | None = None
    data_types: list[str] | None = None
    purpose: str | None = None
    status: ConsentStatus = Field(
        default=ConsentStatus.active,
        description="Initial status. Defaults to 'active'.",
    )
    expires_at: datetime | None = None
    granted_data_types: list[str] = Field(default_factory=list)


class ConsentUpdate(AgentModel):
    """Partial update of a consent grant. Only fields that are supplied
    (and not null) are written; everything else is left alone."""

    purpose: str | None = None
    expires_at: datetime | None = None
    data_types: list[str] | None = None
    status: ConsentStatus | None = None
    granted_data_types: list[str] | None = None


# ---------------------------------------------------------------------------
# Data access logs
# ---------------------------------------------------------------------------

class AccessLogEntry(AgentModel):
    """Immutable record of one attempted data access by a service provider."""

    log_id: str = Field(description="Unique identifier of the log entry.")
    timestamp: datetime = Field(description="When the access happened (UTC).")
    service_provider_id: str = Field(examples=["did:example:sp1"])
    service_provider_name: str = Field(examples=["Health Portal X"])
    data_type: str = Field(
        description="The single data category that was accessed.",
        examples=["health.heartrate"],
    )
    action: AccessAction = Field(examples=["read"])
    success: bool = Field(description="Whether the access succeeded.")
    consent_id: str | None = Field(
        default=None,
        description=(
            "Consent the access was made under. A plain identifier: the "
            "consent may since have been deleted."
        ),
    )
    details: str | None = None


class AccessLogCreate(AgentModel):
    service_provider_id: str | None = None
    service_provider_name: str | None = None
    data_type: str | None = None
    action: AccessAction | None = None
    success: bool | None = None
    timestamp: datetime | None = None
    consent_id: str | None = None
    details: str | None = None


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------

class NotificationAction(AgentModel):
    """A suggested follow-up shown alongside a notification."""

    label: str = Field(examples=["View Consent"])
    action_type: NotificationActionType = Field(examples=["view_consent"])
    url: str | None = None


class Notification(AgentModel):
    """A user-facing message about consent requests, data access or security events."""

    notification_id: str = Field(description="Unique identifier of the notification.")
    type: NotificationType = Field(examples=["consent_request"])
    title: str = Field(examples=["New Consent Request"])
    message: str = Field(examples=["GovService Y is requesting access to your address."])
    timestamp: datetime
    is_read: bool = Field(
        default=False,
        description="Once true, never goes back to false.",
    )
    related_entity_id: str | None = Field(
        default=None,
        description="Consent or log entry this notification is about (best-effort link).",
    )
    actions: list[NotificationAction] | None = None


class NotificationCreate(AgentModel):
    type: NotificationType | None = None
    title: str | None = None
    message: str | None = None
    timestamp: datetime | None = None
    is_read: bool = False
    related_entity_id: str | None = None
    actions: list[NotificationAction] | None = None


# ---------------------------------------------------------------------------
# Response envelopes
# ---------------------------------------------------------------------------

class ApiError(AgentModel):
    code: str = Field(examples=["NOT_FOUND"])
    message: str = Field(examples=["Consent not found"])
    details: Any | None = None


class ApiResponse(AgentModel):
    """Uniform envelope around every JSON response.

    Exactly one of data / error is present, depending on success."""

    success: bool
    data: Any | None = None
    error: ApiError | None = None
    timestamp: datetime


class Pagination(AgentModel):
    page: int = Field(examples=[1])
    page_size: int = Field(examples=[10])
    total_items: int = Field(examples=[3])
    total_pages: int = Field(examples=[1])


class PaginatedResponse(ApiResponse):
    pagination: Pagination | None = None


# ---------------------------------------------------------------------------
# Citizen identity (mock, read-only)
# ---------------------------------------------------------------------------

class ResidencyStatus(str, Enum):
    citizen = "Citizen"
    permanent_resident = "Permanent Resident"
    protected_person = "Protected Person"
    temporary_resident = "Temporary Resident"
    visitor = "Visitor"


class PermanentAddress(AgentModel):
    street: str
    city: str
    province: str
    postal_code: str
    country: str


class EmergencyContact(AgentModel):
    name: str
    relationship: str
    phone: str
    email: str | None = None


class IdentityData(AgentModel):
    """The citizen identity the agent holds on behalf of its owner."""

    full_name: str
    date_of_birth: str = Field(description="YYYY-MM-DD", examples=["1985-03-15"])
    social_insurance_number: str | None = None
    drivers_license_number: str | None = None
    health_card_number: str | None = None
    permanent_address: PermanentAddress
    status: ResidencyStatus
    emergency_contacts: list[EmergencyContact] | None = None
    profile_picture_url: str | None = None
