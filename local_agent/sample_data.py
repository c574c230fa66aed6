"""
Sample records and the mock citizen identity.

Loaded at startup (unless SEED_SAMPLE_DATA=false) so the dashboard has
something to show. The records are cross-linked by id the same way real
ones would be: log entries point at consents, notifications point at a
consent or a log entry.
"""

import logging
from datetime import timedelta

from local_agent.core.base import new_id, utcnow
from local_agent.models.schemas import (
    AccessLogEntry,
    ConsentGrant,
    EmergencyContact,
    IdentityData,
    Notification,
    NotificationAction,
    PermanentAddress,
)
from local_agent.store import access_log_store, consent_store, notification_store

logger = logging.getLogger(__name__)


MOCK_IDENTITY = IdentityData(
    full_name="John Alistair Doe",
    date_of_birth="1985-03-15",
    social_insurance_number="987-654-321",
    drivers_license_number="D1234-56789-00000",
    health_card_number="9876543210 BC",
    permanent_address=PermanentAddress(
        street="456 Oak Avenue",
        city="Vancouver",
        province="BC",
        postal_code="V6B 1A2",
        country="Canada",
    ),
    status="Citizen",
    emergency_contacts=[
        EmergencyContact(
            name="Jane Mary Doe", relationship="Spouse",
            phone="555-0202", email="jane.doe@example.com",
        ),
        EmergencyContact(name="Robert Smith", relationship="Friend", phone="555-0303"),
    ],
    profile_picture_url="https://via.placeholder.com/150/007bff/FFFFFF?text=JD",
)


def load_sample_data() -> None:
    """Replace the contents of all three stores with the sample set."""
    now = utcnow()
    custodian = consent_store.custodian_id
    health_portal_id = new_id()
    gov_service_id = new_id()

    consents = [
        ConsentGrant(
            consent_id=health_portal_id,
            service_provider_id="did:example:sp1",
            service_provider_name="Health Portal X",
            data_types=["profile.name", "health.heartrate"],
            purpose="Display health dashboard",
            status="active",
            created_at=now,
            updated_at=now,
            data_custodian_id=custodian,
            granted_data_types=["profile.name", "health.heartrate"],
        ),
        ConsentGrant(
            consent_id=gov_service_id,
            service_provider_id="did:example:sp2",
            service_provider_name="GovService Y",
            data_types=["profile.address"],
            purpose="Verify address for benefits",
            status="pending",
            created_at=now,
            updated_at=now,
            expires_at=now + timedelta(days=30),
            data_custodian_id=custodian,
            granted_data_types=["profile.address"],
        ),
        ConsentGrant(
            consent_id=new_id(),
            service_provider_id="did:example:sp3",
            service_provider_name="Old Service Z",
            data_types=["profile.email"],
            purpose="Newsletter subscription",
            status="revoked",
            created_at=now - timedelta(days=60),
            updated_at=now - timedelta(days=30),
            data_custodian_id=custodian,
        ),
    ]

    logs = [
        AccessLogEntry(
            log_id=new_id(),
            timestamp=now,
            service_provider_id="did:example:sp1",
            service_provider_name="Health Portal X",
            data_type="health.heartrate",
            action="read",
            success=True,
            consent_id=health_portal_id,
        ),
        AccessLogEntry(
            log_id=new_id(),
            timestamp=now - timedelta(hours=1),
            service_provider_id="did:example:sp1",
            service_provider_name="Health Portal X",
            data_type="profile.name",
            action="read",
            success=True,
            consent_id=health_portal_id,
        ),
        AccessLogEntry(
            log_id=new_id(),
            timestamp=now - timedelta(hours=2),
            service_provider_id="did:example:sp2",
            service_provider_name="GovService Y",
            data_type="profile.address",
            action="read",
            success=False,
            details="User not found in external system",
        ),
    ]

    notifications = [
        Notification(
            notification_id=new_id(),
            type="consent_request",
            title="New Consent Request",
            message="GovService Y is requesting access to your address.",
            timestamp=now,
            related_entity_id=gov_service_id,
            actions=[NotificationAction(label="View Consent", action_type="view_consent")],
        ),
        Notification(
            notification_id=new_id(),
            type="data_access",
            title="Data Accessed",
            message="Health Portal X accessed your heart rate data.",
            timestamp=now,
            related_entity_id=logs[0].log_id,
        ),
        Notification(
            notification_id=new_id(),
            type="security_alert",
            title="Failed Login Attempt",
            message="An unsuccessful login attempt was made to your account.",
            timestamp=now - timedelta(minutes=5),
            is_read=True,
        ),
    ]

    consent_store.load(consents)
    access_log_store.load(logs)
    notification_store.load(notifications)

    logger.info(
        "Sample data loaded: %d consents, %d access logs, %d notifications",
        len(consent_store), len(access_log_store), len(notification_store),
    )
