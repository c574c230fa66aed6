"""
In-memory data stores for the running agent.

One instance of each store for the whole process. Nothing is persisted:
data is lost on restart, which is the point of a local mock agent.
"""

from local_agent.config import AGENT_DID
from local_agent.core.access_logs import AccessLogStore
from local_agent.core.consents import ConsentStore
from local_agent.core.notifications import NotificationStore

# consent_id -> ConsentGrant
consent_store = ConsentStore(custodian_id=AGENT_DID)

# log_id -> AccessLogEntry, append-only
access_log_store = AccessLogStore()

# notification_id -> Notification
notification_store = NotificationStore()


def reset() -> None:
    """Empty all three stores."""
    consent_store.clear()
    access_log_store.clear()
    notification_store.clear()
