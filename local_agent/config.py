"""
Runtime settings, read once from the environment at import time.
"""

import os

API_VERSION = "0.1.0"

# DID of this agent. Stamped on every consent as its data custodian.
AGENT_DID = os.getenv("AGENT_DID", "did:mock:local-agent-123")

# Comma-separated list; "*" allows any origin.
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").lower() in ("1", "true", "yes")

# Simulated latency of GET /api/v1/identity
IDENTITY_DELAY_SECONDS = float(os.getenv("IDENTITY_DELAY_SECONDS", "0.5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
