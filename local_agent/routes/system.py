"""
Agent status, session initiation and the citizen identity payload.

None of these touch the record stores except to report their sizes.
"""

import asyncio
import uuid

from fastapi import APIRouter

from local_agent import config
from local_agent.core.envelope import render, wrap_result
from local_agent.models.schemas import ApiResponse
from local_agent.sample_data import MOCK_IDENTITY
from local_agent.store import access_log_store, consent_store, notification_store

router = APIRouter()


@router.get(
    "/api/v1/status",
    response_model=ApiResponse,
    summary="Agent status",
    description="Whether the agent is running, its version, and how many records it holds.",
    tags=["System"],
)
async def status():
    return render(wrap_result({
        "isRunning": True,
        "version": config.API_VERSION,
        "agentDid": config.AGENT_DID,
        "consentsStored": len(consent_store),
        "accessLogsStored": len(access_log_store),
        "notificationsStored": len(notification_store),
    }))


@router.post(
    "/api/v1/auth/initiate",
    response_model=ApiResponse,
    summary="Start a session",
    description="Returns a fresh session token. Tokens are not checked anywhere.",
    tags=["System"],
)
async def initiate_auth():
    return render(wrap_result({
        "sessionToken": str(uuid.uuid4()),
        "agentDid": config.AGENT_DID,
    }))


@router.get(
    "/api/v1/identity",
    response_model=ApiResponse,
    summary="Citizen identity",
    description="The identity record held by this agent, served after a short simulated delay.",
    tags=["Identity"],
)
async def identity():
    if config.IDENTITY_DELAY_SECONDS > 0:
        await asyncio.sleep(config.IDENTITY_DELAY_SECONDS)
    return render(wrap_result(MOCK_IDENTITY))
