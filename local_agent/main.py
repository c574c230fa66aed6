"""
Local Agent -- Application entry point.

Run with:
    uvicorn local_agent.main:app --port 3002

Then open http://localhost:3002/docs for the interactive Swagger UI.

This file:
  1. Configures logging
  2. Creates the FastAPI application (seeding sample data on startup)
  3. Adds CORS middleware
  4. Maps store errors and request errors onto the response envelope
  5. Mounts all route modules (system, consents, access logs, notifications)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from local_agent import config
from local_agent.core.envelope import render, wrap_error
from local_agent.core.errors import NotFoundError, ValidationError
from local_agent.routes import access_logs, consents, notifications, system
from local_agent.sample_data import load_sample_data

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.SEED_SAMPLE_DATA:
        load_sample_data()
    logger.info("Local agent %s ready (custodian %s)", config.API_VERSION, config.AGENT_DID)
    yield


# ---------------------------------------------------------------------------
# Create the FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Local Agent",
    version=config.API_VERSION,
    description=(
        "Mock personal data agent. Tracks which service providers may access "
        "which categories of a citizen's data, logs every access, and raises "
        "notifications about both.\n\n"
        "All state lives in memory and is lost on restart."
    ),
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Middleware
#
# The dashboard runs on another port, so browsers need CORS headers.
# Origins come from CORS_ORIGINS (default "*").
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)


# ---------------------------------------------------------------------------
# Error handlers
#
# Every failure leaves as the same envelope as a success, with
# success=false and an error code clients can switch on.
# ---------------------------------------------------------------------------

HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return render(wrap_error("NOT_FOUND", exc.message), status_code=404)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return render(wrap_error("BAD_REQUEST", exc.message), status_code=400)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    ]
    return render(
        wrap_error("BAD_REQUEST", "Invalid request. " + "; ".join(problems)),
        status_code=400,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code >= 500:
        code = "INTERNAL_SERVER_ERROR"
    else:
        code = HTTP_ERROR_CODES.get(exc.status_code, "BAD_REQUEST")
    return render(wrap_error(code, str(exc.detail)), status_code=exc.status_code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return render(wrap_error("INTERNAL_SERVER_ERROR", "Something broke!"), status_code=500)


# ---------------------------------------------------------------------------
# Mount route modules
# ---------------------------------------------------------------------------

app.include_router(system.router)
app.include_router(consents.router)
app.include_router(access_logs.router)
app.include_router(notifications.router)


@app.get("/", include_in_schema=False, response_class=PlainTextResponse)
async def root():
    return "Mock Local Agent is running! API is available at /api/v1"
