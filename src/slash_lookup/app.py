"""FastAPI application with lifespan and health endpoint."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from slash_lookup.config import get_settings, require_slack_secret
from slash_lookup.logging_config import configure_logging
from slash_lookup.lookup import KnowledgeGraphResolver
from slash_lookup.slack.router import router as slack_router
from slash_lookup.slack.router import slack_http_exception_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, load config and the lookup client.

    Startup fails with ConfigurationError when SLACK_SECRET is missing.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    app.state.slack_secret = require_slack_secret(settings)
    if not settings.kg_api_key:
        logger.warning("KG_API_KEY is not set; every lookup will fail upstream")

    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.lookup_timeout_seconds)) as client:
        app.state.resolver = KnowledgeGraphResolver(
            client,
            settings.kg_api_key,
            timeout_seconds=settings.lookup_timeout_seconds,
            language=settings.kg_language,
        )
        logger.info("Slash lookup ready (environment=%s)", settings.environment)
        yield


app = FastAPI(
    title="Slash Lookup",
    lifespan=lifespan,
)
app.include_router(slack_router)
app.add_exception_handler(StarletteHTTPException, slack_http_exception_handler)


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "slash-lookup",
        "version": "0.1.0",
    }
