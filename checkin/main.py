from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import Optional
import logging
import httpx
import uvicorn

from checkin.api.routes import client_config, email, health, pages, token
from checkin.core.config import Settings, settings as default_settings
from checkin.core.logging import setup_logging
from checkin.services.notification import NotificationService

setup_logging(default_settings.LOG_LEVEL, default_settings.LOG_FILE)
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the check-in application.

    ``transport`` is handed to every outbound httpx client; tests pass an
    ``httpx.MockTransport`` in place of the webhooks and the email API.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"🚀 Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})...")
        if settings.token_issuance_enabled:
            logger.info("✅ JWT_SECRET loaded")
        else:
            logger.warning("⚠️ JWT_SECRET not set: token issuance and check-in are disabled")
        for name in ("LOOKUP_ENDPOINT", "UPDATE_ENDPOINT"):
            if not getattr(settings, name):
                logger.warning(f"⚠️ {name} not set")
        if not settings.RESEND_KEY:
            logger.warning("⚠️ RESEND_KEY not set: confirmation emails will not be sent")

        yield

        logger.info("👋 Shutting down, waiting for pending confirmation emails...")
        await app.state.notifications.drain()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Event check-in: attendee lookup, check-in confirmation and email notification",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.http_transport = transport
    app.state.notifications = NotificationService(settings, transport=transport)

    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(client_config.router, prefix="/api", tags=["Config"])
    app.include_router(token.router, prefix="/api", tags=["Token"])
    app.include_router(email.router, prefix="/api", tags=["Email"])
    app.include_router(pages.router, tags=["Check-In"])

    return app


app = create_app()


def run():
    uvicorn.run(app, host="0.0.0.0", port=default_settings.PORT, reload=False)


if __name__ == "__main__":
    run()
