import logging
from typing import Optional
import pydantic
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from checkin.api.deps import get_lookup_client, get_settings, get_update_client
from checkin.core.config import Settings
from checkin.core.errors import ConfigurationError, MalformedResponseError, ValidationError
from checkin.models.attendee import AttendeeRecord, CheckInStatus, LookupResult
from checkin.services.renderer import TEMPLATES_DIR, Panel, render
from checkin.services.webhooks import AttendeeLookupClient, AttendeeUpdateClient
from checkin.utils.validation import EMAIL_PATTERN_SOURCE, INVALID_EMAIL_MESSAGE, require_valid

router = APIRouter()
logger = logging.getLogger(__name__)
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _page(
    request: Request,
    settings: Settings,
    email: Optional[str] = None,
    email_error: Optional[str] = None,
    panel: Optional[Panel] = None,
    status_code: int = status.HTTP_200_OK,
):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.PROJECT_NAME,
            "email": email,
            "email_error": email_error,
            "invalid_email_message": INVALID_EMAIL_MESSAGE,
            "email_pattern": EMAIL_PATTERN_SOURCE,
            "panel": panel,
            # Inert until a signing secret is configured
            "submit_enabled": settings.token_issuance_enabled,
        },
        status_code=status_code,
    )


def _failure_panel(exc: Exception, email: str):
    if isinstance(exc, ConfigurationError):
        logger.error(f"❌ Check-in not configured: {exc}")
        # Default panel copy only; the detail stays in the log
        result = LookupResult(status=CheckInStatus.CONFIGURATION_ERROR.value)
        return render(result, email), status.HTTP_500_INTERNAL_SERVER_ERROR
    logger.error(f"❌ Unreadable reply from check-in service: {exc}")
    result = LookupResult(status="", message="The check-in service returned an unreadable response.")
    return render(result, email), status.HTTP_502_BAD_GATEWAY


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, settings: Settings = Depends(get_settings)):
    """Check-in form"""
    return _page(request, settings)


@router.post("/checkin", response_class=HTMLResponse)
async def submit_checkin(
    request: Request,
    email: str = Form(""),
    settings: Settings = Depends(get_settings),
    lookup_client: AttendeeLookupClient = Depends(get_lookup_client),
):
    """Validate the email, look the attendee up and show the result"""
    try:
        email = require_valid(email)
    except ValidationError as e:
        return _page(request, settings, email=email, email_error=str(e),
                     status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)

    try:
        result = await lookup_client.lookup(email)
    except (ConfigurationError, MalformedResponseError) as e:
        panel, status_code = _failure_panel(e, email)
        return _page(request, settings, email=email, panel=panel, status_code=status_code)

    return _page(request, settings, email=email, panel=render(result, email))


@router.post("/checkin/confirm", response_class=HTMLResponse)
async def confirm_checkin(
    request: Request,
    email: str = Form(""),
    attendee: str = Form(""),
    settings: Settings = Depends(get_settings),
    update_client: AttendeeUpdateClient = Depends(get_update_client),
):
    """Mark the attendee from the previous lookup as checked in"""
    try:
        email = require_valid(email)
    except ValidationError as e:
        return _page(request, settings, email=email, email_error=str(e),
                     status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)

    pending = None
    if attendee:
        try:
            pending = AttendeeRecord.model_validate_json(attendee)
        except pydantic.ValidationError as e:
            logger.warning(f"Ignoring unreadable attendee data for {email}: {e}")

    try:
        result = await update_client.confirm(email, pending)
    except ConfigurationError as e:
        panel, status_code = _failure_panel(e, email)
        return _page(request, settings, email=email, panel=panel, status_code=status_code)

    return _page(request, settings, email=email, panel=render(result, email))
