from fastapi import APIRouter, Depends
from checkin.api.deps import get_settings
from checkin.core.config import Settings
from checkin.schemas import HealthResponse

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Health check endpoint"""
    ready = settings.token_issuance_enabled and bool(settings.LOOKUP_ENDPOINT) and bool(settings.UPDATE_ENDPOINT)
    return HealthResponse(
        status="healthy" if ready else "degraded",
        service="event-checkin",
        version=settings.VERSION,
        token_issuance=settings.token_issuance_enabled,
        lookup_endpoint=bool(settings.LOOKUP_ENDPOINT),
        update_endpoint=bool(settings.UPDATE_ENDPOINT),
        email=bool(settings.RESEND_KEY),
    )
