from fastapi import APIRouter, Depends
from checkin.api.deps import get_settings
from checkin.core.config import Settings
from checkin.schemas import ClientConfig

router = APIRouter()

@router.get("/config", response_model=ClientConfig)
async def client_config(settings: Settings = Depends(get_settings)):
    """Public configuration for the check-in page. Never includes secrets."""
    return ClientConfig(
        LOOKUP_ENDPOINT=settings.LOOKUP_ENDPOINT,
        UPDATE_ENDPOINT=settings.UPDATE_ENDPOINT,
        NODE_ENV=settings.ENVIRONMENT,
    )
