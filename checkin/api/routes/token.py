import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from checkin.api.deps import get_token_issuer
from checkin.core.errors import ConfigurationError
from checkin.core.security import TokenIssuer
from checkin.schemas import ErrorResponse, TokenResponse

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post(
    "/generate-jwt",
    response_model=TokenResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate_jwt(issuer: TokenIssuer = Depends(get_token_issuer)):
    """Mint a short-lived token for the check-in webhooks"""
    try:
        return TokenResponse(token=issuer.issue_token())
    except ConfigurationError as e:
        logger.error(f"Error generating JWT: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to generate JWT token"},
        )
