import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from checkin.api.deps import get_notification_service
from checkin.core.errors import ConfigurationError, NotificationError
from checkin.schemas import CheckInEmailRequest, CheckInEmailResponse, ErrorResponse
from checkin.services.notification import NotificationService

router = APIRouter()
logger = logging.getLogger(__name__)

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})

@router.post(
    "/send-checkin-email",
    response_model=CheckInEmailResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def send_checkin_email(
    body: CheckInEmailRequest,
    notifications: NotificationService = Depends(get_notification_service),
):
    """Send the check-in confirmation email"""
    if not body.toEmail:
        return _error(status.HTTP_400_BAD_REQUEST, "toEmail is required")

    try:
        message_id = await notifications.notify(body.toEmail, body.fullName, body.checkInTime)
    except ConfigurationError as e:
        logger.error(f"Email send error: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Email service not configured")
    except NotificationError as e:
        logger.error(f"Email send error: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to send email")
    except Exception as e:
        logger.error(f"Email send error: {e}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    return CheckInEmailResponse(success=True, id=message_id)
