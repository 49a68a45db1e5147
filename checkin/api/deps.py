from fastapi import Depends, Request
from checkin.core.config import Settings
from checkin.core.security import TokenIssuer
from checkin.services.notification import NotificationService
from checkin.services.webhooks import AttendeeLookupClient, AttendeeUpdateClient

def get_settings(request: Request) -> Settings:
    """Settings loaded once at startup"""
    return request.app.state.settings

def get_token_issuer(settings: Settings = Depends(get_settings)) -> TokenIssuer:
    return TokenIssuer(settings)

def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notifications

def get_lookup_client(
    request: Request,
    settings: Settings = Depends(get_settings),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AttendeeLookupClient:
    return AttendeeLookupClient(
        settings.LOOKUP_ENDPOINT,
        issuer.issue_token,
        transport=request.app.state.http_transport,
    )

def get_update_client(
    request: Request,
    settings: Settings = Depends(get_settings),
    issuer: TokenIssuer = Depends(get_token_issuer),
    notifications: NotificationService = Depends(get_notification_service),
) -> AttendeeUpdateClient:
    return AttendeeUpdateClient(
        settings.UPDATE_ENDPOINT,
        issuer.issue_token,
        notifier=notifications,
        transport=request.app.state.http_transport,
    )
