import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from checkin.core.config import Settings
from checkin.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Mints short-lived HS256 tokens for the check-in webhooks.

    Tokens carry only the fixed issuer/subject claims plus iat/exp; no user
    data is ever embedded. Nothing is cached: every call signs a new token.
    """

    def __init__(self, settings: Settings):
        self.secret = settings.JWT_SECRET
        self.algorithm = settings.ALGORITHM
        self.expires_delta = timedelta(minutes=settings.TOKEN_EXPIRE_MINUTES)
        self.issuer = settings.TOKEN_ISSUER
        self.subject = settings.TOKEN_SUBJECT

    @property
    def configured(self) -> bool:
        return bool(self.secret)

    def issue_token(self, now: Optional[datetime] = None) -> str:
        """Create a signed token valid for the configured window"""
        if not self.secret:
            raise ConfigurationError("JWT_SECRET is not configured")

        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": self.subject,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.expires_delta).timestamp()),
            "iss": self.issuer,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)
