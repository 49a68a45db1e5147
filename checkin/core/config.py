from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "Event Check-In"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None  # e.g. "app.log"; stdout only when unset

    # Token issuance (tokens are minted here, verified by the webhooks)
    JWT_SECRET: Optional[str] = None
    ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_MINUTES: int = 60
    TOKEN_ISSUER: str = "event-checkin"
    TOKEN_SUBJECT: str = "checkin-app"

    # External check-in webhooks. No built-in defaults: an unset endpoint
    # disables that step instead of silently pointing at someone else's host.
    LOOKUP_ENDPOINT: Optional[str] = None
    UPDATE_ENDPOINT: Optional[str] = None

    # Confirmation email (Resend-compatible HTTP API)
    RESEND_KEY: Optional[str] = None
    EMAIL_API_URL: str = "https://api.resend.com/emails"
    EMAIL_FROM: str = "noreply@example.com"
    EMAIL_SENDER_NAME: str = "Event Check-In"
    EMAIL_SUBJECT: str = "Check-In Confirmed - Agenda Attached"
    EMAIL_TEMPLATE_PATH: Optional[str] = None  # falls back to the bundled template
    EMAIL_ATTACHMENT_PATH: Optional[str] = "attachments/agenda.pdf"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def token_issuance_enabled(self) -> bool:
        return bool(self.JWT_SECRET)

settings = Settings()
