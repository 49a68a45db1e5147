from pydantic import BaseModel
from typing import Optional

class ClientConfig(BaseModel):
    # Key names are what the check-in page has always read
    LOOKUP_ENDPOINT: Optional[str] = None
    UPDATE_ENDPOINT: Optional[str] = None
    NODE_ENV: str

class TokenResponse(BaseModel):
    token: str

class ErrorResponse(BaseModel):
    error: str

class CheckInEmailRequest(BaseModel):
    # toEmail is checked in the route so a missing value gets a 400, not a 422
    toEmail: Optional[str] = None
    fullName: Optional[str] = None
    checkInTime: Optional[str] = None

class CheckInEmailResponse(BaseModel):
    success: bool = True
    id: str

class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    token_issuance: bool
    lookup_endpoint: bool
    update_endpoint: bool
    email: bool
