from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, model_validator

NOT_SPECIFIED = "Not specified"

# Canonical field name first, then the spellings the webhooks use.
# The first non-empty value wins.
FIELD_ALIASES = {
    "name": ("name", "fullName", "Name"),
    "email": ("email", "Email"),
    "phone": ("phone", "PhoneNumber", "Phone"),
    "profession": ("profession", "Profession"),
    "experience_level": ("experience_level", "experienceLevel", "ExperienceLevel"),
    "gender": ("gender", "Gender"),
    "registration_date": ("registration_date", "Registration Date", "RegistrationDate"),
    "check_in_time": ("check_in_time", "checkInTime", "CheckInTime", "CheckIn Time"),
}


class CheckInStatus(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    ALREADY_CHECKED_IN = "ALREADY_CHECKED_IN"
    CAN_CHECK_IN = "CAN_CHECK_IN"
    SUCCESS = "SUCCESS"
    # Synthesized locally, never sent by the lookup service
    CONNECTION_ERROR = "CONNECTION_ERROR"
    UPDATE_FAILED = "UPDATE_FAILED"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


def _first_present(data: dict, keys) -> Optional[str]:
    for key in keys:
        value = data.get(key)
        if value is None or value is False or value == "" or value == "null":
            continue
        return value if isinstance(value, str) else str(value)
    return None


class AttendeeRecord(BaseModel):
    """Attendee as returned by the lookup service, aliases already resolved"""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    profession: Optional[str] = None
    experience_level: Optional[str] = None
    gender: Optional[str] = None
    registration_date: Optional[str] = None
    check_in_time: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def resolve_aliases(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {field: _first_present(data, keys) for field, keys in FIELD_ALIASES.items()}

    @property
    def display_name(self) -> str:
        return self.name or NOT_SPECIFIED

    @property
    def display_email(self) -> str:
        return self.email or NOT_SPECIFIED

    def with_check_in(self, timestamp: str) -> "AttendeeRecord":
        return self.model_copy(update={"check_in_time": timestamp})


class LookupResult(BaseModel):
    status: str
    message: Optional[str] = None
    attendee: Optional[AttendeeRecord] = None
    error: Optional[str] = None  # transport detail for the synthesized failures

    @classmethod
    def from_reply(cls, data: Any) -> "LookupResult":
        """Build a result from the lookup service's JSON body.

        Anything that is not an object, or lacks a usable status, falls into
        the generic error branch of the renderer.
        """
        if not isinstance(data, dict):
            return cls(status="")
        attendee = data.get("attendee")
        message = data.get("message")
        return cls(
            status=str(data.get("status") or ""),
            message=str(message) if message else None,
            attendee=AttendeeRecord.model_validate(attendee) if isinstance(attendee, dict) else None,
        )

    @property
    def kind(self) -> Optional[CheckInStatus]:
        try:
            return CheckInStatus(self.status)
        except ValueError:
            return None
