from typing import Optional


class CheckInError(Exception):
    """Base class for check-in service errors"""


class ValidationError(CheckInError):
    """Submitted email failed validation; nothing was sent anywhere"""


class ConfigurationError(CheckInError):
    """A required setting (signing secret, endpoint, email key) is missing"""


class TransportError(CheckInError):
    """Outbound call failed at the network level or returned non-2xx"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(CheckInError):
    """Lookup service replied with something that is not JSON"""


class NotificationError(CheckInError):
    """Confirmation email could not be sent"""
