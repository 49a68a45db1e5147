import re
import email_validator
from email_validator import EmailNotValidError, validate_email
from checkin.core.errors import ValidationError

# Unanchored form doubles as the HTML pattern attribute, which anchors implicitly
EMAIL_PATTERN_SOURCE = r"[^\s@]+@[^\s@]+\.[^\s@]+"
EMAIL_PATTERN = re.compile(rf"^{EMAIL_PATTERN_SOURCE}$")
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"

# Reserved names (.local, .test, .localhost) are left to the attendee list to judge
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()

def is_valid(email: str) -> bool:
    """Pattern check and email-validator syntax check must both pass"""
    if not email or not EMAIL_PATTERN.match(email):
        return False
    try:
        validate_email(email, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True

def require_valid(email: str) -> str:
    """Trim and validate a submitted email, raising ValidationError if bad"""
    email = (email or "").strip()
    if not is_valid(email):
        raise ValidationError(INVALID_EMAIL_MESSAGE)
    return email
