from datetime import datetime, timezone
from typing import Optional

def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

def parse_timestamp(value) -> Optional[datetime]:
    """Parse an ISO-8601 string; naive values are taken as local time"""
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    text = str(value).strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None

def format_display_time(value) -> str:
    """Locale date/time for the attendee panel, or the raw value if unparseable"""
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value)
    try:
        return parsed.astimezone().strftime("%x %X")
    except (OverflowError, ValueError, OSError):
        return str(value)

def format_email_time(value=None) -> str:
    """YYYY-MM-DD HH:MM:SS in local time; defaults to now"""
    parsed = parse_timestamp(value) if value else datetime.now()
    if parsed is None:
        return str(value).strip()
    try:
        return parsed.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    except (OverflowError, ValueError, OSError):
        return str(value).strip()
