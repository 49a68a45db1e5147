"""
Response panel rendering for the check-in page.

Each lookup/update outcome maps to one panel: a CSS class, a heading, a
message and optionally the attendee details and a confirm action.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup
from checkin.models.attendee import AttendeeRecord, CheckInStatus, LookupResult
from checkin.utils.timefmt import format_display_time

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)
env.filters["display_time"] = format_display_time


@dataclass(frozen=True)
class PanelState:
    css_class: str
    heading: str
    default_message: str
    show_details: bool = False
    fixed_message: bool = False
    show_error: bool = False


STATES = {
    CheckInStatus.NOT_FOUND: PanelState(
        "not-found", "Attendee Not Found",
        "No attendee found with this email address.",
    ),
    CheckInStatus.ALREADY_CHECKED_IN: PanelState(
        "already-checked-in", "Already Checked In",
        "This attendee has already been checked in.", show_details=True,
    ),
    CheckInStatus.CAN_CHECK_IN: PanelState(
        "can-check-in", "Ready to Check In",
        "This attendee is ready to be checked in.", show_details=True,
    ),
    CheckInStatus.SUCCESS: PanelState(
        "success", "Check-In Successful",
        "This attendee has been successfully checked in!",
        show_details=True, fixed_message=True,
    ),
    CheckInStatus.CONNECTION_ERROR: PanelState(
        "not-found", "Connection Error",
        "Failed to check attendee status. Please check your connection and try again.",
        fixed_message=True, show_error=True,
    ),
    CheckInStatus.UPDATE_FAILED: PanelState(
        "not-found", "Update Failed",
        "Failed to update attendee status. Please try again.",
        fixed_message=True, show_error=True,
    ),
    CheckInStatus.CONFIGURATION_ERROR: PanelState(
        "not-found", "Service Unavailable",
        "Check-in is not configured on this server.",
    ),
}

# Unknown statuses reuse the not-found styling
GENERIC_ERROR = PanelState("not-found", "Error", "An unexpected error occurred.")


@dataclass(frozen=True)
class Panel:
    markup: Markup
    css_class: str
    # Set only for CAN_CHECK_IN: the record the confirm action must carry
    pending: Optional[AttendeeRecord] = None


def render_attendee_details(attendee: Optional[AttendeeRecord]) -> Markup:
    if attendee is None:
        return Markup("")
    template = env.get_template("attendee_details.html")
    return Markup(template.render(attendee=attendee))


def render(result: LookupResult, email: str) -> Panel:
    state = STATES.get(result.kind, GENERIC_ERROR)
    message = state.default_message if state.fixed_message else (result.message or state.default_message)
    details = render_attendee_details(result.attendee) if state.show_details else Markup("")
    pending = result.attendee if result.kind is CheckInStatus.CAN_CHECK_IN else None

    template = env.get_template("panel.html")
    markup = template.render(
        state=state,
        message=message,
        details=details,
        error=result.error if state.show_error else None,
        confirm_email=email if result.kind is CheckInStatus.CAN_CHECK_IN else None,
        pending_json=(pending or AttendeeRecord()).model_dump_json(exclude_none=True),
    )
    return Panel(markup=Markup(markup), css_class=state.css_class, pending=pending)
