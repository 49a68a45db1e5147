import asyncio
import base64
import html
import logging
import re
from pathlib import Path
from typing import List, Optional, Set
import httpx
from checkin.core.config import Settings
from checkin.core.errors import ConfigurationError, NotificationError
from checkin.utils.timefmt import format_email_time

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = Path(__file__).resolve().parent.parent / "templates" / "email.html"
GREETING_RE = re.compile(r"Hi\s*,", re.IGNORECASE)
TIME_LABEL_RE = re.compile(r"(Check-in\s*Time:\s*</span>)", re.IGNORECASE)


class NotificationService:
    """Sends the check-in confirmation email through the delivery API"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport
        self._pending: Set[asyncio.Task] = set()

    @property
    def configured(self) -> bool:
        return bool(self.settings.RESEND_KEY)

    def build_html(self, full_name: Optional[str], check_in_time: Optional[str]) -> str:
        template_path = Path(self.settings.EMAIL_TEMPLATE_PATH or DEFAULT_TEMPLATE)
        body = template_path.read_text(encoding="utf-8")

        name = html.escape((full_name or "").strip() or "there")
        when = html.escape(format_email_time((check_in_time or "").strip() or None))

        body = GREETING_RE.sub(lambda m: f"Hi {name},", body, count=1)
        body = TIME_LABEL_RE.sub(lambda m: f"{m.group(1)} {when}", body, count=1)
        return body

    def load_attachments(self) -> List[dict]:
        """Static attachment if the file exists; otherwise none"""
        if not self.settings.EMAIL_ATTACHMENT_PATH:
            return []
        path = Path(self.settings.EMAIL_ATTACHMENT_PATH)
        try:
            content = path.read_bytes()
        except OSError:
            logger.debug(f"Attachment {path} not found, sending without it")
            return []
        return [{"filename": path.name, "content": base64.b64encode(content).decode("ascii")}]

    async def notify(
        self,
        to_email: str,
        full_name: Optional[str] = None,
        check_in_time: Optional[str] = None,
    ) -> str:
        """Send the confirmation email and return the provider's message id"""
        if not self.configured:
            raise ConfigurationError("Email service not configured")

        payload = {
            "from": f"{self.settings.EMAIL_SENDER_NAME} <{self.settings.EMAIL_FROM}>",
            "to": [to_email],
            "subject": self.settings.EMAIL_SUBJECT,
            "html": self.build_html(full_name, check_in_time),
            "attachments": self.load_attachments(),
        }
        headers = {"Authorization": f"Bearer {self.settings.RESEND_KEY}"}

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(self.settings.EMAIL_API_URL, json=payload, headers=headers)
            response.raise_for_status()
            message_id = response.json().get("id")
            message_id = str(message_id) if message_id else None
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            raise NotificationError(f"Email delivery failed: {e}") from e

        if not message_id:
            raise NotificationError("Failed to send email")

        logger.info(f"📧 Confirmation email sent to {to_email} (id={message_id})")
        return message_id

    def dispatch(self, to_email: str, full_name: Optional[str], check_in_time: Optional[str]) -> asyncio.Task:
        """Fire-and-forget notify(); the caller never sees the outcome"""
        task = asyncio.get_running_loop().create_task(
            self._notify_logged(to_email, full_name, check_in_time)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _notify_logged(self, to_email, full_name, check_in_time):
        try:
            await self.notify(to_email, full_name, check_in_time)
        except (NotificationError, ConfigurationError) as e:
            logger.warning(f"⚠️ Confirmation email to {to_email} not sent: {e}")
        except Exception:
            logger.exception(f"Unexpected error sending confirmation email to {to_email}")

    async def drain(self):
        """Wait for dispatched emails still in flight"""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
