import logging
from typing import Callable, Optional
import httpx
from checkin.core.errors import ConfigurationError, MalformedResponseError, TransportError
from checkin.models.attendee import AttendeeRecord, CheckInStatus, LookupResult
from checkin.utils.timefmt import utc_timestamp

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], str]


class WebhookClient:
    """Authenticated JSON POST to one check-in webhook.

    A fresh token is requested from the provider for every call.
    """

    def __init__(
        self,
        endpoint: Optional[str],
        token_provider: TokenProvider,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = endpoint
        self.token_provider = token_provider
        self.transport = transport

    async def _post(self, body: dict) -> httpx.Response:
        if not self.endpoint:
            raise ConfigurationError(f"{type(self).__name__} has no endpoint configured")

        token = self.token_provider()
        headers = {"Authorization": f"Bearer {token}"}

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(self.endpoint, json=body, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self.endpoint} failed: {e}") from e

        if not response.is_success:
            raise TransportError(f"HTTP error! status: {response.status_code}", response.status_code)
        return response


class AttendeeLookupClient(WebhookClient):

    async def lookup(self, email: str) -> LookupResult:
        try:
            response = await self._post({"Email": email})
        except TransportError as e:
            logger.error(f"❌ Lookup failed for {email}: {e}")
            return LookupResult(status=CheckInStatus.CONNECTION_ERROR.value, error=str(e))

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Lookup service returned invalid JSON: {e}") from e

        result = LookupResult.from_reply(data)
        logger.info(f"🔍 Lookup {email}: {result.status or 'no status'}")
        return result


class AttendeeUpdateClient(WebhookClient):

    def __init__(self, endpoint, token_provider, notifier=None, transport=None):
        super().__init__(endpoint, token_provider, transport)
        self.notifier = notifier

    async def confirm(self, email: str, attendee: Optional[AttendeeRecord] = None) -> LookupResult:
        """Mark the attendee checked in and return the SUCCESS panel state.

        On failure an UPDATE_FAILED result is returned carrying the pending
        attendee unchanged.
        """
        check_in_time = utc_timestamp()
        body = {"Email": email, "CheckIn": True, "CheckIn Time": check_in_time}

        try:
            await self._post(body)
        except TransportError as e:
            logger.error(f"❌ Check-in update failed for {email}: {e}")
            return LookupResult(
                status=CheckInStatus.UPDATE_FAILED.value,
                attendee=attendee,
                error=str(e),
            )

        logger.info(f"✅ Checked in {email} at {check_in_time}")
        checked_in = (attendee or AttendeeRecord()).with_check_in(check_in_time)

        if self.notifier is not None:
            self.notifier.dispatch(email, checked_in.name or "", check_in_time)

        return LookupResult(
            status=CheckInStatus.SUCCESS.value,
            message="Check-in completed successfully",
            attendee=checked_in,
        )
