import json
import httpx
import pytest
from fastapi.testclient import TestClient
from checkin.core.config import Settings
from checkin.main import create_app

LOOKUP_URL = "https://hooks.test/lookup-checkin"
UPDATE_URL = "https://hooks.test/update-checkin"
EMAIL_URL = "https://mail.test/emails"
SECRET = "test-signing-secret"


def make_settings(**overrides) -> Settings:
    values = dict(
        JWT_SECRET=SECRET,
        LOOKUP_ENDPOINT=LOOKUP_URL,
        UPDATE_ENDPOINT=UPDATE_URL,
        RESEND_KEY="re_test_key",
        EMAIL_API_URL=EMAIL_URL,
        EMAIL_FROM="checkin@example.com",
        EMAIL_ATTACHMENT_PATH=None,
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeServices:
    """Stands in for the lookup/update webhooks and the email API"""

    def __init__(self):
        self.requests = []
        self.replies = {}

    def reply(self, url, response):
        self.replies[url] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.get(str(request.url), httpx.Response(404))
        if isinstance(reply, Exception):
            raise reply
        return httpx.Response(reply.status_code, headers=reply.headers, content=reply.content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def sent_to(self, url):
        return [r for r in self.requests if str(r.url) == url]

    def bodies(self, url):
        return [json.loads(r.content) for r in self.sent_to(url)]


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def services():
    return FakeServices()


@pytest.fixture
def app(settings, services):
    return create_app(settings, transport=services.transport)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
