import pytest

from contact_relay.email.resend_client import ProviderResponse
from contact_relay.infra import secrets
from contact_relay.infra.config import ContactConfig


class RecordingSender:
    def __init__(self, response=None, error=None):
        self.response = response or ProviderResponse(status=200, data={"id": "abc123"})
        self.error = error
        self.payloads = []

    def send(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def config():
    return ContactConfig(api_key="re_test", to_address="inbox@example.com", from_address="form@example.com")


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def make_sender():
    return RecordingSender


@pytest.fixture(autouse=True)
def _clear_secret_cache():
    secrets.clear_cache()
    yield
    secrets.clear_cache()
