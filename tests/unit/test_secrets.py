import boto3
import pytest
from botocore.exceptions import EndpointConnectionError, NoCredentialsError
from botocore.stub import Stubber

from contact_relay.infra.secrets import load_api_key


@pytest.fixture
def sm_client(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    client = boto3.client("secretsmanager", region_name="us-east-1")
    with Stubber(client) as stubber:
        yield client, stubber


def test_plain_secret_string(sm_client):
    client, stubber = sm_client
    stubber.add_response("get_secret_value", {"SecretString": "re_plain"}, {"SecretId": "contact/resend"})
    assert load_api_key("contact/resend", client=client) == "re_plain"


def test_json_secret_string(sm_client):
    client, stubber = sm_client
    stubber.add_response("get_secret_value", {"SecretString": '{"RESEND_API_KEY": "re_json"}'})
    assert load_api_key("contact/json", client=client) == "re_json"


def test_result_is_cached(sm_client):
    client, stubber = sm_client
    stubber.add_response("get_secret_value", {"SecretString": "re_once"})
    assert load_api_key("contact/cached", client=client) == "re_once"
    # second lookup would fail the stubber if it hit the client
    assert load_api_key("contact/cached", client=client) == "re_once"
    stubber.assert_no_pending_responses()


def test_client_error_is_missing_key(sm_client):
    client, stubber = sm_client
    stubber.add_client_error("get_secret_value", service_error_code="ResourceNotFoundException")
    assert load_api_key("contact/missing", client=client) is None


def test_json_without_key_field(sm_client):
    client, stubber = sm_client
    stubber.add_response("get_secret_value", {"SecretString": '{"other": "x"}'})
    assert load_api_key("contact/other", client=client) is None


class UnreachableSecretsClient:
    def __init__(self, error):
        self.error = error
        self.calls = 0

    def get_secret_value(self, **kwargs):
        self.calls += 1
        raise self.error


@pytest.mark.parametrize(
    "error",
    [
        EndpointConnectionError(endpoint_url="https://secretsmanager.us-east-1.amazonaws.com"),
        NoCredentialsError(),
    ],
)
def test_botocore_error_is_missing_key(error):
    client = UnreachableSecretsClient(error)
    assert load_api_key("contact/unreachable", client=client) is None
    # failures are not cached
    assert load_api_key("contact/unreachable", client=client) is None
    assert client.calls == 2
