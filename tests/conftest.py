import json
import logging
from unittest.mock import MagicMock, patch

import pytest

from auth0kit.core.config import ClientOptions
from auth0kit.core.http_client import RestClient

DOMAIN = "tenant.auth0.com"
BASE_URL = f"https://{DOMAIN}"


def make_response(
    status_code: int = 200,
    payload=None,
    text: str | None = None,
    headers: dict | None = None,
    reason: str = "",
):
    """Create a mock ``requests.Response``.

    ``payload`` is JSON encoded into ``text`` and served as
    ``application/json``; pass ``text`` alone for non-JSON bodies.
    """
    response = MagicMock()
    response.status_code = status_code
    response.headers = dict(headers or {})
    response.reason = reason

    if payload is not None:
        response.headers.setdefault("Content-Type", "application/json; charset=utf-8")
        response.text = json.dumps(payload)
        response.json = MagicMock(return_value=payload)
    else:
        response.text = text or ""
        response.json = MagicMock(side_effect=ValueError("No JSON object"))
    return response


@pytest.fixture
def mock_response():
    """Factory fixture building mock responses."""
    return make_response


@pytest.fixture
def mock_request():
    """Patch ``requests.request`` as used by the REST client."""
    with patch("auth0kit.core.http_client.requests.request") as mock:
        yield mock


@pytest.fixture
def mock_sleep():
    """Patch ``time.sleep`` in the REST client so retries are instant."""
    with patch("auth0kit.core.http_client.time.sleep") as mock:
        yield mock


@pytest.fixture
def rest_client():
    """REST client for the Management API of the test tenant."""
    return RestClient(
        f"{BASE_URL}/api/v2", token="test_token", options=ClientOptions(retries=2)
    )


@pytest.fixture
def mock_rest():
    """A RestClient double for resource group tests."""
    return MagicMock(spec=RestClient)


@pytest.fixture
def auth0_env(monkeypatch):
    """Set DEV_ credentials in the environment."""
    monkeypatch.setenv("DEV_AUTH0_DOMAIN", DOMAIN)
    monkeypatch.setenv("DEV_AUTH0_CLIENT_ID", "test_client_id_12345")
    monkeypatch.setenv("DEV_AUTH0_CLIENT_SECRET", "test_client_secret")
    monkeypatch.delenv("DEV_AUTH0_AUDIENCE", raising=False)
    with patch("auth0kit.core.config.check_env_file"), patch(
        "auth0kit.core.auth.load_dotenv"
    ):
        yield


@pytest.fixture(autouse=True)
def reset_auth0kit_logger():
    """Undo handler and propagation changes made by logging configuration."""
    logger = logging.getLogger("auth0kit")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
