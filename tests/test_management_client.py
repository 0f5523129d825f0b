"""Tests for ManagementApiClient construction."""

import pytest

from auth0kit.core.config import ClientOptions
from auth0kit.core.exceptions import AuthConfigError
from auth0kit.core.rate_limiter import RateLimit
from auth0kit.management import ManagementApiClient


class TestManagementApiClient:
    """Test the Management API entry point."""

    def test_base_url_and_groups(self):
        client = ManagementApiClient("token", "https://tenant.auth0.com/")

        assert client.base_url == "https://tenant.auth0.com/api/v2"
        for name in (
            "users",
            "clients",
            "connections",
            "device_credentials",
            "grants",
            "client_grants",
            "roles",
            "resource_servers",
            "rules",
            "logs",
            "tickets",
            "jobs",
            "stats",
            "tenant_settings",
            "blacklists",
        ):
            assert getattr(client, name).rest is client.rest

    def test_requires_token(self):
        with pytest.raises(AuthConfigError):
            ManagementApiClient("", "tenant.auth0.com")

    def test_update_token(self):
        client = ManagementApiClient("old", "tenant.auth0.com")
        client.update_token("new")
        assert client.rest._build_headers()["Authorization"] == "Bearer new"

    def test_last_api_info(self, mock_request, mock_response):
        client = ManagementApiClient("token", "tenant.auth0.com")
        mock_request.return_value = mock_response(
            200, 17, headers={"x-ratelimit-limit": "10", "x-ratelimit-remaining": "9"}
        )

        assert client.stats.get_active_users() == 17
        assert client.get_last_api_info() == RateLimit(limit=10, remaining=9)

    def test_from_client_credentials(self, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, {"access_token": "m2m_token", "expires_in": 86400}
        )

        client = ManagementApiClient.from_client_credentials(
            "tenant.auth0.com", "cid", "secret", options=ClientOptions(retries=1)
        )

        assert client.rest.token == "m2m_token"
        assert client.rest.options.retries == 1
        payload = mock_request.call_args.kwargs["json"]
        assert payload == {
            "grant_type": "client_credentials",
            "client_id": "cid",
            "client_secret": "secret",
            "audience": "https://tenant.auth0.com/api/v2/",
        }

    def test_from_client_credentials_without_token(self, mock_request, mock_response):
        mock_request.return_value = mock_response(200, {"token_type": "Bearer"})

        with pytest.raises(AuthConfigError):
            ManagementApiClient.from_client_credentials("tenant.auth0.com", "cid", "s")
