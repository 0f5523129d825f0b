"""Tests for environment based authentication and the doctor check."""

from unittest.mock import patch

import pytest
import requests

from auth0kit.core.auth import doctor, get_access_token, get_management_client
from auth0kit.core.exceptions import APIError, AuthConfigError
from auth0kit.management import ManagementApiClient


class TestGetAccessToken:
    """Test Management API token acquisition."""

    def test_success(self, auth0_env, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, {"access_token": "test_token", "expires_in": 86400}
        )

        assert get_access_token("dev") == "test_token"

        kwargs = mock_request.call_args.kwargs
        assert kwargs["url"] == "https://tenant.auth0.com/oauth/token"
        assert kwargs["timeout"] == 5
        assert kwargs["json"]["audience"] == "https://tenant.auth0.com/api/v2/"

    def test_rejected_credentials(self, auth0_env, mock_request, mock_response):
        mock_request.return_value = mock_response(
            401, {"error": "access_denied", "error_description": "Unauthorized"}
        )

        with pytest.raises(AuthConfigError) as exc_info:
            get_access_token("dev")

        assert exc_info.value.message == "Failed to obtain Auth0 management token"
        assert isinstance(exc_info.value.__cause__, APIError)

    def test_network_error(self, auth0_env, mock_request):
        mock_request.side_effect = requests.Timeout("timed out")

        with pytest.raises(AuthConfigError):
            get_access_token("dev")

    def test_missing_token_in_response(self, auth0_env, mock_request, mock_response):
        mock_request.return_value = mock_response(200, {"token_type": "Bearer"})

        with pytest.raises(AuthConfigError, match="Access token not found"):
            get_access_token("dev")

    def test_get_management_client(self, auth0_env):
        with patch("auth0kit.core.auth.get_access_token", return_value="tok"):
            client = get_management_client("dev")

        assert isinstance(client, ManagementApiClient)
        assert client.base_url == "https://tenant.auth0.com/api/v2"
        assert client.rest.token == "tok"


class TestDoctor:
    """Test the credentials doctor."""

    @patch("auth0kit.core.auth.get_access_token", return_value="tok")
    def test_success(self, mock_token, auth0_env):
        result = doctor("dev")

        assert result["success"] is True
        assert result["token_obtained"] is True
        assert result["api_tested"] is False
        mock_token.assert_called_once_with("dev")

    @patch("auth0kit.core.auth.get_access_token", return_value="tok")
    def test_api_success(self, mock_token, auth0_env, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200,
            [],
            headers={"x-ratelimit-limit": "50", "x-ratelimit-remaining": "49"},
        )

        result = doctor("dev", test_api=True)

        assert result["api_status"] == "success"
        assert result["rate_limit"].startswith("Rate limit OK: 49/50")
        params = mock_request.call_args.kwargs["params"]
        assert params["per_page"] == "1"
        assert params["include_totals"] == "false"

    @patch("auth0kit.core.auth.get_access_token", return_value="tok")
    def test_api_failure(self, mock_token, auth0_env, mock_request, mock_response):
        mock_request.return_value = mock_response(
            403, {"statusCode": 403, "error": "Forbidden", "message": "Insufficient scope"}
        )

        result = doctor("dev", test_api=True)

        assert result["success"] is True
        assert result["api_tested"] is True
        assert result["api_status"] == "failed"
        assert "Insufficient scope" in result["details"]

    def test_config_error(self, monkeypatch):
        monkeypatch.delenv("DEV_AUTH0_DOMAIN", raising=False)

        with patch("auth0kit.core.config.check_env_file"):
            result = doctor("dev")

        assert result["success"] is False
        assert result["token_obtained"] is False
        assert "DEV_AUTH0_DOMAIN" in result["error"]
