"""Tests for the Authentication API client."""

from urllib.parse import parse_qs, urlparse

import pytest

from auth0kit.authentication import AuthenticationApiClient
from auth0kit.core.exceptions import APIError, ValidationError
from auth0kit.models import (
    ChangePasswordRequest,
    ClientCredentialsTokenRequest,
    ImpersonationRequest,
    PasswordlessEmailRequest,
    PasswordlessSmsRequest,
    PasswordlessType,
    ResourceOwnerTokenRequest,
    SignupUserRequest,
    UnlinkUserRequest,
)


@pytest.fixture
def auth_client():
    return AuthenticationApiClient(
        "tenant.auth0.com", client_id="cid", client_secret="secret"
    )


def _sent(mock_request):
    return mock_request.call_args.kwargs


class TestAuthenticationClient:
    """Test Authentication API operations."""

    def test_base_uri(self, auth_client):
        assert auth_client.base_uri == "https://tenant.auth0.com"

    def test_get_token(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200,
            {"access_token": "at", "token_type": "Bearer", "expires_in": 86400},
        )

        token = auth_client.get_token(
            ClientCredentialsTokenRequest(audience="https://tenant.auth0.com/api/v2/")
        )

        assert token.access_token == "at"
        assert token.expires_in == 86400
        sent = _sent(mock_request)
        assert sent["url"] == "https://tenant.auth0.com/oauth/token"
        assert sent["json"]["grant_type"] == "client_credentials"
        assert sent["json"]["client_secret"] == "secret"
        assert "Authorization" not in sent["headers"]

    def test_get_token_forwarded_for(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(200, {"access_token": "at"})

        auth_client.get_token(
            ResourceOwnerTokenRequest(
                username="john", password="pw", forwarded_for="10.0.0.1"
            )
        )

        assert _sent(mock_request)["headers"]["auth0-forwarded-for"] == "10.0.0.1"

    def test_get_token_error(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(
            403, {"error": "access_denied", "error_description": "Unauthorized"}
        )

        with pytest.raises(APIError) as exc_info:
            auth_client.get_token(ClientCredentialsTokenRequest(audience="x"))

        assert exc_info.value.error == "access_denied"

    def test_change_password(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, text="We've just sent you an email to reset your password."
        )

        message = auth_client.change_password(
            ChangePasswordRequest(
                email="john@example.com", connection="Username-Password-Authentication"
            )
        )

        assert message.startswith("We've just sent you an email")
        assert _sent(mock_request)["json"] == {
            "email": "john@example.com",
            "connection": "Username-Password-Authentication",
            "client_id": "cid",
        }

    def test_change_password_requires_email(self, auth_client, mock_request):
        with pytest.raises(ValidationError):
            auth_client.change_password(ChangePasswordRequest(connection="db"))
        mock_request.assert_not_called()

    def test_impersonation_url(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, text="https://tenant.auth0.com/users/auth0%7C2/impersonate?x=1\n"
        )

        url = auth_client.get_impersonation_url(
            ImpersonationRequest(
                impersonate_id="auth0|2",
                impersonator_id="auth0|1",
                impersonator_token="admin_token",
            )
        )

        assert url == "https://tenant.auth0.com/users/auth0%7C2/impersonate?x=1"
        sent = _sent(mock_request)
        assert sent["url"] == "https://tenant.auth0.com/users/auth0%7C2/impersonate"
        assert sent["headers"]["Authorization"] == "Bearer admin_token"
        assert sent["json"]["client_id"] == "cid"

    def test_impersonation_requires_client_id(self, mock_request):
        client = AuthenticationApiClient("tenant.auth0.com")

        with pytest.raises(ValidationError, match="client_id"):
            client.get_impersonation_url(
                ImpersonationRequest(
                    impersonate_id="auth0|2",
                    impersonator_id="auth0|1",
                    impersonator_token="admin_token",
                )
            )
        mock_request.assert_not_called()

    def test_user_info(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, {"sub": "auth0|1", "email": "john@example.com"}
        )

        info = auth_client.get_user_info("user_access_token")

        assert info.user_id == "auth0|1"
        sent = _sent(mock_request)
        assert sent["method"] == "GET"
        assert sent["headers"]["Authorization"] == "Bearer user_access_token"

    def test_metadata(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(200, text="<EntityDescriptor/>")

        assert auth_client.get_saml_metadata("my client") == "<EntityDescriptor/>"
        assert _sent(mock_request)["url"].endswith("/samlp/metadata/my%20client")

        assert auth_client.get_ws_fed_metadata() == "<EntityDescriptor/>"
        assert _sent(mock_request)["url"].endswith("FederationMetadata.xml")

    def test_signup(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, {"_id": "abc123", "email": "new@example.com", "email_verified": False}
        )

        user = auth_client.signup_user(
            SignupUserRequest(
                email="new@example.com",
                password="S3cret!",
                connection="Username-Password-Authentication",
            )
        )

        assert user.id == "abc123"
        assert _sent(mock_request)["url"].endswith("/dbconnections/signup")

    def test_passwordless_email(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, {"_id": "pl1", "email": "john@example.com"}
        )

        response = auth_client.start_passwordless_email_flow(
            PasswordlessEmailRequest(
                email="john@example.com",
                type=PasswordlessType.CODE,
                auth_params={"scope": "openid"},
            )
        )

        assert response.id == "pl1"
        assert _sent(mock_request)["json"] == {
            "client_id": "cid",
            "connection": "email",
            "email": "john@example.com",
            "send": "code",
            "client_secret": "secret",
            "authParams": {"scope": "openid"},
        }

    def test_passwordless_sms(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, {"_id": "pl2", "phone_number": "+15555550100"}
        )

        response = auth_client.start_passwordless_sms_flow(
            PasswordlessSmsRequest(phone_number="+15555550100")
        )

        assert response.phone_number == "+15555550100"
        assert _sent(mock_request)["json"]["connection"] == "sms"

    def test_unlink_user(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(200, text="OK")

        auth_client.unlink_user(
            UnlinkUserRequest(access_token="at", user_id="github|1")
        )

        assert _sent(mock_request)["json"] == {"access_token": "at", "user_id": "github|1"}

    def test_revoke_refresh_token(self, auth_client, mock_request, mock_response):
        mock_request.return_value = mock_response(200)

        auth_client.revoke_refresh_token("rt")

        assert _sent(mock_request)["json"] == {
            "client_id": "cid",
            "token": "rt",
            "client_secret": "secret",
        }


class TestUrlBuilders:
    """Test browser URL builders."""

    def test_authorization_url(self, auth_client):
        url = auth_client.build_authorization_url(
            "https://app.example.com/callback",
            state="xyz",
            code_challenge="challenge",
            prompt="login",
        )

        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == (
            "https://tenant.auth0.com/authorize"
        )
        assert query["response_type"] == ["code"]
        assert query["client_id"] == ["cid"]
        assert query["scope"] == ["openid"]
        assert query["code_challenge_method"] == ["S256"]
        assert query["prompt"] == ["login"]
        assert "nonce" not in query

    def test_authorization_url_requires_client_id(self):
        client = AuthenticationApiClient("tenant.auth0.com")
        with pytest.raises(ValidationError):
            client.build_authorization_url("https://app/cb")

    def test_logout_url(self, auth_client):
        url = auth_client.build_logout_url(
            return_to="https://app.example.com", federated=True
        )
        assert url == (
            "https://tenant.auth0.com/v2/logout"
            "?returnTo=https%3A%2F%2Fapp.example.com&client_id=cid&federated"
        )

    def test_logout_url_without_params(self):
        client = AuthenticationApiClient("tenant.auth0.com")
        assert client.build_logout_url() == "https://tenant.auth0.com/v2/logout"
