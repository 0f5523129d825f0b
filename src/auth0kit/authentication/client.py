"""Client for the Auth0 Authentication API.

Full documentation for the Authentication API is available at
https://auth0.com/docs/api/authentication
"""

from typing import Any
from urllib.parse import urlencode

from ..core.config import ClientOptions, normalize_domain
from ..core.exceptions import ValidationError
from ..core.http_client import RestClient
from ..core.rate_limiter import RateLimit
from ..models.authentication import (
    AccessTokenResponse,
    ChangePasswordRequest,
    ImpersonationRequest,
    PasswordlessEmailRequest,
    PasswordlessEmailResponse,
    PasswordlessSmsRequest,
    PasswordlessSmsResponse,
    SignupUserRequest,
    SignupUserResponse,
    TokenRequest,
    UnlinkUserRequest,
    UserInfo,
)
from ..utils.logging_utils import get_logger
from ..utils.url_utils import build_path, clean_params, encode_path_segment

# Module logger
logger = get_logger(__name__)

WS_FED_METADATA_PATH = "/wsfed/FederationMetadata/2007-06/FederationMetadata.xml"


def _require(value: Any, field: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field} is required", field=field)


class AuthenticationApiClient:
    """Typed access to the Auth0 Authentication API of one tenant."""

    def __init__(
        self,
        domain: str,
        client_id: str | None = None,
        client_secret: str | None = None,
        options: ClientOptions | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            domain: Tenant or custom domain (``tenant.auth0.com``)
            client_id: Default client id for requests that omit one
            client_secret: Default client secret for confidential grants
            options: Transport options
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self._base_uri = normalize_domain(domain)
        self.rest = RestClient(self._base_uri, options=options)

    @property
    def base_uri(self) -> str:
        """Base URI used for all requests."""
        return self._base_uri

    def get_last_api_info(self) -> RateLimit | None:
        return self.rest.get_last_api_info()

    def change_password(self, request: ChangePasswordRequest) -> str:
        """Ask Auth0 to send a forgot password email.

        Returns:
            str: The message returned by Auth0
        """
        _require(request.email, "email")
        _require(request.connection, "connection")

        payload = request.to_dict()
        if self.client_id:
            payload.setdefault("client_id", self.client_id)
        result = self.rest.post("/dbconnections/change_password", json_data=payload)
        return "" if result is None else str(result)

    def get_impersonation_url(self, request: ImpersonationRequest) -> str:
        """Generate a one time link to log in as another user.

        Returns:
            str: URL that signs in as the impersonated user
        """
        _require(request.impersonate_id, "impersonate_id")
        _require(request.impersonator_id, "impersonator_id")
        _require(request.impersonator_token, "impersonator_token")

        payload = request.to_payload()
        payload["client_id"] = payload.get("client_id") or self.client_id
        _require(payload["client_id"], "client_id")

        path = build_path(
            "/users/{impersonate_id}/impersonate",
            impersonate_id=str(request.impersonate_id),
        )
        result = self.rest.post(
            path, json_data=payload, token=request.impersonator_token
        )
        return "" if result is None else str(result).strip()

    def get_saml_metadata(self, client_id: str) -> str:
        """Return the SAML 2.0 metadata XML for a client."""
        path = f"/samlp/metadata/{encode_path_segment(client_id, 'client_id')}"
        result = self.rest.get(path, headers={"Accept": "application/xml, */*"})
        return "" if result is None else str(result)

    def get_user_info(self, access_token: str) -> UserInfo:
        """Return the profile of the user the access token was issued to."""
        _require(access_token, "access_token")
        result = self.rest.get("/userinfo", token=access_token)
        return UserInfo.from_dict(result or {})

    def get_ws_fed_metadata(self) -> str:
        """Return the WS-Federation metadata XML."""
        result = self.rest.get(
            WS_FED_METADATA_PATH, headers={"Accept": "application/xml, */*"}
        )
        return "" if result is None else str(result)

    def signup_user(self, request: SignupUserRequest) -> SignupUserResponse:
        """Create a user in a database connection."""
        _require(request.email, "email")
        _require(request.password, "password")
        _require(request.connection, "connection")

        payload = request.to_dict()
        if self.client_id:
            payload.setdefault("client_id", self.client_id)
        result = self.rest.post("/dbconnections/signup", json_data=payload)
        logger.info(
            f"Signed up user in connection {request.connection}",
            extra={"operation": "signup_user"},
        )
        return SignupUserResponse.from_dict(result or {})

    def start_passwordless_email_flow(
        self, request: PasswordlessEmailRequest
    ) -> PasswordlessEmailResponse:
        """Send a passwordless link or code by email."""
        _require(request.email, "email")

        payload: dict[str, Any] = {
            "client_id": request.client_id or self.client_id,
            "connection": "email",
            "email": request.email,
            "send": request.type.value,
        }
        secret = request.client_secret or self.client_secret
        if secret:
            payload["client_secret"] = secret
        if request.auth_params:
            payload["authParams"] = request.auth_params

        result = self.rest.post("/passwordless/start", json_data=payload)
        return PasswordlessEmailResponse.from_dict(result or {})

    def start_passwordless_sms_flow(
        self, request: PasswordlessSmsRequest
    ) -> PasswordlessSmsResponse:
        """Send a passwordless code by SMS."""
        _require(request.phone_number, "phone_number")

        payload: dict[str, Any] = {
            "client_id": request.client_id or self.client_id,
            "connection": "sms",
            "phone_number": request.phone_number,
        }
        secret = request.client_secret or self.client_secret
        if secret:
            payload["client_secret"] = secret

        result = self.rest.post("/passwordless/start", json_data=payload)
        return PasswordlessSmsResponse.from_dict(result or {})

    def unlink_user(self, request: UnlinkUserRequest) -> None:
        """Unlink a secondary account from the primary account."""
        _require(request.access_token, "access_token")
        _require(request.user_id, "user_id")
        self.rest.post("/unlink", json_data=request.to_dict())

    def get_token(self, request: TokenRequest) -> AccessTokenResponse:
        """Request tokens from ``/oauth/token``.

        Accepts any token request (authorization code, PKCE, client
        credentials, refresh token, resource owner); each builds its own
        grant payload.
        """
        payload = request.to_payload(self.client_id, self.client_secret)
        result = self.rest.post(
            "/oauth/token", json_data=payload, headers=request.headers() or None
        )
        logger.debug(
            f"Obtained token using {payload['grant_type']} grant",
            extra={"operation": "get_token"},
        )
        return AccessTokenResponse.from_dict(result or {})

    def revoke_refresh_token(
        self, refresh_token: str, client_id: str | None = None
    ) -> None:
        """Revoke a refresh token."""
        _require(refresh_token, "refresh_token")

        payload: dict[str, Any] = {
            "client_id": client_id or self.client_id,
            "token": refresh_token,
        }
        if self.client_secret:
            payload["client_secret"] = self.client_secret
        self.rest.post("/oauth/revoke", json_data=payload)

    def build_authorization_url(
        self,
        redirect_uri: str,
        response_type: str = "code",
        scope: str | None = "openid",
        state: str | None = None,
        nonce: str | None = None,
        audience: str | None = None,
        connection: str | None = None,
        organization: str | None = None,
        code_challenge: str | None = None,
        client_id: str | None = None,
        **extra_params: Any,
    ) -> str:
        """Build the ``/authorize`` URL to redirect a user to.

        Pass ``code_challenge`` (see :mod:`auth0kit.authentication.pkce`) to
        start a PKCE flow; the method is always S256.
        """
        params: dict[str, Any] = {
            "response_type": response_type,
            "client_id": client_id or self.client_id,
            "redirect_uri": redirect_uri,
            "scope": scope,
            "state": state,
            "nonce": nonce,
            "audience": audience,
            "connection": connection,
            "organization": organization,
        }
        if code_challenge:
            params["code_challenge"] = code_challenge
            params["code_challenge_method"] = "S256"
        params.update(extra_params)

        _require(params["client_id"], "client_id")
        return f"{self.base_uri}/authorize?{urlencode(clean_params(params))}"

    def build_logout_url(
        self,
        return_to: str | None = None,
        client_id: str | None = None,
        federated: bool = False,
    ) -> str:
        """Build the ``/v2/logout`` URL."""
        params = clean_params(
            {"returnTo": return_to, "client_id": client_id or self.client_id}
        )
        query = urlencode(params)
        if federated:
            query = f"{query}&federated" if query else "federated"
        url = f"{self.base_uri}/v2/logout"
        return f"{url}?{query}" if query else url
