"""Request and response models for the Auth0 Authentication API."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from ..core.exceptions import ValidationError
from .base import Auth0Model, api_field

PASSWORD_REALM_GRANT = "http://auth0.com/oauth/grant-type/password-realm"


class PasswordlessType(Enum):
    """How a passwordless email is delivered."""

    LINK = "link"
    CODE = "code"


@dataclass(kw_only=True)
class AccessTokenResponse(Auth0Model):
    """Tokens returned by ``/oauth/token``."""

    access_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = None
    id_token: str | None = None
    refresh_token: str | None = None
    scope: str | None = None


@dataclass(kw_only=True)
class UserInfo(Auth0Model):
    """Standard OIDC claims returned by ``/userinfo``.

    Custom namespaced claims end up in ``extra``.
    """

    sub: str | None = None
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    middle_name: str | None = None
    nickname: str | None = None
    preferred_username: str | None = None
    profile: str | None = None
    picture: str | None = None
    website: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    gender: str | None = None
    birthdate: str | None = None
    zoneinfo: str | None = None
    locale: str | None = None
    phone_number: str | None = None
    phone_number_verified: bool | None = None
    address: dict[str, Any] | None = None
    updated_at: datetime | None = api_field(timestamp=True)

    @property
    def user_id(self) -> str | None:
        return self.sub


@dataclass(kw_only=True)
class ChangePasswordRequest(Auth0Model):
    """Triggers the forgot password email for a database connection user."""

    email: str | None = None
    connection: str | None = None
    client_id: str | None = None
    password: str | None = None
    organization: str | None = None


@dataclass(kw_only=True)
class ImpersonationRequest(Auth0Model):
    """Details of the user to impersonate and who impersonates them."""

    impersonate_id: str | None = None
    impersonator_id: str | None = None
    impersonator_token: str | None = None
    client_id: str | None = None
    protocol: str = "oauth2"
    response_type: str = "code"
    scope: str = "openid"
    state: str | None = None
    callback_url: str | None = None
    additional_parameters: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "response_type": self.response_type,
            "scope": self.scope,
        }
        if self.state:
            params["state"] = self.state
        if self.callback_url:
            params["callback_url"] = self.callback_url
        if self.additional_parameters:
            params.update(self.additional_parameters)

        return {
            "protocol": self.protocol,
            "impersonator_id": self.impersonator_id,
            "client_id": self.client_id,
            "additionalParameters": params,
        }


@dataclass(kw_only=True)
class SignupUserRequest(Auth0Model):
    """New database connection user."""

    email: str | None = None
    password: str | None = None
    connection: str | None = None
    client_id: str | None = None
    username: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    name: str | None = None
    nickname: str | None = None
    picture: str | None = None
    user_metadata: dict[str, Any] | None = None


@dataclass(kw_only=True)
class SignupUserResponse(Auth0Model):
    """User created by ``/dbconnections/signup``."""

    id: str | None = api_field("_id")
    email: str | None = None
    email_verified: bool | None = None
    username: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    name: str | None = None
    nickname: str | None = None
    picture: str | None = None
    user_metadata: dict[str, Any] | None = None


@dataclass(kw_only=True)
class PasswordlessEmailRequest(Auth0Model):
    """Starts a passwordless flow over email."""

    email: str | None = None
    type: PasswordlessType = PasswordlessType.LINK
    client_id: str | None = None
    client_secret: str | None = None
    auth_params: dict[str, Any] | None = api_field("authParams")


@dataclass(kw_only=True)
class PasswordlessEmailResponse(Auth0Model):
    id: str | None = api_field("_id")
    email: str | None = None
    email_verified: bool | None = None


@dataclass(kw_only=True)
class PasswordlessSmsRequest(Auth0Model):
    """Starts a passwordless flow over SMS."""

    phone_number: str | None = None
    client_id: str | None = None
    client_secret: str | None = None


@dataclass(kw_only=True)
class PasswordlessSmsResponse(Auth0Model):
    id: str | None = api_field("_id")
    phone_number: str | None = None
    phone_verified: bool | None = None
    request_language: str | None = None


@dataclass(kw_only=True)
class UnlinkUserRequest(Auth0Model):
    """Unlinks a secondary account from the primary identified by the token."""

    access_token: str | None = None
    user_id: str | None = None


@dataclass(kw_only=True)
class TokenRequest(Auth0Model):
    """Base for ``/oauth/token`` requests.

    Subclasses set ``grant_type`` and add the grant specific fields; the
    authentication client supplies its own client id and secret when the
    request leaves them empty.
    """

    grant_type: ClassVar[str] = ""
    requires_secret: ClassVar[bool] = True

    client_id: str | None = None
    client_secret: str | None = None

    def _grant_fields(self) -> dict[str, Any]:
        return {}

    def to_payload(
        self,
        default_client_id: str | None = None,
        default_client_secret: str | None = None,
    ) -> dict[str, Any]:
        """Build the form payload for ``/oauth/token``.

        Raises:
            ValidationError: If no client id is available
        """
        client_id = self.client_id or default_client_id
        if not client_id:
            raise ValidationError("client_id is required", field="client_id")

        payload: dict[str, Any] = {"grant_type": self.grant_type, "client_id": client_id}
        if self.requires_secret:
            secret = self.client_secret or default_client_secret
            if secret:
                payload["client_secret"] = secret

        payload.update(
            {k: v for k, v in self._grant_fields().items() if v is not None}
        )
        payload.update(self.extra)
        return payload

    def headers(self) -> dict[str, str]:
        return {}


@dataclass(kw_only=True)
class AuthorizationCodeTokenRequest(TokenRequest):
    """Authorization Code grant."""

    grant_type: ClassVar[str] = "authorization_code"

    code: str | None = None
    redirect_uri: str | None = None

    def _grant_fields(self) -> dict[str, Any]:
        return {"code": self.code, "redirect_uri": self.redirect_uri}


@dataclass(kw_only=True)
class AuthorizationCodePkceTokenRequest(TokenRequest):
    """Authorization Code grant with PKCE; the verifier replaces the secret."""

    grant_type: ClassVar[str] = "authorization_code"
    requires_secret: ClassVar[bool] = False

    code: str | None = None
    code_verifier: str | None = None
    redirect_uri: str | None = None

    def _grant_fields(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "code_verifier": self.code_verifier,
            "redirect_uri": self.redirect_uri,
        }


@dataclass(kw_only=True)
class ClientCredentialsTokenRequest(TokenRequest):
    """Client Credentials grant for machine to machine tokens."""

    grant_type: ClassVar[str] = "client_credentials"

    audience: str | None = None
    organization: str | None = None

    def _grant_fields(self) -> dict[str, Any]:
        return {"audience": self.audience, "organization": self.organization}


@dataclass(kw_only=True)
class RefreshTokenRequest(TokenRequest):
    """Exchanges a refresh token for a new access token."""

    grant_type: ClassVar[str] = "refresh_token"

    refresh_token: str | None = None
    scope: str | None = None

    def _grant_fields(self) -> dict[str, Any]:
        return {"refresh_token": self.refresh_token, "scope": self.scope}


@dataclass(kw_only=True)
class ResourceOwnerTokenRequest(TokenRequest):
    """Resource Owner Password grant, optionally against a realm."""

    username: str | None = None
    password: str | None = None
    scope: str | None = None
    audience: str | None = None
    realm: str | None = None
    forwarded_for: str | None = None

    @property
    def grant_type(self) -> str:  # type: ignore[override]
        return PASSWORD_REALM_GRANT if self.realm else "password"

    def _grant_fields(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "password": self.password,
            "scope": self.scope,
            "audience": self.audience,
            "realm": self.realm,
        }

    def headers(self) -> dict[str, str]:
        if self.forwarded_for:
            return {"auth0-forwarded-for": self.forwarded_for}
        return {}
