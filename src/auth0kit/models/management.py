"""Management API resource models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import Auth0Model, api_field


@dataclass(kw_only=True)
class UserIdentity(Auth0Model):
    """An identity linked to an Auth0 user."""

    connection: str | None = None
    user_id: str | None = None
    provider: str | None = None
    is_social: bool | None = api_field("isSocial")
    access_token: str | None = None
    access_token_secret: str | None = None
    refresh_token: str | None = None
    profile_data: dict[str, Any] | None = api_field("profileData")


@dataclass(kw_only=True)
class User(Auth0Model):
    """An Auth0 user."""

    user_id: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    username: str | None = None
    phone_number: str | None = None
    phone_verified: bool | None = None
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    nickname: str | None = None
    picture: str | None = None
    locale: str | None = None
    blocked: bool | None = None
    identities: list[UserIdentity] | None = api_field(model=UserIdentity)
    app_metadata: dict[str, Any] | None = None
    user_metadata: dict[str, Any] | None = None
    multifactor: list[str] | None = None
    last_ip: str | None = None
    last_login: datetime | None = api_field(timestamp=True)
    logins_count: int | None = None
    created_at: datetime | None = api_field(timestamp=True)
    updated_at: datetime | None = api_field(timestamp=True)

    @property
    def connection(self) -> str | None:
        """Connection of the primary identity."""
        if self.identities:
            return self.identities[0].connection
        return None


@dataclass(kw_only=True)
class UserCreateRequest(Auth0Model):
    connection: str | None = None
    email: str | None = None
    phone_number: str | None = None
    username: str | None = None
    password: str | None = None
    user_id: str | None = None
    email_verified: bool | None = None
    verify_email: bool | None = None
    phone_verified: bool | None = None
    blocked: bool | None = None
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    nickname: str | None = None
    picture: str | None = None
    app_metadata: dict[str, Any] | None = None
    user_metadata: dict[str, Any] | None = None


@dataclass(kw_only=True)
class UserUpdateRequest(Auth0Model):
    connection: str | None = None
    client_id: str | None = None
    email: str | None = None
    phone_number: str | None = None
    username: str | None = None
    password: str | None = None
    email_verified: bool | None = None
    verify_email: bool | None = None
    phone_verified: bool | None = None
    blocked: bool | None = None
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    nickname: str | None = None
    picture: str | None = None
    app_metadata: dict[str, Any] | None = None
    user_metadata: dict[str, Any] | None = None


@dataclass(kw_only=True)
class UserAccountLinkRequest(Auth0Model):
    """Links a secondary account to a primary user."""

    provider: str | None = None
    user_id: str | None = None
    connection_id: str | None = None
    link_with: str | None = None


@dataclass(kw_only=True)
class Client(Auth0Model):
    """An Auth0 application."""

    client_id: str | None = None
    client_secret: str | None = None
    name: str | None = None
    description: str | None = None
    app_type: str | None = None
    logo_uri: str | None = None
    is_first_party: bool | None = None
    is_global: bool | None = api_field("global")
    oidc_conformant: bool | None = None
    callbacks: list[str] | None = None
    allowed_origins: list[str] | None = None
    web_origins: list[str] | None = None
    allowed_logout_urls: list[str] | None = None
    grant_types: list[str] | None = None
    token_endpoint_auth_method: str | None = None
    jwt_configuration: dict[str, Any] | None = None
    client_metadata: dict[str, Any] | None = None


@dataclass(kw_only=True)
class ClientCreateRequest(Auth0Model):
    name: str | None = None
    description: str | None = None
    app_type: str | None = None
    logo_uri: str | None = None
    is_first_party: bool | None = None
    oidc_conformant: bool | None = None
    callbacks: list[str] | None = None
    allowed_origins: list[str] | None = None
    web_origins: list[str] | None = None
    allowed_logout_urls: list[str] | None = None
    grant_types: list[str] | None = None
    token_endpoint_auth_method: str | None = None
    client_metadata: dict[str, Any] | None = None


@dataclass(kw_only=True)
class ClientUpdateRequest(ClientCreateRequest):
    client_secret: str | None = None


@dataclass(kw_only=True)
class Connection(Auth0Model):
    """An identity provider connection."""

    id: str | None = None
    name: str | None = None
    display_name: str | None = None
    strategy: str | None = None
    options: dict[str, Any] | None = None
    enabled_clients: list[str] | None = None
    realms: list[str] | None = None
    is_domain_connection: bool | None = None
    metadata: dict[str, Any] | None = None


@dataclass(kw_only=True)
class ConnectionCreateRequest(Auth0Model):
    name: str | None = None
    strategy: str | None = None
    display_name: str | None = None
    options: dict[str, Any] | None = None
    enabled_clients: list[str] | None = None
    realms: list[str] | None = None
    is_domain_connection: bool | None = None
    metadata: dict[str, Any] | None = None


@dataclass(kw_only=True)
class ConnectionUpdateRequest(Auth0Model):
    display_name: str | None = None
    options: dict[str, Any] | None = None
    enabled_clients: list[str] | None = None
    realms: list[str] | None = None
    is_domain_connection: bool | None = None
    metadata: dict[str, Any] | None = None


@dataclass(kw_only=True)
class DeviceCredential(Auth0Model):
    id: str | None = None
    device_name: str | None = None
    device_id: str | None = None
    type: str | None = None
    user_id: str | None = None
    client_id: str | None = None


@dataclass(kw_only=True)
class DeviceCredentialCreateRequest(Auth0Model):
    device_name: str | None = None
    device_id: str | None = None
    type: str | None = None
    value: str | None = None
    client_id: str | None = None


@dataclass(kw_only=True)
class Grant(Auth0Model):
    """A consent a user gave to an application."""

    id: str | None = None
    client_id: str | None = api_field("clientID")
    user_id: str | None = None
    audience: str | None = None
    scope: list[str] | None = None


@dataclass(kw_only=True)
class ClientGrant(Auth0Model):
    """Permission for an application to call an API with client credentials."""

    id: str | None = None
    client_id: str | None = None
    audience: str | None = None
    scope: list[str] | None = None


@dataclass(kw_only=True)
class Role(Auth0Model):
    id: str | None = None
    name: str | None = None
    description: str | None = None


@dataclass(kw_only=True)
class Permission(Auth0Model):
    """A permission of an API, as assigned to a role or user."""

    resource_server_identifier: str | None = None
    permission_name: str | None = None
    resource_server_name: str | None = None
    description: str | None = None


@dataclass(kw_only=True)
class AssignedUser(Auth0Model):
    """A user as listed under a role."""

    user_id: str | None = None
    email: str | None = None
    picture: str | None = None
    name: str | None = None


@dataclass(kw_only=True)
class ResourceServer(Auth0Model):
    """An API registered in the tenant."""

    id: str | None = None
    name: str | None = None
    identifier: str | None = None
    scopes: list[dict[str, Any]] | None = None
    signing_alg: str | None = None
    signing_secret: str | None = None
    allow_offline_access: bool | None = None
    skip_consent_for_verifiable_first_party_clients: bool | None = None
    token_lifetime: int | None = None
    token_lifetime_for_web: int | None = None
    enforce_policies: bool | None = None
    token_dialect: str | None = None
    is_system: bool | None = None


@dataclass(kw_only=True)
class Rule(Auth0Model):
    id: str | None = None
    name: str | None = None
    script: str | None = None
    order: int | None = None
    enabled: bool | None = None
    stage: str | None = None


@dataclass(kw_only=True)
class LogEntry(Auth0Model):
    """A tenant log event."""

    log_id: str | None = None
    id: str | None = api_field("_id")
    date: datetime | None = api_field(timestamp=True)
    type: str | None = None
    description: str | None = None
    connection: str | None = None
    connection_id: str | None = None
    client_id: str | None = None
    client_name: str | None = None
    ip: str | None = None
    user_agent: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    details: dict[str, Any] | None = None
    is_mobile: bool | None = api_field("isMobile")


@dataclass(kw_only=True)
class Job(Auth0Model):
    """A background job (imports, exports, verification emails)."""

    id: str | None = None
    type: str | None = None
    status: str | None = None
    connection_id: str | None = None
    created_at: datetime | None = api_field(timestamp=True)
    location: str | None = None
    percentage_done: int | None = None
    time_left_seconds: int | None = None
    format: str | None = None
    summary: dict[str, Any] | None = None


@dataclass(kw_only=True)
class JobError(Auth0Model):
    """A failed record of an import job."""

    user: dict[str, Any] | None = None
    errors: list[dict[str, Any]] | None = None


@dataclass(kw_only=True)
class Ticket(Auth0Model):
    """A one time URL created by the tickets endpoints."""

    ticket: str | None = None


@dataclass(kw_only=True)
class EmailVerificationTicketRequest(Auth0Model):
    user_id: str | None = None
    result_url: str | None = None
    ttl_sec: int | None = None
    client_id: str | None = None
    include_email_in_redirect: bool | None = None


@dataclass(kw_only=True)
class PasswordChangeTicketRequest(Auth0Model):
    user_id: str | None = None
    email: str | None = None
    connection_id: str | None = None
    result_url: str | None = None
    client_id: str | None = None
    ttl_sec: int | None = None
    mark_email_as_verified: bool | None = None
    include_email_in_redirect: bool | None = None


@dataclass(kw_only=True)
class DailyStats(Auth0Model):
    date: datetime | None = api_field(timestamp=True)
    logins: int | None = None
    signups: int | None = None
    leaked_passwords: int | None = None
    created_at: datetime | None = api_field(timestamp=True)
    updated_at: datetime | None = api_field(timestamp=True)


@dataclass(kw_only=True)
class TenantSettings(Auth0Model):
    friendly_name: str | None = None
    picture_url: str | None = None
    support_email: str | None = None
    support_url: str | None = None
    default_audience: str | None = None
    default_directory: str | None = None
    session_lifetime: float | None = None
    idle_session_lifetime: float | None = None
    allowed_logout_urls: list[str] | None = None
    enabled_locales: list[str] | None = None
    flags: dict[str, Any] | None = None


@dataclass(kw_only=True)
class BlacklistedToken(Auth0Model):
    aud: str | None = None
    jti: str | None = None


@dataclass(kw_only=True)
class Enrollment(Auth0Model):
    """A Guardian MFA enrollment."""

    id: str | None = None
    status: str | None = None
    type: str | None = None
    name: str | None = None
    identifier: str | None = None
    phone_number: str | None = None
    auth_method: str | None = None
    enrolled_at: datetime | None = api_field(timestamp=True)
    last_auth: datetime | None = api_field(timestamp=True)
