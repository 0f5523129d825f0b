"""Data models for auth0kit."""

from .authentication import (
    AccessTokenResponse,
    AuthorizationCodePkceTokenRequest,
    AuthorizationCodeTokenRequest,
    ChangePasswordRequest,
    ClientCredentialsTokenRequest,
    ImpersonationRequest,
    PasswordlessEmailRequest,
    PasswordlessEmailResponse,
    PasswordlessSmsRequest,
    PasswordlessSmsResponse,
    PasswordlessType,
    RefreshTokenRequest,
    ResourceOwnerTokenRequest,
    SignupUserRequest,
    SignupUserResponse,
    TokenRequest,
    UnlinkUserRequest,
    UserInfo,
)
from .base import Auth0Model, parse_datetime
from .management import (
    AssignedUser,
    BlacklistedToken,
    Client,
    ClientCreateRequest,
    ClientGrant,
    ClientUpdateRequest,
    Connection,
    ConnectionCreateRequest,
    ConnectionUpdateRequest,
    DailyStats,
    DeviceCredential,
    DeviceCredentialCreateRequest,
    EmailVerificationTicketRequest,
    Enrollment,
    Grant,
    Job,
    JobError,
    LogEntry,
    PasswordChangeTicketRequest,
    Permission,
    ResourceServer,
    Role,
    Rule,
    TenantSettings,
    Ticket,
    User,
    UserAccountLinkRequest,
    UserCreateRequest,
    UserIdentity,
    UserUpdateRequest,
)
from .paging import (
    CheckpointPaginationInfo,
    PagedList,
    PaginationInfo,
    PagingInformation,
    iterate_checkpoints,
    iterate_pages,
)

__all__ = [
    "Auth0Model",
    "parse_datetime",
    # Authentication
    "AccessTokenResponse",
    "AuthorizationCodePkceTokenRequest",
    "AuthorizationCodeTokenRequest",
    "ChangePasswordRequest",
    "ClientCredentialsTokenRequest",
    "ImpersonationRequest",
    "PasswordlessEmailRequest",
    "PasswordlessEmailResponse",
    "PasswordlessSmsRequest",
    "PasswordlessSmsResponse",
    "PasswordlessType",
    "RefreshTokenRequest",
    "ResourceOwnerTokenRequest",
    "SignupUserRequest",
    "SignupUserResponse",
    "TokenRequest",
    "UnlinkUserRequest",
    "UserInfo",
    # Management
    "AssignedUser",
    "BlacklistedToken",
    "Client",
    "ClientCreateRequest",
    "ClientGrant",
    "ClientUpdateRequest",
    "Connection",
    "ConnectionCreateRequest",
    "ConnectionUpdateRequest",
    "DailyStats",
    "DeviceCredential",
    "DeviceCredentialCreateRequest",
    "EmailVerificationTicketRequest",
    "Enrollment",
    "Grant",
    "Job",
    "JobError",
    "LogEntry",
    "PasswordChangeTicketRequest",
    "Permission",
    "ResourceServer",
    "Role",
    "Rule",
    "TenantSettings",
    "Ticket",
    "User",
    "UserAccountLinkRequest",
    "UserCreateRequest",
    "UserIdentity",
    "UserUpdateRequest",
    # Paging
    "CheckpointPaginationInfo",
    "PagedList",
    "PaginationInfo",
    "PagingInformation",
    "iterate_checkpoints",
    "iterate_pages",
]
