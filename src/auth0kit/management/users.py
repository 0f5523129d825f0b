"""Users endpoints of the Management API."""

from typing import Any

from ..core.exceptions import ValidationError
from ..models.base import to_payload
from ..models.management import (
    Enrollment,
    LogEntry,
    Permission,
    Role,
    User,
    UserAccountLinkRequest,
    UserCreateRequest,
    UserIdentity,
    UserUpdateRequest,
)
from ..models.paging import PagedList, PaginationInfo
from .base import ManagementResource, fields_params


class Users(ManagementResource):
    """``/api/v2/users`` and related endpoints."""

    path = "/users"

    def get_all(
        self,
        pagination: PaginationInfo | None = None,
        q: str | None = None,
        sort: str | None = None,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
        connection: str | None = None,
        search_engine: str | None = "v3",
    ) -> PagedList[User]:
        """List or search users (Lucene syntax in ``q``)."""
        params: dict[str, Any] = {
            "q": q,
            "sort": sort,
            "connection": connection,
            "search_engine": search_engine,
            **fields_params(fields, include_fields),
        }
        return self._list(self.path, "users", User.from_dict, params, pagination)

    def get(
        self,
        user_id: str,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
    ) -> User:
        return self._get(
            self._item_path(id=user_id),
            User.from_dict,
            fields_params(fields, include_fields),
        )

    def get_users_by_email(
        self,
        email: str,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
    ) -> list[User]:
        """Exact, case-insensitive email lookup via ``/users-by-email``."""
        if not email or not email.strip():
            raise ValidationError("email cannot be empty", field="email")
        params = {"email": email, **fields_params(fields, include_fields)}
        payload = self.rest.get("/users-by-email", params=params) or []
        return [User.from_dict(item) for item in payload]

    def create(self, request: UserCreateRequest | dict[str, Any]) -> User:
        return self._post(self.path, User.from_dict, to_payload(request))

    def update(
        self, user_id: str, request: UserUpdateRequest | dict[str, Any]
    ) -> User:
        return self._patch(
            self._item_path(id=user_id), User.from_dict, to_payload(request)
        )

    def delete(self, user_id: str) -> None:
        self.rest.delete(self._item_path(id=user_id))

    def link_account(
        self, user_id: str, request: UserAccountLinkRequest | dict[str, Any]
    ) -> list[UserIdentity]:
        """Link a secondary account; returns the primary user's identities."""
        payload = self.rest.post(
            self._item_path("{id}/identities", id=user_id),
            json_data=to_payload(request),
        )
        return [UserIdentity.from_dict(item) for item in payload or []]

    def unlink_account(
        self, user_id: str, provider: str, secondary_user_id: str
    ) -> list[UserIdentity]:
        """Unlink an identity; returns the remaining identities."""
        path = self._item_path(
            "{id}/identities/{provider}/{secondary}",
            id=user_id,
            provider=provider,
            secondary=secondary_user_id,
        )
        payload = self.rest.delete(path)
        return [UserIdentity.from_dict(item) for item in payload or []]

    def get_roles(
        self, user_id: str, pagination: PaginationInfo | None = None
    ) -> PagedList[Role]:
        return self._list(
            self._item_path("{id}/roles", id=user_id),
            "roles",
            Role.from_dict,
            pagination=pagination,
        )

    def assign_roles(self, user_id: str, role_ids: list[str]) -> None:
        self.rest.post(
            self._item_path("{id}/roles", id=user_id),
            json_data={"roles": list(role_ids)},
        )

    def remove_roles(self, user_id: str, role_ids: list[str]) -> None:
        self.rest.delete(
            self._item_path("{id}/roles", id=user_id),
            json_data={"roles": list(role_ids)},
        )

    def get_permissions(
        self, user_id: str, pagination: PaginationInfo | None = None
    ) -> PagedList[Permission]:
        return self._list(
            self._item_path("{id}/permissions", id=user_id),
            "permissions",
            Permission.from_dict,
            pagination=pagination,
        )

    def get_logs(
        self,
        user_id: str,
        pagination: PaginationInfo | None = None,
        sort: str | None = None,
    ) -> PagedList[LogEntry]:
        return self._list(
            self._item_path("{id}/logs", id=user_id),
            "logs",
            LogEntry.from_dict,
            {"sort": sort},
            pagination,
        )

    def get_enrollments(self, user_id: str) -> list[Enrollment]:
        payload = self.rest.get(self._item_path("{id}/enrollments", id=user_id))
        return [Enrollment.from_dict(item) for item in payload or []]

    def delete_multifactor_provider(self, user_id: str, provider: str) -> None:
        self.rest.delete(
            self._item_path(
                "{id}/multifactor/{provider}", id=user_id, provider=provider
            )
        )

    def invalidate_remember_browser(self, user_id: str) -> None:
        self.rest.post(
            self._item_path(
                "{id}/multifactor/actions/invalidate-remember-browser", id=user_id
            )
        )
