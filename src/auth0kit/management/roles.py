"""Roles endpoints of the Management API."""

from typing import Any

from ..core.exceptions import ValidationError
from ..models.base import to_payload
from ..models.management import AssignedUser, Permission, Role
from ..models.paging import PagedList, PaginationInfo
from .base import ManagementResource


def _permissions_body(permissions: list[Permission | dict[str, Any]]) -> dict[str, Any]:
    body = []
    for item in permissions:
        payload = to_payload(item) or {}
        identifier = payload.get("resource_server_identifier")
        name = payload.get("permission_name")
        if not identifier or not name:
            raise ValidationError(
                "permissions need resource_server_identifier and permission_name",
                field="permissions",
            )
        body.append(
            {"resource_server_identifier": identifier, "permission_name": name}
        )
    return {"permissions": body}


class Roles(ManagementResource):
    path = "/roles"

    def get_all(
        self,
        pagination: PaginationInfo | None = None,
        name_filter: str | None = None,
    ) -> PagedList[Role]:
        return self._list(
            self.path, "roles", Role.from_dict, {"name_filter": name_filter}, pagination
        )

    def get(self, role_id: str) -> Role:
        return self._get(self._item_path(id=role_id), Role.from_dict)

    def create(self, request: Role | dict[str, Any]) -> Role:
        return self._post(self.path, Role.from_dict, to_payload(request))

    def update(self, role_id: str, request: Role | dict[str, Any]) -> Role:
        body = to_payload(request) or {}
        body.pop("id", None)
        return self._patch(self._item_path(id=role_id), Role.from_dict, body)

    def delete(self, role_id: str) -> None:
        self.rest.delete(self._item_path(id=role_id))

    def get_users(
        self, role_id: str, pagination: PaginationInfo | None = None
    ) -> PagedList[AssignedUser]:
        return self._list(
            self._item_path("{id}/users", id=role_id),
            "users",
            AssignedUser.from_dict,
            pagination=pagination,
        )

    def assign_users(self, role_id: str, user_ids: list[str]) -> None:
        self.rest.post(
            self._item_path("{id}/users", id=role_id),
            json_data={"users": list(user_ids)},
        )

    def get_permissions(
        self, role_id: str, pagination: PaginationInfo | None = None
    ) -> PagedList[Permission]:
        return self._list(
            self._item_path("{id}/permissions", id=role_id),
            "permissions",
            Permission.from_dict,
            pagination=pagination,
        )

    def assign_permissions(
        self, role_id: str, permissions: list[Permission | dict[str, Any]]
    ) -> None:
        self.rest.post(
            self._item_path("{id}/permissions", id=role_id),
            json_data=_permissions_body(permissions),
        )

    def remove_permissions(
        self, role_id: str, permissions: list[Permission | dict[str, Any]]
    ) -> None:
        self.rest.delete(
            self._item_path("{id}/permissions", id=role_id),
            json_data=_permissions_body(permissions),
        )
