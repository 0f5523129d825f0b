"""Connections endpoints of the Management API."""

from typing import Any

from ..core.exceptions import ValidationError
from ..models.base import to_payload
from ..models.management import (
    Connection,
    ConnectionCreateRequest,
    ConnectionUpdateRequest,
)
from ..models.paging import PagedList, PaginationInfo
from .base import ManagementResource, fields_params


class Connections(ManagementResource):
    path = "/connections"

    def get_all(
        self,
        pagination: PaginationInfo | None = None,
        strategy: list[str] | None = None,
        name: str | None = None,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
    ) -> PagedList[Connection]:
        params: dict[str, Any] = {
            "strategy": strategy,
            "name": name,
            **fields_params(fields, include_fields),
        }
        return self._list(
            self.path, "connections", Connection.from_dict, params, pagination
        )

    def get(
        self,
        connection_id: str,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
    ) -> Connection:
        return self._get(
            self._item_path(id=connection_id),
            Connection.from_dict,
            fields_params(fields, include_fields),
        )

    def create(
        self, request: ConnectionCreateRequest | dict[str, Any]
    ) -> Connection:
        return self._post(self.path, Connection.from_dict, to_payload(request))

    def update(
        self, connection_id: str, request: ConnectionUpdateRequest | dict[str, Any]
    ) -> Connection:
        return self._patch(
            self._item_path(id=connection_id),
            Connection.from_dict,
            to_payload(request),
        )

    def delete(self, connection_id: str) -> None:
        self.rest.delete(self._item_path(id=connection_id))

    def delete_user(self, connection_id: str, email: str) -> None:
        """Delete a user by email from a database connection."""
        if not email:
            raise ValidationError("email cannot be empty", field="email")
        self.rest.delete(
            self._item_path("{id}/users", id=connection_id), params={"email": email}
        )
