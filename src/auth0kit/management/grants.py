"""Grants and client grants endpoints of the Management API."""

from typing import Any

from ..core.exceptions import ValidationError
from ..models.base import to_payload
from ..models.management import ClientGrant, Grant
from ..models.paging import PagedList, PaginationInfo
from .base import ManagementResource


class Grants(ManagementResource):
    """User consent grants (``/api/v2/grants``)."""

    path = "/grants"

    def get_all(
        self,
        pagination: PaginationInfo | None = None,
        user_id: str | None = None,
        client_id: str | None = None,
        audience: str | None = None,
    ) -> PagedList[Grant]:
        params = {"user_id": user_id, "client_id": client_id, "audience": audience}
        return self._list(self.path, "grants", Grant.from_dict, params, pagination)

    def delete(self, grant_id: str) -> None:
        self.rest.delete(self._item_path(id=grant_id))

    def delete_all_for_user(self, user_id: str) -> None:
        """Revoke every grant of a user."""
        if not user_id:
            raise ValidationError("user_id cannot be empty", field="user_id")
        self.rest.delete(self.path, params={"user_id": user_id})


class ClientGrants(ManagementResource):
    """Client credentials grants (``/api/v2/client-grants``)."""

    path = "/client-grants"

    def get_all(
        self,
        pagination: PaginationInfo | None = None,
        audience: str | None = None,
        client_id: str | None = None,
    ) -> PagedList[ClientGrant]:
        params = {"audience": audience, "client_id": client_id}
        return self._list(
            self.path, "client_grants", ClientGrant.from_dict, params, pagination
        )

    def create(self, request: ClientGrant | dict[str, Any]) -> ClientGrant:
        return self._post(self.path, ClientGrant.from_dict, to_payload(request))

    def update(self, grant_id: str, scope: list[str]) -> ClientGrant:
        return self._patch(
            self._item_path(id=grant_id), ClientGrant.from_dict, {"scope": scope}
        )

    def delete(self, grant_id: str) -> None:
        self.rest.delete(self._item_path(id=grant_id))
