"""Clients (applications) endpoints of the Management API."""

from typing import Any

from ..models.base import to_payload
from ..models.management import Client, ClientCreateRequest, ClientUpdateRequest
from ..models.paging import PagedList, PaginationInfo
from .base import ManagementResource, fields_params


class Clients(ManagementResource):
    path = "/clients"

    def get_all(
        self,
        pagination: PaginationInfo | None = None,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
        app_type: list[str] | None = None,
        is_global: bool | None = None,
        is_first_party: bool | None = None,
    ) -> PagedList[Client]:
        params: dict[str, Any] = {
            "app_type": app_type,
            "is_global": is_global,
            "is_first_party": is_first_party,
            **fields_params(fields, include_fields),
        }
        return self._list(self.path, "clients", Client.from_dict, params, pagination)

    def get(
        self,
        client_id: str,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
    ) -> Client:
        return self._get(
            self._item_path(id=client_id),
            Client.from_dict,
            fields_params(fields, include_fields),
        )

    def create(self, request: ClientCreateRequest | dict[str, Any]) -> Client:
        return self._post(self.path, Client.from_dict, to_payload(request))

    def update(
        self, client_id: str, request: ClientUpdateRequest | dict[str, Any]
    ) -> Client:
        return self._patch(
            self._item_path(id=client_id), Client.from_dict, to_payload(request)
        )

    def delete(self, client_id: str) -> None:
        self.rest.delete(self._item_path(id=client_id))

    def rotate_secret(self, client_id: str) -> Client:
        """Generate a new client secret; the old one stops working at once."""
        return self._post(
            self._item_path("{id}/rotate-secret", id=client_id), Client.from_dict
        )
