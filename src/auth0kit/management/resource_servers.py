"""Resource servers (APIs) endpoints of the Management API."""

from typing import Any

from ..models.base import to_payload
from ..models.management import ResourceServer
from ..models.paging import PagedList, PaginationInfo
from .base import ManagementResource


class ResourceServers(ManagementResource):
    path = "/resource-servers"

    def get_all(
        self, pagination: PaginationInfo | None = None
    ) -> PagedList[ResourceServer]:
        return self._list(
            self.path,
            "resource_servers",
            ResourceServer.from_dict,
            pagination=pagination,
        )

    def get(self, server_id: str) -> ResourceServer:
        """Get an API by id or by its identifier (audience)."""
        return self._get(self._item_path(id=server_id), ResourceServer.from_dict)

    def create(self, request: ResourceServer | dict[str, Any]) -> ResourceServer:
        return self._post(self.path, ResourceServer.from_dict, to_payload(request))

    def update(
        self, server_id: str, request: ResourceServer | dict[str, Any]
    ) -> ResourceServer:
        body = to_payload(request) or {}
        # Read-only attributes are rejected by the PATCH endpoint
        for key in ("id", "identifier", "is_system"):
            body.pop(key, None)
        return self._patch(
            self._item_path(id=server_id), ResourceServer.from_dict, body
        )

    def delete(self, server_id: str) -> None:
        self.rest.delete(self._item_path(id=server_id))
