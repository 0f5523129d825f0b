"""Device credentials endpoints of the Management API."""

from typing import Any

from ..models.base import to_payload
from ..models.management import DeviceCredential, DeviceCredentialCreateRequest
from ..models.paging import PagedList, PaginationInfo
from .base import ManagementResource, fields_params


class DeviceCredentials(ManagementResource):
    path = "/device-credentials"

    def get_all(
        self,
        user_id: str | None = None,
        client_id: str | None = None,
        type: str | None = None,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
        pagination: PaginationInfo | None = None,
    ) -> PagedList[DeviceCredential]:
        params: dict[str, Any] = {
            "user_id": user_id,
            "client_id": client_id,
            "type": type,
            **fields_params(fields, include_fields),
        }
        return self._list(
            self.path,
            "device_credentials",
            DeviceCredential.from_dict,
            params,
            pagination,
        )

    def create(
        self, request: DeviceCredentialCreateRequest | dict[str, Any]
    ) -> DeviceCredential:
        return self._post(self.path, DeviceCredential.from_dict, to_payload(request))

    def delete(self, credential_id: str) -> None:
        self.rest.delete(self._item_path(id=credential_id))
