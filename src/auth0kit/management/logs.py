"""Log events endpoints of the Management API."""

from typing import Any

from ..core.exceptions import ValidationError
from ..models.management import LogEntry
from ..models.paging import CheckpointPaginationInfo, PagedList, PaginationInfo
from .base import ManagementResource, fields_params


class Logs(ManagementResource):
    path = "/logs"

    def get_all(
        self,
        pagination: PaginationInfo | CheckpointPaginationInfo | None = None,
        q: str | None = None,
        sort: str | None = None,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
    ) -> PagedList[LogEntry]:
        """Search log events.

        Page based pagination supports ``q`` and ``sort``; Auth0 ignores both
        with checkpoint pagination, so combining them is rejected here.
        """
        if isinstance(pagination, CheckpointPaginationInfo) and (q or sort):
            raise ValidationError(
                "q and sort cannot be combined with checkpoint pagination",
                field="pagination",
            )

        params: dict[str, Any] = {
            "q": q,
            "sort": sort,
            **fields_params(fields, include_fields),
        }
        return self._list(self.path, "logs", LogEntry.from_dict, params, pagination)

    def get(self, log_id: str) -> LogEntry:
        return self._get(self._item_path(id=log_id), LogEntry.from_dict)
