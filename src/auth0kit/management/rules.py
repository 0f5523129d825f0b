"""Rules endpoints of the Management API."""

from typing import Any

from ..models.base import to_payload
from ..models.management import Rule
from ..models.paging import PagedList, PaginationInfo
from .base import ManagementResource, fields_params


class Rules(ManagementResource):
    path = "/rules"

    def get_all(
        self,
        pagination: PaginationInfo | None = None,
        enabled: bool | None = None,
        stage: str | None = None,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
    ) -> PagedList[Rule]:
        params: dict[str, Any] = {
            "enabled": enabled,
            "stage": stage,
            **fields_params(fields, include_fields),
        }
        return self._list(self.path, "rules", Rule.from_dict, params, pagination)

    def get(
        self,
        rule_id: str,
        fields: list[str] | None = None,
        include_fields: bool | None = None,
    ) -> Rule:
        return self._get(
            self._item_path(id=rule_id),
            Rule.from_dict,
            fields_params(fields, include_fields),
        )

    def create(self, request: Rule | dict[str, Any]) -> Rule:
        return self._post(self.path, Rule.from_dict, to_payload(request))

    def update(self, rule_id: str, request: Rule | dict[str, Any]) -> Rule:
        body = to_payload(request) or {}
        for key in ("id", "stage"):
            body.pop(key, None)
        return self._patch(self._item_path(id=rule_id), Rule.from_dict, body)

    def delete(self, rule_id: str) -> None:
        self.rest.delete(self._item_path(id=rule_id))
