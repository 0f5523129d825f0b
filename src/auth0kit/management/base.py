"""Shared plumbing for Management API resource groups."""

from collections.abc import Callable
from typing import Any, TypeVar

from ..core.http_client import RestClient
from ..models.base import Auth0Model
from ..models.paging import (
    CheckpointPaginationInfo,
    PagedList,
    PaginationInfo,
    parse_paged_response,
)
from ..utils.url_utils import build_path

ModelT = TypeVar("ModelT", bound=Auth0Model)


class ManagementResource:
    """Base class for a group of Management API endpoints.

    Subclasses set ``path`` (e.g. ``/users``) and call the helpers below,
    which build the URL, send the request through the shared RestClient and
    convert the response into models.
    """

    path = ""

    def __init__(self, rest: RestClient) -> None:
        self.rest = rest

    def _item_path(self, template: str = "{id}", **segments: str) -> str:
        return build_path(f"{self.path}/{template}", **segments)

    def _list(
        self,
        path: str,
        key: str,
        convert: Callable[[dict[str, Any]], ModelT],
        params: dict[str, Any] | None = None,
        pagination: PaginationInfo | CheckpointPaginationInfo | None = None,
    ) -> PagedList[ModelT]:
        query = dict(params or {})
        if pagination is not None:
            query.update(pagination.to_params())
        payload = self.rest.get(path, params=query)
        return parse_paged_response(payload, key, convert)

    def _get(
        self,
        path: str,
        convert: Callable[[dict[str, Any]], ModelT],
        params: dict[str, Any] | None = None,
    ) -> ModelT:
        return convert(self.rest.get(path, params=params) or {})

    def _post(
        self,
        path: str,
        convert: Callable[[dict[str, Any]], ModelT],
        body: Any = None,
    ) -> ModelT:
        return convert(self.rest.post(path, json_data=body) or {})

    def _patch(
        self,
        path: str,
        convert: Callable[[dict[str, Any]], ModelT],
        body: Any = None,
    ) -> ModelT:
        return convert(self.rest.patch(path, json_data=body) or {})


def fields_params(
    fields: list[str] | None, include_fields: bool | None
) -> dict[str, Any]:
    """Query parameters selecting which fields a GET returns."""
    if not fields:
        return {}
    return {
        "fields": fields,
        "include_fields": True if include_fields is None else include_fields,
    }
