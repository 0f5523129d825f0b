"""Pagination types for Management API list endpoints.

Auth0 list endpoints are page based (``page``/``per_page``) and return either
a bare JSON array or, with ``include_totals=true``, an envelope::

    {"start": 0, "limit": 50, "length": 50, "total": 120, "users": [...]}

Log endpoints additionally support checkpoint paging (``from``/``take``).
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..core.exceptions import ValidationError

T = TypeVar("T")

DEFAULT_PER_PAGE = 50
MAX_PER_PAGE = 100
MAX_CHECKPOINT_TAKE = 100


@dataclass
class PaginationInfo:
    """Page based pagination request."""

    page: int = 0
    per_page: int = DEFAULT_PER_PAGE
    include_totals: bool = True

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValidationError("page cannot be negative", field="page")
        if not 0 < self.per_page <= MAX_PER_PAGE:
            raise ValidationError(
                f"per_page must be between 1 and {MAX_PER_PAGE}",
                field="per_page",
                value=str(self.per_page),
            )

    def to_params(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "per_page": self.per_page,
            "include_totals": self.include_totals,
        }


@dataclass
class CheckpointPaginationInfo:
    """Checkpoint pagination request: ``take`` entries after log id ``from_``."""

    take: int = DEFAULT_PER_PAGE
    from_: str | None = None

    def __post_init__(self) -> None:
        if not 0 < self.take <= MAX_CHECKPOINT_TAKE:
            raise ValidationError(
                f"take must be between 1 and {MAX_CHECKPOINT_TAKE}",
                field="take",
                value=str(self.take),
            )

    def to_params(self) -> dict[str, Any]:
        return {"take": self.take, "from": self.from_}


@dataclass(frozen=True)
class PagingInformation:
    """Totals reported by Auth0 alongside a page of results."""

    start: int
    limit: int
    length: int
    total: int

    @classmethod
    def from_envelope(cls, envelope: dict[str, Any]) -> "PagingInformation":
        return cls(
            start=int(envelope.get("start", 0)),
            limit=int(envelope.get("limit", 0)),
            length=int(envelope.get("length", 0)),
            total=int(envelope.get("total", 0)),
        )


class PagedList(list[T], Generic[T]):
    """A list of results with optional paging information attached."""

    def __init__(
        self, items: Iterable[T] = (), paging: PagingInformation | None = None
    ) -> None:
        super().__init__(items)
        self.paging = paging

    def __repr__(self) -> str:
        return f"PagedList({list.__repr__(self)}, paging={self.paging!r})"


def parse_paged_response(
    payload: Any,
    key: str,
    convert: Callable[[dict[str, Any]], T] | None = None,
) -> PagedList[T]:
    """Turn a list endpoint response into a PagedList.

    Args:
        payload: Decoded response (array or totals envelope)
        key: Envelope key holding the items (e.g. ``users``)
        convert: Optional item converter (e.g. ``User.from_dict``)

    Returns:
        PagedList: Items, with paging info when the envelope was returned
    """
    paging: PagingInformation | None = None

    if isinstance(payload, dict):
        items = payload.get(key) or []
        if "total" in payload:
            paging = PagingInformation.from_envelope(payload)
    elif isinstance(payload, list):
        items = payload
    else:
        items = []

    if convert is not None:
        items = [convert(item) for item in items]

    return PagedList(items, paging)


def iterate_pages(
    fetch: Callable[[PaginationInfo], list[T]],
    per_page: int = DEFAULT_PER_PAGE,
    max_pages: int | None = None,
) -> Iterator[T]:
    """Yield every item of a page based list endpoint.

    Pages are requested from 0 upwards until a page is short or empty, the
    reported total has been reached, or ``max_pages`` pages were read.

    Args:
        fetch: Callable returning one page, e.g. ``client.users.get_all``
        per_page: Page size to request
        max_pages: Optional upper bound on requested pages

    Yields:
        Items in API order
    """
    page = 0
    seen = 0
    while max_pages is None or page < max_pages:
        results = fetch(PaginationInfo(page=page, per_page=per_page))
        if not results:
            return

        yield from results
        seen += len(results)

        paging = getattr(results, "paging", None)
        if paging is not None and seen >= paging.total:
            return
        if len(results) < per_page:
            return
        page += 1


def iterate_checkpoints(
    fetch: Callable[[CheckpointPaginationInfo], list[T]],
    take: int = DEFAULT_PER_PAGE,
    from_: str | None = None,
    id_of: Callable[[T], str | None] = lambda item: getattr(item, "log_id", None),
    max_pages: int | None = None,
) -> Iterator[T]:
    """Yield every item of a checkpoint paged endpoint (logs).

    The id of the last item of each batch becomes the next ``from`` value.
    """
    checkpoint = from_
    pages = 0
    while max_pages is None or pages < max_pages:
        results = fetch(CheckpointPaginationInfo(take=take, from_=checkpoint))
        if not results:
            return

        yield from results
        pages += 1

        checkpoint = id_of(results[-1])
        if checkpoint is None or len(results) < take:
            return
