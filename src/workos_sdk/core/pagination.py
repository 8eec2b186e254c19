# Licensed under the MIT license.

"""
Cursor pagination for list operations.

List endpoints accept ``order``, ``before``, ``after`` and ``limit`` query
parameters and answer with ``{"data": [...], "list_metadata": {"before": ..., "after": ...}}``.
``after`` is ``null`` on the last page.

Example:
    Walk every organization page by page::

        params = ListOrganizationsParams()
        for page in iter_pages(client.organizations.list_organizations, params):
            if not page.is_ok:
                print(f"stopped: {page}")
                break
            for organization in page.value:
                print(organization.name)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

from .results import WorkOSResult
from .types import optional_str

T = TypeVar("T")
P = TypeVar("P")


class PaginationOrder(str, Enum):
    """Sort order of a list, by creation time."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class PaginationParams:
    """
    Cursor parameters shared by every list operation.

    :param order: Sort order. Defaults to :attr:`PaginationOrder.DESC`.
    :type order: PaginationOrder
    :param before: Cursor of the item to end before.
    :type before: :class:`str` | None
    :param after: Cursor of the item to start after.
    :type after: :class:`str` | None
    :param limit: Maximum page size; the server default applies when ``None``.
    :type limit: :class:`int` | None
    """

    order: PaginationOrder = PaginationOrder.DESC
    before: Optional[str] = None
    after: Optional[str] = None
    limit: Optional[int] = None

    def to_query(self) -> Dict[str, str]:
        """
        Serialize to query parameters, omitting unset cursors.

        :return: Query parameter mapping.
        :rtype: dict[str, str]
        """
        query = {"order": PaginationOrder(self.order).value}
        if self.before is not None:
            query["before"] = self.before
        if self.after is not None:
            query["after"] = self.after
        if self.limit is not None:
            query["limit"] = str(self.limit)
        return query


@dataclass(frozen=True)
class ListMetadata:
    """Cursors returned alongside a page. ``after`` is ``None`` on the last page."""

    before: Optional[str] = None
    after: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "ListMetadata":
        if not isinstance(data, dict):
            raise TypeError("list_metadata must be an object")
        return cls(
            before=optional_str(data.get("before"), "list_metadata.before"),
            after=optional_str(data.get("after"), "list_metadata.after"),
        )


@dataclass(frozen=True)
class PaginatedList(Generic[T]):
    """
    One page of a list response.

    Supports ``len()``, iteration and indexing over ``data``.

    :param data: Items on this page, in server order.
    :type data: list
    :param list_metadata: Cursors for the neighbouring pages.
    :type list_metadata: ListMetadata
    """

    data: List[T] = field(default_factory=list)
    list_metadata: ListMetadata = field(default_factory=ListMetadata)

    @classmethod
    def from_api_response(cls, body: Dict[str, Any], decode_item: Callable[[Dict[str, Any]], T]) -> "PaginatedList[T]":
        """
        Decode a ``{"data": [...], "list_metadata": {...}}`` body.

        :param body: Parsed JSON body.
        :param decode_item: Decoder applied to each element of ``data``.
        :raises KeyError: If ``data`` or ``list_metadata`` is missing.
        :raises TypeError: If ``data`` is not a list.
        """
        items = body["data"]
        if not isinstance(items, list):
            raise TypeError("data must be a list")
        return cls(
            data=[decode_item(item) for item in items],
            list_metadata=ListMetadata.from_api_response(body["list_metadata"]),
        )

    @property
    def has_more(self) -> bool:
        return self.list_metadata.after is not None

    def next_page_params(self, params: P) -> Optional[P]:
        """
        Build the parameters for the following page.

        :param params: Parameters used to fetch this page. Either a
            :class:`PaginationParams` or a dataclass with a ``pagination`` field.
        :return: Parameters with ``after`` advanced, or ``None`` on the last page.
        """
        after = self.list_metadata.after
        if after is None:
            return None
        if isinstance(params, PaginationParams):
            return dataclasses.replace(params, after=after, before=None)
        pagination = getattr(params, "pagination")
        return dataclasses.replace(params, pagination=dataclasses.replace(pagination, after=after, before=None))

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]


def url_encodable_list(values: Iterable[str]) -> str:
    """
    Join list filter values for a ``key[]`` query parameter.

    >>> url_encodable_list(["foo.com", "bar.com"])
    'foo.com,bar.com'
    """
    return ",".join(values)


def iter_pages(
    fetch: Callable[[P], WorkOSResult[PaginatedList[T], Any]],
    params: P,
) -> Iterator[WorkOSResult[PaginatedList[T], Any]]:
    """
    Yield page results, following ``after`` cursors.

    Stops after yielding a non-:class:`~workos_sdk.core.results.Ok` result, or a
    page whose ``after`` cursor is ``None``; no request is made past the last page.

    :param fetch: A list operation, e.g. ``client.organizations.list_organizations``.
    :param params: Parameters for the first page.
    """
    next_params: Optional[P] = params
    while next_params is not None:
        result = fetch(next_params)
        yield result
        if not result.is_ok:
            return
        next_params = result.value.next_page_params(next_params)


def iter_all(fetch: Callable[[P], WorkOSResult[PaginatedList[T], Any]], params: P) -> Iterator[T]:
    """
    Yield every item across all pages.

    :raises ~workos_sdk.core.errors.WorkOSError: If a page fetch fails (via ``unwrap()``).
    """
    for result in iter_pages(fetch, params):
        yield from result.unwrap()


__all__ = [
    "PaginationOrder",
    "PaginationParams",
    "ListMetadata",
    "PaginatedList",
    "url_encodable_list",
    "iter_pages",
    "iter_all",
]
