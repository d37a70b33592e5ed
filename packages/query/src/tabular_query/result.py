"""PagedResult: one page of rows plus pagination metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic_core import to_jsonable_python

from .pagination import PageMetadata

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """
    Response envelope of a paged query.

    ``current_page``, ``page_size``, ``total_pages``, ``limit`` and
    ``offset`` are only set when the query carried a limit.
    """

    data: list[T] = field(default_factory=list)
    total_count: int = 0
    current_page: int | None = None
    page_size: int | None = None
    total_pages: int | None = None
    limit: int | None = None
    offset: int | None = None
    has_more: bool = False

    @classmethod
    def assemble(
        cls,
        data: list[T],
        total_count: int,
        metadata: PageMetadata,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> PagedResult[T]:
        paged = limit is not None
        return cls(
            data=data,
            total_count=total_count,
            current_page=metadata.current_page,
            page_size=metadata.page_size,
            total_pages=metadata.total_pages,
            limit=limit,
            offset=(offset or 0) if paged else None,
            has_more=metadata.has_more,
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Serialise to the camelCase wire shape; unset metadata is omitted.

        Rows are converted to JSON-compatible values whether they are
        pydantic models or plain mappings (datetimes become ISO strings).
        """
        result: dict[str, Any] = {
            "data": [_dump(item) for item in self.data],
            "totalCount": self.total_count,
        }
        if self.current_page is not None:
            result["currentPage"] = self.current_page
        if self.page_size is not None:
            result["pageSize"] = self.page_size
        if self.total_pages is not None:
            result["totalPages"] = self.total_pages
        if self.limit is not None:
            result["limit"] = self.limit
        if self.offset is not None:
            result["offset"] = self.offset
        result["hasMore"] = self.has_more
        return result


def _dump(item: Any) -> Any:
    if hasattr(item, "model_dump"):
        return item.model_dump(mode="json")
    return to_jsonable_python(item)
