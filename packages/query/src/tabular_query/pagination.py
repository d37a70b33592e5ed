"""Paginator: page/pageSize and offset/limit arithmetic plus page metadata."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from .exceptions import InvalidPaginationValueError

if TYPE_CHECKING:
    from .request import PaginationSpec

logger = logging.getLogger(__name__)


class PageWindow(NamedTuple):
    limit: int
    offset: int


@dataclass(frozen=True)
class PageMetadata:
    """Derived pagination fields of a paged result.

    ``current_page``, ``page_size`` and ``total_pages`` stay ``None`` when
    the query carried no limit.
    """

    current_page: int | None = None
    page_size: int | None = None
    total_pages: int | None = None
    has_more: bool = False


class Paginator:
    """Convert pagination input to limit/offset and derive page metadata."""

    @staticmethod
    def window(page: int | None, page_size: int | None) -> PageWindow | None:
        """Return ``(limit, offset)`` for a 1-based page, or ``None``.

        Both values must be positive; anything else means "no pagination".
        """
        if page is None or page_size is None:
            return None
        if page > 0 and page_size > 0:
            return PageWindow(limit=page_size, offset=(page - 1) * page_size)
        return None

    @staticmethod
    def compute_metadata(
        total_count: int,
        limit: int | None,
        offset: int | None,
        returned_count: int,
    ) -> PageMetadata:
        """
        Derive page metadata from a total count.

        ``limit`` is expected to come from ``QueryBuilder.limit_value``,
        which only ever holds a positive value.
        """
        if limit is None:
            return PageMetadata()
        start = offset or 0
        return PageMetadata(
            current_page=start // limit + 1,
            page_size=limit,
            total_pages=math.ceil(total_count / limit),
            has_more=start + returned_count < total_count,
        )

    @staticmethod
    def resolve(
        spec: PaginationSpec | None,
        *,
        strict: bool = False,
        max_page_size: int | None = None,
    ) -> tuple[int | None, int | None]:
        """
        Resolve a ``PaginationSpec`` into ``(limit, offset)``.

        page/pageSize take precedence over limit/offset when both are
        given. Out-of-range values are dropped, or rejected with
        ``InvalidPaginationValueError`` when ``strict`` is set.
        """
        if spec is None:
            return None, None

        if spec.page is not None and spec.page_size is not None:
            window = Paginator.window(
                spec.page, _clamp(spec.page_size, max_page_size)
            )
            if window is None:
                _reject(
                    strict,
                    f"page and pageSize must be positive, got "
                    f"page={spec.page}, pageSize={spec.page_size}",
                )
                return None, None
            return window.limit, window.offset

        if spec.page is not None or spec.page_size is not None:
            _reject(strict, "page and pageSize must be given together")

        limit = spec.limit
        if limit is not None and limit <= 0:
            _reject(strict, f"limit must be positive, got {limit}")
            limit = None
        offset = spec.offset
        if offset is not None and offset < 0:
            _reject(strict, f"offset must not be negative, got {offset}")
            offset = None
        return _clamp(limit, max_page_size), offset


def _clamp(limit: int | None, max_page_size: int | None) -> int | None:
    if limit is None or max_page_size is None:
        return limit
    return min(limit, max_page_size)


def _reject(strict: bool, message: str) -> None:
    if strict:
        raise InvalidPaginationValueError({"pagination": [message]})
    logger.debug("Ignoring pagination value: %s", message)
