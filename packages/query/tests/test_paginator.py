"""Tests for Paginator arithmetic and pagination resolution."""

from __future__ import annotations

import pytest

from tabular_query import (
    InvalidPaginationValueError,
    PageMetadata,
    PageWindow,
    PaginationSpec,
    Paginator,
)


def test_window_second_page() -> None:
    assert Paginator.window(2, 10) == PageWindow(limit=10, offset=10)


def test_window_first_page_starts_at_zero() -> None:
    assert Paginator.window(1, 25) == PageWindow(limit=25, offset=0)


@pytest.mark.parametrize(("page", "size"), [(0, 10), (2, 0), (-3, 5), (None, 5), (1, None)])
def test_window_requires_positive_values(page: int | None, size: int | None) -> None:
    assert Paginator.window(page, size) is None


def test_metadata_middle_page() -> None:
    meta = Paginator.compute_metadata(total_count=25, limit=10, offset=10, returned_count=10)
    assert meta == PageMetadata(current_page=2, page_size=10, total_pages=3, has_more=True)


def test_metadata_last_page() -> None:
    meta = Paginator.compute_metadata(25, 10, 20, 5)
    assert meta.current_page == 3
    assert meta.total_pages == 3
    assert meta.has_more is False


def test_metadata_without_limit() -> None:
    meta = Paginator.compute_metadata(25, None, 10, 15)
    assert meta == PageMetadata()
    assert meta.has_more is False


def test_metadata_limit_without_offset() -> None:
    meta = Paginator.compute_metadata(7, 5, None, 5)
    assert meta.current_page == 1
    assert meta.total_pages == 2
    assert meta.has_more is True


def test_metadata_empty_result() -> None:
    meta = Paginator.compute_metadata(0, 10, 0, 0)
    assert meta.current_page == 1
    assert meta.total_pages == 0
    assert meta.has_more is False


def test_metadata_unaligned_offset() -> None:
    # offset 15 with limit 10 lies on page 2
    assert Paginator.compute_metadata(100, 10, 15, 10).current_page == 2


# -- resolve -----------------------------------------------------------------


def test_resolve_none() -> None:
    assert Paginator.resolve(None) == (None, None)


def test_resolve_page_based() -> None:
    assert Paginator.resolve(PaginationSpec(page=3, page_size=20)) == (20, 40)


def test_resolve_offset_based() -> None:
    assert Paginator.resolve(PaginationSpec(offset=5, limit=15)) == (15, 5)


def test_page_based_takes_precedence() -> None:
    spec = PaginationSpec(page=2, page_size=10, offset=999, limit=1)
    assert Paginator.resolve(spec) == (10, 10)


@pytest.mark.parametrize(
    "spec",
    [
        PaginationSpec(page=0, page_size=10),
        PaginationSpec(page=1, page_size=-1),
        PaginationSpec(limit=0),
        PaginationSpec(offset=-1),
        PaginationSpec(page=2),
    ],
)
def test_invalid_values_ignored_or_rejected(spec: PaginationSpec) -> None:
    limit, offset = Paginator.resolve(spec)
    assert limit is None
    assert offset is None
    with pytest.raises(InvalidPaginationValueError):
        Paginator.resolve(spec, strict=True)


def test_offset_kept_when_limit_invalid() -> None:
    assert Paginator.resolve(PaginationSpec(limit=-2, offset=4)) == (None, 4)


def test_max_page_size_clamps() -> None:
    assert Paginator.resolve(PaginationSpec(page=1, page_size=500), max_page_size=100) == (100, 0)
    assert Paginator.resolve(PaginationSpec(limit=500), max_page_size=100) == (100, None)


def test_max_page_size_clamps_before_computing_offset() -> None:
    spec = PaginationSpec(page=3, page_size=100)
    limit, offset = Paginator.resolve(spec, max_page_size=10)
    assert (limit, offset) == (10, 20)
    meta = Paginator.compute_metadata(100, limit, offset, 10)
    assert meta.current_page == 3
