"""Build a QueryRequest from flat query-string parameters (GET endpoints)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .request import PaginationSpec, QueryRequest, SearchSpec


def request_from_query_params(
    params: Mapping[str, Any],
    *,
    search_fields: Sequence[str] = (),
    filter_fields: Sequence[str] = (),
    default_page: int = 1,
    default_page_size: int = 10,
    search_key: str = "search",
    sort_key: str = "sort",
    sort_by_key: str = "sortBy",
    sort_direction_key: str = "sortDirection",
    page_key: str = "page",
    page_size_key: str = "pageSize",
    fields_key: str = "fields",
) -> QueryRequest:
    """
    Translate ``?search=jo&status=active&sortBy=name&page=2`` style params.

    - ``search`` becomes a multi-field search over ``search_fields``.
    - every key listed in ``filter_fields`` becomes an equality filter.
    - ``sortBy`` + ``sortDirection`` (default ``asc``), or a ``sort``
      string such as ``-created_at,name``.
    - ``page``/``pageSize`` always paginate, falling back to the defaults
      when absent or not integers.
    - ``fields`` is a comma-separated projection.
    """
    filters = {
        name: params[name]
        for name in filter_fields
        if params.get(name) not in (None, "")
    }

    search = None
    term = params.get(search_key)
    if isinstance(term, str) and term.strip() and search_fields:
        search = SearchSpec(fields=list(search_fields), term=term)

    sort: Any = None
    sort_by = params.get(sort_by_key)
    if isinstance(sort_by, str) and sort_by.strip():
        sort = {sort_by.strip(): params.get(sort_direction_key) or "asc"}
    elif params.get(sort_key):
        sort = str(params[sort_key])

    return QueryRequest(
        fields=_parse_fields(params.get(fields_key)),
        filters=filters or None,
        search=search,
        sort=sort,
        pagination=PaginationSpec(
            page=_int_param(params.get(page_key), default_page),
            page_size=_int_param(params.get(page_size_key), default_page_size),
        ),
    )


def _int_param(v: Any, default: int) -> int:
    if v is None:
        return default
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _parse_fields(raw: Any) -> list[str] | None:
    if not raw:
        return None
    if isinstance(raw, str):
        fields = [f.strip() for f in raw.split(",") if f.strip()]
    elif isinstance(raw, (list, tuple)):
        fields = [str(f) for f in raw]
    else:
        return None
    return fields or None
