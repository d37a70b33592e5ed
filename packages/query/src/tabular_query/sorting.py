"""SortResolver: normalize sort input into ordered ORDER BY fields."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, NamedTuple

from .exceptions import MalformedRequestError
from .operators import SortDirection

if TYPE_CHECKING:
    from .builder import QueryBuilder
    from .whitelist import FieldWhitelist

logger = logging.getLogger(__name__)


class SortField(NamedTuple):
    field: str
    direction: SortDirection = SortDirection.ASC
    # Accepted on the wire but not rendered.
    nulls_first: bool | None = None


class SortResolver:
    """
    Resolve any accepted sort shape into a list of ``SortField``.

    Accepted shapes, caller order preserved:

    - ``{"created_at": "desc", "name": "asc"}``
    - ``[{"field": "created_at", "direction": "desc"}, "-name", "email"]``
    - ``"-created_at,name"``
    """

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict

    def resolve(self, raw: Any) -> list[SortField]:
        if not raw:
            return []
        if isinstance(raw, Mapping):
            return [
                SortField(field, SortDirection.normalize(direction))
                for field, direction in raw.items()
            ]
        if isinstance(raw, str):
            return self._parse_sort_string(raw)
        if isinstance(raw, (list, tuple)):
            return self._parse_sort_list(raw)
        self._reject(f"Unsupported sort value: {type(raw).__name__}")
        return []

    def apply(
        self,
        builder: QueryBuilder,
        raw: Any,
        whitelist: FieldWhitelist | None = None,
    ) -> QueryBuilder:
        for item in self.resolve(raw):
            if whitelist:
                whitelist.allow_sort(item.field)
            if item.nulls_first is not None:
                logger.debug("nullsFirst on %r is not rendered", item.field)
            builder = builder.order_by(item.field, item.direction.value)
        return builder

    def _parse_sort_list(self, raw: list[Any] | tuple[Any, ...]) -> list[SortField]:
        out: list[SortField] = []
        for item in raw:
            parsed = self._parse_sort_item(item)
            if parsed is None:
                self._reject(f"Sort item without a field: {item!r}")
                continue
            out.append(parsed)
        return out

    def _parse_sort_item(self, item: Any) -> SortField | None:
        if isinstance(item, str):
            return _from_token(item)
        if isinstance(item, Mapping):
            data = item
        elif hasattr(item, "model_dump"):
            data = item.model_dump()
        else:
            return None
        field = data.get("field")
        if not field:
            return None
        nulls_first = data.get("nulls_first", data.get("nullsFirst"))
        return SortField(
            str(field), SortDirection.normalize(data.get("direction")), nulls_first
        )

    def _parse_sort_string(self, raw: str) -> list[SortField]:
        out: list[SortField] = []
        for part in raw.split(","):
            parsed = _from_token(part)
            if parsed is not None:
                out.append(parsed)
        return out

    def _reject(self, message: str) -> None:
        if self._strict:
            raise MalformedRequestError({"sort": [message]})
        logger.debug("Ignoring sort input: %s", message)


def _from_token(token: str) -> SortField | None:
    stripped = token.strip()
    if stripped.startswith("-"):
        stripped = stripped[1:].strip()
        return SortField(stripped, SortDirection.DESC) if stripped else None
    return SortField(stripped, SortDirection.ASC) if stripped else None
