"""
QueryRequest: the declarative query description accepted on the wire.

Wire keys are camelCase (``pageSize``, ``nullsFirst``); attributes are
snake_case. All models are frozen: a request is parsed once and consumed
once.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .exceptions import MalformedRequestError

_WIRE_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class SearchSpec(BaseModel):
    """Single-field (``field``) or multi-field (``fields``) text search."""

    model_config = _WIRE_CONFIG

    field: str | None = None
    fields: list[str] | None = None
    term: str | None = None
    exact: bool = False

    @property
    def is_multi_field(self) -> bool:
        return bool(self.fields)


class SortItem(BaseModel):
    model_config = _WIRE_CONFIG

    field: str | None = None
    direction: str | None = None
    nulls_first: bool | None = None


class PaginationSpec(BaseModel):
    """Page-based (1-based ``page``/``pageSize``) or ``offset``/``limit``."""

    model_config = _WIRE_CONFIG

    page: int | None = None
    page_size: int | None = None
    offset: int | None = None
    limit: int | None = None


class QueryRequest(BaseModel):
    """
    Declarative description of one query.

    Attributes:
        fields: Projection; ``None`` selects every column.
        filters: ``{field: scalar | {operator: value}}``, AND-joined.
        search: Text search over one or several fields.
        sort: ``{field: direction}``, a list of ``{field, direction}``
            objects or ``-field`` strings, or a ``"-created_at,name"`` string.
        pagination: Page- or offset-based window.
    """

    model_config = _WIRE_CONFIG

    fields: list[str] | None = None
    filters: dict[str, Any] | None = None
    search: SearchSpec | None = None
    sort: dict[str, Any] | list[SortItem | str] | str | None = None
    pagination: PaginationSpec | None = None

    @classmethod
    def parse(cls, data: Mapping[str, Any] | QueryRequest | None) -> QueryRequest:
        """Validate a wire mapping, raising ``MalformedRequestError``."""
        if data is None:
            return cls()
        if isinstance(data, QueryRequest):
            return data
        if not isinstance(data, Mapping):
            raise MalformedRequestError(
                f"Query request must be an object, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                msg = error.get("msg", "validation error")
                errors.setdefault(loc or "__root__", []).append(msg)
            raise MalformedRequestError(errors) from exc

    def to_wire(self) -> dict[str, Any]:
        """Serialise back to the camelCase wire shape, dropping unset keys."""
        return self.model_dump(by_alias=True, exclude_none=True)
