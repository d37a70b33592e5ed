"""Set and range conditions: ``in`` and ``between``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidFilterValueError
from ..operators import FilterOperator
from ..strategy import ConditionStrategy

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..builder import QueryBuilder


class InCondition(ConditionStrategy):
    """``field IN (...)``; an empty or non-list value restricts nothing."""

    @property
    def name(self) -> str:
        return FilterOperator.IN.value

    def apply(
        self,
        builder: QueryBuilder,
        field: str,
        value: Any,
        condition: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> QueryBuilder:
        if not isinstance(value, (list, tuple)):
            raise InvalidFilterValueError(
                field, f"'in' expects a list, got {type(value).__name__}"
            )
        if not value:
            raise InvalidFilterValueError(field, "'in' expects a non-empty list")
        return builder.where_in(field, value)


class BetweenCondition(ConditionStrategy):
    """``field BETWEEN a AND b`` from a two-element list."""

    @property
    def name(self) -> str:
        return FilterOperator.BETWEEN.value

    def apply(
        self,
        builder: QueryBuilder,
        field: str,
        value: Any,
        condition: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> QueryBuilder:
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise InvalidFilterValueError(
                field, "'between' expects a list of exactly two values"
            )
        start, end = value
        return builder.where_between(field, start, end)
