"""Null check condition."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidFilterValueError
from ..operators import FilterOperator
from ..strategy import ConditionStrategy

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..builder import QueryBuilder


class IsNullCondition(ConditionStrategy):
    """``{"isNull": true}`` → ``IS NULL``; anything else → ``IS NOT NULL``.

    With ``strict`` a non-boolean value is rejected.
    """

    @property
    def name(self) -> str:
        return FilterOperator.IS_NULL.value

    def apply(
        self,
        builder: QueryBuilder,
        field: str,
        value: Any,
        condition: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> QueryBuilder:
        if strict and not isinstance(value, bool):
            raise InvalidFilterValueError(
                field, f"'isNull' expects a boolean, got {value!r}"
            )
        if value is True:
            return builder.where_null(field)
        return builder.where_not_null(field)
