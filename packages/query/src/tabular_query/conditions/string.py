"""String conditions: ``like`` and ``search``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidFilterValueError
from ..operators import FilterOperator
from ..strategy import ConditionStrategy

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..builder import QueryBuilder


class LikeCondition(ConditionStrategy):
    """Pattern is bound as given; wildcards are the caller's business."""

    @property
    def name(self) -> str:
        return FilterOperator.LIKE.value

    def apply(
        self,
        builder: QueryBuilder,
        field: str,
        value: Any,
        condition: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> QueryBuilder:
        if value is None:
            raise InvalidFilterValueError(field, "'like' expects a pattern")
        return builder.where(field, "LIKE", str(value))


class SearchCondition(ConditionStrategy):
    """``{"search": term, "exact": bool}`` → equality or ``LIKE %term%``."""

    @property
    def name(self) -> str:
        return FilterOperator.SEARCH.value

    def apply(
        self,
        builder: QueryBuilder,
        field: str,
        value: Any,
        condition: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> QueryBuilder:
        if value is None:
            return builder
        exact = condition.get("exact") is True
        return builder.text_search(field, str(value), exact)
