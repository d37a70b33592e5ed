"""Standard comparison conditions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..operators import FilterOperator
from ..strategy import ConditionStrategy

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..builder import QueryBuilder


class _ComparisonCondition(ConditionStrategy):
    operator: FilterOperator
    sql: str

    @property
    def name(self) -> str:
        return self.operator.value

    def apply(
        self,
        builder: QueryBuilder,
        field: str,
        value: Any,
        condition: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> QueryBuilder:
        return builder.where(field, self.sql, value)


class EqualCondition(_ComparisonCondition):
    operator = FilterOperator.EQ
    sql = "="


class NotEqualCondition(_ComparisonCondition):
    operator = FilterOperator.NE
    sql = "!="


class GreaterThanCondition(_ComparisonCondition):
    operator = FilterOperator.GT
    sql = ">"


class GreaterEqualCondition(_ComparisonCondition):
    operator = FilterOperator.GTE
    sql = ">="


class LessThanCondition(_ComparisonCondition):
    operator = FilterOperator.LT
    sql = "<"


class LessEqualCondition(_ComparisonCondition):
    operator = FilterOperator.LTE
    sql = "<="
