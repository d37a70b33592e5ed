"""FilterTranslator: filter mapping -> AND-joined predicates on a QueryBuilder."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from .conditions import build_default_registry
from .exceptions import (
    InvalidFilterValueError,
    MalformedRequestError,
    UnsupportedOperatorError,
)
from .operators import CONDITION_MODIFIERS, FilterOperator

if TYPE_CHECKING:
    from .builder import QueryBuilder
    from .strategy import ConditionRegistry, ConditionStrategy
    from .whitelist import FieldWhitelist

logger = logging.getLogger(__name__)


class FilterTranslator:
    """
    Translate ``{field: condition}`` into predicates.

    A scalar condition means equality. An operator object such as
    ``{"gte": 18}`` is compiled by the strategy registered for its key.

    Lenient mode (default) skips conditions it cannot use: unknown
    operator keys, empty or non-list ``in``, ``between`` without exactly
    two values. Strict mode raises instead.
    """

    def __init__(
        self,
        registry: ConditionRegistry | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self._strict = strict
        self._registry = registry or build_default_registry()

    @property
    def strict(self) -> bool:
        return self._strict

    def apply(
        self,
        builder: QueryBuilder,
        filters: Mapping[str, Any] | None,
        whitelist: FieldWhitelist | None = None,
    ) -> QueryBuilder:
        for field, condition in (filters or {}).items():
            builder = self.apply_condition(builder, field, condition, whitelist)
        return builder

    def apply_condition(
        self,
        builder: QueryBuilder,
        field: str,
        condition: Any,
        whitelist: FieldWhitelist | None = None,
    ) -> QueryBuilder:
        if not isinstance(condition, Mapping):
            if whitelist:
                whitelist.allow_filter(field, FilterOperator.EQ.value)
            return builder.where_equals(field, condition)

        op = self._resolve_operator(field, condition)
        if op is None:
            return builder
        if whitelist:
            whitelist.allow_filter(field, op)

        strategy = cast("ConditionStrategy", self._registry.get(op))
        try:
            return strategy.apply(
                builder, field, condition[op], condition, strict=self._strict
            )
        except InvalidFilterValueError as exc:
            if self._strict:
                raise
            logger.debug("Skipping filter on %r: %s", field, exc)
            return builder

    def _resolve_operator(self, field: str, condition: Mapping[str, Any]) -> str | None:
        recognized = self._registry.recognized_keys(condition)
        unknown = [
            str(k)
            for k in condition
            if not self._registry.has(k) and k not in CONDITION_MODIFIERS
        ]

        if self._strict:
            if unknown:
                raise UnsupportedOperatorError(
                    unknown[0], self._registry.supported_operators, field
                )
            if len(recognized) != 1:
                raise MalformedRequestError(
                    {
                        field: [
                            "Condition must name exactly one operator, "
                            f"got {len(recognized)}"
                        ]
                    }
                )
            return recognized[0]

        if unknown:
            logger.debug("Ignoring unknown operators %s on %r", unknown, field)
        if not recognized:
            return None
        return recognized[0]
