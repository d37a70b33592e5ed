"""
Built-in filter conditions and default registry.

Usage::

    from tabular_query.conditions import build_default_registry

    registry = build_default_registry()
    builder = registry.get("gte").apply(builder, "age", 18, {"gte": 18})
"""

from __future__ import annotations

from ..strategy import ConditionRegistry
from .null import IsNullCondition
from .set import BetweenCondition, InCondition
from .standard import (
    EqualCondition,
    GreaterEqualCondition,
    GreaterThanCondition,
    LessEqualCondition,
    LessThanCondition,
    NotEqualCondition,
)
from .string import LikeCondition, SearchCondition


def build_default_registry() -> ConditionRegistry:
    """Registry holding every built-in condition, in precedence order."""
    registry = ConditionRegistry()
    registry.register_all(
        EqualCondition(),
        NotEqualCondition(),
        GreaterThanCondition(),
        GreaterEqualCondition(),
        LessThanCondition(),
        LessEqualCondition(),
        InCondition(),
        BetweenCondition(),
        LikeCondition(),
        SearchCondition(),
        IsNullCondition(),
    )
    return registry


__all__ = [
    "BetweenCondition",
    "EqualCondition",
    "GreaterEqualCondition",
    "GreaterThanCondition",
    "InCondition",
    "IsNullCondition",
    "LessEqualCondition",
    "LessThanCondition",
    "LikeCondition",
    "NotEqualCondition",
    "SearchCondition",
    "build_default_registry",
]
