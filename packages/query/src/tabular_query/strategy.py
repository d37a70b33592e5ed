"""
Filter condition compilation strategy.

Provides the ``ConditionStrategy`` interface and a registry keyed by
operator name. Each built-in operator of a filter condition object
(``eq``, ``in``, ``between``, ...) is an isolated class in
``conditions/``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .builder import QueryBuilder


class ConditionStrategy(ABC):
    """
    Strategy interface for turning one operator of a filter condition
    into a predicate on a ``QueryBuilder``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The operator key this strategy handles."""
        ...

    @abstractmethod
    def apply(
        self,
        builder: QueryBuilder,
        field: str,
        value: Any,
        condition: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> QueryBuilder:
        """
        Return ``builder`` extended with the predicate.

        Args:
            builder: The builder to extend.
            field: Column the condition targets.
            value: The value stored under this operator's key.
            condition: The whole condition object, for modifiers such
                as ``exact``.
            strict: Reject values a lenient caller would accept, such as
                a non-boolean ``isNull``.

        Raises:
            InvalidFilterValueError: If ``value`` has the wrong shape.
        """
        ...


class ConditionRegistry:
    """
    Registry of ``ConditionStrategy`` instances keyed by operator name.

    Registration order is the precedence used when a condition object
    names several operators.
    """

    def __init__(self) -> None:
        self._strategies: dict[str, ConditionStrategy] = {}

    def register(self, strategy: ConditionStrategy) -> None:
        self._strategies[str(strategy.name)] = strategy

    def register_all(self, *strategies: ConditionStrategy) -> None:
        for s in strategies:
            self.register(s)

    def unregister(self, name: str) -> None:
        self._strategies.pop(str(name), None)

    def get(self, name: str) -> ConditionStrategy | None:
        return self._strategies.get(str(name))

    def has(self, name: str) -> bool:
        return str(name) in self._strategies

    @property
    def supported_operators(self) -> list[str]:
        return list(self._strategies)

    def recognized_keys(self, condition: Mapping[str, Any]) -> list[str]:
        """Operator keys of ``condition`` in registry precedence order."""
        return [name for name in self._strategies if name in condition]
