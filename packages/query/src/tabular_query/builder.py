"""
QueryBuilder: immutable, parameterized SELECT statement builder.

Every method returns a new builder; the receiver is never modified.
Bound parameters are named ``p0``, ``p1``, ... from a counter that is
carried over to each derived builder, so a builder never holds two
values under the same name. Values only ever travel as bindings: the
SQL text contains identifiers, keywords and placeholders, nothing else.

Usage::

    stmt = (
        QueryBuilder("users")
        .where_equals("status", "active")
        .where_between("age", 18, 65)
        .order_by_desc("created_at")
        .paginate(2, 10)
        .build_statement()
    )
    # SELECT * FROM users WHERE status = :p0 AND age BETWEEN :p1 AND :p2
    #   ORDER BY created_at DESC LIMIT 10 OFFSET 10

    total = QueryBuilder("users").where_equals("status", "active").for_count()
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from .exceptions import (
    InvalidFieldError,
    InvalidPaginationValueError,
    UnsupportedOperatorError,
)
from .operators import COMPARISON_OPERATORS, SortDirection
from .pagination import Paginator
from .statement import BoundStatement

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


def check_identifier(name: str) -> str:
    """Return ``name`` if it is a plain (optionally dotted) SQL identifier."""
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise InvalidFieldError(str(name))
    return name


@dataclass(frozen=True)
class QueryBuilder:
    """
    Persistent SELECT statement under construction.

    Attributes:
        table: Table the statement selects from.
        placeholder: Bind-parameter prefix (``:`` renders ``:p0``).
        select_fields: Projection; ``("*",)`` by default.
        predicates: WHERE fragments, joined with ``AND``.
        order_by_fields: ORDER BY fragments in caller order.
        limit_value: Positive row limit, or ``None``.
        offset_value: Non-negative row offset, or ``None``.
        bindings: ``(name, value)`` pairs in binding order.
        next_param: Index of the next parameter name to hand out.
    """

    table: str
    placeholder: str = ":"
    select_fields: tuple[str, ...] = ("*",)
    predicates: tuple[str, ...] = ()
    order_by_fields: tuple[str, ...] = ()
    limit_value: int | None = None
    offset_value: int | None = None
    bindings: tuple[tuple[str, Any], ...] = ()
    next_param: int = 0

    def __post_init__(self) -> None:
        check_identifier(self.table)
        if not self.placeholder:
            raise ValueError("placeholder prefix must not be empty")
        if self.limit_value is not None and self.limit_value <= 0:
            raise InvalidPaginationValueError(
                {"limit": [f"limit must be positive, got {self.limit_value}"]}
            )
        if self.offset_value is not None and self.offset_value < 0:
            raise InvalidPaginationValueError(
                {"offset": [f"offset must not be negative, got {self.offset_value}"]}
            )
        if self.next_param < 0:
            raise ValueError("next_param must not be negative")

    # -- projection ---------------------------------------------------------

    def select(self, *fields: str) -> QueryBuilder:
        """Replace the projection; no fields keeps the current one."""
        if not fields:
            return self
        for f in fields:
            if f != "*":
                check_identifier(f)
        return replace(self, select_fields=tuple(fields))

    # -- predicates ---------------------------------------------------------

    def where(self, field: str, operator: str, value: Any) -> QueryBuilder:
        """Add ``field <operator> :pN`` bound to ``value``."""
        op = " ".join(str(operator).split()).upper()
        if op not in COMPARISON_OPERATORS:
            raise UnsupportedOperatorError(
                str(operator), sorted(COMPARISON_OPERATORS), field
            )
        check_identifier(field)
        return self._with_predicate(lambda ph: f"{field} {op} {ph[0]}", [value])

    def where_equals(self, field: str, value: Any) -> QueryBuilder:
        return self.where(field, "=", value)

    def where_in(self, field: str, values: Iterable[Any] | None) -> QueryBuilder:
        """Add ``field IN (...)``; an empty or missing list adds nothing."""
        items = list(values) if values is not None else []
        if not items:
            return self
        check_identifier(field)
        return self._with_predicate(
            lambda ph: f"{field} IN ({', '.join(ph)})", items
        )

    def where_between(self, field: str, start: Any, end: Any) -> QueryBuilder:
        check_identifier(field)
        return self._with_predicate(
            lambda ph: f"{field} BETWEEN {ph[0]} AND {ph[1]}", [start, end]
        )

    def where_null(self, field: str) -> QueryBuilder:
        check_identifier(field)
        return replace(self, predicates=(*self.predicates, f"{field} IS NULL"))

    def where_not_null(self, field: str) -> QueryBuilder:
        check_identifier(field)
        return replace(self, predicates=(*self.predicates, f"{field} IS NOT NULL"))

    def text_search(
        self, field: str, term: str | None, exact: bool = False
    ) -> QueryBuilder:
        """Equality when ``exact``, otherwise ``LIKE '%term%'``.

        A blank term adds nothing.
        """
        if not term or not term.strip():
            return self
        if exact:
            return self.where(field, "=", term)
        return self.where(field, "LIKE", f"%{term}%")

    def multi_field_search(
        self, fields: Sequence[str] | None, term: str | None
    ) -> QueryBuilder:
        """Add ``(f1 LIKE :pN OR f2 LIKE :pN ...)`` with one shared binding."""
        if not fields or not term or not term.strip():
            return self
        for f in fields:
            check_identifier(f)
        return self._with_predicate(
            lambda ph: "(" + " OR ".join(f"{f} LIKE {ph[0]}" for f in fields) + ")",
            [f"%{term}%"],
        )

    # -- ordering -----------------------------------------------------------

    def order_by(self, field: str, direction: Any = "ASC") -> QueryBuilder:
        check_identifier(field)
        direction = SortDirection.normalize(direction)
        return replace(
            self,
            order_by_fields=(*self.order_by_fields, f"{field} {direction.value}"),
        )

    def order_by_asc(self, field: str) -> QueryBuilder:
        return self.order_by(field, SortDirection.ASC.value)

    def order_by_desc(self, field: str) -> QueryBuilder:
        return self.order_by(field, SortDirection.DESC.value)

    def order_by_multiple(self, sort_fields: Mapping[str, Any] | None) -> QueryBuilder:
        builder = self
        for field, direction in (sort_fields or {}).items():
            builder = builder.order_by(field, direction)
        return builder

    # -- pagination ---------------------------------------------------------

    def limit(self, limit: int) -> QueryBuilder:
        """Set the row limit; non-positive values are ignored."""
        if limit > 0:
            return replace(self, limit_value=limit)
        return self

    def offset(self, offset: int) -> QueryBuilder:
        """Set the row offset; negative values are ignored."""
        if offset >= 0:
            return replace(self, offset_value=offset)
        return self

    def paginate(self, page: int, page_size: int) -> QueryBuilder:
        """1-based page; ignored unless both values are positive."""
        window = Paginator.window(page, page_size)
        if window is None:
            return self
        return self.limit(window.limit).offset(window.offset)

    # -- derived builders ---------------------------------------------------

    def for_count(self, alias: str = "count") -> QueryBuilder:
        """
        Derive the count variant of this builder.

        Same predicates and bindings; projection ``COUNT(1) AS <alias>``,
        no ordering, no limit or offset.
        """
        check_identifier(alias)
        return replace(
            self,
            select_fields=(f"COUNT(1) AS {alias}",),
            order_by_fields=(),
            limit_value=None,
            offset_value=None,
        )

    # -- rendering ----------------------------------------------------------

    @property
    def parameters(self) -> dict[str, Any]:
        return dict(self.bindings)

    def build_sql(self) -> str:
        parts = [f"SELECT {', '.join(self.select_fields)} FROM {self.table}"]
        if self.predicates:
            parts.append("WHERE " + " AND ".join(self.predicates))
        if self.order_by_fields:
            parts.append("ORDER BY " + ", ".join(self.order_by_fields))
        if self.limit_value is not None:
            parts.append(f"LIMIT {int(self.limit_value)}")
        if self.offset_value is not None:
            parts.append(f"OFFSET {int(self.offset_value)}")
        return " ".join(parts)

    def build_statement(self) -> BoundStatement:
        return BoundStatement(self.build_sql(), self.parameters)

    def build_count_statement(self, alias: str = "count") -> BoundStatement:
        return self.for_count(alias).build_statement()

    # -- internals ----------------------------------------------------------

    def _with_predicate(
        self,
        render: Callable[[list[str]], str],
        values: list[Any],
    ) -> QueryBuilder:
        names = [f"p{self.next_param + i}" for i in range(len(values))]
        fragment = render([f"{self.placeholder}{n}" for n in names])
        return replace(
            self,
            predicates=(*self.predicates, fragment),
            bindings=(*self.bindings, *zip(names, values)),
            next_param=self.next_param + len(values),
        )
