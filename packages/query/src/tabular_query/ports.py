"""Ports to the collaborators the engine does not own."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .statement import BoundStatement

TableResolver = Callable[[Any], str]
RowMapper = Callable[[Mapping[str, Any]], Any]


@runtime_checkable
class TabularStore(Protocol):
    """Executes bound statements against a tabular store.

    Implementations must bind ``statement.parameters`` out of band and
    let storage errors propagate.
    """

    async def fetch_rows(
        self, statement: BoundStatement
    ) -> Sequence[Mapping[str, Any]]:
        """Return every row of a data statement as a column mapping."""
        ...

    async def fetch_count(self, statement: BoundStatement) -> int:
        """Return the single scalar produced by a count statement."""
        ...


def default_table_resolver(entity: Any) -> str:
    """Resolve a table name from a string or an object with ``__tablename__``."""
    if isinstance(entity, str):
        return entity
    name = getattr(entity, "__tablename__", None)
    if isinstance(name, str) and name:
        return name
    raise ValueError(
        f"Cannot resolve a table name for {entity!r}; "
        "pass a table name or configure a table_resolver."
    )
