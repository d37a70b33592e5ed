"""
SQLAlchemy implementation of the ``TabularStore`` port.

Statements are executed through ``sqlalchemy.text()``, which binds the
``:p0``-style placeholders rendered by ``QueryBuilder`` natively.
"""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import text
from sqlalchemy.ext.asyncio import async_sessionmaker

from .exceptions import SessionManagementError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable, Mapping, Sequence

    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

    from tabular_query.statement import BoundStatement

    AsyncSessionFactory = Callable[[], AsyncSession]

logger = logging.getLogger(__name__)


class SQLAlchemyTabularStore:
    """
    ``TabularStore`` over an ``AsyncSession``.

    Supports two usage patterns:

    1. **Self-managed sessions**::

           store = SQLAlchemyTabularStore(session_factory=async_sessionmaker(engine))

       Each round trip opens and closes its own session, so the count and
       the data query may observe different snapshots.

    2. **Caller-managed session**::

           async with session.begin():
               store = SQLAlchemyTabularStore(session=session)
               page = await QueryExecutor(store).execute_query("users", request)

       Both round trips run on the caller's session; the caller decides
       the transaction and isolation level that keeps them consistent.

    Exactly one of ``session`` or ``session_factory`` must be provided.
    SQLAlchemy errors propagate unchanged.
    """

    def __init__(
        self,
        session: AsyncSession | None = None,
        session_factory: AsyncSessionFactory | None = None,
    ) -> None:
        if session is not None and session_factory is not None:
            raise SessionManagementError(
                "Cannot provide both 'session' and 'session_factory'."
            )
        if session is None and session_factory is None:
            raise SessionManagementError(
                "Must provide either 'session' or 'session_factory'."
            )
        self._session = session
        self._session_factory = session_factory

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> SQLAlchemyTabularStore:
        """Self-managed store over ``engine``."""
        return cls(session_factory=async_sessionmaker(engine, expire_on_commit=False))

    @contextlib.asynccontextmanager
    async def _session_scope(self) -> AsyncIterator[AsyncSession]:
        if self._session is not None:
            yield self._session
            return
        factory = cast("AsyncSessionFactory", self._session_factory)
        async with factory() as session:
            yield session

    async def fetch_rows(
        self, statement: BoundStatement
    ) -> Sequence[Mapping[str, Any]]:
        async with self._session_scope() as session:
            result = await session.execute(text(statement.text), statement.parameters)
            rows = [dict(row) for row in result.mappings().all()]
        logger.debug("Fetched %d rows", len(rows))
        return rows

    async def fetch_count(self, statement: BoundStatement) -> int:
        async with self._session_scope() as session:
            result = await session.execute(text(statement.text), statement.parameters)
            value = result.scalar()
        return int(value or 0)
