"""
QueryExecutor: request -> QueryBuilder -> count + data round trips -> PagedResult.

The count statement and the data statement are derived from the same
builder, so both see the identical predicate set and bindings. They run
as two sequential round trips; no snapshot spans them, so a concurrent
writer can make ``total_count`` and ``data`` disagree.

Usage::

    executor = QueryExecutor(SQLAlchemyTabularStore(session_factory))
    page = await executor.execute_query(
        "users",
        {
            "filters": {"status": "active", "age": {"gte": 18}},
            "sort": {"created_at": "desc"},
            "pagination": {"page": 1, "pageSize": 5},
        },
    )
    page.to_dict()  # {"data": [...], "totalCount": 12, "currentPage": 1, ...}
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .builder import QueryBuilder
from .config import QueryEngineConfig
from .filters import FilterTranslator
from .pagination import Paginator
from .ports import default_table_resolver
from .request import QueryRequest
from .result import PagedResult
from .search import SearchTranslator
from .sorting import SortResolver

if TYPE_CHECKING:
    from .ports import RowMapper, TableResolver, TabularStore
    from .strategy import ConditionRegistry
    from .whitelist import FieldWhitelist

logger = logging.getLogger("tabular_query.executor")


class QueryExecutor:
    """Build, count, fetch and page queries against a ``TabularStore``."""

    def __init__(
        self,
        store: TabularStore,
        *,
        config: QueryEngineConfig | None = None,
        table_resolver: TableResolver | None = None,
        registry: ConditionRegistry | None = None,
    ) -> None:
        """
        Initialize QueryExecutor.

        Args:
            store: Storage collaborator executing bound statements.
            config: Engine settings; defaults to lenient mode with ``:``
                placeholders.
            table_resolver: Maps an entity to its table name. Defaults to
                accepting table names and ``__tablename__`` attributes.
            registry: Filter condition strategies; defaults to the
                built-in set.
        """
        self._store = store
        self._config = config or QueryEngineConfig()
        self._table_resolver = table_resolver or default_table_resolver
        strict = self._config.strict
        self._filters = FilterTranslator(registry, strict=strict)
        self._search = SearchTranslator(strict=strict)
        self._sort = SortResolver(strict=strict)

    @property
    def config(self) -> QueryEngineConfig:
        return self._config

    # -- building -----------------------------------------------------------

    def create_query_builder(self, entity: Any) -> QueryBuilder:
        """Return an unrestricted builder over ``entity``'s table."""
        return QueryBuilder(
            self._table_resolver(entity), placeholder=self._config.placeholder
        )

    def create_from_request(
        self,
        entity: Any,
        request: QueryRequest | Mapping[str, Any] | None,
        *,
        whitelist: FieldWhitelist | None = None,
    ) -> QueryBuilder:
        """
        Build the query described by ``request``.

        Applied in order: projection, filters, search, sort, pagination.
        The order only affects parameter numbering.
        """
        req = QueryRequest.parse(request)
        builder = self.create_query_builder(entity)

        if req.fields:
            if whitelist:
                for f in req.fields:
                    whitelist.allow_project(f)
            builder = builder.select(*req.fields)

        builder = self._filters.apply(builder, req.filters, whitelist)
        builder = self._search.apply(builder, req.search, whitelist)
        builder = self._sort.apply(builder, req.sort, whitelist)

        limit, offset = Paginator.resolve(
            req.pagination,
            strict=self._config.strict,
            max_page_size=self._config.max_page_size,
        )
        if limit is not None:
            builder = builder.limit(limit)
        if offset is not None:
            builder = builder.offset(offset)
        return builder

    # -- execution ----------------------------------------------------------

    async def count(self, builder: QueryBuilder) -> int:
        """Count the rows matching ``builder``'s predicates."""
        statement = builder.build_count_statement(self._config.count_alias)
        logger.debug(
            "Count: %s params=%s", statement.text, statement.parameter_names
        )
        return int(await self._store.fetch_count(statement))

    async def fetch(
        self,
        builder: QueryBuilder,
        *,
        entity: Any = None,
        row_mapper: RowMapper | None = None,
    ) -> list[Any]:
        """Run the data statement and map each row."""
        statement = builder.build_statement()
        logger.debug(
            "Fetch: %s params=%s", statement.text, statement.parameter_names
        )
        rows = await self._store.fetch_rows(statement)
        mapper = row_mapper or _default_row_mapper(entity)
        return [mapper(row) for row in rows]

    async def execute_paged(
        self,
        builder: QueryBuilder,
        *,
        entity: Any = None,
        row_mapper: RowMapper | None = None,
    ) -> PagedResult[Any]:
        """Count, fetch and assemble one page."""
        start = time.perf_counter()
        try:
            total_count = await self.count(builder)
            data = await self.fetch(builder, entity=entity, row_mapper=row_mapper)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception(
                "Query on %s failed after %.2fms", builder.table, elapsed
            )
            raise

        metadata = Paginator.compute_metadata(
            total_count, builder.limit_value, builder.offset_value, len(data)
        )
        logger.debug(
            "Query on %s returned %d of %d rows in %.2fms",
            builder.table,
            len(data),
            total_count,
            (time.perf_counter() - start) * 1000,
        )
        return PagedResult.assemble(
            data,
            total_count,
            metadata,
            limit=builder.limit_value,
            offset=builder.offset_value,
        )

    async def execute_query(
        self,
        entity: Any,
        request: QueryRequest | Mapping[str, Any] | None,
        *,
        whitelist: FieldWhitelist | None = None,
        row_mapper: RowMapper | None = None,
    ) -> PagedResult[Any]:
        """Build ``request`` against ``entity`` and return the paged result."""
        builder = self.create_from_request(entity, request, whitelist=whitelist)
        return await self.execute_paged(
            builder, entity=entity, row_mapper=row_mapper
        )


def _default_row_mapper(entity: Any) -> RowMapper:
    validate = getattr(entity, "model_validate", None)
    if isinstance(entity, type) and callable(validate):
        return validate  # type: ignore[no-any-return]
    return dict
