"""Shared fixtures for tabular_query tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from tabular_query import QueryBuilder, QueryExecutor

if TYPE_CHECKING:
    from tabular_query import BoundStatement


class RecordingStore:
    """In-memory ``TabularStore`` double that records every statement."""

    def __init__(
        self,
        rows: list[dict[str, Any]] | None = None,
        total: int | None = None,
        error: Exception | None = None,
    ) -> None:
        self.rows = rows or []
        self.total = len(self.rows) if total is None else total
        self.error = error
        self.statements: list[BoundStatement] = []

    async def fetch_rows(self, statement: BoundStatement) -> list[dict[str, Any]]:
        self.statements.append(statement)
        if self.error is not None:
            raise self.error
        return list(self.rows)

    async def fetch_count(self, statement: BoundStatement) -> int:
        self.statements.append(statement)
        if self.error is not None:
            raise self.error
        return self.total


@pytest.fixture
def users() -> QueryBuilder:
    return QueryBuilder("users")


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def executor(store: RecordingStore) -> QueryExecutor:
    return QueryExecutor(store)


@pytest.fixture
def make_store() -> type[RecordingStore]:
    return RecordingStore
