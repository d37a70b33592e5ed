"""QueryExecutor over SQLAlchemyTabularStore against the seeded ``users`` table."""

import pytest
from pydantic import BaseModel

from tabular_query import FieldWhitelist, QueryEngineConfig, QueryExecutor
from tabular_query_sqlalchemy import SQLAlchemyTabularStore, sqlalchemy_table_name


class UserSummary(BaseModel):
    id: int
    name: str


@pytest.fixture
def executor(session_factory):
    return QueryExecutor(
        SQLAlchemyTabularStore(session_factory=session_factory),
        table_resolver=sqlalchemy_table_name,
    )


@pytest.mark.asyncio()
async def test_first_page_of_active_users(executor, user_model):
    result = await executor.execute_query(
        user_model,
        {
            "filters": {"status": "active"},
            "sort": {"created_at": "desc"},
            "pagination": {"page": 1, "pageSize": 5},
        },
    )
    payload = result.to_dict()
    assert len(payload["data"]) == 5
    assert payload["totalCount"] == 12
    assert payload["currentPage"] == 1
    assert payload["pageSize"] == 5
    assert payload["totalPages"] == 3
    assert payload["hasMore"] is True
    assert [row["id"] for row in payload["data"]] == [12, 11, 10, 9, 8]


@pytest.mark.asyncio()
async def test_last_partial_page(executor, user_model):
    result = await executor.execute_query(
        user_model,
        {
            "filters": {"status": "active"},
            "sort": "id",
            "pagination": {"page": 3, "pageSize": 5},
        },
    )
    assert [row["id"] for row in result.data] == [11, 12]
    assert result.current_page == 3
    assert result.has_more is False


@pytest.mark.asyncio()
async def test_combined_filters_search_and_projection(executor, user_model):
    result = await executor.execute_query(
        user_model,
        {
            "fields": ["id", "name"],
            "filters": {"age": {"between": [25, 30]}, "email": {"isNull": False}},
            "search": {"field": "name", "term": "active"},
            "sort": [{"field": "age", "direction": "desc"}],
        },
    )
    assert [row["id"] for row in result.data] == [10, 9, 8, 7, 6, 5]
    assert set(result.data[0]) == {"id", "name"}
    assert result.total_count == 6
    assert result.current_page is None


@pytest.mark.asyncio()
async def test_in_filter_and_pydantic_rows(session_factory):
    executor = QueryExecutor(
        SQLAlchemyTabularStore(session_factory=session_factory),
        table_resolver=lambda _: "users",
    )
    result = await executor.execute_query(
        UserSummary,
        {
            "fields": ["id", "name"],
            "filters": {"status": {"in": ["banned", "pending"]}},
            "sort": "-id",
            "pagination": {"offset": 0, "limit": 2},
        },
    )
    assert result.data == [
        UserSummary(id=200, name="Johnny"),
        UserSummary(id=103, name="pending3"),
    ]
    assert result.total_count == 4
    assert result.total_pages == 2
    assert result.has_more is True


@pytest.mark.asyncio()
async def test_caller_managed_session_spans_both_round_trips(session, user_model):
    async with session.begin():
        executor = QueryExecutor(
            SQLAlchemyTabularStore(session=session),
            table_resolver=sqlalchemy_table_name,
        )
        result = await executor.execute_query(
            user_model, {"filters": {"status": "pending"}}
        )
    assert result.total_count == 3
    assert len(result.data) == 3


@pytest.mark.asyncio()
async def test_whitelist_and_max_page_size(session_factory, user_model):
    executor = QueryExecutor(
        SQLAlchemyTabularStore(session_factory=session_factory),
        config=QueryEngineConfig(max_page_size=4),
        table_resolver=sqlalchemy_table_name,
    )
    whitelist = FieldWhitelist(
        filterable_fields={"status": {"eq", "in"}},
        sortable_fields={"id"},
    )
    result = await executor.execute_query(
        user_model,
        {"filters": {"status": "active"}, "sort": "id", "pagination": {"page": 1, "pageSize": 50}},
        whitelist=whitelist,
    )
    assert result.page_size == 4
    assert [row["id"] for row in result.data] == [1, 2, 3, 4]
    assert result.total_pages == 3
