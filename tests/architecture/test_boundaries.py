from pytest_archon import archrule


def test_query_core_is_storage_agnostic() -> None:
    """
    The query engine talks to storage only through the TabularStore port.
    It must not import SQLAlchemy or the SQLAlchemy adapter.
    """
    (
        archrule("query_core_is_storage_agnostic")
        .match("tabular_query*")
        .exclude("tabular_query_sqlalchemy*")
        .should_not_import("sqlalchemy*")
        .should_not_import("tabular_query_sqlalchemy*")
        .check("tabular_query")
    )