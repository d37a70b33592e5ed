"""Exceptions for the SQLAlchemy storage adapter."""

from __future__ import annotations

from tabular_query.exceptions import QueryError


class SQLAlchemyStoreError(QueryError):
    """Base exception for SQLAlchemy adapter configuration errors.

    Errors raised by SQLAlchemy while executing a statement are not
    wrapped in this hierarchy.
    """


class SessionManagementError(SQLAlchemyStoreError):
    """Raised when the store is given neither or both session sources."""


class TableResolutionError(SQLAlchemyStoreError):
    """Raised when no table can be resolved for an entity."""


__all__: list[str] = [
    "SQLAlchemyStoreError",
    "SessionManagementError",
    "TableResolutionError",
]
