"""SQLAlchemy storage collaborator for tabular_query."""

from __future__ import annotations

from .exceptions import (
    SessionManagementError,
    SQLAlchemyStoreError,
    TableResolutionError,
)
from .store import SQLAlchemyTabularStore
from .tables import sqlalchemy_table_name

__all__ = [
    "SQLAlchemyStoreError",
    "SQLAlchemyTabularStore",
    "SessionManagementError",
    "TableResolutionError",
    "sqlalchemy_table_name",
]
