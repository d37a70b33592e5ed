"""Resolve table names for SQLAlchemy mapped classes and ``Table`` objects."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Table
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import NoInspectionAvailable

from .exceptions import TableResolutionError


def sqlalchemy_table_name(entity: Any) -> str:
    """
    Return the (schema-qualified) table name behind ``entity``.

    Accepts a table name, a ``Table``, or a mapped class. Usable as the
    ``table_resolver`` of a ``QueryExecutor``.
    """
    if isinstance(entity, str):
        return entity
    if isinstance(entity, Table):
        return entity.fullname

    try:
        mapper = sa_inspect(entity)
    except NoInspectionAvailable as exc:
        raise TableResolutionError(
            f"{entity!r} is not a mapped class or Table"
        ) from exc

    table = getattr(mapper, "local_table", None)
    name = getattr(table, "fullname", None)
    if not isinstance(name, str):
        raise TableResolutionError(f"{entity!r} is not mapped to a single table")
    return name
