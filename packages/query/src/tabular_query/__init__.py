"""Dynamic query construction and paged execution against tabular stores."""

from __future__ import annotations

from .builder import QueryBuilder, check_identifier
from .conditions import build_default_registry
from .config import QueryEngineConfig
from .exceptions import (
    FieldNotAllowedError,
    InvalidFieldError,
    InvalidFilterValueError,
    InvalidPaginationValueError,
    MalformedRequestError,
    QueryError,
    UnsupportedOperatorError,
    ValidationError,
)
from .executor import QueryExecutor
from .filters import FilterTranslator
from .operators import FilterOperator, SortDirection
from .pagination import PageMetadata, PageWindow, Paginator
from .ports import TableResolver, TabularStore, default_table_resolver
from .query_params import request_from_query_params
from .request import PaginationSpec, QueryRequest, SearchSpec, SortItem
from .result import PagedResult
from .search import SearchTranslator
from .sorting import SortField, SortResolver
from .statement import BoundStatement
from .strategy import ConditionRegistry, ConditionStrategy
from .whitelist import FieldWhitelist

__all__ = [
    "BoundStatement",
    "ConditionRegistry",
    "ConditionStrategy",
    "FieldNotAllowedError",
    "FieldWhitelist",
    "FilterOperator",
    "FilterTranslator",
    "InvalidFieldError",
    "InvalidFilterValueError",
    "InvalidPaginationValueError",
    "MalformedRequestError",
    "PageMetadata",
    "PageWindow",
    "PagedResult",
    "PaginationSpec",
    "Paginator",
    "QueryBuilder",
    "QueryEngineConfig",
    "QueryError",
    "QueryExecutor",
    "QueryRequest",
    "SearchSpec",
    "SearchTranslator",
    "SortDirection",
    "SortField",
    "SortItem",
    "SortResolver",
    "TableResolver",
    "TabularStore",
    "UnsupportedOperatorError",
    "ValidationError",
    "build_default_registry",
    "check_identifier",
    "default_table_resolver",
    "request_from_query_params",
]
