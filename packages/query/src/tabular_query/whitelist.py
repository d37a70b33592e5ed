"""FieldWhitelist: per-resource filterable/sortable/projectable/searchable fields."""

from __future__ import annotations

from .exceptions import FieldNotAllowedError


class FieldWhitelist:
    """Per-resource allowed fields and filter operators.

    ``filterable_fields`` maps a field to the operator keys allowed on it;
    ``"eq"`` also covers bare scalar (equality) conditions.
    """

    def __init__(
        self,
        *,
        filterable_fields: dict[str, set[str]] | None = None,
        sortable_fields: set[str] | None = None,
        projectable_fields: set[str] | None = None,
        searchable_fields: set[str] | None = None,
    ) -> None:
        self.filterable_fields = filterable_fields or {}
        self.sortable_fields = sortable_fields or set()
        self.projectable_fields = projectable_fields or set()
        self.searchable_fields = searchable_fields or set()

    def allow_filter(self, field: str, op: str) -> None:
        """Raise FieldNotAllowedError if field or operator is not allowed."""
        if field not in self.filterable_fields:
            raise FieldNotAllowedError(field, f"Field {field!r} is not filterable")
        allowed_ops = self.filterable_fields[field]
        if op not in allowed_ops:
            raise FieldNotAllowedError(
                field, f"Operator {op!r} not allowed for field {field!r}"
            )

    def allow_sort(self, field: str) -> None:
        if field not in self.sortable_fields:
            raise FieldNotAllowedError(field, f"Field {field!r} is not sortable")

    def allow_project(self, field: str) -> None:
        if field not in self.projectable_fields:
            raise FieldNotAllowedError(field, f"Field {field!r} is not projectable")

    def allow_search(self, field: str) -> None:
        if field not in self.searchable_fields:
            raise FieldNotAllowedError(field, f"Field {field!r} is not searchable")
