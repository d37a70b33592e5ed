"""
Query engine exception hierarchy.

All exceptions inherit from ``QueryError``; request-shape problems inherit
from ``ValidationError`` and provide ``to_dict()`` for API-friendly error
responses. Storage errors are never wrapped: whatever the store raises
reaches the caller unchanged.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class QueryError(Exception):
    """Root exception for the tabular query engine."""


class ValidationError(QueryError):
    """Raised when a query request is rejected.

    Carries structured errors: ``{path: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(self._message())

    def _message(self) -> str:
        messages = [m for msgs in self.errors.values() for m in msgs]
        if len(messages) == 1:
            return messages[0]
        return str(self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
            "errors": self.errors,
        }


class MalformedRequestError(ValidationError):
    """Raised when the request cannot be parsed into a query."""


class UnsupportedOperatorError(ValidationError):
    """
    Unknown filter or comparison operator.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(
        self,
        operator: str,
        valid_operators: list[str],
        field: str | None = None,
    ) -> None:
        self.operator = operator
        self.field = field
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(
            operator, valid_operators, n=3, cutoff=0.6
        )

        message = f"Unknown operator: '{operator}'"
        if field:
            message += f" on field '{field}'"
        message += "."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__({field or "__root__": [message]})

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "field": self.field,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class InvalidFilterValueError(ValidationError):
    """Raised in strict mode when a filter value has the wrong shape."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__({field: [message]})


class InvalidPaginationValueError(ValidationError):
    """Raised in strict mode for out-of-range page, size, limit or offset."""


class InvalidFieldError(ValidationError):
    """Raised when a field or table name is not a plain SQL identifier."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__({field: [message or f"Invalid identifier: {field!r}"]})


class FieldNotAllowedError(InvalidFieldError):
    """Raised when a field is not in the whitelist or operator is disallowed."""
