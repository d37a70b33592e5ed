"""BoundStatement: SQL text plus out-of-band parameter bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BoundStatement:
    """
    Immutable SQL statement with named parameters.

    Attributes:
        text: SQL text containing only placeholders, never values.
        parameters: Mapping of placeholder name (without prefix) to value.
    """

    text: str
    parameters: dict[str, Any] = field(default_factory=dict)

    @property
    def parameter_names(self) -> list[str]:
        return list(self.parameters)

    def __str__(self) -> str:
        return self.text
