"""Engine-wide settings for request translation and execution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryEngineConfig:
    """
    Immutable engine configuration.

    Attributes:
        strict: Raise a ``ValidationError`` subclass instead of silently
            skipping unusable filters, sort items or pagination values.
        placeholder: Bind-parameter prefix rendered before ``p0``, ``p1``...
            ``:`` suits SQLAlchemy ``text()``; ``@`` suits Spanner.
        count_alias: Column alias of the aggregate in count statements.
        max_page_size: Upper bound applied to the requested limit.
    """

    strict: bool = False
    placeholder: str = ":"
    count_alias: str = "count"
    max_page_size: int | None = None

    def __post_init__(self) -> None:
        if self.max_page_size is not None and self.max_page_size <= 0:
            raise ValueError("max_page_size must be positive")
