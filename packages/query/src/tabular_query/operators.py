from enum import Enum


class FilterOperator(str, Enum):
    """Operator keys accepted in a filter condition object.

    Declaration order is the precedence used when a condition object
    carries more than one operator key.
    """

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    IN = "in"
    BETWEEN = "between"
    LIKE = "like"
    SEARCH = "search"
    IS_NULL = "isNull"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def normalize(cls, value: object) -> "SortDirection":
        """Case-insensitive ``DESC`` check; anything else is ``ASC``."""
        if isinstance(value, str) and value.strip().upper() == "DESC":
            return cls.DESC
        return cls.ASC


# Comparison operators accepted by ``QueryBuilder.where``.
COMPARISON_OPERATORS = frozenset(
    {"=", "!=", "<>", ">", ">=", "<", "<=", "LIKE", "NOT LIKE"}
)

# Modifier keys that may accompany an operator key in a condition object.
CONDITION_MODIFIERS = frozenset({"exact"})
