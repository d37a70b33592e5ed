"""SearchTranslator: single- or multi-field text search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import MalformedRequestError

if TYPE_CHECKING:
    from .builder import QueryBuilder
    from .request import SearchSpec
    from .whitelist import FieldWhitelist

logger = logging.getLogger(__name__)


class SearchTranslator:
    """
    Apply a ``SearchSpec`` to a builder.

    ``fields`` produces one OR-group sharing a single ``%term%`` binding;
    ``field`` produces equality (``exact``) or ``LIKE %term%``. A blank
    term adds nothing.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict

    def apply(
        self,
        builder: QueryBuilder,
        spec: SearchSpec | None,
        whitelist: FieldWhitelist | None = None,
    ) -> QueryBuilder:
        if spec is None or not spec.term or not spec.term.strip():
            return builder

        if spec.fields:
            if whitelist:
                for f in spec.fields:
                    whitelist.allow_search(f)
            return builder.multi_field_search(spec.fields, spec.term)

        if spec.field:
            if whitelist:
                whitelist.allow_search(spec.field)
            return builder.text_search(spec.field, spec.term, spec.exact)

        if self._strict:
            raise MalformedRequestError(
                {"search": ["Search needs either 'field' or 'fields'"]}
            )
        logger.debug("Ignoring search without target fields")
        return builder
