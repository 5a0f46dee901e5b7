"""Application search – SearchSchemaRegistry."""
from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from typing import Any

from mp_search.config.settings import SearchSettings
from mp_search.kernel.errors import (
    RegistrationError,
    SchemaNotRegisteredError,
    UnknownColumnError,
)
from mp_search.kernel.search import ColumnInspector, SearchSchema, SearchStrategy, order_tokens
from mp_search.observability.logging import get_logger

logger = get_logger(__name__)


class SearchSchemaRegistry:
    """Record type → frozen :class:`SearchSchema`.

    Writes are serialised by a lock; reads are plain dict lookups of
    immutable values.

    Example::

        registry = SearchSchemaRegistry(SqlAlchemyColumnInspector())
        registry.register(
            Person,
            {"name": "match_partial", "age": SearchStrategy.OPEN_RANGE},
            order=["id", "ASC"],
        )
        registry.search_column_names(Person)  # ["name", "age_from", "age_to"]
    """

    def __init__(
        self,
        inspector: ColumnInspector,
        settings: SearchSettings | None = None,
    ) -> None:
        self._inspector = inspector
        self._settings = settings or SearchSettings()
        self._schemas: dict[Any, SearchSchema] = {}
        self._lock = threading.Lock()

    def register(
        self,
        record_type: Any,
        strategies: Mapping[str, SearchStrategy | str],
        *,
        order: Sequence[str] | str | None = None,
        eager_load: Any = None,
        aliases: Mapping[str, str] | None = None,
        finder: str | None = None,
    ) -> SearchSchema:
        """Validate and store the schema for *record_type*.

        A record type is registered once. Later calls return the stored
        schema unchanged; if their options differ they log a warning, or raise
        :class:`RegistrationError` when ``strict_reregistration`` is set.
        """
        with self._lock:
            existing = self._schemas.get(record_type)
            if existing is None:
                schema = self._build(record_type, strategies, order, eager_load, aliases, finder)
                self._schemas[record_type] = schema
                logger.info(
                    "search_schema_registered",
                    record_type=schema.record_type,
                    columns=list(schema.strategies),
                    finder=schema.finder_method,
                )
                return schema

        if self._same_declaration(existing, strategies, order, eager_load, aliases, finder):
            logger.debug("search_schema_reregistered", record_type=existing.record_type)
            return existing
        if self._settings.strict_reregistration:
            raise RegistrationError(
                f"{existing.record_type} is already registered with a different search schema",
                detail={"record_type": existing.record_type},
            )
        logger.warning(
            "search_schema_reregistered",
            record_type=existing.record_type,
            ignored_columns=list(strategies),
        )
        return existing

    def _same_declaration(
        self,
        existing: SearchSchema,
        strategies: Mapping[str, SearchStrategy | str],
        order: Sequence[str] | str | None,
        eager_load: Any,
        aliases: Mapping[str, str] | None,
        finder: str | None,
    ) -> bool:
        # SearchStrategy is a str enum, so members compare equal to their names.
        return (
            dict(existing.strategies) == dict(strategies)
            and existing.default_order == order_tokens(order)
            and existing.eager_load == eager_load
            and dict(existing.aliases) == dict(aliases or {})
            and existing.finder_method == (finder or self._settings.default_finder)
        )

    def _build(
        self,
        record_type: Any,
        strategies: Mapping[str, SearchStrategy | str],
        order: Sequence[str] | str | None,
        eager_load: Any,
        aliases: Mapping[str, str] | None,
        finder: str | None,
    ) -> SearchSchema:
        aliases = dict(aliases or {})
        type_name = self._inspector.record_type_name(record_type)
        parsed: dict[str, SearchStrategy] = {}
        for column, strategy in strategies.items():
            parsed[column] = SearchStrategy.parse(column, strategy)
            if column not in aliases and not self._inspector.has_column(record_type, column):
                raise UnknownColumnError(column, type_name)
        return SearchSchema(
            record_type=type_name,
            strategies=parsed,
            default_order=order_tokens(order),
            eager_load=eager_load,
            aliases=aliases,
            finder_method=finder or self._settings.default_finder,
        )

    def contains(self, record_type: Any) -> bool:
        return record_type in self._schemas

    __contains__ = contains

    def get(self, record_type: Any) -> SearchSchema:
        try:
            return self._schemas[record_type]
        except KeyError:
            raise SchemaNotRegisteredError(self._inspector.record_type_name(record_type)) from None

    def search_column_names(self, record_type: Any) -> list[str]:
        return self.get(record_type).search_column_names


__all__ = ["SearchSchemaRegistry"]
