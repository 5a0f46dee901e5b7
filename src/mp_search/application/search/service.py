"""Application search – SearchService, the query entry point."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from mp_search.application.search.compiler import ConditionCompiler
from mp_search.application.search.registry import SearchSchemaRegistry
from mp_search.kernel.errors import ArgumentConflictError, FinderNotFoundError
from mp_search.kernel.search import FindRequest, SearchExecutor, order_tokens
from mp_search.observability.logging import get_logger

logger = get_logger(__name__)

# Executor options the service fills in itself.
RESERVED_OPTIONS = ("conditions", "include")


class SearchService:
    """Compiles criteria for a registered record type and runs its finder.

    Example::

        service = SearchService(registry, SqlAlchemySearchExecutor(session))
        people = await service.search(
            Person,
            {"name": "Tom", "age_from": 22},
            additional_conditions=["sex = ?", "male"],
            limit=20,
        )
    """

    def __init__(
        self,
        registry: SearchSchemaRegistry,
        executor: SearchExecutor,
        compiler: ConditionCompiler | None = None,
    ) -> None:
        self._registry = registry
        self._executor = executor
        self._compiler = compiler or ConditionCompiler()

    def compile(
        self,
        record_type: Any,
        criteria: Mapping[str, Any] | None = None,
        *,
        order: Sequence[str] | str | None = None,
        additional_conditions: Sequence[Any] | None = None,
        **options: Any,
    ) -> FindRequest:
        """Build the finder arguments without running the finder."""
        for key in RESERVED_OPTIONS:
            if key in options:
                raise ArgumentConflictError(key)

        schema = self._registry.get(record_type)
        condition = self._compiler.compile(schema, criteria, additional_conditions)
        tokens = schema.default_order if order is None else order_tokens(order)
        logger.debug(
            "search_compiled",
            record_type=schema.record_type,
            empty=condition.is_empty,
            params=len(condition.params),
        )
        return FindRequest(
            conditions=condition.as_tuple() if condition else None,
            order=" ".join(tokens) if tokens else None,
            include=schema.eager_load,
            options=dict(options),
        )

    async def search(
        self,
        record_type: Any,
        criteria: Mapping[str, Any] | None = None,
        *,
        order: Sequence[str] | str | None = None,
        additional_conditions: Sequence[Any] | None = None,
        **options: Any,
    ) -> Any:
        """Run the registered finder and return its result unchanged.

        Raises :class:`ArgumentConflictError` when *options* carries
        ``conditions`` or ``include``, before any compilation.
        """
        request = self.compile(
            record_type,
            criteria,
            order=order,
            additional_conditions=additional_conditions,
            **options,
        )
        finder_name = self._registry.get(record_type).finder_method
        finder = getattr(self._executor, finder_name, None)
        if not callable(finder):
            raise FinderNotFoundError(finder_name, type(self._executor).__name__)
        logger.debug("search_dispatched", finder=finder_name)
        return await finder(
            record_type,
            conditions=request.conditions,
            order=request.order,
            include=request.include,
            **request.options,
        )

    def search_column_names(self, record_type: Any) -> list[str]:
        return self._registry.search_column_names(record_type)


__all__ = ["RESERVED_OPTIONS", "SearchService"]
