"""Query errors — a single search call rejected because of its inputs."""

from __future__ import annotations

from typing import Any

from mp_search.kernel.errors.base import BaseError


class SearchError(BaseError, ValueError):
    """A search call was rejected before anything reached the executor."""

    default_code = "search_error"


class ArgumentConflictError(SearchError):
    """An executor option owned by the search operation was passed in."""

    default_code = "argument_conflict"

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            f"Search method cannot use [{key}] key",
            detail={"key": key},
            **kwargs,
        )
        self.key = key


class UnknownSearchColumnError(SearchError):
    """A criteria key is not part of the registered schema."""

    default_code = "unknown_search_column"

    def __init__(self, column: str, **kwargs: Any) -> None:
        super().__init__(
            f'Unknown column "{column}" in settings',
            detail={"column": column},
            **kwargs,
        )
        self.column = column


class InvalidRangeValueError(SearchError):
    """A scope strategy received something other than a ``(from, to)`` pair."""

    default_code = "invalid_range_value"

    def __init__(
        self,
        column: str,
        strategy: str,
        value: Any,
        *,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            reason or f"{strategy} column [{column}] value must be a (from, to) pair",
            detail={"column": column, "strategy": strategy, "value": repr(value)},
            **kwargs,
        )
        self.column = column
        self.strategy = strategy
        self.value = value


class FinderNotFoundError(SearchError):
    """The executor has no callable finder with the registered name."""

    default_code = "finder_not_found"

    def __init__(self, finder: str, executor: str, **kwargs: Any) -> None:
        super().__init__(
            f"{executor} has no finder [{finder}]",
            detail={"finder": finder, "executor": executor},
            **kwargs,
        )
        self.finder = finder
        self.executor = executor


class SchemaNotRegisteredError(SearchError):
    """Search was requested for a record type with no registered schema."""

    default_code = "schema_not_registered"

    def __init__(self, record_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"{record_type} has no registered search schema",
            detail={"record_type": record_type},
            **kwargs,
        )
        self.record_type = record_type


__all__ = [
    "ArgumentConflictError",
    "FinderNotFoundError",
    "InvalidRangeValueError",
    "SchemaNotRegisteredError",
    "SearchError",
    "UnknownSearchColumnError",
]
