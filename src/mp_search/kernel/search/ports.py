"""Kernel search – ports for the record store the engine talks to."""
from __future__ import annotations

import dataclasses
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ColumnInspector(Protocol):
    """Schema introspection used while a search schema is registered."""

    def record_type_name(self, record_type: Any) -> str: ...
    def has_column(self, record_type: Any, column: str) -> bool: ...


@dataclasses.dataclass(frozen=True)
class FindRequest:
    """Everything a finder needs for one search call."""

    conditions: tuple[Any, ...] | None
    order: str | None
    include: Any
    options: dict[str, Any] = dataclasses.field(default_factory=dict)


@runtime_checkable
class SearchExecutor(Protocol):
    """Runs finder operations.

    The finder named by the schema is looked up on the executor and awaited as
    ``finder(record_type, conditions=..., order=..., include=..., **options)``.
    """

    async def find_all(
        self,
        record_type: Any,
        *,
        conditions: tuple[Any, ...] | None = None,
        order: str | None = None,
        include: Any = None,
        **options: Any,
    ) -> Any: ...


__all__ = ["ColumnInspector", "FindRequest", "SearchExecutor"]
