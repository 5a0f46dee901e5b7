"""Kernel search – SearchSchema value object."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from mp_search.kernel.search.strategy import SearchStrategy

RANGE_FROM_SUFFIX = "_from"
RANGE_TO_SUFFIX = "_to"
DEFAULT_FINDER = "find_all"


def order_tokens(order: Sequence[str] | str | None) -> tuple[str, ...]:
    """Order tokens as a tuple; a plain string is one token."""
    if order is None:
        return ()
    if isinstance(order, str):
        return (order,) if order.strip() else ()
    return tuple(order)


@dataclasses.dataclass(frozen=True)
class SearchSchema:
    """Frozen search declaration for one record type.

    ``strategies`` and ``aliases`` are exposed as read-only mappings so the
    schema can be shared by every search call without copying.
    """

    record_type: str
    strategies: Mapping[str, SearchStrategy]
    default_order: tuple[str, ...] = ()
    eager_load: Any = None
    aliases: Mapping[str, str] = dataclasses.field(default_factory=dict)
    finder_method: str = DEFAULT_FINDER

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategies", MappingProxyType(dict(self.strategies)))
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))
        object.__setattr__(self, "default_order", order_tokens(self.default_order))

    def resolve_target(self, column: str) -> str:
        """Return the alias expression for *column*, else the column itself."""
        return self.aliases.get(column, column)

    @property
    def search_column_names(self) -> list[str]:
        """Request column names accepted by search, in declaration order."""
        names: list[str] = []
        for column, strategy in self.strategies.items():
            if strategy.is_range:
                names.append(f"{column}{RANGE_FROM_SUFFIX}")
                names.append(f"{column}{RANGE_TO_SUFFIX}")
            else:
                names.append(column)
        return names


__all__ = ["DEFAULT_FINDER", "RANGE_FROM_SUFFIX", "RANGE_TO_SUFFIX", "SearchSchema", "order_tokens"]
