"""Kernel search – SearchStrategy enum."""
from __future__ import annotations

from enum import Enum
from typing import Any

from mp_search.kernel.errors import InvalidStrategyError


class SearchStrategy(str, Enum):
    """Matching rule applied to one search column.

    The value is the name used when a schema is declared with plain strings.
    """

    MATCH_FULL = "match_full"
    MATCH_PARTIAL = "match_partial"
    CLOSED_RANGE = "closed_scope"
    OPEN_RANGE = "opened_scope"
    INCLUDING = "including"

    @property
    def is_range(self) -> bool:
        return self in (SearchStrategy.CLOSED_RANGE, SearchStrategy.OPEN_RANGE)

    @classmethod
    def parse(cls, column: str, value: Any) -> "SearchStrategy":
        """Coerce *value* to a member or raise :class:`InvalidStrategyError`."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidStrategyError(column, value)


__all__ = ["SearchStrategy"]
