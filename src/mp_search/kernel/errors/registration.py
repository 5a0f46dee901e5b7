"""Registration errors — a search schema that cannot be accepted."""

from __future__ import annotations

from typing import Any

from mp_search.kernel.errors.base import BaseError


class RegistrationError(BaseError, ValueError):
    """A search schema was rejected; the record type stays unregistered."""

    default_code = "registration_error"


class InvalidStrategyError(RegistrationError):
    """A column was mapped to something outside the closed strategy set."""

    default_code = "invalid_strategy"

    def __init__(self, column: str, strategy: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown search column type [{strategy}]",
            detail={"column": column, "strategy": str(strategy)},
            **kwargs,
        )
        self.column = column
        self.strategy = strategy


class UnknownColumnError(RegistrationError):
    """A schema key is neither a real column nor a declared alias."""

    default_code = "unknown_column"

    def __init__(self, column: str, record_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown column name [{column}]",
            detail={"column": column, "record_type": record_type},
            **kwargs,
        )
        self.column = column
        self.record_type = record_type


__all__ = ["InvalidStrategyError", "RegistrationError", "UnknownColumnError"]
