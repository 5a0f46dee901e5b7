"""Kernel search – CompiledCondition and ConditionBuilder.

A condition is an expression with positional ``?`` placeholders plus the
ordered parameters bound to them.  The builder only ever appends whole
``(fragment, params)`` pairs so the placeholder count and parameter count
move together.
"""
from __future__ import annotations

import dataclasses
from typing import Any

PLACEHOLDER = "?"


@dataclasses.dataclass(frozen=True)
class CompiledCondition:
    """Parameterized boolean expression handed to an executor."""

    expression: str = ""
    params: tuple[Any, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.expression

    def as_tuple(self) -> tuple[Any, ...]:
        """Return ``(expression, *params)``, the executor's conditions shape."""
        return (self.expression, *self.params)

    def __bool__(self) -> bool:
        return not self.is_empty


class ConditionBuilder:
    """Accumulates clause fragments and their parameters in order.

    Example::

        builder = ConditionBuilder()
        builder.add("(name) LIKE ?", "%Tom%")
        builder.add("? <= (age)", 22)
        builder.build()
        # CompiledCondition("((name) LIKE ?) AND (? <= (age))", ("%Tom%", 22))
    """

    def __init__(self) -> None:
        self._clauses: list[str] = []
        self._params: list[Any] = []

    def add(self, fragment: str, *params: Any) -> "ConditionBuilder":
        if fragment.count(PLACEHOLDER) != len(params):
            raise ValueError(
                f"Clause {fragment!r} has {fragment.count(PLACEHOLDER)} placeholders "
                f"but {len(params)} parameters"
            )
        self._clauses.append(fragment)
        self._params.extend(params)
        return self

    def __len__(self) -> int:
        return len(self._clauses)

    def build(self, extra: CompiledCondition | None = None) -> CompiledCondition:
        """Join clauses with ``AND``; *extra* goes last, parameters included.

        *extra* is raw caller text, so its placeholders are not counted.
        """
        expression = " AND ".join(f"({c})" for c in self._clauses)
        params = list(self._params)
        if extra is not None and extra.expression:
            wrapped = f"({extra.expression})"
            expression = f"{expression} AND {wrapped}" if expression else wrapped
            params.extend(extra.params)
        return CompiledCondition(expression=expression, params=tuple(params))


__all__ = ["PLACEHOLDER", "CompiledCondition", "ConditionBuilder"]
