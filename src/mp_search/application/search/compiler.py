"""Application search – ConditionCompiler.

Turns request criteria into a :class:`CompiledCondition` for one schema:

1. fold ``<name>_from`` / ``<name>_to`` keys of range columns into ``[from, to]`` pairs
2. reject keys the schema does not declare
3. skip blank values
4. emit clauses per strategy against the alias-resolved target
5. append the caller's raw additional condition last
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from mp_search.kernel.errors import InvalidRangeValueError, UnknownSearchColumnError
from mp_search.kernel.search import CompiledCondition, ConditionBuilder, SearchSchema, SearchStrategy
from mp_search.kernel.search.schema import RANGE_FROM_SUFFIX, RANGE_TO_SUFFIX


def is_blank(value: Any) -> bool:
    """``None``, whitespace-only strings and empty collections are blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (Sequence, Mapping, set, frozenset)):
        return len(value) == 0
    return False


def _split_range_key(key: str) -> tuple[str, int] | None:
    """Return ``(base, side)`` for ``<base>_from`` / ``<base>_to``, else ``None``."""
    for side, suffix in enumerate((RANGE_FROM_SUFFIX, RANGE_TO_SUFFIX)):
        if key.endswith(suffix) and len(key) > len(suffix):
            return key[: -len(suffix)], side
    return None


def normalize_range_keys(
    criteria: Mapping[str, Any],
    range_columns: Mapping[str, SearchStrategy] | None = None,
) -> dict[str, Any]:
    """Fold ``*_from`` / ``*_to`` keys into fresh ``[from, to]`` lists keyed by the base name.

    With *range_columns* only those bases are folded; any other key passes
    through unchanged. A missing side stays ``None``. A base given both whole
    and split raises :class:`InvalidRangeValueError`.
    """
    result: dict[str, Any] = {}
    pairs: dict[str, list[Any]] = {}
    for key, value in criteria.items():
        split = _split_range_key(key)
        if split is None or (range_columns is not None and split[0] not in range_columns):
            if key in pairs:
                _raise_mixed_range(key, range_columns, criteria)
            result[key] = value
            continue
        base, side = split
        if base not in pairs:
            if base in result:
                _raise_mixed_range(base, range_columns, criteria)
            pairs[base] = result[base] = [None, None]
        pairs[base][side] = value
    return result


def _raise_mixed_range(
    column: str,
    range_columns: Mapping[str, SearchStrategy] | None,
    criteria: Mapping[str, Any],
) -> None:
    strategy = range_columns[column].value if range_columns else "range"
    raise InvalidRangeValueError(
        column,
        strategy,
        criteria.get(column),
        reason=f"{strategy} column [{column}] given both as a pair and as _from/_to keys",
    )


class ConditionCompiler:
    """Compiles criteria against a :class:`SearchSchema`; holds no state."""

    def compile(
        self,
        schema: SearchSchema,
        criteria: Mapping[str, Any] | None = None,
        additional_conditions: Sequence[Any] | None = None,
    ) -> CompiledCondition:
        range_columns = {c: s for c, s in schema.strategies.items() if s.is_range}
        columns = normalize_range_keys(criteria or {}, range_columns)
        for column in columns:
            if column not in schema.strategies:
                raise UnknownSearchColumnError(column)

        builder = ConditionBuilder()
        for column, value in columns.items():
            if is_blank(value):
                continue
            strategy = schema.strategies[column]
            target = schema.resolve_target(column)
            self._emit(builder, strategy, column, f"({target})", value)

        return builder.build(self._additional(additional_conditions))

    def _emit(
        self,
        builder: ConditionBuilder,
        strategy: SearchStrategy,
        column: str,
        target: str,
        value: Any,
    ) -> None:
        match strategy:
            case SearchStrategy.MATCH_FULL:
                builder.add(f"{target} = ?", value)
            case SearchStrategy.MATCH_PARTIAL:
                builder.add(f"{target} LIKE ?", f"%{value}%")
            case SearchStrategy.CLOSED_RANGE:
                low, high = self._pair(column, strategy, value)
                if low is None and high is None:
                    return
                # one bound given: exact match on it
                low = high if low is None else low
                high = low if high is None else high
                builder.add(f"? <= {target}", low)
                builder.add(f"{target} <= ?", high)
            case SearchStrategy.OPEN_RANGE:
                low, high = self._pair(column, strategy, value)
                if low is not None:
                    builder.add(f"? <= {target}", low)
                if high is not None:
                    builder.add(f"{target} <= ?", high)
            case SearchStrategy.INCLUDING:
                if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
                    value = [value]
                builder.add(f"{target} IN (?)", list(value))

    @staticmethod
    def _pair(column: str, strategy: SearchStrategy, value: Any) -> tuple[Any, Any]:
        """Split a range value into ``(low, high)`` with blank sides as ``None``."""
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 2:
            raise InvalidRangeValueError(column, strategy.value, value)
        low, high = value
        return (None if is_blank(low) else low, None if is_blank(high) else high)

    @staticmethod
    def _additional(additional_conditions: Sequence[Any] | None) -> CompiledCondition | None:
        if additional_conditions is None or is_blank(additional_conditions):
            return None
        if isinstance(additional_conditions, str):
            return CompiledCondition(expression=additional_conditions)
        expression, *params = additional_conditions
        return CompiledCondition(expression=str(expression), params=tuple(params))


__all__ = ["ConditionCompiler", "is_blank", "normalize_range_keys"]
