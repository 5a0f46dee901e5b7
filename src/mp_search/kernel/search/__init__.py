"""Kernel search – strategies, schemas, compiled conditions and ports."""
from mp_search.kernel.search.condition import CompiledCondition, ConditionBuilder
from mp_search.kernel.search.ports import ColumnInspector, FindRequest, SearchExecutor
from mp_search.kernel.search.schema import DEFAULT_FINDER, SearchSchema, order_tokens
from mp_search.kernel.search.strategy import SearchStrategy

__all__ = [
    "DEFAULT_FINDER",
    "ColumnInspector",
    "CompiledCondition",
    "ConditionBuilder",
    "FindRequest",
    "SearchExecutor",
    "SearchSchema",
    "SearchStrategy",
    "order_tokens",
]
