"""Application search – schema registration, condition compilation, dispatch."""
from mp_search.application.search.compiler import ConditionCompiler, is_blank, normalize_range_keys
from mp_search.application.search.registry import SearchSchemaRegistry
from mp_search.application.search.service import RESERVED_OPTIONS, SearchService

__all__ = [
    "RESERVED_OPTIONS",
    "ConditionCompiler",
    "SearchSchemaRegistry",
    "SearchService",
    "is_blank",
    "normalize_range_keys",
]
