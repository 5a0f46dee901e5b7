"""Testing fakes – in-memory doubles for search ports."""
from mp_search.testing.fakes.executor import FinderCall, InMemorySearchExecutor, StaticColumnInspector

__all__ = ["FinderCall", "InMemorySearchExecutor", "StaticColumnInspector"]
