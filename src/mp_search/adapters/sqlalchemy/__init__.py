"""SQLAlchemy adapter – column inspection and finder execution."""
from mp_search.adapters.sqlalchemy.executor import SqlAlchemySearchExecutor, to_text_clause
from mp_search.adapters.sqlalchemy.inspector import SqlAlchemyColumnInspector

__all__ = ["SqlAlchemyColumnInspector", "SqlAlchemySearchExecutor", "to_text_clause"]
