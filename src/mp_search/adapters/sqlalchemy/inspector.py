"""SQLAlchemy adapter – SqlAlchemyColumnInspector."""
from __future__ import annotations

from typing import Any

from mp_search.adapters.sqlalchemy.session import _require_sqlalchemy


class SqlAlchemyColumnInspector:
    """Answers column-existence questions from a mapped class's mapper.

    Both attribute keys and database column names count as columns.
    """

    def __init__(self) -> None:
        _require_sqlalchemy()

    def record_type_name(self, record_type: Any) -> str:
        return getattr(record_type, "__name__", str(record_type))

    def has_column(self, record_type: Any, column: str) -> bool:
        from sqlalchemy import inspect

        mapper = inspect(record_type)
        if column in mapper.columns.keys():
            return True
        return any(c.name == column for c in mapper.columns)


__all__ = ["SqlAlchemyColumnInspector"]
