"""SQLAlchemy adapter – SqlAlchemySearchExecutor.

Runs compiled ``(expression, *params)`` conditions through an async session.
Each ``?`` becomes a named bind; a list parameter becomes one bind per item,
so ``(area) IN (?)`` with ``[1, 2, 3]`` renders
``(area) IN (:p0_0, :p0_1, :p0_2)``.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mp_search.adapters.sqlalchemy.session import _require_sqlalchemy
from mp_search.kernel.search.condition import PLACEHOLDER


def to_text_clause(conditions: Sequence[Any]) -> Any:
    """Convert ``(expression, *params)`` into a bound ``sqlalchemy.text`` clause."""
    from sqlalchemy import bindparam, text

    expression, *params = conditions
    pieces = str(expression).split(PLACEHOLDER)
    if len(pieces) - 1 != len(params):
        raise ValueError(
            f"Condition has {len(pieces) - 1} placeholders but {len(params)} parameters"
        )

    sql = [pieces[0].replace(":", "\\:")]
    binds = []
    for index, (value, piece) in enumerate(zip(params, pieces[1:])):
        if isinstance(value, (list, tuple, set, frozenset)):
            names = [f"p{index}_{n}" for n in range(len(value))]
            binds.extend(bindparam(name, item) for name, item in zip(names, value))
            sql.append(", ".join(f":{name}" for name in names) or "NULL")
        else:
            binds.append(bindparam(f"p{index}", value))
            sql.append(f":p{index}")
        sql.append(piece.replace(":", "\\:"))
    return text("".join(sql)).bindparams(*binds)


class SqlAlchemySearchExecutor:
    """Finder operations over an ``AsyncSession``.

    Supported passthrough options: ``limit``, ``offset``, ``with_for_update``.
    """

    def __init__(self, session: Any) -> None:
        _require_sqlalchemy()
        self._session = session

    def build_statement(
        self,
        record_type: Any,
        *,
        conditions: Sequence[Any] | None = None,
        order: str | None = None,
        include: Any = None,
        limit: int | None = None,
        offset: int | None = None,
        with_for_update: bool = False,
    ) -> Any:
        from sqlalchemy import select, text

        stmt = select(record_type)
        if conditions:
            stmt = stmt.where(to_text_clause(conditions))
        if order:
            stmt = stmt.order_by(text(order))
        for loader in self._loader_options(record_type, include):
            stmt = stmt.options(loader)
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        if with_for_update:
            stmt = stmt.with_for_update()
        return stmt

    @staticmethod
    def _loader_options(record_type: Any, include: Any) -> list[Any]:
        """Relationship names become ``selectinload``; loader options pass through."""
        from sqlalchemy.orm import selectinload

        if include is None:
            return []
        if isinstance(include, (str, bytes)) or not isinstance(include, Sequence):
            include = [include]
        return [
            selectinload(getattr(record_type, item)) if isinstance(item, str) else item
            for item in include
        ]

    async def find_all(self, record_type: Any, **kwargs: Any) -> list[Any]:
        result = await self._session.execute(self.build_statement(record_type, **kwargs))
        return list(result.scalars().all())

    async def find_first(self, record_type: Any, **kwargs: Any) -> Any | None:
        kwargs["limit"] = 1
        result = await self._session.execute(self.build_statement(record_type, **kwargs))
        return result.scalars().first()


__all__ = ["SqlAlchemySearchExecutor", "to_text_clause"]
