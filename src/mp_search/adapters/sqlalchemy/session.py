"""SQLAlchemy adapter – import guard."""
from __future__ import annotations


def _require_sqlalchemy() -> None:
    try:
        import sqlalchemy  # noqa: F401
    except ImportError as exc:
        raise ImportError("Install 'mp-search[sqlalchemy]' to use the SQLAlchemy adapter") from exc


__all__ = ["_require_sqlalchemy"]
