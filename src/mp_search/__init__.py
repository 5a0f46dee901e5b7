"""
mp_search – declarative search schemas compiled into parameterized conditions.

Import path convention::

    from mp_search.kernel.search import SearchStrategy
    from mp_search.application.search import SearchSchemaRegistry, SearchService
    from mp_search.adapters.sqlalchemy import SqlAlchemySearchExecutor
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
