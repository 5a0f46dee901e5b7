"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── RegistrationError            (registration.py)
    │   ├── InvalidStrategyError
    │   └── UnknownColumnError
    └── SearchError                  (query.py)
        ├── ArgumentConflictError
        ├── UnknownSearchColumnError
        ├── InvalidRangeValueError
        ├── FinderNotFoundError
        └── SchemaNotRegisteredError

Configuration errors live in :mod:`mp_search.config.validation`.
"""

from mp_search.kernel.errors.base import BaseError
from mp_search.kernel.errors.query import (
    ArgumentConflictError,
    FinderNotFoundError,
    InvalidRangeValueError,
    SchemaNotRegisteredError,
    SearchError,
    UnknownSearchColumnError,
)
from mp_search.kernel.errors.registration import (
    InvalidStrategyError,
    RegistrationError,
    UnknownColumnError,
)

__all__ = [
    "ArgumentConflictError",
    "BaseError",
    "FinderNotFoundError",
    "InvalidRangeValueError",
    "InvalidStrategyError",
    "RegistrationError",
    "SchemaNotRegisteredError",
    "SearchError",
    "UnknownColumnError",
    "UnknownSearchColumnError",
]
