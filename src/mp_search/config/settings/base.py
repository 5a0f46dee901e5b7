"""Config settings – Settings base class and SearchSettings."""
from __future__ import annotations

import dataclasses
import logging

from mp_search.config.validation import InvalidSettingValueError
from mp_search.kernel.search.schema import DEFAULT_FINDER

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class SearchSettings(Settings):
    """Runtime knobs for registration, dispatch and logging.

    Loaded from ``MP_SEARCH_*`` environment variables, e.g.
    ``MP_SEARCH_LOG_LEVEL=DEBUG``.
    """

    _prefix: dataclasses.ClassVar[str] = "MP_SEARCH"

    log_level: str = "INFO"
    log_json: bool = True
    default_finder: str = DEFAULT_FINDER
    strict_reregistration: bool = False

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )
        if not self.default_finder.strip():
            raise InvalidSettingValueError("default_finder", self.default_finder, "must not be blank")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["SearchSettings", "Settings"]
