"""Unit tests for structlog configuration and search log events."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from mp_search.application.search import SearchSchemaRegistry
from mp_search.config import SearchSettings
from mp_search.observability.logging import configure_logging, get_logger
from mp_search.testing.fakes import StaticColumnInspector


class Person:
    pass


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestConfigureLogging:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(SearchSettings(log_level="DEBUG"))
        get_logger("mp_search.test").info("hello", answer=42)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "hello"
        assert payload["answer"] == 42
        assert payload["level"] == "info"
        assert payload["logger"] == "mp_search.test"

    def test_root_level_from_settings(self) -> None:
        configure_logging(SearchSettings(log_level="WARNING", log_json=False))
        assert logging.getLogger().level == logging.WARNING

    def test_bound_values(self) -> None:
        with capture_logs() as logs:
            get_logger("x", record_type="Person").info("bound")
        assert logs[0]["record_type"] == "Person"


class TestRegistryEvents:
    def _registry(self, **settings) -> SearchSchemaRegistry:
        return SearchSchemaRegistry(StaticColumnInspector({Person: ["name"]}), SearchSettings(**settings))

    def test_registration_logged(self) -> None:
        registry = self._registry()
        with capture_logs() as logs:
            registry.register(Person, {"name": "match_full"})
        assert logs == [
            {
                "event": "search_schema_registered",
                "log_level": "info",
                "record_type": "Person",
                "columns": ["name"],
                "finder": "find_all",
            }
        ]

    def test_conflicting_reregistration_warns(self) -> None:
        registry = self._registry()
        registry.register(Person, {"name": "match_full"})
        with capture_logs() as logs:
            registry.register(Person, {"name": "match_partial"})
        assert logs[0]["event"] == "search_schema_reregistered"
        assert logs[0]["log_level"] == "warning"
