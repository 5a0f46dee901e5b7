"""Unit tests for SearchService (compile + dispatch)."""

from __future__ import annotations

import asyncio

import pytest

from mp_search.application.search import SearchSchemaRegistry, SearchService
from mp_search.kernel.errors import (
    ArgumentConflictError,
    FinderNotFoundError,
    InvalidRangeValueError,
    SchemaNotRegisteredError,
    UnknownSearchColumnError,
)
from mp_search.kernel.search import FindRequest
from mp_search.testing.fakes import InMemorySearchExecutor, StaticColumnInspector


class Person:
    pass


PEOPLE = [{"id": 1, "name": "Taro"}, {"id": 2, "name": "Jiro"}]


def _service(results=None, **register_kwargs) -> tuple[SearchService, InMemorySearchExecutor]:
    inspector = StaticColumnInspector({Person: ["id", "name", "sex", "age", "number", "area"]})
    registry = SearchSchemaRegistry(inspector)
    registry.register(
        Person,
        {
            "name": "match_partial",
            "sex": "match_full",
            "age": "opened_scope",
            "number": "closed_scope",
            "area": "including",
            "western_male": "match_full",
        },
        aliases={"western_male": "area = 1 AND sex = 'male'"},
        **{"order": ["id", "ASC"], **register_kwargs},
    )
    executor = InMemorySearchExecutor(results)
    return SearchService(registry, executor), executor


class TestSearchDispatch:
    def test_returns_executor_result_unchanged(self) -> None:
        service, _ = _service(PEOPLE)
        assert asyncio.run(service.search(Person)) == PEOPLE

    def test_no_criteria_matches_all_with_default_order(self) -> None:
        service, executor = _service()
        asyncio.run(service.search(Person))
        call = executor.last_call
        assert call.finder == "find_all"
        assert call.record_type is Person
        assert call.conditions is None
        assert call.order == "id ASC"
        assert call.include is None
        assert call.options == {}

    def test_conditions_tuple(self) -> None:
        service, executor = _service()
        asyncio.run(service.search(Person, {"name": "Tom", "age_from": 22}))
        assert executor.last_call.conditions == ("((name) LIKE ?) AND (? <= (age))", "%Tom%", 22)

    def test_closed_range_single_bound(self) -> None:
        service, executor = _service()
        asyncio.run(service.search(Person, {"number_from": 5}))
        assert executor.last_call.conditions == ("(? <= (number)) AND ((number) <= ?)", 5, 5)

    def test_including(self) -> None:
        service, executor = _service()
        asyncio.run(service.search(Person, {"area": [1, 2, 3]}))
        assert executor.last_call.conditions == ("((area) IN (?))", [1, 2, 3])

    def test_additional_conditions_only(self) -> None:
        service, executor = _service()
        asyncio.run(service.search(Person, {}, additional_conditions=["sex = ?", "male"]))
        assert executor.last_call.conditions == ("(sex = ?)", "male")

    def test_order_override(self) -> None:
        service, executor = _service()
        asyncio.run(service.search(Person, order=["name", "DESC"]))
        assert executor.last_call.order == "name DESC"

    def test_empty_order_override_gives_no_order(self) -> None:
        service, executor = _service()
        asyncio.run(service.search(Person, order=[]))
        assert executor.last_call.order is None

    def test_string_default_order(self) -> None:
        service, executor = _service(order="id DESC")
        asyncio.run(service.search(Person))
        assert executor.last_call.order == "id DESC"

    def test_string_order_override(self) -> None:
        service, executor = _service()
        asyncio.run(service.search(Person, order="name ASC"))
        assert executor.last_call.order == "name ASC"

    def test_no_default_order(self) -> None:
        service, executor = _service(order=None)
        asyncio.run(service.search(Person))
        assert executor.last_call.order is None

    def test_eager_load_passed_through(self) -> None:
        service, executor = _service(eager_load=["friends"])
        asyncio.run(service.search(Person))
        assert executor.last_call.include == ["friends"]

    def test_passthrough_options(self) -> None:
        service, executor = _service()
        asyncio.run(service.search(Person, {"sex": "female"}, limit=10, offset=20))
        assert executor.last_call.options == {"limit": 10, "offset": 20}

    def test_registered_finder_is_used(self) -> None:
        service, executor = _service(PEOPLE, finder="find_first")
        assert asyncio.run(service.search(Person)) == PEOPLE[0]
        assert executor.last_call.finder == "find_first"


class TestSearchErrors:
    @pytest.mark.parametrize("key", ["conditions", "include"])
    def test_reserved_option_rejected_before_compilation(self, key: str) -> None:
        service, executor = _service()
        with pytest.raises(ArgumentConflictError) as exc_info:
            # the unknown column would fail compilation if it were reached
            asyncio.run(service.search(Person, {"unknownField": 1}, **{key: "x"}))
        assert exc_info.value.key == key
        assert executor.calls == []

    def test_unknown_column(self) -> None:
        service, executor = _service()
        with pytest.raises(UnknownSearchColumnError):
            asyncio.run(service.search(Person, {"unknownField": 1}))
        assert executor.calls == []

    def test_invalid_range_value(self) -> None:
        service, executor = _service()
        with pytest.raises(InvalidRangeValueError):
            asyncio.run(service.search(Person, {"age": 3}))
        assert executor.calls == []

    def test_unknown_finder(self) -> None:
        service, executor = _service(finder="find_everything")
        with pytest.raises(FinderNotFoundError) as exc_info:
            asyncio.run(service.search(Person, {"sex": "male"}))
        assert exc_info.value.finder == "find_everything"
        assert exc_info.value.executor == "InMemorySearchExecutor"
        assert exc_info.value.code == "finder_not_found"
        assert executor.calls == []

    def test_range_suffix_on_match_column(self) -> None:
        service, executor = _service()
        with pytest.raises(UnknownSearchColumnError):
            asyncio.run(service.search(Person, {"sex_from": "male"}))
        assert executor.calls == []

    def test_unregistered_type(self) -> None:
        class Other:
            pass

        service, _ = _service()
        with pytest.raises(SchemaNotRegisteredError):
            asyncio.run(service.search(Other))


class TestCompileOnly:
    def test_compile_returns_find_request(self) -> None:
        service, executor = _service(eager_load="friends")
        request = service.compile(Person, {"western_male": "true"}, limit=5)
        assert request == FindRequest(
            conditions=("((area = 1 AND sex = 'male') = ?)", "true"),
            order="id ASC",
            include="friends",
            options={"limit": 5},
        )
        assert executor.calls == []

    def test_search_column_names(self) -> None:
        service, _ = _service()
        assert set(service.search_column_names(Person)) == {
            "name",
            "sex",
            "age_from",
            "age_to",
            "number_from",
            "number_to",
            "area",
            "western_male",
        }
