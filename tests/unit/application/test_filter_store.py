"""Unit tests – FilterStore encoding rules."""
from __future__ import annotations

from typing import Any

import pytest
import structlog

from kinopoisk_dev.application.query import filter_store
from kinopoisk_dev.application.query.filter_store import FilterStore, composite_key, format_bound
from kinopoisk_dev.kernel.vocabulary import FilterField, FilterOperator


class _RecordingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def debug(self, event: str, **kwargs: Any) -> None:
        self.events.append((event, kwargs))


# ---------------------------------------------------------------------------
# Range
# ---------------------------------------------------------------------------


class TestRangeEncoding:
    def test_pair_collapses_to_dash_string(self) -> None:
        store = FilterStore().add_filter("year", [2020, 2024], FilterOperator.RANGE)
        assert store.params == {"year": "2020-2024"}

    def test_tuple_pair_accepted(self) -> None:
        store = FilterStore().add_filter(FilterField.RATING_KP, (7, 10), "range")
        assert store.params == {"rating.kp": "7-10"}

    def test_integral_floats_drop_fraction(self) -> None:
        store = FilterStore().add_filter("rating.kp", [7.0, 8.5], FilterOperator.RANGE)
        assert store.params == {"rating.kp": "7-8.5"}

    def test_range_overwrites_bare_key(self) -> None:
        store = FilterStore()
        store.add_filter("year", [2000, 2001], FilterOperator.RANGE)
        store.add_filter("year", [2010, 2011], FilterOperator.RANGE)
        assert store.params == {"year": "2010-2011"}

    @pytest.mark.parametrize("value", [[2020], [1, 2, 3], 2020, "2020-2024", None, []])
    def test_wrong_arity_is_a_no_op(self, value: Any) -> None:
        store = FilterStore().add_filter("year", value, FilterOperator.RANGE)
        assert store.params == {}
        assert len(store) == 0

    def test_wrong_arity_is_logged_at_debug(self, monkeypatch: pytest.MonkeyPatch) -> None:
        recorder = _RecordingLogger()
        monkeypatch.setattr(filter_store, "logger", recorder)
        monkeypatch.setattr(structlog, "is_configured", lambda: True)
        FilterStore().add_filter("year", [2020], FilterOperator.RANGE)
        assert recorder.events == [("filter.range.dropped", {"field": "year", "value": [2020]})]

    def test_drop_is_silent_until_logging_is_configured(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        recorder = _RecordingLogger()
        monkeypatch.setattr(filter_store, "logger", recorder)
        monkeypatch.setattr(structlog, "is_configured", lambda: False)
        FilterStore().add_filter("year", "2020", FilterOperator.RANGE)
        assert recorder.events == []
        assert capsys.readouterr().out == ""

    def test_unconfigured_structlog_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        structlog.reset_defaults()
        FilterStore().add_filter("year", [1, 2, 3], FilterOperator.RANGE)
        assert capsys.readouterr().out == ""


# ---------------------------------------------------------------------------
# Include / exclude
# ---------------------------------------------------------------------------


class TestIncludeExcludeEncoding:
    def test_include_then_exclude_accumulates(self) -> None:
        store = FilterStore()
        store.add_filter("genres.name", ["драма", "комедия"], FilterOperator.INCLUDE)
        store.add_filter("genres.name", "ужасы", FilterOperator.EXCLUDE)
        assert store.params == {"genres.name": ["+драма", "+комедия", "!ужасы"]}

    def test_scalar_include(self) -> None:
        store = FilterStore().add_filter(FilterField.COUNTRIES, "США", FilterOperator.INCLUDE)
        assert store.params == {"countries.name": ["+США"]}

    def test_empty_list_materialises_key(self) -> None:
        store = FilterStore().add_filter("genres.name", [], FilterOperator.INCLUDE)
        assert store.params == {"genres.name": []}

    def test_prefix_match_covers_longer_paths(self) -> None:
        store = FilterStore().add_filter("genres.name.ru", ["драма"], FilterOperator.EXCLUDE)
        assert store.params == {"genres.name.ru": ["!драма"]}

    def test_scalar_previously_assigned_is_replaced(self) -> None:
        store = FilterStore().assign("genres.name", "драма")
        store.add_filter("genres.name", "комедия", FilterOperator.INCLUDE)
        assert store.params == {"genres.name": ["+комедия"]}

    def test_compiled_list_not_mutated_by_later_writes(self) -> None:
        store = FilterStore().add_filter("genres.name", ["драма"], FilterOperator.INCLUDE)
        snapshot = store.params
        store.add_filter("genres.name", ["комедия"], FilterOperator.INCLUDE)
        assert snapshot == {"genres.name": ["+драма"]}

    def test_other_field_falls_into_composite_key(self) -> None:
        store = FilterStore().add_filter("year", 2020, FilterOperator.INCLUDE)
        assert store.params == {"year.include": 2020}

    def test_other_field_exclude_overwrites(self) -> None:
        store = FilterStore()
        store.add_filter("type", "movie", FilterOperator.EXCLUDE)
        store.add_filter("type", "cartoon", FilterOperator.EXCLUDE)
        assert store.params == {"type.exclude": "cartoon"}


# ---------------------------------------------------------------------------
# Default composite key
# ---------------------------------------------------------------------------


class TestCompositeKeyEncoding:
    def test_default_operator_is_equals(self) -> None:
        assert FilterStore().add_filter("year", 2020).params == {"year.eq": 2020}

    def test_same_key_last_write_wins(self) -> None:
        store = FilterStore()
        store.add_filter("year", 2020, FilterOperator.GREATER_THAN)
        store.add_filter("year", 2021, FilterOperator.GREATER_THAN)
        assert store.params == {"year.gt": 2021}

    def test_different_operators_coexist(self) -> None:
        store = FilterStore()
        store.add_filter("rating.kp", 7, FilterOperator.GREATER_THAN_EQUALS)
        store.add_filter("rating.kp", 9, FilterOperator.LESS_THAN_EQUALS)
        assert store.params == {"rating.kp.gte": 7, "rating.kp.lte": 9}

    def test_unknown_operator_used_verbatim(self) -> None:
        assert FilterStore().add_filter("year", 5, "size").params == {"year.size": 5}

    def test_value_stored_verbatim(self) -> None:
        value = {"kp": 7}
        assert FilterStore().add_filter("rating", value).params["rating.eq"] is value

    def test_composite_key_helper(self) -> None:
        assert composite_key("genres.name", FilterOperator.ALL) == "genres.name.all"
        assert composite_key("year", "custom") == "year.custom"


# ---------------------------------------------------------------------------
# Bound formatting and the read surface
# ---------------------------------------------------------------------------


class TestFormatBound:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(7.0, "7"), (7.5, "7.5"), (2020, "2020"), (True, "1"), (False, ""), (None, ""), ("01.01.2020", "01.01.2020")],
    )
    def test_format(self, value: Any, expected: str) -> None:
        assert format_bound(value) == expected

    def test_bool_and_none_bounds_in_range(self) -> None:
        store = FilterStore().add_filter("x", [None, True], FilterOperator.RANGE)
        assert store.params == {"x": "-1"}


class TestReadSurface:
    def test_params_is_a_copy(self) -> None:
        store = FilterStore().add_filter("year", 2020)
        store.params["year.eq"] = 1999
        assert store.params == {"year.eq": 2020}

    def test_contains_and_get(self) -> None:
        store = FilterStore().assign(FilterField.IS_SERIES, True)
        assert "isSeries" in store
        assert FilterField.IS_SERIES in store
        assert store.get("isSeries") is True
        assert 42 not in store

    def test_clear_and_remove(self) -> None:
        store = FilterStore().add_filter("year", 2020).assign("isSeries", False)
        store.remove("isSeries")
        assert list(store) == ["year.eq"]
        store.clear()
        assert len(store) == 0
