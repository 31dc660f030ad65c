"""Unit tests – SortCriterion and SortList."""
from __future__ import annotations

import dataclasses

import pytest

from kinopoisk_dev.application.query import SortCriterion, SortList
from kinopoisk_dev.kernel.vocabulary import SortDirection, SortField


class TestSortCriterion:
    def test_create_uses_field_default_direction(self) -> None:
        assert SortCriterion.create(SortField.RATING_KP).direction is SortDirection.DESC
        assert SortCriterion.create(SortField.NAME).direction is SortDirection.ASC

    def test_create_parses_direction_string(self) -> None:
        assert SortCriterion.create("year", "ASC") == SortCriterion(SortField.YEAR, SortDirection.ASC)

    def test_api_string(self) -> None:
        assert SortCriterion.descending(SortField.YEAR).to_api_string() == "-year"
        assert SortCriterion.ascending(SortField.YEAR).to_api_string() == "year"
        assert str(SortCriterion.descending("rating.kp")) == "-rating.kp"

    def test_reversed_returns_new_value(self) -> None:
        original = SortCriterion.ascending(SortField.NAME)
        flipped = original.reversed()
        assert flipped.direction is SortDirection.DESC
        assert original.direction is SortDirection.ASC
        assert flipped.has_same_field(original)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            SortCriterion.ascending(SortField.NAME).direction = SortDirection.DESC  # type: ignore[misc]

    def test_from_strings_unknown_field(self) -> None:
        assert SortCriterion.from_strings("nope", "asc") is None

    def test_dict_round_trip(self) -> None:
        criterion = SortCriterion.descending(SortField.VOTES_IMDB)
        assert criterion.to_dict() == {"field": "votes.imdb", "direction": "desc"}
        assert SortCriterion.from_dict(criterion.to_dict()) == criterion

    def test_from_dict_missing_field(self) -> None:
        assert SortCriterion.from_dict({"direction": "asc"}) is None

    def test_predicates(self) -> None:
        assert SortCriterion.ascending(SortField.RATING_IMDB).is_rating_sort
        assert SortCriterion.ascending(SortField.VOTES_KP).is_votes_sort
        assert SortCriterion.ascending(SortField.CREATED_AT).is_date_sort

    def test_short_string(self) -> None:
        assert SortCriterion.descending(SortField.YEAR).short_string() == "year↓"


class TestSortListOrdering:
    def test_sort_by_moves_existing_field_to_end(self) -> None:
        sort = SortList()
        sort.sort_by(SortField.NAME)
        sort.sort_by(SortField.YEAR)
        sort.sort_by(SortField.NAME, SortDirection.DESC)
        assert sort.get_sort_string() == "-year,-name"
        assert sort.sort_count() == 2

    def test_sort_by_uses_default_direction(self) -> None:
        sort = SortList().sort_by(SortField.YEAR)
        assert sort.get_sort_string() == "-year"

    def test_toggle_flips_in_place(self) -> None:
        sort = SortList()
        sort.sort_by(SortField.NAME, SortDirection.ASC)
        sort.sort_by(SortField.YEAR, SortDirection.DESC)
        sort.toggle_sort(SortField.NAME)
        assert sort.criteria == (
            SortCriterion(SortField.NAME, SortDirection.DESC),
            SortCriterion(SortField.YEAR, SortDirection.DESC),
        )

    def test_toggle_single_criterion(self) -> None:
        sort = SortList().sort_by(SortField.NAME, SortDirection.ASC).toggle_sort(SortField.NAME)
        assert sort.criteria == (SortCriterion(SortField.NAME, SortDirection.DESC),)

    def test_toggle_absent_field_appends_with_default(self) -> None:
        sort = SortList().sort_by(SortField.NAME).toggle_sort(SortField.RATING_KP)
        assert sort.get_sort_string() == "name,-rating.kp"

    def test_remove_and_clear(self) -> None:
        sort = SortList().sort_by(SortField.NAME).sort_by(SortField.YEAR)
        sort.remove_sort_by_field(SortField.NAME)
        sort.remove_sort_by_field(SortField.ID)
        assert sort.get_sort_string() == "-year"
        sort.clear_sort()
        assert sort.get_sort_string() is None
        assert not sort.has_any_sorting()

    def test_one_criterion_per_field(self) -> None:
        sort = SortList()
        for direction in ("asc", "desc", "asc"):
            sort.sort_by(SortField.YEAR, direction)
        assert len(sort) == 1
        assert sort.get_sort_direction(SortField.YEAR) is SortDirection.ASC


class TestSortListQueries:
    def test_empty_list(self) -> None:
        sort = SortList()
        assert sort.get_sort_string() is None
        assert sort.first() is None
        assert sort.last() is None
        assert sort.get_sort_direction(SortField.YEAR) is None

    def test_first_last_and_membership(self) -> None:
        sort = SortList().sort_by(SortField.NAME).sort_by(SortField.YEAR)
        assert sort.first().field is SortField.NAME  # type: ignore[union-attr]
        assert sort.last().field is SortField.YEAR  # type: ignore[union-attr]
        assert sort.has_sort_by("year")
        assert SortField.NAME in sort
        assert not sort.has_sort_by("no-such-field")

    def test_set_sort_criteria_replaces(self) -> None:
        sort = SortList().sort_by(SortField.NAME)
        sort.set_sort_criteria([SortCriterion.descending(SortField.VOTES_KP), SortCriterion.ascending(SortField.ID)])
        assert sort.get_sort_string() == "-votes.kp,id"

    def test_add_multiple_sort_accepts_strings_and_dicts(self) -> None:
        sort = SortList().add_multiple_sort(
            ["year:asc", "rating.kp", {"field": "name", "direction": "desc"}, "bogus:desc"]
        )
        assert sort.get_sort_string() == "year,-rating.kp,-name"

    def test_export_import(self) -> None:
        sort = SortList().sort_by(SortField.RATING_KP).sort_by(SortField.NAME)
        exported = sort.export_criteria()
        assert exported == [
            {"field": "rating.kp", "direction": "desc"},
            {"field": "name", "direction": "asc"},
        ]
        restored = SortList().sort_by(SortField.ID).import_criteria(exported + [{"field": "??"}])
        assert restored.criteria == sort.criteria
