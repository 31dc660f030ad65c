"""Unit tests – filter/sort vocabulary."""
from __future__ import annotations

import dataclasses

import pytest

from kinopoisk_dev.kernel.vocabulary import (
    FieldMetadata,
    FieldType,
    FilterField,
    FilterOperator,
    HttpStatusCode,
    MovieType,
    PersonProfession,
    SortDirection,
    SortField,
    base_field,
    default_operator_for,
    field_metadata,
    field_type_of,
    sub_field,
    supports_include_exclude,
    supports_range,
)
from kinopoisk_dev.kernel.vocabulary.filter_field import _known_metadata


# ---------------------------------------------------------------------------
# Field classification
# ---------------------------------------------------------------------------


class TestFieldClassification:
    @pytest.mark.parametrize(
        ("field", "expected"),
        [
            (FilterField.YEAR, FieldType.NUMBER),
            (FilterField.RATING_KP, FieldType.NUMBER),
            (FilterField.IS_SERIES, FieldType.BOOLEAN),
            (FilterField.NAME, FieldType.TEXT),
            (FilterField.CREATED_AT, FieldType.DATE),
            (FilterField.GENRES, FieldType.INCLUDE_EXCLUDE),
            (FilterField.FEES, FieldType.OBJECT),
            (FilterField.STATUS, FieldType.STRING),
        ],
    )
    def test_field_type(self, field: FilterField, expected: FieldType) -> None:
        assert field.field_type is expected

    def test_raw_path_of_known_field_is_classified_like_the_member(self) -> None:
        assert field_type_of("votes.imdb") is FieldType.NUMBER

    def test_unknown_path_degrades_to_string(self) -> None:
        assert field_type_of("no.such.field") is FieldType.STRING
        assert supports_range("no.such.field") is False

    def test_range_support(self) -> None:
        assert FilterField.YEAR.supports_range is True
        assert FilterField.PREMIERE_WORLD.supports_range is True
        assert FilterField.NAME.supports_range is False

    def test_include_exclude_recognised_by_prefix(self) -> None:
        assert supports_include_exclude("genres.name") is True
        assert supports_include_exclude(FilterField.COUNTRIES) is True
        assert supports_include_exclude("genres.name.extra") is True
        assert supports_include_exclude("year") is False


class TestDefaultOperator:
    def test_include_exclude_types_default_to_in(self) -> None:
        assert default_operator_for(FilterField.GENRES) is FilterOperator.IN

    def test_text_defaults_to_regex(self) -> None:
        assert default_operator_for(FilterField.DESCRIPTION) is FilterOperator.REGEX

    def test_numeric_and_date_default_to_equals(self) -> None:
        assert default_operator_for(FilterField.YEAR) is FilterOperator.EQUALS
        assert default_operator_for(FilterField.UPDATED_AT) is FilterOperator.EQUALS

    def test_unknown_classification_defaults_to_equals(self) -> None:
        assert FilterOperator.default_for_field_type("nonsense") is FilterOperator.EQUALS


class TestPathDecomposition:
    def test_base_and_sub_field(self) -> None:
        assert base_field("rating.kp") == "rating"
        assert sub_field("rating.kp") == "kp"

    def test_splits_on_first_dot_only(self) -> None:
        assert base_field("a.b.c") == "a"
        assert sub_field("a.b.c") == "b.c"

    def test_no_dot(self) -> None:
        assert base_field("year") == "year"
        assert sub_field("year") is None

    def test_member_properties(self) -> None:
        assert FilterField.VOTES_IMDB.base_field == "votes"
        assert FilterField.VOTES_IMDB.sub_field == "imdb"


class TestFieldMetadata:
    def test_memoised(self) -> None:
        assert field_metadata(FilterField.YEAR) is field_metadata(FilterField.YEAR)

    def test_known_path_string_shares_member_entry(self) -> None:
        assert field_metadata("year") is field_metadata(FilterField.YEAR)

    def test_unknown_paths_do_not_grow_cache(self) -> None:
        field_metadata(FilterField.YEAR)
        before = _known_metadata.cache_info().currsize
        for i in range(50):
            meta = field_metadata(f"custom.path{i}")
            assert meta.field_type is FieldType.STRING
        assert _known_metadata.cache_info().currsize == before
        assert before <= len(FilterField)

    def test_immutable(self) -> None:
        meta = FilterField.YEAR.metadata
        with pytest.raises(dataclasses.FrozenInstanceError):
            meta.supports_range = False  # type: ignore[misc]

    def test_sort_direction_taken_from_sort_vocabulary(self) -> None:
        assert FilterField.RATING_KP.metadata.default_sort_direction is SortDirection.DESC
        assert FilterField.TOP_250.metadata.default_sort_direction is SortDirection.ASC
        assert FilterField.GENRES.metadata.default_sort_direction is None

    def test_metadata_shape(self) -> None:
        assert field_metadata("genres.name") == FieldMetadata(
            field_type=FieldType.INCLUDE_EXCLUDE,
            supports_range=False,
            supports_include_exclude=True,
            default_operator=FilterOperator.IN,
            default_sort_direction=None,
        )


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class TestFilterOperator:
    def test_prefixes(self) -> None:
        assert FilterOperator.INCLUDE.prefix == "+"
        assert FilterOperator.EXCLUDE.prefix == "!"
        assert FilterOperator.EQUALS.prefix is None

    def test_coerce_known_string(self) -> None:
        assert FilterOperator.coerce("gte") is FilterOperator.GREATER_THAN_EQUALS

    def test_coerce_unknown_string_passes_through(self) -> None:
        assert FilterOperator.coerce("size") == "size"

    def test_flags(self) -> None:
        assert FilterOperator.RANGE.is_range
        assert FilterOperator.EXCLUDE.is_include_exclude
        assert not FilterOperator.IN.is_include_exclude


# ---------------------------------------------------------------------------
# Sort vocabulary
# ---------------------------------------------------------------------------


class TestSortDirection:
    def test_reverse(self) -> None:
        assert SortDirection.ASC.reverse() is SortDirection.DESC
        assert SortDirection.DESC.reverse() is SortDirection.ASC

    def test_from_string_is_lenient(self) -> None:
        assert SortDirection.from_string(" DESC ") is SortDirection.DESC
        assert SortDirection.from_string("sideways") is SortDirection.ASC
        assert SortDirection.from_string("sideways", SortDirection.DESC) is SortDirection.DESC

    def test_symbols(self) -> None:
        assert SortDirection.ASC.symbol == "↑"
        assert SortDirection.DESC.symbol == "↓"


class TestSortField:
    def test_default_directions(self) -> None:
        assert SortField.RATING_KP.default_direction is SortDirection.DESC
        assert SortField.YEAR.default_direction is SortDirection.DESC
        assert SortField.NAME.default_direction is SortDirection.ASC
        assert SortField.TOP_10.default_direction is SortDirection.ASC
        assert SortField.TITLE.default_direction is SortDirection.DESC

    def test_data_types(self) -> None:
        assert SortField.VOTES_KP.is_numeric_field
        assert SortField.PREMIERE_USA.is_date_field
        assert SortField.NAME.data_type == "string"

    def test_rating_and_votes_groups(self) -> None:
        assert len(SortField.rating_fields()) == 6
        assert all(f.is_votes_field for f in SortField.votes_fields())

    def test_every_field_is_described(self) -> None:
        assert all(f.description for f in SortField)


class TestCatalog:
    def test_series_types(self) -> None:
        assert MovieType.TV_SERIES.is_series
        assert not MovieType.MOVIE.is_series

    def test_http_status(self) -> None:
        assert HttpStatusCode.NOT_FOUND.is_error
        assert not HttpStatusCode.OK.is_error


class TestPersonProfession:
    def test_russian_names(self) -> None:
        assert PersonProfession.WRITER.russian_name == "сценарист"
        assert PersonProfession.ACTOR.russian_plural_name == "актеры"

    def test_from_russian_name_folds_case_and_yo(self) -> None:
        assert PersonProfession.from_russian_name(" Актёры ") is PersonProfession.ACTOR
        assert PersonProfession.from_russian_name("режиссер") is PersonProfession.DIRECTOR

    def test_unknown_name_is_other(self) -> None:
        assert PersonProfession.from_russian_name("каскадёр") is PersonProfession.OTHER

    def test_every_member_has_names(self) -> None:
        for member in PersonProfession:
            assert PersonProfession.from_russian_name(member.russian_name) is member
