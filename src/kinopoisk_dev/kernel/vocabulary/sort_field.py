"""Vocabulary – SortField.

Sortable attributes of catalog entities. Each field knows its data type
(``number``, ``date`` or ``string``) and the direction most callers want
by default: best ratings, most votes and newest dates first; top
positions, lengths and names in ascending order.
"""
from __future__ import annotations

from enum import Enum

from kinopoisk_dev.kernel.vocabulary.sort_direction import SortDirection


class SortField(str, Enum):
    ID = "id"
    NAME = "name"
    EN_NAME = "enName"
    ALTERNATIVE_NAME = "alternativeName"
    YEAR = "year"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    RATING_KP = "rating.kp"
    RATING_IMDB = "rating.imdb"
    RATING_TMDB = "rating.tmdb"
    RATING_FILM_CRITICS = "rating.filmCritics"
    RATING_RUSSIAN_FILM_CRITICS = "rating.russianFilmCritics"
    RATING_AWAIT = "rating.await"

    VOTES_KP = "votes.kp"
    VOTES_IMDB = "votes.imdb"
    VOTES_TMDB = "votes.tmdb"
    VOTES_FILM_CRITICS = "votes.filmCritics"
    VOTES_RUSSIAN_FILM_CRITICS = "votes.russianFilmCritics"
    VOTES_AWAIT = "votes.await"

    MOVIE_LENGTH = "movieLength"
    SERIES_LENGTH = "seriesLength"
    TOTAL_SERIES_LENGTH = "totalSeriesLength"
    AGE_RATING = "ageRating"

    TOP_10 = "top10"
    TOP_250 = "top250"

    PREMIERE_WORLD = "premiere.world"
    PREMIERE_RUSSIA = "premiere.russia"
    PREMIERE_USA = "premiere.usa"

    TYPE = "type"
    TITLE = "title"

    @property
    def data_type(self) -> str:
        return _DATA_TYPES.get(self, "string")

    @property
    def default_direction(self) -> SortDirection:
        return _DEFAULT_DIRECTIONS.get(self, SortDirection.DESC)

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_rating_field(self) -> bool:
        return self.value.startswith("rating.")

    @property
    def is_votes_field(self) -> bool:
        return self.value.startswith("votes.")

    @property
    def is_date_field(self) -> bool:
        return self.data_type == "date"

    @property
    def is_numeric_field(self) -> bool:
        return self.data_type == "number"

    @classmethod
    def rating_fields(cls) -> list["SortField"]:
        return [f for f in cls if f.is_rating_field]

    @classmethod
    def votes_fields(cls) -> list["SortField"]:
        return [f for f in cls if f.is_votes_field]


_NUMERIC = {
    SortField.ID, SortField.YEAR, SortField.MOVIE_LENGTH, SortField.SERIES_LENGTH,
    SortField.TOTAL_SERIES_LENGTH, SortField.AGE_RATING, SortField.TOP_10, SortField.TOP_250,
    *(f for f in SortField if f.value.startswith(("rating.", "votes."))),
}
_DATES = {
    SortField.CREATED_AT, SortField.UPDATED_AT,
    SortField.PREMIERE_WORLD, SortField.PREMIERE_RUSSIA, SortField.PREMIERE_USA,
}
_DATA_TYPES: dict[SortField, str] = {
    **{f: "number" for f in _NUMERIC},
    **{f: "date" for f in _DATES},
}

# Everything not listed here sorts descending.
_DEFAULT_DIRECTIONS: dict[SortField, SortDirection] = {
    f: SortDirection.ASC
    for f in (
        SortField.TOP_10, SortField.TOP_250, SortField.MOVIE_LENGTH, SortField.SERIES_LENGTH,
        SortField.TOTAL_SERIES_LENGTH, SortField.AGE_RATING,
        SortField.NAME, SortField.EN_NAME, SortField.ALTERNATIVE_NAME,
    )
}

_DESCRIPTIONS: dict[SortField, str] = {
    SortField.ID: "ID",
    SortField.NAME: "Name (Russian)",
    SortField.EN_NAME: "Name (English)",
    SortField.ALTERNATIVE_NAME: "Alternative name",
    SortField.YEAR: "Release year",
    SortField.CREATED_AT: "Created at",
    SortField.UPDATED_AT: "Updated at",
    SortField.RATING_KP: "Kinopoisk rating",
    SortField.RATING_IMDB: "IMDb rating",
    SortField.RATING_TMDB: "TMDB rating",
    SortField.RATING_FILM_CRITICS: "Film critics rating",
    SortField.RATING_RUSSIAN_FILM_CRITICS: "Russian film critics rating",
    SortField.RATING_AWAIT: "Await rating",
    SortField.VOTES_KP: "Kinopoisk votes",
    SortField.VOTES_IMDB: "IMDb votes",
    SortField.VOTES_TMDB: "TMDB votes",
    SortField.VOTES_FILM_CRITICS: "Film critics votes",
    SortField.VOTES_RUSSIAN_FILM_CRITICS: "Russian film critics votes",
    SortField.VOTES_AWAIT: "Await votes",
    SortField.MOVIE_LENGTH: "Movie length",
    SortField.SERIES_LENGTH: "Episode length",
    SortField.TOTAL_SERIES_LENGTH: "Total series length",
    SortField.AGE_RATING: "Age rating",
    SortField.TOP_10: "Top 10 position",
    SortField.TOP_250: "Top 250 position",
    SortField.PREMIERE_WORLD: "World premiere date",
    SortField.PREMIERE_RUSSIA: "Russian premiere date",
    SortField.PREMIERE_USA: "US premiere date",
    SortField.TYPE: "Type",
    SortField.TITLE: "Title",
}


__all__ = ["SortField"]
