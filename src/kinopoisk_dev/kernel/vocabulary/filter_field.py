"""Vocabulary – FilterField, FieldMetadata and path helpers.

Every helper accepts either a :class:`FilterField` member or a raw dotted
path.  Raw paths naming a known field are classified like that field;
anything else degrades to :attr:`FieldType.STRING`.  Nothing here raises:
strict validation of field names is left to callers.
"""
from __future__ import annotations

import dataclasses
import functools
from enum import Enum

from kinopoisk_dev.kernel.vocabulary.field_type import FieldType
from kinopoisk_dev.kernel.vocabulary.filter_operator import FilterOperator
from kinopoisk_dev.kernel.vocabulary.sort_direction import SortDirection
from kinopoisk_dev.kernel.vocabulary.sort_field import SortField

# Path prefixes of the fields that accept ``+value`` / ``!value`` lists.
INCLUDE_EXCLUDE_PREFIXES: tuple[str, ...] = ("genres.name", "countries.name")


class FilterField(str, Enum):
    ID = "id"
    EXTERNAL_ID = "externalId"
    NAME = "name"
    EN_NAME = "enName"
    ALTERNATIVE_NAME = "alternativeName"
    NAMES = "names.name"
    DESCRIPTION = "description"
    SHORT_DESCRIPTION = "shortDescription"
    SLOGAN = "slogan"

    TYPE = "type"
    TYPE_NUMBER = "typeNumber"
    IS_SERIES = "isSeries"
    STATUS = "status"

    YEAR = "year"
    RELEASE_YEARS = "releaseYears"
    UPDATED_AT = "updatedAt"
    CREATED_AT = "createdAt"

    RATING_KP = "rating.kp"
    RATING_IMDB = "rating.imdb"
    RATING_TMDB = "rating.tmdb"
    RATING_FILM_CRITICS = "rating.filmCritics"
    RATING_RUSSIAN_FILM_CRITICS = "rating.russianFilmCritics"
    RATING_AWAIT = "rating.await"
    RATING_MPAA = "ratingMpaa"
    AGE_RATING = "ageRating"

    VOTES_KP = "votes.kp"
    VOTES_IMDB = "votes.imdb"
    VOTES_TMDB = "votes.tmdb"
    VOTES_FILM_CRITICS = "votes.filmCritics"
    VOTES_RUSSIAN_FILM_CRITICS = "votes.russianFilmCritics"
    VOTES_AWAIT = "votes.await"

    MOVIE_LENGTH = "movieLength"
    SERIES_LENGTH = "seriesLength"
    TOTAL_SERIES_LENGTH = "totalSeriesLength"

    GENRES = "genres.name"
    COUNTRIES = "countries.name"

    POSTER = "poster"
    BACKDROP = "backdrop"
    LOGO = "logo"

    TICKETS_ON_SALE = "ticketsOnSale"
    VIDEOS = "videos"
    NETWORKS = "networks"
    PERSONS = "persons"
    PERSONS_NAME = "persons.name"
    PERSONS_ID = "persons.id"
    PERSONS_PROFESSION = "persons.profession"
    FACTS = "facts"
    FEES = "fees"
    PREMIERE = "premiere"
    PREMIERE_WORLD = "premiere.world"
    PREMIERE_RUSSIA = "premiere.russia"
    PREMIERE_USA = "premiere.usa"
    SIMILAR_MOVIES = "similarMovies"
    SEQUELS_AND_PREQUELS = "sequelsAndPrequels"
    WATCHABILITY = "watchability"
    LISTS = "lists"
    TOP_10 = "top10"
    TOP_250 = "top250"
    SEASONS_INFO = "seasonsInfo"
    BUDGET = "budget"
    AUDIENCE = "audience"

    @property
    def metadata(self) -> "FieldMetadata":
        return field_metadata(self)

    @property
    def field_type(self) -> FieldType:
        return self.metadata.field_type

    @property
    def supports_range(self) -> bool:
        return self.metadata.supports_range

    @property
    def supports_include_exclude(self) -> bool:
        return self.metadata.supports_include_exclude

    @property
    def default_operator(self) -> FilterOperator:
        return self.metadata.default_operator

    @property
    def base_field(self) -> str:
        return base_field(self.value)

    @property
    def sub_field(self) -> str | None:
        return sub_field(self.value)


_F = FilterField

_FIELD_TYPES: dict[FilterField, FieldType] = {
    **dict.fromkeys(
        (
            _F.ID, _F.TYPE_NUMBER, _F.YEAR,
            _F.RATING_KP, _F.RATING_IMDB, _F.RATING_TMDB,
            _F.RATING_FILM_CRITICS, _F.RATING_RUSSIAN_FILM_CRITICS, _F.RATING_AWAIT,
            _F.AGE_RATING, _F.VOTES_KP, _F.VOTES_IMDB, _F.VOTES_TMDB,
            _F.VOTES_FILM_CRITICS, _F.VOTES_RUSSIAN_FILM_CRITICS, _F.VOTES_AWAIT,
            _F.MOVIE_LENGTH, _F.SERIES_LENGTH, _F.TOTAL_SERIES_LENGTH,
            _F.TOP_10, _F.TOP_250, _F.PERSONS_ID,
        ),
        FieldType.NUMBER,
    ),
    **dict.fromkeys((_F.IS_SERIES, _F.TICKETS_ON_SALE), FieldType.BOOLEAN),
    **dict.fromkeys(
        (
            _F.NAME, _F.EN_NAME, _F.ALTERNATIVE_NAME, _F.NAMES,
            _F.DESCRIPTION, _F.SHORT_DESCRIPTION, _F.SLOGAN, _F.PERSONS_NAME,
        ),
        FieldType.TEXT,
    ),
    **dict.fromkeys(
        (_F.UPDATED_AT, _F.CREATED_AT, _F.PREMIERE_WORLD, _F.PREMIERE_RUSSIA, _F.PREMIERE_USA),
        FieldType.DATE,
    ),
    **dict.fromkeys((_F.GENRES, _F.COUNTRIES), FieldType.INCLUDE_EXCLUDE),
    **dict.fromkeys(
        (
            _F.EXTERNAL_ID, _F.RELEASE_YEARS, _F.POSTER, _F.BACKDROP, _F.LOGO,
            _F.VIDEOS, _F.NETWORKS, _F.PERSONS, _F.FACTS, _F.FEES, _F.PREMIERE,
            _F.SIMILAR_MOVIES, _F.SEQUELS_AND_PREQUELS, _F.WATCHABILITY, _F.LISTS,
            _F.SEASONS_INFO, _F.BUDGET, _F.AUDIENCE,
        ),
        FieldType.OBJECT,
    ),
}


@dataclasses.dataclass(frozen=True, slots=True)
class FieldMetadata:
    """Static description of a filter field."""

    field_type: FieldType
    supports_range: bool
    supports_include_exclude: bool
    default_operator: FilterOperator
    default_sort_direction: SortDirection | None = None


def field_path(field: FilterField | SortField | str) -> str:
    """Return the wire path of *field* (enum value or the string itself)."""
    return field.value if isinstance(field, Enum) else str(field)


def _lookup(field: FilterField | str) -> FilterField | None:
    if isinstance(field, FilterField):
        return field
    try:
        return FilterField(field_path(field))
    except ValueError:
        return None


def field_type_of(field: FilterField | str) -> FieldType:
    """Classify *field*; unknown paths are :attr:`FieldType.STRING`."""
    known = _lookup(field)
    if known is None:
        return FieldType.STRING
    return _FIELD_TYPES.get(known, FieldType.STRING)


def supports_include_exclude(field: FilterField | str) -> bool:
    """True for genre/country name paths, recognised by prefix."""
    return field_path(field).startswith(INCLUDE_EXCLUDE_PREFIXES)


def supports_range(field: FilterField | str) -> bool:
    return field_type_of(field).supports_range


def default_operator_for(field: FilterField | str) -> FilterOperator:
    return FilterOperator.default_for_field_type(field_type_of(field))


def base_field(path: FilterField | str) -> str:
    """``rating.kp`` -> ``rating``."""
    return field_path(path).partition(".")[0]


def sub_field(path: FilterField | str) -> str | None:
    """``rating.kp`` -> ``kp``; ``None`` for paths without a dot."""
    _, dot, tail = field_path(path).partition(".")
    return tail if dot else None


def field_metadata(field: FilterField | str) -> FieldMetadata:
    """Metadata of *field*; computed once per known field, on demand for other paths."""
    known = _lookup(field)
    if known is None:
        return _compute_metadata(field_path(field))
    return _known_metadata(known)


@functools.cache
def _known_metadata(field: FilterField) -> FieldMetadata:
    # Keyed by enum member only, so the cache is bounded by the vocabulary.
    return _compute_metadata(field.value)


def _compute_metadata(path: str) -> FieldMetadata:
    kind = field_type_of(path)
    try:
        sort_direction: SortDirection | None = SortField(path).default_direction
    except ValueError:
        sort_direction = None
    return FieldMetadata(
        field_type=kind,
        supports_range=kind.supports_range,
        supports_include_exclude=supports_include_exclude(path),
        default_operator=FilterOperator.default_for_field_type(kind),
        default_sort_direction=sort_direction,
    )


__all__ = [
    "INCLUDE_EXCLUDE_PREFIXES",
    "FieldMetadata",
    "FilterField",
    "base_field",
    "default_operator_for",
    "field_metadata",
    "field_path",
    "field_type_of",
    "sub_field",
    "supports_include_exclude",
    "supports_range",
]
