"""Search filters – MovieFilter field bindings and the MovieSearchFilter façade.

:class:`MovieFilter` binds one method per catalog field.  Scalar fields go
through :meth:`FilterBuilder.add_filter` with the field's usual operator;
object-valued fields and boolean flags are written verbatim with
:meth:`FilterBuilder.assign`.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from kinopoisk_dev.application.query.builder import FilterBuilder
from kinopoisk_dev.application.query.facade import assign_method, filter_method
from kinopoisk_dev.application.query.filters.common import CommonFilters
from kinopoisk_dev.kernel.vocabulary import FilterField, FilterOperator, PersonProfession

F = FilterField
Op = FilterOperator

# Credits store the Russian profession name.
ACTOR_PROFESSION = PersonProfession.ACTOR.russian_name
DIRECTOR_PROFESSION = PersonProfession.DIRECTOR.russian_name


class MovieFilter(FilterBuilder):
    """Per-field filter methods of the movie catalog."""

    id = filter_method(F.ID)
    external_id = assign_method(F.EXTERNAL_ID, doc="Match external ids, e.g. ``{'imdb': 'tt0111161'}``.")
    name = filter_method(F.NAME)
    en_name = filter_method(F.EN_NAME)
    alternative_name = filter_method(F.ALTERNATIVE_NAME)
    names = filter_method(F.NAMES)
    description = filter_method(F.DESCRIPTION, Op.REGEX)
    short_description = filter_method(F.SHORT_DESCRIPTION, Op.REGEX)
    slogan = filter_method(F.SLOGAN, Op.REGEX)

    type = filter_method(F.TYPE)
    type_number = filter_method(F.TYPE_NUMBER)
    is_series = assign_method(F.IS_SERIES)
    status = filter_method(F.STATUS)

    year = filter_method(F.YEAR)
    release_years = assign_method(F.RELEASE_YEARS)
    updated_at = filter_method(F.UPDATED_AT)
    created_at = filter_method(F.CREATED_AT)

    rating_mpaa = filter_method(F.RATING_MPAA)
    age_rating = filter_method(F.AGE_RATING)

    seasons_info = assign_method(F.SEASONS_INFO)
    budget = assign_method(F.BUDGET)
    audience = assign_method(F.AUDIENCE)

    movie_length = filter_method(F.MOVIE_LENGTH)
    series_length = filter_method(F.SERIES_LENGTH)
    total_series_length = filter_method(F.TOTAL_SERIES_LENGTH)

    genres = filter_method(F.GENRES, Op.IN)
    include_genres = filter_method(F.GENRES, Op.INCLUDE)
    exclude_genres = filter_method(F.GENRES, Op.EXCLUDE)
    countries = filter_method(F.COUNTRIES, Op.IN)
    include_countries = filter_method(F.COUNTRIES, Op.INCLUDE)
    exclude_countries = filter_method(F.COUNTRIES, Op.EXCLUDE)

    poster = assign_method(F.POSTER)
    backdrop = assign_method(F.BACKDROP)
    logo = assign_method(F.LOGO)
    tickets_on_sale = assign_method(F.TICKETS_ON_SALE)
    videos = assign_method(F.VIDEOS)
    networks = assign_method(F.NETWORKS)
    persons = assign_method(F.PERSONS)
    facts = assign_method(F.FACTS)
    fees = assign_method(F.FEES)
    premiere = assign_method(F.PREMIERE)
    similar_movies = assign_method(F.SIMILAR_MOVIES)
    sequels_and_prequels = assign_method(F.SEQUELS_AND_PREQUELS)
    watchability = assign_method(F.WATCHABILITY)
    lists = assign_method(F.LISTS)

    top10 = filter_method(F.TOP_10)
    top250 = filter_method(F.TOP_250)

    def year_range(self, from_year: int, to_year: int) -> "MovieFilter":
        return self.add_filter(F.YEAR, [from_year, to_year], Op.RANGE)

    def rating(
        self,
        value: float | Mapping[str, Any],
        field: str = "kp",
        operator: FilterOperator | str = Op.GREATER_THAN_EQUALS,
    ) -> "MovieFilter":
        """Filter by one rating source, or set the whole ``rating`` object."""
        if isinstance(value, Mapping):
            return self.assign("rating", dict(value))
        return self.add_filter(f"rating.{field}", value, operator)

    def rating_range(self, min_rating: float, max_rating: float, field: str = "kp") -> "MovieFilter":
        return self.add_filter(f"rating.{field}", [min_rating, max_rating], Op.RANGE)

    def votes(
        self,
        value: int | Mapping[str, Any],
        field: str = "kp",
        operator: FilterOperator | str = Op.GREATER_THAN_EQUALS,
    ) -> "MovieFilter":
        """Filter by one vote counter, or set the whole ``votes`` object."""
        if isinstance(value, Mapping):
            return self.assign("votes", dict(value))
        return self.add_filter(f"votes.{field}", value, operator)

    def votes_range(self, min_votes: int, max_votes: int, field: str = "kp") -> "MovieFilter":
        return self.add_filter(f"votes.{field}", [min_votes, max_votes], Op.RANGE)

    def premiere_range(self, from_date: str, to_date: str, country: str = "world") -> "MovieFilter":
        """Premiere dates are ``dd.mm.yyyy`` strings."""
        return self.add_filter(f"premiere.{country}", [from_date, to_date], Op.RANGE)


class MovieSearchFilter(CommonFilters, MovieFilter):
    """Movie search façade: field bindings plus convenience shortcuts."""

    def search_by_alternative_name(self, query: str) -> "MovieSearchFilter":
        return self.add_filter(F.ALTERNATIVE_NAME, query, Op.REGEX)

    def search_by_all_names(self, query: str) -> "MovieSearchFilter":
        return self.add_filter(F.NAMES, query, Op.REGEX)

    def with_min_votes(self, min_votes: int, field: str = "kp") -> "MovieSearchFilter":
        return self.add_filter(f"votes.{field}", min_votes, Op.GREATER_THAN_EQUALS)

    def with_votes_between(self, min_votes: int, max_votes: int, field: str = "kp") -> "MovieSearchFilter":
        return self.votes_range(min_votes, max_votes, field)

    def with_year_between(self, from_year: int, to_year: int) -> "MovieSearchFilter":
        return self.year_range(from_year, to_year)

    def with_all_genres(self, genres: Iterable[str]) -> "MovieSearchFilter":
        return self.add_filter(F.GENRES, list(genres), Op.ALL)

    def with_included_genres(self, genres: str | Iterable[str]) -> "MovieSearchFilter":
        return self.add_filter(F.GENRES, _as_value(genres), Op.INCLUDE)

    def with_excluded_genres(self, genres: str | Iterable[str]) -> "MovieSearchFilter":
        return self.add_filter(F.GENRES, _as_value(genres), Op.EXCLUDE)

    def with_all_countries(self, countries: Iterable[str]) -> "MovieSearchFilter":
        return self.add_filter(F.COUNTRIES, list(countries), Op.ALL)

    def with_included_countries(self, countries: str | Iterable[str]) -> "MovieSearchFilter":
        return self.add_filter(F.COUNTRIES, _as_value(countries), Op.INCLUDE)

    def with_excluded_countries(self, countries: str | Iterable[str]) -> "MovieSearchFilter":
        return self.add_filter(F.COUNTRIES, _as_value(countries), Op.EXCLUDE)

    def with_actor(self, actor: int | str) -> "MovieSearchFilter":
        """Credited actor, by person id or by (regex) name."""
        return self._with_person(actor, ACTOR_PROFESSION)

    def with_director(self, director: int | str) -> "MovieSearchFilter":
        """Credited director, by person id or by (regex) name."""
        return self._with_person(director, DIRECTOR_PROFESSION)

    def only_movies(self) -> "MovieSearchFilter":
        return self.is_series(False)

    def only_series(self) -> "MovieSearchFilter":
        return self.is_series(True)

    def in_top250(self) -> "MovieSearchFilter":
        return self.add_filter(F.TOP_250, 250, Op.LESS_THAN_EQUALS)

    def in_top10(self) -> "MovieSearchFilter":
        return self.add_filter(F.TOP_10, 10, Op.LESS_THAN_EQUALS)

    def with_premiere_range(self, from_date: str, to_date: str, country: str = "world") -> "MovieSearchFilter":
        return self.premiere_range(from_date, to_date, country)

    def with_person(self, person: int | str, profession: PersonProfession | str) -> "MovieSearchFilter":
        """Credited person in any *profession*, by id or by (regex) name."""
        return self._with_person(person, _profession_name(profession))

    def _with_person(self, person: int | str, profession: str) -> "MovieSearchFilter":
        if isinstance(person, int):
            self.assign(F.PERSONS_ID, person)
        else:
            self.add_filter(F.PERSONS_NAME, person, Op.REGEX)
        return self.assign(F.PERSONS_PROFESSION, profession)


def _as_value(values: str | Iterable[str]) -> str | list[str]:
    if isinstance(values, str):
        return values
    return list(values)


def _profession_name(profession: PersonProfession | str) -> str:
    return profession.russian_name if isinstance(profession, PersonProfession) else profession


__all__ = ["ACTOR_PROFESSION", "DIRECTOR_PROFESSION", "MovieFilter", "MovieSearchFilter"]
