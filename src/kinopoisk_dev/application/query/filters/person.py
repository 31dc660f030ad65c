"""Search filters – PersonSearchFilter."""
from __future__ import annotations

from enum import Enum

from kinopoisk_dev.application.query.facade import filter_method
from kinopoisk_dev.application.query.filters.common import CommonFilters
from kinopoisk_dev.application.query.filters.movie import MovieFilter
from kinopoisk_dev.kernel.vocabulary import FilterOperator, PersonProfession

# Person documents store the Russian profession name.
ACTOR = PersonProfession.ACTOR.russian_name
DIRECTOR = PersonProfession.DIRECTOR.russian_name
WRITER = PersonProfession.WRITER.russian_name


class PersonSearchFilter(CommonFilters, MovieFilter):
    """Filters for ``/person`` searches."""

    age = filter_method("age")
    birth_place = filter_method("birthPlace.value", FilterOperator.REGEX)
    death = filter_method("death")
    birthday = filter_method("birthday")
    count_awards = filter_method("countAwards", FilterOperator.GREATER_THAN_EQUALS)

    def profession(
        self,
        profession: PersonProfession | str,
        operator: FilterOperator | str = FilterOperator.EQUALS,
    ) -> "PersonSearchFilter":
        """Filter by profession; enum members are sent as their Russian name."""
        if isinstance(profession, PersonProfession):
            profession = profession.russian_name
        return self.add_filter("profession", profession, operator)

    def sex(self, sex: str | Enum) -> "PersonSearchFilter":
        if isinstance(sex, Enum):
            sex = sex.value
        return self.add_filter("sex", sex)

    def only_actors(self) -> "PersonSearchFilter":
        return self.profession(ACTOR)

    def only_directors(self) -> "PersonSearchFilter":
        return self.profession(DIRECTOR)

    def only_writers(self) -> "PersonSearchFilter":
        return self.profession(WRITER)

    def only_alive(self) -> "PersonSearchFilter":
        """People without a recorded date of death."""
        return self.add_filter("death", None, FilterOperator.EQUALS)

    def birth_year(self, from_year: int, to_year: int | None = None) -> "PersonSearchFilter":
        """Born in *from_year*, or anywhere in ``from_year..to_year``."""
        last = from_year if to_year is None else to_year
        return self.add_filter("birthday", [f"01.01.{from_year}", f"31.12.{last}"], FilterOperator.RANGE)

    def death_year(self, year: int) -> "PersonSearchFilter":
        return self.add_filter("death", [f"01.01.{year}", f"31.12.{year}"], FilterOperator.RANGE)


__all__ = ["ACTOR", "DIRECTOR", "WRITER", "PersonSearchFilter"]
