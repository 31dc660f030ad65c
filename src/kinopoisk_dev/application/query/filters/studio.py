"""Search filters – StudioSearchFilter."""
from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from kinopoisk_dev.application.query.facade import filter_method, unwrap
from kinopoisk_dev.application.query.filters.common import CommonFilters
from kinopoisk_dev.application.query.filters.movie import MovieFilter
from kinopoisk_dev.kernel.vocabulary import SortDirection, SortField, StudioType


class StudioSearchFilter(CommonFilters, MovieFilter):
    """Filters for ``/studio`` searches."""

    movie_id = filter_method("movies.id", doc="Studios credited on the given movie id(s).")
    sub_type = filter_method("subType")
    title = filter_method("title")

    def studio_type(self, types: str | StudioType | Iterable[str | StudioType]) -> "StudioSearchFilter":
        if not isinstance(types, (str, Enum)):
            types = list(types)
        return self.add_filter("type", unwrap(types))

    def production_studios(self) -> "StudioSearchFilter":
        return self.studio_type(StudioType.PRODUCTION)

    def special_effects_studios(self) -> "StudioSearchFilter":
        return self.studio_type(StudioType.SPECIAL_EFFECTS)

    def distribution_companies(self) -> "StudioSearchFilter":
        return self.studio_type(StudioType.DISTRIBUTION)

    def dubbing_studios(self) -> "StudioSearchFilter":
        return self.studio_type(StudioType.DUBBING_STUDIO)

    def exclude_types(self, types: str | StudioType | Iterable[str | StudioType]) -> "StudioSearchFilter":
        """Studios of any type except *types* (``!value`` entries on ``type.eq``)."""
        if isinstance(types, (str, Enum)):
            types = [types]
        return self.add_filter("type", [f"!{unwrap(t)}" for t in types])

    def participated_in_all_movies(self, movie_ids: Iterable[int]) -> "StudioSearchFilter":
        """Studios credited on every one of *movie_ids*."""
        return self.assign("movies.id", [f"+{movie_id}" for movie_id in movie_ids])

    def sort_by_title(self, direction: SortDirection | str = SortDirection.ASC) -> "StudioSearchFilter":
        return self.sort_by(SortField.TITLE, direction)

    def sort_by_type(self, direction: SortDirection | str = SortDirection.ASC) -> "StudioSearchFilter":
        return self.sort_by(SortField.TYPE, direction)


__all__ = ["StudioSearchFilter"]
