"""Search filters – ImageSearchFilter."""
from __future__ import annotations

from kinopoisk_dev.application.query.facade import filter_method
from kinopoisk_dev.application.query.filters.common import CommonFilters
from kinopoisk_dev.application.query.filters.movie import MovieFilter
from kinopoisk_dev.kernel.vocabulary import FilterOperator, ImageType

HIGH_RES_WIDTH = 1920
HIGH_RES_HEIGHT = 1080


class ImageSearchFilter(CommonFilters, MovieFilter):
    """Filters for ``/image`` searches."""

    language = filter_method("language")
    width = filter_method("width")
    height = filter_method("height")

    def only_posters(self) -> "ImageSearchFilter":
        return self.type("poster")

    def only_stills(self) -> "ImageSearchFilter":
        return self.type(ImageType.STILL)

    def only_shooting(self) -> "ImageSearchFilter":
        return self.type(ImageType.SHOOTING)

    def only_screenshots(self) -> "ImageSearchFilter":
        return self.type(ImageType.SCREENSHOT)

    def min_resolution(self, min_width: int, min_height: int) -> "ImageSearchFilter":
        self.width(min_width, FilterOperator.GREATER_THAN_EQUALS)
        return self.height(min_height, FilterOperator.GREATER_THAN_EQUALS)

    def only_high_res(self) -> "ImageSearchFilter":
        return self.min_resolution(HIGH_RES_WIDTH, HIGH_RES_HEIGHT)


__all__ = ["ImageSearchFilter"]
