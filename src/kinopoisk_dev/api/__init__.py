"""API – endpoint groups and the top-level :class:`Kinopoisk` client."""
from kinopoisk_dev.api.base import ResourceGroup
from kinopoisk_dev.api.client import Kinopoisk
from kinopoisk_dev.api.images import ImageRequests
from kinopoisk_dev.api.keywords import KeywordRequests
from kinopoisk_dev.api.lists import ListRequests
from kinopoisk_dev.api.movies import POSSIBLE_VALUE_FIELDS, MovieRequests
from kinopoisk_dev.api.persons import PersonRequests
from kinopoisk_dev.api.reviews import ReviewRequests
from kinopoisk_dev.api.seasons import SeasonRequests
from kinopoisk_dev.api.studios import StudioRequests

__all__ = [
    "POSSIBLE_VALUE_FIELDS",
    "ImageRequests",
    "Kinopoisk",
    "KeywordRequests",
    "ListRequests",
    "MovieRequests",
    "PersonRequests",
    "ResourceGroup",
    "ReviewRequests",
    "SeasonRequests",
    "StudioRequests",
]
