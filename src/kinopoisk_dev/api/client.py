"""API – Kinopoisk, the top-level client.

Example::

    async with Kinopoisk(token="ABCDEFG-HIJKLMN-OPQRSTU-VWXYZ12") as kp:
        films = await kp.movies.search(
            MovieSearchFilter().with_year_between(2020, 2024).with_min_rating(7.5).sort_by_best(),
            limit=20,
        )
"""
from __future__ import annotations

from typing import Any

from kinopoisk_dev.adapters.http import KinopoiskHttpClient
from kinopoisk_dev.api.images import ImageRequests
from kinopoisk_dev.api.keywords import KeywordRequests
from kinopoisk_dev.api.lists import ListRequests
from kinopoisk_dev.api.movies import MovieRequests
from kinopoisk_dev.api.persons import PersonRequests
from kinopoisk_dev.api.reviews import ReviewRequests
from kinopoisk_dev.api.seasons import SeasonRequests
from kinopoisk_dev.api.studios import StudioRequests
from kinopoisk_dev.config.settings import EnvSettingsLoader, KinopoiskSettings
from kinopoisk_dev.observability.logging import get_logger

logger = get_logger(__name__)


class Kinopoisk:
    """Entry point grouping every endpoint family over one HTTP client.

    Without *token* or *settings* the configuration is read from
    ``KINOPOISK_*`` environment variables.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        settings: KinopoiskSettings | None = None,
        **http_kwargs: Any,
    ) -> None:
        if settings is None:
            settings = KinopoiskSettings(token=token) if token else EnvSettingsLoader().load(KinopoiskSettings)
        self.settings = settings
        self.http = KinopoiskHttpClient(
            settings.token,
            base_url=settings.base_url,
            api_version=settings.api_version,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
            **http_kwargs,
        )
        self.movies = MovieRequests(self.http)
        self.persons = PersonRequests(self.http)
        self.seasons = SeasonRequests(self.http)
        self.studios = StudioRequests(self.http)
        self.keywords = KeywordRequests(self.http)
        self.reviews = ReviewRequests(self.http)
        self.images = ImageRequests(self.http)
        self.lists = ListRequests(self.http)
        logger.info("kinopoisk.client.ready", base_url=settings.base_url, api_version=settings.api_version)

    async def __aenter__(self) -> "Kinopoisk":
        await self.http.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.http.__aexit__(*args)

    async def aclose(self) -> None:
        await self.http.aclose()


__all__ = ["Kinopoisk"]
