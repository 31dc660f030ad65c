"""Vocabulary – catalog value enums.

Wire values are sent verbatim; several of them are Russian words because
that is what the remote API stores.
"""
from __future__ import annotations

from enum import Enum, IntEnum


class MovieType(str, Enum):
    MOVIE = "movie"
    TV_SERIES = "tv-series"
    CARTOON = "cartoon"
    ANIME = "anime"
    ANIMATED_SERIES = "animated-series"
    TV_SHOW = "tv-show"

    @property
    def is_series(self) -> bool:
        return self in (MovieType.TV_SERIES, MovieType.ANIMATED_SERIES, MovieType.TV_SHOW)


class MovieStatus(str, Enum):
    FILMING = "filming"
    PRE_PRODUCTION = "pre-production"
    COMPLETED = "completed"
    ANNOUNCED = "announced"
    POST_PRODUCTION = "post-production"


class RatingMpaa(str, Enum):
    G = "g"
    PG = "pg"
    PG13 = "pg13"
    R = "r"
    NC17 = "nc17"


class PersonSex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class PersonProfession(str, Enum):
    """Profession slugs; person and credit documents store the Russian name."""

    ACTOR = "actor"
    DIRECTOR = "director"
    WRITER = "writer"
    PRODUCER = "producer"
    COMPOSER = "composer"
    OPERATOR = "operator"
    DESIGN = "design"
    EDITOR = "editor"
    VOICE_ACTOR = "voice_actor"
    OTHER = "other"

    @property
    def russian_name(self) -> str:
        return _PROFESSION_NAMES[self][0]

    @property
    def russian_plural_name(self) -> str:
        return _PROFESSION_NAMES[self][1]

    @classmethod
    def from_russian_name(cls, name: str) -> "PersonProfession":
        """Singular or plural Russian name -> member; unknown names map to ``OTHER``."""
        key = name.strip().lower().replace("ё", "е")
        for member, names in _PROFESSION_NAMES.items():
            if key in names:
                return member
        return cls.OTHER


_PROFESSION_NAMES: dict[PersonProfession, tuple[str, str]] = {
    PersonProfession.ACTOR: ("актер", "актеры"),
    PersonProfession.DIRECTOR: ("режиссер", "режиссеры"),
    PersonProfession.WRITER: ("сценарист", "сценаристы"),
    PersonProfession.PRODUCER: ("продюсер", "продюсеры"),
    PersonProfession.COMPOSER: ("композитор", "композиторы"),
    PersonProfession.OPERATOR: ("оператор", "операторы"),
    PersonProfession.DESIGN: ("художник", "художники"),
    PersonProfession.EDITOR: ("монтажер", "монтажеры"),
    PersonProfession.VOICE_ACTOR: ("актер дубляжа", "актеры дубляжа"),
    PersonProfession.OTHER: ("другое", "другие"),
}


class StudioType(str, Enum):
    PRODUCTION = "Производство"
    SPECIAL_EFFECTS = "Спецэффекты"
    DISTRIBUTION = "Прокат"
    DUBBING_STUDIO = "Студия дубляжа"


class ReviewType(str, Enum):
    POSITIVE = "Позитивный"
    NEGATIVE = "Негативный"
    NEUTRAL = "Нейтральный"


class ImageType(str, Enum):
    BACKDROP = "backdrops"
    COVER = "cover"
    FRAME = "frame"
    PROMO = "promo"
    SCREENSHOT = "screenshot"
    SHOOTING = "shooting"
    STILL = "still"
    WALLPAPER = "wallpaper"


class ListCategory(str, Enum):
    ONLINE = "Онлайн-кинотеатр"
    AWARD = "Премии"
    FEE = "Сборы"
    SERIES = "Сериалы"
    MOVIE = "Фильмы"


class HttpStatusCode(IntEnum):
    OK = 200
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500

    @property
    def is_error(self) -> bool:
        return self >= 400


__all__ = [
    "HttpStatusCode",
    "ImageType",
    "ListCategory",
    "MovieStatus",
    "MovieType",
    "PersonProfession",
    "PersonSex",
    "RatingMpaa",
    "ReviewType",
    "StudioType",
]
