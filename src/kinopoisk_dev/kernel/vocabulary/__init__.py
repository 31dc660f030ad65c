"""Kernel vocabulary – the typed alphabet of filter/sort fields and operators."""
from kinopoisk_dev.kernel.vocabulary.catalog import (
    HttpStatusCode,
    ImageType,
    ListCategory,
    MovieStatus,
    MovieType,
    PersonProfession,
    PersonSex,
    RatingMpaa,
    ReviewType,
    StudioType,
)
from kinopoisk_dev.kernel.vocabulary.field_type import FieldType
from kinopoisk_dev.kernel.vocabulary.filter_field import (
    INCLUDE_EXCLUDE_PREFIXES,
    FieldMetadata,
    FilterField,
    base_field,
    default_operator_for,
    field_metadata,
    field_path,
    field_type_of,
    sub_field,
    supports_include_exclude,
    supports_range,
)
from kinopoisk_dev.kernel.vocabulary.filter_operator import FilterOperator
from kinopoisk_dev.kernel.vocabulary.sort_direction import SortDirection
from kinopoisk_dev.kernel.vocabulary.sort_field import SortField

__all__ = [
    "INCLUDE_EXCLUDE_PREFIXES",
    "FieldMetadata",
    "FieldType",
    "FilterField",
    "FilterOperator",
    "HttpStatusCode",
    "ImageType",
    "ListCategory",
    "MovieStatus",
    "MovieType",
    "PersonProfession",
    "PersonSex",
    "RatingMpaa",
    "ReviewType",
    "SortDirection",
    "SortField",
    "StudioType",
    "base_field",
    "default_operator_for",
    "field_metadata",
    "field_path",
    "field_type_of",
    "sub_field",
    "supports_include_exclude",
    "supports_range",
]
