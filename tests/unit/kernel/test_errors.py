"""Unit tests – error hierarchy."""
from __future__ import annotations

import json

from kinopoisk_dev.config.validation import ConfigError, MissingRequiredSettingError
from kinopoisk_dev.kernel.errors import (
    ForbiddenError,
    KinopoiskApiError,
    KinopoiskError,
    NotFoundError,
    RequestTimeoutError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)


class TestKinopoiskError:
    def test_default_code(self) -> None:
        err = KinopoiskError("boom")
        assert err.code == "kinopoisk_error"
        assert err.message == "boom"

    def test_str_is_json(self) -> None:
        payload = json.loads(str(KinopoiskError("boom", code="x")))
        assert payload["code"] == "x"
        assert payload["message"] == "boom"

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("inner")
        err = KinopoiskError("outer", cause=cause)
        assert err.__cause__ is cause
        assert "cause" in err.to_dict()


class TestValidationError:
    def test_for_field(self) -> None:
        err = ValidationError.for_field("limit", "too big", 500)
        assert err.field == "limit"
        assert err.value == 500
        assert err.errors == {"limit": "too big"}
        assert err.first_error == "too big"

    def test_with_errors_message(self) -> None:
        assert ValidationError.with_errors({"a": "x", "b": "y"}).message == "2 validation errors found"
        assert ValidationError.with_errors({}).has_errors is False

    def test_to_dict_includes_errors(self) -> None:
        data = ValidationError.for_field("page", "must be >= 1").to_dict()
        assert data["errors"] == {"page": "must be >= 1"}
        assert data["field"] == "page"


class TestApiErrors:
    def test_status_defaults(self) -> None:
        assert UnauthorizedError().status_code == 401
        assert ForbiddenError().status_code == 403
        assert NotFoundError().status_code == 404

    def test_hierarchy(self) -> None:
        assert issubclass(RequestTimeoutError, KinopoiskApiError)
        assert issubclass(KinopoiskApiError, KinopoiskError)
        assert issubclass(MissingRequiredSettingError, ConfigError)

    def test_to_dict_carries_status_and_endpoint(self) -> None:
        data = KinopoiskApiError("bad", status_code=502, endpoint="/v1.4/movie").to_dict()
        assert data["status_code"] == 502
        assert data["endpoint"] == "/v1.4/movie"

    def test_retryable_flags(self) -> None:
        assert RequestTimeoutError("slow").retryable
        assert TransportError("refused").retryable
        assert not NotFoundError().retryable
        assert not ValidationError().retryable

    def test_to_dict_names_the_error(self) -> None:
        data = NotFoundError(endpoint="/v1.4/movie/1").to_dict()
        assert data["error"] == "NotFoundError"
        assert data["code"] == "not_found"
        assert "detail" not in data
