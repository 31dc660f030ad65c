"""Unit tests – structured logging helpers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from typing import Any

import httpx
import pytest
import respx
import structlog

from kinopoisk_dev.adapters.http import KinopoiskHttpClient
from kinopoisk_dev.adapters.http import retry as retry_module
from kinopoisk_dev.config.settings import KinopoiskSettings
from kinopoisk_dev.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
    request_context,
)

TOKEN = "ABCDEFG-HIJKLMN-OPQRSTU-VWXYZ12"


class _RecordingLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str) -> Any:
        def log(event: str, **kw: Any) -> None:
            self.calls.append((level, event, kw))
        return log

    def __getattr__(self, level: str) -> Any:
        return self._record(level)


@pytest.fixture()
def root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_api_key_header_is_redacted(self) -> None:
        result = SensitiveFieldsFilter().redact({"X-API-KEY": TOKEN, "path": "/v1.4/movie"})
        assert result["X-API-KEY"] == SensitiveFieldsFilter.REDACTED
        assert result["path"] == "/v1.4/movie"

    def test_defaults_cover_token(self) -> None:
        assert "token" in DEFAULT_SENSITIVE_FIELDS

    def test_custom_fields_replace_defaults(self) -> None:
        f = SensitiveFieldsFilter(sensitive_fields=frozenset({"cookie"}))
        assert f.redact({"cookie": "c", "token": "t"}) == {"cookie": "[REDACTED]", "token": "t"}

    def test_redact_deep(self) -> None:
        data: dict[str, Any] = {"headers": {"Authorization": "Bearer x", "Accept": "application/json"}}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result["headers"]["Authorization"] == SensitiveFieldsFilter.REDACTED
        assert result["headers"]["Accept"] == "application/json"
        assert data["headers"]["Authorization"] == "Bearer x"

    def test_processor_entry_point(self) -> None:
        event = SensitiveFieldsFilter()(None, "info", {"event": "settings.loaded", "token": TOKEN})
        assert event == {"event": "settings.loaded", "token": "[REDACTED]"}

    def test_embedded_api_key_is_masked(self) -> None:
        event = SensitiveFieldsFilter()(None, "warning", {"event": "http.error", "error": f"bad key {TOKEN}"})
        assert event["error"] == "bad key [REDACTED]"

    def test_embedded_key_masking_can_be_disabled(self) -> None:
        f = SensitiveFieldsFilter(mask_api_keys=False)
        assert f.redact_deep({"error": TOKEN}) == {"error": TOKEN}

    def test_lists_are_scrubbed(self) -> None:
        result = SensitiveFieldsFilter().redact_deep({"attempts": [{"token": "t"}, "ok"]})
        assert result == {"attempts": [{"token": "[REDACTED]"}, "ok"]}


class TestRequestContext:
    def test_binds_for_the_block_only(self) -> None:
        with request_context("GET", "/v1.4/movie", attempt=1):
            assert structlog.contextvars.get_contextvars() == {
                "http_method": "GET",
                "http_path": "/v1.4/movie",
                "attempt": 1,
            }
        assert "http_path" not in structlog.contextvars.get_contextvars()


# ---------------------------------------------------------------------------
# get_logger / JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self, root_logger: logging.Logger) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("kinopoisk_dev.test", component="query").info("filter.compiled", keys=3)
        assert logs == [{"component": "query", "keys": 3, "event": "filter.compiled", "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_string_level(self, root_logger: logging.Logger) -> None:
        JsonLoggerFactory.configure(level="debug")
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1

    def test_renders_json_with_redaction(self, root_logger: logging.Logger, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("kinopoisk_dev.test").info("client.ready", token=TOKEN, api_version="v1.4")
        err = capsys.readouterr().err
        assert '"event": "client.ready"' in err
        assert '"api_version": "v1.4"' in err
        assert TOKEN not in err

    def test_console_output(self, root_logger: logging.Logger) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING, json_output=False)
        assert root_logger.level == logging.WARNING

    def test_configure_for_settings(self, root_logger: logging.Logger) -> None:
        JsonLoggerFactory.configure_for(KinopoiskSettings(token=TOKEN, log_level="error"))
        assert root_logger.level == logging.ERROR


# ---------------------------------------------------------------------------
# Retry logging
# ---------------------------------------------------------------------------


class TestRetryLogging:
    @respx.mock
    def test_each_retry_is_logged(self, monkeypatch: pytest.MonkeyPatch) -> None:
        recorder = _RecordingLogger()
        monkeypatch.setattr(retry_module, "logger", recorder)
        respx.get("https://api.kinopoisk.dev/v1.4/movie").mock(
            side_effect=[httpx.Response(500), httpx.Response(503), httpx.Response(200, json={"docs": []})]
        )

        async def run() -> None:
            async with KinopoiskHttpClient(TOKEN, max_retries=3, retry_wait=0) as client:
                await client.get("movie")

        asyncio.run(run())
        assert [(level, event) for level, event, _ in recorder.calls] == [
            ("warning", "http.retry"),
            ("warning", "http.retry"),
        ]
        assert [kw["status_code"] for _, _, kw in recorder.calls] == [500, 503]
        assert recorder.calls[0][2]["attempt"] == 1
