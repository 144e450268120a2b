"""Unit tests for observability logging."""

from __future__ import annotations

import io
import json
import logging
from typing import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mp_phonemeta.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestGetLogger:
    def test_logs_event_with_fields(self) -> None:
        with capture_logs() as logs:
            get_logger("mp_phonemeta.tests").info("territory_compiled", territory="FR")
        assert logs == [{"event": "territory_compiled", "territory": "FR", "log_level": "info"}]

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("mp_phonemeta.tests", batch="nightly").warning("slow")
        assert logs[0]["batch"] == "nightly"


class TestJsonLoggerFactory:
    def test_renders_json_lines(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.INFO, stream=stream)
        get_logger("mp_phonemeta.tests").info("territory_compiled", territory="FR", types=2)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "territory_compiled"
        assert record["territory"] == "FR"
        assert record["level"] == "info"
        assert record["logger"] == "mp_phonemeta.tests"
        assert "timestamp" in record

    def test_level_filters_debug(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.WARNING, stream=stream)
        get_logger("mp_phonemeta.tests").debug("hidden")
        assert stream.getvalue() == ""

    def test_merges_context_vars(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(stream=stream)
        with structlog.contextvars.bound_contextvars(territory="GB"):
            get_logger("mp_phonemeta.tests").error("territory_compile_failed")
        record = json.loads(stream.getvalue().strip())
        assert record["territory"] == "GB"
