"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from oms_client.infrastructure.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    client = logging.getLogger("oms_client")
    client_level = client.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    client.setLevel(client_level)


class TestConfigureLogging:

    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("oms_client").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("oms_client").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("oms_client.test")
        log.warning("submission.failed", status_code=400)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "submission.failed"
        assert parsed["status_code"] == 400
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "oms_client.test"
        assert "timestamp" in parsed

    def test_info_hidden_unless_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("oms_client.test").info("catalog.loaded")
        assert capfd.readouterr().err == ""

    def test_urllib3_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("urllib3.connectionpool").debug("Starting new HTTP connection")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True)
        assert len(logging.getLogger().handlers) == 1

    def test_stdlib_records_share_the_renderer(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("urllib3.connectionpool").warning("Retrying connection")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Retrying connection"
        assert parsed["logger"] == "urllib3.connectionpool"
        assert parsed["level"] == "warning"
