"""Tests for loguru logging setup."""

import json
import sys

import pytest
from loguru import logger

from command_history.infrastructure.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_default_sink():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogging:
    """Test setup_logging sinks."""

    def test_text_file_sink(self, tmp_path):
        log_file = tmp_path / "logs" / "history.log"
        setup_logging(level="DEBUG", log_file=log_file, console_output=False)

        get_logger("tests.logging").info("hello file")
        logger.complete()

        content = log_file.read_text()
        assert "hello file" in content
        assert "tests.logging" in content

    def test_json_file_sink(self, tmp_path):
        log_file = tmp_path / "history.jsonl"
        setup_logging(level="INFO", log_file=log_file, console_output=False, json_format=True)

        get_logger("tests.logging").info("structured")
        logger.complete()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        messages = [r["record"]["message"] for r in records]
        assert "structured" in messages
        named = next(r for r in records if r["record"]["message"] == "structured")
        assert named["record"]["extra"]["name"] == "tests.logging"

    def test_level_filters(self, tmp_path):
        log_file = tmp_path / "history.log"
        setup_logging(level="WARNING", log_file=log_file, console_output=False)

        log = get_logger("tests.logging")
        log.info("quiet")
        log.warning("loud")
        logger.complete()

        content = log_file.read_text()
        assert "loud" in content
        assert "quiet" not in content

    def test_unknown_level_falls_back_to_info(self, tmp_path):
        log_file = tmp_path / "history.log"
        setup_logging(level="chatty", log_file=log_file, console_output=False)

        log = get_logger("tests.logging")
        log.debug("hidden")
        log.info("shown")
        logger.complete()

        content = log_file.read_text()
        assert "shown" in content
        assert "hidden" not in content

    def test_trace_level_available(self, tmp_path):
        log_file = tmp_path / "history.log"
        setup_logging(level="TRACE", log_file=log_file, console_output=False)

        get_logger("tests.logging").trace("fine grained")
        logger.complete()

        assert "fine grained" in log_file.read_text()

    def test_bare_logger_gets_default_name(self, tmp_path):
        log_file = tmp_path / "history.log"
        setup_logging(level="INFO", log_file=log_file, console_output=False)

        logger.info("unbound")
        logger.complete()

        assert "command_history" in log_file.read_text()

    def test_console_sink(self, capsys):
        setup_logging(level="INFO", console_output=True)
        get_logger("tests.logging").info("to stderr")

        assert "to stderr" in capsys.readouterr().err
