"""Tests for logging_config utilities"""

import io
import logging

import pytest

from mcp_server_harvest.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)


class TestSetupLogging:
    """Tests for setup_logging function"""

    def test_writes_to_given_stream(self):
        stream = io.StringIO()
        logger = setup_logging("info", stream=stream)

        logger.info("hello")

        assert logger.name == "mcp_server_harvest"
        assert " - mcp_server_harvest - INFO - hello" in stream.getvalue()

    @pytest.mark.parametrize(
        "level,expected",
        [("error", logging.ERROR), ("warn", logging.WARNING), ("DEBUG", logging.DEBUG), ("bogus", logging.INFO)],
    )
    def test_levels(self, level, expected):
        setup_logging(level, stream=io.StringIO())

        assert logging.getLogger().level == expected

    def test_httpx_is_quieted(self):
        setup_logging("debug", stream=io.StringIO())

        assert logging.getLogger("httpx").level == logging.WARNING

    def test_debug_messages_filtered_at_info(self):
        stream = io.StringIO()
        logger = setup_logging("info", stream=stream)

        logger.debug("hidden")

        assert "hidden" not in stream.getvalue()


class TestGetLogger:
    """Tests for get_logger function"""

    def test_module_logger(self):
        assert get_logger("mcp_server_harvest.tools").name == "mcp_server_harvest.tools"

    def test_injected_logger_wins(self):
        injected = logging.getLogger("custom")

        assert get_logger("mcp_server_harvest.tools", injected) is injected
