"""Logging setup for the Harvest MCP server.

Log output goes to stderr only: with the stdio transport, stdout carries the
MCP JSON-RPC stream and any stray line there corrupts the protocol.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def setup_logging(level: str = "info", stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure the root logger to write to stderr (or ``stream``)."""
    logging.basicConfig(
        level=LEVELS.get(level.lower(), logging.INFO),
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )
    # httpx logs every request at INFO, including full URLs
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger = logging.getLogger("mcp_server_harvest")
    logger.debug("Logging configured: level=%s", level)
    return logger


def get_logger(name: str, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """Return ``logger`` when one was injected, else the module logger for ``name``."""
    return logger if logger is not None else logging.getLogger(name)
