"""Unified logging configuration for the API and MCP server."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from .settings import LOG_LEVEL

# Log directory, configurable via LOG_DIR env var for Docker
LOG_DIR = Path(os.getenv("LOG_DIR", str(Path(__file__).parent.parent / "logs")))

# Prevent duplicate handlers: (logger name, file name) pairs and console-configured names
_configured_files: set[tuple[str, str]] = set()
_configured_loggers: set[str] = set()


def setup_logger(name: str, filename: str, stream=None) -> logging.Logger:
    """Setup a logger with file and console handlers.

    Calling again with the same name and a new filename adds another file
    handler; the console handler is only attached once per name.

    Args:
        name: Logger name (e.g., 'figma_codegen', 'api')
        filename: Log file name (e.g., 'api.log')
        stream: Console stream; defaults to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if (name, filename) in _configured_files:
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, LOG_LEVEL, logging.INFO)

    # File handler
    fh = logging.FileHandler(LOG_DIR / filename, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(
        "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
    ))
    logger.addHandler(fh)
    _configured_files.add((name, filename))

    if name not in _configured_loggers:
        logger.setLevel(level)
        logger.propagate = False  # Prevent duplicate logs

        # Console handler
        sh = logging.StreamHandler(stream or sys.stderr)
        sh.setLevel(level)
        sh.setFormatter(logging.Formatter(
            "%(asctime)s [%(name)s] %(message)s"
        ))
        logger.addHandler(sh)
        _configured_loggers.add(name)

    return logger


# Pre-configured loggers
def get_api_logger() -> logging.Logger:
    """Logger tree for the HTTP API and everything it calls."""
    return setup_logger("figma_codegen", "api.log")


def get_mcp_logger() -> logging.Logger:
    """Logger tree for the MCP server. Console output goes to stderr,
    stdout carries the stdio transport."""
    return setup_logger("figma_codegen", "mcp.log", stream=sys.stderr)
