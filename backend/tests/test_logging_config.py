"""Tests for figma_codegen.logging_config — handler setup per log file."""

from __future__ import annotations

import logging

import pytest

from figma_codegen import logging_config


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    """Fresh LOG_DIR and guard state; handlers added during the test are removed."""
    monkeypatch.setattr(logging_config, "LOG_DIR", tmp_path)
    monkeypatch.setattr(logging_config, "_configured_files", set())
    monkeypatch.setattr(logging_config, "_configured_loggers", set())

    logger = logging.getLogger("figma_codegen")
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    yield tmp_path

    for handler in logger.handlers[:]:
        if handler not in handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.propagate = propagate
    logger.setLevel(level)


def _file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def _console_handlers(logger):
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


class TestSetupLogger:
    def test_api_and_mcp_loggers_each_get_their_file(self, log_dir):
        before = len(logging.getLogger("figma_codegen").handlers)
        api = logging_config.get_api_logger()
        mcp = logging_config.get_mcp_logger()

        assert api is mcp
        assert (log_dir / "api.log").exists()
        assert (log_dir / "mcp.log").exists()
        # two file handlers, one console handler
        assert len(api.handlers) - before == 3

    def test_records_reach_both_files(self, log_dir):
        logging_config.get_api_logger()
        logging_config.get_mcp_logger()

        logging.getLogger("figma_codegen.codegen.assembler").warning("fallback frame used")
        for handler in _file_handlers(logging.getLogger("figma_codegen")):
            handler.flush()

        assert "fallback frame used" in (log_dir / "api.log").read_text(encoding="utf-8")
        assert "fallback frame used" in (log_dir / "mcp.log").read_text(encoding="utf-8")

    def test_repeated_setup_is_a_no_op(self, log_dir):
        logger = logging_config.get_api_logger()
        count = len(logger.handlers)

        logging_config.get_api_logger()

        assert len(logger.handlers) == count
        assert len(_console_handlers(logger)) >= 1
        assert logger.propagate is False
