"""Tests for logging setup and per-invocation context."""

import logging
import sys

import structlog

from mcp_server_serper.observability import (
    bind_task_context,
    clear_task_context,
    configure_stdio_logging,
    get_task_logger,
    setup_structured_logging,
)


class TestTaskContext:
    """Test binding and clearing invocation context."""

    def test_bind_and_clear(self):
        bind_task_context("task-123", "web_search")
        assert structlog.contextvars.get_contextvars() == {"task_id": "task-123", "tool_name": "web_search"}

        clear_task_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_get_task_logger(self):
        setup_structured_logging()
        assert get_task_logger() is not None

    def test_package_level_applied_on_every_call(self):
        setup_structured_logging("WARNING")
        assert logging.getLogger("mcp_server_serper").level == logging.WARNING
        setup_structured_logging("DEBUG")
        assert logging.getLogger("mcp_server_serper").level == logging.DEBUG


class TestStdioLogging:
    """Test that logging never targets stdout."""

    def test_root_logs_to_stderr(self):
        configure_stdio_logging("INFO")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr
        assert logging.getLogger().level == logging.INFO

    def test_noisy_loggers_quieted(self):
        configure_stdio_logging()
        httpx_logger = logging.getLogger("httpx")
        assert httpx_logger.level == logging.WARNING
        assert httpx_logger.propagate is False
