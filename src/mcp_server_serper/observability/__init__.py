"""Observability module: stderr-safe logging and per-invocation structured context."""

from .logging import (
    bind_task_context,
    clear_task_context,
    configure_stdio_logging,
    get_task_logger,
    setup_structured_logging,
)

__all__ = [
    "bind_task_context",
    "clear_task_context",
    "configure_stdio_logging",
    "get_task_logger",
    "setup_structured_logging",
]
