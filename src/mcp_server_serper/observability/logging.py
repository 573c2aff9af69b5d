"""Logging setup for the server and CLI.

Everything goes to stderr: on the stdio transport stdout carries JSON-RPC
frames, and the CLI prints tool output there. Tool invocations log through
structlog with ``task_id`` and ``tool_name`` merged from contextvars.
"""

import logging
import sys

import structlog

PACKAGE_LOGGER = "mcp_server_serper"

NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "asyncio",
    "mcp",
    "fastmcp",
    "uvicorn",
    "sse_starlette",
)

_configured = False


def _level(name: str, default: int) -> int:
    return getattr(logging, name.upper(), default)


def configure_stdio_logging(level: str = "WARNING") -> None:
    """Replace root handlers with a single stderr handler and quiet dependency loggers."""
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    root = logging.getLogger()
    root.handlers = [stderr_handler]
    root.setLevel(_level(level, logging.WARNING))

    for logger_name in NOISY_LOGGERS:
        dep_logger = logging.getLogger(logger_name)
        dep_logger.setLevel(logging.WARNING)
        dep_logger.handlers = [stderr_handler]
        dep_logger.propagate = False


def setup_structured_logging(level: str = "INFO") -> None:
    """Route structlog through stdlib logging as JSON lines.

    The package logger level is applied on every call; the structlog
    pipeline itself is configured once per process.
    """
    global _configured
    logging.getLogger(PACKAGE_LOGGER).setLevel(_level(level, logging.INFO))
    if _configured:
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # No-op when a handler is already installed; basicConfig defaults to stderr.
    logging.basicConfig(format="%(message)s", level=_level(level, logging.INFO))

    _configured = True


def bind_task_context(task_id: str, tool_name: str) -> None:
    """Attach the invocation id and tool name to every log line in this context."""
    structlog.contextvars.bind_contextvars(task_id=task_id, tool_name=tool_name)


def clear_task_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_task_logger(name: str = PACKAGE_LOGGER) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
