"""Execution-context scoped logger access."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TextIO

PACKAGE_LOGGER_NAME = "prompt_schema"

_PACKAGE_LOGGER = logging.getLogger(PACKAGE_LOGGER_NAME)
_PACKAGE_LOGGER.addHandler(logging.NullHandler())

_CONTEXT_LOGGER: ContextVar[logging.Logger | None] = ContextVar(
    "prompt_schema_logger", default=None
)


def logger_from_context() -> logging.Logger:
    """Return the logger bound to the current context, or the package logger."""
    return _CONTEXT_LOGGER.get() or _PACKAGE_LOGGER


@contextmanager
def bound_logger(logger: logging.Logger) -> Iterator[logging.Logger]:
    """Bind a logger to the current context for the duration of the block."""
    token = _CONTEXT_LOGGER.set(logger)
    try:
        yield logger
    finally:
        _CONTEXT_LOGGER.reset(token)


class DebugOnlyFilter(logging.Filter):
    """Pass DEBUG records only."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno == logging.DEBUG


_debug_handler: logging.Handler | None = None


def configure_debug_logging(stream: TextIO | None = None) -> logging.Handler:
    """Attach the DEBUG-only stream handler to the package logger.

    Repeated calls return the handler that is already attached; `stream` only
    applies when a new handler is created.
    """
    global _debug_handler
    if _debug_handler is None:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.addFilter(DebugOnlyFilter())
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        _PACKAGE_LOGGER.addHandler(handler)
        _debug_handler = handler
    _PACKAGE_LOGGER.setLevel(logging.DEBUG)
    return _debug_handler


def disable_debug_logging() -> None:
    """Detach the debug handler and restore the package logger level."""
    global _debug_handler
    if _debug_handler is not None:
        _PACKAGE_LOGGER.removeHandler(_debug_handler)
        _debug_handler = None
    _PACKAGE_LOGGER.setLevel(logging.NOTSET)
