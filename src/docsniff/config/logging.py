# topmark:header:start
#
#   project      : DocSniff
#   file         : logging.py
#   file_relpath : src/docsniff/config/logging.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Custom DocSniff logging with TRACE logging.

This module extends the standard logging module with DocSniff-specific features,
including a custom TRACE level (used by the byte-level probes), a specialized
logger class, and colored output on stderr (rendered by `rich`).
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Final, cast

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Mapping

# Define TRACE_LEVEL as a module-level constant
TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "DOCSNIFF_LOG_LEVEL"


class DocsniffLogger(logging.Logger):
    """Custom logger class for DocSniff with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    # Expose TRACE_LEVEL as logging.TRACE
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(DocsniffLogger)


LOG_FORMAT = "%(message)s"
DEBUG_LOG_FORMAT = "[%(name)s] [%(funcName)s] %(message)s"


_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors DOCSNIFF_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified, so library use stays silent.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for old_handler in root_logger.handlers[:]:
        root_logger.removeHandler(old_handler)

    # DocSniff prints results on stdout; keep diagnostics on stderr
    handler: logging.Handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=level < logging.INFO,
        markup=False,
        rich_tracebacks=True,
    )
    fmt: str = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(logging.Formatter(fmt))
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> DocsniffLogger:
    """Retrieve a DocsniffLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        DocsniffLogger: A DocsniffLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("DocsniffLogger", logger)
