"""Event logging"""

from __future__ import annotations

import logging
import sys
import threading
from logging.handlers import RotatingFileHandler


def init_log(
    logfile: str | None = None,
    level: int = logging.WARNING,
    debug: bool = False,
) -> None:
    """Initializes event logging for the package.

    Args:
        logfile: The path of the log file. If ``None``, records are written to
          standard error instead.
        level: The logging level.
        debug: Whether to log at debug level and include thread and function names
          in records.

    Records from the whole ``term_spin`` logger hierarchy are handled. A previously
    initialized handler, if any, is replaced.
    """
    global DEBUG, _handler

    handler: logging.Handler
    if logfile:
        handler = RotatingFileHandler(
            logfile,
            maxBytes=2**20,  # 1 MiB
            backupCount=1,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)

    DEBUG = debug = debug or level == logging.DEBUG
    if debug:
        level = logging.DEBUG

    FORMAT = (
        "({process}) ({asctime}) "
        + "{threadName}: " * debug
        + "[{levelname}] {name}: "
        + "{funcName}: " * debug
        + "{message}"
    )
    handler.setFormatter(logging.Formatter(FORMAT, style="{"))

    if _handler:
        _package_logger.removeHandler(_handler)
        _handler.close()
    _package_logger.addHandler(handler)
    _package_logger.setLevel(level)
    _handler = handler

    _logger.info(f"Logging level set to {logging.getLevelName(level)}")


def log_exception(msg: str, logger: logging.Logger) -> None:
    """Reports an error with the exception reponsible

    NOTE: Should be called from within an exception handler
    i.e from (also possibly in a nested context) within an except or finally clause.
    """
    if DEBUG:
        logger.exception(f"{msg} due to:", stacklevel=2)
    else:
        exc_type, exc, _ = sys.exc_info()
        logger.error(
            f"{msg} due to: ({exc_type.__module__}.{exc_type.__qualname__}) {exc}"
            if exc_type
            else msg,
            stacklevel=2,
        )


class Thread(threading.Thread):
    """A thread with integration into the logging system

    An exception raised by the target ends the thread, is logged and is kept in
    :py:attr:`exception`.
    """

    exception: Exception | None = None
    """The exception that ended the thread, if any"""

    def run(self) -> None:
        _logger.debug(f"{self.name} started")
        try:
            super().run()
        except Exception as e:
            self.exception = e
            log_exception(f"{self.name} was aborted", _logger)
        else:
            _logger.debug(f"{self.name} exited")


# Silent unless initialized, as a library should be.
_package_logger = logging.getLogger("term_spin")
_package_logger.addHandler(logging.NullHandler())

_logger = logging.getLogger(__name__)
_handler: logging.Handler | None = None

DEBUG = False
