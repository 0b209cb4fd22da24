from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from enum import Enum
from typing import List


class LogTarget(str, Enum):
    STDOUT = "stdout"
    SYSLOG = "syslog"
    STDERR = "stderr"


LOG_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

# four letter level names keep the messages aligned
for level, name in (
    (logging.CRITICAL, "CRIT"),
    (logging.ERROR, "ERRO"),
    (logging.WARNING, "WARN"),
    (logging.INFO, "INFO"),
    (logging.DEBUG, "DEBG"),
):
    logging.addLevelName(level, name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


NO_PREFIX_FORMAT_ENV_VAR = "JSONPTR_LOGGING_NO_PREFIX_FORMAT"

BASIC_FORMAT = "%(name)s: %(message)s"
NO_PREFIX_FORMAT = f"[%(levelname)s] {BASIC_FORMAT}"


def get_formatter(service: str, target: LogTarget) -> logging.Formatter:
    """
    Syslog adds its own timestamp and process prefix, other targets get it from the formatter.

    The prefix is left out when JSONPTR_LOGGING_NO_PREFIX_FORMAT is 'true'.
    """

    if target == LogTarget.SYSLOG:
        return logging.Formatter(BASIC_FORMAT)
    if os.environ.get(NO_PREFIX_FORMAT_ENV_VAR) == "true":
        return logging.Formatter(NO_PREFIX_FORMAT)
    return logging.Formatter(f"%(asctime)s {service}[%(process)d]: {NO_PREFIX_FORMAT}")


def get_logging_handler(target: LogTarget) -> logging.Handler:
    if target == LogTarget.SYSLOG:
        return logging.handlers.SysLogHandler(address="/dev/log")
    if target == LogTarget.STDERR:
        return logging.StreamHandler(sys.stderr)
    return logging.StreamHandler(sys.stdout)


# handlers installed by start_logging(), the root logger holds the last one
_installed_handlers: List[logging.Handler] = []


def stop_logging() -> None:
    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()


def start_logging(service: str, loglevel: str, logtarget: str) -> None:
    """Send log messages of the given level and above to the target, replacing a previous setup."""

    if loglevel not in LOG_LEVELS:
        raise ValueError(f"unknown log level '{loglevel}', expected one of: {', '.join(LOG_LEVELS)}")

    level = LOG_LEVELS[loglevel]
    target = LogTarget(logtarget)

    handler = get_logging_handler(target)
    handler.setFormatter(get_formatter(service, target))
    buffered = logging.handlers.MemoryHandler(10_000, level, handler)

    stop_logging()
    _installed_handlers.extend([handler, buffered])

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(buffered)
