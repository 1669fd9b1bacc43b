"""
Logging configuration for the CLI and the editor server.

main.py calls configure_from_cli() once per invocation; library modules
only ever do ``logger = logging.getLogger(__name__)``.

Console level, highest precedence first:
    --debug / --verbose / --quiet  >  $CHE_LOG_LEVEL  >  WARNING

$CHE_LOG_FILE adds a file handler, at $CHE_LOG_FILE_LEVEL if set.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "CHE_LOG_LEVEL"
ENV_FILE = "CHE_LOG_FILE"
ENV_FILE_LEVEL = "CHE_LOG_FILE_LEVEL"

# (max level, format, datefmt); the first row at or above the console level wins
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(message)s", None),
)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# The Flask dev server logs every request at INFO
_NOISY_LOGGERS = ("werkzeug", "urllib3")


def parse_level(level: str | None) -> int:
    """Level name to its numeric value. Unknown or empty names give WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING


def _console_formatter(numeric_level: int) -> logging.Formatter:
    for threshold, fmt, datefmt in _CONSOLE_FORMATS:
        if numeric_level <= threshold:
            return logging.Formatter(fmt, datefmt=datefmt)
    return logging.Formatter("%(message)s")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Replace the root logger's handlers with a stderr handler and an
    optional file handler.

    Args:
        level: Console level name.
        log_file: Path of an extra log file.
        log_file_level: Level for ``log_file``; the console level if None.
        quiet_third_party: Pin werkzeug and urllib3 at WARNING unless the
            console is at DEBUG.
    """
    console_level = parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else console_level
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def configure_from_cli(debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Resolve the console level from CLI flags and the environment, then
    call setup_logging()."""
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get(ENV_LEVEL, "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
        quiet_third_party=not debug,
    )
