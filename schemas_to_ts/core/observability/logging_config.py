"""
Logging configuration — central setup for the CLI entrypoint.

main.py calls ``setup_logging`` once at startup and again after the
plugin config is loaded, so a ``logLevel`` in schemas-to-ts.yml takes
effect.  Handlers go on the ``schemas_to_ts`` package logger, not the
root logger: a host process embedding the output manager keeps its own
logging untouched.

Levels are resolved in precedence order:
    CLI flag  >  STS_LOG_LEVEL env var  >  config log_level  >  WARNING

Optional file output via STS_LOG_FILE / STS_LOG_FILE_LEVEL env vars.
"""

from __future__ import annotations

import logging
import os
import sys

from schemas_to_ts.core.errors import PLUGIN_TAG

ENV_LOG_LEVEL = "STS_LOG_LEVEL"
ENV_LOG_FILE = "STS_LOG_FILE"
ENV_LOG_FILE_LEVEL = "STS_LOG_FILE_LEVEL"

PACKAGE_LOGGER = "schemas_to_ts"

# ── Format strings ──────────────────────────────────────────────

# Console, keyed by the most verbose level each applies to.
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, f"{PLUGIN_TAG}: %(message)s", None),
)

# File output — always full detail, one run per process id
_FMT_FILE = "%(asctime)s [%(process)d] %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Configure the package logger; safe to call more than once.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Optional separate level for the log file.
            Defaults to the same as ``level``.

    Returns:
        The configured ``schemas_to_ts`` logger.
    """
    numeric_level = parse_level(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(numeric_level))

    # Logger level = minimum of console and file levels
    effective_level = numeric_level
    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        logger.addHandler(fh)

    logger.setLevel(effective_level)
    logger.propagate = False
    return logger


def _console_handler(numeric_level: int) -> logging.Handler:
    fmt, datefmt = next(
        (fmt, datefmt) for threshold, fmt, datefmt in _CONSOLE_FORMATS
        if numeric_level <= threshold
    )
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return console


def resolve_level(flag_level: str | None, config_level: str | None = None) -> str:
    """Pick the console level name following the precedence above."""
    for candidate in (flag_level, os.environ.get(ENV_LOG_LEVEL), config_level):
        if candidate and _is_level_name(candidate):
            return candidate.upper()
    return "WARNING"


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant (WARNING when unknown)."""
    if level and _is_level_name(level):
        return logging.getLevelName(level.upper())
    return logging.WARNING


def _is_level_name(name: str) -> bool:
    return isinstance(logging.getLevelName(name.upper()), int)
