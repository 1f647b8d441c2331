# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for programs that parse with flagset.

The engine logs every alternative it discards at debug level on the `flagset`
logger: optional values found absent, `AnyOrder` rotations that failed, and
candidate groups that did not match. `setup_logging` routes that logger, and
only that logger, to the console and optionally to a file. With tracing on, the
console shows the whole backtracking path behind a rejected command line.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

from flagset.coerce import coerce_bool
from flagset.logger import logger as flagset_logger

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def program_name() -> str:
    """Name shown in usage lines when a declaration does not set one."""
    script = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""
    if script == "__main__.py":
        return "python -m flagset"
    return script or "flagset"


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    trace: bool | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the `flagset` logger.

    Handlers from a previous call are closed and replaced, and records do not
    propagate to the root logger, so the host program's logging is untouched.

    Args:
        mode (str | None): "cli" for rich console output, "json" for JSON lines.
            Defaults to the `FLAGSET_LOG_MODE` environment variable, then "cli".
        trace (bool | None): Show the backtracking debug records on the console.
            Defaults to the `FLAGSET_TRACE` environment variable, then off.
        log_filename (str | None): File receiving every record, traced or not.
        json_log_to_file (bool): Write the file as JSON lines instead of text.

    Returns:
        logging.Logger: The configured `flagset` logger.

    Raises:
        ValueError: If `mode` or `FLAGSET_TRACE` is not recognized.
    """
    mode = mode or os.getenv("FLAGSET_LOG_MODE") or "cli"
    if trace is None:
        trace = coerce_bool(os.getenv("FLAGSET_TRACE", "off"))

    console_handler = _console_handler(mode)
    console_handler.setLevel(logging.DEBUG if trace else logging.WARNING)

    for handler in flagset_logger.handlers:
        handler.close()
    flagset_logger.handlers.clear()
    flagset_logger.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        if json_log_to_file:
            file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            )
        flagset_logger.addHandler(file_handler)

    traced = trace or bool(log_filename)
    flagset_logger.setLevel(logging.DEBUG if traced else logging.WARNING)
    flagset_logger.propagate = False
    flagset_logger.debug("Logging initialized in '%s' mode (trace=%s).", mode, trace)
    return flagset_logger
