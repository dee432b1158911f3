"""Logging configuration for SpecFit UI.

Everything is routed through the ``specfit`` logger. Until
:func:`setup_logging` is called with a log file or ``verbose=True`` the
helpers below do nothing.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from specfit.ui.console import VERSION, console

LOGGER_NAME = "specfit"

# Module-level logger (configured by setup_logging)
_logger: logging.Logger | None = None


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def get_logger() -> logging.Logger | None:
    """Return the configured logger, or None when logging is disabled."""
    return _logger


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    level: int = logging.INFO,
    log_format: str | None = None,
) -> None:
    """Configure logging for SpecFit.

    Args:
        log_file: File receiving the session log. JSON lines are written when
            the suffix is ``.json`` or ``log_format`` is ``"json"``.
        verbose: Also echo log records to the console through Rich.
        level: Logging level for all handlers.
        log_format: ``"text"`` or ``"json"``; inferred from the suffix if None.
    """
    global _logger

    if log_file is None and not verbose:
        _logger = None
        return

    _logger = logging.getLogger(LOGGER_NAME)
    _logger.setLevel(level)
    _logger.propagate = False
    for handler in _logger.handlers[:]:
        handler.close()
        _logger.removeHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)

        use_json = log_format == "json" or (log_format is None and log_file.suffix == ".json")
        if use_json:
            file_formatter: logging.Formatter = JSONFormatter()
        else:
            file_formatter = logging.Formatter(
                "%(asctime)s | %(levelname)-5s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        file_handler.setFormatter(file_formatter)
        _logger.addHandler(file_handler)

    if verbose:
        console_handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
            markup=False,
        )
        console_handler.setLevel(level)
        _logger.addHandler(console_handler)

    _logger.info("━" * 60)
    _logger.info("SpecFit v%s - Session Started", VERSION)
    _logger.info("━" * 60)
    _logger.info("Command: %s", " ".join(sys.argv))
    _logger.info("Working directory: %s", Path.cwd())
    _logger.info("Python: %s | Platform: %s", sys.version.split()[0], sys.platform)


def log(message: str, level: str = "info") -> None:
    """Log a message (if logging is enabled)."""
    if _logger is None:
        return

    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    _logger.log(level_map.get(level.lower(), logging.INFO), message)


def log_section(title: str) -> None:
    """Log a section header."""
    if _logger is None:
        return

    _logger.info("=== %s ===", title.upper())


def log_dict(data: dict[str, object], indent: str = "  ") -> None:
    """Log a dictionary as key-value pairs."""
    if _logger is None:
        return

    for key, value in data.items():
        _logger.info("%s- %s: %s", indent, key, value)


def close_logging() -> None:
    """Close logging and finalize the log file."""
    global _logger

    if _logger is None:
        return

    _logger.info("━" * 60)
    _logger.info("SpecFit Session Completed")
    _logger.info("━" * 60)

    for handler in _logger.handlers[:]:
        handler.close()
        _logger.removeHandler(handler)
    _logger = None


__all__ = [
    "JSONFormatter",
    "close_logging",
    "get_logger",
    "log",
    "log_dict",
    "log_section",
    "setup_logging",
]
