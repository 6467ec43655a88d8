# -*- coding: utf-8 -*-
"""
Logging configuration for the bootstrap sequencer.

Three console formats are available:
- ``color``: ``[timestamp] [LEVEL] message`` with ANSI colors per level
- ``plain``: the same layout without colors
- ``json``: one JSON object per record, for log shippers

Records below ERROR are written to stdout, ERROR and above to stderr.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from bootstrap.config_models import SYMBOLS_DEFAULT

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_LOG_FORMAT = "{log_prefix}[%(asctime)s] [%(levelname)s] %(message)s"

ANSI_RESET = "\033[0m"
LEVEL_COLORS: Dict[int, str] = {
    logging.INFO: "\033[0;32m",
    logging.WARNING: "\033[0;33m",
    logging.ERROR: "\033[0;31m",
    logging.CRITICAL: "\033[0;31m",
}
DEFAULT_COLOR = "\033[0;37m"

# LogRecord attributes that are not user-supplied "extra" fields.
_RESERVED_RECORD_KEYS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime", "symbol"}


class SymbolFormatter(logging.Formatter):
    """
    A formatter that exposes a per-level ``%(symbol)s`` and shortens WARNING
    to WARN, matching the shell log layout.
    """

    def __init__(self, fmt=None, datefmt=None, symbols=None):
        super().__init__(fmt, datefmt)
        self.symbols = symbols or SYMBOLS_DEFAULT

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.DEBUG:
            record.symbol = self.symbols.get("debug", "🐛")
        elif record.levelno == logging.INFO:
            record.symbol = self.symbols.get("info", "ℹ️")
        elif record.levelno == logging.WARNING:
            record.symbol = self.symbols.get("warning", "⚠️")
        elif record.levelno == logging.ERROR:
            record.symbol = self.symbols.get("error", "❌")
        elif record.levelno == logging.CRITICAL:
            record.symbol = self.symbols.get("critical", "🔥")
        else:
            record.symbol = ""

        original_levelname = record.levelname
        if record.levelno == logging.WARNING:
            record.levelname = "WARN"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class ColorFormatter(SymbolFormatter):
    """Wraps each formatted record in the color of its level."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno, DEFAULT_COLOR)
        return f"{color}{super().format(record)}{ANSI_RESET}"


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON with a consistent structure including
    timestamp, level, logger, message and any extra fields.
    """

    def __init__(self, service_name: str = "autogpt-bootstrap"):
        super().__init__()
        self.service_name = service_name
        self.hostname = os.environ.get("HOSTNAME", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "process": record.process,
            "hostname": self.hostname,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_KEYS
        }
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class _BelowLevelFilter(logging.Filter):
    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def build_formatter(
    log_format: str,
    log_prefix: Optional[str] = None,
    symbols: Optional[Dict[str, str]] = None,
) -> logging.Formatter:
    """Return the formatter for one of ``color``, ``plain`` or ``json``."""
    if log_format == "json":
        return JSONFormatter()

    actual_prefix = (
        (log_prefix.strip() + " ")
        if log_prefix and log_prefix.strip()
        else ""
    )
    # Escape % in user-supplied prefixes so they survive %-style formatting.
    fmt = PLAIN_LOG_FORMAT.format(log_prefix=actual_prefix.replace("%", "%%"))
    if log_format == "color":
        return ColorFormatter(fmt=fmt, datefmt=DATE_FORMAT, symbols=symbols)
    return SymbolFormatter(fmt=fmt, datefmt=DATE_FORMAT, symbols=symbols)


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    log_format: str = "color",
    log_prefix: Optional[str] = None,
    symbols: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configures the root logger for a bootstrap run.

    Parameters:
    log_level: str
        Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names fall back to INFO.
    log_file: Optional[str]
        If given, every record is also appended to this file, uncolored.
    log_format: str
        One of ``color``, ``plain`` or ``json``.
    log_prefix: Optional[str]
        Text prepended to every console line.
    symbols: Optional[Dict[str, str]]
        Symbol table for ``%(symbol)s``.
    """
    numeric_level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    formatter = build_formatter(log_format, log_prefix, symbols)
    handlers: List[logging.Handler] = []

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowLevelFilter(logging.ERROR))
    stdout_handler.setFormatter(formatter)
    handlers.append(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(formatter)
    handlers.append(stderr_handler)

    if log_file:
        try:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file_path, mode="a")
            file_handler.setFormatter(
                build_formatter(
                    "json" if log_format == "json" else "plain",
                    log_prefix,
                    symbols,
                )
            )
            handlers.append(file_handler)
        except OSError as e:
            print(
                f"Warning: Could not create file handler for log file {log_file}: {e}",
                file=sys.stderr,
            )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        f"Logging configured. Level: {logging.getLevelName(numeric_level)}. Format: '{log_format}'"
    )
