"""Logging for the sildish CLI and library.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers; the CLI calls :func:`setup_logging` once per run.
"""

import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import IO, Any


PACKAGE_LOGGER = "sildish"

# Attribute that log_with_context stores its fields under
CONTEXT_ATTR = "sildish_context"


def _plain(value: Any) -> Any:
    """Reduce a context value to something json.dumps accepts."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return str(value)
    return value


def _show_glyphs(text: str) -> str:
    """Spell Private Use Area characters as U+XXXX for terminals without the font."""
    return "".join(
        f"<U+{ord(char):04X}>" if 0xE000 <= ord(char) <= 0xF8FF else char for char in text
    )


class JSONFormatter(logging.Formatter):
    """One JSON object per record, context fields inlined."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, CONTEXT_ATTR, {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class PrettyFormatter(logging.Formatter):
    """Terminal format; context fields are appended as key=value pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = getattr(record, CONTEXT_ATTR, None)
        if context:
            text += " (" + ", ".join(f"{key}={value}" for key, value in context.items()) + ")"
        return _show_glyphs(text)


def setup_logging(
    level: str = "INFO",
    format_type: str = "pretty",
    log_file: Path | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Console output goes to stderr by default, leaving stdout to
    transliterated text.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "pretty" or "json" for the console
        log_file: Optional log file, always JSON lines
        stream: Console stream (default: sys.stderr)

    Returns:
        The "sildish" logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()
    logger.propagate = False

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setFormatter(JSONFormatter() if format_type == "json" else PrettyFormatter())
    logger.addHandler(console)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any,
) -> None:
    """
    Log `message` with structured fields, e.g. a path and a line count.

    Dataclasses (such as PhonemeData), enums and paths are reduced to
    JSON-friendly values first.
    """
    fields = {key: _plain(value) for key, value in context.items()}
    log_func = getattr(logger, level.lower())
    log_func(message, extra={CONTEXT_ATTR: fields})
