"""
Logging setup for the cc-license command line.

The library itself only emits records through module loggers
(logging.getLogger(__name__)) and never installs handlers. The CLI
calls configure_logging() to route them to stderr, either as
human-readable lines or as one JSON object per line, and optionally
to a JSON log file.
"""
import json
import logging
import sys
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

ROOT_LOGGER_NAME = "cc_license"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# LogRecord attributes that are not user-supplied `extra` data
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


@dataclass
class LogEntry:
    """Structured log entry."""
    timestamp: str
    level: str
    message: str
    logger: Optional[str] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: logging.LogRecord, timestamp: str) -> "LogEntry":
        exc = record.exc_info[1] if record.exc_info else None
        return cls(
            timestamp=timestamp,
            level=record.levelname,
            message=record.getMessage(),
            logger=record.name,
            error=str(exc) if exc else None,
            error_type=type(exc).__name__ if exc else None,
            extra={k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS},
        )

    def to_json(self) -> str:
        """Convert to JSON string, dropping empty fields."""
        data = {k: v for k, v in asdict(self).items() if v is not None}
        if not data.get("extra"):
            data.pop("extra", None)
        return json.dumps(data, default=str)

    def to_human(self) -> str:
        """Convert to human-readable string."""
        parts = [f"[{self.timestamp}]", f"[{self.level}]", self.message]
        if self.extra:
            parts.append(" ".join(f"{k}={v}" for k, v in sorted(self.extra.items())))
        if self.error:
            parts.append(f"ERROR: {self.error}")
        return " ".join(parts)


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        return LogEntry.from_record(record, timestamp).to_json()


class HumanFormatter(logging.Formatter):
    """Short single-line format for terminals."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        return LogEntry.from_record(record, timestamp).to_human()


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: One of LOG_LEVELS
        json_output: Emit JSON lines on the console instead of plain text
        log_file: Also write every record, as JSON, to this file
        stream: Console stream (default: stderr)

    Returns:
        The configured `cc_license` logger

    Raises:
        ValueError: If level is not a known level name
    """
    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    log_level = getattr(logging, level_name)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file else log_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JSONFormatter() if json_output else HumanFormatter())
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger
