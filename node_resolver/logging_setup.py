"""Logging bootstrap for the node-resolve CLI.

Console output goes through Rich; an optional JSONL sink records every
resolution step for later inspection.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_PATH = os.environ.get("NODE_RESOLVER_LOG_PATH")
DEFAULT_LEVEL = os.environ.get("NODE_RESOLVER_LOG_LEVEL", "WARNING").upper()

PACKAGE_LOGGER = "node_resolver"

# LogRecord attributes that are not user-supplied extras
_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class JsonlHandler(logging.Handler):
    """Append one JSON object per record to a file."""

    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def format_record(self, record: logging.LogRecord) -> dict:
        payload = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="milliseconds"),
            "lvl": record.levelname,
            "schema": {"name": "node_resolver.log", "ver": "1.0.0"},
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_FIELDS:
                payload.setdefault(key, value)
        return payload

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = json.dumps(self.format_record(record), ensure_ascii=False, default=str)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except Exception:
            self.handleError(record)


def init_logging(
    level: str | None = None,
    log_file: str | Path | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Level name (default: NODE_RESOLVER_LOG_LEVEL or WARNING)
        log_file: JSONL sink path (default: NODE_RESOLVER_LOG_PATH, if set)
        console: Rich console for the stderr handler

    Returns:
        The configured package logger
    """
    level = (level or DEFAULT_LEVEL).upper()
    log_file = log_file or DEFAULT_PATH

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level, logging.WARNING))

    # Re-initialising replaces our handlers instead of stacking them
    for handler in list(logger.handlers):
        if isinstance(handler, JsonlHandler | RichHandler):
            logger.removeHandler(handler)

    logger.addHandler(RichHandler(console=console or Console(stderr=True), show_path=False))
    if log_file:
        logger.addHandler(JsonlHandler(log_file))
    return logger
