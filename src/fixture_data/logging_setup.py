# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Logging setup for fixture data tooling.

Log calls attach structured context through fixture_fields():

    logger.debug("Exported fixture", extra=fixture_fields(fixture="users", records=4))

The JSON file log merges those fields into each line; the console log appends
them as key=value pairs.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

# LogRecord attribute carrying structured context
FIELDS_ATTRIBUTE = "extra_fields"

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def fixture_fields(**fields: Any) -> Dict[str, Dict[str, Any]]:
    """Build the ``extra`` mapping for a log call.

    Returns:
        Mapping suitable for ``logger.<level>(msg, extra=...)``.
    """
    return {FIELDS_ATTRIBUTE: fields}


def _record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    fields = getattr(record, FIELDS_ATTRIBUTE, None)
    return dict(fields) if isinstance(fields, dict) else {}


class StructuredFormatter(logging.Formatter):
    """Formats each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(_record_fields(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter that appends structured fields as key=value."""

    def __init__(self) -> None:
        super().__init__(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        fields = _record_fields(record)
        if fields:
            text += " " + " ".join(f"{key}={value}" for key, value in fields.items())
        return text


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: int = logging.INFO,
    console_output: bool = True,
) -> Path:
    """Route the root logger to a dated JSON log file.

    Args:
        log_dir: Directory for log files. If None, uses .fixture_data_logs/
        log_level: Logging level (default: INFO)
        console_output: Also log to stderr. stdout is left to command output.

    Returns:
        Path of the log file in use.
    """
    if log_dir is None:
        log_dir = Path.cwd() / ".fixture_data_logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    log_file = log_dir / f"fixture_data_{datetime.now(timezone.utc).strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(ConsoleFormatter())
        root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(
        f"Logging initialized. Log directory: {log_dir}",
        extra=fixture_fields(log_file=str(log_file)),
    )
    return log_file
