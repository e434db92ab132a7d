"""
File-only logging setup.

stdout carries the MCP protocol, so nothing may be logged to the console.
Records go to a daily rotated JSON-lines file plus a separate error log.
"""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_DIR = Path.home() / ".shelly-mcp" / "logs"
LOG_FILE_NAME = "shelly-mcp.log"
ERROR_LOG_FILE_NAME = "error.log"
BACKUP_DAYS = 14
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonLogFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record):
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def setup_logging(
    level: Union[str, int] = "DEBUG", log_dir: Optional[Union[str, Path]] = None
) -> Path:
    """Configure the root logger and return the log directory in use."""
    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            numeric_level = logging.DEBUG
    else:
        numeric_level = level

    directory = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    directory.mkdir(parents=True, exist_ok=True)

    formatter = JsonLogFormatter(datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.handlers.TimedRotatingFileHandler(
        directory / LOG_FILE_NAME,
        when="midnight",
        backupCount=BACKUP_DAYS,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    error_handler = logging.FileHandler(directory / ERROR_LOG_FILE_NAME, encoding="utf-8")
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    root_logger.addHandler(error_handler)

    logging.getLogger(__name__).info(
        "Logging configured: level=%s dir=%s", logging.getLevelName(numeric_level), directory
    )
    return directory
