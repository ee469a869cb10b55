import json
import logging
import sys
from logging import Logger
from logging.handlers import RotatingFileHandler
from typing import Optional

# Extra fields the recognizer attaches to its verdict records.
RECORD_FIELDS = ("word_length", "accepted")


class JsonFormatter(logging.Formatter):
    """JSON line formatter for recognizer logs.

    Each line carries time, level, name and message, plus word_length and accepted
    when the record was logged with them as extra fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for field in RECORD_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logger(name: str, log_file: Optional[str] = None, level: str = "WARNING", json_lines: bool = False) -> Logger:
    """
    Set up a logger writing to a rotating file, or to stderr when no file is given.

    Only adds a handler once per logger name; the logger level is (re)applied on each call.
    Raises OSError when log_file cannot be opened.
    """
    logger = logging.getLogger(name)
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if not logger.handlers:
        if log_file:
            handler = RotatingFileHandler(
                log_file,
                maxBytes=2 * 1024 * 1024,
                backupCount=2,
                encoding="utf-8",
            )
        else:
            handler = logging.StreamHandler(sys.stderr)

        if json_lines:
            formatter = JsonFormatter(datefmt="%Y-%m-%d %H:%M:%S")
        else:
            formatter = logging.Formatter(
                '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(log_level)
    return logger
