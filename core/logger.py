"""Project-wide JSON logging for the hydration layer.

Every module logs through the ``hydrate`` logger (or a child such as
``hydrate.sdk``).  Records are written as one JSON object per line to stdout
and to the rotating ``logs/hydrate.log``.

The call and update context travels in ``extra``; the keys listed in
:data:`STRUCTURED_KEYS` are emitted right after the standard fields, in that
order, so log lines for the same update or API method line up::

    logger.debug("Hydrated update", extra={"update_id": 10, "variant": "message"})
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

LOGGER_NAME = "hydrate"
LOG_PATH = os.path.join("logs", "hydrate.log")

STRUCTURED_KEYS: tuple[str, ...] = ("update_id", "variant", "api_method", "shape", "error_code", "error")

_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """Serialise a record as one JSON line with the structured keys first."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "func_name": record.funcName,
        }
        for key in STRUCTURED_KEYS:
            if key in record.__dict__:
                entry[key] = record.__dict__[key]
        # Remaining extras (counts, ignored variants, ...) keep their call-site order.
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and key not in entry:
                entry[key] = value
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class HydrateLogger:
    """Access point for the shared ``hydrate`` logger.

    Handlers are attached once, on first use; :func:`set_level` is how
    ``config`` applies ``LOG_LEVEL`` to the logger and both handlers.
    """

    _logger: Optional[logging.Logger] = None

    @classmethod
    def get_logger(cls) -> logging.Logger:
        if cls._logger is None:
            cls._logger = cls._build()
        return cls._logger

    @classmethod
    def set_level(cls, level: int | str) -> None:
        logger = cls.get_logger()
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    @staticmethod
    def _build() -> logging.Logger:
        logger = logging.getLogger(LOGGER_NAME)
        if logger.handlers:
            return logger
        logger.setLevel(logging.INFO)
        formatter = _JsonFormatter()

        os.makedirs(os.path.dirname(LOG_PATH), exist_ok=True)
        handlers = (
            logging.StreamHandler(),
            RotatingFileHandler(LOG_PATH, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"),
        )
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        return logger
