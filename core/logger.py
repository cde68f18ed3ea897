"""BotApiLogger: Singleton JSON logger for the ``botapi`` package.

Configures the ``botapi`` logger once with a structured JSON formatter on
stdout and, when ``BOTAPI_LOG_FILE`` is set, a rotating file handler.  Library
modules log through children such as ``botapi.client`` and inherit these
handlers by propagation.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional


class _JsonFormatter(logging.Formatter):
    """Format every log record as a single-line JSON object.

    Standard fields (timestamp, level, logger, message, module, func_name)
    are always present.  Any *extra* key-value pairs passed via the ``extra``
    parameter of a logging call are merged into the JSON object, so callers
    can attach call context such as ``api_endpoint`` or ``status_code``.

    Example::

        logger.warning(
            "Telegram API error response",
            extra={"api_endpoint": "sendMessage", "status_code": 400},
        )

    Produces::

        {"timestamp": "…", "level": "WARNING", …, "api_endpoint": "sendMessage", "status_code": 400}
    """

    # Keys that belong to the standard LogRecord; everything else is extra.
    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    )))

    def format(self, record: logging.LogRecord) -> str:
        """Serialize *record* to a JSON string."""
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }

        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class BotApiLogger:
    """Singleton logger with a console handler and an optional rotating file.

    Usage::

        from core.logger import BotApiLogger

        logger = BotApiLogger.get_logger()
        logger.info("Transport built")
    """

    _instance: Optional["BotApiLogger"] = None
    _logger: Optional[logging.Logger] = None

    LOGGER_NAME: str = "botapi"

    # Rotation settings
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO, log_file: Optional[str] = None) -> "BotApiLogger":
        """Ensure only one instance is ever created (Singleton)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, log_file)
        return cls._instance

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_logger(self, level: int, log_file: Optional[str]) -> None:
        """Create the underlying :class:`logging.Logger` and attach handlers."""
        self._logger = logging.getLogger(self.LOGGER_NAME)
        self._logger.setLevel(level)

        # Avoid duplicate handlers if the module is reloaded.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=self._MAX_BYTES,
                backupCount=self._BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def get_logger(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
        """Return the shared ``botapi`` :class:`logging.Logger`.

        Creates the singleton on first call; subsequent calls return the
        same logger regardless of the *level* and *log_file* arguments.
        """
        instance = BotApiLogger(level, log_file)
        assert instance._logger is not None  # guaranteed by __new__
        return instance._logger
