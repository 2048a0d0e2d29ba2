"""
RF Signal - Logging Configuration

Library modules only create module loggers and emit DEBUG records carrying
sample counts and index bounds in ``extra``. Handlers are attached once by the
application, either from the ``logging`` section of a SignalAnalysisConfig
(what the ``rf-signal`` CLI does) or with explicit arguments.

Usage:
    from rf_signal.config import SignalAnalysisConfig
    from rf_signal.core.logging_config import configure_logging

    config = SignalAnalysisConfig.from_yaml("analysis.yaml")
    configure_logging(config.logging)

    # or, without a config file
    setup_logging(level="DEBUG", log_file="rf_signal.log")
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path

from rf_signal.config.defaults import DEFAULT_LOG_LEVEL
from rf_signal.config.schema import LoggingConfig

# =============================================================================
# Custom Formatters
# =============================================================================

# Attributes every LogRecord carries; anything else came in through extra={}
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "message",
        "taskName",
    }
)


class StructuredFormatter(logging.Formatter):
    """
    JSON structured log formatter.
    Emits timestamp, level, logger name, message and any extra fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.pathname:
            log_entry["file"] = f"{record.pathname}:{record.lineno}"

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name with ANSI codes."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


# =============================================================================
# Logger Setup Functions
# =============================================================================

_CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_initialized = False


def _to_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logging(
    level: str | int = DEFAULT_LOG_LEVEL,
    log_file: str | None = None,
    structured: bool = False,
    colored: bool = True,
    max_bytes: int = 10_000_000,  # 10 MB
    backup_count: int = 5,
    force: bool = False,
) -> None:
    """
    Initialize logging for the application.

    Subsequent calls are ignored unless ``force`` is set.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a rotating JSON log file
        structured: Use JSON structured format on the console
        colored: Use colored console output when attached to a TTY
        max_bytes: Max size of log file before rotation
        backup_count: Number of backup log files to keep
        force: Reconfigure even if logging was already initialized
    """
    global _initialized
    if _initialized and not force:
        return

    level = _to_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    if structured:
        console_handler.setFormatter(StructuredFormatter())
    elif colored and sys.stderr.isatty():
        console_handler.setFormatter(ColoredFormatter(_CONSOLE_FORMAT, _DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, _DATE_FORMAT))

    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(level)
        # File logs are always structured
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    _initialized = True

    root_logger.debug(
        "Logging initialized",
        extra={
            "log_level": logging.getLevelName(level),
            "log_file": log_file,
            "structured": structured,
        },
    )


def configure_logging(config: LoggingConfig, force: bool = False) -> None:
    """
    Initialize logging from the ``logging`` section of an analysis config.

    Args:
        config: Level, optional rotating log file and console format.
        force: Reconfigure even if logging was already initialized
    """
    setup_logging(
        level=config.level,
        log_file=config.log_file,
        structured=config.structured,
        force=force,
    )

def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_level(logger_name: str, level: str | int) -> None:
    """
    Set the logging level for a specific logger at runtime.

    Args:
        logger_name: Name of the logger to configure
        level: New logging level
    """
    logging.getLogger(logger_name).setLevel(_to_level(level))
