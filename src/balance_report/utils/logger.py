"""
Unified logging for the report - no duplicate handlers.

The report itself goes to stdout, so console logging is written to stderr.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_SIZE_MB = 10
BACKUP_COUNT = 5

# Chatty transport loggers pulled in by solana-py
NOISY_LOGGERS = ("httpx", "httpcore")

_loggers: Dict[str, logging.Logger] = {}
_file_handler_added = False


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger."""
    if name in _loggers:
        return _loggers[name]
    logger = logging.getLogger(name)
    _loggers[name] = logger
    return logger


def parse_level(level: str | int) -> int:
    """Turn 'debug' / 'INFO' / 20 into a logging level."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_console_logging(level: int = logging.INFO) -> None:
    """Set up console logging on stderr."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Check if already exists
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "stream", None) is sys.stderr:
            handler.setLevel(level)
            return

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def setup_file_logging(
    filename: str,
    level: int = logging.INFO,
    use_rotation: bool = True
) -> Path:
    """Set up file logging - PREVENTS DUPLICATES."""
    global _file_handler_added

    log_path = Path(filename)
    if _file_handler_added:
        return log_path

    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    if use_rotation:
        file_handler = logging.handlers.RotatingFileHandler(
            str(log_path),
            maxBytes=MAX_LOG_SIZE_MB * 1024 * 1024,
            backupCount=BACKUP_COUNT,
            encoding='utf-8'
        )
    else:
        file_handler = logging.FileHandler(str(log_path), encoding='utf-8')

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logging.getLogger().addHandler(file_handler)

    _file_handler_added = True
    return log_path


def quiet_noisy_loggers(level: int = logging.WARNING) -> None:
    """Disable verbose httpx logging."""
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level)


def setup_logging(level: str | int = "INFO", log_file: Optional[str] = None) -> None:
    """Console logging, optional rotating file, quiet transport loggers."""
    lvl = parse_level(level)
    setup_console_logging(lvl)
    if log_file:
        setup_file_logging(log_file, lvl)
    quiet_noisy_loggers()
