"""Process-wide logging setup.

File handler: everything at the configured level, rotated.
Console handler: only warnings and errors so the terminal view stays readable.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from .configuration import LoggingConfig

log_level_map = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Install file and console handlers on the root logger.

    Calling it again replaces the handlers instead of stacking duplicates.
    """
    file_log_level = log_level_map.get(config.level.upper(), logging.INFO)
    console_log_level = log_level_map.get(config.console_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(min(file_log_level, console_log_level))
    root_logger.handlers.clear()

    if config.log_file:
        log_file_path = Path(config.log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_log_level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured: file={config.log_file}, console={config.console_level.upper()}+")
    return root_logger
