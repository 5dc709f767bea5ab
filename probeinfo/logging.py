"""Centralized logging configuration for probeinfo"""

import logging
from datetime import datetime

from rich.logging import RichHandler

from . import config

def configure_logging(log_level: str = config.LOG_LEVEL, file_logging: bool = False) -> None:
    """Central logging configuration for all modules"""
    logger = logging.getLogger("probeinfo")
    logger.setLevel(log_level.upper())

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # Rich console handler
    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if file_logging:
        config.LOG_DIR.mkdir(parents=True, exist_ok=True)
        log_file = config.LOG_DIR / f"probeinfo_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        file_handler = logging.FileHandler(log_file)
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
        logger.debug("Log file: %s", log_file)

    # Capture warnings
    logging.captureWarnings(True)
