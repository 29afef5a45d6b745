"""
MedInfer — Logging setup

Modules log through logging.getLogger(__name__); handlers are attached once
here, from LoggingConfig.
"""

import logging
from typing import Optional

from medinfer.config import LoggingConfig


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the "medinfer" logger: console output and an optional file.

    Safe to call repeatedly; existing handlers are replaced.
    """
    config = config or LoggingConfig()
    level = getattr(logging, str(getattr(config.level, "value", config.level)).upper(), logging.INFO)

    logger = logging.getLogger("medinfer")
    logger.handlers.clear()
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(config.format)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
