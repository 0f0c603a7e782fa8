"""
Logging Configuration
Sets up the "carebook" logger for the assistant.
"""
import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None,
                  console: Optional[Console] = None) -> logging.Logger:
    """
    Configures the logger for the 'carebook' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to save logs to a file.
        console: rich console to log through; defaults to stderr.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger("carebook")
    logger.setLevel(level)
    logger.propagate = False

    # avoid duplicate handlers when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    rich_handler = RichHandler(console=console or Console(stderr=True),
                               show_path=False, markup=False)
    rich_handler.setLevel(level)
    rich_handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="%H:%M:%S"))
    logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
