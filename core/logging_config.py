"""
Centralized logging configuration.
"""

import logging
import sys
from typing import Optional
from pathlib import Path


class CustomFormatter(logging.Formatter):
    """Custom formatter that adjusts format based on log level."""

    def format(self, record):
        if record.levelno >= logging.ERROR:
            # Include file and line for errors
            fmt = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
        elif record.levelno == logging.WARNING:
            fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
        else:
            fmt = "%(asctime)s %(levelname)s %(message)s"

        formatter = logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S")
        return formatter.format(record)


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the schematic application.

    Args:
        debug: If True, log renderer details at DEBUG level
        log_file: Optional file path to write logs to
    """
    level = logging.DEBUG if debug else logging.WARNING

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(level)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(CustomFormatter())
    root.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(CustomFormatter())
        root.addHandler(file_handler)

    # Prevent propagation for noisy libraries
    for name in ["streamlit", "PIL", "matplotlib", "fontTools"]:
        logging.getLogger(name).propagate = False
