"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/logger.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Centralized logging system for SwissPayCode.
                Supports console/file output and component-specific levels.
                The library itself never calls setup_logging().
------------------------------------------------------------------------------
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

# Root logger for the entire package
APP_LOGGER_NAME = "swisspaycode"

# Default format for log messages
DEFAULT_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, str]] = None
) -> None:
    """
    Sets up the global logging configuration.

    Args:
        level: The default logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to a file where logs should be saved.
        component_levels: Dict mapping component names (e.g. 'encoder') to levels.
    """
    root = logging.getLogger(APP_LOGGER_NAME)

    # Remove existing handlers to avoid duplicates on re-setup
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    # 1. Console Handler (Stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # 3. Apply Component Overrides
    if component_levels:
        for component, cmp_level in component_levels.items():
            set_component_level(component, cmp_level)

def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger instance for a specific component.
    Namespaced under 'swisspaycode.<name>'.
    """
    if name == APP_LOGGER_NAME or name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")

def set_component_level(component: str, level: str) -> None:
    """
    Dynamically changes the log level for a specific component.
    """
    logger = get_logger(component)
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, int):
        logger.setLevel(numeric_level)
        logger.propagate = True

def log_payload(payload: str, reference_type: str) -> None:
    """
    Dumps an encoded payload line by line.
    Logged at DEBUG level on 'swisspaycode.encoder.payload'.
    """
    logger = get_logger("encoder.payload")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"=== PAYLOAD START ({reference_type}) ===")
        for index, line in enumerate(payload.split("\r\n"), start=1):
            logger.debug(f"{index:02d}: {line}")
        logger.debug("=== PAYLOAD END ===")
