"""Logging setup for the command line driver.

Printed results own stdout, so log records go to stderr unless a file is given.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Configure the root logger once; an unknown level name falls back to WARNING."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    if log_file:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, filename=log_file)
    else:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
