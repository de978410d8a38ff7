"""Logging configuration shared by the command-line tools."""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Configure the root logger.

    Errors always go to stderr. INFO messages are shown only when verbose.

    Args:
        verbose: Whether to log informational messages
        log_file: Optional path of a file that receives the same records

    Returns:
        The configured root logger
    """
    root_logger = logging.getLogger()

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(logging.INFO if verbose else logging.ERROR)
    return root_logger
