"""
This module defines the configuration for a deck evaluation.
"""

import logging
from dataclasses import dataclass

_VALID_LOG_LEVELS = (
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL,
)


@dataclass(frozen=True)
class EvaluationConfig:
    """
    Holds the user-defined parameters for evaluating a deck.

    Attributes:
        enable_logging (bool): Whether to write per-card evaluation logs to
                               file. Defaults to False.
        log_level (int): The logging level to use when logging is enabled.
                         Defaults to logging.INFO.
        log_dir (str): Directory the log files are written to.
                       Defaults to "logs".
    """

    enable_logging: bool = False
    log_level: int = 20
    log_dir: str = "logs"

    def __post_init__(self):
        """Validate parameters after initialization."""
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {_VALID_LOG_LEVELS}, got {self.log_level}."
            )
        if not self.log_dir:
            raise ValueError("Log directory must not be empty.")
