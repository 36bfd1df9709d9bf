"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Consistency: every geometric predicate (point equality, null vector,
   point-on-plane) reads the same tolerance from here, so degenerate cases
   are classified the same way everywhere.
2. Logging defaults: the CLI resolves its log level from here, with an
   environment variable override.

Exports:
    TOLERANCE (float): Fixed threshold for all equality/null/on-plane checks.
    LOG_LEVEL_ENV_VAR (str): Environment variable overriding the log level.
    DEFAULT_LOG_LEVEL (str): Log level used when nothing else is given.
"""
import logging
import os

# Geometric tolerance. Deliberately fixed, not user-configurable.
TOLERANCE: float = 1e-4

LOG_LEVEL_ENV_VAR: str = "SEGMENTDISTANCE_LOG_LEVEL"
DEFAULT_LOG_LEVEL: str = "WARNING"
LOG_LEVEL_CHOICES: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")

LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'


def get_log_level(name: str | None = None) -> int:
    """
    Resolve a logging level name to its numeric value.

    Args:
        name: Level name (e.g. "DEBUG"). If None, the value of
            SEGMENTDISTANCE_LOG_LEVEL is used, falling back to DEFAULT_LOG_LEVEL.

    Returns:
        The numeric logging level.

    Raises:
        ValueError: If the name is not one of LOG_LEVEL_CHOICES.
    """
    if name is None:
        name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip() or DEFAULT_LOG_LEVEL

    name = name.upper()
    if name not in LOG_LEVEL_CHOICES:
        raise ValueError(f"Unknown log level '{name}'. Expected one of {', '.join(LOG_LEVEL_CHOICES)}.")
    return getattr(logging, name)
