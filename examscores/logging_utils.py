"""
Logging setup for the score report.

Call ``configure_logging`` once from an entry point. Library modules only use
``logging.getLogger(__name__)``. Log lines go to stderr so diagnostics never
mix with the report printed on stdout.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single stderr handler."""
    name = str(level).upper()
    if name not in VALID_LEVELS:
        raise ValueError(f"Log level must be one of {sorted(VALID_LEVELS)}, got '{level}'.")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logging.basicConfig(level=getattr(logging, name), handlers=[handler], force=True)
