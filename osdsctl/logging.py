"""Logging configuration for the osdsctl package."""
import logging
import sys

from .config import Config


def setup_logging(debug_mode: bool = False) -> None:
    """Configure logging based on debug mode.

    Records go to stderr so they never mix with rendered tables on stdout.
    """
    log_level = logging.DEBUG if debug_mode else Config.LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=Config.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True,
    )
    # Disable debug logging for noisy libraries
    if not debug_mode:
        logging.getLogger('urllib3').setLevel(logging.WARNING)
