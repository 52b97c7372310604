"""Timestamped match logging and debug logging setup."""

import datetime
import logging

LOG_FORMAT = "[%(asctime)s] %(name)s: %(message)s"


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def configure_logging(verbose=False):
    """Route library loggers (search diagnostics) to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
