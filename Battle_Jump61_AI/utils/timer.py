"""Per-move time limits."""

import time


def deadline_after(seconds):
    """Absolute deadline SECONDS from now, or None for an untimed move."""
    if seconds is None:
        return None
    return time.time() + seconds


def expired(deadline):
    return deadline is not None and time.time() > deadline
