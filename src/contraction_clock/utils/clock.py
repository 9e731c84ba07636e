"""Wall-clock source used by the command-line host."""

import time


def now_ms() -> int:
    """Return the current Unix time in milliseconds."""
    return int(time.time() * 1000)
