"""Time helpers shared by the social network entities."""

import time


def now() -> int:
    """Return the current time as whole seconds since the epoch."""
    return int(time.time())


def format_timestamp(timestamp: int) -> str:
    """Render epoch seconds in the classic ``ctime`` layout, local time."""
    return time.ctime(timestamp)