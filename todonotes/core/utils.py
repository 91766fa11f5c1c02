"""
Core Utilities.

Default collaborators for the note store: the clock and id generators.
All modules should import these from here.
"""

import itertools
from datetime import datetime, timezone
from uuid import uuid4


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application are timezone-naive and
    assumed to be UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def generate_id() -> str:
    """Return a random 128-bit identifier as a string."""
    return str(uuid4())


class CounterIdGenerator:
    """
    Sequential id generator for single-process use.

    Produces "1", "2", ... with an optional prefix. Ids are unique only
    within one generator instance.

    Usage:
        next_id = CounterIdGenerator(prefix="note-")
        next_id()  # "note-1"
    """

    def __init__(self, prefix: str = "", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
