"""Unix timestamp helpers working in local time."""

from __future__ import annotations

import time as _time
from datetime import date, datetime, time


def get_timestamp() -> int:
    """Return the current Unix time in whole seconds."""
    return int(_time.time())


def get_begin_of_today() -> int:
    """Return the Unix time of local midnight at the start of today."""
    return int(datetime.combine(date.today(), time.min).timestamp())


def is_before_today(timestamp: int) -> bool:
    """Return True if the timestamp falls on a local day before today."""
    return datetime.fromtimestamp(timestamp).date() < date.today()