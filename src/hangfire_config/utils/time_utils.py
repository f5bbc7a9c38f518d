"""Duration text parsing.

Accepts plain seconds (``"30"``, ``"1.5"``) and TimeSpan-style text
(``"HH:MM"``, ``"HH:MM:SS"``, ``"d.HH:MM:SS[.fff]"``, optional leading ``-``).
No external dependencies — stdlib only.
"""

from __future__ import annotations

import re
from datetime import timedelta

_PLAIN_SECONDS = re.compile(r"^\s*-?\d+(?:\.\d+)?\s*$")
_TIMESPAN = re.compile(
    r"^\s*(?P<sign>-)?(?:(?P<days>\d+)\.)?"
    r"(?P<hours>\d{1,2}):(?P<minutes>\d{2})"
    r"(?::(?P<seconds>\d{2}(?:\.\d+)?))?\s*$"
)


def parse_timespan(value: object) -> object:
    """Convert duration text to a ``timedelta``.

    Anything that is not recognised is returned unchanged so the caller's
    own validation decides what to do with it.
    """
    if not isinstance(value, str):
        return value
    if _PLAIN_SECONDS.match(value):
        return timedelta(seconds=float(value))

    match = _TIMESPAN.match(value)
    if match is None:
        return value

    hours = int(match["hours"])
    minutes = int(match["minutes"])
    seconds = float(match["seconds"] or 0)
    if hours > 23 or minutes > 59 or seconds >= 60:
        return value

    delta = timedelta(
        days=int(match["days"] or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )
    return -delta if match["sign"] else delta
