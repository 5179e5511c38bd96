from __future__ import annotations

import re
from datetime import datetime, time
from typing import Optional, Union

TimeInput = Union[datetime, time, str, None]

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_time_to_minutes(value: TimeInput) -> Optional[int]:
    """Convert a timestamp or a 24h ``"HH:MM"`` string to minutes since midnight.

    ``None`` passes through so callers can treat a missing time as "no policy".
    Timezones are ignored; hours and minutes are taken at face value.
    """

    if value is None:
        return None
    if isinstance(value, (datetime, time)):
        return value.hour * 60 + value.minute
    if not isinstance(value, str):
        raise TypeError(f'Time must be a datetime or "HH:MM" string, got {value!r}')

    match = _CLOCK_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f'Time must be a datetime or "HH:MM" string, got {value!r}')
    hours = int(match.group(1))
    minutes = int(match.group(2))
    if not 0 <= hours <= 23:
        raise ValueError("Time hours must be 0-23")
    if not 0 <= minutes <= 59:
        raise ValueError("Time minutes must be 0-59")
    return hours * 60 + minutes
