from datetime import timedelta as _timedelta, timezone as _timezone
from functools import lru_cache

UTC = _timezone.utc
Ticks = int  # 100-nanosecond units

TICKS_PER_MICROSECOND = 10
TICKS_PER_MILLISECOND = 10_000
TICKS_PER_SECOND = 10_000_000
TICKS_PER_MINUTE = 600_000_000
TICKS_PER_HOUR = 36_000_000_000
TICKS_PER_DAY = 864_000_000_000
NANOSECONDS_PER_TICK = 100

# 0001-01-01T00:00:00 up to 9999-12-31T23:59:59.9999999
MIN_TICKS = 0
MAX_TICKS = 3_155_378_975_999_999_999

UNIX_EPOCH_TICKS = 621_355_968_000_000_000  # 1970-01-01
FILETIME_EPOCH_TICKS = 504_911_232_000_000_000  # 1601-01-01

MAX_OFFSET_TICKS = 14 * TICKS_PER_HOUR

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# The window of instants that fit in int64 nanoseconds since the Unix epoch
_NANOS_WINDOW_TICKS = INT64_MAX // NANOSECONDS_PER_TICK
MIN_NANOS_SAFE_TICKS = UNIX_EPOCH_TICKS - _NANOS_WINDOW_TICKS
MAX_NANOS_SAFE_TICKS = UNIX_EPOCH_TICKS + _NANOS_WINDOW_TICKS


def clamp_ticks(ticks: Ticks, /) -> Ticks:
    if ticks < MIN_TICKS:
        return MIN_TICKS
    if ticks > MAX_TICKS:
        return MAX_TICKS
    return ticks


def div_trunc(a: int, b: int, /) -> int:
    """Integer division rounding toward zero (``//`` rounds toward -inf)"""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def round_half_away(x: float, /) -> int:
    if x < 0:
        return -int(-x + 0.5)
    return int(x + 0.5)


# We cache fixed-offset tzinfo objects to avoid creating multiple identical ones.
# It's very common to only have whole-hour offsets, so this helps a lot.
@lru_cache
def mk_fixed_tzinfo(offset_ticks: Ticks, /) -> _timezone:
    return _timezone(
        _timedelta(microseconds=div_trunc(offset_ticks, TICKS_PER_MICROSECOND))
    )
