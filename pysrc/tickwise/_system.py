"""Access to the system clock and the system timezone's UTC offset"""

import logging
import threading
import time
from typing import Callable, Optional

from ._common import (
    NANOSECONDS_PER_TICK,
    TICKS_PER_HOUR,
    TICKS_PER_SECOND,
    UNIX_EPOCH_TICKS,
    Ticks,
)

logger = logging.getLogger(__name__)

time_ns: Callable[[], int] = time.time_ns


def current_utc_ticks() -> Ticks:
    return UNIX_EPOCH_TICKS + time_ns() // NANOSECONDS_PER_TICK


def _patch_time_frozen(ticks: Ticks) -> None:
    global time_ns

    def time_ns() -> int:
        return (ticks - UNIX_EPOCH_TICKS) * NANOSECONDS_PER_TICK


def _patch_time_keep_ticking(ticks: Ticks) -> None:
    global time_ns

    _patched_at = time.time_ns()

    def time_ns() -> int:
        return (
            (ticks - UNIX_EPOCH_TICKS) * NANOSECONDS_PER_TICK
            + time.time_ns()
            - _patched_at
        )


def _unpatch_time() -> None:
    global time_ns
    time_ns = time.time_ns


def _query_offset(ticks: Ticks) -> Ticks:
    secs = (ticks - UNIX_EPOCH_TICKS) // TICKS_PER_SECOND
    try:
        return time.localtime(secs).tm_gmtoff * TICKS_PER_SECOND
    except (OverflowError, OSError, ValueError) as e:
        # e.g. Windows rejects instants before 1970
        logger.debug("No system UTC offset for %r, using UTC: %s", secs, e)
        return 0


class _OffsetCache:
    """Remembers the offset of the most recently queried hour"""

    __slots__ = ("_lock", "_entry")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entry: Optional[tuple[int, Ticks]] = None

    def get(self, ticks: Ticks) -> Ticks:
        key = ticks // TICKS_PER_HOUR
        # a tuple is replaced atomically, so readers never see half an entry
        entry = self._entry
        if entry is not None and entry[0] == key:
            return entry[1]
        offset = _query_offset(ticks)
        with self._lock:
            self._entry = (key, offset)
        return offset

    def clear(self) -> None:
        with self._lock:
            self._entry = None


_offset_cache = _OffsetCache()


def local_offset_for(ticks: Ticks) -> Ticks:
    """The system timezone's UTC offset (in ticks) at the given instant.

    Falls back to zero if the platform can't provide one.
    """
    return _offset_cache.get(ticks)


def reset_system_tz() -> None:
    """Pick up changes to the system timezone (e.g. the ``TZ`` variable)"""
    if hasattr(time, "tzset"):
        time.tzset()
    _offset_cache.clear()
