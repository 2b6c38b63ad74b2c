from __future__ import annotations

from ._pytickwise import *
from ._pytickwise import (  # for the docs
    __all__,
    __version__,
    _KnowsInstant,
    _unpkl_dur,
    _unpkl_inst,
    _unpkl_offset,
)

from contextlib import contextmanager as _contextmanager
from dataclasses import dataclass as _dataclass
from typing import Iterator as _Iterator, Union as _Union

from ._math import days_in_month, is_leap as is_leap_year
from ._system import (
    _patch_time_frozen,
    _patch_time_keep_ticking,
    _unpatch_time,
    reset_system_tz,
)

__all__ = __all__ + [
    "days_in_month",
    "is_leap_year",
    "patch_current_time",
    "reset_system_tz",
]


@_dataclass
class _TimePatch:
    _pin: _Union[Instant, OffsetInstant]
    _keep_ticking: bool

    def shift(self, *args, **kwargs):
        """Move the patched clock by the given amounts, like ``add()``"""
        if self._keep_ticking:
            # continue from where the running clock has got to
            self._pin += Instant.now() - self._pin
            patch = _patch_time_keep_ticking
        else:
            patch = _patch_time_frozen
        self._pin = self._pin.add(*args, **kwargs)
        patch(self._pin.instant().ticks)


@_contextmanager
def patch_current_time(
    dt: _Union[Instant, OffsetInstant],
    /,
    *,
    keep_ticking: bool,
) -> _Iterator[_TimePatch]:
    """Pin the clock behind every ``now()`` and ``today()`` to ``dt``.

    Usable as a context manager or decorator. Only tickwise reads the
    patched clock, and the system offset is left alone (see
    :func:`reset_system_tz`). Not thread-safe: use in tests only.

    >>> i = Instant.from_utc(1980, 3, 2, hour=2)
    >>> with patch_current_time(i, keep_ticking=False) as p:
    ...     p.shift(hours=4)
    ...     assert OffsetInstant.utc_now() == i.add(hours=4)
    """
    patch = _patch_time_keep_ticking if keep_ticking else _patch_time_frozen
    patch(dt.instant().ticks)
    try:
        yield _TimePatch(dt, keep_ticking)
    finally:
        _unpatch_time()
