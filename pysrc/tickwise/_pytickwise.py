# The MIT License (MIT)
#
# Copyright (c) Arie Bovenberg
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


# Maintainer's notes:
#
# - Why are all value types in one file?
#   - Flat is better than nested
#   - It prevents circular imports since the classes 'know' about each other
# - All values are stored as plain integer ticks (100ns units).
#   Calendar math lives in ``_math``, string parsing in ``_parse``,
#   and anything touching the operating system in ``_system``.
from __future__ import annotations

__version__ = "0.1.0"

import enum
from datetime import datetime as _datetime, timedelta as _timedelta
from math import copysign, nan
from struct import pack, unpack
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Optional,
    TypeVar,
    no_type_check,
)

from ._common import (
    FILETIME_EPOCH_TICKS,
    INT64_MAX,
    INT64_MIN,
    MAX_NANOS_SAFE_TICKS,
    MAX_OFFSET_TICKS,
    MAX_TICKS,
    MIN_NANOS_SAFE_TICKS,
    MIN_TICKS,
    NANOSECONDS_PER_TICK,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
    UNIX_EPOCH_TICKS,
    UTC,
    Ticks,
    clamp_ticks,
    div_trunc,
    mk_fixed_tzinfo,
    round_half_away,
)
from ._math import (
    MAX_YEAR,
    MIN_YEAR,
    add_months as _add_months,
    date_to_ticks,
    day_of_year,
    is_valid_date,
    is_valid_time,
    ticks_to_date,
    ticks_to_time,
    time_to_ticks,
)
from ._parse import (
    duration_from_iso,
    instant_from_iso,
    offset_instant_from_iso,
)
from ._system import current_utc_ticks, local_offset_for

__all__ = [
    "Duration",
    "Instant",
    "OffsetInstant",
    "Format",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
]


class Format(enum.Enum):
    """The string representations supported by :meth:`Instant.format`
    and :meth:`OffsetInstant.format`
    """

    ISO8601_BASIC = "basic"
    """``2024-01-15T12:30:45Z``"""
    ISO8601_EXTENDED = "extended"
    """``2024-01-15T12:30:45.1234567Z``, trailing zeros removed"""
    ISO8601_WITH_OFFSET = "with_offset"
    """``2024-01-15T12:30:45+00:00``, always a numeric offset"""
    DATE_ONLY = "date"
    """``2024-01-15``"""
    TIME_ONLY = "time"
    """``12:30:45``"""
    UNIX_SECONDS = "unix_seconds"
    """``1705321845``"""
    UNIX_MILLISECONDS = "unix_milliseconds"
    """``1705321845123``"""


# Helpers that pre-compute/lookup as much as possible
_object_new = object.__new__
_DATETIME_MIN = _datetime(1, 1, 1)
_DATETIME_MIN_UTC = _datetime(1, 1, 1, tzinfo=UTC)
_T = TypeVar("_T")


class _ImmutableBase:
    __slots__ = ()

    # Immutable classes don't need to be copied
    @no_type_check
    def __copy__(self):
        return self

    @no_type_check
    def __deepcopy__(self, _):
        return self


if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):  # pragma: no cover
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = init_subclass_not_allowed
        return cls


def _check_duration(ticks: int) -> Ticks:
    if ticks < INT64_MIN or ticks > INT64_MAX:
        raise ValueError("Duration out of range")
    return ticks


def _div_round(a: int, b: int) -> int:
    """Exact integer division, rounding halves away from zero"""
    q, r = divmod(abs(a), abs(b))
    if 2 * r >= abs(b):
        q += 1
    return q if (a < 0) == (b < 0) else -q


def _split_ticks(ticks: Ticks) -> tuple[int, int, int, int, int]:
    days, rem = divmod(ticks, TICKS_PER_DAY)
    hrs, rem = divmod(rem, TICKS_PER_HOUR)
    mins, rem = divmod(rem, TICKS_PER_MINUTE)
    secs, rem = divmod(rem, TICKS_PER_SECOND)
    return days, hrs, mins, secs, rem


@final
class Duration(_ImmutableBase):
    """A signed span of time, counted in ticks of 100 nanoseconds.

    The span fits in a signed 64-bit integer, which covers about
    ±29,000 years.

    Examples
    --------
    >>> d = Duration(hours=1, minutes=30)
    Duration(PT1H30M)
    >>> d.in_minutes()
    90.0
    >>> Duration(10_000_000)
    Duration(PT1S)

    Note
    ----
    A shorter way to create a duration is to use the helper functions
    :func:`~tickwise.hours`, :func:`~tickwise.minutes`, etc.
    """

    __slots__ = ("_ticks",)

    def __init__(
        self,
        ticks: int = 0,
        /,
        *,
        days: float = 0,
        hours: float = 0,
        minutes: float = 0,
        seconds: float = 0,
        milliseconds: float = 0,
        microseconds: float = 0,
    ) -> None:
        if not isinstance(ticks, int):
            raise TypeError("ticks must be an integer")
        try:
            total = (
                # Truncate each component separately to avoid float errors
                int(days * TICKS_PER_DAY)
                + int(hours * TICKS_PER_HOUR)
                + int(minutes * TICKS_PER_MINUTE)
                + int(seconds * TICKS_PER_SECOND)
                + int(milliseconds * TICKS_PER_MILLISECOND)
                + int(microseconds * TICKS_PER_MICROSECOND)
                + ticks
            )
        except OverflowError:
            raise ValueError("Duration out of range") from None
        self._ticks = _check_duration(total)

    ZERO: ClassVar[Duration]
    """A duration of zero"""
    MAX: ClassVar[Duration]
    """The longest possible duration"""
    MIN: ClassVar[Duration]
    """The most negative possible duration"""

    @classmethod
    def _from_ticks_unchecked(cls, ticks: Ticks, /) -> Duration:
        self = _object_new(cls)
        self._ticks = ticks
        return self

    @classmethod
    def from_days(cls, days: float, /) -> Duration:
        return cls(days=days)

    @classmethod
    def from_hours(cls, hours: float, /) -> Duration:
        return cls(hours=hours)

    @classmethod
    def from_minutes(cls, minutes: float, /) -> Duration:
        return cls(minutes=minutes)

    @classmethod
    def from_seconds(cls, seconds: float, /) -> Duration:
        """Create from a number of seconds, truncating to whole ticks

        Example
        -------
        >>> Duration.from_seconds(1.5)
        Duration(PT1.5S)
        """
        return cls(seconds=seconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: float, /) -> Duration:
        return cls(milliseconds=milliseconds)

    @classmethod
    def from_microseconds(cls, microseconds: float, /) -> Duration:
        """Create from a number of microseconds.

        Unlike the other factories, this rounds to the nearest tick
        (halves away from zero) instead of truncating.
        """
        try:
            ticks = round_half_away(microseconds * TICKS_PER_MICROSECOND)
        except OverflowError:
            raise ValueError("Duration out of range") from None
        return cls._from_ticks_unchecked(_check_duration(ticks))

    @classmethod
    def from_ticks(cls, ticks: float, /) -> Duration:
        """Create from a (possibly fractional) number of ticks, truncating"""
        try:
            return cls(int(ticks))
        except OverflowError:
            raise ValueError("Duration out of range") from None

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int, /) -> Duration:
        """Create from whole nanoseconds, truncating toward zero to ticks

        Example
        -------
        >>> Duration.from_nanoseconds(-250)
        Duration(-PT0.0000002S)
        """
        return cls(div_trunc(nanoseconds, NANOSECONDS_PER_TICK))

    @classmethod
    def from_py_timedelta(cls, td: _timedelta, /) -> Duration:
        """Create from a :class:`~datetime.timedelta`

        Inverse of :meth:`py_timedelta`
        """
        return cls(
            td.days * TICKS_PER_DAY
            + td.seconds * TICKS_PER_SECOND
            + td.microseconds * TICKS_PER_MICROSECOND
        )

    @property
    def ticks(self) -> Ticks:
        """The exact size in ticks of 100 nanoseconds"""
        return self._ticks

    def in_days(self) -> float:
        """The total size in days (of exactly 24 hours each)"""
        return self._ticks / TICKS_PER_DAY

    def in_hours(self) -> float:
        """The total size in hours

        Example
        -------
        >>> Duration(hours=1, minutes=30).in_hours()
        1.5
        """
        return self._ticks / TICKS_PER_HOUR

    def in_minutes(self) -> float:
        return self._ticks / TICKS_PER_MINUTE

    def in_seconds(self) -> float:
        return self._ticks / TICKS_PER_SECOND

    def in_milliseconds(self) -> float:
        return self._ticks / TICKS_PER_MILLISECOND

    def in_microseconds(self) -> float:
        return self._ticks / TICKS_PER_MICROSECOND

    def in_nanoseconds(self) -> int:
        """The total size in nanoseconds. Always exact."""
        return self._ticks * NANOSECONDS_PER_TICK

    def in_days_hrs_mins_secs_ticks(self) -> tuple[int, int, int, int, int]:
        """Convert to a tuple of (days, hours, minutes, seconds, ticks).
        All components carry the sign of the duration.

        Example
        -------
        >>> Duration(hours=-25, microseconds=-1).in_days_hrs_mins_secs_ticks()
        (-1, -1, 0, 0, -10)
        """
        parts = _split_ticks(abs(self._ticks))
        if self._ticks < 0:
            return tuple(-p for p in parts)  # type: ignore[return-value]
        return parts

    def py_timedelta(self) -> _timedelta:
        """Convert to a :class:`~datetime.timedelta`

        Note
        ----
        Ticks are truncated (toward zero) to whole microseconds.
        """
        return _timedelta(
            microseconds=div_trunc(self._ticks, TICKS_PER_MICROSECOND)
        )

    def format_common_iso(self) -> str:
        """Format as a compact ISO 8601 duration: ``[-]P[nD][T[nH][nM][nS]]``.

        Only non-zero components are written; zero is ``PT0S``.
        Inverse of :meth:`parse_common_iso`.

        Example
        -------
        >>> Duration(days=1, hours=2, seconds=3.5).format_common_iso()
        'P1DT2H3.5S'
        """
        days, hrs, mins, secs, ticks = _split_ticks(abs(self._ticks))
        seconds = f"{secs}.{ticks:07}".rstrip("0") if ticks else str(secs)
        time = (
            f"{hrs}H" * bool(hrs)
            + f"{mins}M" * bool(mins)
            + f"{seconds}S" * bool(secs or ticks)
        )
        if not (days or time):
            return "PT0S"
        return (
            "-" * (self._ticks < 0)
            + "P"
            + f"{days}D" * bool(days)
            + f"T{time}" * bool(time)
        )

    @classmethod
    def parse_common_iso(cls, s: str, /) -> Duration:
        """Parse an ISO 8601 duration, or a plain number of seconds.

        Inverse of :meth:`format_common_iso`

        Example
        -------
        >>> Duration.parse_common_iso("PT1H30M")
        Duration(PT1H30M)
        >>> Duration.parse_common_iso("-2.5")
        Duration(-PT2.5S)

        Note
        ----
        Years, months and weeks have no fixed length and are rejected.
        Fractions are only allowed in the seconds component.

        Raises
        ------
        ValueError
            If the string is malformed or out of range
        """
        return cls._from_ticks_unchecked(duration_from_iso(s))

    @classmethod
    def try_parse_common_iso(cls, s: str, /) -> Optional[Duration]:
        """Like :meth:`parse_common_iso`, but returns ``None`` on failure"""
        try:
            return cls.parse_common_iso(s)
        except ValueError:
            return None

    __str__ = format_common_iso

    def __repr__(self) -> str:
        return f"Duration({self})"

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._ticks + other._ticks)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._ticks - other._ticks)

    def __neg__(self) -> Duration:
        return Duration(-self._ticks)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return Duration(abs(self._ticks))

    def __mul__(self, other: float) -> Duration:
        """Multiply by a number, rounding to the nearest tick

        Example
        -------
        >>> Duration(hours=1) * 1.5
        Duration(PT1H30M)
        """
        if isinstance(other, int):
            return Duration(self._ticks * other)
        elif isinstance(other, float):
            try:
                return Duration(round_half_away(self._ticks * other))
            except OverflowError:
                raise ValueError("Duration out of range") from None
        return NotImplemented

    def __rmul__(self, other: float) -> Duration:
        return self * other

    def __truediv__(self, other: float | Duration) -> Duration | float:
        """Divide by a number or another duration

        Dividing by a number rounds to the nearest tick.
        Dividing by a duration gives their ratio, which follows
        floating point rules when the divisor is zero.

        Example
        -------
        >>> Duration(hours=1) / 4
        Duration(PT15M)
        >>> Duration(hours=1) / Duration(minutes=20)
        3.0
        >>> Duration(hours=1) / Duration.ZERO
        inf
        """
        if isinstance(other, Duration):
            if other._ticks == 0:
                if self._ticks == 0:
                    return nan
                return copysign(float("inf"), self._ticks)
            return self._ticks / other._ticks
        elif isinstance(other, int):
            if other == 0:
                raise ZeroDivisionError("Duration division by zero")
            return Duration(_div_round(self._ticks, other))
        elif isinstance(other, float):
            if other == 0:
                raise ZeroDivisionError("Duration division by zero")
            try:
                return Duration(round_half_away(self._ticks / other))
            except (OverflowError, ValueError):
                raise ValueError("Duration out of range") from None
        return NotImplemented

    def __floordiv__(self, other: Duration) -> int:
        """How many times the other duration fits in this one (floored)"""
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks // other._ticks

    def __mod__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._ticks % other._ticks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks == other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks >= other._ticks

    def __bool__(self) -> bool:
        """True if the value is non-zero"""
        return bool(self._ticks)

    # a custom pickle implementation with a smaller payload
    def __reduce__(self) -> tuple[object, ...]:
        return (_unpkl_dur, (pack("<q", self._ticks),))


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
def _unpkl_dur(data: bytes) -> Duration:
    return Duration._from_ticks_unchecked(*unpack("<q", data))


Duration.ZERO = Duration()
Duration.MAX = Duration(INT64_MAX)
Duration.MIN = Duration(INT64_MIN)


def _civil_to_ticks(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    microsecond: int,
    strict: bool,
) -> Ticks:
    if (
        is_valid_date(year, month, day)
        and is_valid_time(hour, minute, second, millisecond)
        and 0 <= microsecond < 1_000
    ):
        return (
            date_to_ticks(year, month, day)
            + time_to_ticks(hour, minute, second, millisecond)
            + microsecond * TICKS_PER_MICROSECOND
        )
    elif strict:
        raise ValueError(
            "Invalid date/time components: "
            f"{(year, month, day, hour, minute, second, millisecond)}"
        )
    return MIN_TICKS


def _timedelta_to_ticks(td: _timedelta) -> Ticks:
    return (
        td.days * TICKS_PER_DAY
        + td.seconds * TICKS_PER_SECOND
        + td.microseconds * TICKS_PER_MICROSECOND
    )


def _load_offset(offset: int | Duration, /) -> Ticks:
    if isinstance(offset, int):
        return Duration(hours=offset)._ticks
    elif isinstance(offset, Duration):
        return offset._ticks
    raise TypeError("offset must be an int or Duration, e.g. `hours(2.5)`")


def _format_offset(offset: Ticks, zulu: bool = True) -> str:
    if zulu and offset == 0:
        return "Z"
    hrs, mins = divmod(abs(offset) // TICKS_PER_MINUTE, 60)
    return f"{'-' if offset < 0 else '+'}{hrs:02}:{mins:02}"


def _format_date(ticks: Ticks) -> str:
    year, month, day = ticks_to_date(ticks)
    return f"{year:04}-{month:02}-{day:02}"


def _format_time(ticks: Ticks) -> str:
    hour, minute, second, _ = ticks_to_time(ticks)
    return f"{hour:02}:{minute:02}:{second:02}"


def _format_fraction(ticks: Ticks) -> str:
    # always at least one digit
    return "." + (f"{ticks % TICKS_PER_SECOND:07}".rstrip("0") or "0")


def _format(
    local: Ticks, utc: Ticks, offset: Ticks, fmt: Format, offset_on_time: bool
) -> str:
    if fmt is Format.DATE_ONLY:
        return _format_date(local)
    elif fmt is Format.TIME_ONLY:
        return _format_time(local) + (
            _format_offset(offset) if offset_on_time else ""
        )
    elif fmt is Format.UNIX_SECONDS:
        return str(div_trunc(utc - UNIX_EPOCH_TICKS, TICKS_PER_SECOND))
    elif fmt is Format.UNIX_MILLISECONDS:
        return str(div_trunc(utc - UNIX_EPOCH_TICKS, TICKS_PER_MILLISECOND))

    datetime_str = f"{_format_date(local)}T{_format_time(local)}"
    if fmt is Format.ISO8601_BASIC:
        return datetime_str + _format_offset(offset)
    elif fmt is Format.ISO8601_EXTENDED:
        return datetime_str + _format_fraction(local) + _format_offset(offset)
    elif fmt is Format.ISO8601_WITH_OFFSET:
        return datetime_str + _format_offset(offset, zulu=False)
    raise TypeError(f"Expected a Format, got {fmt!r}")


def _format_repr(local: Ticks, offset: Ticks) -> str:
    fraction = _format_fraction(local) if local % TICKS_PER_SECOND else ""
    return (
        f"{_format_date(local)} {_format_time(local)}{fraction}"
        + _format_offset(offset)
    )


class _KnowsInstant(_ImmutableBase):
    """Methods for types that represent a specific moment in time,
    read on a civil (proleptic Gregorian) calendar.

    Implemented by:

    - :class:`Instant`
    - :class:`OffsetInstant`

    (This base class itself is not for public use.)
    """

    __slots__ = ()

    # The civil reading, in ticks since 0001-01-01T00:00:00
    _ticks: Ticks

    def _utc(self) -> Ticks:
        raise NotImplementedError()

    def _local(self) -> Ticks:
        # the civil reading, within the range of Instant
        return self._ticks

    @property
    def ticks(self) -> Ticks:
        """The civil reading in ticks since 0001-01-01T00:00:00"""
        return self._local()

    @property
    def year(self) -> int:
        return ticks_to_date(self._local())[0]

    @property
    def month(self) -> int:
        return ticks_to_date(self._local())[1]

    @property
    def day(self) -> int:
        return ticks_to_date(self._local())[2]

    @property
    def hour(self) -> int:
        return ticks_to_time(self._local())[0]

    @property
    def minute(self) -> int:
        return ticks_to_time(self._local())[1]

    @property
    def second(self) -> int:
        return ticks_to_time(self._local())[2]

    @property
    def millisecond(self) -> int:
        return ticks_to_time(self._local())[3]

    @property
    def microsecond(self) -> int:
        """The microsecond within the millisecond (0-999)"""
        return self._local() % TICKS_PER_MILLISECOND // TICKS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """The nanosecond within the microsecond, in steps of 100 (0-900)"""
        return self._local() % TICKS_PER_MICROSECOND * NANOSECONDS_PER_TICK

    @property
    def day_of_week(self) -> int:
        """The day of the week, where 0 is Sunday and 6 is Saturday"""
        return (self._local() // TICKS_PER_DAY + 1) % 7

    @property
    def day_of_year(self) -> int:
        """The day of the year, starting at 1"""
        return day_of_year(*ticks_to_date(self._local()))

    def time_of_day(self) -> Duration:
        """The time elapsed since midnight

        Example
        -------
        >>> Instant.from_utc(2024, 1, 15, 12, 30).time_of_day()
        Duration(PT12H30M)
        """
        return Duration._from_ticks_unchecked(self._local() % TICKS_PER_DAY)

    def instant(self) -> Instant:
        """The UTC instant this value represents"""
        return Instant._from_ticks_unchecked(clamp_ticks(self._utc()))

    def timestamp(self) -> int:
        """The UNIX timestamp in whole seconds, truncated toward zero.

        Inverse of :meth:`Instant.from_timestamp`.

        Example
        -------
        >>> Instant.from_utc(1970, 1, 1).timestamp()
        0
        """
        return div_trunc(self._utc() - UNIX_EPOCH_TICKS, TICKS_PER_SECOND)

    def timestamp_millis(self) -> int:
        """Like :meth:`timestamp`, but with millisecond precision."""
        return div_trunc(
            self._utc() - UNIX_EPOCH_TICKS, TICKS_PER_MILLISECOND
        )

    def timestamp_nanos(self) -> int:
        """Nanoseconds since the UNIX epoch.

        The result always fits in a signed 64-bit integer: instants
        outside roughly 1677-2262 are clamped to that window.
        """
        ticks = min(
            max(self._utc(), MIN_NANOS_SAFE_TICKS), MAX_NANOS_SAFE_TICKS
        )
        return (ticks - UNIX_EPOCH_TICKS) * NANOSECONDS_PER_TICK

    def to_fixed_offset(
        self, offset: int | Duration | None = None, /
    ) -> OffsetInstant:
        """Convert to an :class:`OffsetInstant` at the same moment in time.

        Without an offset, the system timezone's offset at this moment is used.
        The civil reading is not clamped, so the result is the same moment
        even next to :attr:`Instant.MIN` or :attr:`Instant.MAX`.
        """
        utc = self._utc()
        offset_ticks = (
            local_offset_for(clamp_ticks(utc))
            if offset is None
            else _load_offset(offset)
        )
        return OffsetInstant._from_ticks_unchecked(
            utc + offset_ticks, offset_ticks
        )

    def to_system_tz(self) -> OffsetInstant:
        """Convert to the system timezone's offset at this moment in time"""
        return self.to_fixed_offset()

    def exact_eq(self: _T, other: _T, /) -> bool:
        """Compare objects by their values
        (instead of whether they represent the same instant).
        Different types are never equal.

        Examples
        --------
        >>> a = OffsetInstant(2020, 8, 15, hour=12, offset=1)
        >>> b = OffsetInstant(2020, 8, 15, hour=13, offset=2)
        >>> a == b
        True  # equivalent instants
        >>> a.exact_eq(b)
        False  # different values (hour and offset)
        """
        if type(self) is not type(other):
            raise TypeError("Cannot compare different types")
        # the civil reading and the UTC instant together fix the offset
        return (self._ticks, self._utc()) == (
            other._ticks,  # type: ignore[attr-defined]
            other._utc(),  # type: ignore[attr-defined]
        )

    def __eq__(self, other: object) -> bool:
        """Check if two values represent the same moment in time

        ``a == b`` is equivalent to ``a.instant() == b.instant()``

        Note
        ----
        If you want to compare the values exactly, use :meth:`exact_eq`.
        """
        if not isinstance(other, _KnowsInstant):
            return NotImplemented
        return self._utc() == other._utc()

    def __hash__(self) -> int:
        return hash(self._utc())

    def __lt__(self, other: _KnowsInstant) -> bool:
        """Compare two values by when they occur in time

        ``a < b`` is equivalent to ``a.instant() < b.instant()``
        """
        if not isinstance(other, _KnowsInstant):
            return NotImplemented
        return self._utc() < other._utc()

    def __le__(self, other: _KnowsInstant) -> bool:
        if not isinstance(other, _KnowsInstant):
            return NotImplemented
        return self._utc() <= other._utc()

    def __gt__(self, other: _KnowsInstant) -> bool:
        if not isinstance(other, _KnowsInstant):
            return NotImplemented
        return self._utc() > other._utc()

    def __ge__(self, other: _KnowsInstant) -> bool:
        if not isinstance(other, _KnowsInstant):
            return NotImplemented
        return self._utc() >= other._utc()

    def __sub__(self, other: _KnowsInstant) -> Duration:
        """Calculate the duration between two moments in time"""
        if not isinstance(other, _KnowsInstant):
            return NotImplemented
        return Duration(self._utc() - other._utc())


@final
class Instant(_KnowsInstant):
    """A moment in time on the UTC timeline, with 100 nanosecond precision.

    Values are clamped to the range 0001-01-01T00:00:00Z
    to 9999-12-31T23:59:59.9999999Z.

    Example
    -------
    >>> from tickwise import Instant
    >>> py311_release = Instant.from_utc(2022, 10, 24, hour=17)
    Instant(2022-10-24 17:00:00Z)
    >>> py311_release.add(hours=3).timestamp()
    1666641600
    """

    __slots__ = ("_ticks",)

    def __init__(self, ticks: int = 0, /) -> None:
        if not isinstance(ticks, int):
            raise TypeError("ticks must be an integer")
        self._ticks = clamp_ticks(ticks)

    MIN: ClassVar[Instant]
    """The earliest possible instant"""
    MAX: ClassVar[Instant]
    """The latest possible instant"""
    EPOCH: ClassVar[Instant]
    """The UNIX epoch, 1970-01-01T00:00:00Z"""

    @classmethod
    def _from_ticks_unchecked(cls, ticks: Ticks, /) -> Instant:
        self = _object_new(cls)
        self._ticks = ticks
        return self

    def _utc(self) -> Ticks:
        return self._ticks

    @classmethod
    def from_utc(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        millisecond: int = 0,
        strict: bool = False,
    ) -> Instant:
        """Create an instant from UTC date and time components.

        Invalid components (e.g. February 30th) result in :attr:`MIN`,
        unless ``strict=True`` is given, in which case a ``ValueError``
        is raised.

        Example
        -------
        >>> Instant.from_utc(2024, 1, 15, 12, 30, 45, millisecond=123)
        Instant(2024-01-15 12:30:45.123Z)
        >>> Instant.from_utc(2023, 2, 29)
        Instant(0001-01-01 00:00:00Z)
        """
        return cls._from_ticks_unchecked(
            _civil_to_ticks(
                year, month, day, hour, minute, second, millisecond, 0, strict
            )
        )

    @classmethod
    def now(cls) -> Instant:
        """Create an Instant from the current time."""
        return cls._from_ticks_unchecked(clamp_ticks(current_utc_ticks()))

    @classmethod
    def today(cls) -> Instant:
        """Midnight (UTC) of the current day"""
        return cls.now().date()

    @classmethod
    def from_timestamp(cls, i: int, /) -> Instant:
        """Create an Instant from a UNIX timestamp (in seconds).

        The inverse of :meth:`~_KnowsInstant.timestamp`.
        Out-of-range values are clamped.
        """
        return cls(UNIX_EPOCH_TICKS + i * TICKS_PER_SECOND)

    @classmethod
    def from_timestamp_millis(cls, i: int, /) -> Instant:
        """Like :meth:`from_timestamp`, but for milliseconds."""
        return cls(UNIX_EPOCH_TICKS + i * TICKS_PER_MILLISECOND)

    @classmethod
    def from_timestamp_nanos(cls, i: int, /) -> Instant:
        """Like :meth:`from_timestamp`, but for nanoseconds.

        Sub-tick precision is truncated toward zero.
        """
        return cls(UNIX_EPOCH_TICKS + div_trunc(i, NANOSECONDS_PER_TICK))

    @classmethod
    def from_py_datetime(cls, d: _datetime, /) -> Instant:
        """Create an Instant from any aware standard library datetime.
        Values outside the supported range are clamped.

        Inverse of :meth:`py_datetime`.
        """
        offset = d.utcoffset()
        if offset is None:
            raise ValueError(
                "Cannot create Instant from a naive datetime. "
                "Use a timezone-aware datetime instead."
            )
        return cls(
            _timedelta_to_ticks(d.replace(tzinfo=None) - _DATETIME_MIN)
            - _timedelta_to_ticks(offset)
        )

    def py_datetime(self) -> _datetime:
        """Convert to an aware UTC :class:`~datetime.datetime`.

        Ticks are truncated to whole microseconds.
        """
        return _DATETIME_MIN_UTC + _timedelta(
            microseconds=self._ticks // TICKS_PER_MICROSECOND
        )

    def date(self) -> Instant:
        """Midnight of the same UTC day

        Example
        -------
        >>> Instant.from_utc(2024, 1, 15, 12, 30).date()
        Instant(2024-01-15 00:00:00Z)
        """
        return self._from_ticks_unchecked(
            self._ticks - self._ticks % TICKS_PER_DAY
        )

    def add(
        self,
        *,
        days: float = 0,
        hours: float = 0,
        minutes: float = 0,
        seconds: float = 0,
        milliseconds: float = 0,
        microseconds: float = 0,
    ) -> Instant:
        """Add a time amount to this instant. The result is clamped to
        the supported range.

        Example
        -------
        >>> Instant.from_utc(2024, 1, 15).add(days=1, hours=6)
        Instant(2024-01-16 06:00:00Z)
        """
        return self + Duration(
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds,
            microseconds=microseconds,
        )

    def subtract(
        self,
        *,
        days: float = 0,
        hours: float = 0,
        minutes: float = 0,
        seconds: float = 0,
        milliseconds: float = 0,
        microseconds: float = 0,
    ) -> Instant:
        """Inverse of :meth:`add`."""
        return self.add(
            days=-days,
            hours=-hours,
            minutes=-minutes,
            seconds=-seconds,
            milliseconds=-milliseconds,
            microseconds=-microseconds,
        )

    def __add__(self, delta: Duration) -> Instant:
        """Add a duration, clamping to the supported range"""
        if not isinstance(delta, Duration):
            return NotImplemented
        return self._from_ticks_unchecked(
            clamp_ticks(self._ticks + delta._ticks)
        )

    if TYPE_CHECKING:

        def __sub__(self, other: Duration | _KnowsInstant) -> Any: ...

    else:

        def __sub__(self, other):
            """Subtract another moment in time, or a duration

            Example
            -------
            >>> d = Instant.from_utc(2020, 8, 15, hour=23, minute=12)
            >>> d - Duration(hours=24, seconds=5)
            Instant(2020-08-14 23:11:55Z)
            >>> d - Instant.from_utc(2020, 8, 14)
            Duration(P1DT23H12M)
            """
            if isinstance(other, Duration):
                return self._from_ticks_unchecked(
                    clamp_ticks(self._ticks - other._ticks)
                )
            return super().__sub__(other)

    def format(self, fmt: Format = Format.ISO8601_BASIC, /) -> str:
        """Format in one of the supported :class:`Format` styles

        Example
        -------
        >>> i = Instant.from_utc(2024, 1, 15, 12, 30, 45, millisecond=120)
        >>> i.format(Format.ISO8601_EXTENDED)
        '2024-01-15T12:30:45.12Z'
        >>> i.format(Format.UNIX_SECONDS)
        '1705321845'
        """
        return _format(
            self._ticks, self._ticks, 0, fmt, offset_on_time=False
        )

    def format_common_iso(self) -> str:
        """Format as ``YYYY-MM-DDTHH:MM:SSZ``, dropping sub-second precision.

        Use ``format(Format.ISO8601_EXTENDED)`` to keep it.
        """
        return _format(
            self._ticks, self._ticks, 0, Format.ISO8601_BASIC, False
        )

    __str__ = format_common_iso

    @classmethod
    def parse_common_iso(cls, s: str, /) -> Instant:
        """Parse ``YYYY-MM-DD[THH:MM:SS[.fffffff]]`` with an optional
        ``Z``, ``±HH:MM``, ``±HHMM`` or ``±HH`` suffix.

        Note
        ----
        A numeric offset must be well-formed, but its size is not checked
        and it is discarded: the date and time are read as UTC.
        Use :meth:`OffsetInstant.parse_common_iso` to take the offset
        into account.

        Example
        -------
        >>> Instant.parse_common_iso("2024-01-15T12:30:45.5Z")
        Instant(2024-01-15 12:30:45.5Z)

        Raises
        ------
        ValueError
            If the string is malformed or a component is out of range
        """
        return cls._from_ticks_unchecked(instant_from_iso(s))

    @classmethod
    def try_parse_common_iso(cls, s: str, /) -> Optional[Instant]:
        """Like :meth:`parse_common_iso`, but returns ``None`` on failure"""
        try:
            return cls.parse_common_iso(s)
        except ValueError:
            return None

    def __repr__(self) -> str:
        return f"Instant({_format_repr(self._ticks, 0)})"

    # a custom pickle implementation with a smaller payload
    def __reduce__(self) -> tuple[object, ...]:
        return (_unpkl_inst, (pack("<q", self._ticks),))


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
def _unpkl_inst(data: bytes) -> Instant:
    return Instant._from_ticks_unchecked(*unpack("<q", data))


Instant.MIN = Instant(MIN_TICKS)
Instant.MAX = Instant(MAX_TICKS)
Instant.EPOCH = Instant(UNIX_EPOCH_TICKS)


@final
class OffsetInstant(_KnowsInstant):
    """A civil date and time, together with its offset from UTC.

    Equality and ordering consider only the moment in time, so
    ``12:00+01:00`` equals ``11:00Z``. Use :meth:`exact_eq`
    to also compare the offset.

    Example
    -------
    >>> dt = OffsetInstant(2024, 1, 15, 12, 30, offset=5)
    OffsetInstant(2024-01-15 12:30:00+05:00)
    >>> dt.instant()
    Instant(2024-01-15 07:30:00Z)

    Note
    ----
    The offset is not checked on creation. Use :meth:`is_valid`
    to check it lies within ±14:00.
    """

    __slots__ = ("_ticks", "_offset")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        millisecond: int = 0,
        microsecond: int = 0,
        offset: int | Duration,
        strict: bool = False,
    ) -> None:
        self._ticks = _civil_to_ticks(
            year,
            month,
            day,
            hour,
            minute,
            second,
            millisecond,
            microsecond,
            strict,
        )
        self._offset = _load_offset(offset)

    MIN: ClassVar[OffsetInstant]
    """The earliest possible value, with zero offset"""
    MAX: ClassVar[OffsetInstant]
    """The latest possible value, with zero offset"""
    EPOCH: ClassVar[OffsetInstant]
    """The UNIX epoch, 1970-01-01T00:00:00Z"""

    @classmethod
    def _from_ticks_unchecked(
        cls, local: Ticks, offset: Ticks, /
    ) -> OffsetInstant:
        self = _object_new(cls)
        self._ticks = local
        self._offset = offset
        return self

    def _utc(self) -> Ticks:
        return self._ticks - self._offset

    def _local(self) -> Ticks:
        return clamp_ticks(self._ticks)

    @classmethod
    def from_local(
        cls, local: Instant, /, offset: int | Duration | None = None
    ) -> OffsetInstant:
        """Attach an offset to a civil reading, which is kept as-is.

        Without an offset, the system timezone's offset is looked up.

        Example
        -------
        >>> OffsetInstant.from_local(Instant.from_utc(2024, 1, 15), hours(-5))
        OffsetInstant(2024-01-15 00:00:00-05:00)
        """
        if not isinstance(local, Instant):
            raise TypeError("local must be an Instant")
        return cls._from_ticks_unchecked(
            local._ticks,
            (
                local_offset_for(local._ticks)
                if offset is None
                else _load_offset(offset)
            ),
        )

    @classmethod
    def now(cls) -> OffsetInstant:
        """The current time, in the system timezone's offset"""
        return Instant.now().to_system_tz()

    @classmethod
    def utc_now(cls) -> OffsetInstant:
        """The current time, with zero offset"""
        return Instant.now().to_fixed_offset(0)

    @classmethod
    def today(cls) -> OffsetInstant:
        """Local midnight of the current day, in the system timezone's offset"""
        return cls.now().date()

    @classmethod
    def from_timestamp(
        cls, i: int, /, *, offset: int | Duration = 0
    ) -> OffsetInstant:
        """Create from a UNIX timestamp (in seconds). Zero offset by default."""
        return Instant.from_timestamp(i).to_fixed_offset(offset)

    @classmethod
    def from_timestamp_millis(
        cls, i: int, /, *, offset: int | Duration = 0
    ) -> OffsetInstant:
        """Like :meth:`from_timestamp`, but for milliseconds."""
        return Instant.from_timestamp_millis(i).to_fixed_offset(offset)

    @classmethod
    def from_filetime(cls, filetime: int, /) -> OffsetInstant:
        """Create from a Windows FILETIME: ticks since 1601-01-01 UTC.

        Inverse of :meth:`to_filetime`.
        """
        return cls._from_ticks_unchecked(
            clamp_ticks(FILETIME_EPOCH_TICKS + filetime), 0
        )

    @classmethod
    def from_py_datetime(cls, d: _datetime, /) -> OffsetInstant:
        """Create from an aware standard library datetime, keeping its offset

        Inverse of :meth:`py_datetime`.
        """
        offset = d.utcoffset()
        if offset is None:
            raise ValueError("Datetime must have a UTC offset")
        return cls._from_ticks_unchecked(
            clamp_ticks(
                _timedelta_to_ticks(d.replace(tzinfo=None) - _DATETIME_MIN)
            ),
            _timedelta_to_ticks(offset),
        )

    def py_datetime(self) -> _datetime:
        """Convert to a standard library datetime with a fixed offset.

        Ticks are truncated to whole microseconds.
        """
        micros = self._local() // TICKS_PER_MICROSECOND
        return (_DATETIME_MIN + _timedelta(microseconds=micros)).replace(
            tzinfo=mk_fixed_tzinfo(self._offset)
        )

    @property
    def offset(self) -> Duration:
        """The offset from UTC"""
        return Duration._from_ticks_unchecked(self._offset)

    @property
    def offset_minutes(self) -> int:
        """The offset from UTC in whole minutes, truncated toward zero"""
        return div_trunc(self._offset, TICKS_PER_MINUTE)

    @property
    def utc_ticks(self) -> Ticks:
        """The UTC moment in ticks, i.e. the civil reading minus the offset.

        Not clamped: an extreme offset may push this outside the range
        of :class:`Instant`.
        """
        return self._ticks - self._offset

    def local(self) -> Instant:
        """The civil reading, without the offset.

        Clamped to the range of :class:`Instant`: a conversion near
        :attr:`Instant.MIN` or :attr:`Instant.MAX` may read outside it.
        """
        return Instant._from_ticks_unchecked(self._local())

    def is_valid(self) -> bool:
        """Whether the offset lies within ±14:00"""
        return abs(self._offset) <= MAX_OFFSET_TICKS

    def date(self) -> OffsetInstant:
        """Local midnight of the same day, with the same offset"""
        local = self._local()
        return self._from_ticks_unchecked(
            local - local % TICKS_PER_DAY, self._offset
        )

    def to_offset(self, offset: int | Duration, /) -> OffsetInstant:
        """The same moment in time, read with a different offset

        Example
        -------
        >>> OffsetInstant(2024, 1, 15, 12, offset=1).to_offset(hours(-5))
        OffsetInstant(2024-01-15 06:00:00-05:00)
        """
        return self.to_fixed_offset(offset)

    def to_utc(self) -> OffsetInstant:
        """The same moment in time, with zero offset"""
        return self.to_fixed_offset(0)

    def to_filetime(self) -> int:
        """Ticks since 1601-01-01 UTC; 0 for earlier moments."""
        utc = self._utc()
        return utc - FILETIME_EPOCH_TICKS if utc >= FILETIME_EPOCH_TICKS else 0

    def add(
        self,
        *,
        days: float = 0,
        hours: float = 0,
        minutes: float = 0,
        seconds: float = 0,
        milliseconds: float = 0,
        microseconds: float = 0,
    ) -> OffsetInstant:
        """Add a time amount, keeping the offset.

        Example
        -------
        >>> OffsetInstant(2024, 1, 15, 23, offset=2).add(hours=2)
        OffsetInstant(2024-01-16 01:00:00+02:00)
        """
        return self + Duration(
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds,
            microseconds=microseconds,
        )

    def subtract(
        self,
        *,
        days: float = 0,
        hours: float = 0,
        minutes: float = 0,
        seconds: float = 0,
        milliseconds: float = 0,
        microseconds: float = 0,
    ) -> OffsetInstant:
        """Inverse of :meth:`add`."""
        return self.add(
            days=-days,
            hours=-hours,
            minutes=-minutes,
            seconds=-seconds,
            milliseconds=-milliseconds,
            microseconds=-microseconds,
        )

    def add_months(self, months: int, /) -> OffsetInstant:
        """Add calendar months, keeping the time of day and the offset.

        The day is clamped to the length of the resulting month.
        Results beyond the supported years saturate at :attr:`MIN`
        or :attr:`MAX` (keeping the offset).

        Example
        -------
        >>> OffsetInstant(2024, 1, 31, offset=0).add_months(1)
        OffsetInstant(2024-02-29 00:00:00Z)
        """
        local = self._local()
        year, month, day = _add_months(*ticks_to_date(local), months)
        if year < MIN_YEAR:
            local = MIN_TICKS
        elif year > MAX_YEAR:
            local = MAX_TICKS
        else:
            local = date_to_ticks(year, month, day) + local % TICKS_PER_DAY
        return self._from_ticks_unchecked(local, self._offset)

    def add_years(self, years: int, /) -> OffsetInstant:
        """Add calendar years. February 29th becomes the 28th in common years."""
        return self.add_months(years * 12)

    def __add__(self, delta: Duration) -> OffsetInstant:
        """Add a duration to the civil reading, keeping the offset"""
        if not isinstance(delta, Duration):
            return NotImplemented
        return self._from_ticks_unchecked(
            clamp_ticks(self._ticks + delta._ticks), self._offset
        )

    if TYPE_CHECKING:

        def __sub__(self, other: Duration | _KnowsInstant) -> Any: ...

    else:

        def __sub__(self, other):
            """Subtract another moment in time, or a duration

            Example
            -------
            >>> d = OffsetInstant(2020, 8, 15, 23, 12, offset=1)
            >>> d - Duration(hours=28, seconds=5)
            OffsetInstant(2020-08-14 19:11:55+01:00)
            >>> d - Instant.from_utc(2020, 8, 15)
            Duration(PT22H12M)
            """
            if isinstance(other, Duration):
                return self._from_ticks_unchecked(
                    clamp_ticks(self._ticks - other._ticks), self._offset
                )
            return super().__sub__(other)

    def format(self, fmt: Format = Format.ISO8601_BASIC, /) -> str:
        """Format in one of the supported :class:`Format` styles.

        The ISO 8601 styles write a zero offset as ``Z``, except
        :attr:`Format.ISO8601_WITH_OFFSET`, which always writes ``±HH:MM``.
        The UNIX styles describe the UTC moment.
        """
        return _format(
            self._local(), self._utc(), self._offset, fmt, offset_on_time=True
        )

    def format_common_iso(self) -> str:
        """Format as ``YYYY-MM-DDTHH:MM:SS±HH:MM`` (or ``Z`` for zero offset)

        Example
        -------
        >>> OffsetInstant(2024, 1, 15, 12, offset=hours(5.5)).format_common_iso()
        '2024-01-15T12:00:00+05:30'
        """
        return _format(
            self._local(),
            self._utc(),
            self._offset,
            Format.ISO8601_BASIC,
            True,
        )

    __str__ = format_common_iso

    @classmethod
    def parse_common_iso(cls, s: str, /) -> OffsetInstant:
        """Parse ``YYYY-MM-DD[THH:MM:SS[.fffffff]]``, optionally followed
        by ``Z``, ``±HH:MM``, ``±HHMM`` or ``±HH``. A missing offset means UTC.

        Example
        -------
        >>> OffsetInstant.parse_common_iso("2024-01-15T12:30:45+05:30")
        OffsetInstant(2024-01-15 12:30:45+05:30)

        Raises
        ------
        ValueError
            If the string is malformed, a component is out of range,
            or the offset exceeds ±14:00
        """
        return cls._from_ticks_unchecked(*offset_instant_from_iso(s))

    @classmethod
    def try_parse_common_iso(cls, s: str, /) -> Optional[OffsetInstant]:
        """Like :meth:`parse_common_iso`, but returns ``None`` on failure"""
        try:
            return cls.parse_common_iso(s)
        except ValueError:
            return None

    def __repr__(self) -> str:
        return f"OffsetInstant({_format_repr(self._local(), self._offset)})"

    # a custom pickle implementation with a smaller payload
    def __reduce__(self) -> tuple[object, ...]:
        return (_unpkl_offset, (pack("<qq", self._ticks, self._offset),))


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
def _unpkl_offset(data: bytes) -> OffsetInstant:
    return OffsetInstant._from_ticks_unchecked(*unpack("<qq", data))


OffsetInstant.MIN = OffsetInstant._from_ticks_unchecked(MIN_TICKS, 0)
OffsetInstant.MAX = OffsetInstant._from_ticks_unchecked(MAX_TICKS, 0)
OffsetInstant.EPOCH = OffsetInstant._from_ticks_unchecked(UNIX_EPOCH_TICKS, 0)


def days(i: float, /) -> Duration:
    """Create a :class:`~Duration` with the given number of days.
    ``days(1) == Duration(days=1)``
    """
    return Duration(days=i)


def hours(i: float, /) -> Duration:
    """Create a :class:`~Duration` with the given number of hours.
    ``hours(1) == Duration(hours=1)``
    """
    return Duration(hours=i)


def minutes(i: float, /) -> Duration:
    """Create a :class:`~Duration` with the given number of minutes.
    ``minutes(1) == Duration(minutes=1)``
    """
    return Duration(minutes=i)


def seconds(i: float, /) -> Duration:
    """Create a :class:`~Duration` with the given number of seconds.
    ``seconds(1) == Duration(seconds=1)``
    """
    return Duration(seconds=i)


def milliseconds(i: float, /) -> Duration:
    """Create a :class:`~Duration` with the given number of milliseconds.
    ``milliseconds(1) == Duration(milliseconds=1)``
    """
    return Duration(milliseconds=i)


def microseconds(i: float, /) -> Duration:
    """Create a :class:`~Duration` with the given number of microseconds.
    ``microseconds(1) == Duration(microseconds=1)``

    Like the constructor, this truncates to whole ticks.
    :meth:`Duration.from_microseconds` rounds to the nearest tick instead.
    """
    return Duration(microseconds=i)


# We expose the public members in the root of the module.
# For clarity, we remove the "_pytickwise" part from the names,
# since this is an implementation detail.
for name in __all__ + ["_KnowsInstant"]:
    member = locals()[name]
    if getattr(member, "__module__", None) == __name__:  # pragma: no branch
        member.__module__ = "tickwise"

# clear up loop variables so they don't leak into the namespace
del name
del member

for _unpkl in (_unpkl_dur, _unpkl_inst, _unpkl_offset):
    _unpkl.__module__ = "tickwise"


# disable further subclassing
final(_ImmutableBase)
final(_KnowsInstant)
