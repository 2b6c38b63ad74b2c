"""ISO 8601 parsing into raw ticks.

The parsers return plain integers so the value classes can wrap them
without this module knowing about them.
"""

import re
from math import isfinite
from typing import NoReturn, Optional

from ._common import (
    INT64_MAX,
    INT64_MIN,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
    Ticks,
)
from ._math import date_to_ticks, is_valid_date, is_valid_time, time_to_ticks

_FRACTION_DIGITS = 7

_match_datetime = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})(?:T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?)?",
    re.ASCII,
).fullmatch
_is_numeric_seconds = re.compile(r"[0-9.\-]+", re.ASCII).fullmatch


def _parse_err(s: str) -> NoReturn:
    raise ValueError(f"Invalid format: {s!r}") from None


def _check_str(s: object) -> None:
    if not isinstance(s, str):
        raise TypeError(f"Expected a string, got {type(s).__name__}")


def _split_nextchar(
    s: str, chars: str, start: int = 0, end: int = -1
) -> tuple[str, Optional[str], str]:
    for c in chars:
        if (idx := s.find(c, start, end)) != -1:
            return (s[:idx], c, s[idx + 1 :])
    return (s, None, "")


def _parse_fraction(s: str) -> Ticks:
    # Digits beyond tick precision are dropped, not rounded
    return int(s[:_FRACTION_DIGITS].ljust(_FRACTION_DIGITS, "0"))


def _offset_from_iso(s: str, check_range: bool = True) -> Ticks:
    """Parse the unsigned part of an offset: HH:MM, HHMM or HH"""
    if len(s) == 5 and s[2] == ":":  # most common: HH:MM
        hh, mm = s[:2], s[3:]
    elif len(s) == 4:  # HHMM
        hh, mm = s[:2], s[2:]
    elif len(s) == 2:  # HH
        hh, mm = s, "00"
    else:
        raise ValueError("Invalid offset format")
    if not (hh + mm).isdigit():
        raise ValueError("Invalid offset format")
    hours = int(hh)
    minutes = int(mm)
    if check_range and (
        minutes > 59 or hours > 14 or (hours == 14 and minutes)
    ):
        raise ValueError("Offset out of range")
    return hours * TICKS_PER_HOUR + minutes * TICKS_PER_MINUTE


def _split_offset(
    s: str, check_range: bool = True
) -> tuple[str, Optional[Ticks]]:
    # Scan from the right, but never into the YYYY-MM-DD prefix, where
    # a '-' is a date separator and not an offset sign.
    for i in range(len(s) - 1, 9, -1):
        c = s[i]
        if c == "Z":
            if i != len(s) - 1:
                raise ValueError("Trailing characters after 'Z'")
            return s[:i], 0
        elif c == "+" or c == "-":
            if s[i - 1] in "+-":
                raise ValueError("Repeated offset sign")
            offset = _offset_from_iso(s[i + 1 :], check_range)
            return s[:i], -offset if c == "-" else offset
    return s, None


def _datetime_from_iso(s: str) -> Ticks:
    if (match := _match_datetime(s)) is None:
        raise ValueError("Invalid date-time format")
    year, month, day = map(int, match.group(1, 2, 3))
    hour, minute, second = (int(g or 0) for g in match.group(4, 5, 6))
    if not (
        is_valid_date(year, month, day) and is_valid_time(hour, minute, second)
    ):
        raise ValueError("Date-time component out of range")
    fraction = match[7]
    return (
        date_to_ticks(year, month, day)
        + time_to_ticks(hour, minute, second)
        + (_parse_fraction(fraction) if fraction else 0)
    )


def instant_from_iso(s: str) -> Ticks:
    """Parse a UTC date-time. A trailing offset must be well-formed,
    but is otherwise ignored.
    """
    _check_str(s)
    if not s.isascii():
        _parse_err(s)
    try:
        body, _ = _split_offset(s, check_range=False)
        return _datetime_from_iso(body)
    except ValueError:
        _parse_err(s)


def offset_instant_from_iso(s: str) -> tuple[Ticks, Ticks]:
    """Parse a date-time with optional offset into (local ticks, offset ticks)"""
    _check_str(s)
    if not s.isascii():
        _parse_err(s)
    try:
        body, offset = _split_offset(s)
        return _datetime_from_iso(body), offset or 0
    except ValueError:
        _parse_err(s)


def _check_duration_bounds(ticks: Ticks, s: str) -> Ticks:
    if ticks < INT64_MIN or ticks > INT64_MAX:
        raise ValueError(f"Duration out of range: {s!r}")
    return ticks


def _parse_duration_component(
    s: str, fullstr: str
) -> tuple[str, Ticks, str]:
    """Parse the next 'nH', 'nM' or 'n[.f]S' component of a time part"""
    for idx, c in enumerate(s):
        if c in "HMS":
            break
    else:
        _parse_err(fullstr)
    raw, unit, rest = s[:idx], s[idx], s[idx + 1 :]
    if unit == "S":
        digits, sep, fraction = _split_nextchar(raw, ".")
        if not digits.isdigit() or (sep and not fraction.isdigit()):
            _parse_err(fullstr)
        value = int(digits) * TICKS_PER_SECOND + (
            _parse_fraction(fraction) if sep else 0
        )
    elif not raw.isdigit():
        _parse_err(fullstr)
    elif unit == "H":
        value = int(raw) * TICKS_PER_HOUR
    else:
        value = int(raw) * TICKS_PER_MINUTE
    return rest, value, unit


def duration_from_iso(s: str) -> Ticks:
    """Parse a duration as either ISO 8601 ``[-]P[nD][T[nH][nM][n[.f]S]]``
    or a bare number of seconds such as ``"1.5"`` or ``"-30"``.
    """
    _check_str(s)
    if not s.isascii():
        _parse_err(s)

    if _is_numeric_seconds(s):
        try:
            secs = float(s)
        except ValueError:
            _parse_err(s)
        if not isfinite(secs):
            _parse_err(s)
        return _check_duration_bounds(int(secs * TICKS_PER_SECOND), s)

    sign = 1
    rest = s
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    # The shortest valid form has one component, e.g. 'P1D'
    if len(rest) < 3 or rest[0] != "P":
        _parse_err(s)

    date_part, time_sep, time_part = rest[1:].partition("T")
    ticks = 0
    if date_part:
        days = date_part[:-1]
        if date_part[-1] != "D" or not days.isdigit():
            _parse_err(s)
        ticks += int(days) * TICKS_PER_DAY
    elif not time_sep:
        _parse_err(s)

    if time_sep:
        if not time_part:
            _parse_err(s)
        prev_unit = ""
        while time_part:
            time_part, value, unit = _parse_duration_component(time_part, s)
            if unit == "H" and prev_unit == "":
                ticks += value
            elif unit == "M" and prev_unit in ("", "H"):
                ticks += value
            elif unit == "S" and not time_part:
                ticks += value
            else:
                _parse_err(s)  # components out of order or repeated
            prev_unit = unit

    return _check_duration_bounds(sign * ticks, s)
