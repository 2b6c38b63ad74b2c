"""Calendar and tick arithmetic helpers.

All functions here are total: they never raise for integer input.
Validation of civil components is left to the callers.
"""

from ._common import (
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
    Ticks,
)

_DAYS_PER_400_YEARS = 146_097
_DAYS_PER_100_YEARS = 36_524
_DAYS_PER_4_YEARS = 1_461
_DAYS_PER_YEAR = 365

MIN_YEAR = 1
MAX_YEAR = 9999


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# 1-indexed days per month
_MONTHDAYS = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def days_in_month(year: int, month: int) -> int:
    """The number of days in the month, or 0 if the month is out of range"""
    if month < 1 or month > 12:
        return 0
    return _MONTHDAYS[month] + (month == 2 and is_leap(year))


def day_of_year(year: int, month: int, day: int) -> int:
    return sum(days_in_month(year, m) for m in range(1, month)) + day


def is_valid_date(year: int, month: int, day: int) -> bool:
    return (
        MIN_YEAR <= year <= MAX_YEAR
        and 1 <= month <= 12
        and 1 <= day <= days_in_month(year, month)
    )


def is_valid_time(
    hour: int, minute: int, second: int, millisecond: int = 0
) -> bool:
    return (
        0 <= hour < 24
        and 0 <= minute < 60
        and 0 <= second < 60
        and 0 <= millisecond < 1_000
    )


def date_to_ticks(year: int, month: int, day: int) -> Ticks:
    """Ticks from 0001-01-01 to midnight of the given date"""
    n400, rem = divmod(year - 1, 400)
    n100, rem = divmod(rem, 100)
    n4, n1 = divmod(rem, 4)
    days = (
        n400 * _DAYS_PER_400_YEARS
        + n100 * _DAYS_PER_100_YEARS
        + n4 * _DAYS_PER_4_YEARS
        + n1 * _DAYS_PER_YEAR
        + day_of_year(year, month, day)
        - 1
    )
    return days * TICKS_PER_DAY


def ticks_to_date(ticks: Ticks) -> tuple[int, int, int]:
    """The (year, month, day) containing the given tick"""
    n400, days = divmod(ticks // TICKS_PER_DAY, _DAYS_PER_400_YEARS)
    # The last day of a 400-year cycle (and of a 4-year cycle) belongs to
    # a leap year, which the plain quotient would spill into the next cycle.
    n100 = min(days // _DAYS_PER_100_YEARS, 3)
    days -= n100 * _DAYS_PER_100_YEARS
    n4, days = divmod(days, _DAYS_PER_4_YEARS)
    n1 = min(days // _DAYS_PER_YEAR, 3)
    days -= n1 * _DAYS_PER_YEAR

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1
    month = 1
    while days >= (month_length := days_in_month(year, month)):
        days -= month_length
        month += 1
    return year, month, days + 1


def time_to_ticks(
    hour: int, minute: int, second: int, millisecond: int = 0
) -> Ticks:
    return (
        hour * TICKS_PER_HOUR
        + minute * TICKS_PER_MINUTE
        + second * TICKS_PER_SECOND
        + millisecond * TICKS_PER_MILLISECOND
    )


def ticks_to_time(ticks: Ticks) -> tuple[int, int, int, int]:
    """The (hour, minute, second, millisecond) within the day"""
    hour, rem = divmod(ticks % TICKS_PER_DAY, TICKS_PER_HOUR)
    minute, rem = divmod(rem, TICKS_PER_MINUTE)
    second, rem = divmod(rem, TICKS_PER_SECOND)
    return hour, minute, second, rem // TICKS_PER_MILLISECOND


def add_months(
    year: int, month: int, day: int, months: int
) -> tuple[int, int, int]:
    """Shift a date by whole months, clamping the day to the new month"""
    year_delta, month0_new = divmod(month - 1 + months, 12)
    year_new = year + year_delta
    month_new = month0_new + 1
    return year_new, month_new, min(day, days_in_month(year_new, month_new))
