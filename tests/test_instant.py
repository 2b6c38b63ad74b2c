import pickle
from copy import copy, deepcopy
from datetime import datetime as py_datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis.strategies import integers, text

from tickwise import (
    Duration,
    Format,
    Instant,
    OffsetInstant,
    hours,
    minutes,
    patch_current_time,
    seconds,
)

from .common import (
    FIXED_TZ_POSIX,
    AlwaysEqual,
    AlwaysLarger,
    AlwaysSmaller,
    NeverEqual,
    skip_without_tzset,
    system_tz,
)

MAX_TICKS = 3_155_378_975_999_999_999
UNIX_EPOCH_TICKS = 621_355_968_000_000_000


class TestInit:

    def test_default(self):
        assert Instant() == Instant.MIN
        assert Instant().ticks == 0

    def test_clamps(self):
        assert Instant(-5) == Instant.MIN
        assert Instant(MAX_TICKS + 5) == Instant.MAX
        assert Instant(MAX_TICKS).ticks == MAX_TICKS

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            Instant(1.5)  # type: ignore[arg-type]


class TestFromUTC:

    def test_defaults(self):
        assert Instant.from_utc(2020, 8, 15) == Instant.from_utc(
            2020, 8, 15, 0, 0, 0, millisecond=0
        )

    def test_kwargs(self):
        d = Instant.from_utc(
            year=2020, month=8, day=15, hour=5, minute=12, second=30
        )
        assert d == Instant.from_utc(2020, 8, 15, 5, 12, 30)

    @pytest.mark.parametrize(
        "kwargs",
        [
            dict(year=0),
            dict(year=10_000),
            dict(month=0),
            dict(month=13),
            dict(day=0),
            dict(day=32),
            dict(month=2, day=30),
            dict(hour=-1),
            dict(hour=24),
            dict(minute=60),
            dict(second=60),
            dict(millisecond=1_000),
            dict(millisecond=-1),
        ],
    )
    def test_invalid_components(self, kwargs):
        defaults = dict(year=2023, month=1, day=1)
        assert Instant.from_utc(**{**defaults, **kwargs}) == Instant.MIN
        with pytest.raises(ValueError, match="Invalid"):
            Instant.from_utc(**{**defaults, **kwargs}, strict=True)

    def test_leap_day(self):
        assert Instant.from_utc(2024, 2, 29).day == 29
        assert Instant.from_utc(2023, 2, 29) == Instant.MIN

    def test_wrong_types(self):
        with pytest.raises(TypeError):
            Instant.from_utc("2020", 8, 15, 5, 12, 30)  # type: ignore[arg-type]


class TestAccessors:

    def test_components(self):
        i = Instant.from_utc(2024, 1, 15, 12, 30, 45, millisecond=123) + (
            Duration(4_567)
        )
        assert i.year == 2024
        assert i.month == 1
        assert i.day == 15
        assert i.hour == 12
        assert i.minute == 30
        assert i.second == 45
        assert i.millisecond == 123
        assert i.microsecond == 456
        assert i.nanosecond == 700

    @pytest.mark.parametrize(
        "ymd, expected",
        [
            ((2024, 1, 15), 1),  # Monday
            ((1970, 1, 1), 4),  # Thursday
            ((2024, 1, 14), 0),  # Sunday
            ((2024, 1, 20), 6),  # Saturday
            ((1, 1, 1), 1),
        ],
    )
    def test_day_of_week(self, ymd, expected):
        assert Instant.from_utc(*ymd).day_of_week == expected

    def test_day_of_year(self):
        assert Instant.from_utc(2024, 3, 1).day_of_year == 61
        assert Instant.from_utc(2023, 3, 1).day_of_year == 60
        assert Instant.MAX.day_of_year == 365

    def test_date_and_time_of_day(self):
        i = Instant.from_utc(2024, 1, 15, 12, 30, 45, millisecond=5)
        assert i.date() == Instant.from_utc(2024, 1, 15)
        assert i.time_of_day() == Duration(
            hours=12, minutes=30, seconds=45, milliseconds=5
        )
        assert i.date() + i.time_of_day() == i

    @given(integers(0, MAX_TICKS))
    def test_reconstruct_from_components(self, ticks):
        i = Instant(ticks)
        assert (
            Instant.from_utc(
                i.year,
                i.month,
                i.day,
                i.hour,
                i.minute,
                i.second,
                millisecond=i.millisecond,
                strict=True,
            )
            + Duration(ticks % 10_000)
            == i
        )


class TestTimestamps:

    def test_epoch(self):
        assert Instant.EPOCH.ticks == UNIX_EPOCH_TICKS
        assert Instant.EPOCH.timestamp() == 0
        assert Instant.from_timestamp(0) == Instant.EPOCH

    def test_roundtrip(self):
        i = Instant.from_utc(2024, 1, 15, 12, 30, 45, millisecond=123)
        assert i.timestamp() == 1_705_321_845
        assert i.timestamp_millis() == 1_705_321_845_123
        assert Instant.from_timestamp(1_705_321_845) == i.subtract(
            milliseconds=123
        )
        assert Instant.from_timestamp_millis(1_705_321_845_123) == i

    def test_truncates_toward_zero(self):
        i = Instant.EPOCH - Duration(milliseconds=500)
        assert i.timestamp() == 0
        assert i.timestamp_millis() == -500
        assert Instant.from_timestamp(-1).second == 59

    def test_from_timestamp_clamps(self):
        assert Instant.from_timestamp(10**15) == Instant.MAX
        assert Instant.from_timestamp(-(10**15)) == Instant.MIN

    def test_nanos(self):
        i = Instant.from_timestamp_nanos(1_700_000_000_123_456_789)
        assert i.timestamp_nanos() == 1_700_000_000_123_456_700
        assert Instant.from_timestamp_nanos(-199) == Instant.EPOCH - (
            Duration(1)
        )

    def test_nanos_window(self):
        assert Instant.MAX.timestamp_nanos() == 9_223_372_036_854_775_800
        assert Instant.MIN.timestamp_nanos() == -9_223_372_036_854_775_800
        assert Instant.from_timestamp_nanos(2**63 - 1).year == 2262
        assert Instant.from_timestamp_nanos(-(2**63)).year == 1677


class TestPyDatetime:

    def test_to(self):
        i = Instant.from_utc(2024, 1, 15, 12, 30, 45, millisecond=123)
        assert i.py_datetime() == py_datetime(
            2024, 1, 15, 12, 30, 45, 123_000, tzinfo=timezone.utc
        )
        assert Instant.MAX.py_datetime() == py_datetime(
            9999, 12, 31, 23, 59, 59, 999_999, tzinfo=timezone.utc
        )
        assert Instant.MIN.py_datetime() == py_datetime(
            1, 1, 1, tzinfo=timezone.utc
        )

    def test_from(self):
        plus2 = timezone(timedelta(hours=2))
        assert Instant.from_py_datetime(
            py_datetime(2024, 1, 15, 14, 0, 0, 5, tzinfo=plus2)
        ) == Instant.from_utc(2024, 1, 15, 12) + Duration(50)

    def test_from_clamps(self):
        assert (
            Instant.from_py_datetime(
                py_datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=1)))
            )
            == Instant.MIN
        )
        assert (
            Instant.from_py_datetime(
                py_datetime(
                    9999, 12, 31, 23, tzinfo=timezone(timedelta(hours=-1))
                )
            )
            == Instant.MAX
        )

    def test_from_naive(self):
        with pytest.raises(ValueError, match="naive"):
            Instant.from_py_datetime(py_datetime(2024, 1, 15))


class TestArithmetic:

    def test_add_duration(self):
        i = Instant.from_utc(2024, 1, 15)
        assert i + hours(36) == Instant.from_utc(2024, 1, 16, 12)
        assert i.add(days=1, hours=6) == Instant.from_utc(2024, 1, 16, 6)
        assert i.subtract(minutes=1) == Instant.from_utc(2024, 1, 14, 23, 59)

    def test_range_edges(self):
        assert Instant.MIN.add(days=1) == Instant.from_utc(1, 1, 2)
        assert Instant.MAX.subtract(days=1) == Instant.from_utc(
            9999, 12, 30, 23, 59, 59, millisecond=999
        ) + Duration(9_999)
        assert Instant.MAX.subtract(days=1).format(
            Format.ISO8601_EXTENDED
        ) == "9999-12-30T23:59:59.9999999Z"

    @given(integers(0, MAX_TICKS), integers(0, MAX_TICKS))
    def test_add_difference(self, a, b):
        x, y = Instant(a), Instant(b)
        assert x + (y - x) == y
        assert y - (y - x) == x

    def test_clamps(self):
        assert Instant.MAX + Duration(1) == Instant.MAX
        assert Instant.MIN - Duration(1) == Instant.MIN
        assert Instant.MIN + Duration.MIN == Instant.MIN
        assert Instant.MIN + Duration.MAX == Instant.MAX

    def test_difference(self):
        a = Instant.from_utc(2024, 1, 15, 12)
        b = Instant.from_utc(2024, 1, 14)
        assert a - b == Duration(hours=36)
        assert b - a == Duration(hours=-36)
        assert a - OffsetInstant(2024, 1, 15, 12, offset=2) == hours(2)

    def test_unsupported(self):
        i = Instant.from_utc(2024, 1, 15)
        with pytest.raises(TypeError):
            i + 1  # type: ignore[operator]
        with pytest.raises(TypeError):
            i - 1  # type: ignore[operator]
        with pytest.raises(TypeError):
            i + i  # type: ignore[operator]


class TestComparison:

    def test_equality(self):
        a = Instant.from_utc(2024, 1, 15, 7, 30)
        same = OffsetInstant(2024, 1, 15, 12, 30, offset=5)
        assert a == Instant.from_utc(2024, 1, 15, 7, 30)
        assert a != a + Duration(1)
        assert a == same
        assert hash(a) == hash(same)
        assert a == AlwaysEqual()
        assert a != NeverEqual()
        assert not a == a.ticks  # type: ignore[comparison-overlap]

    def test_ordering(self):
        a = Instant.from_utc(2024, 1, 15)
        b = a + Duration(1)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a < OffsetInstant(2024, 1, 15, 1, offset=0)
        assert a > OffsetInstant(2024, 1, 15, 1, offset=2)
        assert a < AlwaysLarger()
        assert a > AlwaysSmaller()
        with pytest.raises(TypeError):
            a < 1  # type: ignore[operator]

    def test_exact_eq(self):
        a = Instant.from_utc(2024, 1, 15)
        assert a.exact_eq(Instant.from_utc(2024, 1, 15))
        assert not a.exact_eq(a + Duration(1))
        with pytest.raises(TypeError):
            a.exact_eq(a.to_fixed_offset(0))  # type: ignore[arg-type]


class TestFormat:

    i = Instant.from_utc(2024, 1, 15, 12, 30, 45, millisecond=120)

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            (Format.ISO8601_BASIC, "2024-01-15T12:30:45Z"),
            (Format.ISO8601_EXTENDED, "2024-01-15T12:30:45.12Z"),
            (Format.ISO8601_WITH_OFFSET, "2024-01-15T12:30:45+00:00"),
            (Format.DATE_ONLY, "2024-01-15"),
            (Format.TIME_ONLY, "12:30:45"),
            (Format.UNIX_SECONDS, "1705321845"),
            (Format.UNIX_MILLISECONDS, "1705321845120"),
        ],
    )
    def test_formats(self, fmt, expected):
        assert self.i.format(fmt) == expected

    def test_defaults(self):
        assert self.i.format() == "2024-01-15T12:30:45Z"
        assert self.i.format_common_iso() == "2024-01-15T12:30:45Z"
        assert str(self.i) == "2024-01-15T12:30:45Z"

    def test_extended_keeps_one_digit(self):
        assert (
            Instant.from_utc(2024, 1, 15).format(Format.ISO8601_EXTENDED)
            == "2024-01-15T00:00:00.0Z"
        )
        assert (
            Instant.MAX.format(Format.ISO8601_EXTENDED)
            == "9999-12-31T23:59:59.9999999Z"
        )

    @pytest.mark.parametrize(
        "ticks, expected",
        [
            (1, "1970-01-01T00:00:00.0000001Z"),
            (1_000_000, "1970-01-01T00:00:00.1Z"),
            (1_230_000, "1970-01-01T00:00:00.123Z"),
        ],
    )
    def test_extended_fraction(self, ticks, expected):
        i = Instant.EPOCH + Duration(ticks)
        assert i.format(Format.ISO8601_EXTENDED) == expected

    def test_pre_epoch_unix(self):
        i = Instant.EPOCH - Duration(milliseconds=1_500)
        assert i.format(Format.UNIX_SECONDS) == "-1"
        assert i.format(Format.UNIX_MILLISECONDS) == "-1500"

    def test_invalid_format(self):
        with pytest.raises(TypeError):
            self.i.format("basic")  # type: ignore[arg-type]

    def test_repr(self):
        assert repr(self.i) == "Instant(2024-01-15 12:30:45.12Z)"
        assert repr(Instant.EPOCH) == "Instant(1970-01-01 00:00:00Z)"


class TestParseCommonIso:

    @pytest.mark.parametrize(
        "s, expected",
        [
            ("2024-01-15", Instant.from_utc(2024, 1, 15)),
            ("2024-01-15Z", Instant.from_utc(2024, 1, 15)),
            ("2024-01-15T12:30:45", Instant.from_utc(2024, 1, 15, 12, 30, 45)),
            (
                "2024-01-15T12:30:45Z",
                Instant.from_utc(2024, 1, 15, 12, 30, 45),
            ),
            (
                "2024-01-15T12:30:45.5Z",
                Instant.from_utc(2024, 1, 15, 12, 30, 45, millisecond=500),
            ),
            (
                "2024-01-15T12:30:45.123456789Z",
                Instant.from_utc(2024, 1, 15, 12, 30, 45) + Duration(1_234_567),
            ),
            # offsets are discarded
            (
                "2024-01-15T12:30:45+05:00",
                Instant.from_utc(2024, 1, 15, 12, 30, 45),
            ),
            (
                "2024-01-15T12:30:45-0530",
                Instant.from_utc(2024, 1, 15, 12, 30, 45),
            ),
            (
                "2024-01-15T12:30:45+14",
                Instant.from_utc(2024, 1, 15, 12, 30, 45),
            ),
            # only the shape of a discarded offset matters
            (
                "2024-01-15T12:30:45+15:00",
                Instant.from_utc(2024, 1, 15, 12, 30, 45),
            ),
            (
                "2024-01-15T12:30:45+14:01",
                Instant.from_utc(2024, 1, 15, 12, 30, 45),
            ),
            (
                "2024-01-15T12:30:45-9959",
                Instant.from_utc(2024, 1, 15, 12, 30, 45),
            ),
            ("2024-01-15-05:00", Instant.from_utc(2024, 1, 15)),
            ("0001-01-01T00:00:00Z", Instant.MIN),
            (
                "9999-12-31T23:59:59.9999999Z",
                Instant.MAX,
            ),
            ("2024-02-29T00:00:00Z", Instant.from_utc(2024, 2, 29)),
        ],
    )
    def test_valid(self, s, expected):
        assert Instant.parse_common_iso(s) == expected
        assert Instant.try_parse_common_iso(s) == expected

    @pytest.mark.parametrize(
        "s",
        [
            "",
            "2024",
            "2024-01",
            "2024-1-15",
            "2024-01-5",
            "20240115",
            "2024-01-15T",
            "2024-01-15T12",
            "2024-01-15T12:30",
            "2024-01-15T12:30:45.",
            "2024-01-15T12:30:45.Z",
            "2024-01-15 12:30:45",
            "2024-01-15t12:30:45",
            "2024-01-15T12:30:45z",
            "2024-01-15T12:30:45Zjunk",
            "2024-01-15T12:30:45ZZ",
            "2024-01-15T12:30:45+-05:00",
            "2024-01-15T12:30:45+5:00",
            "2024-01-15T12:30:45+05:0",
            "2024-01-15T12:30:45+1:00",
            "2024-01-15T12:30:45+05:0a",
            "2024-01-15T12:30:45+050",
            "2024-01-15T12:30:45+",
            "0000-01-01",
            "2023-02-29",
            "2024-13-01",
            "2024-01-32",
            "2024-01-15T24:00:00",
            "2024-01-15T12:60:00",
            "2024-01-15T12:30:60",
            "-2024-01-15",
            "2024-01-15T12:30:45.1２Z",  # non-ASCII
        ],
    )
    def test_invalid(self, s):
        with pytest.raises(ValueError, match="Invalid format"):
            Instant.parse_common_iso(s)
        assert Instant.try_parse_common_iso(s) is None

    def test_non_string(self):
        with pytest.raises(TypeError):
            Instant.parse_common_iso(20240115)  # type: ignore[arg-type]

    @given(integers(0, MAX_TICKS))
    def test_roundtrip_extended(self, ticks):
        i = Instant(ticks)
        assert Instant.parse_common_iso(i.format(Format.ISO8601_EXTENDED)) == i
        assert Instant.parse_common_iso(str(i)) == i - Duration(
            ticks % 10_000_000
        )

    @given(text())
    def test_fuzzing(self, s):
        try:
            Instant.parse_common_iso(s)
        except ValueError as e:
            assert "Invalid format" in str(e)


class TestOffsetConversion:

    def test_to_fixed_offset(self):
        i = Instant.from_utc(2024, 1, 15, 12, 30)
        o = i.to_fixed_offset(hours(5.5))
        assert o.exact_eq(OffsetInstant(2024, 1, 15, 18, offset=hours(5.5)))
        assert o == i
        assert i.to_fixed_offset(-2).hour == 10

    def test_to_fixed_offset_at_range_edges(self):
        o = Instant.MAX.to_fixed_offset(1)
        assert o.utc_ticks == MAX_TICKS
        assert o == Instant.MAX
        assert o.offset == hours(1)
        # the civil reading is clamped only when read back as an Instant
        assert o.local() == Instant.MAX
        assert o.instant() == Instant.MAX

        o = Instant.MIN.to_fixed_offset(-1)
        assert o.utc_ticks == 0
        assert o == Instant.MIN
        assert o.local() == Instant.MIN
        assert o.year == 1

    @given(integers(0, MAX_TICKS), integers(-14 * 60, 14 * 60))
    def test_to_fixed_offset_keeps_moment(self, ticks, offset_mins):
        i = Instant(ticks)
        o = i.to_fixed_offset(minutes(offset_mins))
        assert o.utc_ticks == ticks
        assert o.instant() == i

    @skip_without_tzset
    def test_to_system_tz(self):
        i = Instant.from_utc(2024, 1, 15, 12)
        with system_tz(FIXED_TZ_POSIX):
            o = i.to_system_tz()
            assert o.offset == hours(5.5)
            assert o == i
            assert i.to_fixed_offset().exact_eq(o)


def test_now():
    i = Instant.from_utc(1980, 3, 2, hour=2, minute=5)
    with patch_current_time(i, keep_ticking=False):
        assert Instant.now() == i
        assert Instant.today() == Instant.from_utc(1980, 3, 2)
    now = Instant.now()
    assert Instant.from_utc(2024, 1, 1) < now < Instant.MAX
    assert Instant.now() - now < seconds(10)


def test_constants():
    assert Instant.MIN.ticks == 0
    assert Instant.MAX.ticks == MAX_TICKS
    assert str(Instant.MIN) == "0001-01-01T00:00:00Z"
    assert str(Instant.MAX) == "9999-12-31T23:59:59Z"
    assert Instant.MAX - Instant.MIN == Duration(MAX_TICKS)
    assert minutes(1) < Instant.EPOCH - Instant.MIN


def test_copy():
    i = Instant.from_utc(2024, 1, 15, 12)
    assert copy(i) is i
    assert deepcopy(i) is i


def test_pickling():
    i = Instant.from_utc(2024, 1, 15, 12, millisecond=3) + Duration(7)
    dumped = pickle.dumps(i)
    assert len(dumped) < len(pickle.dumps(i.py_datetime())) + 15
    assert pickle.loads(dumped).exact_eq(i)
    assert pickle.loads(pickle.dumps(Instant.MAX)) == Instant.MAX


def test_cannot_subclass():
    with pytest.raises(TypeError):

        class SubclassInstant(Instant):  # type: ignore[misc]
            pass
