import os
import sys
from contextlib import contextmanager
from unittest.mock import patch

import pytest

from tickwise import reset_system_tz

# POSIX TZ strings, which don't depend on the timezone database
AMS_TZ_POSIX = "CET-1CEST,M3.5.0,M10.5.0/3"
NYC_TZ_POSIX = "EST+5EDT,M3.2.0,M11.1.0"
FIXED_TZ_POSIX = "XXX-5:30"  # always +05:30

skip_without_tzset = pytest.mark.skipif(
    sys.platform == "win32", reason="TZ changes need time.tzset (Unix only)"
)


class AlwaysEqual:
    def __eq__(self, _):
        return True


class NeverEqual:
    def __eq__(self, _):
        return False


class AlwaysLarger:
    def __lt__(self, _):
        return False

    def __le__(self, _):
        return False

    def __gt__(self, _):
        return True

    def __ge__(self, _):
        return True


class AlwaysSmaller:
    def __lt__(self, _):
        return True

    def __le__(self, _):
        return True

    def __gt__(self, _):
        return False

    def __ge__(self, _):
        return False


@contextmanager
def system_tz(tz: str):
    try:
        with patch.dict(os.environ, {"TZ": tz}):
            reset_system_tz()
            yield
    finally:
        reset_system_tz()


def system_tz_ams():
    return system_tz(AMS_TZ_POSIX)


def system_tz_nyc():
    return system_tz(NYC_TZ_POSIX)
