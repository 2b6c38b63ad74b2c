"""
Stress tests for thread-safety of the local offset cache.

Note this isn't a unit test, because it relies on a clean cache
"""

import sys
import time
from os import environ
from threading import Thread

from tickwise import Instant, OffsetInstant, reset_system_tz

if not hasattr(sys, "_is_gil_enabled") or sys._is_gil_enabled():
    # Running with GIL enabled can still be useful to compare performance,
    # but be sure to warn that threading hasn't been stress tested.
    print("WARNING: Running with GIL enabled. Threading not stress tested.")


START = Instant.from_utc(2024, 3, 30, 12)
NUM_THREADS = 16
NUM_ITERATIONS = 500
# Each hour hits a different cache entry, and the range spans a DST change
HOUR_SAMPLE = [START.add(hours=h) for h in range(37)]
assert (
    len(HOUR_SAMPLE) % NUM_THREADS
), "Hour sample should not be evenly divisible by number of threads"
INSTANTS = HOUR_SAMPLE * (NUM_THREADS * NUM_ITERATIONS)
TZ_SAMPLE = [
    "UTC0",
    "CET-1CEST,M3.5.0,M10.5.0/3",
    "EST+5EDT,M3.2.0,M11.1.0",
    "IST-5:30",
    "NZST-12NZDT,M9.5.0,M4.1.0/3",
]


def touch_offsets(instants):
    """A minimal function that triggers a local offset lookup"""
    for i in instants:
        local = i.to_system_tz()
        assert local == i
        del local


def set_system_tz(instants):
    """A function that keeps changing the system timezone"""
    for n, i in enumerate(instants):
        environ["TZ"] = TZ_SAMPLE[n % len(TZ_SAMPLE)]
        reset_system_tz()
        local = OffsetInstant.from_local(i)
        del local


def main(func):
    print(f"Starting test: {func.__name__}")
    threads = []

    start_time = time.time()

    for n in range(NUM_THREADS):
        thread = Thread(target=func, args=(INSTANTS[n::NUM_THREADS],))
        threads.append(thread)
        thread.start()

    for thread in threads:
        thread.join()

    end_time = time.time()
    print(f"Execution time: {end_time - start_time:.2f} seconds")


if __name__ == "__main__":
    main(touch_offsets)
    main(set_system_tz)
