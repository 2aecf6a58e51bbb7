import time
from typing import Protocol


class Clock(Protocol):
    """
    Anything with a ``time()`` method returning the Unix time in seconds.
    """

    def time(self) -> float:
        ...


class SystemClock(object):
    """
    Wall-clock time source used when no clock is injected.
    """

    def time(self) -> float:
        return time.time()


class FixedClock(object):
    """
    Clock frozen at a given Unix timestamp.

    Handy in tests and when verifying codes against a recorded point in time.
    """

    def __init__(self, now: float) -> None:
        self.now = now

    def time(self) -> float:
        return self.now


system_clock = SystemClock()
