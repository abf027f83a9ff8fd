"""Sessions that measure elapsed time against a replaceable clock."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of a start time and the current time, in whole seconds."""

    @abstractmethod
    def start(self) -> int:
        """Time at which a session begins."""

    @abstractmethod
    def now(self) -> int:
        """Current time."""


class TimeClock(Clock):
    """Clock backed by the system's wall clock."""

    def start(self) -> int:
        return self.now()

    def now(self) -> int:
        return int(time.time())


class OneHourClock(Clock):
    """Clock for which an hour has always passed."""

    def start(self) -> int:
        return 0

    def now(self) -> int:
        return 3600


class ConfigurableClock(Clock):
    """Clock for which a fixed number of seconds has always passed."""

    def __init__(self, length: int) -> None:
        self.length = length

    def start(self) -> int:
        return 0

    def now(self) -> int:
        return self.length


class Session:
    """Records its start time and reports the seconds since."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock if clock is not None else TimeClock()
        self._start_time = self._clock.start()

    def elapsed(self) -> int:
        return int(self._clock.now() - self._start_time)