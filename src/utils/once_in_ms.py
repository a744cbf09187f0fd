"""
Timing utilities for the frame loop: millisecond clock and execution throttling
"""

import time
from typing import Callable

# A clock is any zero-argument callable returning milliseconds
Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Milliseconds from a monotonic source (immune to wall-clock changes)"""
    return time.monotonic() * 1000.0


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    Use this to limit how often expensive operations run in the game loop,
    even though the loop itself runs every frame (e.g., 20ms).

    Example:
        self._usage_monitor = OnceInMs(60000)  # Once per minute

        # In update loop:
        if self._usage_monitor.should_execute():
            self._log_resource_usage()
    """

    def __init__(self, interval_ms: int, clock: Clock = monotonic_ms):
        """
        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Millisecond clock (injectable for tests)
        """
        self.interval_ms = interval_ms
        self._clock = clock
        self.last_execution = None

    def should_execute(self) -> bool:
        """Return True (and restart the interval) if the interval has passed"""
        current = self._clock()
        if self.last_execution is None or current - self.last_execution >= self.interval_ms:
            self.last_execution = current
            return True
        return False

