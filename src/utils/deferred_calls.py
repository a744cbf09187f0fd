"""
Deferred calls - cooperative one-shot timers polled from the frame loop
"""

import heapq
import itertools
from typing import Callable, List, Tuple


class DeferredCalls:
    """
    Queue of callbacks that become due at a given time in milliseconds.

    Nothing runs by itself: the owner calls run_due(now_ms) once per frame and
    every callback whose due time has passed runs in due-time order (ties keep
    scheduling order). Callbacks may schedule further calls; those run in the
    same pass only if already due.

    Example:
        calls = DeferredCalls()
        calls.call_at(now + 1000, lambda: print("one second later"))
        ...
        calls.run_due(clock())  # from the game loop
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, Callable[[], None]]] = []
        self._counter = itertools.count()

    def call_at(self, due_ms: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._heap, (due_ms, next(self._counter), callback))

    def run_due(self, now_ms: float) -> int:
        """
        Run every callback due at or before now_ms.

        Returns:
            Number of callbacks executed
        """
        executed = 0
        while self._heap and self._heap[0][0] <= now_ms:
            _, _, callback = heapq.heappop(self._heap)
            callback()
            executed += 1
        return executed

    def cancel_all(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)
