"""
In-memory LED strip for development and tests
"""
from typing import List, Union

from .interfaces import LedStrip
from .pixel import BLACK, Pixel


class MemoryLedStrip(LedStrip):
    """LedStrip backed by a Python list; show() snapshots the buffer

    `shown` holds what the "physical" strip currently displays, so tests can
    tell apart buffered and shown colors.
    """

    def __init__(self, led_count: int):
        self._buffer: List[Pixel] = [BLACK] * led_count
        self.shown: List[Pixel] = list(self._buffer)
        self.show_count = 0

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        return self._buffer[pos]

    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        if isinstance(pos, slice):
            indices = range(*pos.indices(len(self._buffer)))
            if isinstance(color, list):
                if len(color) != len(indices):
                    raise ValueError(f"Color list length ({len(color)}) must match slice length ({len(indices)})")
                for i, pixel in zip(indices, color):
                    self._buffer[i] = Pixel(pixel)
            else:
                for i in indices:
                    self._buffer[i] = Pixel(color)
        else:
            if isinstance(color, list):
                raise TypeError("Cannot assign list of colors to single position")
            self._buffer[pos] = Pixel(color)

    def show(self) -> None:
        self.shown = list(self._buffer)
        self.show_count += 1

    def num_pixels(self) -> int:
        return len(self._buffer)
