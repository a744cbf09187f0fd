"""
LED strip interface - what LedSignalBoard needs from a strip
"""
from abc import ABC, abstractmethod
from typing import List, Union

from .pixel import Pixel


class LedStrip(ABC):
    """Abstract LED strip addressed with Python index/slice notation

    Implementations buffer writes; nothing is visible until show().

        strip[5] = Pixel(255, 0, 0)           # one pixel
        strip[0:10] = Pixel(0, 255, 0)        # one color for a range
        strip[0:3] = [red, green, blue]       # one color per pixel
        strip.fill(BLACK)                     # every pixel

    Assigning a list to a single position raises TypeError; a list whose
    length differs from the slice raises ValueError.
    """

    @abstractmethod
    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        pass

    @abstractmethod
    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        pass

    @abstractmethod
    def show(self) -> None:
        """Push the buffer to the LEDs"""
        pass

    @abstractmethod
    def num_pixels(self) -> int:
        pass

    def fill(self, color: Pixel) -> None:
        """Set every pixel in the buffer to one color"""
        self[:] = color
