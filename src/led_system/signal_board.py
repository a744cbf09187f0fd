"""
LED signal board - the four Simon regions rendered on one LED strip
"""
from typing import Dict, Optional, TYPE_CHECKING

from simon_system.interfaces import ISignalDisplay
from simon_system.signals import ALL_SIGNALS, Signal
from .pixel import BLACK, Pixel

if TYPE_CHECKING:
    from .interfaces import LedStrip
    from utils import ClassLogger


SIGNAL_COLORS: Dict[Signal, Pixel] = {
    Signal.GREEN: Pixel(0, 200, 0),
    Signal.RED: Pixel(220, 0, 0),
    Signal.YELLOW: Pixel(230, 180, 0),
    Signal.BLUE: Pixel(0, 60, 230),
}

NORMAL_LEVEL = 0.35
DISABLED_LEVEL = 0.12


class LedSignalBoard(ISignalDisplay):
    """
    Splits a strip into four equal segments, one per signal (in ALL_SIGNALS
    order); leftover pixels at the end stay dark.

    Looks:
        active   - full color
        normal   - dimmed color (NORMAL_LEVEL)
        disabled - barely lit (DISABLED_LEVEL), active regions still light up

    Every change is pushed with a single show().
    """

    def __init__(self,
                 strip: 'LedStrip',
                 logger: 'ClassLogger',
                 colors: Optional[Dict[Signal, Pixel]] = None):
        self.strip = strip
        self._logger = logger
        self.colors = dict(colors) if colors is not None else dict(SIGNAL_COLORS)

        segment_length = strip.num_pixels() // len(ALL_SIGNALS)
        if segment_length == 0:
            raise ValueError(f"Strip too short for {len(ALL_SIGNALS)} regions: {strip.num_pixels()} LEDs")

        self.segments: Dict[Signal, slice] = {
            signal: slice(i * segment_length, (i + 1) * segment_length)
            for i, signal in enumerate(ALL_SIGNALS)
        }
        self.active: Dict[Signal, bool] = {signal: False for signal in ALL_SIGNALS}
        self.disabled = False

        self.strip.fill(BLACK)
        self._render()
        self._logger.info(f"LedSignalBoard initialized: {segment_length} LEDs per region")

    def activate(self, signal: Signal) -> None:
        self.active[signal] = True
        self._render()

    def deactivate(self, signal: Signal) -> None:
        self.active[signal] = False
        self._render()

    def set_disabled(self, disabled: bool) -> None:
        if disabled == self.disabled:
            return
        self.disabled = disabled
        self._logger.debug("Board disabled" if disabled else "Board enabled")
        self._render()

    def region_color(self, signal: Signal) -> Pixel:
        """Color a region should currently show"""
        base = self.colors[signal]
        if self.active[signal]:
            return base
        return base.scaled(DISABLED_LEVEL if self.disabled else NORMAL_LEVEL)

    def clear(self) -> None:
        """Turn every LED off"""
        self.strip.fill(BLACK)
        self.strip.show()

    def _render(self) -> None:
        for signal, segment in self.segments.items():
            self.strip[segment] = self.region_color(signal)
        self.strip.show()

