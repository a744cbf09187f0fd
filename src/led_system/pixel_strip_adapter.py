"""
rpi_ws281x strip behind the LedStrip interface

rpi_ws281x is imported when an adapter is created, so the rest of the
package imports fine on machines without it.
"""
from typing import List, TYPE_CHECKING, Union

from .interfaces import LedStrip
from .pixel import Pixel

if TYPE_CHECKING:
    from simon_system.config import LedStripConfig


class PixelStripAdapter(LedStrip):
    """LedStrip on a WS281x strip driven by rpi_ws281x.PixelStrip

    Pixel is an int, so colors go to PixelStrip unchanged.

    Example:
        strip = PixelStripAdapter.from_config(config.led_strip)
        strip.fill(Pixel(0, 0, 40))
        strip.show()
    """

    def __init__(self, led_count: int, gpio_pin: int, freq_hz: int = 800000,
                 dma: int = 10, invert: bool = False, brightness: int = 255,
                 channel: int = 0) -> None:
        """
        Args:
            led_count: Number of LEDs
            gpio_pin: Data pin (BCM numbering, PWM capable)
            freq_hz: Signal frequency
            dma: DMA channel
            invert: Invert the data signal (level shifter with inverting output)
            brightness: Global brightness 0-255
            channel: PWM channel

        Raises:
            ImportError: If rpi_ws281x is not installed
            RuntimeError: If the strip cannot be initialized (usually not root)
        """
        from rpi_ws281x import PixelStrip

        self._led_count = led_count
        self._strip = PixelStrip(led_count, gpio_pin, freq_hz, dma, invert, brightness, channel)
        self._strip.begin()

    @classmethod
    def from_config(cls, config: 'LedStripConfig') -> 'PixelStripAdapter':
        return cls(
            led_count=config.led_count,
            gpio_pin=config.gpio_pin,
            freq_hz=config.freq_hz,
            dma=config.dma,
            invert=config.invert,
            brightness=config.brightness,
            channel=config.channel
        )

    def __getitem__(self, pos: Union[int, slice]) -> Union[Pixel, List[Pixel]]:
        if isinstance(pos, slice):
            return [Pixel(self._strip.getPixelColor(i)) for i in range(*pos.indices(self._led_count))]
        return Pixel(self._strip.getPixelColor(pos))

    def __setitem__(self, pos: Union[int, slice], color: Union[Pixel, List[Pixel]]) -> None:
        if not isinstance(pos, slice):
            if isinstance(color, list):
                raise TypeError("Cannot assign list of colors to single position")
            self._strip.setPixelColor(pos, color)
            return

        indices = range(*pos.indices(self._led_count))
        colors = color if isinstance(color, list) else [color] * len(indices)
        if len(colors) != len(indices):
            raise ValueError(f"Color list length ({len(colors)}) must match slice length ({len(indices)})")
        for i, pixel in zip(indices, colors):
            self._strip.setPixelColor(i, pixel)

    def show(self) -> None:
        self._strip.show()

    def num_pixels(self) -> int:
        return self._led_count
