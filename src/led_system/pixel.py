"""
Pixel - packed RGB color usable directly as an LED strip color value
"""
from typing import Optional


class Pixel(int):
    """Color that packs RGB into a 24-bit integer

    Pixel IS an int, so LED libraries take it as-is; the r/g/b properties
    and scaled() make it convenient to build dimmed variants of a color.

    Usage:
        green = Pixel(0, 200, 0)
        dim_green = green.scaled(0.25)
        print(dim_green.g)  # 50
    """

    def __new__(cls, r: int, g: Optional[int] = None, b: Optional[int] = None) -> 'Pixel':
        """Create from RGB components or from an already packed int

        Raises:
            ValueError: If only some of the RGB components are given
        """
        if g is None and b is None:
            return int.__new__(cls, r)
        if g is None or b is None:
            raise ValueError("Must provide either just int value or all three RGB values")
        return int.__new__(cls, ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF))

    @property
    def r(self) -> int:
        return (self >> 16) & 0xFF

    @property
    def g(self) -> int:
        return (self >> 8) & 0xFF

    @property
    def b(self) -> int:
        return self & 0xFF

    def scaled(self, factor: float) -> 'Pixel':
        """Same hue at a different brightness (factor clamped to 0.0-1.0)"""
        factor = max(0.0, min(1.0, factor))
        return Pixel(int(self.r * factor), int(self.g * factor), int(self.b * factor))

    def __repr__(self) -> str:
        return f"Pixel(r={self.r}, g={self.g}, b={self.b})"


BLACK = Pixel(0, 0, 0)
