"""
Button sampler interface - one raw boolean per SimonBox button
"""

from abc import ABC, abstractmethod


class IButtonSampler(ABC):
    """
    Raw button hardware, read one button at a time.

    Indices follow SimonBox's button order: the four signals (green, red,
    yellow, blue), then start, then mute. ButtonReader reads index 0 first
    on every pass, so a sampler may refresh its inputs there.

    Edge detection lives in ButtonReader; a sampler only reports whether a
    button is down right now.
    """

    @abstractmethod
    def read_button(self, button_index: int) -> bool:
        pass

    @abstractmethod
    def get_button_count(self) -> int:
        pass

    @abstractmethod
    def setup(self) -> None:
        """Claim the input hardware (pins, terminal); called once by ButtonReader"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        pass
