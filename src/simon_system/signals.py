"""
Signals and the palette the game draws them from
"""

import enum
import random
from typing import List, Optional


class Signal(enum.Enum):
    """The four selectable game symbols - each one a color/tone pair"""
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"

    @property
    def index(self) -> int:
        """Stable position (0-3) used for button and LED region mapping"""
        return ALL_SIGNALS.index(self)

    @classmethod
    def from_index(cls, index: int) -> 'Signal':
        return ALL_SIGNALS[index]


# Fixed order: green, red, yellow, blue
ALL_SIGNALS: List[Signal] = list(Signal)


class SignalPalette:
    """
    Uniform random choice over the fixed signal set.

    Stateless apart from the random source: every pick is independent, so
    the same signal may come up several times in a row.

    Example:
        palette = SignalPalette(random.Random(42))  # reproducible picks
        palette.pick_random()
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()
        self.signals: List[Signal] = list(ALL_SIGNALS)

    def pick_random(self) -> Signal:
        return self._rng.choice(self.signals)
