"""
Button System Package

Button reading with edge detection, independent of the input hardware.
"""

from .button_state import ButtonState
from .interfaces import IButtonSampler
from .button_reader import ButtonReader
from .gpio_sampler import GPIOSampler
from .keyboard_sampler import KeyboardSampler

__all__ = [
    "ButtonState",
    "IButtonSampler",
    "ButtonReader",
    "GPIOSampler",
    "KeyboardSampler"
]
