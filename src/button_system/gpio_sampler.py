"""
GPIO-based button sampler implementation using RPi.GPIO
"""

from contextlib import suppress
from typing import List

from .interfaces import IButtonSampler


class GPIOSampler(IButtonSampler):
    """
    GPIO button sampling for the Raspberry Pi.

    RPi.GPIO is imported in setup(), so this module can be imported (and
    the keyboard sampler used instead) on machines without it.
    """

    def __init__(self,
                 button_pins: List[int],
                 pull_mode: str,
                 logger):
        """
        Args:
            button_pins: GPIO pin numbers (BCM mode), in button-index order
            pull_mode: "off", "up" or "down"
            logger: ClassLogger instance for logging
        """
        self._button_pins = list(button_pins)
        self._pull_mode = pull_mode
        self._logger = logger
        self._gpio = None

    def get_button_count(self) -> int:
        return len(self._button_pins)

    def setup(self) -> None:
        """Initialize GPIO pins for input

        Raises:
            ImportError: If RPi.GPIO is not installed
        """
        import RPi.GPIO as GPIO

        pull = {
            "off": GPIO.PUD_OFF,
            "up": GPIO.PUD_UP,
            "down": GPIO.PUD_DOWN
        }[self._pull_mode]

        try:
            GPIO.setmode(GPIO.BCM)
            for pin in self._button_pins:
                GPIO.setup(pin, GPIO.IN, pull_up_down=pull)
        except Exception as e:
            self._logger.error(f"GPIO sampler setup failed: {e}", exception=e)
            raise

        self._gpio = GPIO
        pin_mapping = ", ".join(f"Btn{i}=GPIO{pin}" for i, pin in enumerate(self._button_pins))
        self._logger.info(f"GPIO sampler initialized: {len(self._button_pins)} pins (pull {self._pull_mode})")
        self._logger.info(f"Pin mapping: {pin_mapping}")

    def read_button(self, button_index: int) -> bool:
        """True if the pin reads HIGH (button pressed)"""
        pin = self._button_pins[button_index]
        return self._gpio.input(pin) == self._gpio.HIGH

    def cleanup(self) -> None:
        if self._gpio is None:
            return
        with suppress(Exception):
            self._gpio.cleanup(self._button_pins)
            self._logger.info("GPIO sampler cleaned up")
        self._gpio = None
