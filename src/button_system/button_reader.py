"""
Button reader implementation with state management and edge detection
"""

from contextlib import suppress
from typing import List

from .interfaces import IButtonSampler
from .button_state import ButtonState


class ButtonReader:
    """
    Button reader with state management and edge detection.

    Uses an IButtonSampler for the hardware (GPIO, keyboard, scripted...).

    Example:
        sampler = GPIOSampler([5, 6, 13, 19, 26, 20], "off", logger)
        reader = ButtonReader(sampler, logger)

        state = reader.read_buttons()
        for index in state.just_pressed:
            ...
    """

    def __init__(self, sampler: IButtonSampler, logger):
        """
        Initialize button reader and set up the sampler.

        Args:
            sampler: IButtonSampler instance for reading button hardware
            logger: ClassLogger instance
        """
        self._sampler = sampler
        self._logger = logger

        button_count = sampler.get_button_count()
        self._previous_state: List[bool] = [False] * button_count

        self._sampler.setup()

        self._logger.info(f"ButtonReader initialized with {button_count} buttons")

    def read_buttons(self) -> ButtonState:
        """
        Read current state of all buttons.

        Returns:
            ButtonState: current/previous values and edge detection
        """
        current_state: List[bool] = [
            self._sampler.read_button(i) for i in range(self._sampler.get_button_count())
        ]

        state = ButtonState(
            for_button=current_state,
            previous_state_of=self._previous_state.copy()
        )
        self._previous_state = current_state

        if state.just_pressed:
            self._logger.debug(str(state))

        return state

    def get_button_count(self) -> int:
        return self._sampler.get_button_count()

    def cleanup(self) -> None:
        # Cleanup may run during interpreter shutdown; never raise from here
        with suppress(Exception):
            self._sampler.cleanup()
            self._logger.info("ButtonReader cleaned up successfully")
