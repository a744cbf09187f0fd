"""
Keyboard sampler for playing without GPIO hardware
"""

import select
import sys
import termios
import tty
from collections import deque
from contextlib import suppress
from typing import Deque, Dict, List, Optional

from .interfaces import IButtonSampler


class KeyboardSampler(IButtonSampler):
    """
    Momentary-press keyboard sampler (works over SSH using stdin).

    Every key press becomes one short button press: the mapped button reads
    as pressed for exactly one read_buttons() pass and released on the next.
    Keys typed faster than the frame rate are queued and replayed one per
    pass, so "gg" still counts as two presses of green.

    New input is polled when button 0 is read, which ButtonReader does at the
    start of every pass.

    Example:
        sampler = KeyboardSampler({'g': 0, 'r': 1, 'y': 2, 'b': 3, 's': 4, 'm': 5}, logger)
    """

    def __init__(self, key_map: Dict[str, int], logger):
        """
        Args:
            key_map: Key character → button index (indices must be 0..N-1)
            logger: ClassLogger instance for logging
        """
        indices = sorted(set(key_map.values()))
        if indices != list(range(len(indices))):
            raise ValueError(f"Key map must cover button indices 0..N-1, got {indices}")

        self._key_map = {key.lower(): index for key, index in key_map.items()}
        self._button_count = len(indices)
        self._logger = logger
        self._pulses: List[bool] = [False] * self._button_count
        self._queued: Deque[int] = deque()
        self._last_pulse: Optional[int] = None

        self._original_terminal_settings = None

    def get_button_count(self) -> int:
        return self._button_count

    def setup(self) -> None:
        """Switch the terminal to raw mode for immediate key capture

        Raises:
            RuntimeError: If stdin is not an interactive terminal
        """
        if not sys.stdin.isatty():
            self._logger.error("❌ Keyboard input not available (stdin is not a TTY)")
            raise RuntimeError("Keyboard input not available")

        self._original_terminal_settings = termios.tcgetattr(sys.stdin)
        tty.setcbreak(sys.stdin.fileno())

        keys = ", ".join(f"'{key}'=Btn{index}" for key, index in sorted(self._key_map.items(), key=lambda kv: kv[1]))
        self._logger.info("🎮 Keyboard sampler initialized (NO GPIO)")
        self._logger.info(f"   Keys: {keys}")

    def _read_available_keys(self) -> str:
        keys = []
        while select.select([sys.stdin], [], [], 0) == ([sys.stdin], [], []):
            keys.append(sys.stdin.read(1))
        return "".join(keys)

    def _poll_keyboard(self) -> None:
        for key in self._read_available_keys().lower():
            index = self._key_map.get(key)
            if index is None:
                self._logger.debug(f"Unmapped key {key!r}")
                continue
            self._queued.append(index)

        # One press per pass keeps keystroke order; a repeated key gets a
        # released pass in between so it reads as a new press
        previous = self._last_pulse
        self._pulses = [False] * self._button_count
        self._last_pulse = None
        if self._queued and self._queued[0] != previous:
            self._last_pulse = self._queued.popleft()
            self._pulses[self._last_pulse] = True

    def read_button(self, button_index: int) -> bool:
        if button_index == 0:
            self._poll_keyboard()
        return self._pulses[button_index]

    def cleanup(self) -> None:
        """Restore the terminal settings"""
        if self._original_terminal_settings is None:
            return
        with suppress(termios.error, ValueError):
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._original_terminal_settings)
            self._logger.info("Keyboard sampler cleaned up")
        self._original_terminal_settings = None
