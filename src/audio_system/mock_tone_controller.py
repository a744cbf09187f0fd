"""
Mock Tone Controller - No-op implementation for running without audio hardware
"""

from typing import List

from simon_system.interfaces import IToneOutput
from simon_system.signals import Signal


class MockToneController(IToneOutput):
    """
    Performs no audio operations; logs and remembers every requested tone.

    `played` lists the signals whose tone would have sounded, in order.
    """

    def __init__(self, logger):
        self.logger = logger
        self.played: List[Signal] = []
        self.logger.info("🔇 MockToneController initialized (audio disabled)")

    def play_tone(self, signal: Signal, muted: bool = False) -> None:
        if muted:
            return
        self.played.append(signal)
        self.logger.debug(f"Mock: tone {signal.value}")

    def cleanup(self) -> None:
        self.logger.debug("Mock: cleanup")
