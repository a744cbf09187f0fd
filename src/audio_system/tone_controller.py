"""
Tone Controller - plays the per-signal tones through pygame
"""

import pygame
from typing import Dict, Optional, TYPE_CHECKING

from simon_system.config import ToneConfig
from simon_system.interfaces import IToneOutput
from simon_system.signals import ALL_SIGNALS, Signal
from .tone_synth import synthesize_tone

if TYPE_CHECKING:
    from utils import ClassLogger


class ToneController(IToneOutput):
    """
    Plays one short synthesized tone per signal.

    All tones are rendered once at startup into pygame Sound objects, so
    play_tone() only starts a channel and returns. Tones may overlap; each
    decays to silence on its own.
    """

    def __init__(self, logger: 'ClassLogger', tone_config: Optional[ToneConfig] = None):
        """
        Initialize pygame mixer and render the tones.

        Args:
            logger: ClassLogger instance for logging
            tone_config: Pitches, envelope and sample rate

        Raises:
            pygame.error: If the mixer cannot be initialized
        """
        self.logger = logger
        self.tone_config = tone_config if tone_config is not None else ToneConfig()

        self.mixer = pygame.mixer
        self.mixer.pre_init(frequency=self.tone_config.sample_rate, size=-16, channels=1, buffer=512)
        self.mixer.init()

        self._sounds: Dict[Signal, pygame.mixer.Sound] = {}
        self._render_tones()

    def _render_tones(self) -> None:
        # The mixer may have opened with different settings than requested
        sample_rate, _, channels = self.mixer.get_init()
        cfg = self.tone_config
        for signal in ALL_SIGNALS:
            frequency = cfg.frequencies[signal]
            pcm = synthesize_tone(
                frequency,
                sample_rate=sample_rate,
                peak=cfg.peak_volume,
                attack_ms=cfg.attack_ms,
                duration_ms=cfg.duration_ms,
                channels=channels
            )
            self._sounds[signal] = pygame.mixer.Sound(buffer=pcm.tobytes())
        self.logger.info(
            f"ToneController initialized: {len(self._sounds)} tones at {sample_rate}Hz, {channels} channel(s)"
        )

    def play_tone(self, signal: Signal, muted: bool = False) -> None:
        if muted:
            return
        try:
            self._sounds[signal].play()
        except pygame.error as e:
            self.logger.warning(f"Failed to play tone for {signal.value}: {e}")

    def cleanup(self) -> None:
        if self.mixer.get_init():
            self.mixer.stop()
            self.mixer.quit()
            self.logger.info("ToneController cleaned up")
