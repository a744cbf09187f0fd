"""
SimonBox configuration
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .signals import ALL_SIGNALS, Signal


# Reference pitches: C4, E4, G4, C5
DEFAULT_TONE_FREQUENCIES: Dict[Signal, float] = {
    Signal.GREEN: 261.63,
    Signal.RED: 329.63,
    Signal.YELLOW: 392.00,
    Signal.BLUE: 523.25,
}

PULL_MODES = ("off", "up", "down")


@dataclass
class TimingConfig:
    """Game timing in milliseconds"""
    signal_on_ms: int = 500
    signal_off_ms: int = 250       # half of signal_on_ms
    feedback_ms: int = 300         # highlight after a user press
    success_pause_ms: int = 1000   # pause before replaying a longer sequence

    def validate(self) -> None:
        if self.signal_on_ms <= 0:
            raise ValueError(f"signal_on_ms must be positive, got {self.signal_on_ms}")
        if self.signal_off_ms < 0:
            raise ValueError(f"signal_off_ms cannot be negative, got {self.signal_off_ms}")
        if self.feedback_ms <= 0:
            raise ValueError(f"feedback_ms must be positive, got {self.feedback_ms}")
        if self.success_pause_ms < 0:
            raise ValueError(f"success_pause_ms cannot be negative, got {self.success_pause_ms}")


@dataclass
class ToneConfig:
    """Tone synthesis settings"""
    sample_rate: int = 44100
    peak_volume: float = 0.5
    attack_ms: int = 10
    duration_ms: int = 300
    frequencies: Dict[Signal, float] = field(default_factory=lambda: dict(DEFAULT_TONE_FREQUENCIES))

    def validate(self) -> None:
        if self.sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {self.sample_rate}")
        if not (0.0 < self.peak_volume <= 1.0):
            raise ValueError(f"Peak volume must be in (0, 1], got {self.peak_volume}")
        if not (0 <= self.attack_ms < self.duration_ms):
            raise ValueError(f"Attack ({self.attack_ms}ms) must be shorter than the tone ({self.duration_ms}ms)")

        missing = [s.value for s in ALL_SIGNALS if s not in self.frequencies]
        if missing:
            raise ValueError(f"Missing tone frequency for signals: {missing}")
        pitches = list(self.frequencies.values())
        if len(set(pitches)) != len(pitches):
            raise ValueError("Every signal needs a distinct tone frequency")


@dataclass
class ButtonConfig:
    """Button hardware configuration"""
    signal_pins: List[int]         # one per signal, in ALL_SIGNALS order
    start_pin: int
    mute_pin: int
    pull_mode: str = "off"         # "off", "up" or "down"

    @property
    def pins(self) -> List[int]:
        """All pins in button-index order: signals, then start, then mute"""
        return list(self.signal_pins) + [self.start_pin, self.mute_pin]

    @property
    def start_index(self) -> int:
        return len(self.signal_pins)

    @property
    def mute_index(self) -> int:
        return len(self.signal_pins) + 1


@dataclass
class LedStripConfig:
    """Configuration of the LED strip showing the four signal regions"""
    gpio_pin: int
    led_count: int
    freq_hz: int = 800000
    dma: int = 10
    invert: bool = False
    brightness: int = 26  # 0-255
    channel: int = 0


@dataclass
class SimonConfig:
    """Main SimonBox configuration"""

    button_config: ButtonConfig
    led_strip: LedStripConfig
    timing: TimingConfig = field(default_factory=TimingConfig)
    tone: ToneConfig = field(default_factory=ToneConfig)

    high_score_path: str = "simon_high_score.json"

    frame_duration_ms: float = 20  # 50 FPS

    @property
    def button_count(self) -> int:
        return len(self.button_config.pins)

    @property
    def target_fps(self) -> float:
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        if len(self.button_config.signal_pins) != len(ALL_SIGNALS):
            raise ValueError(
                f"Need exactly {len(ALL_SIGNALS)} signal button pins, got {len(self.button_config.signal_pins)}"
            )

        pins = self.button_config.pins
        if len(set(pins)) != len(pins):
            raise ValueError(f"Duplicate button GPIO pins: {pins}")

        if self.led_strip.gpio_pin in pins:
            raise ValueError(f"GPIO pin conflict between buttons and LEDs: {self.led_strip.gpio_pin}")

        for pin in pins + [self.led_strip.gpio_pin]:
            if not (2 <= pin <= 27):  # Valid RPi GPIO range
                raise ValueError(f"GPIO pin {pin} out of valid range (2-27)")

        if self.button_config.pull_mode not in PULL_MODES:
            raise ValueError(f"Pull mode must be one of {PULL_MODES}, got {self.button_config.pull_mode!r}")

        if self.led_strip.led_count < len(ALL_SIGNALS):
            raise ValueError(f"LED strip needs at least {len(ALL_SIGNALS)} LEDs, got {self.led_strip.led_count}")
        if not (0 <= self.led_strip.brightness <= 255):
            raise ValueError(f"LED brightness must be 0-255, got {self.led_strip.brightness}")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")
        if self.frame_duration_ms >= self.timing.signal_off_ms and self.timing.signal_off_ms > 0:
            raise ValueError(
                f"Frame duration ({self.frame_duration_ms}ms) must be shorter than the off period "
                f"({self.timing.signal_off_ms}ms)"
            )

        self.timing.validate()
        self.tone.validate()
