"""
Tests for configuration validation
"""

from dataclasses import fields

import pytest

from simon import create_simon_config
from simon_system import Signal
from simon_system.config import ButtonConfig, LedStripConfig, SimonConfig, TimingConfig, ToneConfig


def make_config(**overrides) -> SimonConfig:
    values = dict(
        button_config=ButtonConfig(signal_pins=[5, 6, 13, 19], start_pin=26, mute_pin=20),
        led_strip=LedStripConfig(gpio_pin=18, led_count=40),
    )
    values.update(overrides)
    return SimonConfig(**values)


def test_default_hardware_config_is_valid():
    config = create_simon_config()
    config.validate()

    assert config.button_count == 6
    assert config.button_config.start_index == 4
    assert config.button_config.mute_index == 5
    assert config.target_fps == pytest.approx(50.0)


def test_default_timing():
    timing = TimingConfig()
    assert (timing.signal_on_ms, timing.signal_off_ms) == (500, 250)
    assert timing.feedback_ms == 300
    assert timing.success_pause_ms == 1000


@pytest.mark.parametrize("overrides", [
    dict(button_config=ButtonConfig(signal_pins=[5, 6, 13], start_pin=26, mute_pin=20)),
    dict(button_config=ButtonConfig(signal_pins=[5, 6, 13, 19], start_pin=5, mute_pin=20)),
    dict(button_config=ButtonConfig(signal_pins=[5, 6, 13, 19], start_pin=26, mute_pin=20, pull_mode="sideways")),
    dict(button_config=ButtonConfig(signal_pins=[5, 6, 13, 40], start_pin=26, mute_pin=20)),
    dict(led_strip=LedStripConfig(gpio_pin=26, led_count=40)),
    dict(led_strip=LedStripConfig(gpio_pin=18, led_count=3)),
    dict(led_strip=LedStripConfig(gpio_pin=18, led_count=40, brightness=300)),
    dict(frame_duration_ms=0),
    dict(frame_duration_ms=250),
    dict(timing=TimingConfig(signal_on_ms=0)),
    dict(timing=TimingConfig(feedback_ms=-1)),
    dict(tone=ToneConfig(peak_volume=1.5)),
    dict(tone=ToneConfig(attack_ms=300)),
    dict(tone=ToneConfig(frequencies={Signal.GREEN: 440.0})),
    dict(tone=ToneConfig(frequencies={s: 440.0 for s in Signal})),
])
def test_invalid_configs_are_rejected(overrides):
    with pytest.raises(ValueError):
        make_config(**overrides).validate()


def test_button_config_holds_only_wired_settings():
    # create_game_system reads every one of these
    assert [f.name for f in fields(ButtonConfig)] == ["signal_pins", "start_pin", "mute_pin", "pull_mode"]
