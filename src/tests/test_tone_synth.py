"""
Tests for tone synthesis and the tone controllers
"""

import pytest
import pygame

from audio_system import MockToneController, ToneController, envelope_gain, synthesize_tone
from simon_system import ALL_SIGNALS, Signal
from simon_system.config import DEFAULT_TONE_FREQUENCIES


@pytest.mark.parametrize("t_ms, expected", [
    (-1, 0.0),
    (0, 0.0),
    (5, 0.25),
    (10, 0.5),
    (155, 0.25),
    (300, 0.0),
    (400, 0.0),
])
def test_envelope_shape(t_ms, expected):
    assert envelope_gain(t_ms, 0.5, 10, 300) == pytest.approx(expected)


def test_tone_length_and_bounds():
    samples = synthesize_tone(440.0, sample_rate=44100, peak=0.5, attack_ms=10, duration_ms=300)

    assert samples.typecode == 'h'
    assert len(samples) == 13230
    assert samples[0] == 0
    assert max(abs(s) for s in samples) <= 0.5 * 32767
    # Loud near the end of the attack, nearly silent at the end
    assert max(abs(s) for s in samples[400:480]) > 10000
    assert max(abs(s) for s in samples[-20:]) < 200


def test_stereo_tone_duplicates_samples():
    mono = synthesize_tone(261.63, duration_ms=50)
    stereo = synthesize_tone(261.63, duration_ms=50, channels=2)

    assert len(stereo) == 2 * len(mono)
    assert list(stereo[0::2]) == list(mono)
    assert list(stereo[1::2]) == list(mono)


def test_default_pitches_are_distinct_and_ascending():
    pitches = [DEFAULT_TONE_FREQUENCIES[s] for s in ALL_SIGNALS]
    assert pitches == sorted(pitches)
    assert len(set(pitches)) == 4


def test_mock_controller_records_unmuted_tones(logger):
    tones = MockToneController(logger)
    tones.play_tone(Signal.RED)
    tones.play_tone(Signal.BLUE, muted=True)
    tones.play_tone(Signal.GREEN)

    assert tones.played == [Signal.RED, Signal.GREEN]


def test_tone_controller_with_dummy_audio(logger, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    try:
        tones = ToneController(logger)
    except pygame.error as e:
        pytest.skip(f"No audio backend available: {e}")

    try:
        for signal in ALL_SIGNALS:
            tones.play_tone(signal)
        tones.play_tone(Signal.RED, muted=True)
    finally:
        tones.cleanup()

    assert not pygame.mixer.get_init()
