"""
Tests for the signal palette and the input validator
"""

import random
from collections import Counter

import pytest

from simon_system import ALL_SIGNALS, Signal, SignalPalette, Verdict, validate_input


def test_signal_indices_follow_palette_order():
    assert [s.index for s in ALL_SIGNALS] == [0, 1, 2, 3]
    assert Signal.from_index(2) is Signal.YELLOW
    assert ALL_SIGNALS == [Signal.GREEN, Signal.RED, Signal.YELLOW, Signal.BLUE]


def test_seeded_palettes_repeat_the_same_picks():
    first = SignalPalette(random.Random(99))
    second = SignalPalette(random.Random(99))
    assert [first.pick_random() for _ in range(20)] == [second.pick_random() for _ in range(20)]


def test_palette_covers_every_signal_roughly_uniformly():
    palette = SignalPalette(random.Random(5))
    counts = Counter(palette.pick_random() for _ in range(4000))
    assert set(counts) == set(ALL_SIGNALS)
    for signal in ALL_SIGNALS:
        assert 800 < counts[signal] < 1200


def test_palette_allows_consecutive_duplicates():
    palette = SignalPalette(random.Random(3))
    picks = [palette.pick_random() for _ in range(200)]
    assert any(a == b for a, b in zip(picks, picks[1:]))


@pytest.mark.parametrize("cursor, chosen, expected", [
    (0, Signal.GREEN, Verdict.MATCH),
    (1, Signal.RED, Verdict.MATCH),
    (2, Signal.GREEN, Verdict.SEQUENCE_COMPLETE),
    (0, Signal.BLUE, Verdict.MISMATCH),
    (2, Signal.RED, Verdict.MISMATCH),
])
def test_validate_input(cursor, chosen, expected):
    sequence = [Signal.GREEN, Signal.RED, Signal.GREEN]
    assert validate_input(sequence, cursor, chosen) is expected


def test_single_signal_sequence_completes_on_first_match():
    assert validate_input([Signal.BLUE], 0, Signal.BLUE) is Verdict.SEQUENCE_COMPLETE


def test_validate_input_is_pure():
    sequence = [Signal.YELLOW, Signal.YELLOW]
    validate_input(sequence, 0, Signal.YELLOW)
    assert sequence == [Signal.YELLOW, Signal.YELLOW]
