"""
Shared fixtures: fake clock, recording collaborators and a ready controller
"""

import random
from typing import Callable, List, Optional, Tuple

import pytest

from audio_system import MockToneController
from simon_system import (
    GameController,
    ISignalDisplay,
    MemoryHighScoreStore,
    Phase,
    Signal,
    SignalPalette,
)
from utils import HybridLogger


class FakeClock:
    """Millisecond clock that only moves when told to"""

    def __init__(self, start_ms: float = 0.0):
        self.now = start_ms

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class RecordingDisplay(ISignalDisplay):
    """Signal display remembering every call as (time, action, signal)"""

    def __init__(self, clock: FakeClock):
        self._clock = clock
        self.events: List[Tuple[float, str, Optional[Signal]]] = []
        self.active = set()
        self.disabled = False

    def activate(self, signal: Signal) -> None:
        self.events.append((self._clock(), "on", signal))
        self.active.add(signal)

    def deactivate(self, signal: Signal) -> None:
        self.events.append((self._clock(), "off", signal))
        self.active.discard(signal)

    def set_disabled(self, disabled: bool) -> None:
        self.disabled = disabled


class ScriptedPalette(SignalPalette):
    """Palette returning a fixed list of signals, then falling back to random picks"""

    def __init__(self, script: List[Signal]):
        super().__init__(random.Random(7))
        self._script = list(script)

    def pick_random(self) -> Signal:
        if self._script:
            return self._script.pop(0)
        return super().pick_random()


@pytest.fixture
def hybrid_logger():
    main_logger = HybridLogger("SimonTest", log_dir=None)
    yield main_logger
    main_logger.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", 10)  # DEBUG


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def display(clock):
    return RecordingDisplay(clock)


@pytest.fixture
def tones(logger):
    return MockToneController(logger)


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def make_controller(tones, display, store, logger, clock) -> Callable[..., GameController]:
    """Build a controller; pass script=[...] to fix the generated signals"""

    def _make(script: Optional[List[Signal]] = None, seed: int = 1234, high_score_store=None) -> GameController:
        palette = ScriptedPalette(script) if script is not None else SignalPalette(random.Random(seed))
        return GameController(
            tone_output=tones,
            display=display,
            high_score_store=high_score_store if high_score_store is not None else store,
            logger=logger,
            palette=palette,
            clock=clock
        )

    return _make


def run_until(controller: GameController, clock: FakeClock, condition: Callable[[], bool],
              limit_ms: float = 60000, step_ms: float = 10) -> None:
    """Advance the clock frame by frame until condition() holds"""
    controller.update()
    elapsed = 0.0
    while not condition():
        if elapsed >= limit_ms:
            raise AssertionError(f"Condition not reached within {limit_ms}ms")
        clock.advance(step_ms)
        elapsed += step_ms
        controller.update()


def wait_for_input(controller: GameController, clock: FakeClock) -> None:
    run_until(controller, clock, lambda: controller.phase is Phase.AWAITING_INPUT)


def play_round(controller: GameController, clock: FakeClock) -> None:
    """Wait for the playback, then repeat the whole sequence correctly"""
    wait_for_input(controller, clock)
    for signal in controller.sequence:
        controller.handle_signal(signal)
        clock.advance(50)
        controller.update()
