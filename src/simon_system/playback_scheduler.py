"""
Playback scheduler - turns a sequence into timed activate/deactivate events
"""

import enum
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TYPE_CHECKING

from .errors import PlaybackBusyError
from .signals import Signal

if TYPE_CHECKING:
    from .interfaces import IPlaybackListener
    from utils import ClassLogger


class PlaybackEventKind(enum.Enum):
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"
    COMPLETE = "complete"


@dataclass(frozen=True)
class PlaybackEvent:
    """One step of a playback, offset_ms relative to playback start"""
    offset_ms: int
    kind: PlaybackEventKind
    signal: Optional[Signal] = None


def build_timeline(sequence: Sequence[Signal], on_ms: int, off_ms: int) -> List[PlaybackEvent]:
    """
    Build the ordered event list for a sequence.

    Each signal is active for on_ms, then dark for off_ms. COMPLETE comes
    after the last off period, so the board has been dark for off_ms before
    input is accepted.

    Example:
        build_timeline([Signal.RED, Signal.BLUE], 500, 250)
        # ACTIVATE red @0, DEACTIVATE red @500, ACTIVATE blue @750,
        # DEACTIVATE blue @1250, COMPLETE @1500
    """
    step_ms = on_ms + off_ms
    timeline: List[PlaybackEvent] = []
    for i, signal in enumerate(sequence):
        start = i * step_ms
        timeline.append(PlaybackEvent(start, PlaybackEventKind.ACTIVATE, signal))
        timeline.append(PlaybackEvent(start + on_ms, PlaybackEventKind.DEACTIVATE, signal))
    timeline.append(PlaybackEvent(len(sequence) * step_ms, PlaybackEventKind.COMPLETE))
    return timeline


class PlaybackScheduler:
    """
    Non-preemptible sequence playback driven by the frame loop.

    play() only records the timeline and its start time; update(now_ms) emits
    every event that became due since the last frame, strictly in order, so a
    late frame never reorders or skips events. A new play() is refused until
    the previous playback has completed; reset() is the only way to abandon
    a playback early.

    Example:
        scheduler = PlaybackScheduler(listener, logger)
        scheduler.play([Signal.GREEN], now_ms=clock(), on_complete=done)
        while scheduler.is_playing:
            scheduler.update(clock())
    """

    def __init__(self,
                 listener: 'IPlaybackListener',
                 logger: 'ClassLogger',
                 on_ms: int = 500,
                 off_ms: int = 250):
        """
        Args:
            listener: Receives activate/deactivate events
            logger: ClassLogger instance for logging
            on_ms: How long each signal stays active
            off_ms: Dark gap after each signal
        """
        self._listener = listener
        self._logger = logger
        self.on_ms = on_ms
        self.off_ms = off_ms

        self._timeline: List[PlaybackEvent] = []
        self._next_index = 0
        self._start_ms = 0.0
        self._on_complete: Optional[Callable[[], None]] = None

    @property
    def is_playing(self) -> bool:
        return self._on_complete is not None

    def play(self, sequence: Sequence[Signal], now_ms: float, on_complete: Callable[[], None]) -> None:
        """
        Start playing a sequence.

        Args:
            sequence: Signals to play, in order
            now_ms: Current clock time, the playback start
            on_complete: Called once after the final off period

        Raises:
            PlaybackBusyError: If a previous playback has not completed yet
        """
        if self.is_playing:
            raise PlaybackBusyError("Playback already in progress")

        if not sequence:
            self._logger.debug("Empty sequence - playback completes immediately")
            on_complete()
            return

        self._timeline = build_timeline(sequence, self.on_ms, self.off_ms)
        self._next_index = 0
        self._start_ms = now_ms
        self._on_complete = on_complete

        total_ms = self._timeline[-1].offset_ms
        self._logger.debug(f"Playback started: {len(sequence)} signals, {total_ms}ms")

    def update(self, now_ms: float) -> int:
        """
        Emit every event due at now_ms.

        Returns:
            Number of events emitted this call
        """
        emitted = 0
        while self.is_playing and self._next_index < len(self._timeline):
            event = self._timeline[self._next_index]
            if self._start_ms + event.offset_ms > now_ms:
                break
            self._next_index += 1
            emitted += 1
            self._emit(event)
        return emitted

    def reset(self) -> None:
        """Abandon the current playback without emitting anything further"""
        if self.is_playing:
            self._logger.debug("Playback reset")
        self._timeline = []
        self._next_index = 0
        self._on_complete = None

    def _emit(self, event: PlaybackEvent) -> None:
        if event.kind is PlaybackEventKind.ACTIVATE:
            self._listener.on_signal_activated(event.signal)
        elif event.kind is PlaybackEventKind.DEACTIVATE:
            self._listener.on_signal_deactivated(event.signal)
        else:
            on_complete = self._on_complete
            self.reset()
            self._logger.debug("Playback complete")
            # Cleared before the callback so it may start the next playback
            on_complete()
