"""
Game session data - phase, sequence, cursor and scores
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .signals import Signal


class Phase(enum.Enum):
    IDLE = "idle"                        # No sequence yet
    PLAYING = "playing"                  # Scheduler is showing the sequence
    AWAITING_INPUT = "awaiting_input"    # User may act
    GAME_OVER = "game_over"              # Terminal until restart


# Phases in which a new game may start, and in which the buttons are locked
STARTABLE_PHASES = (Phase.IDLE, Phase.GAME_OVER)
LOCKED_PHASES = (Phase.PLAYING, Phase.GAME_OVER)


@dataclass
class GameSession:
    """
    Mutable state of one play session, owned by GameController.

    generation grows by one on every game start; timers remember the
    generation they were scheduled in and do nothing once it is outdated.
    """
    high_score: int = 0
    sequence: List[Signal] = field(default_factory=list)
    cursor: int = 0
    score: int = 0
    phase: Phase = Phase.IDLE
    muted: bool = False
    active_signal: Optional[Signal] = None
    generation: int = 0

    def snapshot(self) -> 'SessionSnapshot':
        return SessionSnapshot(
            sequence=tuple(self.sequence),
            cursor=self.cursor,
            score=self.score,
            high_score=self.high_score,
            phase=self.phase,
            muted=self.muted,
            active_signal=self.active_signal,
            generation=self.generation
        )


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of a GameSession for renderers and logs"""
    sequence: Tuple[Signal, ...]
    cursor: int
    score: int
    high_score: int
    phase: Phase
    muted: bool
    active_signal: Optional[Signal]
    generation: int

    @property
    def buttons_disabled(self) -> bool:
        return self.phase in LOCKED_PHASES

    @property
    def can_start(self) -> bool:
        return self.phase in STARTABLE_PHASES

    def __str__(self) -> str:
        active = self.active_signal.value if self.active_signal else "-"
        return (
            f"Session("
            f"phase={self.phase.value}, "
            f"length={len(self.sequence)}, "
            f"cursor={self.cursor}, "
            f"score={self.score}, "
            f"high_score={self.high_score}, "
            f"muted={self.muted}, "
            f"active={active}"
            f")"
        )
