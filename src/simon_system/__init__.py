"""
Simon System - memory-sequence game core

Sequence generation, timed playback, input validation, scoring and the
state machine tying them together, plus the frame loop that runs it.
"""

from .signals import Signal, SignalPalette, ALL_SIGNALS
from .input_validator import Verdict, validate_input
from .playback_scheduler import PlaybackScheduler, PlaybackEvent, PlaybackEventKind, build_timeline
from .session import Phase, GameSession, SessionSnapshot
from .interfaces import IToneOutput, ISignalDisplay, IHighScoreStore, IPlaybackListener
from .high_score import JsonHighScoreStore, MemoryHighScoreStore
from .errors import SimonError, PlaybackBusyError
from .game_controller import GameController
from .game_manager import GameManager
from .config import SimonConfig, TimingConfig, ToneConfig, ButtonConfig, LedStripConfig

__all__ = [
    # Signals
    "Signal",
    "SignalPalette",
    "ALL_SIGNALS",
    # Core
    "Verdict",
    "validate_input",
    "PlaybackScheduler",
    "PlaybackEvent",
    "PlaybackEventKind",
    "build_timeline",
    "Phase",
    "GameSession",
    "SessionSnapshot",
    "GameController",
    "GameManager",
    # Collaborators
    "IToneOutput",
    "ISignalDisplay",
    "IHighScoreStore",
    "IPlaybackListener",
    "JsonHighScoreStore",
    "MemoryHighScoreStore",
    # Errors
    "SimonError",
    "PlaybackBusyError",
    # Configuration
    "SimonConfig",
    "TimingConfig",
    "ToneConfig",
    "ButtonConfig",
    "LedStripConfig"
]
