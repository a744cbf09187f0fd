"""
Abstract interfaces for the collaborators of the game core
"""

from abc import ABC, abstractmethod

from .signals import Signal


class IToneOutput(ABC):
    """
    Audio collaborator - one distinct, stable tone per signal.

    Implementations: pygame synthesis (ToneController), logging mock, etc.
    """

    @abstractmethod
    def play_tone(self, signal: Signal, muted: bool = False) -> None:
        """
        Start the tone of a signal. Returns immediately, the tone decays by itself.

        Args:
            signal: Signal whose tone should sound
            muted: If True, nothing is played
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release audio resources"""
        pass


class ISignalDisplay(ABC):
    """
    Visual collaborator - four fixed regions, one per signal.

    Each region is either normal or active; the whole board can also be
    shown as disabled (no interaction possible).
    """

    @abstractmethod
    def activate(self, signal: Signal) -> None:
        """Highlight the region of a signal"""
        pass

    @abstractmethod
    def deactivate(self, signal: Signal) -> None:
        """Return the region of a signal to its normal look"""
        pass

    @abstractmethod
    def set_disabled(self, disabled: bool) -> None:
        """Show the board as disabled (True) or interactive (False)"""
        pass


class IHighScoreStore(ABC):
    """Persistence collaborator - a single integer kept between sessions"""

    @abstractmethod
    def load_high_score(self) -> int:
        """
        Returns:
            Stored high score, 0 if absent or unreadable
        """
        pass

    @abstractmethod
    def save_high_score(self, value: int) -> None:
        pass


class IPlaybackListener(ABC):
    """Receives the activate/deactivate events emitted by PlaybackScheduler"""

    @abstractmethod
    def on_signal_activated(self, signal: Signal) -> None:
        pass

    @abstractmethod
    def on_signal_deactivated(self, signal: Signal) -> None:
        pass
