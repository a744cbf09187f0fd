"""
Game controller - the Simon state machine
"""

from typing import Optional, Tuple, TYPE_CHECKING

from .config import TimingConfig
from .input_validator import Verdict, validate_input
from .interfaces import IPlaybackListener
from .playback_scheduler import PlaybackScheduler
from .session import LOCKED_PHASES, STARTABLE_PHASES, GameSession, Phase, SessionSnapshot
from .signals import Signal, SignalPalette
from utils import Clock, DeferredCalls, monotonic_ms

if TYPE_CHECKING:
    from .interfaces import IHighScoreStore, ISignalDisplay, IToneOutput
    from utils import ClassLogger


class GameController(IPlaybackListener):
    """
    Top-level Simon state machine.

    Owns the GameSession and is the only component with external operations:
    start(), handle_signal(), toggle_mute() and restart(). Time only moves
    forward in update(), which the frame loop calls once per frame.

    Phases:
        IDLE → PLAYING → AWAITING_INPUT → (PLAYING → AWAITING_INPUT)* → GAME_OVER

    Calls that are not valid in the current phase are ignored and logged at
    DEBUG level. Presses during playback are expected and are not errors.

    Example:
        controller = GameController(tones, board, store, logger)
        controller.start()
        while True:
            controller.update()
            ...
            controller.handle_signal(Signal.RED)
    """

    def __init__(self,
                 tone_output: 'IToneOutput',
                 display: 'ISignalDisplay',
                 high_score_store: 'IHighScoreStore',
                 logger: 'ClassLogger',
                 palette: Optional[SignalPalette] = None,
                 timing: Optional[TimingConfig] = None,
                 clock: Clock = monotonic_ms):
        """
        Initialize the controller and load the stored high score.

        Args:
            tone_output: Audio collaborator
            display: Visual collaborator
            high_score_store: Persistence collaborator
            logger: ClassLogger instance for logging
            palette: Signal source (inject a seeded one for reproducible games)
            timing: Durations of playback, feedback and pauses
            clock: Millisecond clock (inject a fake one in tests)
        """
        self.tone_output = tone_output
        self.display = display
        self.high_score_store = high_score_store
        self.logger = logger
        self.palette = palette if palette is not None else SignalPalette()
        self.timing = timing if timing is not None else TimingConfig()
        self._clock = clock

        self._scheduler = PlaybackScheduler(
            listener=self,
            logger=logger.create_class_logger("PlaybackScheduler"),
            on_ms=self.timing.signal_on_ms,
            off_ms=self.timing.signal_off_ms
        )
        self._deferred = DeferredCalls()
        self._feedback_token = 0

        self.session = GameSession(high_score=high_score_store.load_high_score())
        self.display.set_disabled(False)

        self.logger.info(f"GameController initialized: high score {self.session.high_score}")

    # ------------------------------------------------------------------
    # External operations
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """
        Start a new game with a one-signal sequence.

        Valid from IDLE or GAME_OVER only.

        Returns:
            True if a game was started, False if the call was ignored
        """
        session = self.session
        if session.phase not in STARTABLE_PHASES:
            self.logger.debug(f"start() ignored during {session.phase.name}")
            return False

        # Anything still scheduled belongs to the previous game
        session.generation += 1
        self._deferred.cancel_all()
        self._scheduler.reset()
        self._clear_active_signal()

        session.score = 0
        session.cursor = 0
        session.sequence = [self.palette.pick_random()]

        self.logger.info(f"Game #{session.generation} started (high score {session.high_score})")
        self._transition_to(Phase.PLAYING)
        self._begin_playback(session.generation)
        return True

    def restart(self) -> bool:
        """Start over after a game over - same as start()"""
        return self.start()

    def handle_signal(self, signal: Signal) -> Optional[Verdict]:
        """
        Process one user selection.

        Only accepted in AWAITING_INPUT. Every accepted press gets a short
        visual + audio feedback, right or wrong.

        Args:
            signal: Signal the user selected

        Returns:
            Verdict of the press, or None if the press was ignored
        """
        session = self.session
        if session.phase is not Phase.AWAITING_INPUT:
            self.logger.debug(f"Ignoring {signal.value} during {session.phase.name}")
            return None

        self._give_feedback(signal)

        verdict = validate_input(session.sequence, session.cursor, signal)

        if verdict is Verdict.MISMATCH:
            expected = session.sequence[session.cursor]
            self.logger.info(
                f"Wrong signal at step {session.cursor + 1}/{len(session.sequence)}: "
                f"expected {expected.value}, got {signal.value}"
            )
            session.high_score = max(session.high_score, session.score)
            self.high_score_store.save_high_score(session.high_score)
            self.logger.info(f"Game over - score {session.score}, high score {session.high_score}")
            self._transition_to(Phase.GAME_OVER)

        elif verdict is Verdict.MATCH:
            session.cursor += 1

        else:
            session.score += 1
            session.sequence.append(self.palette.pick_random())
            session.cursor = 0
            self.logger.info(f"Round complete - score {session.score}, next length {len(session.sequence)}")
            self._transition_to(Phase.PLAYING)

            generation = session.generation
            self._deferred.call_at(
                self._clock() + self.timing.success_pause_ms,
                lambda: self._begin_playback(generation)
            )

        return verdict

    def toggle_mute(self) -> bool:
        """
        Flip the mute flag (any phase).

        Returns:
            New muted state
        """
        self.session.muted = not self.session.muted
        self.logger.info("Sound muted 🔇" if self.session.muted else "Sound unmuted 🔊")
        return self.session.muted

    def update(self) -> None:
        """Advance timers and playback to the current clock time (call every frame)"""
        now = self._clock()
        self._deferred.run_due(now)
        self._scheduler.update(now)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.session.phase

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def high_score(self) -> int:
        return self.session.high_score

    @property
    def sequence(self) -> Tuple[Signal, ...]:
        return tuple(self.session.sequence)

    @property
    def is_playing(self) -> bool:
        return self._scheduler.is_playing

    def snapshot(self) -> SessionSnapshot:
        return self.session.snapshot()

    # ------------------------------------------------------------------
    # Playback listener
    # ------------------------------------------------------------------

    def on_signal_activated(self, signal: Signal) -> None:
        self.session.active_signal = signal
        self.display.activate(signal)
        self._request_tone(signal)

    def on_signal_deactivated(self, signal: Signal) -> None:
        if self.session.active_signal == signal:
            self.session.active_signal = None
        self.display.deactivate(signal)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _begin_playback(self, generation: int) -> None:
        session = self.session
        if generation != session.generation or session.phase is not Phase.PLAYING:
            self.logger.debug(f"Dropping stale playback of game #{generation}")
            return

        # Feedback of the last press must not cut the first playback highlight short
        self._clear_active_signal()

        sequence = list(session.sequence)
        self.logger.debug(f"Playing sequence: {' '.join(s.value for s in sequence)}")
        self._scheduler.play(
            sequence,
            now_ms=self._clock(),
            on_complete=lambda: self._on_playback_complete(generation)
        )

    def _on_playback_complete(self, generation: int) -> None:
        session = self.session
        if generation != session.generation or session.phase is not Phase.PLAYING:
            self.logger.debug(f"Dropping stale playback completion of game #{generation}")
            return
        session.cursor = 0
        self._transition_to(Phase.AWAITING_INPUT)

    def _give_feedback(self, signal: Signal) -> None:
        session = self.session
        if session.active_signal is not None and session.active_signal != signal:
            self.display.deactivate(session.active_signal)

        session.active_signal = signal
        self.display.activate(signal)
        self._request_tone(signal)

        self._feedback_token += 1
        token = self._feedback_token
        generation = session.generation
        self._deferred.call_at(
            self._clock() + self.timing.feedback_ms,
            lambda: self._release_feedback(signal, token, generation)
        )

    def _release_feedback(self, signal: Signal, token: int, generation: int) -> None:
        # A newer press or a new game owns the highlight now
        if token != self._feedback_token or generation != self.session.generation:
            return
        if self.session.active_signal == signal:
            self.session.active_signal = None
            self.display.deactivate(signal)

    def _clear_active_signal(self) -> None:
        self._feedback_token += 1
        active = self.session.active_signal
        if active is not None:
            self.session.active_signal = None
            self.display.deactivate(active)

    def _request_tone(self, signal: Signal) -> None:
        if self.session.muted:
            self.logger.debug(f"Muted - no tone for {signal.value}")
            return
        self.tone_output.play_tone(signal)

    def _transition_to(self, new_phase: Phase) -> None:
        old_phase = self.session.phase
        self.session.phase = new_phase
        self.logger.info(f"State transition: {old_phase.name} → {new_phase.name}")
        self.display.set_disabled(new_phase in LOCKED_PHASES)
