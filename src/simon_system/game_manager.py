"""
Main game manager - frame loop connecting buttons, the Simon controller and the LEDs
"""

import time
from typing import TYPE_CHECKING

import psutil

from .session import Phase
from .signals import ALL_SIGNALS, Signal
from utils import Clock, OnceInMs, monotonic_ms

if TYPE_CHECKING:
    from button_system import ButtonReader
    from led_system.signal_board import LedSignalBoard
    from utils import ClassLogger
    from .game_controller import GameController


class GameManager:
    """
    Runs the game at a fixed frame rate.

    Responsibilities:
    - Sample buttons and turn presses into controller operations
      (signal buttons 0-3, start button, mute button)
    - Advance the controller's timers once per frame
    - Log phase changes and, once a minute, process resource usage
    - Clean up audio, LEDs and buttons on stop
    """

    def __init__(self,
                 button_reader: 'ButtonReader',
                 controller: 'GameController',
                 board: 'LedSignalBoard',
                 logger: 'ClassLogger',
                 start_button: int,
                 mute_button: int,
                 frame_duration_ms: float = 20,
                 clock: Clock = monotonic_ms):
        """
        Initialize the game manager.

        Args:
            button_reader: Interface for reading button states
            controller: Simon state machine
            board: LED board showing the signals (cleared on stop)
            logger: Logger for debugging and monitoring
            start_button: Button index that starts / restarts a game
            mute_button: Button index that toggles sound
            frame_duration_ms: Target frame duration in milliseconds
            clock: Millisecond clock used for throttling
        """
        self.button_reader = button_reader
        self.controller = controller
        self.board = board
        self.logger = logger
        self.start_button = start_button
        self.mute_button = mute_button
        self.target_frame_duration = frame_duration_ms / 1000.0
        self.running = True

        self._usage_monitor = OnceInMs(60000, clock)  # Log every 60 seconds
        self._process = psutil.Process()
        self._last_phase: Phase = controller.phase

        self.logger.info(
            f"GameManager initialized: {frame_duration_ms}ms frame duration, "
            f"{button_reader.get_button_count()} buttons"
        )

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Call this from your main() function for automatic frame management.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration * 1000)}ms frame duration")

        try:
            while self.running:
                frame_start = time.monotonic()

                self.update()

                sleep_time = self.target_frame_duration - (time.monotonic() - frame_start)
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
            self.logger.flush()
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """One frame: sample buttons, dispatch presses, advance the controller"""
        if self._usage_monitor.should_execute():
            self._log_resource_usage()

        button_state = self.button_reader.read_buttons()
        for button_index in button_state.just_pressed:
            self._dispatch_press(button_index)

        self.controller.update()

        phase = self.controller.phase
        if phase is not self._last_phase:
            self._last_phase = phase
            self.logger.debug(str(self.controller.snapshot()))

    def stop(self) -> None:
        """Stop the game and clean up resources."""
        self.running = False

        self.controller.tone_output.cleanup()
        self.board.clear()
        self.button_reader.cleanup()

        self.logger.info(
            f"Game stopped - last score {self.controller.score}, high score {self.controller.high_score}"
        )

    def _dispatch_press(self, button_index: int) -> None:
        if button_index == self.start_button:
            self.controller.start()
        elif button_index == self.mute_button:
            self.controller.toggle_mute()
        elif button_index < len(ALL_SIGNALS):
            self.controller.handle_signal(Signal.from_index(button_index))
        else:
            self.logger.warning(f"Button {button_index} has no function")

    def _log_resource_usage(self) -> None:
        """Log current memory and CPU usage (process and system)"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu_percent = self._process.cpu_percent(interval=None)

            sys_mem = psutil.virtual_memory()
            sys_cpu_percent = psutil.cpu_percent(interval=None)

            self.logger.info(
                f"💾 Memory - Process: {process_mb:.1f}MB | "
                f"System: {sys_mem.used / 1024 / 1024:.0f}/{sys_mem.total / 1024 / 1024:.0f}MB "
                f"({sys_mem.percent:.1f}%) | "
                f"⚙️  CPU - Process: {process_cpu_percent:.1f}% | System: {sys_cpu_percent:.1f}%"
            )
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")
