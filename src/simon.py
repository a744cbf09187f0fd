#!/usr/bin/env python3
"""
SimonBox - memory-sequence game on buttons, an LED strip and a speaker

Wires the Simon game core to the hardware (or development stand-ins) and
runs the frame loop until Ctrl+C.
"""

import logging
import random
import signal
import sys

from button_system import ButtonReader, GPIOSampler, KeyboardSampler
from led_system import LedSignalBoard, MemoryLedStrip, PixelStripAdapter
from audio_system import MockToneController, ToneController
from simon_system import GameController, GameManager, JsonHighScoreStore, SignalPalette
from simon_system.config import ButtonConfig, LedStripConfig, SimonConfig, TimingConfig, ToneConfig
from utils import HybridLogger

# Development switches - run on a laptop with keyboard input and no LEDs/audio
USE_MOCK_AUDIO = False
USE_KEYBOARD_INPUT = False
USE_MEMORY_STRIP = False

# Keyboard layout when USE_KEYBOARD_INPUT: g/r/y/b signals, s start, m mute
KEYBOARD_MAP = {'g': 0, 'r': 1, 'y': 2, 'b': 3, 's': 4, 'm': 5}


def create_simon_config() -> SimonConfig:
    """Create default configuration for the SimonBox hardware"""

    button_config = ButtonConfig(
        signal_pins=[
            5,   # green
            6,   # red
            13,  # yellow
            19,  # blue
        ],
        start_pin=26,
        mute_pin=20,
        pull_mode="off"  # external pull-down circuits
    )

    led_strip = LedStripConfig(
        gpio_pin=18,
        led_count=60,
        dma=10,
        brightness=64,
        channel=0
    )

    return SimonConfig(
        button_config=button_config,
        led_strip=led_strip,
        timing=TimingConfig(),
        tone=ToneConfig(),
        high_score_path="simon_high_score.json",
        frame_duration_ms=20  # 50 FPS
    )


def create_game_system(config: SimonConfig, simon_logger) -> GameManager:
    """
    Create and configure the complete game system.

    Args:
        config: SimonConfig instance with all system configuration
        simon_logger: ClassLogger instance for logging initialization steps

    Returns:
        GameManager: Configured game manager ready to run
    """
    config.validate()

    game_manager_logger = simon_logger.create_class_logger("GameManager", logging.INFO)
    controller_logger = simon_logger.create_class_logger("GameController", logging.INFO)
    button_reader_logger = simon_logger.create_class_logger("ButtonReader", logging.INFO)
    board_logger = simon_logger.create_class_logger("LedSignalBoard", logging.INFO)
    tone_logger = simon_logger.create_class_logger("ToneController", logging.INFO)
    store_logger = simon_logger.create_class_logger("HighScoreStore", logging.INFO)

    try:
        if USE_KEYBOARD_INPUT:
            button_sampler = KeyboardSampler(KEYBOARD_MAP, button_reader_logger)
        else:
            button_sampler = GPIOSampler(
                button_pins=config.button_config.pins,
                pull_mode=config.button_config.pull_mode,
                logger=button_reader_logger
            )
        button_reader = ButtonReader(sampler=button_sampler, logger=button_reader_logger)

        if USE_MEMORY_STRIP:
            strip = MemoryLedStrip(config.led_strip.led_count)
        else:
            strip = PixelStripAdapter.from_config(config.led_strip)
        board = LedSignalBoard(strip, board_logger)

        if USE_MOCK_AUDIO:
            simon_logger.info("🔇 Using MockToneController (audio hardware disabled)")
            tone_output = MockToneController(tone_logger)
        else:
            tone_output = ToneController(tone_logger, config.tone)

        controller = GameController(
            tone_output=tone_output,
            display=board,
            high_score_store=JsonHighScoreStore(config.high_score_path, store_logger),
            logger=controller_logger,
            palette=SignalPalette(random.Random()),
            timing=config.timing
        )

        game_manager = GameManager(
            button_reader=button_reader,
            controller=controller,
            board=board,
            logger=game_manager_logger,
            start_button=config.button_config.start_index,
            mute_button=config.button_config.mute_index,
            frame_duration_ms=config.frame_duration_ms
        )

        simon_logger.info("SimonBox system initialized successfully")
        return game_manager

    except Exception as e:
        simon_logger.error(f"Failed to initialize SimonBox system: {e}", exception=e)
        raise


def main() -> int:
    """
    Main function - sets up and runs the SimonBox system.
    """
    main_logger = HybridLogger("SimonBox")
    simon_logger = main_logger.get_class_logger("SimonBox")

    # SIGTERM (systemd stop) ends the loop the same way Ctrl+C does
    def _terminate(sig, frame):
        simon_logger.critical(f"⚠️  SIGNAL RECEIVED: {sig} - shutting down")
        raise KeyboardInterrupt

    signal.signal(signal.SIGTERM, _terminate)

    simon_logger.info("🎮 SIMONBOX MEMORY GAME")

    config = create_simon_config()

    simon_logger.info(f"Button configuration: {config.button_count} buttons on GPIO {config.button_config.pins}")
    simon_logger.info(f"LED configuration: {config.led_strip.led_count} LEDs on GPIO {config.led_strip.gpio_pin}")
    simon_logger.info(f"Game settings: {config.frame_duration_ms}ms frame duration ({config.target_fps:.1f} FPS)")
    simon_logger.info(
        f"Timing: {config.timing.signal_on_ms}ms on / {config.timing.signal_off_ms}ms off, "
        f"{config.timing.success_pause_ms}ms pause between rounds"
    )

    try:
        game_manager = create_game_system(config, simon_logger)
        simon_logger.info("🚀 Press START to play")
        game_manager.run_game_loop()
        return 0

    except Exception as e:
        simon_logger.error(f"SimonBox system error: {e}", exception=e)
        return 1
    finally:
        simon_logger.info("✅ SimonBox system shut down")
        main_logger.cleanup()


if __name__ == "__main__":
    sys.exit(main())
