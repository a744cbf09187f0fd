#!/usr/bin/env python3
"""
LED System - Library independent LED strip control

- Pixel: packed RGB color that is an int
- LedStrip: abstract interface for LED strip control
- PixelStripAdapter: rpi_ws281x implementation of LedStrip
- MemoryLedStrip: list-backed implementation for development and tests
- LedSignalBoard: the four Simon regions on a strip

Usage:
    from led_system import MemoryLedStrip, LedSignalBoard

    board = LedSignalBoard(MemoryLedStrip(40), logger)
    board.activate(Signal.RED)
"""

from .pixel import Pixel, BLACK
from .interfaces import LedStrip
from .pixel_strip_adapter import PixelStripAdapter
from .memory_strip import MemoryLedStrip
from .signal_board import LedSignalBoard, SIGNAL_COLORS

__all__ = ['Pixel', 'BLACK', 'LedStrip', 'PixelStripAdapter', 'MemoryLedStrip', 'LedSignalBoard', 'SIGNAL_COLORS']
