"""
Utilities package - logging and frame-loop timing helpers for SimonBox
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter
from .once_in_ms import OnceInMs, Clock, monotonic_ms
from .deferred_calls import DeferredCalls

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'OnceInMs',
    'Clock',
    'monotonic_ms',
    'DeferredCalls'
]
