"""
Exceptions raised on precondition violations in the Simon game core
"""


class SimonError(Exception):
    """Base class for Simon game errors"""


class PlaybackBusyError(SimonError):
    """Raised when playback is requested while a previous playback is still running"""
