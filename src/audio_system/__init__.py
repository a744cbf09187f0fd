"""
Audio System Module

Tone synthesis and playback for the Simon signals.
"""

from .tone_synth import synthesize_tone, envelope_gain
from .tone_controller import ToneController
from .mock_tone_controller import MockToneController

__all__ = [
    'synthesize_tone',
    'envelope_gain',
    'ToneController',
    'MockToneController'
]
