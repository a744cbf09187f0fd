"""
Tone synthesis - sine tones with a linear attack/decay envelope as 16-bit PCM
"""

import math
from array import array


def envelope_gain(t_ms: float, peak: float, attack_ms: float, duration_ms: float) -> float:
    """
    Amplitude of the envelope at time t_ms.

    Rises linearly from 0 to `peak` over attack_ms, then falls linearly to
    0 at duration_ms; silent outside [0, duration_ms].
    """
    if t_ms <= 0 or t_ms >= duration_ms:
        return 0.0
    if t_ms < attack_ms:
        return peak * t_ms / attack_ms
    return peak * (duration_ms - t_ms) / (duration_ms - attack_ms)


def synthesize_tone(frequency: float,
                    sample_rate: int = 44100,
                    peak: float = 0.5,
                    attack_ms: float = 10,
                    duration_ms: float = 300,
                    channels: int = 1) -> array:
    """
    Render a sine tone as signed 16-bit samples.

    Args:
        frequency: Pitch in Hz
        sample_rate: Samples per second
        peak: Envelope peak (0.0-1.0 of full scale)
        attack_ms: Rise time to peak
        duration_ms: Total length; the tone has decayed to silence here
        channels: Samples are duplicated per channel (interleaved)

    Returns:
        array('h') ready for pygame.mixer.Sound(buffer=...)
    """
    frames = int(sample_rate * duration_ms / 1000)
    two_pi_f = 2.0 * math.pi * frequency
    samples = array('h')
    for i in range(frames):
        t = i / sample_rate
        gain = envelope_gain(t * 1000.0, peak, attack_ms, duration_ms)
        value = int(max(-1.0, min(1.0, gain * math.sin(two_pi_f * t))) * 32767)
        for _ in range(channels):
            samples.append(value)
    return samples
