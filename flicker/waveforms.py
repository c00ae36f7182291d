"""
Periodic waveforms used to modulate light color and intensity.
"""

import math
import random
from enum import Enum


class WaveFunction(Enum):
    sinus = 0
    triangle = 1
    square = 2
    sawtooth = 3
    inverted_saw = 4
    noise = 5


class ColorChannel(Enum):
    """Which part of the light color the wave scales."""
    all = 0
    red = 1
    blue = 2
    green = 3


def wave_position(t: float, phase: float, frequency: float) -> float:
    """Normalized position inside the current wave cycle (0..1)."""
    x = (t + phase) * frequency
    return x - math.floor(x)


def evaluate_wave(
    kind: WaveFunction,
    t: float,
    phase: float,
    frequency: float,
    amplitude: float,
    offset: float,
    rng: random.Random,
) -> float:
    """
    Evaluate a waveform at time t.

    Args:
        kind: Waveform to evaluate
        t: Current time in seconds
        phase: Start point inside the wave cycle (seconds)
        frequency: Cycles per second
        amplitude: Multiplier applied to the raw wave
        offset: Constant added after scaling
        rng: Random source, only consumed by the noise wave (one draw per call)

    Returns:
        y * amplitude + offset, where y is in [-1, 1] for the periodic
        waves and [0, 1] for the saw waves
    """
    x = wave_position(t, phase, frequency)

    if kind is WaveFunction.sinus:
        y = math.sin(x * 2 * math.pi)
    elif kind is WaveFunction.triangle:
        if x < 0.5:
            y = 4.0 * x - 1.0
        else:
            y = -4.0 * x + 3.0
    elif kind is WaveFunction.square:
        y = 1.0 if x < 0.5 else -1.0
    elif kind is WaveFunction.sawtooth:
        y = x
    elif kind is WaveFunction.inverted_saw:
        y = 1.0 - x
    elif kind is WaveFunction.noise:
        y = 1.0 - rng.random() * 2.0
    else:
        y = 1.0

    return y * amplitude + offset
