"""
Waveform-driven light color and intensity animation.

One LightColorAnimation instance belongs to exactly one light. The host
frame loop calls initialize() once and then advance() every frame:

    animation = LightColorAnimation(AnimationConfig(wave_function=WaveFunction.noise))
    animation.initialize(light.color, light.intensity)
    while running:
        animation.advance(dt, now, light)

Any object with mutable `color` (Color) and `intensity` (float)
attributes can be animated.
"""

import random
from typing import Optional, Protocol
from pydantic import BaseModel, Field

from flicker.color import Color
from flicker.intermittency import IntermittencyController
from flicker.logger import logger
from flicker.state import AnimationState
from flicker.waveforms import ColorChannel, WaveFunction, evaluate_wave


class AnimatedLight(Protocol):
    color: Color
    intensity: float


class AnimationConfig(BaseModel):
    """Animation settings. Numeric values are not range-checked."""
    color_channel: ColorChannel = Field(ColorChannel.all, description="Color channel(s) scaled by the wave")
    wave_function: WaveFunction = Field(WaveFunction.sinus, description="Waveform shape")
    offset: float = Field(0.0, description="Constant offset")
    amplitude: float = Field(1.0, description="Amplitude of the wave")
    phase: float = Field(0.0, description="Start point inside the wave cycle")
    frequency: float = Field(0.5, description="Cycle frequency per second")
    affects_intensity: bool = True

    # Intermittency (alternate wave and steady intervals)
    intermittent: bool = False
    smallest_nonwave_interval: float = 1.0
    largest_nonwave_interval: float = 5.0
    smallest_wave_interval: float = 0.1
    largest_wave_interval: float = 1.0

    class Config:
        frozen = True


class LightColorAnimation:
    def __init__(self, config: Optional[AnimationConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or AnimationConfig()
        self.rng = rng or random.Random()
        self.state = AnimationState()
        self.intermittency = IntermittencyController(
            smallest_nonwave_interval=self.config.smallest_nonwave_interval,
            largest_nonwave_interval=self.config.largest_nonwave_interval,
            smallest_wave_interval=self.config.smallest_wave_interval,
            largest_wave_interval=self.config.largest_wave_interval,
            rng=self.rng,
        )

    def initialize(self, original_color: Color, original_intensity: float) -> None:
        """Capture the baseline values every frame is computed from."""
        self.state.capture(original_color, original_intensity)
        logger.debug(f"Animation initialized: {self.state.get_snapshot()}")

    def attach(self, light: AnimatedLight) -> None:
        """Initialize from the light's current color and intensity."""
        self.initialize(light.color, light.intensity)

    def eval_wave(self, t: float) -> float:
        c = self.config
        return evaluate_wave(c.wave_function, t, c.phase, c.frequency, c.amplitude, c.offset, self.rng)

    def advance(self, delta_time: float, current_time: float, light: AnimatedLight) -> tuple[Color, float]:
        """
        Run one frame against the light.

        Args:
            delta_time: Seconds since the previous frame
            current_time: Seconds since the animation clock started
            light: Light to mutate

        Returns:
            (color, intensity) of the light after this frame

        Raises:
            RuntimeError: If called before initialize()
        """
        original_color = self.state.original_color
        original_intensity = self.state.original_intensity

        if self.config.intermittent:
            if self.intermittency.update(delta_time):
                light.color = original_color
                light.intensity = original_intensity

            if not self.intermittency.is_in_interval:
                return light.color, light.intensity

        if self.config.affects_intensity:
            light.intensity = original_intensity * self.eval_wave(current_time)

        o = original_color
        c = light.color
        channel = self.config.color_channel

        # Each branch draws its own wave sample (noise may differ from intensity)
        if channel is ColorChannel.all:
            light.color = o * self.eval_wave(current_time)
        elif channel is ColorChannel.red:
            light.color = Color(o.r * self.eval_wave(current_time), c.g, c.b, c.a)
        elif channel is ColorChannel.green:
            light.color = Color(c.r, o.g * self.eval_wave(current_time), c.b, c.a)
        else:
            light.color = Color(c.r, c.g, o.b * self.eval_wave(current_time), c.a)

        return light.color, light.intensity
