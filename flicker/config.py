"""
Configuration management with environment variable support.

All settings can be overridden via environment variables.
Automatically loads .env file if present.
"""

import os
from pathlib import Path
from typing import Literal
from dotenv import load_dotenv

# Load .env file from project root (one level up from flicker/)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Logging configuration
LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = os.getenv("LOG_LEVEL", "INFO")

# Mock hardware mode (for running without a physical strip)
MOCK_MODE: bool = os.getenv("MOCK_MODE", "false").lower() == "true"

# LED hardware configuration
LED_COUNT: int = int(os.getenv("LED_COUNT", "30"))
LED_PIN: int = int(os.getenv("LED_PIN", "18"))
LED_FREQ_HZ: int = 800000
LED_DMA: int = 10
LED_CHANNEL: int = 0
LED_GAMMA: float = 2.2

# Animation configuration
ANIMATION_FPS: int = 25

# Waveform configuration (enum names, see flicker.waveforms)
FLICKER_WAVE: str = os.getenv("FLICKER_WAVE", "sinus")
FLICKER_CHANNEL: str = os.getenv("FLICKER_CHANNEL", "all")
FLICKER_OFFSET: float = float(os.getenv("FLICKER_OFFSET", "0.0"))
FLICKER_AMPLITUDE: float = float(os.getenv("FLICKER_AMPLITUDE", "1.0"))
FLICKER_PHASE: float = float(os.getenv("FLICKER_PHASE", "0.0"))  # start point inside the wave cycle
FLICKER_FREQUENCY: float = float(os.getenv("FLICKER_FREQUENCY", "0.5"))  # cycles per second
FLICKER_AFFECTS_INTENSITY: bool = os.getenv("FLICKER_AFFECTS_INTENSITY", "true").lower() == "true"

# Intermittency configuration (seconds)
FLICKER_INTERMITTENT: bool = os.getenv("FLICKER_INTERMITTENT", "false").lower() == "true"
FLICKER_SMALLEST_NONWAVE_INTERVAL: float = float(os.getenv("FLICKER_SMALLEST_NONWAVE_INTERVAL", "1.0"))
FLICKER_LARGEST_NONWAVE_INTERVAL: float = float(os.getenv("FLICKER_LARGEST_NONWAVE_INTERVAL", "5.0"))
FLICKER_SMALLEST_WAVE_INTERVAL: float = float(os.getenv("FLICKER_SMALLEST_WAVE_INTERVAL", "0.1"))
FLICKER_LARGEST_WAVE_INTERVAL: float = float(os.getenv("FLICKER_LARGEST_WAVE_INTERVAL", "1.0"))

# Run configuration
FLICKER_DURATION: int = int(os.getenv("FLICKER_DURATION", "0"))  # seconds, 0 = until signalled
FLICKER_SEED: int | None = int(os.getenv("FLICKER_SEED")) if os.getenv("FLICKER_SEED") else None

# Baseline light values captured by the animation (format: "r,g,b[,a]", floats 0.0-1.0)
FLICKER_BASE_COLOR: str = os.getenv("FLICKER_BASE_COLOR", "1.0,0.6,0.2,1.0")
FLICKER_BASE_INTENSITY: float = float(os.getenv("FLICKER_BASE_INTENSITY", "1.0"))


def load_animation_config():
    """
    Build an AnimationConfig from the FLICKER_* environment settings.

    Returns:
        AnimationConfig instance

    Raises:
        ValueError: If FLICKER_WAVE or FLICKER_CHANNEL is not a known name
    """
    from flicker.animation import AnimationConfig
    from flicker.waveforms import ColorChannel, WaveFunction

    try:
        wave_function = WaveFunction[FLICKER_WAVE.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown FLICKER_WAVE '{FLICKER_WAVE}'") from None

    try:
        color_channel = ColorChannel[FLICKER_CHANNEL.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown FLICKER_CHANNEL '{FLICKER_CHANNEL}'") from None

    return AnimationConfig(
        color_channel=color_channel,
        wave_function=wave_function,
        offset=FLICKER_OFFSET,
        amplitude=FLICKER_AMPLITUDE,
        phase=FLICKER_PHASE,
        frequency=FLICKER_FREQUENCY,
        affects_intensity=FLICKER_AFFECTS_INTENSITY,
        intermittent=FLICKER_INTERMITTENT,
        smallest_nonwave_interval=FLICKER_SMALLEST_NONWAVE_INTERVAL,
        largest_nonwave_interval=FLICKER_LARGEST_NONWAVE_INTERVAL,
        smallest_wave_interval=FLICKER_SMALLEST_WAVE_INTERVAL,
        largest_wave_interval=FLICKER_LARGEST_WAVE_INTERVAL,
    )
