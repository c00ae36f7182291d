"""
Command line entry point: flicker the LED strip until stopped.

IMPORTANT:
- Must run under sudo (-E) because of DMA access (unless MOCK_MODE=true)
"""

import random
import signal
import threading

from flicker.animation import LightColorAnimation
from flicker.color import parse_color
from flicker.config import (
    LED_COUNT, MOCK_MODE,
    FLICKER_BASE_COLOR, FLICKER_BASE_INTENSITY, FLICKER_DURATION, FLICKER_SEED,
    load_animation_config,
)
from flicker.logger import logger
from flicker.runner import run_flicker


def create_strip(count: int):
    """Create the real or mock strip depending on MOCK_MODE."""
    if MOCK_MODE:
        logger.info("🎭 MOCK MODE ENABLED - Using simulated hardware")
        from flicker.mock_hardware import MockLedStrip as LedStrip
    else:
        from flicker.led import LedStrip
    return LedStrip(count=count)


def main() -> int:
    config = load_animation_config()
    base_color = parse_color(FLICKER_BASE_COLOR)

    leds = create_strip(LED_COUNT)
    leds.color = base_color
    leds.intensity = FLICKER_BASE_INTENSITY

    rng = random.Random(FLICKER_SEED) if FLICKER_SEED is not None else None
    animation = LightColorAnimation(config, rng=rng)

    cancel_event = threading.Event()

    def shutdown_handler(signum, frame):
        """Handle SIGTERM/SIGINT for graceful shutdown."""
        logger.info(f"Received signal {signum}, initiating graceful shutdown")
        cancel_event.set()

    signal.signal(signal.SIGTERM, shutdown_handler)
    signal.signal(signal.SIGINT, shutdown_handler)

    try:
        run_flicker(leds, animation, FLICKER_DURATION, cancel_event)
    finally:
        try:
            logger.info("Turning off LEDs")
            leds.off()
        except Exception as e:
            logger.error("Failed to turn off LEDs during shutdown", exc_info=True)

    logger.info("Shutdown complete")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
