"""
Frame loop driving a LightColorAnimation on an LED strip.

The loop:
- Is blocking
- Must run in a background thread
- Is protected by anim_lock
- Supports cancellation via threading.Event
"""

import time
import threading

from flicker.animation import LightColorAnimation
from flicker.config import ANIMATION_FPS
from flicker.logger import logger


def run_flicker(
    leds,
    animation: LightColorAnimation,
    duration: float,
    cancel_event: threading.Event,
    fps: int = ANIMATION_FPS,
):
    """
    Animate the strip until cancelled or duration elapses.

    Args:
        leds: LedStrip (or MockLedStrip) instance
        animation: Fresh, not yet initialized animation
        duration: Seconds to run (0 = until cancelled)
        cancel_event: Threading event for cancellation
        fps: Frames per second

    The animation captures the strip's color/intensity when the loop
    starts. Time passed to the animation starts at 0.
    """
    c = animation.config
    logger.info(
        f"Starting flicker: wave={c.wave_function.name}, channel={c.color_channel.name}, "
        f"frequency={c.frequency}, intermittent={c.intermittent}, duration={duration}s"
    )

    with leds.anim_lock:
        animation.attach(leds)

        start_time = time.monotonic()
        last_time = start_time

        while True:
            if cancel_event.is_set():
                logger.info("Animation cancelled: flicker")
                return

            now = time.monotonic()
            elapsed = now - start_time
            if duration > 0 and elapsed >= duration:
                break

            try:
                animation.advance(now - last_time, elapsed, leds)
            except Exception as e:
                logger.error("Error setting LED color", exc_info=True)
                raise
            last_time = now

            time.sleep(1 / fps)

    logger.info("Animation completed: flicker")
