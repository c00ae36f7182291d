"""
LED hardware abstraction layer.

Features:
- WS2813 via DMA (rpi_ws281x)
- Whole strip behaves as one light (color + intensity)
- Intensity used as global brightness
- Gamma correction
- Thread-safe access
- Animation mutex (only one animation at a time)
"""

from rpi_ws281x import PixelStrip, Color as WSColor
import threading

from flicker.color import Color
from flicker.config import LED_PIN, LED_FREQ_HZ, LED_DMA, LED_CHANNEL, LED_GAMMA
from flicker.logger import logger


def build_gamma_table(gamma: float):
    """Generate gamma correction lookup table."""
    return [int(pow(i / 255.0, gamma) * 255.0 + 0.5) for i in range(256)]


class LedStrip:
    def __init__(self, count: int):
        try:
            logger.info(f"Initializing LED strip: count={count}, pin={LED_PIN}, dma={LED_DMA}")
            self.count = count
            self.gamma = build_gamma_table(LED_GAMMA)
            self._color = Color(0.0, 0.0, 0.0, 1.0)
            self._intensity = 1.0

            self.strip = PixelStrip(
                count,
                LED_PIN,
                LED_FREQ_HZ,
                LED_DMA,
                False,
                255,
                LED_CHANNEL,
            )
            self.strip.begin()
            logger.info("LED strip initialized successfully")

        except Exception as e:
            logger.error("Failed to initialize LED hardware", exc_info=True)
            raise

        # Prevent concurrent hardware access
        self.lock = threading.Lock()

        # Ensure only ONE animation runs at a time
        self.anim_lock = threading.Lock()

    # -------------------------------------------------------------

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color):
        with self.lock:
            self._color = value
            self._render()

    @property
    def intensity(self) -> float:
        return self._intensity

    @intensity.setter
    def intensity(self, value: float):
        with self.lock:
            self._intensity = value
            self._render()

    @property
    def brightness(self) -> float:
        """Intensity clamped to the 0.0-1.0 range the strip can show."""
        return max(0.0, min(1.0, self._intensity))

    def _apply_pipeline(self, r: int, g: int, b: int):
        brightness = self.brightness
        r = self.gamma[int(r * brightness)]
        g = self.gamma[int(g * brightness)]
        b = self.gamma[int(b * brightness)]
        return WSColor(r, g, b)

    def _render(self):
        # Caller holds self.lock
        color = self._apply_pipeline(*self._color.to_rgb8())
        for i in range(self.strip.numPixels()):
            self.strip.setPixelColor(i, color)
        self.strip.show()

    # -------------------------------------------------------------

    def off(self):
        with self.lock:
            for i in range(self.strip.numPixels()):
                self.strip.setPixelColor(i, WSColor(0, 0, 0))
            self.strip.show()
