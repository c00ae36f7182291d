"""
Mock hardware implementations for running without a physical strip.

Enable mock mode by setting MOCK_MODE=true in .env

Features:
- Mock LED strip with visual logging
- Compatible interface with real hardware
"""

import threading

from flicker.color import Color
from flicker.logger import logger


class MockPixelStrip:
    """Mock implementation of rpi_ws281x.PixelStrip"""

    def __init__(self, num, pin, freq_hz, dma, invert, brightness, channel):
        self._num_pixels = num
        self._pixels = [(0, 0, 0)] * num
        self._brightness = brightness
        logger.info(f"[MOCK] Initialized LED strip: {num} pixels on pin {pin}")

    def begin(self):
        """Initialize the strip (no-op for mock)"""
        logger.debug("[MOCK] LED strip initialized")

    def numPixels(self):
        """Return number of pixels"""
        return self._num_pixels

    def setPixelColor(self, n, color):
        """Set pixel color"""
        if 0 <= n < self._num_pixels:
            # Extract RGB from 24-bit color
            r = (color >> 16) & 0xFF
            g = (color >> 8) & 0xFF
            b = color & 0xFF
            self._pixels[n] = (r, g, b)

    def getPixels(self):
        return list(self._pixels)

    def show(self):
        """Update the strip (log for mock)"""
        if self._num_pixels > 0:
            logger.debug(f"[MOCK] LED update: first={self._pixels[0]}")


def WSColor(r, g, b):
    """Mock Color function (compatible with rpi_ws281x)"""
    return (r << 16) | (g << 8) | b


class MockLedStrip:
    """
    Mock LED strip implementation.

    Drop-in replacement for flicker.led.LedStrip when MOCK_MODE=true
    """

    def __init__(self, count: int):
        logger.info(f"[MOCK] Creating LED strip with {count} LEDs")
        self.count = count
        self.gamma = self._build_gamma_table(2.2)
        self._color = Color(0.0, 0.0, 0.0, 1.0)
        self._intensity = 1.0

        self.strip = MockPixelStrip(
            count, 18, 800000, 10, False, 255, 0
        )
        self.strip.begin()

        # Thread safety locks (same as real implementation)
        self.lock = threading.Lock()
        self.anim_lock = threading.Lock()

        logger.info("[MOCK] LED strip ready (mock mode)")

    def _build_gamma_table(self, gamma: float):
        """Generate gamma correction lookup table"""
        return [int(pow(i / 255.0, gamma) * 255.0 + 0.5) for i in range(256)]

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
        return max(0.0, min(1.0, self._intensity))

    def _apply_pipeline(self, r: int, g: int, b: int):
        """Apply brightness and gamma correction"""
        brightness = self.brightness
        r = self.gamma[int(r * brightness)]
        g = self.gamma[int(g * brightness)]
        b = self.gamma[int(b * brightness)]
        return WSColor(r, g, b)

    def _render(self):
        color = self._apply_pipeline(*self._color.to_rgb8())
        for i in range(self.strip.numPixels()):
            self.strip.setPixelColor(i, color)
        self.strip.show()

    def off(self):
        """Turn off all LEDs"""
        with self.lock:
            for i in range(self.strip.numPixels()):
                self.strip.setPixelColor(i, WSColor(0, 0, 0))
            self.strip.show()
            logger.info("[MOCK] LEDs turned off")
