"""
Baseline light values captured by an animation.

Every frame scales these captured values, never the light's current
ones, so the animation does not drift over time.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from flicker.color import Color


@dataclass
class AnimationState:
    """
    Original color and intensity of the animated light.

    Captured exactly once; reading before capture raises RuntimeError.
    """

    _original_color: Optional[Color] = None
    _original_intensity: Optional[float] = None

    # Capture timestamp
    captured_at: Optional[datetime] = field(default=None)

    @property
    def is_captured(self) -> bool:
        return self.captured_at is not None

    def capture(self, color: Color, intensity: float) -> None:
        """
        Store the light's original values.

        Raises:
            RuntimeError: If values were already captured
        """
        if self.is_captured:
            raise RuntimeError("Original light values already captured")

        self._original_color = color
        self._original_intensity = float(intensity)
        self.captured_at = datetime.now()

    @property
    def original_color(self) -> Color:
        if not self.is_captured:
            raise RuntimeError("Animation state not initialized")
        return self._original_color

    @property
    def original_intensity(self) -> float:
        if not self.is_captured:
            raise RuntimeError("Animation state not initialized")
        return self._original_intensity

    def get_snapshot(self) -> dict[str, Any]:
        """
        Get current state as dictionary (for debugging/logging).
        """
        if not self.is_captured:
            return {"captured": False}

        c = self._original_color
        return {
            "captured": True,
            "original_color": (c.r, c.g, c.b, c.a),
            "original_intensity": self._original_intensity,
            "captured_at": self.captured_at.isoformat(),
        }
