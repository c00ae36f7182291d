"""
Floating point RGBA color used as the light's color value.

Components are not clamped: a waveform with offset/amplitude outside
[0, 1] produces out-of-range colors, and only LED output clamps them.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0

    def __mul__(self, scalar: float) -> "Color":
        """Scale all four components (alpha included)."""
        return Color(self.r * scalar, self.g * scalar, self.b * scalar, self.a * scalar)

    __rmul__ = __mul__

    def with_channel(self, channel: str, value: float) -> "Color":
        """Return a copy with one of r/g/b replaced."""
        if channel not in ("r", "g", "b"):
            raise ValueError(f"Unknown color channel: {channel}")
        return replace(self, **{channel: value})

    def to_rgb8(self) -> tuple[int, int, int]:
        """Convert to 8-bit RGB for LED output (alpha is dropped)."""
        return (_to_byte(self.r), _to_byte(self.g), _to_byte(self.b))

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0, 1.0)


def _to_byte(value: float) -> int:
    return int(round(max(0.0, min(1.0, value)) * 255))


def parse_color(value: str) -> Color:
    """
    Parse "r,g,b" or "r,g,b,a" float components into a Color.

    Raises:
        ValueError: If the string does not contain 3 or 4 numbers

    Example:
        parse_color("1.0,0.6,0.2")  # Color(r=1.0, g=0.6, b=0.2, a=1.0)
    """
    parts = [p.strip() for p in value.split(",")]
    if len(parts) not in (3, 4):
        raise ValueError(f"Expected 3 or 4 color components, got {len(parts)}: '{value}'")

    try:
        components = [float(p) for p in parts]
    except ValueError:
        raise ValueError(f"Invalid color component in '{value}'") from None

    return Color(*components)
