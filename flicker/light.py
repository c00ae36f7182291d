"""
In-memory light, for simulations and tests.
"""

from dataclasses import dataclass, field

from flicker.color import Color


@dataclass
class Light:
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0, 1.0))
    intensity: float = 1.0
