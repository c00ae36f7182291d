"""
Two-state timer alternating between wave (active) and steady (idle) intervals.
"""

import random
from dataclasses import dataclass, field

from flicker.logger import logger


@dataclass
class IntermittencyController:
    """
    Idle/Active interval timer with randomized interval lengths.

    Starts idle with next_interval_time=0, so the first update with a
    positive delta_time switches to active. Bounds are passed to
    rng.uniform() as given, even when smallest > largest.
    """

    smallest_nonwave_interval: float = 1.0
    largest_nonwave_interval: float = 5.0
    smallest_wave_interval: float = 0.1
    largest_wave_interval: float = 1.0

    rng: random.Random = field(default_factory=random.Random)

    # Runtime state
    time_since_last_interval: float = 0.0
    next_interval_time: float = 0.0
    is_in_interval: bool = False

    def update(self, delta_time: float) -> bool:
        """
        Advance the timer by one frame.

        Returns:
            True if the controller went from active to idle during this
            call (the caller restores the light's original values)
        """
        self.time_since_last_interval += delta_time

        if not self.is_in_interval:
            if self.time_since_last_interval > self.next_interval_time:
                self.is_in_interval = True
                self.time_since_last_interval = 0.0
                self.next_interval_time = self.rng.uniform(
                    self.smallest_wave_interval, self.largest_wave_interval
                )
                logger.debug(f"Wave interval started: length={self.next_interval_time:.3f}s")

        # Checked in the same call, right after a possible idle -> active switch
        if self.is_in_interval:
            if self.time_since_last_interval > self.next_interval_time:
                self.is_in_interval = False
                self.time_since_last_interval = 0.0
                self.next_interval_time = self.rng.uniform(
                    self.smallest_nonwave_interval, self.largest_nonwave_interval
                )
                logger.debug(f"Steady interval started: length={self.next_interval_time:.3f}s")
                return True

        return False
