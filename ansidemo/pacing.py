"""Pacing delays between demo steps."""

import time
from typing import Callable


class Pacer:
    """Waits between demo steps so changes are visible.

    The delays only exist for the viewer. A scale of 0 turns them off, and
    the sleep function can be swapped out in tests.
    """

    def __init__(self, scale: float = 1.0, sleep: Callable[[float], None] = time.sleep):
        if scale < 0:
            raise ValueError("Pacing scale must not be negative")
        self.scale = scale
        self._sleep = sleep

    def pause(self, seconds: float) -> None:
        """Wait for the given number of (scaled) seconds."""
        delay = seconds * self.scale
        if delay > 0:
            self._sleep(delay)
