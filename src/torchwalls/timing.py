# src/torchwalls/timing.py
"""
Fixed-timestep helpers: converting wall-clock durations into simulation
ticks and draining real frame time in fixed-size steps.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_UPDATE_RATE_MS = 16.667


def ms_to_ticks(ms: float, update_rate_ms: float = DEFAULT_UPDATE_RATE_MS) -> int:
    return math.floor(ms / update_rate_ms)


def seconds_to_ticks(seconds: float, update_rate_ms: float = DEFAULT_UPDATE_RATE_MS) -> int:
    return ms_to_ticks(seconds * 1000, update_rate_ms)


@dataclass
class FixedStepClock:
    """
    Lag accumulator for the host loop. Each displayed frame adds its elapsed
    time (clamped to `max_frame_ms`, so a stalled window never causes a burst
    of catch-up ticks) and `drain()` reports how many fixed updates to run.
    """

    update_rate_ms: float = DEFAULT_UPDATE_RATE_MS
    max_frame_ms: float = 33.333
    lag: float = 0.0

    def seconds_to_ticks(self, seconds: float) -> int:
        return seconds_to_ticks(seconds, self.update_rate_ms)

    def add_elapsed(self, elapsed_ms: float) -> None:
        self.lag += max(0.0, min(elapsed_ms, self.max_frame_ms))

    def drain(self) -> int:
        steps = 0
        while self.lag >= self.update_rate_ms:
            self.lag -= self.update_rate_ms
            steps += 1
        return steps
