# src/torchwalls/engine/timing.py
# Centralized timing model so durations stay in seconds in one place and every
# consumer works in whole engine ticks.

from __future__ import annotations

from dataclasses import dataclass

from ..timing import DEFAULT_UPDATE_RATE_MS, ms_to_ticks


@dataclass
class TimingModel:
    update_rate_ms: float = DEFAULT_UPDATE_RATE_MS

    # Durations in milliseconds / seconds
    torch_ms: float = 2000
    tile_max_age_ms: float = 20000
    tile_fade_age_ms: float = 19000
    completion_delay_s: float = 4.0
    end_anim_delay_s: float = 2.0
    entering_level_s: float = 3.0
    game_over_start_s: float = 0.5
    game_over_text_s: float = 2.0
    game_over_end_s: float = 7.0

    def ticks(self, seconds: float) -> int:
        return ms_to_ticks(seconds * 1000, self.update_rate_ms)

    @property
    def max_torch_ticks(self) -> int:
        return max(1, ms_to_ticks(self.torch_ms, self.update_rate_ms))

    @property
    def max_tile_age(self) -> int:
        return max(2, ms_to_ticks(self.tile_max_age_ms, self.update_rate_ms))

    @property
    def fade_tile_age(self) -> int:
        return ms_to_ticks(self.tile_fade_age_ms, self.update_rate_ms)

    @property
    def completion_delay(self) -> int:
        return self.ticks(self.completion_delay_s)

    @property
    def end_anim_delay(self) -> int:
        return self.ticks(self.end_anim_delay_s)

    def ticks_per_beat(self, bpm: int) -> int:
        ms_per_beat = (60 / bpm) * 1000
        return max(1, ms_to_ticks(ms_per_beat, self.update_rate_ms))


def timing_for(update_rate_ms: float = DEFAULT_UPDATE_RATE_MS) -> TimingModel:
    if update_rate_ms <= 0:
        raise ValueError("update_rate_ms must be positive")
    return TimingModel(update_rate_ms=update_rate_ms)
