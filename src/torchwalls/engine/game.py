# src/torchwalls/engine/game.py
# Fixed-timestep host loop + screen state machine.
#
# - Real frame time accumulates in a FixedStepClock and is drained in fixed
#   updates; render runs once per frame.
# - Screens share one interface (on_enter / update / render / on_exit) and
#   carry a per-screen tick counter that resets on entry.
# - Transitions are checked against TRANSITIONS and may be delayed by a tick
#   count (measured on the current screen's counter).

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Protocol

import structlog

from ..config import DEFAULT_SETTINGS, Settings
from ..interfaces import Clock, InputSource, Renderer
from ..rng import PMRandom
from ..timing import FixedStepClock
from .timing import TimingModel, timing_for

log = structlog.get_logger()


TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "title": frozenset({"entering"}),
    "entering": frozenset({"playing"}),
    "playing": frozenset({"entering", "game_over"}),
    "game_over": frozenset({"title"}),
}


class Screen(Protocol):
    name: str
    ticks: int

    def on_enter(self, game: "Game") -> None: ...

    def update(self, game: "Game") -> None: ...

    def render(self, game: "Game", r: Renderer) -> None: ...

    def on_exit(self, game: "Game") -> None: ...


@dataclass
class GameContext:
    """Run-wide state shared by screens (current level, settings, RNG)."""

    settings: Settings = DEFAULT_SETTINGS
    level: int = 0
    rng: PMRandom = field(default_factory=lambda: PMRandom(DEFAULT_SETTINGS.seed))
    timing: TimingModel = field(default_factory=timing_for)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GameContext":
        return cls(
            settings=settings,
            rng=PMRandom(settings.seed),
            timing=timing_for(settings.game.update_rate_ms),
        )


class InvalidTransition(ValueError):
    pass


class Game:
    def __init__(
        self,
        screen: Screen,
        *,
        input_source: InputSource,
        context: Optional[GameContext] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.ctx = context or GameContext()
        cfg = self.ctx.settings.game
        self.input = input_source
        self.clock: Clock = clock or FixedStepClock(cfg.update_rate_ms, cfg.max_frame_ms)

        self.next_screen: Optional[Screen] = None
        self.next_screen_at = 0

        self.screen = screen
        self.screen.ticks = 0
        self.screen.on_enter(self)

    @property
    def width(self) -> int:
        return self.ctx.settings.game.width

    @property
    def height(self) -> int:
        return self.ctx.settings.game.height

    def seconds_to_ticks(self, seconds: float) -> int:
        return self.clock.seconds_to_ticks(seconds)

    def transition_to(self, screen: Screen, delay: int = 0) -> None:
        allowed = TRANSITIONS.get(self.screen.name, frozenset())
        if screen.name not in allowed:
            raise InvalidTransition(f"{self.screen.name} -> {screen.name} is not allowed")
        if delay:
            self.next_screen = screen
            self.next_screen_at = self.screen.ticks + delay
            log.debug("Transition scheduled", src=self.screen.name, dst=screen.name, at=self.next_screen_at)
            return

        self.screen.on_exit(self)
        log.info("Screen transition", src=self.screen.name, dst=screen.name, level=self.ctx.level)
        self.screen = screen
        self.screen.ticks = 0
        self.next_screen = None
        self.screen.on_enter(self)

    def step(self) -> None:
        """Run one fixed update of the current screen."""
        current = self.screen
        current.update(self)
        if self.screen is not current:
            # switched during update; the new screen starts counting next step
            return
        current.ticks += 1
        if self.next_screen is not None and self.screen.ticks >= self.next_screen_at:
            self.transition_to(self.next_screen)

    def frame(self, elapsed_ms: float, r: Optional[Renderer] = None) -> int:
        """Feed one displayed frame's elapsed time; returns updates run."""
        self.clock.add_elapsed(elapsed_ms)
        steps = self.clock.drain()
        for _ in range(steps):
            self.step()
        if r is not None:
            self.screen.render(self, r)
        return steps
