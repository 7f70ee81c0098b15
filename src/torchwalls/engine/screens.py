# src/torchwalls/engine/screens.py
# Title -> entering level -> playing -> (entering next level | game over) -> title

from __future__ import annotations

from typing import List, Optional, Tuple

import structlog

from ..interfaces import Renderer
from ..mapgen.generator import generate_level
from ..render.level_view import draw_session
from ..rng import PMRandom, seed_for_level
from .game import Game
from .session import LevelSession, Transition

log = structlog.get_logger()

XY = Tuple[int, int]

EYE_POSITIONS: List[XY] = [
    (34, 11), (40, 13), (46, 13), (52, 11),
    (31, 17), (37, 19), (43, 20), (49, 19), (55, 17),
]
EYE_BLINK_TICKS = 90
ALL_EYES_CHANCE = 0.1


class BaseScreen:
    name = "base"

    def __init__(self) -> None:
        self.ticks = 0

    def on_enter(self, game: Game) -> None:
        pass

    def update(self, game: Game) -> None:
        pass

    def render(self, game: Game, r: Renderer) -> None:
        r.clear()

    def on_exit(self, game: Game) -> None:
        pass


class TitleScreen(BaseScreen):
    name = "title"

    def __init__(self) -> None:
        super().__init__()
        self.eye_pos: Optional[XY] = None
        self.eye_ticks = 0

    def on_enter(self, game: Game) -> None:
        self.eye_pos = game.ctx.rng.choice(EYE_POSITIONS)
        self.eye_ticks = 0

    def update(self, game: Game) -> None:
        self.eye_ticks += 1
        if self.eye_ticks >= EYE_BLINK_TICKS:
            self.eye_ticks = 0
            rng = game.ctx.rng
            # Occasionally every eye opens at once.
            self.eye_pos = None if rng.chance(ALL_EYES_CHANCE) else rng.choice(EYE_POSITIONS)

        if game.input.is_down("j"):
            game.transition_to(EnteringLevelScreen())

    def eye_open(self) -> bool:
        return self.eye_ticks < EYE_BLINK_TICKS * 2 // 3

    def render(self, game: Game, r: Renderer) -> None:
        r.clear()
        w, h = game.width, game.height
        r.text("walls", w / 2, h / 2 - 12, "center", "middle")
        r.text("press j to start", w / 2, h / 2 + 16, "center", "middle")
        if not self.eye_open():
            return
        eyes = EYE_POSITIONS if self.eye_pos is None else [self.eye_pos]
        for ex, ey in eyes:
            r.rect(ex, ey, 2, 1)


class EnteringLevelScreen(BaseScreen):
    name = "entering"

    def __init__(self) -> None:
        super().__init__()
        self.ticks_left = 0

    def on_enter(self, game: Game) -> None:
        game.ctx.level += 1
        self.ticks_left = game.seconds_to_ticks(game.ctx.timing.entering_level_s)

    def update(self, game: Game) -> None:
        if self.ticks_left == 0:
            game.transition_to(PlayingScreen())
            return
        self.ticks_left -= 1

    def render(self, game: Game, r: Renderer) -> None:
        r.clear()
        w, h = game.width, game.height
        r.text("press j to", w / 2, h / 2 - 8, "center", "middle")
        r.text("shine your torch", w / 2, h / 2, "center", "middle")
        r.text("uncover the map!", w / 2, h / 2 + 16, "center", "middle")


class PlayingScreen(BaseScreen):
    name = "playing"

    session: LevelSession

    def __init__(self, session: Optional[LevelSession] = None) -> None:
        super().__init__()
        self._preset = session

    def on_enter(self, game: Game) -> None:
        self.session = self._preset or self.new_session(game)

    @staticmethod
    def new_session(game: Game) -> LevelSession:
        # Levels depend only on the seed and the level number.
        s = game.ctx.settings
        n = game.ctx.level
        level = generate_level(n, PMRandom(seed_for_level(s.seed, n)), s.game, s.generator)
        return LevelSession(level, cfg=s.game, tuning=s.session, timing=game.ctx.timing)

    def update(self, game: Game) -> None:
        out = self.session.update(game.input)
        if out.transition is Transition.NEXT_LEVEL:
            game.transition_to(EnteringLevelScreen(), out.delay_ticks)
        elif out.transition is Transition.GAME_OVER:
            game.transition_to(GameOverScreen())

    def render(self, game: Game, r: Renderer) -> None:
        draw_session(r, self.session, game.ctx.level)


class GameOverScreen(BaseScreen):
    name = "game_over"

    def __init__(self) -> None:
        super().__init__()
        self.start_delay = 0
        self.text_delay = 0
        self.end_delay = 0
        self.monster_ticks = 0

    def on_enter(self, game: Game) -> None:
        t = game.ctx.timing
        self.start_delay = game.seconds_to_ticks(t.game_over_start_s)
        self.text_delay = game.seconds_to_ticks(t.game_over_text_s)
        self.end_delay = game.seconds_to_ticks(t.game_over_end_s)
        self.monster_ticks = 0
        log.info("Game over", reached_level=game.ctx.level)
        game.ctx.level = 0

    def update(self, game: Game) -> None:
        if self.ticks > self.start_delay:
            self.monster_ticks += 1
        if self.ticks > self.end_delay:
            game.transition_to(TitleScreen())

    def render(self, game: Game, r: Renderer) -> None:
        r.clear()
        w, h = game.width, game.height
        # The monster rises out of the dark as a growing block.
        size = min(32, self.monster_ticks // 2)
        if size:
            r.rect(w / 2 - size / 2, h / 2 - size / 2 - 8, size, size)
        if self.ticks > self.text_delay:
            r.text("game over", w / 2, h - 16, "center", "bottom")
