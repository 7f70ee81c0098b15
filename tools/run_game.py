# tools/run_game.py
# pygame runner: feeds held keys into the game, advances it with the real
# frame time and blits the scaled canvas.
# - Escape quits.
# - --level starts straight in a level (skipping the title).

from __future__ import annotations

import argparse
import dataclasses
from typing import Optional

import pygame
import structlog

from torchwalls.config import DEFAULT_SETTINGS
from torchwalls.engine.game import Game, GameContext
from torchwalls.engine.screens import EnteringLevelScreen, TitleScreen
from torchwalls.input import HeldKeys
from torchwalls.logging_utils import parse_level, setup_logging
from torchwalls.render.canvas import PygameCanvas

log = structlog.get_logger()


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="walls: uncover the map by torchlight")
    parser.add_argument("--scale", type=int, default=DEFAULT_SETTINGS.game.scale, help="window pixels per canvas pixel")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--seed", type=lambda s: int(s, 0), default=DEFAULT_SETTINGS.seed)
    parser.add_argument("--level", type=int, default=None, help="start at this level (1-based)")
    parser.add_argument("--log-level", type=str, default="INFO")
    args = parser.parse_args(argv)

    setup_logging(parse_level(args.log_level))

    game_cfg = dataclasses.replace(DEFAULT_SETTINGS.game, scale=args.scale).validate()
    settings = dataclasses.replace(DEFAULT_SETTINGS, game=game_cfg, seed=args.seed)
    ctx = GameContext.from_settings(settings)

    if not pygame.get_init():
        pygame.init()
    if not pygame.font.get_init():
        pygame.font.init()

    window = pygame.display.set_mode((game_cfg.width * game_cfg.scale, game_cfg.height * game_cfg.scale))
    pygame.display.set_caption("walls")
    clock = pygame.time.Clock()
    canvas = PygameCanvas(game_cfg.width, game_cfg.height, game_cfg.scale)

    keys = HeldKeys()
    if args.level is not None:
        # Entering bumps the counter on entry.
        ctx.level = max(0, args.level - 1)
        game = Game(EnteringLevelScreen(), input_source=keys, context=ctx)
    else:
        game = Game(TitleScreen(), input_source=keys, context=ctx)
    log.info("Game started", seed=hex(args.seed), scale=game_cfg.scale)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    keys.press(pygame.key.name(event.key))
            elif event.type == pygame.KEYUP:
                keys.release(pygame.key.name(event.key))
            elif event.type == pygame.WINDOWFOCUSLOST:
                keys.clear()

        elapsed_ms = clock.tick(args.fps)
        game.frame(elapsed_ms, canvas)
        canvas.reset_transform()
        window.fill((0, 0, 0))
        canvas.present(window)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
