#!/usr/bin/env python3
# Render a generated level to PNG using Pillow.
# Walls grey, floor black, edge tiles outlined, player/enemy spawns marked;
# --path also draws the enemy's A* route to the player.

import argparse, os
from PIL import Image, ImageDraw

from torchwalls.config import GameConfig, GeneratorTuning
from torchwalls.engine.pathfind import find_path, path_tiles
from torchwalls.mapgen.generator import generate_level
from torchwalls.rng import PMRandom, seed_for_level
from torchwalls.tiles import WALL

WALL_COLOR = (80, 80, 80, 255)
FLOOR_COLOR = (0, 0, 0, 255)
EDGE_COLOR = (255, 220, 0, 255)
PLAYER_COLOR = (80, 200, 120, 255)
ENEMY_COLOR = (220, 40, 40, 255)
PATH_COLOR = (120, 160, 255, 255)


def render_level(level, out_png, tile_size=16, margin=0, show_path=False):
    grid = level.grid
    w, h = grid.width * tile_size + 2*margin, grid.height * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), FLOOR_COLOR)
    draw = ImageDraw.Draw(canvas)

    def box(x, y, inset=0):
        x0 = margin + x * tile_size + inset
        y0 = margin + y * tile_size + inset
        return (x0, y0, x0 + tile_size - 1 - inset, y0 + tile_size - 1 - inset)

    for y in range(grid.height):
        for x in range(grid.width):
            if grid.buf[grid.idx(x, y)] == WALL:
                draw.rectangle(box(x, y), fill=WALL_COLOR)
    for i in level.edge_tiles:
        draw.rectangle(box(*grid.xy(i)), outline=EDGE_COLOR)
    if show_path:
        for (x, y) in path_tiles(grid, find_path(grid, level.enemy_tile, level.player_tile)):
            draw.rectangle(box(x, y, tile_size // 3), fill=PATH_COLOR)
    draw.ellipse(box(*level.player_tile, 2), fill=PLAYER_COLOR)
    draw.rectangle(box(*level.enemy_tile, 2), fill=ENEMY_COLOR)

    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    canvas.save(out_png)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=lambda s: int(s, 0), default=0x0B6E755A)
    ap.add_argument("--levels", type=int, default=5, help="Render levels 1..N")
    ap.add_argument("--mode", choices=("in_place", "snapshot"), default="in_place")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--path", action="store_true", help="Draw the enemy's route to the player")
    args = ap.parse_args()

    tuning = GeneratorTuning(ca_mode=args.mode)
    base = os.path.join(args.outdir, f"{args.seed:08x}")
    for n in range(1, args.levels + 1):
        lvl = generate_level(n, PMRandom(seed_for_level(args.seed, n)), GameConfig(), tuning)
        render_level(lvl, os.path.join(base, f"{n:02d}.png"), tile_size=args.tile, show_path=args.path)
    print(f"Wrote PNGs to {base}")

if __name__ == "__main__":
    main()
