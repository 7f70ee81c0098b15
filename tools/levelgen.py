#!/usr/bin/env python3
# Emit generated levels as TSV grids (0 floor, 1 wall), one row per line.
import argparse, csv, os

from torchwalls.config import GameConfig, GeneratorTuning
from torchwalls.logging_utils import parse_level, setup_logging
from torchwalls.mapgen.generator import generate_level
from torchwalls.rng import PMRandom, seed_for_level


def write_tsv(mat, path, include_header=False):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)


def build(seed, level, mode):
    tuning = GeneratorTuning(ca_mode=mode)
    return generate_level(level, PMRandom(seed_for_level(seed, level)), GameConfig(), tuning)


def cmd_emit(args):
    lvl = build(args.seed, args.level, args.mode)
    write_tsv(lvl.grid.as_matrix(), args.out, include_header=args.header)
    print(f"Wrote {args.out} (player {lvl.player_tile}, enemy {lvl.enemy_tile}, edges {len(lvl.edge_tiles)})")


def cmd_batch(args):
    base = os.path.join(args.outdir, f"{args.seed:08x}")
    for n in range(1, args.count + 1):
        lvl = build(args.seed, n, args.mode)
        write_tsv(lvl.grid.as_matrix(), os.path.join(base, f"{n:02d}.tsv"))
    print(f"Wrote {args.count} levels to {base}")


def main():
    p = argparse.ArgumentParser()
    p.add_argument('--log-level', type=str, default='WARNING')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=lambda s: int(s, 0), default=0x0B6E755A)
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--mode', choices=('in_place', 'snapshot'), default='in_place')
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('batch')
    p2.add_argument('--seed', type=lambda s: int(s, 0), default=0x0B6E755A)
    p2.add_argument('--count', type=int, default=10)
    p2.add_argument('--mode', choices=('in_place', 'snapshot'), default='in_place')
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_batch)
    args = p.parse_args()
    setup_logging(parse_level(args.log_level))
    args.func(args)


if __name__ == '__main__':
    main()
