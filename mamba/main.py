"""Headless entry point: run the simulation and print JSON snapshots."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Optional, Sequence

from . import protocol
from .config import GameConfig, load_config
from .errors import ConfigError
from .world import World


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run Hungry Mamba without a window")
    parser.add_argument("--config", default=None, help="Path to a YAML configuration file")
    parser.add_argument("--ticks", type=int, default=20, help="Number of ticks to simulate")
    parser.add_argument(
        "--moves", default="", help="One move per tick: U, D, L, R, or '.' to keep going"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source")
    parser.add_argument("--dump", action="store_true", help="Log the grid after the last tick")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    config = load_config(args.config) if args.config else GameConfig().validate()
    if args.seed is not None:
        config = dataclasses.replace(config, seed=args.seed)
    return config


def run(world: World, ticks: int, moves: Sequence, out=None) -> None:
    """Advance ``world`` ``ticks`` times, writing one snapshot line per tick.

    A death pauses the world; the runner resumes it on the next tick so a
    scripted run keeps going across resets.
    """

    out = out if out is not None else sys.stdout
    for index in range(ticks):
        if world.paused:
            world.toggle_pause()
        if index < len(moves) and moves[index] is not None:
            world.request_heading(moves[index])
        world.update()
        out.write(protocol.encode_snapshot(world.snapshot()) + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    try:
        config = build_config(args)
        moves = protocol.parse_moves(args.moves)
    except (ConfigError, ValueError) as exc:
        logging.error("%s", exc)
        return 2
    world = World(config)
    run(world, args.ticks, moves)
    if args.dump:
        world.dump()
    return 0


if __name__ == "__main__":
    sys.exit(main())
