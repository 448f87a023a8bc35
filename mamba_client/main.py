"""Entry point for the pygame window."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import pygame

from mamba import constants
from mamba.config import load_config
from mamba.errors import ConfigError
from mamba.world import World

from .input import InputManager
from .render import Renderer

TICK_EVENT = pygame.USEREVENT + 1


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Hungry Mamba")
    parser.add_argument("--config", default="config.yaml", help="Path to the YAML configuration")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def run_client(world: World) -> None:
    config = world.config
    pygame.init()
    screen = pygame.display.set_mode((config.window_width, config.window_height))
    pygame.display.set_caption(constants.TITLE)
    renderer = Renderer(screen, config)
    input_manager = InputManager()
    clock = pygame.time.Clock()
    pygame.time.set_timer(TICK_EVENT, config.game_speed)

    running = True
    while running:
        clock.tick(60)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == TICK_EVENT:
                world.update()
            elif event.type == pygame.KEYDOWN:
                command = input_manager.translate(event.key, event.mod)
                if command is not None and not input_manager.apply(command, world):
                    running = False

        renderer.draw(world.snapshot())
        renderer.present()

    pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        logging.error("%s", exc)
        return 2
    run_client(World(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
