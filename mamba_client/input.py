"""Translate local key presses into commands for the world."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pygame

from mamba.utils import Direction
from mamba.world import World


class Action(Enum):
    TURN = "turn"
    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"
    DUMP = "dump"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    """A single player intent decoded from a key press."""

    action: Action
    direction: Optional[Direction] = None


KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

KEY_ACTIONS = {
    pygame.K_SPACE: Action.TOGGLE_PAUSE,
    pygame.K_r: Action.RESET,
    pygame.K_e: Action.DUMP,
    pygame.K_ESCAPE: Action.QUIT,
}


class InputManager:
    """Map key codes to :class:`Command` objects and apply them."""

    def translate(self, key: int, mods: int = 0) -> Optional[Command]:
        if key == pygame.K_q and mods & pygame.KMOD_META:
            return Command(Action.QUIT)
        if key in KEY_DIRECTIONS:
            return Command(Action.TURN, KEY_DIRECTIONS[key])
        if key in KEY_ACTIONS:
            return Command(KEY_ACTIONS[key])
        return None

    def apply(self, command: Command, world: World) -> bool:
        """Forward ``command`` to ``world``. Returns ``False`` for quit."""

        if command.action is Action.QUIT:
            return False
        if command.action is Action.TURN and command.direction is not None:
            world.request_heading(command.direction)
        elif command.action is Action.TOGGLE_PAUSE:
            world.toggle_pause()
        elif command.action is Action.RESET:
            world.reset()
        elif command.action is Action.DUMP:
            world.dump()
        return True
