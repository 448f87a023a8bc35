"""Collision helpers for the simulation core."""

from __future__ import annotations

from .grid import CellTag, Grid
from .snake import Snake


def snake_collides(grid: Grid, snake: Snake) -> bool:
    """Return ``True`` if the snake's head sits on a border or snake cell.

    The query is read-only. It relies on the body having been painted onto
    ``grid`` for the current tick.
    """

    tag = grid[snake.head]
    return tag is CellTag.BORDER or tag.is_snake


def paint_snake(grid: Grid, snake: Snake) -> None:
    """Tag every body cell behind the head with the snake's owner tag.

    The head cell keeps whatever tag it had until the next tick, when it
    becomes the first body segment.
    """

    for segment in snake.body[1:]:
        grid[segment] = snake.owner
