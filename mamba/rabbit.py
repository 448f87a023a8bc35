"""Rabbit entity definition."""

from __future__ import annotations

from dataclasses import dataclass
import itertools
import logging
from typing import Collection

from . import constants
from .errors import BoardFullError
from .grid import CellTag, Grid
from .utils import CARDINALS, Direction, Point, RandomSource

_id_counter = itertools.count(1)


@dataclass
class Rabbit:
    """A rabbit that hops a fixed distance before choosing a new heading."""

    position: Point
    hop_distance: int
    random: RandomSource
    heading: Direction = Direction.RIGHT
    id: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            self.id = next(_id_counter)
        self.remaining = self.hop_distance

    @classmethod
    def spawn_random(
        cls,
        grid: Grid,
        hop_distance: int,
        random: RandomSource,
        avoid: Collection[Point] = (),
        max_attempts: int = constants.MAX_SPAWN_ATTEMPTS,
    ) -> "Rabbit":
        """Place a rabbit on a uniformly sampled empty cell of ``grid``.

        Cells listed in ``avoid`` are rejected even when they read as empty.
        The chosen cell is tagged ``RABBIT``. Raises :class:`BoardFullError`
        when no cell turns up within ``max_attempts`` samples.
        """

        for _ in range(max_attempts):
            position = Point(random.randrange(grid.width), random.randrange(grid.height))
            if grid[position] is CellTag.EMPTY and position not in avoid:
                grid[position] = CellTag.RABBIT
                rabbit = cls(position=position, hop_distance=hop_distance, random=random)
                logging.debug("Spawned rabbit %s at %s", rabbit.id, position.to_tuple())
                return rabbit
        raise BoardFullError(f"no empty cell found after {max_attempts} attempts")

    def new_direction(self) -> Direction:
        """Pick a uniformly random heading."""

        self.heading = self.random.choice(CARDINALS)
        return self.heading

    def next_hop(self, current: Point) -> Point:
        """Return the candidate position for this tick.

        While hops remain the candidate is one cell along the heading. Once
        the countdown is spent the rabbit stays put, picks a new heading and
        restarts the countdown. The countdown drops by one on every call.
        """

        candidate = current
        if self.remaining >= 1:
            candidate = current.step(self.heading)
        else:
            self.remaining = self.hop_distance
            self.new_direction()
        self.remaining -= 1
        return candidate

    def hop(self, grid: Grid) -> bool:
        """Advance one tick on ``grid`` and keep its rabbit tags current.

        Returns ``True`` when the rabbit moved.
        """

        candidate = self.next_hop(self.position)
        if candidate == self.position:
            return False
        if grid[candidate] is not CellTag.EMPTY:
            self.new_direction()
            return False
        if grid[self.position] is CellTag.RABBIT:
            grid[self.position] = CellTag.EMPTY
        grid[candidate] = CellTag.RABBIT
        self.position = candidate
        return True
