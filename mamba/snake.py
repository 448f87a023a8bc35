"""Snake entity implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .grid import CellTag
from .utils import Direction, Point


@dataclass
class Snake:
    """Player controlled snake on the grid.

    ``body`` is ordered head first. Every entry is one occupied cell; after
    growth several entries may share the tail cell until the body unrolls.
    """

    body: List[Point]
    heading: Direction = Direction.RIGHT
    grow_length: int = 1
    owner: CellTag = CellTag.P1_SNAKE

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("a snake needs at least a head")

    @classmethod
    def spawn(
        cls,
        center: Point,
        start_size: int,
        heading: Direction = Direction.RIGHT,
        grow_length: int = 1,
        owner: CellTag = CellTag.P1_SNAKE,
    ) -> "Snake":
        """Create a straight snake with its head on ``center``.

        ``start_size`` segments trail behind the head, away from ``heading``.
        """

        back = heading.opposite
        body = [center]
        for _ in range(start_size):
            body.append(body[-1].step(back))
        return cls(body=body, heading=heading, grow_length=grow_length, owner=owner)

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def tail(self) -> Point:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

    def set_heading(self, requested: Direction) -> bool:
        """Turn towards ``requested`` unless it would double back.

        Reversals and turns whose next cell is the segment right behind the
        head are ignored. Returns ``True`` when the heading was accepted.
        """

        if requested is self.heading.opposite:
            return False
        if len(self.body) > 1 and self.head.step(requested) == self.body[1]:
            return False
        self.heading = requested
        return True

    def advance(self) -> Point:
        """Move one cell along the heading and return the vacated tail cell."""

        self.body.insert(0, self.head.step(self.heading))
        return self.body.pop()

    def grow(self, amount: int | None = None) -> None:
        """Append ``amount`` copies of the tail (``grow_length`` by default)."""

        if amount is None:
            amount = self.grow_length
        self.body.extend([self.tail] * amount)
