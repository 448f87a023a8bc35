"""Utility primitives used by the simulation core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Point:
    """A discrete grid coordinate.

    Points are immutable and hashable so they can be compared against each
    other, stored in sets and used as lookup keys. Only the operations the
    simulation needs are provided: translation by a heading and conversion
    to a plain tuple.
    """

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def step(self, direction: "Direction") -> "Point":
        """Return the neighbouring point one cell along ``direction``."""

        return self + direction.vector

    def to_tuple(self) -> tuple[int, int]:
        """Return the point as an ``(x, y)`` tuple."""

        return self.x, self.y


class Direction(str, Enum):
    """The four cardinal headings. ``y`` grows downwards, as on screen."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> Point:
        return _VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def from_str(cls, raw: str) -> "Direction":
        """Parse ``raw`` as a direction name or its first letter."""

        value = str(raw).strip().lower()
        for direction in cls:
            if value in (direction.value, direction.value[0]):
                return direction
        raise ValueError(f"invalid direction: {raw!r}")


_VECTORS = {
    Direction.UP: Point(0, -1),
    Direction.DOWN: Point(0, 1),
    Direction.LEFT: Point(-1, 0),
    Direction.RIGHT: Point(1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

CARDINALS: tuple[Direction, ...] = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


class RandomSource(Protocol):
    """The subset of :class:`random.Random` the simulation draws from."""

    def choice(self, seq: Sequence[T]) -> T: ...

    def randrange(self, stop: int) -> int: ...
