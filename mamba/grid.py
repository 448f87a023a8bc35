"""Dense occupancy grid for the playing field."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, List

from .utils import Point


class CellTag(str, Enum):
    """Semantic occupancy of a single cell."""

    EMPTY = "empty"
    BORDER = "border"
    RABBIT = "rabbit"
    P1_SNAKE = "p1_snake"
    P2_SNAKE = "p2_snake"

    @property
    def is_snake(self) -> bool:
        return self in SNAKE_TAGS


SNAKE_TAGS = frozenset({CellTag.P1_SNAKE, CellTag.P2_SNAKE})


class Grid:
    """Row-major table of :class:`CellTag` values.

    The outermost ring is tagged ``BORDER`` when the grid is built and can
    never be overwritten afterwards. Every other cell starts ``EMPTY``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 3 or height < 3:
            raise ValueError(f"grid of {width}x{height} has no interior")
        self.width = width
        self.height = height
        self._cells: List[List[CellTag]] = [
            [CellTag.BORDER if self.is_border(x, y) else CellTag.EMPTY for x in range(width)]
            for y in range(height)
        ]

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or x == self.width - 1 or y == 0 or y == self.height - 1

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} grid")

    def get(self, x: int, y: int) -> CellTag:
        self._check(x, y)
        return self._cells[y][x]

    def set(self, x: int, y: int, tag: CellTag) -> bool:
        """Write ``tag`` at ``(x, y)``; border cells are left untouched.

        Returns ``True`` when the cell was written.
        """

        self._check(x, y)
        if self.is_border(x, y):
            logging.debug("Ignored write of %s to border cell (%s, %s)", tag.value, x, y)
            return False
        self._cells[y][x] = tag
        return True

    def __getitem__(self, point: Point) -> CellTag:
        return self.get(point.x, point.y)

    def __setitem__(self, point: Point, tag: CellTag) -> None:
        self.set(point.x, point.y, tag)

    def cells(self) -> Iterator[tuple[Point, CellTag]]:
        """Yield every ``(point, tag)`` pair in row-major order."""

        for y, row in enumerate(self._cells):
            for x, tag in enumerate(row):
                yield Point(x, y), tag

    def dump(self) -> str:
        """Return the grid as text, one character per cell (the tag's first letter)."""

        return "\n".join("".join(tag.value[0] for tag in row) for row in self._cells)
