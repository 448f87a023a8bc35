from __future__ import annotations

import random
from typing import Iterable, Sequence

import pytest

from mamba.config import GameConfig
from mamba.utils import Direction


class ScriptedRandom:
    """Random source that replays fixed spawn cells and headings.

    Once a script runs out the source falls back to a seeded generator for
    positions and to the first option for headings.
    """

    def __init__(
        self,
        positions: Iterable[tuple[int, int]] = (),
        headings: Iterable[Direction] = (),
    ) -> None:
        self._values = [value for position in positions for value in position]
        self._headings = list(headings)
        self._fallback = random.Random(0)

    def randrange(self, stop: int) -> int:
        if self._values:
            value = self._values.pop(0)
            assert 0 <= value < stop
            return value
        return self._fallback.randrange(stop)

    def choice(self, seq: Sequence):
        if self._headings:
            heading = self._headings.pop(0)
            assert heading in seq
            return heading
        return seq[0]


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def small_config() -> GameConfig:
    """A 10x10 map with one rabbit and a four cell snake facing right."""

    return GameConfig(
        window_width=200,
        window_height=200,
        tile_width=20,
        snake_start_size=3,
        snake_grow_length=2,
        rabbit_hop_distance=3,
        num_of_rabbits=1,
    ).validate()


@pytest.fixture
def large_config() -> GameConfig:
    return GameConfig(
        window_width=400,
        window_height=400,
        tile_width=20,
        snake_start_size=5,
        snake_grow_length=3,
        rabbit_hop_distance=4,
        num_of_rabbits=4,
    ).validate()
