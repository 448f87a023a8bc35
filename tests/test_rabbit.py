from __future__ import annotations

import pytest

from mamba.errors import BoardFullError
from mamba.grid import CellTag, Grid
from mamba.rabbit import Rabbit
from mamba.utils import Direction, Point


def test_next_hop_counts_down_then_pauses(scripted) -> None:
    rabbit = Rabbit(position=Point(2, 5), hop_distance=3, random=scripted(headings=[Direction.UP]))
    position = rabbit.position
    seen = []
    for _ in range(3):
        position = rabbit.next_hop(position)
        seen.append(position)
    assert seen == [Point(3, 5), Point(4, 5), Point(5, 5)]
    assert rabbit.remaining == 0

    assert rabbit.next_hop(position) == position
    assert rabbit.heading is Direction.UP
    assert rabbit.remaining == rabbit.hop_distance - 1

    assert rabbit.next_hop(position) == Point(5, 4)


def test_countdown_is_periodic(scripted) -> None:
    rabbit = Rabbit(position=Point(5, 5), hop_distance=2, random=scripted())
    remaining = []
    for _ in range(7):
        rabbit.next_hop(rabbit.position)
        remaining.append(rabbit.remaining)
    assert remaining == [1, 0, 1, 0, 1, 0, 1]


def test_hop_moves_and_retags_grid(scripted) -> None:
    grid = Grid(10, 10)
    grid.set(4, 4, CellTag.RABBIT)
    rabbit = Rabbit(position=Point(4, 4), hop_distance=3, random=scripted())
    assert rabbit.hop(grid) is True
    assert rabbit.position == Point(5, 4)
    assert grid.get(4, 4) is CellTag.EMPTY
    assert grid.get(5, 4) is CellTag.RABBIT


def test_blocked_hop_picks_new_heading(scripted) -> None:
    grid = Grid(10, 10)
    grid.set(8, 5, CellTag.RABBIT)
    rabbit = Rabbit(position=Point(8, 5), hop_distance=3, random=scripted(headings=[Direction.DOWN]))
    assert rabbit.hop(grid) is False
    assert rabbit.position == Point(8, 5)
    assert rabbit.heading is Direction.DOWN
    assert grid.get(8, 5) is CellTag.RABBIT
    assert rabbit.hop(grid) is True
    assert rabbit.position == Point(8, 6)


def test_rabbit_does_not_enter_snake(scripted) -> None:
    grid = Grid(10, 10)
    grid.set(3, 3, CellTag.RABBIT)
    grid.set(4, 3, CellTag.P1_SNAKE)
    rabbit = Rabbit(position=Point(3, 3), hop_distance=3, random=scripted(headings=[Direction.UP]))
    assert rabbit.hop(grid) is False
    assert grid.get(4, 3) is CellTag.P1_SNAKE


def test_pause_tick_leaves_grid_alone(scripted) -> None:
    grid = Grid(10, 10)
    grid.set(3, 3, CellTag.RABBIT)
    rabbit = Rabbit(position=Point(3, 3), hop_distance=1, random=scripted(headings=[Direction.DOWN]))
    assert rabbit.hop(grid) is True
    assert rabbit.hop(grid) is False
    assert rabbit.position == Point(4, 3)
    assert rabbit.heading is Direction.DOWN
    assert grid.get(4, 3) is CellTag.RABBIT


def test_spawn_resamples_occupied_cells(scripted) -> None:
    grid = Grid(10, 10)
    grid.set(3, 3, CellTag.P1_SNAKE)
    rng = scripted(positions=[(0, 0), (3, 3), (6, 7)])
    rabbit = Rabbit.spawn_random(grid, 4, rng)
    assert rabbit.position == Point(6, 7)
    assert rabbit.remaining == 4
    assert grid.get(6, 7) is CellTag.RABBIT


def test_spawn_skips_avoided_cells(scripted) -> None:
    grid = Grid(10, 10)
    rng = scripted(positions=[(2, 2), (3, 3)])
    rabbit = Rabbit.spawn_random(grid, 4, rng, avoid=(Point(2, 2),))
    assert rabbit.position == Point(3, 3)
    assert grid.get(2, 2) is CellTag.EMPTY


def test_spawn_on_full_board_fails_fast(scripted) -> None:
    grid = Grid(3, 3)
    grid.set(1, 1, CellTag.P1_SNAKE)
    with pytest.raises(BoardFullError):
        Rabbit.spawn_random(grid, 4, scripted(), max_attempts=50)


def test_rabbits_get_distinct_ids(scripted) -> None:
    first = Rabbit(position=Point(1, 1), hop_distance=2, random=scripted())
    second = Rabbit(position=Point(2, 2), hop_distance=2, random=scripted())
    assert first.id != second.id
