from __future__ import annotations

import json

import pytest

from mamba.protocol import encode_snapshot, parse_moves
from mamba.utils import Direction
from mamba.world import World


def test_encode_snapshot(small_config, scripted) -> None:
    world = World(small_config, rng=scripted(positions=[(1, 1)]))
    world.update()
    line = encode_snapshot(world.snapshot())
    assert "\n" not in line
    data = json.loads(line)
    assert data["type"] == "snapshot"
    assert data["tick"] == 1
    assert data["snake"][0] == [6, 5]
    assert data["length"] == 4
    assert data["rabbits"] == [[2, 1]]
    assert data["heading"] == "right"
    assert (data["width"], data["height"]) == (10, 10)
    assert data["paused"] is False and data["dead"] is False


def test_parse_moves() -> None:
    assert parse_moves("Ru. l") == [Direction.RIGHT, Direction.UP, None, Direction.LEFT]
    assert parse_moves("") == []


def test_parse_moves_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        parse_moves("RX")
