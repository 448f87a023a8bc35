"""JSON encoding of world snapshots for headless runs."""

from __future__ import annotations

import json
from typing import Iterable

from .utils import Direction
from .world import Snapshot


def _points(points: Iterable) -> list[list[int]]:
    return [[point.x, point.y] for point in points]


def snapshot_to_dict(snapshot: Snapshot) -> dict:
    """Return ``snapshot`` as a JSON friendly dictionary."""

    return {
        "type": "snapshot",
        "tick": snapshot.tick,
        "eaten": snapshot.eaten,
        "high_score": snapshot.high_score,
        "paused": snapshot.paused,
        "dead": snapshot.dead,
        "heading": snapshot.heading.value,
        "length": snapshot.length,
        "snake": _points(snapshot.snake),
        "rabbits": _points(snapshot.rabbits),
        "width": snapshot.width,
        "height": snapshot.height,
    }


def encode_snapshot(snapshot: Snapshot) -> str:
    """Encode a snapshot as a single line of JSON."""

    return json.dumps(snapshot_to_dict(snapshot), separators=(",", ":"))


def parse_moves(raw: str) -> list[Direction | None]:
    """Parse a move script such as ``"RR.UL"``.

    Each character is one tick: a direction letter requests that heading,
    ``.`` leaves the heading alone. Whitespace is ignored.
    """

    moves: list[Direction | None] = []
    for char in raw:
        if char.isspace():
            continue
        if char == ".":
            moves.append(None)
        elif char.upper() in "UDLR":
            moves.append(Direction.from_str(char))
        else:
            raise ValueError(f"invalid move {char!r}")
    return moves
