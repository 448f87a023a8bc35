"""Loading and validation of the YAML game configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from . import constants
from .errors import ConfigError
from .utils import Direction


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings shared by the core and the presentation layer."""

    window_width: int = constants.WINDOW_WIDTH
    window_height: int = constants.WINDOW_HEIGHT
    tile_width: int = constants.TILE_WIDTH
    game_speed: int = constants.GAME_SPEED_MS
    snake_start_size: int = constants.SNAKE_START_SIZE
    snake_grow_length: int = constants.SNAKE_GROW_LENGTH
    rabbit_hop_distance: int = constants.RABBIT_HOP_DISTANCE
    num_of_rabbits: int = constants.NUM_OF_RABBITS
    two_player: bool = False
    initial_heading: Direction = Direction(constants.INITIAL_HEADING)
    seed: int | None = None
    colors: Mapping[str, tuple[int, int, int]] = field(
        default_factory=lambda: {
            name: constants.COLORS[value.upper()]
            for name, value in constants.DEFAULT_COLORS.items()
        }
    )

    @property
    def map_width(self) -> int:
        return self.window_width // self.tile_width

    @property
    def map_height(self) -> int:
        return self.window_height // self.tile_width

    def validate(self) -> "GameConfig":
        """Raise :class:`ConfigError` when the settings cannot produce a game."""

        if self.tile_width <= 0:
            raise ConfigError("must be positive", key="tile_width")
        if self.map_width < 3 or self.map_height < 3:
            raise ConfigError(
                f"map of {self.map_width}x{self.map_height} tiles has no interior",
                key="tile_width",
            )
        if self.game_speed <= 0:
            raise ConfigError("must be positive", key="game_speed")
        if self.snake_start_size < 1:
            raise ConfigError("must be at least 1", key="snake_start_size")
        if self.snake_grow_length < 0:
            raise ConfigError("must not be negative", key="snake_grow_length")
        if self.rabbit_hop_distance < 1:
            raise ConfigError("must be at least 1", key="rabbit_hop_distance")
        if self.num_of_rabbits < 0:
            raise ConfigError("must not be negative", key="num_of_rabbits")

        # The body trails straight behind the head from the map center.
        center = self.map_width // 2, self.map_height // 2
        back = self.initial_heading.opposite.vector
        tail_x = center[0] + back.x * self.snake_start_size
        tail_y = center[1] + back.y * self.snake_start_size
        if not (0 < tail_x < self.map_width - 1 and 0 < tail_y < self.map_height - 1):
            raise ConfigError("snake does not fit inside the border", key="snake_start_size")

        free_cells = (self.map_width - 2) * (self.map_height - 2) - (self.snake_start_size + 1)
        if self.num_of_rabbits > free_cells:
            raise ConfigError(
                f"{self.num_of_rabbits} rabbits do not fit in {free_cells} free cells",
                key="num_of_rabbits",
            )
        return self


def _int(data: Mapping[str, Any], key: str, default: int) -> int:
    raw = data.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ConfigError(f"expected an integer, got {raw!r}", key=key)
    return raw


def _bool(data: Mapping[str, Any], key: str, default: bool) -> bool:
    raw = data.get(key, default)
    if not isinstance(raw, bool):
        raise ConfigError(f"expected true or false, got {raw!r}", key=key)
    return raw


def _color(data: Mapping[str, Any], key: str) -> tuple[int, int, int]:
    raw = data.get(key, constants.DEFAULT_COLORS[key])
    name = str(raw).strip().upper()
    if name not in constants.COLORS:
        raise ConfigError(f"unknown color {raw!r}", key=key)
    return constants.COLORS[name]


def config_from_mapping(data: Mapping[str, Any]) -> GameConfig:
    """Build a validated :class:`GameConfig` from a parsed document."""

    if not isinstance(data, Mapping):
        raise ConfigError("configuration must be a YAML mapping")

    heading_raw = data.get("initial_heading", constants.INITIAL_HEADING)
    try:
        heading = Direction.from_str(heading_raw)
    except ValueError as exc:
        raise ConfigError(str(exc), key="initial_heading") from exc

    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigError(f"expected an integer, got {seed!r}", key="seed")

    config = GameConfig(
        window_width=_int(data, "window_width", constants.WINDOW_WIDTH),
        window_height=_int(data, "window_height", constants.WINDOW_HEIGHT),
        tile_width=_int(data, "tile_width", constants.TILE_WIDTH),
        game_speed=_int(data, "game_speed", constants.GAME_SPEED_MS),
        snake_start_size=_int(data, "snake_start_size", constants.SNAKE_START_SIZE),
        snake_grow_length=_int(data, "snake_grow_length", constants.SNAKE_GROW_LENGTH),
        rabbit_hop_distance=_int(data, "rabbit_hop_distance", constants.RABBIT_HOP_DISTANCE),
        num_of_rabbits=_int(data, "num_of_rabbits", constants.NUM_OF_RABBITS),
        two_player=_bool(data, "two_player", False),
        initial_heading=heading,
        seed=seed,
        colors={key: _color(data, key) for key in constants.DEFAULT_COLORS},
    )
    return config.validate()


def load_config(path: str | Path) -> GameConfig:
    """Read ``path`` as YAML and return the validated configuration."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}") from exc
    if data is None:
        data = {}
    return config_from_mapping(data)
