"""Gameplay defaults shared across the core modules."""

TITLE: str = "Hungry Mamba!"

WINDOW_WIDTH: int = 640
WINDOW_HEIGHT: int = 480
TILE_WIDTH: int = 20
GAME_SPEED_MS: int = 100
SNAKE_START_SIZE: int = 4
SNAKE_GROW_LENGTH: int = 3
RABBIT_HOP_DISTANCE: int = 5
NUM_OF_RABBITS: int = 3
INITIAL_HEADING: str = "right"
MAX_SPAWN_ATTEMPTS: int = 10_000

COLORS: dict[str, tuple[int, int, int]] = {
    "BLACK": (0, 0, 0),
    "GRAY": (128, 128, 128),
    "WHITE": (255, 255, 255),
    "AQUA": (0, 255, 255),
    "RED": (255, 0, 0),
    "GREEN": (0, 255, 0),
    "BLUE": (0, 0, 255),
    "YELLOW": (255, 255, 0),
    "FUCHSIA": (255, 0, 255),
    "CYAN": (0, 255, 255),
}

DEFAULT_COLORS: dict[str, str] = {
    "map_color": "black",
    "border_color": "gray",
    "text_color": "white",
    "rabbit_color": "white",
    "player1_snake_color": "green",
    "player2_snake_color": "blue",
}
