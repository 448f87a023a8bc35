"""pygame based renderer for the game window."""

from __future__ import annotations

from typing import Iterable, Tuple

import pygame

from mamba.config import GameConfig
from mamba.utils import Point
from mamba.world import Snapshot

HELP_LINES = (
    "P1 Move: Arrows or WASD",
    "Un/pause: Space",
    "Reset Score: R",
    "Dump Grid: E",
    "Quit: Esc or Cmd+Q",
)


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface, config: GameConfig) -> None:
        self.screen = screen
        self.tile = config.tile_width
        self.font = pygame.font.SysFont("arial", 20)
        self.map_color = config.colors["map_color"]
        self.border_color = config.colors["border_color"]
        self.text_color = config.colors["text_color"]
        self.rabbit_color = config.colors["rabbit_color"]
        self.snake_color = config.colors["player1_snake_color"]

    def clear(self) -> None:
        self.screen.fill(self.border_color)

    def draw_background(self, width: int, height: int) -> None:
        interior = pygame.Rect(self.tile, self.tile, (width - 2) * self.tile, (height - 2) * self.tile)
        pygame.draw.rect(self.screen, self.map_color, interior)

    def draw_tiles(self, points: Iterable[Point], color: Tuple[int, int, int]) -> None:
        for point in points:
            rect = pygame.Rect(point.x * self.tile, point.y * self.tile, self.tile, self.tile)
            pygame.draw.rect(self.screen, color, rect)

    def draw_text(self, text: str, row: int, column: int = 1) -> None:
        surface = self.font.render(text, True, self.text_color)
        self.screen.blit(surface, (column * self.tile, row * self.tile))

    def draw_hud(self, snapshot: Snapshot) -> None:
        self.draw_text(f"Time: {snapshot.tick}", 1)
        self.draw_text("Player One", 3)
        self.draw_text(f"High Score: {snapshot.high_score}", 4)
        self.draw_text(f"Length: {snapshot.length}", 5)
        self.draw_text(f"Rabbits Eaten: {snapshot.eaten}", 6)
        if snapshot.dead:
            self.draw_text("Player One died! Press space.", 5, column=11)
        elif snapshot.paused:
            self.draw_text("Paused", 5, column=11)
        first_row = snapshot.height - len(HELP_LINES) - 1
        for offset, line in enumerate(HELP_LINES):
            self.draw_text(line, first_row + offset)

    def draw(self, snapshot: Snapshot) -> None:
        self.clear()
        self.draw_background(snapshot.width, snapshot.height)
        self.draw_tiles(snapshot.rabbits, self.rabbit_color)
        self.draw_tiles(snapshot.snake, self.snake_color)
        self.draw_hud(snapshot)

    def present(self) -> None:
        pygame.display.flip()
