"""Authoritative game loop."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from typing import List, Optional

from . import collision
from .config import GameConfig
from .grid import CellTag, Grid
from .rabbit import Rabbit
from .snake import Snake
from .utils import Direction, Point, RandomSource


@dataclass
class Score:
    """Rabbits eaten this game and the best count of the session."""

    eaten: int = 0
    high_score: int = 0

    def record_eat(self) -> None:
        self.eaten += 1
        self.high_score = max(self.high_score, self.eaten)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the world handed to the presentation layer."""

    tick: int
    eaten: int
    high_score: int
    paused: bool
    dead: bool
    heading: Direction
    snake: tuple[Point, ...]
    rabbits: tuple[Point, ...]
    width: int
    height: int

    @property
    def length(self) -> int:
        return len(self.snake)


class World:
    """Holds the grid and its actors and advances them once per tick.

    Input handlers (:meth:`request_heading`, :meth:`toggle_pause`,
    :meth:`reset`, :meth:`dump`) may be called between ticks; only
    :meth:`update` moves actors.
    """

    def __init__(self, config: GameConfig, rng: Optional[RandomSource] = None) -> None:
        self.config = config
        self.random: RandomSource = rng if rng is not None else random.Random(config.seed)
        self.score = Score()
        self.paused = False
        self.dead = False
        if config.two_player:
            logging.warning("Two player mode is not supported; starting a single player game")
        self.new_game()

    def new_game(self) -> None:
        """Replace the grid and every actor. The high score is kept."""

        self.tick = 0
        self.score.eaten = 0
        if not self.paused:
            self.dead = False
        self.grid = Grid(self.config.map_width, self.config.map_height)
        center = Point(self.config.map_width // 2, self.config.map_height // 2)
        self.snake = Snake.spawn(
            center,
            self.config.snake_start_size,
            heading=self.config.initial_heading,
            grow_length=self.config.snake_grow_length,
        )
        collision.paint_snake(self.grid, self.snake)
        self.rabbits: List[Rabbit] = []
        for _ in range(self.config.num_of_rabbits):
            self._spawn_rabbit()
        logging.info(
            "New %sx%s game with %s rabbits", self.grid.width, self.grid.height, len(self.rabbits)
        )

    def _spawn_rabbit(self) -> Rabbit:
        rabbit = Rabbit.spawn_random(
            self.grid,
            self.config.rabbit_hop_distance,
            self.random,
            avoid=(self.snake.head,),
        )
        self.rabbits.append(rabbit)
        return rabbit

    def _handle_rabbits_eaten(self) -> int:
        eaten = 0
        for rabbit in list(self.rabbits):
            if rabbit.position == self.snake.head:
                eaten += 1
                self.score.record_eat()
                self.rabbits.remove(rabbit)
                self._spawn_rabbit()
                self.snake.grow()
                logging.debug("Rabbit %s eaten at %s", rabbit.id, rabbit.position.to_tuple())
        return eaten

    def _move_snake(self) -> None:
        vacated = self.snake.advance()
        self.grid[vacated] = CellTag.EMPTY
        collision.paint_snake(self.grid, self.snake)

    def _move_rabbits(self) -> None:
        for rabbit in self.rabbits:
            rabbit.hop(self.grid)

    def update(self) -> bool:
        """Run one tick. Returns ``False`` when paused and nothing moved."""

        if self.paused:
            return False
        self.dead = False
        self.tick += 1

        self._handle_rabbits_eaten()
        self._move_snake()
        self._move_rabbits()

        if collision.snake_collides(self.grid, self.snake):
            self._kill_snake()
        return True

    def _kill_snake(self) -> None:
        logging.info(
            "Snake died at %s after %s ticks with %s rabbits eaten",
            self.snake.head.to_tuple(),
            self.tick,
            self.score.eaten,
        )
        self.dead = True
        self.paused = True
        self.new_game()

    def request_heading(self, direction: Direction) -> bool:
        """Ask the snake to turn. Illegal turns are ignored."""

        return self.snake.set_heading(direction)

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    def reset(self) -> None:
        """Clear the high score and begin a new game."""

        logging.info("Score cleared (high score was %s)", self.score.high_score)
        self.score.high_score = 0
        self.new_game()

    def dump(self) -> str:
        """Log and return the grid as text. Does not change any state."""

        text = self.grid.dump()
        logging.info("Grid at tick %s:\n%s", self.tick, text)
        return text

    def snapshot(self) -> Snapshot:
        return Snapshot(
            tick=self.tick,
            eaten=self.score.eaten,
            high_score=self.score.high_score,
            paused=self.paused,
            dead=self.dead,
            heading=self.snake.heading,
            snake=tuple(self.snake.body),
            rabbits=tuple(rabbit.position for rabbit in self.rabbits),
            width=self.grid.width,
            height=self.grid.height,
        )
