"""Tick-based game state machine composing snake, food, and board rules."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

import numpy as np

from term_snake.board import check_dimensions, on_border
from term_snake.config import GameConfig
from term_snake.events import Key
from term_snake.food import Food
from term_snake.snake import Direction, Snake

if TYPE_CHECKING:
    from term_snake.terminal import Surface

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "Game Over! Press space to start again or ESC to exit."

_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class GameState(enum.Enum):
    """Lifecycle states of a game."""

    PLAYING = "playing"
    GAME_OVER = "game_over"
    EXITED = "exited"


class Color(enum.IntEnum):
    """Palette slots understood by render surfaces."""

    DEFAULT = 0
    SNAKE = 1
    FOOD = 2
    WALL = 3
    TEXT = 4


class Game:
    """Single-snake game on a bordered board.

    The game owns the snake, the food and the score. :meth:`tick`
    advances one step; :meth:`handle_key` applies player input for the
    current state; :meth:`draw` renders a full frame.
    """

    def __init__(
        self,
        width: int,
        height: int,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        check_dimensions(width, height)
        self.width = width
        self.height = height
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.snake = self._spawn_snake()
        self.food = Food.place(width, height, self.snake.positions(), self.rng)
        self.score = 0
        self.state = GameState.PLAYING

    def _spawn_snake(self) -> Snake:
        cfg = self.config
        return Snake(
            cfg.spawn_x,
            cfg.spawn_y,
            cfg.spawn_direction,
            length=cfg.spawn_length,
            growth=cfg.spawn_growth,
        )

    # --- transitions ---

    def tick(self) -> None:
        """Advance the snake one cell and resolve the result."""
        if self.state is not GameState.PLAYING:
            return
        self.snake.move()
        self.consolidate()

    def consolidate(self) -> None:
        """Apply collision and food rules to the post-move head."""
        head = self.snake.head
        hit_self = any(
            seg.x == head.x and seg.y == head.y for seg in self.snake.tail()
        )
        if hit_self or on_border(self.width, self.height, head.x, head.y):
            self._end_round("hit itself" if hit_self else "hit the wall")

        if head.position == self.food.position:
            self.snake.pending_growth = self.config.growth_bonus
            self.score += 1
            logger.info("Food eaten at %s, score %d.", head.position, self.score)
            placed = self.food.relocate(
                self.width, self.height, self.snake.positions(), self.rng,
            )
            if not placed:
                self._end_round("filled the board")

    def restart(self) -> None:
        """Start a new round with a fresh snake. The food stays put."""
        self.snake = self._spawn_snake()
        self.score = 0
        self.state = GameState.PLAYING
        logger.info("Game restarted.")

    def quit(self) -> None:
        """Move to the terminal state."""
        self.state = GameState.EXITED
        logger.info("Game exited with score %d.", self.score)

    def handle_key(self, key: Key) -> None:
        """Apply a key press according to the current state."""
        if self.state is GameState.PLAYING:
            if key is Key.QUIT:
                self.quit()
            elif key in _KEY_DIRECTIONS:
                self.snake.redirect(_KEY_DIRECTIONS[key])
        elif self.state is GameState.GAME_OVER:
            if key in (Key.ESCAPE, Key.QUIT):
                self.quit()
            elif key is Key.SPACE:
                self.restart()

    def _end_round(self, reason: str) -> None:
        if self.state is GameState.PLAYING:
            self.state = GameState.GAME_OVER
            logger.info("Snake %s; game over with score %d.", reason, self.score)

    # --- rendering ---

    def draw(self, surface: Surface) -> None:
        """Render snake, food, borders and score, then flush."""
        surface.clear()

        for seg in self.snake.body:
            surface.paint(seg.x, seg.y, Color.SNAKE)

        surface.paint(self.food.x, self.food.y, Color.FOOD)

        for x in range(self.width):
            surface.paint(x, 0, Color.WALL)
            surface.paint(x, self.height - 1, Color.WALL)
        for y in range(self.height):
            surface.paint(0, y, Color.WALL)
            surface.paint(self.width - 1, y, Color.WALL)

        surface.puts(f" Score: {self.score} ", 3, 0)
        surface.flush()

    def draw_game_over(self, surface: Surface) -> None:
        """Print the restart prompt centred on the surface."""
        columns, rows = surface.size()
        column = columns // 2 - len(GAME_OVER_MESSAGE) // 2 - 1
        surface.puts(GAME_OVER_MESSAGE, max(column, 0), rows // 2 - 1)
        surface.flush()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "state": self.state.value,
            "score": self.score,
            "width": self.width,
            "height": self.height,
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }
