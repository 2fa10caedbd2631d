"""Term Snake — terminal snake game."""

from term_snake.config import GameConfig
from term_snake.events import Key
from term_snake.food import Food
from term_snake.game import Game, GameState
from term_snake.snake import Direction, Segment, Snake

__all__ = [
    "Direction",
    "Food",
    "Game",
    "GameConfig",
    "GameState",
    "Key",
    "Segment",
    "Snake",
]
