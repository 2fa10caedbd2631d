"""Game constants."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from term_snake.snake import Direction


@dataclass(frozen=True)
class GameConfig:
    """Fixed game parameters.

    Board size comes from the terminal and speed is fixed; only the RNG
    seed is meant to vary between runs.
    """

    tick_ms: int = 80
    growth_bonus: int = 10

    # Spawn
    spawn_x: int = 5
    spawn_y: int = 5
    spawn_direction: Direction = Direction.RIGHT
    spawn_length: int = 1
    spawn_growth: int = 0

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive.")
        if self.growth_bonus < 0:
            raise ValueError("growth_bonus must be non-negative.")
        if self.spawn_length < 1:
            raise ValueError("spawn_length must be at least 1.")
        if self.spawn_growth < 0:
            raise ValueError("spawn_growth must be non-negative.")

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_ms / 1000.0

    @property
    def min_board(self) -> tuple[int, int]:
        """Smallest (width, height) with the spawned snake clear of the border.

        The head needs one free cell ahead of it inside the border ring.
        """
        return self.spawn_x + self.spawn_length + 2, self.spawn_y + 2

    def to_dict(self) -> dict:
        """Serialize to a plain dict (directions become names)."""
        d = asdict(self)
        d["spawn_direction"] = self.spawn_direction.name.lower()
        return d
