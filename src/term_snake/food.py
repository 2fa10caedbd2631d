"""Food placement."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from term_snake.board import free_spot

logger = logging.getLogger(__name__)


class Food:
    """A single food cell, moved to a free spot whenever it is eaten."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    @property
    def position(self) -> tuple[int, int]:
        """Return the (x, y) coordinate."""
        return self.x, self.y

    @classmethod
    def place(
        cls,
        width: int,
        height: int,
        occupied: Iterable[tuple[int, int]],
        rng: np.random.Generator,
    ) -> Food:
        """Create food on a free interior cell.

        Raises ``ValueError`` if the interior has no free cell.
        """
        spot = free_spot(width, height, occupied, rng)
        if spot is None:
            raise ValueError("No free interior cell for food.")
        return cls(*spot)

    def relocate(
        self,
        width: int,
        height: int,
        occupied: Iterable[tuple[int, int]],
        rng: np.random.Generator,
    ) -> bool:
        """Move to a new free spot. Returns False if none was available."""
        spot = free_spot(width, height, occupied, rng)
        if spot is None:
            logger.info("No free cell left for food at %s.", self.position)
            return False
        self.x, self.y = spot
        return True

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"position": [self.x, self.y]}
