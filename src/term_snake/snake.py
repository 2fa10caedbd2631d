"""Snake representation and movement logic."""

from __future__ import annotations

import enum
import logging
from collections import deque
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    Opposite directions are exact negations of each other.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        dx, dy = self.value
        return Direction((-dx, -dy))


@dataclass
class Segment:
    """One occupied grid cell and the direction it last moved in."""

    x: int
    y: int
    direction: Direction

    @property
    def position(self) -> tuple[int, int]:
        """Return the (x, y) coordinate."""
        return self.x, self.y


class Snake:
    """A snake stored as a deque of segments, tail first.

    The tail is ``body[0]``; the head is ``body[-1]``.
    """

    def __init__(
        self,
        start_x: int,
        start_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 1,
        growth: int = 0,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        if growth < 0:
            raise ValueError("Snake growth must be non-negative.")
        self.body: deque[Segment] = deque(
            Segment(start_x + i, start_y, direction) for i in range(length)
        )
        self.direction = direction
        self.pending_growth = growth

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Segment:
        """Return the head segment."""
        return self.body[-1]

    def tail(self) -> list[Segment]:
        """Return every segment except the head."""
        return list(self.body)[:-1]

    def positions(self) -> list[tuple[int, int]]:
        """Return the (x, y) of every segment, tail to head."""
        return [seg.position for seg in self.body]

    def redirect(self, new_direction: Direction) -> bool:
        """Change the intended direction, ignoring 180° reversals.

        The reversal test uses the direction the head last moved in, so
        two quick turns within one tick cannot fold the snake onto itself.
        """
        if new_direction == self.head.direction.opposite:
            logger.debug("Rejected reversal to %s.", new_direction.name)
            return False
        self.direction = new_direction
        return True

    def move(self) -> None:
        """Advance one cell in the intended direction.

        While growth is pending a new segment is appended; otherwise the
        tail segment is recycled as the new head.
        """
        old_head = self.head
        old_head.direction = self.direction
        x, y = old_head.position

        if self.pending_growth > 0:
            self.pending_growth -= 1
            new_head = Segment(x, y, self.direction)
        else:
            # A length-1 snake recycles its own head here.
            new_head = self.body.popleft()
        self.body.append(new_head)

        dx, dy = self.direction.value
        new_head.direction = self.direction
        new_head.x = x + dx
        new_head.y = y + dy

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg.position) for seg in self.body],
            "direction": self.direction.name.lower(),
            "pending_growth": self.pending_growth,
        }
