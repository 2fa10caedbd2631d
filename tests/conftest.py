"""Shared fixtures: an in-memory render surface."""

from __future__ import annotations

from collections import deque

import pytest

from term_snake.events import Key
from term_snake.game import Color


class FakeSurface:
    """Records painted cells and replays scripted keys."""

    def __init__(self, columns: int = 40, rows: int = 10) -> None:
        self.columns = columns
        self.rows = rows
        self.cells: dict[tuple[int, int], Color] = {}
        self.texts: list[tuple[str, int, int]] = []
        self.keys: deque[Key | None] = deque()
        self.flushes = 0

    def size(self) -> tuple[int, int]:
        return self.columns, self.rows

    def clear(self) -> None:
        self.cells.clear()
        self.texts.clear()

    def paint(self, x: int, y: int, color: Color) -> None:
        self.cells[(x, y)] = color

    def puts(self, text: str, column: int, row: int) -> None:
        self.texts.append((text, column, row))

    def flush(self) -> None:
        self.flushes += 1

    def poll_key(self) -> Key | None:
        return self.keys.popleft() if self.keys else None


@pytest.fixture()
def surface() -> FakeSurface:
    return FakeSurface()
