"""Curses-backed render surface and key source."""

from __future__ import annotations

import contextlib
import curses
import logging
import os
from collections.abc import Iterator
from typing import Protocol

from term_snake.board import MIN_SIDE
from term_snake.config import GameConfig
from term_snake.events import Key
from term_snake.game import Color

logger = logging.getLogger(__name__)

# Raw-mode key codes.
_CTRL_C = 3
_ESC = 27

_KEYMAP: dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    ord(" "): Key.SPACE,
    _ESC: Key.ESCAPE,
    _CTRL_C: Key.QUIT,
}

# Colour slot -> (foreground, background) curses colours.
_PALETTE: dict[Color, tuple[int, int]] = {
    Color.SNAKE: (curses.COLOR_BLACK, curses.COLOR_GREEN),
    Color.FOOD: (curses.COLOR_BLACK, curses.COLOR_BLUE),
    Color.WALL: (curses.COLOR_BLACK, curses.COLOR_WHITE),
    Color.TEXT: (curses.COLOR_BLUE, -1),
}


class TerminalError(RuntimeError):
    """The terminal could not be set up for the game."""


class Surface(Protocol):
    """What the game needs from a display."""

    def size(self) -> tuple[int, int]: ...

    def clear(self) -> None: ...

    def paint(self, x: int, y: int, color: Color) -> None: ...

    def puts(self, text: str, column: int, row: int) -> None: ...

    def flush(self) -> None: ...

    def poll_key(self) -> Key | None: ...


def decode_key(code: int) -> Key | None:
    """Translate a curses key code; unknown codes map to ``None``."""
    return _KEYMAP.get(code)


def board_size(
    surface: Surface, config: GameConfig | None = None,
) -> tuple[int, int]:
    """Return the board (width, height) in game cells for *surface*.

    Each game cell is two terminal columns wide. The board must leave the
    spawned snake inside the border with room to move.
    """
    cfg = config if config is not None else GameConfig()
    min_width, min_height = cfg.min_board
    min_width = max(min_width, MIN_SIDE)
    min_height = max(min_height, MIN_SIDE)

    columns, rows = surface.size()
    width, height = columns // 2, rows
    if width < min_width or height < min_height:
        raise TerminalError(
            f"terminal too small ({columns}x{rows}); "
            f"need at least {min_width * 2}x{min_height}",
        )
    return width, height


class CursesSurface:
    """Draws game cells into a curses window.

    A game cell ``(x, y)`` covers terminal columns ``2x`` and ``2x + 1``
    on row ``y``.
    """

    def __init__(self, window: curses.window) -> None:
        self.window = window
        self._attrs: dict[Color, int] = {color: curses.A_REVERSE for color in _PALETTE}
        self._attrs[Color.TEXT] = curses.A_BOLD
        self._attrs[Color.DEFAULT] = curses.A_NORMAL

    def init_colors(self) -> None:
        """Register colour pairs when the terminal supports colour."""
        if not curses.has_colors():
            logger.info("Terminal has no colour support; using reverse video.")
            return
        curses.start_color()
        default_bg = True
        try:
            curses.use_default_colors()
        except curses.error:
            logger.info("Terminal has no default colours; using black.")
            default_bg = False
        for pair, (color, (fg, bg)) in enumerate(_PALETTE.items(), start=1):
            if bg == -1 and not default_bg:
                bg = curses.COLOR_BLACK
            curses.init_pair(pair, fg, bg)
            self._attrs[color] = curses.color_pair(pair)

    def size(self) -> tuple[int, int]:
        rows, columns = self.window.getmaxyx()
        return columns, rows

    def clear(self) -> None:
        self.window.erase()

    def paint(self, x: int, y: int, color: Color) -> None:
        # curses raises after writing the bottom-right cell.
        with contextlib.suppress(curses.error):
            self.window.addstr(y, x * 2, "  ", self._attrs[color])

    def puts(self, text: str, column: int, row: int) -> None:
        with contextlib.suppress(curses.error):
            self.window.addstr(row, column, text, self._attrs[Color.TEXT])

    def flush(self) -> None:
        self.window.refresh()

    def poll_key(self) -> Key | None:
        code = self.window.getch()
        if code == -1:
            return None
        return decode_key(code)


@contextlib.contextmanager
def open_surface() -> Iterator[CursesSurface]:
    """Put the terminal in raw, non-blocking mode for the game.

    Ctrl-C arrives as a key rather than a signal. The terminal is
    restored on exit. Raises :class:`TerminalError` if setup fails.
    """
    os.environ.setdefault("ESCDELAY", "25")
    try:
        window = curses.initscr()
    except curses.error as exc:
        raise TerminalError(f"cannot initialise terminal: {exc}") from exc

    try:
        try:
            curses.noecho()
            curses.raw()
            window.keypad(True)
            window.nodelay(True)
            with contextlib.suppress(curses.error):
                curses.curs_set(0)
            surface = CursesSurface(window)
            surface.init_colors()
        except curses.error as exc:
            raise TerminalError(f"cannot configure terminal: {exc}") from exc
        yield surface
    finally:
        window.keypad(False)
        curses.noraw()
        curses.echo()
        curses.endwin()
