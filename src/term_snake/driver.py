"""Cooperative loop multiplexing clock ticks and key events into a game."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from term_snake.events import Key, run_clock, run_input_poller
from term_snake.game import Game, GameState

if TYPE_CHECKING:
    from term_snake.terminal import Surface

logger = logging.getLogger(__name__)

# Yield between empty polls while playing.
_IDLE_INTERVAL = 0.002  # seconds


class Driver:
    """Pumps ticks and keys into a :class:`Game` until it exits.

    The game is only touched from :meth:`run`, which handles at most one
    ready source per iteration. Ticks take precedence over keys.
    """

    def __init__(self, game: Game, surface: Surface) -> None:
        self.game = game
        self.surface = surface
        self.ticks: asyncio.Queue[None] = asyncio.Queue(maxsize=1)
        self.events: asyncio.Queue[Key] = asyncio.Queue()

    def poll_once(self) -> bool:
        """Handle one ready tick or key without blocking.

        Returns True if something was handled.
        """
        try:
            self.ticks.get_nowait()
        except asyncio.QueueEmpty:
            pass
        else:
            self.game.tick()
            self.game.draw(self.surface)
            return True

        try:
            key = self.events.get_nowait()
        except asyncio.QueueEmpty:
            return False
        self.game.handle_key(key)
        return True

    async def wait_for_restart(self) -> None:
        """Show the game-over prompt and block until a key arrives."""
        self.game.draw_game_over(self.surface)
        key = await self.events.get()
        self.game.handle_key(key)
        if self.game.state is GameState.PLAYING:
            self.game.draw(self.surface)

    async def run(self) -> None:
        """Run until the game reaches the exited state."""
        producers = [
            asyncio.create_task(
                run_clock(self.ticks, self.game.config.tick_interval),
            ),
            asyncio.create_task(
                run_input_poller(self.surface.poll_key, self.events),
            ),
        ]
        self.game.draw(self.surface)
        try:
            while self.game.state is not GameState.EXITED:
                if self.game.state is GameState.PLAYING:
                    if not self.poll_once():
                        await asyncio.sleep(_IDLE_INTERVAL)
                else:
                    await self.wait_for_restart()
        finally:
            for task in producers:
                task.cancel()
            await asyncio.gather(*producers, return_exceptions=True)
        logger.info("Driver stopped.")
