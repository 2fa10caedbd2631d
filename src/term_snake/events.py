"""Input keys and the background producers feeding the game loop."""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

# Idle delay between key polls when no key is waiting.
_POLL_INTERVAL = 0.005  # seconds


class Key(enum.Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    ESCAPE = "escape"
    QUIT = "quit"


async def run_clock(ticks: asyncio.Queue, interval: float) -> None:
    """Offer one tick into *ticks* every *interval* seconds.

    A tick is dropped if the previous one has not been consumed yet, so a
    slow consumer never sees a backlog.
    """
    while True:
        await asyncio.sleep(interval)
        try:
            ticks.put_nowait(None)
        except asyncio.QueueFull:
            pass


async def run_input_poller(
    poll_key: Callable[[], Key | None],
    events: asyncio.Queue,
    interval: float = _POLL_INTERVAL,
) -> None:
    """Poll *poll_key* without blocking and forward keys to *events*."""
    while True:
        key = poll_key()
        if key is None:
            await asyncio.sleep(interval)
            continue
        logger.debug("Key %s received.", key.name)
        await events.put(key)
        # put() on an unbounded queue never suspends.
        await asyncio.sleep(0)
