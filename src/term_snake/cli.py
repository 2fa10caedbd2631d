"""Console entry point for the terminal snake game."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description=(
            "Play snake in the terminal. Arrow keys steer, Ctrl-C quits."
        ),
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for food placement.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write log records to this file (the screen is busy).",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Level used with --log-file.",
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format=_LOG_FORMAT,
        )
    else:
        logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT)


def _play(seed: int | None) -> None:
    from term_snake.config import GameConfig
    from term_snake.driver import Driver
    from term_snake.game import Game
    from term_snake.terminal import board_size, open_surface

    config = GameConfig(seed=seed)
    with open_surface() as surface:
        width, height = board_size(surface, config)
        game = Game(width, height, config=config)
        logger.info(
            "Starting %dx%d game with config %s.", width, height, config.to_dict(),
        )
        asyncio.run(Driver(game, surface).run())


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    from term_snake.terminal import TerminalError

    args = _build_parser().parse_args(argv)
    _configure_logging(args)

    try:
        _play(args.seed)
    except TerminalError as exc:
        logger.critical("Terminal setup failed: %s", exc)
        print(f"term-snake: {exc}", file=sys.stderr)  # noqa: T201
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
