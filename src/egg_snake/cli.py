"""Headless command line front end for Egg Snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)

# Characters in --inputs that mean "keep going straight".
_NO_INPUT = {".", "-"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="egg-snake",
        description="Egg Snake headless player and configuration tools.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    play_p = sub.add_parser(
        "play", help="Play a scripted game, one input per tick.",
    )
    play_p.add_argument(
        "--inputs", type=str, default="",
        help=(
            "Steering keys applied before each tick: w/a/s/d, or '.' to "
            "keep the current direction."
        ),
    )
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument(
        "--max-ticks", type=int, default=None,
        help="Keep ticking straight after the inputs run out.",
    )
    play_p.add_argument(
        "--board", action="store_true", help="Print the final board.",
    )

    sub.add_parser("config", help="Print the effective configuration.")
    return parser


def _load_config(args: argparse.Namespace):
    from egg_snake.config import GameConfig

    return GameConfig.load(args.config) if args.config else GameConfig()


def _run_play(args: argparse.Namespace) -> int:
    import numpy as np

    from egg_snake.engine import GameEngine
    from egg_snake.render import render_text

    config = _load_config(args)
    seed = args.seed if args.seed is not None else config.seed
    engine = GameEngine(config, rng=np.random.default_rng(seed))
    engine.start()

    for key in args.inputs:
        if not engine.is_running:
            break
        if key not in _NO_INPUT:
            engine.request_direction(key)
        engine.on_tick()

    if args.max_ticks is not None:
        while engine.is_running and engine.ticks < args.max_ticks:
            engine.on_tick()

    if args.board:
        print(render_text(  # noqa: T201
            engine.snake, engine.egg, config.arena_size, engine.heading,
        ))
    print(  # noqa: T201
        f"status={engine.status.value} score={engine.score} "
        f"ticks={engine.ticks}",
    )
    if engine.message:
        print(engine.message)  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    print(json.dumps(_load_config(args).to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``egg-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
