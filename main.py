"""Main entry point for Shape World.

This module provides command-line options to drive a session headlessly:
- run: spawn and destroy shapes for a number of frames, then save
- load: restore the save file and report what came back
- inspect: decode the save file without loading it
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from shapeworld.config import GameConfig, SpawnConfig
from shapeworld.exceptions import ConfigurationError, StreamExhaustedError
from shapeworld.game import Game
from shapeworld.levels import AsyncLevelLoader
from shapeworld.logging_config import configure_logging
from shapeworld.persistence import inspect_save_file

logger = logging.getLogger(__name__)

FRAME_TIME = 1.0 / 60.0


def _build_config(args) -> GameConfig:
    overrides = {"seed": args.seed}
    if args.save_dir:
        overrides["save_dir"] = Path(args.save_dir)
    if hasattr(args, "creation_speed"):
        overrides["spawn"] = SpawnConfig(
            creation_speed=args.creation_speed, destruction_speed=args.destruction_speed
        )
    return GameConfig.from_env(**overrides)


async def run_session(game: Game, frames: int, level: int) -> None:
    """Drive *game* for *frames* frames, giving level transitions a turn each frame."""
    if level == 1:
        game.start()
    elif not game.select_level(level):
        raise ConfigurationError(f"Unknown level {level}")

    loader = game.levels if isinstance(game.levels, AsyncLevelLoader) else None
    for _ in range(frames):
        if loader is not None:
            loader.pump()
        game.update(FRAME_TIME)
        await asyncio.sleep(0)

    if loader is not None:
        await loader.wait_idle()


def cmd_run(args) -> int:
    game = Game(_build_config(args))
    asyncio.run(run_session(game, args.frames, args.level))
    logger.info("Session ended with %d shapes in level %d", len(game.roster), game.roster.level_index)
    result = game.save()
    if result.is_err():
        logger.error("Save failed: %s", result.error)
        return 1
    print(f"Saved {len(game.roster)} shapes to {result.unwrap()}")
    return 0


def cmd_load(args) -> int:
    game = Game(_build_config(args))
    result = game.load()
    if result.is_err():
        print(f"Load failed: {result.error}")
        return 1
    report = result.unwrap()
    print(
        f"Loaded {report.shape_count} shapes in level {report.level_index} "
        f"(save version {report.version}{', legacy' if report.legacy else ''})"
    )
    for index, shape in enumerate(game.roster):
        print(f"  {index:4d}  {shape.prototype_name:8s} {shape.material_name:9s} {shape.color.to_rgb255()}")
    return 0


def cmd_inspect(args) -> int:
    path = Path(args.path) if args.path else _build_config(args).save_path
    try:
        summary = inspect_save_file(path)
    except FileNotFoundError:
        print(f"No save file at {path}")
        return 1
    except StreamExhaustedError as e:
        print(f"Not a save file: {e}")
        return 1
    print(summary.model_dump_json(indent=2))
    return 0


def main():
    """Parse command-line arguments and run the selected command."""
    parser = argparse.ArgumentParser(
        description="Shape World session and save file tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Spawn shapes for 10 seconds at 5/s, destroying 1/s, then save
  python main.py run --frames 600 --creation-speed 5 --destruction-speed 1

  # Restore the save and list its shapes
  python main.py load

  # Dump a save file as JSON
  python main.py inspect data/saves/saveFile
        """,
    )
    parser.add_argument("--save-dir", type=str, default=None, help="Directory holding the save file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (optional)")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: INFO)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run a headless session and save it")
    run_parser.add_argument("--frames", type=int, default=600, help="Frames to simulate (default: 600)")
    run_parser.add_argument("--level", type=int, default=1, help="Level to play (default: 1)")
    run_parser.add_argument("--creation-speed", type=float, default=5.0, help="Shapes created per second")
    run_parser.add_argument("--destruction-speed", type=float, default=0.0, help="Shapes destroyed per second")
    run_parser.set_defaults(handler=cmd_run)

    load_parser = subparsers.add_parser("load", help="Load the save file")
    load_parser.set_defaults(handler=cmd_load)

    inspect_parser = subparsers.add_parser("inspect", help="Decode a save file")
    inspect_parser.add_argument("path", nargs="?", default=None, help="Save file (default: configured)")
    inspect_parser.set_defaults(handler=cmd_inspect)

    args = parser.parse_args()
    try:
        configure_logging(args.log_level)
        return args.handler(args)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
