from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pyjump.app.config import GameConfig
from pyjump.domain.exceptions import LevelFormatError, MissingPlayerError
from pyjump.domain.world import World
from pyjump.infra.exceptions import LevelLoadError
from pyjump.infra.level_files import load_default_levels, load_levels_from_path


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pyjump", description="Tile-grid platformer.")
    parser.add_argument("--levels", type=Path, help="level pack (levels separated by blank lines)")
    parser.add_argument("--scale", type=int, default=GameConfig.scale, help="pixels per grid cell")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        levels = load_levels_from_path(args.levels) if args.levels else load_default_levels()
        for i, level in enumerate(levels):
            try:
                World.initial(level)
            except MissingPlayerError as e:
                raise MissingPlayerError(f"Level {i + 1}: {e}") from e
    except (LevelLoadError, LevelFormatError, MissingPlayerError) as e:
        print(f"pyjump: cannot start: {e}", file=sys.stderr)
        return 2

    # Tk is only needed once the levels are known to be playable.
    from pyjump.app.game_app import GameApp

    GameApp(levels, GameConfig(scale=args.scale)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
