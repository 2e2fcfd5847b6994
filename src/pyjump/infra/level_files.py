from __future__ import annotations

import logging
import re
from pathlib import Path

from pyjump.domain.exceptions import LevelFormatError
from pyjump.domain.level import Level
from pyjump.infra.exceptions import LevelLoadError

logger = logging.getLogger(__name__)

DEFAULT_LEVELS_PATH = Path(__file__).resolve().parent.parent / "data" / "levels.txt"

_BLANK_LINES = re.compile(r"\n[ \t]*\n")


def split_level_pack(text: str) -> list[str]:
    """Split a pack into level texts; levels are separated by blank lines."""
    text = text.replace("\r\n", "\n")
    return [chunk.strip() for chunk in _BLANK_LINES.split(text) if chunk.strip()]


def parse_level_pack(text: str) -> list[Level]:
    levels: list[Level] = []
    for i, chunk in enumerate(split_level_pack(text)):
        try:
            levels.append(Level.parse(chunk))
        except LevelFormatError as e:
            raise LevelFormatError(f"Level {i + 1}: {e}") from e
    return levels


def load_levels_from_path(path: Path) -> list[Level]:
    try:
        data = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LevelLoadError(f"Failed to read levels from {path}: {e}") from e

    levels = parse_level_pack(data)
    if not levels:
        raise LevelLoadError(f"No levels found in {path}.")

    logger.info("Loaded %d level(s) from %s", len(levels), path)
    return levels


def load_default_levels() -> list[Level]:
    return load_levels_from_path(DEFAULT_LEVELS_PATH)
