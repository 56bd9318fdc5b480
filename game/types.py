from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

Word = str
TileId = int

TILES_PER_ROW = 4
GROUP_COUNT = 4


class Difficulty(Enum):
    """Group tier, easiest first. Also the row colour in the classic game."""

    YELLOW = 0
    GREEN = 1
    BLUE = 2
    PURPLE = 3

    @staticmethod
    def parse(value) -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown difficulty: {value}")
        if isinstance(value, int):
            try:
                return Difficulty(value)
            except ValueError as exc:
                raise ValueError(f"Unknown difficulty: {value}") from exc
        name = str(value).strip().upper()
        try:
            return Difficulty[name]
        except KeyError as exc:
            raise ValueError(f"Unknown difficulty: {value}") from exc


@dataclass(frozen=True)
class SolutionGroup:
    name: str
    words: Tuple[Word, Word, Word, Word]
    difficulty: Difficulty


@dataclass(frozen=True)
class Tile:
    word: Word


@dataclass(frozen=True)
class TileRow:
    tiles: Tuple[TileId, ...]
    solved_difficulty: Optional[Difficulty] = None

    @property
    def solved(self) -> bool:
        return self.solved_difficulty is not None


TileGrid = List[TileRow]
