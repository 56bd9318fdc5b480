"""Session state and the operations that mutate it."""

from __future__ import annotations
import logging
import time
from enum import Enum
from typing import Callable, List, Optional
import numpy as np
from .lockout import UNIT_PENALTY, LockoutClock
from .puzzle import Puzzle
from .shuffle import make_rng, shuffle_unsolved
from .types import TILES_PER_ROW, Difficulty, Tile, TileGrid, TileId, TileRow

logger = logging.getLogger(__name__)


class SubmitOutcome(Enum):
    IGNORED = "ignored"
    LOCKED = "locked"
    MISS = "miss"
    MATCH = "match"
    WON = "won"


class Session:
    """
    One play-through of a puzzle.

    Tiles live in an arena (``self.tiles``) and are referred to everywhere
    else by their slot index, so two tiles with the same text stay distinct.
    Every operation is synchronous; invalid calls are no-ops.
    """

    def __init__(
        self,
        puzzle: Puzzle,
        rng: Optional[np.random.Generator] = None,
        unit_penalty: float = UNIT_PENALTY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.puzzle = puzzle
        self.rng = rng if rng is not None else make_rng()
        self.clock = clock
        self.lockout = LockoutClock(unit_penalty)
        self.tiles: List[Tile] = [Tile(w) for w in puzzle.words]
        self.selection: List[TileId] = []
        self.won = False

        # Groups start one per row, then get mixed so the board gives nothing away.
        grid: TileGrid = [
            TileRow(tiles=tuple(range(i, i + TILES_PER_ROW)))
            for i in range(0, len(self.tiles), TILES_PER_ROW)
        ]
        self.grid: TileGrid = shuffle_unsolved(grid, self.rng)
        logger.info("New session with %d tiles", len(self.tiles))

    def _now(self, now: Optional[float]) -> float:
        return self.clock() if now is None else now

    def word(self, tile: TileId) -> str:
        return self.tiles[tile].word

    def row_of(self, tile: TileId) -> Optional[TileRow]:
        for row in self.grid:
            if tile in row.tiles:
                return row
        return None

    def is_selectable(self, tile: TileId) -> bool:
        row = self.row_of(tile)
        return row is not None and not row.solved

    def solved_rows(self) -> List[TileRow]:
        return [row for row in self.grid if row.solved]

    # Selection

    def toggle_selected(self, tile: TileId) -> bool:
        """Add or remove ``tile`` from the selection. Returns True if it changed."""
        if self.won or not self.is_selectable(tile):
            return False
        if tile in self.selection:
            self.selection.remove(tile)
        elif len(self.selection) < TILES_PER_ROW:
            self.selection.append(tile)
        else:
            return False
        logger.debug("Selection: %s", [self.word(t) for t in self.selection])
        return True

    def clear_selection(self) -> None:
        self.selection = []

    # Shuffle

    def shuffle(self) -> None:
        if self.won:
            return
        self.grid = shuffle_unsolved(self.grid, self.rng)

    # Lockout queries

    def is_locked(self, now: Optional[float] = None) -> bool:
        return self.lockout.is_locked(self._now(now))

    def remaining_minutes(self, now: Optional[float] = None) -> int:
        return self.lockout.remaining_minutes(self._now(now))

    def can_submit(self, now: Optional[float] = None) -> bool:
        return not self.won and len(self.selection) == TILES_PER_ROW and not self.is_locked(now)

    # Submission

    def submit(self, now: Optional[float] = None) -> SubmitOutcome:
        now = self._now(now)
        if self.won or len(self.selection) != TILES_PER_ROW:
            return SubmitOutcome.IGNORED
        if self.lockout.is_locked(now):
            return SubmitOutcome.LOCKED

        tiers: List[Difficulty] = [
            self.puzzle.group_for(self.word(t)).difficulty for t in self.selection
        ]
        if len(set(tiers)) != 1:
            self.lockout.record_failure(now)
            logger.info("Wrong guess: %s", [self.word(t) for t in self.selection])
            return SubmitOutcome.MISS

        difficulty = tiers[0]
        selected = tuple(self.selection)
        solved = self.solved_rows()
        solved.append(TileRow(tiles=selected, solved_difficulty=difficulty))
        logger.info("Solved %s (%s)", self.puzzle.group_for_difficulty(difficulty).name, difficulty.name)

        remaining = [
            t for row in self.grid if not row.solved for t in row.tiles if t not in selected
        ]
        unsolved = [
            TileRow(tiles=tuple(remaining[i:i + TILES_PER_ROW]))
            for i in range(0, len(remaining), TILES_PER_ROW)
        ]

        self.grid = solved + unsolved
        self.selection = []

        if len(solved) == len(self.puzzle.groups):
            self.won = True
            logger.info("Puzzle complete after %d wrong guesses", len(self.lockout.failures))
            return SubmitOutcome.WON
        return SubmitOutcome.MATCH
