from __future__ import annotations
import logging
from typing import List, Optional
import numpy as np
from .types import TILES_PER_ROW, TileGrid, TileId, TileRow

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def unsolved_tiles(grid: TileGrid) -> List[TileId]:
    # Row order, then tile order within each row.
    return [t for row in grid if not row.solved for t in row.tiles]


def shuffle_unsolved(grid: TileGrid, rng: np.random.Generator) -> TileGrid:
    """
    Permute every tile of the unsolved rows and deal them back, four at a
    time, into the slots the unsolved rows occupied. Solved rows are passed
    through as the same objects.
    """
    pool = unsolved_tiles(grid)
    if not pool:
        return grid

    order = rng.permutation(len(pool))
    shuffled = [pool[i] for i in order]

    out: TileGrid = []
    for row in grid:
        if row.solved:
            out.append(row)
        else:
            out.append(TileRow(tiles=tuple(shuffled[:TILES_PER_ROW])))
            shuffled = shuffled[TILES_PER_ROW:]

    logger.debug("Shuffled %d unsolved tiles", len(pool))
    return out
