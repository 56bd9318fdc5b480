from .app import GameParams, new_session, snapshot
from .lockout import UNIT_PENALTY, LockoutClock
from .puzzle import Puzzle, canonical_puzzle, load_puzzle
from .session import Session, SubmitOutcome
from .shuffle import shuffle_unsolved
from .types import Difficulty, SolutionGroup, Tile, TileRow

__all__ = [
    "Difficulty",
    "GameParams",
    "LockoutClock",
    "Puzzle",
    "Session",
    "SolutionGroup",
    "SubmitOutcome",
    "Tile",
    "TileRow",
    "UNIT_PENALTY",
    "canonical_puzzle",
    "load_puzzle",
    "new_session",
    "shuffle_unsolved",
    "snapshot",
]
