from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
from .lockout import UNIT_PENALTY
from .puzzle import Puzzle, canonical_puzzle, group_from_dict
from .session import Session
from .shuffle import make_rng


@dataclass
class GameParams:
    seed: Optional[int] = None
    unit_penalty: float = UNIT_PENALTY
    groups: Optional[List[Dict[str, Any]]] = None


def build_puzzle(params: GameParams) -> Puzzle:
    if params.groups is None:
        return canonical_puzzle()
    return Puzzle(group_from_dict(g) for g in params.groups)


def new_session(params: GameParams, clock: Callable[[], float] = time.time) -> Session:
    # Shared entrypoint for BOTH CLI and Web
    return Session(
        build_puzzle(params),
        rng=make_rng(params.seed),
        unit_penalty=params.unit_penalty,
        clock=clock,
    )


def snapshot(session: Session, now: Optional[float] = None) -> Dict[str, Any]:
    """
    JSON-friendly view of everything a renderer needs.
    Solved rows also carry the group name.
    """
    if now is None:
        now = session.clock()

    rows: List[Dict[str, Any]] = []
    for row in session.grid:
        name = None
        if row.solved:
            name = session.puzzle.group_for_difficulty(row.solved_difficulty).name
        rows.append({
            "solved": row.solved,
            "difficulty": row.solved_difficulty.name if row.solved else None,
            "name": name,
            "tiles": [
                {"id": t, "word": session.word(t), "selected": t in session.selection}
                for t in row.tiles
            ],
        })

    return {
        "won": session.won,
        "locked": session.is_locked(now),
        "remaining_minutes": session.remaining_minutes(now),
        "failures": len(session.lockout.failures),
        "can_submit": session.can_submit(now),
        "selection": list(session.selection),
        "rows": rows,
    }
