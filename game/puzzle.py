from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union
from .types import GROUP_COUNT, TILES_PER_ROW, Difficulty, SolutionGroup, Word

logger = logging.getLogger(__name__)


def normalize_entry(w: str) -> str:
    return " ".join(w.strip().upper().split())


def validate_groups(groups: List[SolutionGroup]) -> Tuple[bool, str]:
    """
    Check the authoring invariants of a puzzle:
    - exactly four groups, each with exactly four words
    - one group per difficulty tier
    - no word appears twice anywhere on the board
    """
    if len(groups) != GROUP_COUNT:
        return False, f"Expected {GROUP_COUNT} groups, got {len(groups)}."

    for g in groups:
        if len(g.words) != TILES_PER_ROW:
            return False, f"Group '{g.name}' has {len(g.words)} words, expected {TILES_PER_ROW}."
        if any(not w for w in g.words):
            return False, f"Group '{g.name}' contains an empty entry."

    tiers = [g.difficulty for g in groups]
    if len(set(tiers)) != len(tiers):
        return False, "Each difficulty tier must be used by exactly one group."

    seen = set()
    dups = []
    for g in groups:
        for w in g.words:
            if w in seen:
                dups.append(w)
            seen.add(w)

    if dups:
        return False, f"Duplicate entries found: {sorted(set(dups))}"
    return True, ""


def group_from_dict(data: Mapping[str, Any]) -> SolutionGroup:
    if not isinstance(data, Mapping):
        raise ValueError("Each group must be an object.")
    try:
        name = str(data["name"])
        words = data["words"]
        difficulty = Difficulty.parse(data["difficulty"])
    except KeyError as exc:
        raise ValueError(f"Group is missing field {exc}") from exc
    if isinstance(words, str) or not isinstance(words, Iterable):
        raise ValueError(f"Group '{name}': words must be a list.")
    return SolutionGroup(
        name=normalize_entry(name),
        words=tuple(normalize_entry(str(w)) for w in words),
        difficulty=difficulty,
    )


class Puzzle:
    """
    Static puzzle definition: the four solution groups.
    Immutable for the lifetime of a session.
    """

    def __init__(self, groups: Iterable[SolutionGroup]) -> None:
        groups = list(groups)
        ok, msg = validate_groups(groups)
        if not ok:
            raise ValueError(msg)
        self.groups: Tuple[SolutionGroup, ...] = tuple(groups)
        self._by_word: Dict[Word, SolutionGroup] = {}
        for g in self.groups:
            for w in g.words:
                self._by_word[w] = g

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Puzzle":
        raw = data.get("groups")
        if not isinstance(raw, list):
            raise ValueError("Puzzle must contain a 'groups' list.")
        return cls(group_from_dict(g) for g in raw)

    @property
    def words(self) -> List[Word]:
        return [w for g in self.groups for w in g.words]

    def group_for(self, word: Word) -> SolutionGroup:
        return self._by_word[word]

    def group_for_difficulty(self, difficulty: Difficulty) -> SolutionGroup:
        for g in self.groups:
            if g.difficulty is difficulty:
                return g
        raise KeyError(difficulty)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "groups": [
                {"name": g.name, "words": list(g.words), "difficulty": g.difficulty.name}
                for g in self.groups
            ]
        }


def load_puzzle(path: Union[str, Path]) -> Puzzle:
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path}: not valid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object.")
    puzzle = Puzzle.from_dict(data)
    logger.info("Loaded puzzle from %s (%d words)", path, len(puzzle.words))
    return puzzle


CANONICAL_GROUPS: Tuple[SolutionGroup, ...] = (
    SolutionGroup("TARGET OF A SCAM", ("MARK", "PATSY", "PIGEON", "SAP"), Difficulty.YELLOW),
    SolutionGroup("BANDLEADERS", ("KC", "PRINCE", "SLY", "STING"), Difficulty.GREEN),
    SolutionGroup("TWELVE DAYS SINGULARS", ("HEN", "GOOSE", "PIPER", "RING"), Difficulty.BLUE),
    SolutionGroup("ANIMATED FILMS MISSING A LETTER", ("ELO", "MOAN", "SOL", "U"), Difficulty.PURPLE),
)


def canonical_puzzle() -> Puzzle:
    return Puzzle(CANONICAL_GROUPS)
