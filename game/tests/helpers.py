from __future__ import annotations

from typing import List

from game.session import Session


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def tile_for(session: Session, word: str) -> int:
    return [t.word for t in session.tiles].index(word)


def select_words(session: Session, words: List[str]) -> None:
    for w in words:
        assert session.toggle_selected(tile_for(session, w))


def all_tiles(session: Session) -> List[int]:
    return [t for row in session.grid for t in row.tiles]
