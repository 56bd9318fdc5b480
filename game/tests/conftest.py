from __future__ import annotations

import pytest

from game.puzzle import canonical_puzzle
from game.session import Session
from game.shuffle import make_rng
from game.tests.helpers import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session(clock: FakeClock) -> Session:
    return Session(canonical_puzzle(), rng=make_rng(7), unit_penalty=60.0, clock=clock)
