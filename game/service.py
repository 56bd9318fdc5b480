from __future__ import annotations
import logging
import threading
import time
import uuid
from contextlib import contextmanager
from typing import Callable, Dict, Iterator
from .app import GameParams, new_session
from .session import Session

logger = logging.getLogger(__name__)


class SessionStore:
    """
    In-memory registry of independent sessions, keyed by id.
    Invariant: every operation on a stored session runs under that
    session's lock, so one request at a time touches a given session.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self.clock = clock
        self.sessions: Dict[str, Session] = {}
        self.locks: Dict[str, threading.Lock] = {}

    def create(self, params: GameParams) -> str:
        session = new_session(params, clock=self.clock)
        sid = uuid.uuid4().hex
        self.locks[sid] = threading.Lock()
        self.sessions[sid] = session
        logger.info("Created session %s", sid)
        return sid

    def get(self, sid: str) -> Session:
        return self.sessions[sid]

    @contextmanager
    def use(self, sid: str) -> Iterator[Session]:
        # KeyError for unknown ids is raised before the lock is taken
        session = self.sessions[sid]
        with self.locks[sid]:
            yield session

    def __len__(self) -> int:
        return len(self.sessions)


STORE = SessionStore()
