from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, List, Optional, Dict, Any
from fastapi import FastAPI, HTTPException
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field
from fastapi.middleware.cors import CORSMiddleware
from game.app import GameParams, snapshot
from game.lockout import UNIT_PENALTY
from game.service import STORE
from game.session import Session

app = FastAPI(title="Connections Game API", version="1.0")

# CORS: allow browser frontend to call backend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class GroupModel(BaseModel):
    name: str
    words: List[str] = Field(..., description="Exactly 4 entries.")
    difficulty: str = Field(..., description="YELLOW, GREEN, BLUE or PURPLE.")

class NewSessionRequest(BaseModel):
    seed: Optional[int] = None
    unit_penalty: float = Field(UNIT_PENALTY, ge=0, description="Seconds of lockout per wrong guess.")
    groups: Optional[List[GroupModel]] = Field(None, description="Custom puzzle. Defaults to the built-in one.")

class ToggleRequest(BaseModel):
    tile: int

@contextmanager
def locked_session(session_id: str) -> Iterator[Session]:
    # Sync endpoints run in a threadpool; hold the session lock for the
    # operation and the snapshot taken after it.
    if session_id not in STORE.sessions:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    with STORE.use(session_id) as session:
        yield session

def state(session_id: str, session: Session) -> Dict[str, Any]:
    out = snapshot(session)
    out["id"] = session_id
    return out

@app.get("/health")
def health() -> Dict[str, Any]:
    return {"ok": True}

@app.get("/")
def root():
    return RedirectResponse(url="/docs")

@app.post("/sessions")
def create_session(req: NewSessionRequest) -> Dict[str, Any]:
    params = GameParams(
        seed=req.seed,
        unit_penalty=req.unit_penalty,
        groups=[g.model_dump() for g in req.groups] if req.groups is not None else None,
    )
    try:
        sid = STORE.create(params)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    with locked_session(sid) as session:
        return state(sid, session)

@app.get("/sessions/{session_id}")
def read_session(session_id: str) -> Dict[str, Any]:
    with locked_session(session_id) as session:
        return state(session_id, session)

@app.post("/sessions/{session_id}/toggle")
def toggle(session_id: str, req: ToggleRequest) -> Dict[str, Any]:
    with locked_session(session_id) as session:
        changed = session.toggle_selected(req.tile)
        out = state(session_id, session)
    out["changed"] = changed
    return out

@app.post("/sessions/{session_id}/shuffle")
def shuffle(session_id: str) -> Dict[str, Any]:
    with locked_session(session_id) as session:
        session.shuffle()
        return state(session_id, session)

@app.post("/sessions/{session_id}/clear")
def clear(session_id: str) -> Dict[str, Any]:
    with locked_session(session_id) as session:
        session.clear_selection()
        return state(session_id, session)

@app.post("/sessions/{session_id}/submit")
def submit(session_id: str) -> Dict[str, Any]:
    with locked_session(session_id) as session:
        outcome = session.submit()
        out = state(session_id, session)
    out["outcome"] = outcome.value
    return out
