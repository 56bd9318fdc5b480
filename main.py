from __future__ import annotations
import json
import logging
import argparse
from typing import Any, Dict, List, Optional
from game.app import GameParams, new_session, snapshot
from game.lockout import UNIT_PENALTY
from game.puzzle import load_puzzle, normalize_entry
from game.session import Session, SubmitOutcome

COMMANDS = "Commands: <word or tile number> to toggle, shuffle, submit, clear, quit"

def render(state: Dict[str, Any]) -> str:
    lines: List[str] = []
    for row in state["rows"]:
        if row["solved"]:
            words = ", ".join(t["word"] for t in row["tiles"])
            lines.append(f"  [{row['difficulty']}] {row['name']}: {words}")
        else:
            cells = []
            for t in row["tiles"]:
                mark = "*" if t["selected"] else " "
                cells.append(f"{mark}{t['id']:>2} {t['word']:<8}")
            lines.append("  " + " ".join(cells))

    if state["won"]:
        lines.append("\nYou solved it. Congratulations!")
        return "\n".join(lines)

    status = f"Selected {len(state['selection'])}/4"
    if state["locked"]:
        status += f" | locked for ~{state['remaining_minutes']} min"
    if state["failures"]:
        status += f" | wrong guesses: {state['failures']}"
    lines.append(status)
    return "\n".join(lines)

def find_tile(session: Session, token: str) -> Optional[int]:
    if token.isdecimal():
        tile = int(token)
        return tile if 0 <= tile < len(session.tiles) else None

    # Match on word text among unsolved tiles only
    word = normalize_entry(token)
    for row in session.grid:
        if row.solved:
            continue
        for t in row.tiles:
            if session.word(t) == word:
                return t
    return None

def handle(session: Session, command: str) -> Optional[str]:
    """
    Apply one user command to the session.
    Returns a short message for the player, if any.
    """
    cmd = command.strip().lower()
    if cmd == "shuffle":
        session.shuffle()
        return None
    if cmd == "clear":
        session.clear_selection()
        return None
    if cmd == "submit":
        outcome = session.submit()
        if outcome is SubmitOutcome.IGNORED:
            return "Select exactly 4 tiles first."
        if outcome is SubmitOutcome.LOCKED:
            return f"Locked out. Try again in about {session.remaining_minutes()} min."
        if outcome is SubmitOutcome.MISS:
            return "Not a group."
        return "Correct!"

    tile = find_tile(session, command)
    if tile is None:
        return f"Unknown tile: {command.strip()}"
    if not session.toggle_selected(tile):
        return "Can't select that tile."
    return None

def main():
    parser = argparse.ArgumentParser(description="NYT Connections-style puzzle (CLI)")
    parser.add_argument("--file", type=str, help="Path to a puzzle JSON file. Defaults to the built-in puzzle.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the tile shuffle.")
    parser.add_argument("--penalty", type=float, default=UNIT_PENALTY, help="Seconds of lockout per wrong guess.")
    parser.add_argument("--debug", action="store_true", help="Print debug diagnostics.")
    parser.add_argument("--json", action="store_true", help="Print JSON state after each command.")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    params = GameParams(seed=args.seed, unit_penalty=args.penalty)
    try:
        if args.file:
            params.groups = load_puzzle(args.file).to_dict()["groups"]
        session = new_session(params)
    except (OSError, ValueError) as exc:
        print(f"Input error: {exc}")
        return

    print(COMMANDS)
    while True:
        state = snapshot(session)
        print(json.dumps(state, indent=2) if args.json else "\n" + render(state))
        if session.won:
            return

        try:
            command = input("> ")
        except EOFError:
            return
        if command.strip().lower() in ("quit", "exit"):
            return
        if not command.strip():
            continue

        msg = handle(session, command)
        if msg:
            print(msg)

if __name__ == "__main__":
    main()
