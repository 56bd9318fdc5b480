from game.app import GameParams, new_session, snapshot
from game.tests.helpers import FakeClock, tile_for
from main import find_tile, handle, render


def make_session():
    return new_session(GameParams(seed=2), clock=FakeClock())


def test_find_tile_by_word_and_number():
    session = make_session()
    assert find_tile(session, "mark") == tile_for(session, "MARK")
    assert find_tile(session, "3") == 3
    assert find_tile(session, "99") is None
    assert find_tile(session, "banana") is None


def test_handle_commands():
    session = make_session()
    assert handle(session, "submit") == "Select exactly 4 tiles first."
    for w in ("mark", "kc", "hen", "elo"):
        assert handle(session, w) is None
    assert handle(session, "sap") == "Can't select that tile."
    assert handle(session, "submit") == "Not a group."
    assert handle(session, "submit").startswith("Locked out.")
    assert handle(session, "clear") is None
    assert session.selection == []
    assert handle(session, "shuffle") is None
    assert handle(session, "banana") == "Unknown tile: banana"


def test_handle_correct_guess_and_render():
    session = make_session()
    for w in ("MARK", "PATSY", "PIGEON", "SAP"):
        handle(session, w)
    assert handle(session, "submit") == "Correct!"

    text = render(snapshot(session))
    assert "[YELLOW] TARGET OF A SCAM" in text
    assert "Selected 0/4" in text


def test_render_win_message():
    session = make_session()
    for group in session.puzzle.groups:
        for w in group.words:
            handle(session, w)
        handle(session, "submit")
    assert session.won
    assert "Congratulations" in render(snapshot(session))


def test_non_ascii_digits_are_unknown_tiles():
    session = make_session()
    assert find_tile(session, "²") is None
    assert handle(session, "²") == "Unknown tile: ²"
    assert session.selection == []
