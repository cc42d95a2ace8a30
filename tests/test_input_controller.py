import random

import pytest

from wordgrid.engine import apply_key, normalize_key
from wordgrid.models import Cell, GameStatus, LetterStatus

from conftest import guess, new_session, type_keys


def test_letter_is_written_at_cursor():
    session = apply_key(new_session(), "c")

    assert session.grid.rows[0][0] == Cell(letter="C")
    assert session.grid.current_cell == 1
    assert session.grid.current_row == 0


def test_apply_key_does_not_touch_the_original_session():
    original = new_session()
    apply_key(original, "C")

    assert original.grid.current_cell == 0
    assert original.grid.rows[0][0].is_empty


def test_full_row_ignores_extra_letters():
    session = type_keys(new_session(), "CRANE")
    assert apply_key(session, "S") is session


def test_clear_on_empty_row_is_a_noop():
    session = new_session()
    assert apply_key(session, "CLEAR") is session


def test_clear_erases_previous_cell():
    session = type_keys(new_session(), ["C", "R", "CLEAR"])

    assert session.grid.current_cell == 1
    assert session.grid.row_letters(0) == "C"
    assert session.grid.rows[0][1].is_empty


def test_submit_on_incomplete_row_is_a_noop():
    session = type_keys(new_session(), "CRAN")
    assert apply_key(session, "ENTER") is session


@pytest.mark.parametrize("key", ["1", "", " ", " a ", "a ", " ENTER", "AB", "SUBMIT", "é", None, 5, ["A"]])
def test_unrecognised_keys_are_ignored(key):
    session = type_keys(new_session(), "CR")
    assert normalize_key(key) is None
    assert apply_key(session, key) is session


def test_submit_commits_and_scores_the_row():
    session = guess(new_session(), "TRACE")
    grid = session.grid

    assert grid.current_row == 1
    assert grid.current_cell == 0
    assert grid.is_committed(0)
    assert [cell.status for cell in grid.rows[0]] == [
        LetterStatus.ABSENT, LetterStatus.CORRECT, LetterStatus.CORRECT,
        LetterStatus.PRESENT, LetterStatus.CORRECT,
    ]
    assert all(cell.status is None for cell in grid.rows[1])
    assert session.status == GameStatus.PLAYING


def test_clear_never_reaches_into_a_committed_row():
    session = guess(new_session(), "TRACE")
    assert apply_key(session, "CLEAR") is session
    assert session.grid.row_letters(0) == "TRACE"


def test_correct_guess_wins_immediately():
    session = guess(new_session(), "CRANE")

    assert session.status == GameStatus.WON
    assert session.grid.current_row == 1


def test_six_wrong_guesses_lose():
    session = new_session()
    for word in ["TRACE", "BUILT", "SMILE", "WATER", "PLANT", "ALARM"]:
        assert session.status == GameStatus.PLAYING
        session = guess(session, word)

    assert session.grid.current_row == 6
    assert session.status == GameStatus.LOST


@pytest.mark.parametrize("key", ["A", "CLEAR", "ENTER"])
def test_terminal_game_ignores_input(key):
    won = guess(new_session(), "CRANE")
    assert apply_key(won, key) is won


def test_listener_sees_the_fully_applied_commit():
    events = []
    guess(new_session(), "CRANE", listeners=(events.append,))

    assert len(events) == 1
    event = events[0]
    assert event.row_index == 0
    assert event.guess == "CRANE"
    assert event.statuses == (LetterStatus.CORRECT,) * 5
    assert event.status == GameStatus.WON


def test_listener_not_called_without_commit():
    events = []
    type_keys(new_session(), ["C", "ENTER", "CLEAR"], listeners=(events.append,))
    assert events == []


def test_bounds_hold_for_random_input():
    rng = random.Random(1234)
    keys = list("CRANETSLOP") + ["CLEAR", "ENTER", "?"]

    for _ in range(50):
        session = new_session()
        for _ in range(120):
            session = apply_key(session, rng.choice(keys))
            grid = session.grid
            assert 0 <= grid.current_cell <= grid.word_length
            assert 0 <= grid.current_row <= grid.max_attempts
            for row_index in range(grid.current_row + 1, grid.max_attempts):
                assert all(cell.is_empty for cell in grid.rows[row_index])


def test_word_length_follows_target():
    session = guess(new_session(target="CAT"), "CAT")
    assert session.grid.word_length == 3
    assert session.status == GameStatus.WON
