"""
Input Controller

Validates a single key event and applies it to a game session.

apply_key is a pure transition: it returns a new GameSession (or the same
one when the key is a no-op) and never mutates its argument. Invalid or
redundant input is ignored silently.
"""

from dataclasses import replace
from typing import Callable, Iterable, Optional, Tuple

from ..config.game_settings import ALPHABET, CLEAR_KEY, SUBMIT_KEY
from ..models.game import Cell, GameSession, RowCommitted
from .evaluator import score
from .status import derive_status

CommitListener = Callable[[RowCommitted], None]


def normalize_key(key) -> Optional[str]:
    """
    Map raw keyboard input to CLEAR_KEY, SUBMIT_KEY or a single uppercase letter.

    Returns:
        The normalized key, or None if the key is not recognised
    """
    if not isinstance(key, str):
        return None

    normalized = key.upper()
    if normalized in (CLEAR_KEY, SUBMIT_KEY):
        return normalized
    if len(normalized) == 1 and normalized in ALPHABET:
        return normalized
    return None


def apply_key(session: GameSession,
              key,
              listeners: Iterable[CommitListener] = (),
              count_duplicates: bool = False) -> GameSession:
    """
    Apply one key event to a session.

    Args:
        session: Current session value
        key: A letter, CLEAR_KEY or SUBMIT_KEY
        listeners: Called with a RowCommitted event after a commit and its
            status check have both applied
        count_duplicates: Scoring mode passed to the evaluator

    Returns:
        GameSession: The resulting session
    """
    if session.is_over:
        return session

    normalized = normalize_key(key)
    if normalized is None:
        return session

    if normalized == CLEAR_KEY:
        return _clear(session)

    if normalized == SUBMIT_KEY:
        new_session, event = _submit(session, count_duplicates)
        if event is not None:
            for listener in listeners:
                listener(event)
        return new_session

    return _write(session, normalized)


def _write(session: GameSession, letter: str) -> GameSession:
    grid = session.grid
    if grid.is_exhausted or grid.current_cell >= grid.word_length:
        return session

    new_grid = grid.replace_cell(
        grid.current_row, grid.current_cell, Cell(letter=letter),
        current_cell=grid.current_cell + 1
    )
    return replace(session, grid=new_grid)


def _clear(session: GameSession) -> GameSession:
    grid = session.grid
    if grid.is_exhausted or grid.current_cell == 0:
        return session

    previous_cell = grid.current_cell - 1
    new_grid = grid.replace_cell(
        grid.current_row, previous_cell, Cell(),
        current_cell=previous_cell
    )
    return replace(session, grid=new_grid)


def _submit(session: GameSession, count_duplicates: bool) -> Tuple[GameSession, Optional[RowCommitted]]:
    grid = session.grid
    if grid.is_exhausted or grid.current_cell < grid.word_length:
        return session, None

    row_index = grid.current_row
    guess = grid.row_letters(row_index)
    statuses = tuple(score(guess, session.target_word, count_duplicates))

    scored_row = tuple(Cell(letter=letter, status=status) for letter, status in zip(guess, statuses))
    committed = replace(
        session,
        grid=grid.replace_row(row_index, scored_row, current_row=row_index + 1, current_cell=0)
    )

    # Post-commit hook: runs on the fully committed grid
    final = replace(committed, status=derive_status(committed, row_index))

    return final, RowCommitted(
        row_index=row_index, guess=guess, statuses=statuses, status=final.status
    )
