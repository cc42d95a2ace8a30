"""
Game Service

Owns the game sessions and drives the guess-grid engine for them.
"""

import threading
import uuid
from typing import Callable, Dict, List, Mapping, Optional

from flask import current_app

from ..config.game_settings import ALPHABET, MAX_ATTEMPTS
from ..engine import apply_key, encode, WordSource
from ..models.game import (
    Alert, GameSession, GameSnapshot, GameStatus, Grid, LetterStatus, RowCommitted
)
from ..utils.game_logger import game_logger

Notifier = Callable[[Alert], None]
Clipboard = Callable[[str], None]

WON_ALERT = Alert("Hurray", "\U0001F389 You won!", ("Share",))
LOST_ALERT = Alert("Game Over", "\U0001F622 Try again?")
COPIED_ALERT = Alert("Copied to clipboard")

# Keyboard colouring precedence: a letter keeps the best status it has earned
_STATUS_RANK = {
    LetterStatus.UNDETERMINED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class GameService:
    """
    Core game service managing game sessions.

    This class handles:
    - Session creation and restart with a freshly drawn target word
    - Routing key events through the engine, one at a time
    - Read-only snapshots for renderers, without exposing the answer early
    - Share text delivery through injected clipboard/notifier ports
    """

    def __init__(self,
                 word_source: WordSource,
                 max_attempts: int = MAX_ATTEMPTS,
                 count_duplicates: bool = False,
                 glyphs: Optional[Mapping[LetterStatus, str]] = None):
        self.word_source = word_source
        self.max_attempts = max_attempts
        self.count_duplicates = count_duplicates
        self.glyphs = glyphs
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id
        self._lock = threading.Lock()

    def _new_session(self) -> GameSession:
        target_word = self.word_source.draw()
        return GameSession(
            target_word=target_word,
            grid=Grid.empty(self.max_attempts, len(target_word))
        )

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly drawn word.

        Returns:
            str: Unique game ID for this session

        Raises:
            WordListError: If the word source is empty
        """
        game_id = str(uuid.uuid4())
        session = self._new_session()

        with self._lock:
            self.games[game_id] = session

        game_logger.log_game_event(game_id, 'game_created', 'system', word_length=len(session.target_word))
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Returns the current snapshot for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameSnapshot object or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return build_snapshot(game_id, session)

    def apply_key(self, game_id: str, key, notify: Optional[Notifier] = None) -> Optional[GameSnapshot]:
        """
        Applies one key event to a game.

        Invalid keys and redundant input leave the game unchanged; only an
        unknown game_id yields None.

        Args:
            game_id: Unique game identifier
            key: A letter, "CLEAR" or "ENTER"
            notify: Receives the win/loss alert when the game ends

        Returns:
            Updated GameSnapshot or None if game not found
        """
        def on_commit(event: RowCommitted):
            game_logger.log_game_event(
                game_id, 'row_committed', 'system',
                row=event.row_index, guess=event.guess,
                statuses=[status.value for status in event.statuses]
            )

        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None

            new_session = apply_key(session, key, listeners=(on_commit,),
                                    count_duplicates=self.count_duplicates)
            self.games[game_id] = new_session

        if new_session.is_over and not session.is_over:
            self._announce_result(game_id, new_session, notify)

        return build_snapshot(game_id, new_session)

    def _announce_result(self, game_id: str, session: GameSession, notify: Optional[Notifier]):
        won = session.status == GameStatus.WON
        game_logger.log_game_event(
            game_id, 'game_won' if won else 'game_lost', 'system',
            rounds_used=session.grid.current_row, target_word=session.target_word
        )
        if notify:
            notify(WON_ALERT if won else LOST_ALERT)

    def restart_game(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Discards the current session and starts over with a new target word.

        Returns:
            Fresh GameSnapshot or None if game not found
        """
        with self._lock:
            if game_id not in self.games:
                return None
            session = self._new_session()
            self.games[game_id] = session

        game_logger.log_game_event(game_id, 'game_restarted', 'system', word_length=len(session.target_word))
        return build_snapshot(game_id, session)

    def share_score(self,
                    game_id: str,
                    clipboard: Optional[Clipboard] = None,
                    notify: Optional[Notifier] = None) -> Optional[str]:
        """
        Encodes the grid as share text and hands it to the given ports.

        Args:
            game_id: Unique game identifier
            clipboard: Receives the share text
            notify: Receives the "Copied to clipboard" alert

        Returns:
            str: The share text or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        text = encode(session.grid, session.target_word, self.glyphs)
        if clipboard:
            clipboard(text)
            if notify:
                notify(COPIED_ALERT)
        return text

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
        return False


def letter_status(grid: Grid) -> Dict[str, str]:
    """Best status earned by each letter across the committed rows."""
    best = {letter: LetterStatus.UNDETERMINED for letter in ALPHABET}
    for row_index in range(grid.current_row):
        for cell in grid.rows[row_index]:
            if cell.status and _STATUS_RANK[cell.status] > _STATUS_RANK[best[cell.letter]]:
                best[cell.letter] = cell.status
    return {letter: status.value for letter, status in best.items()}


def build_snapshot(game_id: str, session: GameSession) -> GameSnapshot:
    grid = session.grid
    rows: List[List[Dict[str, str]]] = [
        [
            {
                'letter': cell.letter,
                'status': (cell.status or LetterStatus.UNDETERMINED).value
            }
            for cell in row
        ]
        for row in grid.rows
    ]

    return GameSnapshot(
        game_id=game_id,
        rows=rows,
        current_row=grid.current_row,
        current_cell=grid.current_cell,
        status=session.status.value,
        max_attempts=grid.max_attempts,
        word_length=grid.word_length,
        letter_status=letter_status(grid),
        answer=session.target_word if session.is_over else None
    )


def get_game_service() -> Optional[GameService]:
    """Get the game service owned by the current Flask application."""
    return current_app.extensions.get('wordgrid_game_service')
