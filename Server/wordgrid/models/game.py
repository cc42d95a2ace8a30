"""
Game Data Models

Contains the guess-grid data structures and enums.

All values here are immutable. Every engine transition builds a new value
instead of mutating the old one, so any snapshot handed to a renderer stays
consistent.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-cell scoring outcome."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNDETERMINED = "UNDETERMINED"


class GameStatus(Enum):
    """Game lifecycle. WON and LOST are terminal."""
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class Cell:
    """One letter slot. status stays None until the row is committed."""
    letter: str = ""
    status: Optional[LetterStatus] = None

    @property
    def is_empty(self) -> bool:
        return self.letter == ""


@dataclass(frozen=True)
class Grid:
    """
    Attempt matrix plus cursor.

    Rows below current_row are committed and scored, the row at current_row
    is the active row, and every row after it is empty.
    """
    rows: Tuple[Tuple[Cell, ...], ...]
    current_row: int = 0
    current_cell: int = 0

    @classmethod
    def empty(cls, max_attempts: int, word_length: int) -> "Grid":
        row = tuple(Cell() for _ in range(word_length))
        return cls(rows=tuple(row for _ in range(max_attempts)))

    @property
    def max_attempts(self) -> int:
        return len(self.rows)

    @property
    def word_length(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def is_exhausted(self) -> bool:
        return self.current_row >= self.max_attempts

    def is_committed(self, row_index: int) -> bool:
        return row_index < self.current_row

    def row_letters(self, row_index: int) -> str:
        return "".join(cell.letter for cell in self.rows[row_index])

    def replace_row(self, row_index: int, row: Tuple[Cell, ...], **cursor) -> "Grid":
        """Return a copy with one row swapped out and the cursor optionally moved."""
        rows = self.rows[:row_index] + (row,) + self.rows[row_index + 1:]
        return replace(self, rows=rows, **cursor)

    def replace_cell(self, row_index: int, cell_index: int, cell: Cell, **cursor) -> "Grid":
        row = self.rows[row_index]
        new_row = row[:cell_index] + (cell,) + row[cell_index + 1:]
        return self.replace_row(row_index, new_row, **cursor)


@dataclass(frozen=True)
class GameSession:
    """A single game: the hidden word, its grid and its status."""
    target_word: str
    grid: Grid
    status: GameStatus = GameStatus.PLAYING

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.PLAYING


@dataclass(frozen=True)
class RowCommitted:
    """Event emitted after a row commit and its status check have fully applied."""
    row_index: int
    guess: str
    statuses: Tuple[LetterStatus, ...]
    status: GameStatus


@dataclass(frozen=True)
class Alert:
    """Notification handed to an external alert presenter."""
    title: str
    message: str = ""
    actions: Tuple[str, ...] = ()


@dataclass
class GameSnapshot:
    """Read model for renderers (JSON serialisable via asdict)."""
    game_id: str
    rows: List[List[Dict[str, str]]]
    current_row: int
    current_cell: int
    status: str
    max_attempts: int
    word_length: int
    letter_status: Dict[str, str] = field(default_factory=dict)
    answer: Optional[str] = None  # Only included when game is over
