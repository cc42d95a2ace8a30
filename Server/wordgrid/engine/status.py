"""
Game Status

Derives the game status from a freshly committed row.
"""

from ..models.game import GameSession, GameStatus
from .evaluator import is_solved


def derive_status(session: GameSession, row_index: int) -> GameStatus:
    """
    Re-derive the status after the commit of row_index has fully applied.

    Must only be called with a grid whose committed row is already scored
    and whose cursor has already advanced past it.
    """
    if session.is_over:
        return session.status

    grid = session.grid
    statuses = [cell.status for cell in grid.rows[row_index]]

    if is_solved(statuses):
        return GameStatus.WON
    if grid.current_row == grid.max_attempts:
        return GameStatus.LOST
    return GameStatus.PLAYING
