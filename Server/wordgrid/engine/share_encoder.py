"""
Share Encoder

Renders a grid into the compact emoji summary players paste elsewhere.
"""

from typing import Mapping, Optional

from ..config.game_settings import SHARE_GLYPHS
from ..models.game import Grid, LetterStatus


def encode(grid: Grid,
           target: str,
           glyphs: Optional[Mapping[LetterStatus, str]] = None) -> str:
    """
    One line of glyphs per attempted row, joined with newlines.

    Each glyph comes from the status stored in the cell when its row was
    committed, so the text always matches the grid. Rows with no letters are
    omitted. Cells of a row that is not committed yet have no status and
    therefore no glyph, so a half-typed active row does not appear either.

    Args:
        grid: The grid to summarise
        target: The hidden word; its length must match the grid's rows
        glyphs: Status to glyph mapping (defaults to SHARE_GLYPHS)
    """
    glyphs = glyphs or SHARE_GLYPHS
    if grid.rows and len(target) != grid.word_length:
        raise ValueError(f"Target length {len(target)} does not match row length {grid.word_length}")

    lines = []
    for row_index, row in enumerate(grid.rows):
        if all(cell.is_empty for cell in row) or not grid.is_committed(row_index):
            continue
        lines.append("".join(glyphs[cell.status] for cell in row))

    return "\n".join(lines)
