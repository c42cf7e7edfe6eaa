"""
Text rendering of board snapshots for the console.
"""
from typing import List, Optional

from .board import BoardSnapshot, GameState
from .cell import FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE


def _cell_glyph(value: int, is_mine: bool, reveal_mines: bool) -> str:
    """Map one snapshot cell to its display character."""
    if (reveal_mines and is_mine) or value == MINE_VALUE:
        return "X"
    if value == FLAGGED_VALUE:
        return "*"
    if value == HIDDEN_VALUE:
        return "."
    if value == 0:
        return "/"
    return str(value)


def render(snapshot: BoardSnapshot, reveal_mines: Optional[bool] = None) -> str:
    """
    Render a snapshot as a fixed-width grid.

    Args:
        snapshot: Board snapshot to draw.
        reveal_mines: Show every mine as X. Defaults to True only once
            the game is lost. The mine that was stepped on is drawn as X
            either way.

    Returns:
        Multi-line string with column header, one line per row and a
        closing rule.
    """
    if reveal_mines is None:
        reveal_mines = snapshot.game_state == GameState.LOST

    label_width = len(str(snapshot.rows))
    header = "".join(str((col + 1) % 10) for col in range(snapshot.cols))
    rule = "—" * label_width + "│" + "—" * snapshot.cols + "│"

    lines: List[str] = [" " * label_width + "│" + header + "│", rule]
    for row in range(snapshot.rows):
        cells = "".join(
            _cell_glyph(
                int(snapshot.observation[row, col]),
                bool(snapshot.mines[row, col]),
                reveal_mines,
            )
            for col in range(snapshot.cols)
        )
        lines.append(f"{row + 1:>{label_width}}│{cells}│")
    lines.append(rule)
    return "\n".join(lines)
