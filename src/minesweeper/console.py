"""
Console input and the play loop.

Parses move lines typed by the player and drives a Board until the
game reaches a terminal state.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .board import Action, Board, GameState
from .errors import MalformedInputError, OutOfBoundsError
from .render import render

logger = logging.getLogger(__name__)


MOVE_PROMPT = "Set/unset mines marks or claim a cell as free:"
MINES_PROMPT = "How many mines do you want on the field?"

END_MESSAGES = {
    GameState.LOST: "You stepped on a mine and failed!",
    GameState.WON_MINES: "Congratulations! You found all the mines!",
    GameState.WON_CLEARED: "Congratulations! You explored all safe cells!",
}


@dataclass(frozen=True)
class Move:
    """
    A parsed player move.

    Attributes:
        x: 1-based column.
        y: 1-based row.
        action: Flag toggle or reveal.
    """

    x: int
    y: int
    action: Action


def parse_move(line: str) -> Move:
    """
    Parse a move line of the form "x y mine|free".

    Raises:
        MalformedInputError: Wrong token count, non-integer coordinate
            or unknown action.
    """
    tokens = line.split()
    if len(tokens) != 3:
        raise MalformedInputError(
            f"Expected 'x y mine|free', got {len(tokens)} token(s)"
        )
    x_token, y_token, action_token = tokens
    try:
        x, y = int(x_token), int(y_token)
    except ValueError:
        raise MalformedInputError(
            f"Coordinates must be integers, got {x_token!r} {y_token!r}"
        ) from None
    return Move(x, y, Action.parse(action_token))


class ConsoleInput:
    """
    Reads moves and the mine count from the console.

    The read and write callables default to input and print and are
    swapped out in tests.
    """

    def __init__(
        self,
        read: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.read = read if read is not None else input
        self.write = write if write is not None else print

    def read_move(self) -> Move:
        """Prompt until a well-formed move is entered."""
        while True:
            self.write(MOVE_PROMPT)
            line = self.read()
            try:
                return parse_move(line)
            except MalformedInputError as exc:
                logger.debug("Rejected move line %r: %s", line, exc)
                self.write(str(exc))

    def read_mine_count(self) -> int:
        """Prompt until an integer mine count is entered."""
        while True:
            self.write(MINES_PROMPT)
            line = self.read().strip()
            try:
                return int(line)
            except ValueError:
                self.write(f"Mine count must be an integer, got {line!r}")


def play(
    board: Board,
    source: ConsoleInput,
    write: Callable[[str], None] = print,
) -> GameState:
    """
    Run the game loop until the board reaches a terminal state.

    Args:
        board: Board to play on.
        source: Where moves come from.
        write: Sink for board drawings and messages.

    Returns:
        The terminal game state.
    """
    write(render(board.snapshot()))

    while board.is_playing:
        move = source.read_move()
        try:
            state = board.apply_move(move.x, move.y, move.action)
        except OutOfBoundsError as exc:
            write(str(exc))
            continue
        write(render(board.snapshot()))
        if state.is_terminal:
            write(END_MESSAGES[state])

    return board.game_state
