"""
Win detection for tic-tac-toe style boards.

A board is a flat, row-major sequence of cells; each cell is EMPTY (None),
X or O. The scan starts a candidate line at every occupied cell and walks
WIN_LENGTH cells in each direction, so the same code works for boards larger
than 3x3 and for other line lengths.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .config import BOARD_SIZE, WIN_LENGTH

X = "X"
O = "O"
EMPTY = None
PLAYERS = (X, O)

# (row step, col step) in tie-break order
DIRECTIONS = (
    (0, 1),    # horizontal
    (1, 0),    # vertical
    (1, 1),    # diagonal down-right
    (1, -1),   # diagonal down-left
)


class OutcomeKind(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class RoundOutcome:
    """
    result of checking a board: still going, won by a player, or drawn
    """
    kind: OutcomeKind
    winner: Optional[str] = None

    @classmethod
    def in_progress(cls):
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def win(cls, player):
        return cls(OutcomeKind.WIN, player)

    @classmethod
    def draw(cls):
        return cls(OutcomeKind.DRAW)

    @property
    def is_over(self):
        return self.kind is not OutcomeKind.IN_PROGRESS


def _line_fits(row, col, d_row, d_col, size, win_length):
    # last cell of the line must still be on the board
    end_row = row + d_row * (win_length - 1)
    end_col = col + d_col * (win_length - 1)
    return 0 <= end_row < size and 0 <= end_col < size


def winning_line(board: Sequence[Optional[str]],
                 size: int = BOARD_SIZE,
                 win_length: int = WIN_LENGTH) -> Optional[Tuple[int, ...]]:
    """
    indices of the first complete line, or None

    Cells are scanned row-major; at each occupied cell the directions are
    tried in DIRECTIONS order, and the first line whose cells all hold the
    same mark is returned.
    """
    for row in range(size):
        for col in range(size):
            start = board[row * size + col]
            if start is EMPTY:
                continue
            for d_row, d_col in DIRECTIONS:
                if not _line_fits(row, col, d_row, d_col, size, win_length):
                    continue
                cells = tuple((row + d_row * i) * size + (col + d_col * i)
                              for i in range(win_length))
                if all(board[i] == start for i in cells[1:]):
                    return cells
    return None


def check_winner(board: Sequence[Optional[str]],
                 size: int = BOARD_SIZE,
                 win_length: int = WIN_LENGTH) -> RoundOutcome:
    """
    classify a board snapshot as a win, a draw, or still in progress
    """
    line = winning_line(board, size, win_length)
    if line is not None:
        return RoundOutcome.win(board[line[0]])
    if EMPTY not in board:
        return RoundOutcome.draw()
    return RoundOutcome.in_progress()
