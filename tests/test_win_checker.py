from typing import List, Optional

import pytest
from hypothesis import given, strategies as st

from ttt_match.win_checker import (
    O, X, OutcomeKind, RoundOutcome, check_winner, winning_line
)

LINES = ([0, 1, 2], [3, 4, 5], [6, 7, 8],
         [0, 3, 6], [1, 4, 7], [2, 5, 8],
         [0, 4, 8], [2, 4, 6])


def board(text: str) -> List[Optional[str]]:
    # '.' is an empty cell
    return [None if ch == '.' else ch for ch in text]


def test_empty_board_in_progress():
    assert check_winner(board(".........")) == RoundOutcome.in_progress()


@pytest.mark.parametrize("line", LINES)
@pytest.mark.parametrize("player", [X, O])
def test_every_line_wins(line, player):
    cells = [None] * 9
    for i in line:
        cells[i] = player
    res = check_winner(cells)
    assert res.kind is OutcomeKind.WIN
    assert res.winner == player
    assert winning_line(cells) == tuple(line)


def test_full_board_without_line_is_draw():
    # X O X / X O O / O X X
    res = check_winner(board("XOXXOOOXX"))
    assert res == RoundOutcome.draw()
    assert res.is_over
    assert winning_line(board("XOXXOOOXX")) is None


def test_full_board_with_line_is_win_not_draw():
    res = check_winner(board("XXXOOXXOO"))
    assert res == RoundOutcome.win(X)


def test_mixed_line_does_not_win():
    assert check_winner(board("XXO......")).kind is OutcomeKind.IN_PROGRESS


def test_horizontal_checked_before_vertical():
    # row 0 and column 0 both complete for X
    cells = board("XXXXOOXOO")
    assert winning_line(cells) == (0, 1, 2)


def test_scan_order_is_row_major():
    assert check_winner(board("..OXXX..O")).winner == X
    # O column 0 starts before X column 2
    cells = board("O.XO.XO.X")
    assert winning_line(cells) == (0, 3, 6)
    assert check_winner(cells).winner == O


def test_anti_diagonal():
    assert winning_line(board("..X.X.X..")) == (2, 4, 6)


def test_larger_board_win_length_three():
    # 4x4, diagonal down-left starting at (0, 3)
    cells = [None] * 16
    for i in (3, 6, 9):
        cells[i] = O
    assert check_winner(cells, size=4, win_length=3) == RoundOutcome.win(O)
    assert winning_line(cells, size=4, win_length=3) == (3, 6, 9)


def test_larger_board_win_length_four_needs_full_row():
    cells = [None] * 16
    for i in (4, 5, 6):
        cells[i] = X
    assert check_winner(cells, size=4, win_length=4).kind is OutcomeKind.IN_PROGRESS
    cells[7] = X
    assert check_winner(cells, size=4, win_length=4) == RoundOutcome.win(X)


def test_input_not_mutated():
    cells = board("XXX.OO...")
    before = list(cells)
    check_winner(cells)
    assert cells == before


@given(st.permutations(list(range(9))), st.integers(min_value=0, max_value=4))
def test_fewer_than_five_marks_in_progress(order, n):
    cells = [None] * 9
    for ply, idx in enumerate(order[:n]):
        cells[idx] = X if ply % 2 == 0 else O
    assert check_winner(cells).kind is OutcomeKind.IN_PROGRESS


@given(st.lists(st.sampled_from([None, X, O]), min_size=9, max_size=9))
def test_outcome_matches_line_table(cells):
    res = check_winner(cells)
    has_line = any(cells[a] is not None and cells[a] == cells[b] == cells[c]
                   for a, b, c in LINES)
    if has_line:
        assert res.kind is OutcomeKind.WIN
        line = winning_line(cells)
        assert all(cells[i] == res.winner for i in line)
    elif None not in cells:
        assert res.kind is OutcomeKind.DRAW
    else:
        assert res.kind is OutcomeKind.IN_PROGRESS
