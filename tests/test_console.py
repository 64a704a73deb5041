import io

from ttt_match.console import ConsoleGame
from ttt_match.game_state import Lifecycle
from ttt_match.win_checker import O, X


def run_script(*lines):
    out = io.StringIO()
    game = ConsoleGame(stdin=io.StringIO("\n".join(lines) + "\n"), stdout=out)
    assert game.run() == 0
    return game, out.getvalue()


def test_full_round_win_and_scores():
    game, out = run_script("0", "4", "1", "7", "2")
    assert game.game_state.lifecycle is Lifecycle.ROUND_ENDED
    assert game.game_state.scores == {X: 1, O: 0}
    assert "Player X Wins!" in out
    assert "Player X: 1   Player O: 0" in out


def test_row_col_input():
    game, _ = run_script("1,1", "0,2")
    assert game.game_state.board[4] == X
    assert game.game_state.board[2] == O


def test_bad_input_reports_and_keeps_going():
    game, out = run_script("hello", "9,9", "1,2,3", "4")
    assert "!! Invalid input." in out
    # only the last command placed a mark
    assert game.game_state.board[4] == X
    assert sum(1 for c in game.game_state.board if c) == 1


def test_occupied_cell_is_silent():
    game, out = run_script("0", "0")
    assert game.game_state.turn == O
    assert "!!" not in out


def test_continue_end_and_new_match():
    game, out = run_script("0", "4", "1", "7", "2", "e", "n", "q", "5")
    gs = game.game_state
    assert "--- Final Results ---" in out
    assert "Player X Wins the Game!" in out
    assert gs.lifecycle is Lifecycle.PLAYING
    assert gs.scores == {X: 0, O: 0}
    # input after quit is never read
    assert gs.board == (None,) * 9


def test_history_and_jump():
    game, out = run_script("0", "4", "8", "h", "j 1", "j 7")
    assert "Go to move #3" in out
    assert game.game_state.current_move == 1
    assert "!! No move #7 in history." in out
