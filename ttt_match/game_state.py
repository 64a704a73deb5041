import logging
from enum import Enum

from .config import BOARD_SIZE, WIN_LENGTH
from .win_checker import (
    EMPTY, O, X, OutcomeKind, RoundOutcome, check_winner, winning_line
)

log = logging.getLogger(__name__)


class Lifecycle(Enum):
    PLAYING = "playing"
    ROUND_ENDED = "round_ended"
    MATCH_ENDED = "match_ended"


class GameState:
    """
    match state: board history, scores, and round/match lifecycle

    Only this class changes game data. Every operation either performs its
    transition or leaves the state untouched; none raises on bad input.
    """
    def __init__(self, size=BOARD_SIZE, win_length=WIN_LENGTH):
        """
        init empty board and zeroed scores
        """
        self.size = size
        self.win_length = win_length
        self._scores = {X: 0, O: 0}
        self._lifecycle = Lifecycle.PLAYING
        self.restart_round()

    # ------------------------------------------------------------------
    # read surface
    # ------------------------------------------------------------------

    @property
    def board(self):
        # board currently on screen (may be an older snapshot)
        return self._history[self._current_move]

    @property
    def history(self):
        return tuple(self._history)

    @property
    def current_move(self):
        return self._current_move

    @property
    def turn(self):
        # X moves on an even number of marks, O on odd
        marks = sum(1 for cell in self.board if cell is not EMPTY)
        return X if marks % 2 == 0 else O

    @property
    def scores(self):
        return dict(self._scores)

    @property
    def lifecycle(self):
        return self._lifecycle

    @property
    def outcome(self):
        return self._outcome

    @property
    def winning_line(self):
        return winning_line(self.board, self.size, self.win_length)

    @property
    def match_winner(self):
        """
        player with more round wins, None on a tie
        """
        x, o = self._scores[X], self._scores[O]
        if x == o:
            return None
        return X if x > o else O

    def status_text(self):
        """
        one-line status for the board currently shown
        """
        shown = check_winner(self.board, self.size, self.win_length)
        if shown.kind is OutcomeKind.WIN:
            return f"Winner: {shown.winner}"
        if shown.kind is OutcomeKind.DRAW:
            return "It's a draw!"
        return f"Next player: {self.turn}"

    def final_text(self):
        winner = self.match_winner
        if winner is None:
            return "It's a Tie!"
        return f"Player {winner} Wins the Game!"

    def move_label(self, n):
        if n == 0:
            return "Go to game start"
        return f"Go to move #{n}"

    # ------------------------------------------------------------------
    # transitions
    # ------------------------------------------------------------------

    def apply_move(self, index):
        """
        place the active player's mark at index
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        if self._lifecycle is not Lifecycle.PLAYING:
            log.debug("move %s ignored: round not in play", index)
            return "invalid"
        # bool is an int subclass, reject it explicitly
        if (not isinstance(index, int) or isinstance(index, bool)
                or not 0 <= index < self.size * self.size):
            log.debug("move %s ignored: out of range", index)
            return "invalid"
        board = self.board
        if board[index] is not EMPTY:
            log.debug("move %s ignored: cell taken by %s", index, board[index])
            return "invalid"

        player = self.turn
        cells = list(board)
        cells[index] = player
        # drop any future left over from jumping back
        del self._history[self._current_move + 1:]
        self._history.append(tuple(cells))
        self._current_move = len(self._history) - 1
        log.debug("move %d: %s at %d", self._current_move, player, index)

        result = check_winner(self._history[-1], self.size, self.win_length)
        if result.kind is OutcomeKind.WIN:
            self._scores[result.winner] += 1
            self._end_round(result)
            return "win"
        if result.kind is OutcomeKind.DRAW:
            self._end_round(result)
            return "draw"
        return "continue"

    def _end_round(self, result):
        self._outcome = result
        self._lifecycle = Lifecycle.ROUND_ENDED
        if result.winner:
            log.info("round won by %s, score X %d - O %d",
                     result.winner, self._scores[X], self._scores[O])
        else:
            log.info("round drawn, score X %d - O %d",
                     self._scores[X], self._scores[O])

    def jump_to_move(self, n):
        """
        view history[n]; history itself is left alone
        """
        if not isinstance(n, int) or isinstance(n, bool) or not 0 <= n < len(self._history):
            return False
        self._current_move = n
        log.debug("viewing move %d of %d", n, len(self._history) - 1)
        return True

    def restart_round(self):
        """
        clear board, X to move; scores kept
        """
        if self._lifecycle is Lifecycle.MATCH_ENDED:
            return False
        empty = tuple(EMPTY for _ in range(self.size * self.size))
        self._history = [empty]
        self._current_move = 0
        self._outcome = RoundOutcome.in_progress()
        self._lifecycle = Lifecycle.PLAYING
        log.debug("new round")
        return True

    def continue_after_round(self):
        if self._lifecycle is not Lifecycle.ROUND_ENDED:
            return False
        return self.restart_round()

    def end_match(self):
        """
        freeze scores for the final summary
        """
        if self._lifecycle is not Lifecycle.ROUND_ENDED:
            return False
        self._lifecycle = Lifecycle.MATCH_ENDED
        log.info("match over: %s (X %d - O %d)", self.final_text(),
                 self._scores[X], self._scores[O])
        return True

    def new_match(self):
        if self._lifecycle is not Lifecycle.MATCH_ENDED:
            return False
        self._scores = {X: 0, O: 0}
        self._lifecycle = Lifecycle.PLAYING
        log.info("new match")
        return self.restart_round()
