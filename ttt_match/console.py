"""
Text front end: prints the board and reads commands from a stream.

Commands:
    0-8 or row,col  place a mark
    j N             jump to move N
    h               list history
    r               restart the round
    c               continue after a round
    e               end the match
    n               new match
    q               quit
"""

import logging
import sys

from .game_state import GameState, Lifecycle
from .win_checker import O, X

log = logging.getLogger(__name__)

HELP = "commands: 0-8 | row,col | j N | h | r | c | e | n | q"


class ConsoleGame:
    """
    drive a GameState from line-based input
    """
    def __init__(self, game_state=None, stdin=None, stdout=None):
        self.game_state = game_state or GameState()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _print(self, text=""):
        print(text, file=self.stdout)

    def print_board(self):
        """Prints the board shown at the current move, with indices in empty cells."""
        gs = self.game_state
        size = gs.size
        board = gs.board
        self._print("\n-------------")
        for r in range(size):
            row = board[r * size:(r + 1) * size]
            cells = [cell if cell else str(r * size + c) for c, cell in enumerate(row)]
            self._print(f"{r}  {' | '.join(cells)}")
            if r < size - 1:
                self._print("  " + "-" * (4 * size - 1))
        self._print("   " + "   ".join(str(c) for c in range(size)))  # column indices
        self._print("-------------")
        self._print(f"Player X: {gs.scores[X]}   Player O: {gs.scores[O]}")
        self._print(gs.status_text())

    def print_history(self):
        gs = self.game_state
        for n in range(len(gs.history)):
            marker = "*" if n == gs.current_move else " "
            self._print(f"{marker} {n}: {gs.move_label(n)}")

    def _parse_cell(self, text):
        # single index or row,col pair
        size = self.game_state.size
        if ',' in text:
            row_col = text.split(',')
            if len(row_col) != 2:
                raise ValueError(text)
            row, col = int(row_col[0]), int(row_col[1])
            if not (0 <= row < size and 0 <= col < size):
                return -1
            return row * size + col
        return int(text)

    def _announce_round(self):
        gs = self.game_state
        self._print("\n--- Round Over ---")
        if gs.outcome.winner:
            self._print(f"Player {gs.outcome.winner} Wins!")
        else:
            self._print("It's a Draw!")
        self._print("(c)ontinue or (e)nd the match?")

    def _announce_match(self):
        gs = self.game_state
        self._print("\n--- Final Results ---")
        self._print(f"Player X: {gs.scores[X]} wins")
        self._print(f"Player O: {gs.scores[O]} wins")
        self._print(gs.final_text())
        self._print("(n)ew match or (q)uit?")

    def handle(self, line):
        """
        run one command; returns False when the player quits
        """
        gs = self.game_state
        cmd = line.strip().lower()
        if not cmd:
            return True
        if cmd in ("q", "quit"):
            return False
        if cmd in ("?", "help"):
            self._print(HELP)
        elif cmd == "h":
            self.print_history()
        elif cmd.startswith("j"):
            try:
                n = int(cmd[1:].strip())
            except ValueError:
                self._print("!! Use j N, e.g. j 2.")
                return True
            if gs.jump_to_move(n):
                self.print_board()
            else:
                self._print(f"!! No move #{n} in history.")
        elif cmd == "r":
            if gs.restart_round():
                self.print_board()
        elif cmd == "c":
            if gs.continue_after_round():
                self.print_board()
        elif cmd == "e":
            if gs.end_match():
                self._announce_match()
        elif cmd == "n":
            if gs.new_match():
                self.print_board()
        else:
            try:
                index = self._parse_cell(cmd)
            except ValueError:
                self._print("!! Invalid input. " + HELP)
                return True
            res = gs.apply_move(index)
            if res == "invalid":
                # occupied, off board, or round over: nothing happens
                return True
            self.print_board()
            if gs.lifecycle is Lifecycle.ROUND_ENDED:
                self._announce_round()
        return True

    def run(self):
        """
        read commands until quit or end of input
        """
        self._print("--- Tic-Tac-Toe Match ---")
        self._print(HELP)
        self.print_board()
        for line in self.stdin:
            if not self.handle(line):
                break
        log.debug("console session finished with scores %s", self.game_state.scores)
        return 0
