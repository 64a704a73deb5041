from dataclasses import dataclass

# -----------------------------------------------------------------------------
# GAME CONSTANTS
# -----------------------------------------------------------------------------

BOARD_SIZE = 3                     # fixed 3x3 grid
WIN_LENGTH = 3                     # marks in a line needed to win

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
HIGHLIGHT_COLOR = "#4a4a2a"        # fill behind the winning line
PAST_MOVE_COLOR = "#2a2a2a"        # fill when viewing an older move


@dataclass(frozen=True)
class Settings:
    """
    runtime options picked on the command line
    """
    console: bool = False
    auto_continue_ms: int = 0      # 0 = ask after a draw
    verbose: bool = False

    @property
    def auto_continue_draws(self):
        return self.auto_continue_ms > 0

    @classmethod
    def from_args(cls, ns):
        """
        build settings from an argparse namespace
        """
        return cls(
            console=getattr(ns, "console", False),
            auto_continue_ms=max(0, getattr(ns, "auto_continue_ms", 0) or 0),
            verbose=getattr(ns, "verbose", False),
        )
