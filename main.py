import argparse
import logging
import sys

from ttt_match.config import Settings
from ttt_match.console import ConsoleGame

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app):
    """
    Apply the default dark theme palette.
    """
    from PySide6.QtCore import Qt
    from PySide6.QtGui import QPalette, QColor

    disabled = QColor(127, 127, 127)
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, QColor(53, 53, 53))
    palette.setColor(QPalette.WindowText, Qt.white)
    palette.setColor(QPalette.Base, QColor(35, 35, 35))
    palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    palette.setColor(QPalette.Text, Qt.white)
    palette.setColor(QPalette.Button, QColor(66, 66, 66))
    palette.setColor(QPalette.ButtonText, Qt.white)
    palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, disabled)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, disabled)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, disabled)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def build_parser():
    p = argparse.ArgumentParser(prog="ttt-match", description="Two-player tic-tac-toe match")
    p.add_argument("--console", action="store_true", help="Play in the terminal instead of a window")
    p.add_argument(
        "--auto-continue-ms",
        type=int,
        default=0,
        help="After a draw, start the next round after this many ms (default: 0 = ask)",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p


def run_gui(settings):
    from PySide6.QtWidgets import QApplication
    from ttt_match.ui.main_window import TicTacToeWindow

    app = QApplication.instance() or QApplication(sys.argv)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow(settings)
    window.show()
    return app.exec()


def main(argv=None):
    ns = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        from importlib.metadata import PackageNotFoundError, version as _ver

        try:
            print(_ver("ttt-match"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    settings = Settings.from_args(ns)
    if settings.console:
        return ConsoleGame().run()
    return run_gui(settings)


if __name__ == '__main__':
    sys.exit(main())
