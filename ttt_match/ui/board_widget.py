from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (
    BOARD_BACKGROUND, GRID_COLOR, X_COLOR, O_COLOR,
    HIGHLIGHT_COLOR, PAST_MOVE_COLOR
)
from ..game_state import Lifecycle
from ..win_checker import X


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits flat cell index on click

    def __init__(self, game_state, parent=None):
        super().__init__(parent)
        self.game_state = game_state  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centred in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winning line
        """
        gs = self.game_state
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            size = gs.size
            cell_size = side / size
            # background, dimmed when looking at an older move
            latest = gs.current_move == len(gs.history) - 1
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND if latest else PAST_MOVE_COLOR))
            # winning cells
            line = gs.winning_line or ()
            for idx in line:
                r, c = divmod(idx, size)
                painter.fillRect(QRectF(offset_x + c*cell_size, offset_y + r*cell_size,
                                        cell_size, cell_size), QColor(HIGHLIGHT_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, size):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for idx, sym in enumerate(gs.board):
                if not sym: continue
                r, c = divmod(idx, size)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if sym == X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, -1 outside the grid
        """
        ox, oy, side = self._geometry()
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return -1
        size = self.game_state.size
        cell = side / size
        if cell <= 0: return -1
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, size-1)); col = max(0, min(col, size-1))
        return row*size + col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if event.button() != Qt.LeftButton:
            return
        if not self._accept_clicks or self.game_state.lifecycle is not Lifecycle.PLAYING:
            return
        idx = self.cell_at(event.position().x(), event.position().y())
        if idx >= 0:
            self.cell_clicked.emit(idx)  # notify main window
