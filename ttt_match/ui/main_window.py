import logging

from ..config import Settings, X_COLOR, O_COLOR
from ..game_state import GameState, Lifecycle
from ..ui.board_widget import BoardWidget
from ..win_checker import X, O

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QGroupBox,
    QListWidget, QListWidgetItem, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

log = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and match flow
    """
    def __init__(self, settings=None, game_state=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.settings = settings or Settings()
        self.game_state = game_state or GameState()
        self.board_widget = BoardWidget(self.game_state, parent=self)
        # draw auto-continue, stopped by a manual restart
        self._continue_timer = QTimer(self)
        self._continue_timer.setSingleShot(True)
        self._continue_timer.timeout.connect(self._auto_continue)

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QGroupBox { color: #eee; font-weight: bold; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_score_controls()      # scores + restart
        self.main_layout.addWidget(self.score_widget)

        play_area = QHBoxLayout()
        play_area.addWidget(self.board_widget, 3)
        self.history_list = QListWidget()
        self.history_list.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Expanding)
        self.history_list.itemClicked.connect(self._on_history_clicked)
        play_area.addWidget(self.history_list, 1)
        self.main_layout.addLayout(play_area, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.main_layout.addWidget(self.status_label)

        self._create_result_controls()     # round summary
        self._create_final_controls()      # match summary
        self.main_layout.addWidget(self.result_group)
        self.main_layout.addWidget(self.final_group)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        restart_action = QAction("Restart Round", self)
        restart_action.triggered.connect(self.restart_round)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(restart_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_score_controls(self):
        # player scores + restart button
        self.score_widget = QWidget()
        hl = QHBoxLayout(self.score_widget)
        self.x_score_label = QLabel("")
        self.x_score_label.setStyleSheet(f"color: {X_COLOR}; font-weight: bold;")
        self.o_score_label = QLabel("")
        self.o_score_label.setStyleSheet(f"color: {O_COLOR}; font-weight: bold;")
        self.restart_button = QPushButton("Restart Game")
        self.restart_button.clicked.connect(self.restart_round)
        for w in (self.x_score_label, self.o_score_label, None, self.restart_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _create_result_controls(self):
        '''round over group: continue or end match'''
        self.result_group = QGroupBox("Game Result")
        layout = QVBoxLayout()
        self.result_label = QLabel("")
        self.result_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.result_label)
        buttons = QHBoxLayout()
        self.continue_button = QPushButton("Continue")
        self.continue_button.clicked.connect(self.continue_round)
        self.end_button = QPushButton("End Game")
        self.end_button.clicked.connect(self.end_match)
        buttons.addWidget(self.continue_button); buttons.addWidget(self.end_button)
        layout.addLayout(buttons)
        self.result_group.setLayout(layout)

    def _create_final_controls(self):
        '''match over group: final scores + new match'''
        self.final_group = QGroupBox("Final Results")
        layout = QVBoxLayout()
        self.final_x_label = QLabel("")
        self.final_o_label = QLabel("")
        self.final_winner_label = QLabel("")
        f = QFont(); f.setPointSize(14); f.setBold(True)
        self.final_winner_label.setFont(f)
        for w in (self.final_x_label, self.final_o_label, self.final_winner_label):
            w.setAlignment(Qt.AlignCenter)
            layout.addWidget(w)
        self.new_match_button = QPushButton("New Game")
        self.new_match_button.clicked.connect(self.new_match)
        layout.addWidget(self.new_match_button, alignment=Qt.AlignCenter)
        self.final_group.setLayout(layout)

    def _refresh(self):
        # sync every widget with game state
        gs = self.game_state
        scores = gs.scores
        self.x_score_label.setText(f"Player X: {scores[X]}")
        self.o_score_label.setText(f"Player O: {scores[O]}")
        self.status_label.setText(gs.status_text())

        # labels depend only on position, rebuild when the length changes
        if self.history_list.count() != len(gs.history):
            self.history_list.clear()
            for n in range(len(gs.history)):
                item = QListWidgetItem(gs.move_label(n))
                item.setData(Qt.UserRole, n)
                self.history_list.addItem(item)
        self.history_list.setCurrentRow(gs.current_move)

        round_over = gs.lifecycle is Lifecycle.ROUND_ENDED and not self._continue_timer.isActive()
        match_over = gs.lifecycle is Lifecycle.MATCH_ENDED
        if round_over:
            winner = gs.outcome.winner
            self.result_label.setText(f"Player {winner} Wins!" if winner else "It's a Draw!")
            color = X_COLOR if winner == X else O_COLOR if winner == O else "#eee"
            self.result_label.setStyleSheet(f"color: {color}; font-weight: bold;")
        if match_over:
            self.final_x_label.setText(f"Player X: {scores[X]} wins")
            self.final_o_label.setText(f"Player O: {scores[O]} wins")
            self.final_winner_label.setText(gs.final_text())
        self.result_group.setVisible(round_over)
        self.final_group.setVisible(match_over)
        self.restart_button.setEnabled(not match_over)
        self.board_widget.set_accept_clicks(gs.lifecycle is Lifecycle.PLAYING)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, idx):
        res = self.game_state.apply_move(idx)
        if res == "invalid":
            return  # occupied cell or round over
        if res == "draw" and self.settings.auto_continue_draws:
            log.debug("draw, continuing in %d ms", self.settings.auto_continue_ms)
            self._continue_timer.start(self.settings.auto_continue_ms)
        self._refresh()

    @Slot(QListWidgetItem)
    def _on_history_clicked(self, item):
        if self.game_state.jump_to_move(item.data(Qt.UserRole)):
            self._refresh()

    @Slot()
    def _auto_continue(self):
        self.continue_round()

    @Slot()
    def restart_round(self):
        self._continue_timer.stop()
        if self.game_state.restart_round():
            self._refresh()

    @Slot()
    def continue_round(self):
        if self.game_state.continue_after_round():
            self._refresh()

    @Slot()
    def end_match(self):
        if self.game_state.end_match():
            self._refresh()

    @Slot()
    def new_match(self):
        if self.game_state.new_match():
            self._refresh()
