import logging

from ..game_logic import GameLogic, Location, NEXT_PLAYER
from ..runner import iter_statuses
from ..text_input import read_moves, MoveFormatError
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QFileDialog,
    QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    board window: replay a list of moves step by step,
    or play locally by clicking cells
    """
    def __init__(self, game_logic: GameLogic, moves=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = game_logic
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self.moves = list(moves or [])
        self.statuses = []               # status per processed move
        self.game_over = False
        self._replay = None

        self._setup_ui()
        self.reset_game()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(f"{self.game_logic.board_size}x{self.game_logic.board_size} "
                            f"Tic-Tac-Toe ({self.game_logic.num_players} players)")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        open_action = QAction("Open Moves File...", self)
        open_action.triggered.connect(self._open_moves_file)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, open_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + replay/reset buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.next_button = QPushButton("Next Move"); self.next_button.clicked.connect(self.step)
        self.play_all_button = QPushButton("Play All"); self.play_all_button.clicked.connect(self.play_all)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        for w in (self.message_label, None, self.next_button,
                  self.play_all_button, self.reset_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    @Slot(str)
    def _update_message(self, text, is_error=False, is_success=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:     style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _update_replay_buttons(self):
        has_moves = len(self.statuses) < len(self.moves)
        self.next_button.setEnabled(has_moves and not self.game_over)
        self.play_all_button.setEnabled(has_moves and not self.game_over)

    def _report(self, player, status):
        # show the outcome of one move
        self.statuses.append(status)
        self.board_widget.update()
        if status > NEXT_PLAYER:
            self.game_over = True
            self.board_widget.set_accept_clicks(False)
            if status == self.game_logic.cats_game:
                self._update_message("it's a draw!", is_success=True)
            else:
                self.board_widget.winner = status
                self._update_message(f"player {status} wins!", is_success=True)
        elif status < NEXT_PLAYER:
            self._update_message(f"invalid move by player {player}, "
                                 f"player {self.game_logic.whose_turn}'s turn", is_error=True)
        else:
            self._update_message(f"player {self.game_logic.whose_turn}'s turn")
        self._update_replay_buttons()

    @Slot()
    def step(self):
        """
        play the next move of the loaded list, False when none is left
        """
        if self.game_over or self._replay is None:
            return False
        try:
            (player, _, _), status = next(self._replay)
        except StopIteration:
            self._replay = None
            self._update_replay_buttons()
            return False
        self._report(player, status)
        return True

    @Slot()
    def play_all(self):
        while self.step():
            pass

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # clicks always play for the current turn holder
        if self.game_over:
            return
        player = self.game_logic.whose_turn
        result = self.game_logic.attempt_move(player, Location(r, c))
        self._report(player, self.game_logic.to_status(result, player))

    @Slot()
    def _open_moves_file(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open Moves File", "",
                                              "Move files (*.txt);;All files (*)")
        if path:
            self.load_moves_file(path)

    def load_moves_file(self, path):
        try:
            moves = read_moves(path)
        except (OSError, MoveFormatError) as e:
            logger.warning("could not load moves from %s: %s", path, e)
            QMessageBox.critical(self, "Moves File Error", str(e))
            return False
        self.moves = moves
        self.reset_game()
        return True

    @Slot()
    def reset_game(self):
        # fresh board, replay from the first move
        self.game_logic.reset()
        self.statuses = []
        self.game_over = False
        self._replay = iter_statuses(self.game_logic, self.moves)
        self.board_widget.winner = None
        self.board_widget.set_accept_clicks(True)
        self.board_widget.update()
        if self.moves:
            self._update_message(f"{len(self.moves)} moves loaded, player 1's turn")
        else:
            self._update_message("new game, player 1's turn")
        self._update_replay_buttons()
