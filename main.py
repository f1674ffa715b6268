import argparse
import logging
import sys

from ttt_nxn.config import load_config
from ttt_nxn.game_logic import GameLogic
from ttt_nxn.logging_config import setup_logging
from ttt_nxn.runner import play_tic_tac_toe
from ttt_nxn.text_input import read_moves, MoveFormatError

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

logger = logging.getLogger("ttt_nxn.main")

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white
DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark board window palette.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, WINDOW_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def build_parser():
    ap = argparse.ArgumentParser(
        description="Validate N-player NxN tic-tac-toe moves and print one game status per move.")
    ap.add_argument("moves", nargs="?", default=None,
                    help="file of 'player row col' lines, '-' for stdin")
    ap.add_argument("--size", type=int, default=None, help="board size N (NxN board)")
    ap.add_argument("--players", type=int, default=None, help="number of players")
    ap.add_argument("--strict-turns", action="store_true",
                    help="only advance the turn on accepted moves")
    ap.add_argument("--print-board", action="store_true", help="print the final board")
    ap.add_argument("--config", default=None, help="TOML config file (default ttt.toml)")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    ap.add_argument("--gui", action="store_true", help="open the board window")
    return ap


def run_gui(game, moves):
    # headless runs never load the window module
    from ttt_nxn.ui.main_window import TicTacToeWindow

    app = QApplication.instance() or QApplication(sys.argv)
    app.setStyle('Fusion')
    apply_default_palette(app)
    window = TicTacToeWindow(game, moves)
    window.show()
    return app.exec()


def main(argv=None, out=None):
    out = out or sys.stdout
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ValueError as e:
        ap.error(str(e))
    if args.size is not None:
        cfg.game.board_size = args.size
    if args.players is not None:
        cfg.game.num_players = args.players
    if args.strict_turns:
        cfg.game.advance_turn_on_invalid = False
    if args.print_board:
        cfg.print_board = True
    setup_logging(args.log_level or cfg.log_level)

    try:
        game = GameLogic(cfg.game.board_size, cfg.game.num_players,
                         advance_turn_on_invalid=cfg.game.advance_turn_on_invalid)
    except ValueError as e:
        ap.error(str(e))

    moves = []
    if args.moves is not None or not args.gui:
        try:
            moves = read_moves(args.moves or "-")
        except (OSError, MoveFormatError) as e:
            logger.error("could not read moves: %s", e)
            return 2

    if args.gui:
        return run_gui(game, moves)

    for status in play_tic_tac_toe(game, moves):
        print(status, file=out)
    if cfg.print_board:
        print(game.format_board(), file=out)
    return 0

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

if __name__ == '__main__':
    sys.exit(main())
