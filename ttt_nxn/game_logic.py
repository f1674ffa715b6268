import enum
import logging
from typing import NamedTuple, assert_never

logger = logging.getLogger(__name__)

EMPTY = 0          # board sentinel for a cell nobody played
NEXT_PLAYER = 0    # status: game not decided yet


class Location(NamedTuple):
    """
    (row, col) of a board cell, 0-indexed
    """
    row: int
    col: int


class MoveResult(enum.Enum):
    """
    result of a single move attempt
    """
    WIN = "win"
    INVALID = "invalid"
    DRAW = "draw"
    CONTINUE = "continue"


class GameLogic:
    """
    NxN tic-tac-toe rules and state for any number of players.
    a player wins by owning a full row, a full column or either full diagonal.
    """
    def __init__(self, board_size, num_players, advance_turn_on_invalid=True):
        """
        init empty board, player 1 moves first
        """
        if board_size < 1:
            raise ValueError(f"board size must be positive, got {board_size}")
        if num_players < 1:
            raise ValueError(f"number of players must be positive, got {num_players}")
        self.board_size = board_size
        self.num_players = num_players
        self.advance_turn_on_invalid = advance_turn_on_invalid
        self.max_valid_moves = board_size * board_size
        self.cats_game = num_players + 1      # status for a draw
        self.reset()

    def reset(self):
        """
        clear board and counters for a new game
        """
        self._board = [[EMPTY for _ in range(self.board_size)]
                       for _ in range(self.board_size)]
        self.valid_move_count = 0         # accepted moves so far
        self.whose_turn = 1               # players are 1-indexed

    @property
    def board(self):
        """read-only snapshot of the grid"""
        return tuple(tuple(row) for row in self._board)

    def cell(self, location):
        """owner of a cell, EMPTY if nobody played there"""
        location = Location(*location)
        if not self.is_on_board(location):
            raise IndexError(f"{location} is off the {self.board_size}x{self.board_size} board")
        return self._board[location.row][location.col]

    def is_full(self):
        return self.valid_move_count == self.max_valid_moves

    def is_on_board(self, location):
        n = self.board_size
        return 0 <= location.row < n and 0 <= location.col < n

    def attempt_move(self, player: int, location: Location) -> MoveResult:
        """
        validate and apply one move.
        returns WIN, INVALID, DRAW or CONTINUE
        """
        location = Location(*location)
        expected = self.whose_turn
        if self.advance_turn_on_invalid:
            self._advance_turn()

        if player != expected:
            logger.debug("player %d moved out of turn (expected %d)", player, expected)
            return MoveResult.INVALID
        if not self.is_on_board(location):
            logger.debug("player %d played off the board at %s", player, location)
            return MoveResult.INVALID
        if self.cell(location) != EMPTY:
            logger.debug("player %d played on occupied cell %s", player, location)
            return MoveResult.INVALID

        if not self.advance_turn_on_invalid:
            self._advance_turn()

        # nothing left to fill
        if self.is_full():
            logger.info("board full, draw")
            return MoveResult.DRAW

        self._board[location.row][location.col] = player
        self.valid_move_count += 1
        result = self.check_for_win(location, player)
        if result is MoveResult.CONTINUE and self.is_full():
            result = MoveResult.DRAW
        if result is not MoveResult.CONTINUE:
            logger.info("player %d at %s: %s", player, location, result.value)
        return result

    def check_for_win(self, location, player):
        """
        only checks the lines through the just-played cell.
        returns WIN or CONTINUE
        """
        b = self._board; n = self.board_size
        row_win = True
        col_win = True
        # diagonals only count when the cell sits on them
        diag_down = location.row == location.col
        diag_up = location.row == n - location.col - 1
        for i in range(n):
            if row_win:
                row_win = b[location.row][i] == player
            if col_win:
                col_win = b[i][location.col] == player
            if diag_down:
                diag_down = b[i][i] == player
            if diag_up:
                diag_up = b[i][n - i - 1] == player
            if not (row_win or col_win or diag_down or diag_up):
                return MoveResult.CONTINUE
        return MoveResult.WIN

    def to_status(self, result: MoveResult, player: int) -> int:
        """
        map a move result to the public game status:
        winner id, cats game (num_players + 1), -player or 0
        """
        if result is MoveResult.WIN:
            return player
        elif result is MoveResult.DRAW:
            return self.cats_game
        elif result is MoveResult.INVALID:
            return -player
        elif result is MoveResult.CONTINUE:
            return NEXT_PLAYER
        else:
            assert_never(result)

    def format_board(self):
        """
        one line per row, cells separated by spaces
        """
        return "\n".join(" ".join(str(c) for c in row) for row in self._board)

    def print_board(self):
        print(self.format_board())

    def _advance_turn(self):
        # wraps num_players -> 1
        self.whose_turn = self.whose_turn % self.num_players + 1
