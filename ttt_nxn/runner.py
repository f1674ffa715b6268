"""Drive a GameLogic through an ordered list of (player, row, col) moves."""

import logging

from .game_logic import GameLogic, Location, NEXT_PLAYER

logger = logging.getLogger(__name__)


def iter_statuses(game: GameLogic, moves):
    """
    yield (move, status) for each move, stopping after a win or draw
    """
    for move in moves:
        player, row, col = move
        result = game.attempt_move(player, Location(row, col))
        status = game.to_status(result, player)
        yield move, status
        if status > NEXT_PLAYER:
            # win or draw, nothing more to play
            logger.info("game decided after %d valid moves, status %d",
                        game.valid_move_count, status)
            return


def play_tic_tac_toe(game: GameLogic, moves):
    """
    returns one status per processed move, up to and including the
    first winning or drawing one
    """
    return [status for _, status in iter_statuses(game, moves)]
