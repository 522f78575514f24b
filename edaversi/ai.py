"""Computer opponent: alpha-beta minimax over the game model."""

from __future__ import annotations

from typing import Callable

from .model import BOARD_SIZE, GameModel, Square

MAX_NODES = 10000
MAX_DEPTH = 10
MIN_VALUE = -10_000_000
MAX_VALUE = 10_000_000
CORNER_BONUS = 100
PIECE_BONUS = 1

_CORNERS = frozenset(
    Square(x, y) for x in (0, BOARD_SIZE - 1) for y in (0, BOARD_SIZE - 1)
)
_ALL_SQUARES = tuple(
    Square(x, y) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE)
)


def _pass_if_stuck(model: GameModel) -> None:
    """Hand the turn over when the mover is stuck; end the game if both are."""
    if not model.valid_moves():
        model.current_player = model.current_player.opponent()
        if not model.valid_moves():
            model.game_over = True


def game_over(model: GameModel) -> bool:
    """Tell whether the game is already marked over.

    As a side effect, passes the turn when the current player has no move
    and marks the game over when neither player has one.
    """
    if model.game_over:
        return True
    _pass_if_stuck(model)
    return False


def check_board(model: GameModel) -> int:
    """Score the board from the current player's point of view."""
    if game_over(model):
        return 0

    player = model.current_player
    own = player.piece()
    opponent = player.opponent().piece()
    score = 0
    for square in _ALL_SQUARES:
        piece = model.piece_at(square)
        weight = PIECE_BONUS + (CORNER_BONUS if square in _CORNERS else 0)
        if piece == own:
            score += weight
        elif piece == opponent:
            score -= weight
    return score


class _Search:
    """Minimax search sharing one node budget across calls."""

    def __init__(self) -> None:
        self.evaluated_nodes = 0

    def minimax(
        self,
        model: GameModel,
        maximizing: bool,
        depth: int,
        alpha: int,
        beta: int,
    ) -> int:
        if depth == 0 or self.evaluated_nodes >= MAX_NODES or game_over(model):
            return check_board(model)

        moves = model.valid_moves()
        if not moves:
            _pass_if_stuck(model)

        self.evaluated_nodes += 1

        if maximizing:
            best = MIN_VALUE
            for move in moves:
                child = model.copy()
                child.play_move(move)
                value = self.minimax(child, False, depth - 1, alpha, beta)
                best = max(best, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return best

        worst = MAX_VALUE
        for move in moves:
            child = model.copy()
            child.play_move(move)
            value = self.minimax(child, True, depth - 1, alpha, beta)
            worst = min(worst, value)
            beta = min(beta, value)
            if beta <= alpha:
                break
            if self.evaluated_nodes >= MAX_NODES:
                break
        return worst


def get_best_move(
    model: GameModel,
    on_progress: Callable[[GameModel], None] | None = None,
) -> Square:
    """Choose a move for the current player.

    on_progress, if given, is called with the model before each candidate
    move is searched. Raises ValueError when there is no legal move.
    """
    moves = model.valid_moves()
    if not moves:
        raise ValueError("the current player has no valid move")

    search = _Search()
    best_value = MIN_VALUE
    best_move = moves[0]
    for move in moves:
        if on_progress is not None:
            on_progress(model)
        child = model.copy()
        child.play_move(move)
        value = search.minimax(child, True, MAX_DEPTH - 1, MIN_VALUE, MAX_VALUE)
        if value > best_value:
            best_value = value
            best_move = move
    return best_move