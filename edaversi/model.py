"""Reversi game state: board, players, move generation and timing."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

BOARD_SIZE = 8


class Player(IntEnum):
    """A side in the game."""

    BLACK = 0
    WHITE = 1

    def opponent(self) -> Player:
        """Return the other player."""
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    def piece(self) -> Piece:
        """Return the piece this player places on the board."""
        return Piece.BLACK if self is Player.BLACK else Piece.WHITE


class Piece(IntEnum):
    """Contents of a board square."""

    EMPTY = 0
    BLACK = 1
    WHITE = 2


@dataclass(frozen=True)
class Square:
    """A board coordinate; x is the column, y the row."""

    x: int
    y: int


INVALID_SQUARE = Square(-1, -1)


def is_square_valid(square: Square) -> bool:
    """Tell whether a square lies on the board."""
    return 0 <= square.x < BOARD_SIZE and 0 <= square.y < BOARD_SIZE


def _index(x: int, y: int) -> int:
    return y * BOARD_SIZE + x


_DIRECTIONS = [
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
]


def _build_rays() -> tuple[tuple[tuple[int, ...], ...], ...]:
    rays = []
    for index in range(BOARD_SIZE * BOARD_SIZE):
        x, y = index % BOARD_SIZE, index // BOARD_SIZE
        cell_rays = []
        for dx, dy in _DIRECTIONS:
            ray = []
            cx, cy = x + dx, y + dy
            while 0 <= cx < BOARD_SIZE and 0 <= cy < BOARD_SIZE:
                ray.append(_index(cx, cy))
                cx += dx
                cy += dy
            # A ray needs room for an opponent piece and a closing own piece.
            if len(ray) >= 2:
                cell_rays.append(tuple(ray))
        rays.append(tuple(cell_rays))
    return tuple(rays)


_RAYS = _build_rays()

# Move generation scans columns in the outer loop and rows in the inner one.
_SCAN_ORDER = tuple(
    (Square(x, y), _index(x, y))
    for x in range(BOARD_SIZE)
    for y in range(BOARD_SIZE)
)


def _captured(board: list[Piece], ray: tuple[int, ...], own: Piece, opponent: Piece) -> int:
    """Number of opponent pieces along a ray closed by an own piece."""
    for count, cell in enumerate(ray):
        piece = board[cell]
        if piece != opponent:
            return count if piece == own else 0
    return 0


def _is_legal(board: list[Piece], index: int, own: Piece, opponent: Piece) -> bool:
    if board[index] != Piece.EMPTY:
        return False
    return any(_captured(board, ray, own, opponent) for ray in _RAYS[index])


class GameModel:
    """Full state of a Reversi game."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self.game_over = True
        self.current_player = Player.BLACK
        self.human_player = Player.BLACK
        self.player_time = [0.0, 0.0]
        self.turn_timer = 0.0
        self._board = [Piece.EMPTY] * (BOARD_SIZE * BOARD_SIZE)

    def start(self) -> None:
        """Reset to the opening position with black to move."""
        self.game_over = False
        self.current_player = Player.BLACK
        self.player_time = [0.0, 0.0]
        self.turn_timer = self._clock()
        self._board = [Piece.EMPTY] * (BOARD_SIZE * BOARD_SIZE)
        low, high = BOARD_SIZE // 2 - 1, BOARD_SIZE // 2
        self._board[_index(low, low)] = Piece.WHITE
        self._board[_index(high, low)] = Piece.BLACK
        self._board[_index(high, high)] = Piece.WHITE
        self._board[_index(low, high)] = Piece.BLACK

    def copy(self) -> GameModel:
        """Return an independent copy sharing the same clock."""
        clone = GameModel(self._clock)
        clone.game_over = self.game_over
        clone.current_player = self.current_player
        clone.human_player = self.human_player
        clone.player_time = list(self.player_time)
        clone.turn_timer = self.turn_timer
        clone._board = self._board.copy()
        return clone

    def score(self, player: Player) -> int:
        """Count the pieces a player has on the board."""
        return self._board.count(player.piece())

    def timer(self, player: Player) -> float:
        """Seconds a player has spent, including the running turn."""
        turn_time = 0.0
        if not self.game_over and player == self.current_player:
            turn_time = self._clock() - self.turn_timer
        return self.player_time[player] + turn_time

    def piece_at(self, square: Square) -> Piece:
        """Return the piece on a square."""
        if not is_square_valid(square):
            raise IndexError(f"square {square} is off the board")
        return self._board[_index(square.x, square.y)]

    def set_piece(self, square: Square, piece: Piece) -> None:
        """Place a piece on a square."""
        if not is_square_valid(square):
            raise IndexError(f"square {square} is off the board")
        self._board[_index(square.x, square.y)] = Piece(piece)

    def _pieces_for(self, player: Player) -> tuple[Piece, Piece]:
        return player.piece(), player.opponent().piece()

    def _has_moves(self, player: Player) -> bool:
        own, opponent = self._pieces_for(player)
        return any(
            _is_legal(self._board, index, own, opponent) for _, index in _SCAN_ORDER
        )

    def valid_moves(self) -> list[Square]:
        """List the legal moves of the current player."""
        own, opponent = self._pieces_for(self.current_player)
        return [
            square
            for square, index in _SCAN_ORDER
            if _is_legal(self._board, index, own, opponent)
        ]

    def play_move(self, move: Square) -> None:
        """Play a move for the current player and pass the turn.

        Raises ValueError if the move is not legal.
        """
        player = self.current_player
        own, opponent = self._pieces_for(player)
        if not is_square_valid(move):
            raise ValueError(f"move {move} is off the board")
        index = _index(move.x, move.y)
        if not _is_legal(self._board, index, own, opponent):
            raise ValueError(f"move {move} is not legal for {player.name.lower()}")

        self._board[index] = own
        for ray in _RAYS[index]:
            for cell in ray[: _captured(self._board, ray, own, opponent)]:
                self._board[cell] = own

        now = self._clock()
        self.player_time[player] += now - self.turn_timer
        self.turn_timer = now

        self.current_player = player.opponent()
        if not self._has_moves(self.current_player):
            self.current_player = self.current_player.opponent()
            if not self._has_moves(self.current_player):
                self.game_over = True