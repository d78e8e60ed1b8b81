from __future__ import annotations
from typing import List, Optional, Tuple

from othello.config import BOARD_SIZE
from othello.core.board import Board
from othello.types import BLACK, WHITE, Color, Position


def standard_opening(size: int = BOARD_SIZE) -> List[Tuple[Position, Color]]:
    """
    The four centre disks: white on the main diagonal, black on the other.
    On 8x8 that is d4/e5 white, e4/d5 black.
    """
    if size < 2 or size % 2:
        raise ValueError("The standard opening needs an even board size of at least 2.")
    lo = size // 2 - 1
    hi = size // 2
    return [
        (Position(lo, lo), WHITE),
        (Position(hi, lo), BLACK),
        (Position(lo, hi), BLACK),
        (Position(hi, hi), WHITE),
    ]


def new_game_board(size: int = BOARD_SIZE) -> Board:
    board = Board(size)
    for pos, color in standard_opening(size):
        board.try_place(pos, color, force=True)
    return board


def has_legal_move(board: Board, color: Color) -> bool:
    return bool(board.legal_moves(color))


def is_game_over(board: Board) -> bool:
    if board.is_full():
        return True
    return not has_legal_move(board, BLACK) and not has_legal_move(board, WHITE)


def winner(board: Board) -> Optional[Color]:
    white, black = board.score()
    if black > white:
        return BLACK
    if white > black:
        return WHITE
    return None
