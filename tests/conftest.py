import os
import random

# Headless matplotlib for the analysis tests
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from othello.core.board import Board
from othello.core.rules import new_game_board
from othello.types import BLACK, other


def random_positions(n_games: int = 6, plies: int = 30, seed: int = 7, size: int = 8):
    """(board, side to move) pairs reached by random legal play from the opening."""
    rng = random.Random(seed)
    out = []
    for _ in range(n_games):
        board = new_game_board(size)
        color = BLACK
        for _ in range(plies):
            moves = board.legal_moves(color)
            if not moves:
                color = other(color)
                moves = board.legal_moves(color)
                if not moves:
                    break
            m = rng.choice(moves)
            board.play(m.position, color)
            color = other(color)
            out.append((board.copy(), color))
    return out


@pytest.fixture
def opening_board() -> Board:
    return new_game_board(8)


@pytest.fixture
def midgame_board() -> Board:
    # A few plies into a real game, both sides with several options.
    return Board.from_rows([
        "........",
        "........",
        "...B....",
        "..BBB...",
        "..WWB...",
        "...WB...",
        "........",
        "........",
    ])


@pytest.fixture(scope="session")
def reachable_positions():
    return random_positions()


@pytest.fixture(scope="session")
def sampled_positions():
    # Fewer, spread-out positions for the slower search tests.
    return random_positions(n_games=3, plies=40, seed=11)[::10]
