from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from othello.ai.base import Agent
from othello.config import BOARD_SIZE
from othello.core.board import Board
from othello.core.rules import new_game_board, winner
from othello.game.results import GameResult, empty_stats
from othello.game.state import GameState
from othello.types import BLACK, WHITE, Move, other

logger = logging.getLogger(__name__)

MoveHook = Callable[[GameState, Optional[Move]], None]


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _random_opening(state: GameState, plies: int, seed: Optional[int]) -> None:
    rng = random.Random(seed)
    for _ in range(plies):
        moves = state.board.legal_moves(state.current)
        if not moves:
            break
        move = rng.choice(moves)
        state.board.play(move.position, state.current)
        state.current = other(state.current)
        state.plies += 1


def play_game(
    agent_black: Agent,
    agent_white: Agent,
    *,
    size: int = BOARD_SIZE,
    board: Optional[Board] = None,
    opening_plies: int = 0,
    seed: Optional[int] = None,
    on_move: Optional[MoveHook] = None,
) -> GameResult:
    """
    Run one headless game. Black moves first.

    A None from an agent is a pass; two passes in a row (or a full board)
    end the game. Agent moves are replayed through Board.play so an agent
    can never apply an illegal move.
    """
    state = GameState(board=board if board is not None else new_game_board(size))
    stats = empty_stats()

    agent_black.set_color(BLACK)
    agent_white.set_color(WHITE)
    names = {BLACK: _agent_name(agent_black, "Black"), WHITE: _agent_name(agent_white, "White")}

    if opening_plies > 0:
        _random_opening(state, opening_plies, seed)

    while not state.board.is_full() and state.passes < 2:
        agent = agent_black if state.current == BLACK else agent_white
        move = agent.propose_move(state.board, state.current)

        side_stats = stats[state.current]
        if move is None:
            state.passes += 1
            side_stats["passes"] += 1
            logger.debug("%s (%s) passes", names[state.current], state.current)
        else:
            applied = state.board.play(move.position, state.current)
            state.passes = 0
            state.plies += 1

            info = getattr(agent, "last_info", None) or {}
            side_stats["moves"] += 1
            side_stats["flips"] += len(applied.flips)
            side_stats["time_ms"] += int(info.get("time_ms", 0))
            side_stats["nodes"] += int(info.get("nodes", 0))
            side_stats["depth"] += int(info.get("depth", 0))

            logger.debug(
                "%s (%s) plays (%d, %d) flipping %d",
                names[state.current], state.current,
                applied.position.x, applied.position.y, len(applied.flips),
            )

        if on_move is not None:
            on_move(state, move)
        state.current = other(state.current)

    white_count, black_count = state.board.score()
    result = GameResult(
        board=state.board,
        winner=winner(state.board),
        black=black_count,
        white=white_count,
        plies=state.plies,
        stats=stats,
    )
    logger.info(
        "%s vs %s: %s (B %d - W %d, %d plies)",
        names[BLACK], names[WHITE], result.outcome, black_count, white_count, result.plies,
    )
    return result
