from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import inf
from typing import Optional, Tuple

from othello.core.board import Board
from othello.core.scoring import Heuristic, disk_difference
from othello.types import Color, Move, other

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0


@dataclass(slots=True)
class SearchEngine:
    """
    Depth-limited minimax with alpha-beta pruning.

    The engine never mutates the caller's board: search() takes one scratch
    copy and walks it with play()/undo_move(). Only the root ply records a
    best move, and only when the root mover is the engine's color.
    Ties keep the first move in the board's scan order.
    """
    heuristic: Heuristic = disk_difference
    prune: bool = True
    stats: SearchStats = field(default_factory=SearchStats)

    _root_depth: int = 0

    def search(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        mover: Color,
        engine: Color,
    ) -> Tuple[float, Optional[Move]]:
        if depth < 0:
            raise ValueError("Search depth must be >= 0.")

        self.stats = SearchStats()
        self._root_depth = depth

        work = board.copy()
        value, best = self._search(work, depth, alpha, beta, mover, engine)

        logger.debug(
            "search depth=%d mover=%s value=%s move=%s nodes=%d cutoffs=%d",
            depth, mover, value, best.position if best else None,
            self.stats.nodes, self.stats.cutoffs,
        )
        return value, best

    def _search(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        mover: Color,
        engine: Color,
    ) -> Tuple[float, Optional[Move]]:
        self.stats.nodes += 1

        if depth == 0:
            self.stats.leaves += 1
            return self.heuristic(board, engine, mover), None

        moves = board.legal_moves(mover)
        if not moves:
            self.stats.leaves += 1
            return self.heuristic(board, engine, mover), None

        maximizing = mover == engine
        best_value = -inf if maximizing else inf
        best_move: Optional[Move] = None

        for m in moves:
            board.play(m.position, mover)
            value, _ = self._search(board, depth - 1, alpha, beta, other(mover), engine)
            board.undo_move(m)

            if maximizing:
                if value > best_value:
                    best_value = value
                    best_move = m
                if self.prune and best_value >= beta:
                    self.stats.cutoffs += 1
                    break
                alpha = max(alpha, best_value)
            else:
                if value < best_value:
                    best_value = value
                    best_move = m
                if self.prune and best_value <= alpha:
                    self.stats.cutoffs += 1
                    break
                beta = min(beta, best_value)

        if depth == self._root_depth and maximizing:
            return best_value, best_move
        return best_value, None
