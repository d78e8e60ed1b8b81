# src/othello/errors.py

from __future__ import annotations


class OthelloError(ValueError):
    """Base class for rule violations reported by the board."""


class OutOfBoundsError(OthelloError):
    pass


class CellOccupiedError(OthelloError):
    pass


class IllegalMoveError(OthelloError):
    pass
