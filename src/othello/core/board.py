# src/othello/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from othello.config import BOARD_SIZE
from othello.errors import CellOccupiedError, IllegalMoveError, OutOfBoundsError
from othello.types import BLACK, WHITE, Cell, Color, Move, Position, other

# N, NE, E, SE, S, SW, W, NW  (y grows downwards)
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)

_SYMBOLS = {None: ".", BLACK: "B", WHITE: "W"}


@dataclass(slots=True)
class Board:
    size: int = BOARD_SIZE
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Board size must be positive.")
        if not self.grid:
            self.grid = [[None for _ in range(self.size)] for _ in range(self.size)]
        elif len(self.grid) != self.size or any(len(row) != self.size for row in self.grid):
            raise ValueError(f"Preset grid must be {self.size}x{self.size}.")
        else:
            for row in self.grid:
                for cell in row:
                    if cell not in (None, BLACK, WHITE):
                        raise ValueError(f"Unknown cell value {cell!r}; expected None, {BLACK!r} or {WHITE!r}.")

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a preset board from strings like "..BW....", one per row.
        Whitespace inside a row is ignored.
        """
        parsed: List[List[Cell]] = []
        for raw in rows:
            cells: List[Cell] = []
            for ch in raw:
                if ch.isspace():
                    continue
                if ch == ".":
                    cells.append(None)
                elif ch.upper() in (BLACK, WHITE):
                    cells.append(ch.upper())  # type: ignore[arg-type]
                else:
                    raise ValueError(f"Unknown cell symbol {ch!r}.")
            parsed.append(cells)
        return cls(len(parsed), parsed)

    def copy(self) -> "Board":
        return Board(self.size, [row[:] for row in self.grid])

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.size and 0 <= position.y < self.size

    def _check(self, position: Position) -> None:
        if not self.in_bounds(position):
            raise OutOfBoundsError(f"Position ({position.x}, {position.y}) is off a {self.size}x{self.size} board.")

    def get(self, position: Position) -> Cell:
        self._check(position)
        return self.grid[position.y][position.x]

    def _walk(self, x: int, y: int, dx: int, dy: int, color: Color) -> List[Position]:
        """
        Flips contributed by one direction: a run of opposite disks closed by
        one of ours. Anything else (edge, gap, empty run) contributes nothing.
        """
        opp = other(color)
        run: List[Position] = []
        cx, cy = x + dx, y + dy
        for _ in range(self.size):
            if not (0 <= cx < self.size and 0 <= cy < self.size):
                return []
            cell = self.grid[cy][cx]
            if cell == opp:
                run.append(Position(cx, cy))
            elif cell == color:
                return run
            else:
                return []
            cx += dx
            cy += dy
        return []

    def flips_for(self, position: Position, color: Color) -> Tuple[Position, ...]:
        self._check(position)
        flips: List[Position] = []
        seen = set()
        for dx, dy in DIRECTIONS:
            for p in self._walk(position.x, position.y, dx, dy, color):
                if p not in seen:
                    seen.add(p)
                    flips.append(p)
        return tuple(flips)

    def legal_moves(self, color: Color) -> List[Move]:
        moves: List[Move] = []
        for y in range(self.size):
            for x in range(self.size):
                if self.grid[y][x] is not None:
                    continue
                pos = Position(x, y)
                flips = self.flips_for(pos, color)
                if flips:
                    moves.append(Move(pos, flips))
        return moves

    def try_place(self, position: Position, color: Color, force: bool = False) -> Move:
        """
        Put a disk on an empty cell and return the move it makes.
        Flips are not applied here; see apply_flips().
        force=True skips the rules entirely (opening seeds).
        """
        self._check(position)
        if self.grid[position.y][position.x] is not None:
            raise CellOccupiedError(f"Cell ({position.x}, {position.y}) is occupied.")

        if force:
            move = Move(position)
        else:
            flips = self.flips_for(position, color)
            if not flips:
                raise IllegalMoveError(f"Placing {color} at ({position.x}, {position.y}) flips nothing.")
            move = Move(position, flips)

        self.grid[position.y][position.x] = color
        return move

    def try_flip(self, position: Position) -> bool:
        if not self.in_bounds(position):
            return False
        cell = self.grid[position.y][position.x]
        if cell is None:
            return False
        self.grid[position.y][position.x] = other(cell)
        return True

    def apply_flips(self, move: Move) -> None:
        for p in move.flips:
            self.try_flip(p)

    def play(self, position: Position, color: Color) -> Move:
        move = self.try_place(position, color)
        self.apply_flips(move)
        return move

    def remove(self, position: Position) -> None:
        if self.in_bounds(position):
            self.grid[position.y][position.x] = None

    def undo_move(self, move: Move) -> None:
        """
        Exact inverse of play(move).
        Only valid if nothing else touched the board after that move.
        """
        self.remove(move.position)
        for p in move.flips:
            self.try_flip(p)

    def score(self) -> Tuple[int, int]:
        white = black = 0
        for row in self.grid:
            for cell in row:
                if cell == WHITE:
                    white += 1
                elif cell == BLACK:
                    black += 1
        return white, black

    def occupied_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def empty_count(self) -> int:
        return self.size * self.size - self.occupied_count()

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

    def __str__(self) -> str:
        return "\n".join("".join(_SYMBOLS[cell] for cell in row) for row in self.grid)
