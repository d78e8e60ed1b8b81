import pytest

from othello.core.board import Board
from othello.errors import CellOccupiedError, IllegalMoveError, OutOfBoundsError
from othello.types import BLACK, WHITE, Move, Position, other


class TestOpening:
    def test_black_has_the_four_classic_moves(self, opening_board):
        moves = opening_board.legal_moves(BLACK)
        assert [m.position for m in moves] == [
            Position(3, 2),
            Position(2, 3),
            Position(5, 4),
            Position(4, 5),
        ]
        assert all(len(m.flips) == 1 for m in moves)

    def test_flip_sets_of_opening_moves(self, opening_board):
        flips = {m.position: m.flips for m in opening_board.legal_moves(BLACK)}
        assert flips[Position(3, 2)] == (Position(3, 3),)
        assert flips[Position(2, 3)] == (Position(3, 3),)
        assert flips[Position(5, 4)] == (Position(4, 4),)
        assert flips[Position(4, 5)] == (Position(4, 4),)

    def test_white_mirrors_black(self, opening_board):
        assert len(opening_board.legal_moves(WHITE)) == 4

    def test_score(self, opening_board):
        assert opening_board.score() == (2, 2)


class TestLegalMoves:
    def test_flips_union_across_directions(self):
        board = Board.from_rows([
            "..B..",
            "..W..",
            "BW...",
            ".....",
            ".....",
        ])
        flips = board.flips_for(Position(2, 2), BLACK)
        # N is scanned before W
        assert flips == (Position(2, 1), Position(1, 2))

    def test_edge_is_a_closed_boundary(self):
        board = Board.from_rows([
            "WWW.",
            "....",
            "....",
            "....",
        ])
        assert board.legal_moves(BLACK) == []

    def test_run_closed_by_own_disk_flips_whole_run(self):
        board = Board.from_rows([
            "BWW.",
            "....",
            "....",
            "....",
        ])
        (move,) = board.legal_moves(BLACK)
        assert move.position == Position(3, 0)
        assert move.flips == (Position(2, 0), Position(1, 0))

    def test_gap_breaks_the_run(self):
        board = Board.from_rows([
            "B.W.",
            "....",
            "....",
            "....",
        ])
        assert board.legal_moves(BLACK) == []

    def test_moves_are_in_row_major_order(self, midgame_board):
        for color in (BLACK, WHITE):
            positions = [(m.position.y, m.position.x) for m in midgame_board.legal_moves(color)]
            assert positions == sorted(positions)

    def test_moves_only_on_empty_cells_with_straight_line_flips(self, reachable_positions):
        for board, color in reachable_positions:
            for m in board.legal_moves(color):
                assert board.get(m.position) is None
                assert m.position not in m.flips
                assert len(set(m.flips)) == len(m.flips)
                for f in m.flips:
                    assert board.get(f) == other(color)
                    dx, dy = f.x - m.position.x, f.y - m.position.y
                    assert dx == 0 or dy == 0 or abs(dx) == abs(dy)


class TestPlacement:
    def test_try_place_does_not_flip(self, opening_board):
        move = opening_board.try_place(Position(3, 2), BLACK)
        assert move.flips == (Position(3, 3),)
        assert opening_board.get(Position(3, 2)) == BLACK
        assert opening_board.get(Position(3, 3)) == WHITE

    def test_play_applies_flips(self, opening_board):
        opening_board.play(Position(3, 2), BLACK)
        assert opening_board.get(Position(3, 3)) == BLACK
        assert opening_board.score() == (1, 4)

    @pytest.mark.parametrize("pos", [Position(-1, 0), Position(0, 8), Position(8, 8), Position(3, -2)])
    def test_out_of_bounds_is_rejected(self, opening_board, pos):
        with pytest.raises(OutOfBoundsError):
            opening_board.try_place(pos, BLACK)

    def test_occupied_cell_is_rejected(self, opening_board):
        with pytest.raises(CellOccupiedError):
            opening_board.try_place(Position(3, 3), BLACK)
        with pytest.raises(CellOccupiedError):
            opening_board.try_place(Position(3, 3), BLACK, force=True)

    def test_illegal_move_leaves_board_untouched(self, opening_board):
        before = opening_board.copy()
        with pytest.raises(IllegalMoveError):
            opening_board.try_place(Position(0, 0), BLACK)
        assert opening_board == before

    def test_errors_are_value_errors(self, opening_board):
        with pytest.raises(ValueError):
            opening_board.try_place(Position(0, 0), BLACK)

    def test_force_skips_rules(self):
        board = Board(4)
        move = board.try_place(Position(0, 0), WHITE, force=True)
        assert move == Move(Position(0, 0))
        assert move.flips == ()
        assert board.get(Position(0, 0)) == WHITE


class TestFlipAndRemove:
    def test_try_flip(self, opening_board):
        assert opening_board.try_flip(Position(3, 3)) is True
        assert opening_board.get(Position(3, 3)) == BLACK

    def test_try_flip_fails_on_empty_or_off_board(self, opening_board):
        before = opening_board.copy()
        assert opening_board.try_flip(Position(0, 0)) is False
        assert opening_board.try_flip(Position(9, 9)) is False
        assert opening_board == before

    def test_remove(self, opening_board):
        opening_board.remove(Position(3, 3))
        assert opening_board.get(Position(3, 3)) is None
        opening_board.remove(Position(20, 20))  # no-op
        assert opening_board.occupied_count() == 3


class TestUndo:
    def test_undo_restores_opening(self, opening_board):
        for m in opening_board.legal_moves(BLACK):
            scratch = opening_board.copy()
            applied = scratch.try_place(m.position, BLACK)
            scratch.apply_flips(applied)
            scratch.undo_move(applied)
            assert scratch == opening_board

    def test_round_trip_on_reachable_boards(self, reachable_positions):
        for board, color in reachable_positions:
            for m in board.legal_moves(color):
                scratch = board.copy()
                applied = scratch.play(m.position, color)
                assert applied == m
                scratch.undo_move(applied)
                assert scratch == board

    def test_copy_is_independent(self, opening_board):
        scratch = opening_board.copy()
        scratch.play(Position(3, 2), BLACK)
        assert opening_board.get(Position(3, 2)) is None


class TestScoreAndText:
    def test_score_counts_occupied_cells(self, reachable_positions):
        for board, _ in reachable_positions:
            white, black = board.score()
            assert white + black == board.occupied_count()
            assert white + black <= board.size * board.size
            assert board.empty_count() == board.size * board.size - white - black

    def test_text_round_trip(self, midgame_board):
        assert Board.from_rows(str(midgame_board).splitlines()) == midgame_board

    def test_from_rows_rejects_non_square(self):
        with pytest.raises(ValueError):
            Board.from_rows(["...", ".."])

    def test_from_rows_rejects_unknown_symbols(self):
        with pytest.raises(ValueError):
            Board.from_rows(["X.", ".."])

    def test_preset_grid_rejects_a_third_cell_state(self):
        with pytest.raises(ValueError):
            Board(2, [["X", None], [None, None]])
        with pytest.raises(ValueError):
            Board(2, [[None, None], [None, "b"]])


class TestMove:
    def test_move_cannot_flip_itself(self):
        with pytest.raises(ValueError):
            Move(Position(1, 1), (Position(1, 1),))

    def test_move_rejects_duplicate_flips(self):
        with pytest.raises(ValueError):
            Move(Position(0, 0), (Position(1, 1), Position(1, 1)))

    def test_containment(self):
        m = Move(Position(0, 0), (Position(1, 1),))
        assert Position(1, 1) in m
        assert Position(0, 0) not in m

    def test_flips_are_stored_as_a_tuple(self):
        m = Move(Position(0, 0), [Position(1, 1), Position(2, 2)])
        assert m.flips == (Position(1, 1), Position(2, 2))
        assert hash(m) == hash(Move(Position(0, 0), (Position(1, 1), Position(2, 2))))
        assert len({m, Move(Position(0, 0), (Position(1, 1), Position(2, 2)))}) == 1
