import pytest

from othello.ai.greedy_agent import GreedyAgent, WorstAgent
from othello.ai.minimax_agent import MaxmaxAgent, MinimaxAgent
from othello.ai.pick import make_agent, parse_agent_spec
from othello.ai.random_agent import RandomAgent
from othello.core.board import Board
from othello.types import BLACK, WHITE, Position


ALL_KINDS = ["random", "greedy", "worst", "minimax", "maxmax"]


@pytest.fixture
def stuck_board() -> Board:
    # Neither color can move: no black disk to close any run.
    return Board.from_rows([
        "WWWW",
        "WWWW",
        "WWWW",
        "WWW.",
    ])


class TestPass:
    @pytest.mark.parametrize("kind", ALL_KINDS)
    @pytest.mark.parametrize("color", [BLACK, WHITE])
    def test_no_legal_move_returns_none(self, stuck_board, kind, color):
        agent = make_agent(kind)
        assert agent.propose_move(stuck_board, color) is None

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_configured_color_is_used(self, opening_board, kind):
        agent = make_agent(kind)
        agent.set_color(WHITE)
        move = agent.propose_move(opening_board)
        assert move in opening_board.legal_moves(WHITE)

    @pytest.mark.parametrize("kind", ALL_KINDS)
    def test_missing_color_is_an_error(self, opening_board, kind):
        with pytest.raises(ValueError):
            make_agent(kind).propose_move(opening_board)


class TestGreedy:
    def test_greedy_takes_most_flips(self, midgame_board):
        moves = midgame_board.legal_moves(WHITE)
        expected = max(moves, key=lambda m: len(m.flips))  # first of the maxima
        assert GreedyAgent().propose_move(midgame_board, WHITE) == expected

    def test_worst_takes_fewest_flips(self, midgame_board):
        moves = midgame_board.legal_moves(WHITE)
        expected = min(moves, key=lambda m: len(m.flips))
        assert WorstAgent().propose_move(midgame_board, WHITE) == expected

    @pytest.mark.parametrize("cls", [GreedyAgent, WorstAgent])
    def test_ties_go_to_first_in_scan_order(self, opening_board, cls):
        agent = cls()
        picks = {agent.propose_move(opening_board, BLACK) for _ in range(5)}
        assert len(picks) == 1
        (pick,) = picks
        assert pick.position == Position(3, 2)

    def test_greedy_and_worst_differ_when_counts_differ(self):
        board = Board.from_rows([
            "BWW.",
            "....",
            ".W..",
            "..B.",
        ])
        # (3,0) flips two along the top row, (0,1) flips one on the diagonal
        assert [m.position for m in board.legal_moves(BLACK)] == [Position(3, 0), Position(0, 1)]
        greedy = GreedyAgent().propose_move(board, BLACK)
        worst = WorstAgent().propose_move(board, BLACK)
        assert len(greedy.flips) == 2
        assert len(worst.flips) == 1

    def test_last_info(self, opening_board):
        agent = GreedyAgent()
        agent.propose_move(opening_board, BLACK)
        assert agent.last_info["eval"] == 1
        assert agent.last_info["nodes"] == 4


class TestRandom:
    def test_returns_a_legal_move(self, midgame_board):
        agent = RandomAgent(seed=3)
        legal = midgame_board.legal_moves(BLACK)
        for _ in range(10):
            assert agent.propose_move(midgame_board, BLACK) in legal

    def test_seed_is_reproducible(self, midgame_board):
        a = RandomAgent(seed=42)
        b = RandomAgent(seed=42)
        seq_a = [a.propose_move(midgame_board, BLACK) for _ in range(8)]
        seq_b = [b.propose_move(midgame_board, BLACK) for _ in range(8)]
        assert seq_a == seq_b

    def test_every_move_reachable(self, opening_board):
        agent = RandomAgent(seed=0)
        seen = {agent.propose_move(opening_board, BLACK).position for _ in range(200)}
        assert len(seen) == 4


class TestMinimax:
    def test_depth_one_matches_greedy(self, reachable_positions):
        mm = MinimaxAgent(depth=1)
        greedy = GreedyAgent()
        for board, color in reachable_positions[:40]:
            assert mm.propose_move(board, color) == greedy.propose_move(board, color)

    def test_returns_legal_move_and_stats(self, midgame_board):
        agent = MinimaxAgent(depth=3)
        move = agent.propose_move(midgame_board, BLACK)
        assert move in midgame_board.legal_moves(BLACK)
        assert agent.last_info["depth"] == 3
        assert agent.last_info["nodes"] > 1

    def test_does_not_mutate_board(self, midgame_board):
        before = midgame_board.copy()
        MinimaxAgent(depth=3).propose_move(midgame_board, WHITE)
        assert midgame_board == before

    def test_rejects_bad_config(self):
        with pytest.raises(ValueError):
            MinimaxAgent(depth=0)
        with pytest.raises(ValueError):
            MinimaxAgent(heuristic="corners")

    def test_maxmax_uses_mobility(self):
        assert MaxmaxAgent().heuristic == "mobility"
        assert MinimaxAgent().heuristic == "disk"


class TestPick:
    def test_make_agent_unknown(self):
        with pytest.raises(ValueError):
            make_agent("alphazero")

    def test_parse_minimax(self):
        agent = parse_agent_spec("minimax:2:mobility")
        assert isinstance(agent, MinimaxAgent)
        assert agent.depth == 2
        assert agent.heuristic == "mobility"
        assert agent.name == "minimax:2:mobility"

    def test_parse_random_seed(self):
        agent = parse_agent_spec("Random:9")
        assert isinstance(agent, RandomAgent)
        assert agent.seed == 9

    def test_parse_maxmax(self):
        agent = parse_agent_spec("maxmax:2")
        assert isinstance(agent, MaxmaxAgent)
        assert agent.depth == 2

    @pytest.mark.parametrize("spec", ["greedy:3", "minimax:x", "random:1:2", "nope", "maxmax:1:2"])
    def test_parse_rejects_bad_specs(self, spec):
        with pytest.raises(ValueError):
            parse_agent_spec(spec)
