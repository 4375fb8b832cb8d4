import logging
import math
import unittest

import numpy as np

from dropbattle.agents.minimax.agent_code import MinimaxAgent, SearchResult
from dropbattle.agents.minimax.evaluator import evaluate
from dropbattle.config import ConfigurationError, SearchConfig
from dropbattle.constants import DRAW_SCORE, RED_TEAM, ROW_COUNT, YEL_TEAM
from dropbattle.game.board import Board

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DRAW_ROWS = [
    "RRRYYYRR" if r % 2 == 0 else "YYYRRRYY"
    for r in range(ROW_COUNT)
]

# Yellow threatens (6,3); red to move
THREE_IN_A_ROW = [
    "........",
    "........",
    "........",
    "........",
    "........",
    "RR......",
    "YYY.....",
]


def random_position(seed, num_moves):
    """Plays seeded random legal moves, stopping early if anyone connects four."""
    rng = np.random.default_rng(seed)
    board = Board()
    team = RED_TEAM
    for _ in range(num_moves):
        col = int(rng.choice(board.valid_moves()))
        row = board.drop_row(col)
        board.place(row, col, team)
        if board.has_line(team):
            board.clear(row, col)
            break
        team = YEL_TEAM if team == RED_TEAM else RED_TEAM
    return board


class TestMinimaxAgent(unittest.TestCase):
    def setUp(self):
        self.config = SearchConfig(ply=3, use_alpha_beta=True)
        self.agent = MinimaxAgent(self.config, team=YEL_TEAM)

    def search_both(self, board, depth, maximizing):
        self.config.set_algorithm("alphabeta")
        pruned = self.agent.choose_move(board, depth, maximizing)
        self.config.set_algorithm("minimax")
        full = self.agent.choose_move(board, depth, maximizing)
        return pruned, full

    def test_empty_board_picks_leftmost_column(self):
        result = self.agent.choose_move(Board(), depth=1, maximizing=True)
        self.assertIsInstance(result, SearchResult)
        self.assertEqual(result.column, 0)
        self.assertEqual(result.row, ROW_COUNT - 1)
        self.assertEqual(result.score, 0)

    def test_tie_break_keeps_lowest_column(self):
        for depth in (1, 2):
            for maximizing in (True, False):
                result = self.agent.choose_move(Board(), depth, maximizing)
                self.assertEqual(result.column, 0, f"depth={depth} maximizing={maximizing}")

    def test_completes_four_in_a_row(self):
        board = Board.from_rows(THREE_IN_A_ROW)
        for depth in (1, 2, 3):
            for algorithm in ("minimax", "alphabeta"):
                self.config.set_algorithm(algorithm)
                result = self.agent.choose_move(board, depth, maximizing=True)
                self.assertEqual(result.column, 3, f"depth={depth} algorithm={algorithm}")
                self.assertEqual(result.row, 6)
                self.assertGreaterEqual(result.score, 1000)

    def test_minimizer_blocks_four_in_a_row(self):
        red = MinimaxAgent(SearchConfig(ply=2), team=RED_TEAM)
        board = Board.from_rows(THREE_IN_A_ROW)
        self.assertEqual(red.select_move(board), 3)

    def test_search_does_not_mutate_board(self):
        board = Board.from_rows(THREE_IN_A_ROW)
        before = board.grid.copy()
        self.agent.choose_move(board, depth=3)
        self.assertTrue(np.array_equal(board.grid, before))

    def test_pruning_matches_full_minimax(self):
        saved_nodes = 0
        for seed in range(6):
            board = random_position(seed, num_moves=4 + 2 * seed)
            for depth in (1, 2, 3):
                for maximizing in (True, False):
                    pruned, full = self.search_both(board, depth, maximizing)
                    label = f"seed={seed} depth={depth} maximizing={maximizing}\n{board.to_string()}"
                    self.assertEqual(pruned.column, full.column, label)
                    self.assertEqual(pruned.row, full.row, label)
                    self.assertEqual(pruned.score, full.score, label)
                    self.assertLessEqual(pruned.nodes, full.nodes, label)
                    saved_nodes += full.nodes - pruned.nodes
        self.assertGreater(saved_nodes, 0, "Alpha-beta should skip some nodes.")

    def test_pruning_matches_full_minimax_at_depth_four(self):
        board = random_position(11, num_moves=8)
        pruned, full = self.search_both(board, 4, True)
        self.assertEqual((pruned.column, pruned.score), (full.column, full.score))
        self.assertLess(pruned.nodes, full.nodes)
        self.assertEqual(pruned.algorithm, "alphabeta")
        self.assertEqual(full.algorithm, "minimax")

    def test_toggling_algorithm_gives_same_move(self):
        board = random_position(3, num_moves=9)
        first = self.agent.choose_move(board)
        self.config.set_algorithm("minimax")
        second = self.agent.choose_move(board)
        self.config.set_algorithm("alphabeta")
        third = self.agent.choose_move(board)
        self.assertEqual(first.column, second.column)
        self.assertEqual(second.column, third.column)
        self.assertEqual(first.nodes, third.nodes)

    def test_depth_zero_returns_static_evaluation(self):
        board = Board.from_rows(THREE_IN_A_ROW)
        self.agent.nodes = 0
        self.assertEqual(self.agent.score_at(board, 0, True), evaluate(board))
        self.assertEqual(self.agent.nodes, 1)

    def test_existing_line_is_terminal(self):
        board = Board.from_rows(["........"] * 6 + ["YYYY...."])
        self.agent.nodes = 0
        self.assertEqual(self.agent.score_at(board, 3, False), evaluate(board))
        self.assertEqual(self.agent.nodes, 1)

    def test_full_board_mid_search_scores_as_draw(self):
        rows = list(DRAW_ROWS)
        # Leave only (0,3) open; yellow filling it restores the lineless draw pattern
        rows[0] = "RRR.YYRR"
        board = Board.from_rows(rows)
        self.assertEqual(board.valid_moves(), [3])
        result = self.agent.choose_move(board, depth=3, maximizing=True)
        self.assertEqual(result.column, 3)
        self.assertEqual(result.score, DRAW_SCORE)

    def test_score_at_full_board_is_draw_not_infinite(self):
        board = Board.from_rows(DRAW_ROWS)
        score = self.agent.score_at(board, 2, True)
        self.assertEqual(score, DRAW_SCORE)
        self.assertFalse(math.isinf(score))

    def test_no_legal_move_at_root(self):
        result = self.agent.choose_move(Board.from_rows(DRAW_ROWS), depth=2)
        self.assertIsNone(result.column)
        self.assertIsNone(result.row)
        self.assertEqual(result.score, DRAW_SCORE)

    def test_config_read_at_invocation(self):
        board = Board()
        self.config.set_ply(1)
        self.assertEqual(self.agent.choose_move(board).nodes, 1 + 8)
        self.config.set_ply(2)
        self.config.set_algorithm("minimax")
        self.assertEqual(self.agent.choose_move(board).nodes, 1 + 8 + 64)

    def test_invalid_depth(self):
        for bad in (0, -1, 1.5, True):
            with self.assertRaises(ConfigurationError):
                self.agent.choose_move(Board(), depth=bad)

    def test_result_is_frozen(self):
        result = self.agent.choose_move(Board(), depth=1)
        with self.assertRaises(AttributeError):
            result.column = 5


if __name__ == '__main__':
    unittest.main()
