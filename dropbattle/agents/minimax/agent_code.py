# FILE: agents/minimax/agent_code.py

import logging
import math
import time
from dataclasses import dataclass
from typing import Optional

from dropbattle.agents.base_agent import Agent
from dropbattle.agents.minimax.evaluator import evaluate
from dropbattle.config import ConfigurationError, SearchConfig
from dropbattle.constants import DRAW_SCORE, RED_TEAM, YEL_TEAM

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Move picked at the root of a search, with its backed-up evaluation."""
    column: Optional[int]
    row: Optional[int]
    score: int
    nodes: int = 0
    algorithm: str = "alphabeta"
    time_ms: float = 0.0


class MinimaxAgent(Agent):
    def __init__(self, config: Optional[SearchConfig] = None, team=YEL_TEAM):
        """
        Initializes the MinimaxAgent.

        :param config: Search settings, read afresh at the start of every search.
        :param team: YEL_TEAM searches as the maximizing side, RED_TEAM as the minimizing side.
        """
        super().__init__(team)
        self.config = config if config is not None else SearchConfig()
        self.nodes = 0
        logger.info(f"MinimaxAgent initialized with team {self.team}, depth {self.config.ply}, algorithm {self.config.algorithm}")

    def select_move(self, board):
        """
        Selects the column to play for this agent's team on the given board.

        :return: Column index, or None when the game is already over.
        """
        return self.choose_move(board).column

    def choose_move(self, board, depth=None, maximizing=None) -> SearchResult:
        """
        Root of the search. Explores every legal column in increasing order and
        keeps the first one with the best backed-up evaluation.

        :param board: Position to search. It is copied, never mutated.
        :param depth: Plies to look ahead; defaults to the configured ply.
        :param maximizing: Side to move; defaults to this agent's team.
        :return: SearchResult. ``column`` is None when no move can be made.
        """
        if depth is None:
            depth = self.config.ply
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
            raise ConfigurationError(f"Invalid search depth: {depth!r}. Must be a positive integer.")
        if maximizing is None:
            maximizing = self.team == YEL_TEAM
        use_alpha_beta = self.config.use_alpha_beta
        algorithm = "alphabeta" if use_alpha_beta else "minimax"

        self.nodes = 0
        start_time = time.perf_counter()
        score, column, row = self._search(board.copy(), depth, maximizing, -math.inf, math.inf, use_alpha_beta)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.info(f"Search time ({algorithm}, depth {depth}): {elapsed_ms:.2f} ms, {self.nodes} nodes")
        if column is None:
            logger.warning(f"No move available on position:\n{board.to_string()}")
        else:
            logger.debug(f"Selected column {column} (row {row}) with score {score}")
        return SearchResult(column, row, score, self.nodes, algorithm, elapsed_ms)

    def score_at(self, board, depth, maximizing, alpha=-math.inf, beta=math.inf, use_alpha_beta=None):
        """
        Backed-up evaluation of a position searched ``depth`` plies deep.

        :param alpha: Best value the maximizer is already guaranteed.
        :param beta: Best value the minimizer is already guaranteed.
        :param use_alpha_beta: Overrides the configured algorithm when given.
        """
        if use_alpha_beta is None:
            use_alpha_beta = self.config.use_alpha_beta
        return self._search(board, depth, maximizing, alpha, beta, use_alpha_beta)[0]

    def _search(self, board, depth, maximizing, alpha, beta, use_alpha_beta):
        """
        Minimax walk over ``board``, placing and undoing pieces in place.

        :return: Tuple of (value, column, row); column and row are None at leaves.
        """
        self.nodes += 1
        if depth == 0 or board.has_line(YEL_TEAM) or board.has_line(RED_TEAM):
            return evaluate(board), None, None

        team = YEL_TEAM if maximizing else RED_TEAM
        best_value = -math.inf if maximizing else math.inf
        best_column = None
        best_row = None

        for col in range(board.columns):
            if not board.is_valid_move(col):
                continue
            with board.dropped(col, team) as row:
                value = self._search(board, depth - 1, not maximizing, alpha, beta, use_alpha_beta)[0]

            if maximizing:
                if value > best_value:
                    best_value, best_column, best_row = value, col, row
                if use_alpha_beta:
                    alpha = max(alpha, value)
            else:
                if value < best_value:
                    best_value, best_column, best_row = value, col, row
                if use_alpha_beta:
                    beta = min(beta, value)
            if use_alpha_beta and beta <= alpha:
                break

        if best_column is None:
            # Full board above the depth limit: a draw, not an unbounded sentinel
            return DRAW_SCORE, None, None
        return best_value, best_column, best_row
