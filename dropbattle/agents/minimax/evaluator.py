# FILE: agents/minimax/evaluator.py

import numpy as np

from dropbattle.constants import RED_TEAM, WINDOW_SCORES, YEL_TEAM

_SCORE_TABLE = np.array(WINDOW_SCORES, dtype=np.int64)


def window_scores(board, team):
    """
    Per-cell heuristic for ``team``: for each of the team's pieces, the four
    windows anchored on it are scored by how many of the team's pieces they hold
    (2 -> 10, 3 -> 100, 4 -> 1000). Windows running off the board are not
    discarded; their off-board cells simply count for nothing.

    :return: (rows, columns) integer array, zero on cells the team does not hold.
    """
    mask, counts = board.window_counts(team)
    return _SCORE_TABLE[counts].sum(axis=0) * mask


def evaluate(board):
    """Static score of a position. Positive favours YEL_TEAM, negative RED_TEAM."""
    return int(window_scores(board, YEL_TEAM).sum() - window_scores(board, RED_TEAM).sum())
