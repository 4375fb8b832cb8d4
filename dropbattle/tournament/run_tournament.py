# FILE: tournament/run_tournament.py

import json
import logging
import os

from dropbattle.agents.minimax.agent_code import MinimaxAgent
from dropbattle.config import SearchConfig
from dropbattle.constants import COLUMN_COUNT, RED_TEAM, ROW_COUNT, YEL_TEAM, other_team
from dropbattle.game.board import Board

logger = logging.getLogger(__name__)

TEAM_NAMES = {RED_TEAM: "red", YEL_TEAM: "yellow"}


def agent_name(agent):
    return f"{agent.__class__.__name__}[{TEAM_NAMES[agent.team]}]"


def play_game(agents, start_team, rows=ROW_COUNT, columns=COLUMN_COUNT):
    """
    Plays one game between agents on opposite teams.

    :return: Tuple (winning team or None for a draw, final board).
    """
    by_team = {agent.team: agent for agent in agents}
    board = Board(rows, columns)
    team = start_team
    while True:
        column = by_team[team].select_move(board)
        row = board.drop_row(column) if column is not None else None
        if row is None:
            logger.error(f"{agent_name(by_team[team])} chose illegal column {column}; forfeits.")
            return other_team(team), board
        board.place(row, column, team)
        if board.has_line(team):
            return team, board
        if board.is_full():
            return None, board
        team = other_team(team)


def run_tournament(agents, num_games=100, results_dir=None, rows=ROW_COUNT, columns=COLUMN_COUNT):
    """
    Plays ``num_games`` games, alternating which team opens.

    Minimax agents are deterministic: between two of them every game with the
    same opener is identical, so only two distinct games are ever played and
    larger ``num_games`` just multiplies those results.

    :param agents: Two agents, one per team.
    :param results_dir: If given, totals are written to tournament_results.json there.
    :return: Dict of wins per agent name plus 'draws'.
    """
    if sorted(agent.team for agent in agents) != [RED_TEAM, YEL_TEAM]:
        raise ValueError("run_tournament needs exactly one agent per team.")

    results = {agent_name(agent): 0 for agent in agents}
    results['draws'] = 0
    by_team = {agent.team: agent for agent in agents}

    for i in range(num_games):
        start_team = RED_TEAM if (i % 2) == 0 else YEL_TEAM
        winner, board = play_game(agents, start_team, rows, columns)
        if winner is None:
            results['draws'] += 1
        else:
            results[agent_name(by_team[winner])] += 1
        logger.info(f"Final board for game {i + 1}:\n{board.to_string()}")

    if results_dir is not None:
        os.makedirs(results_dir, exist_ok=True)
        path = os.path.join(results_dir, 'tournament_results.json')
        with open(path, 'w') as f:
            json.dump(results, f, indent=4)
        logger.info(f"Tournament completed. Results saved to {path}")
    return results


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    agent1 = MinimaxAgent(SearchConfig(ply=4, use_alpha_beta=True), team=YEL_TEAM)
    agent2 = MinimaxAgent(SearchConfig(ply=2, use_alpha_beta=False), team=RED_TEAM)
    run_tournament([agent1, agent2], num_games=2, results_dir=os.path.join('tournament', 'results'))
