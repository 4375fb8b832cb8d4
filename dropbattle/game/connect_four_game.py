# FILE: game/connect_four_game.py

import logging
import numbers

from dropbattle.agents.minimax.agent_code import MinimaxAgent
from dropbattle.config import SearchConfig
from dropbattle.constants import COLUMN_COUNT, RED_TEAM, ROW_COUNT, YEL_TEAM, other_team
from dropbattle.game.board import Board

logger = logging.getLogger(__name__)

EVENTS = ("win", "draw", "reset", "board_changed")


class ConnectFourGame:
    """
    One human-vs-AI session: owns the live board, whose turn it is and the
    search settings. Renderers subscribe to events and feed clicks in through
    request_human_move.
    """

    def __init__(self, config=None, human_team=RED_TEAM, agent=None, rows=ROW_COUNT, columns=COLUMN_COUNT):
        if human_team not in (RED_TEAM, YEL_TEAM):
            raise ValueError(f"Invalid team: {human_team}. Must be {RED_TEAM} or {YEL_TEAM}.")
        self.rows = rows
        self.columns = columns
        agent_config = getattr(agent, "config", None)
        if config is not None and agent_config is not None and config is not agent_config:
            raise ValueError("The agent must search with the session's own SearchConfig.")
        self.config = config or agent_config or SearchConfig()
        self.human_team = human_team
        self.ai_team = other_team(human_team)
        self.agent = agent if agent is not None else MinimaxAgent(self.config, team=self.ai_team)
        self._listeners = {event: [] for event in EVENTS}
        self.board = Board(rows, columns)
        self.current_team = human_team

    def subscribe(self, event, callback):
        """Register a callback for 'win', 'draw', 'reset' or 'board_changed'."""
        if event not in self._listeners:
            raise ValueError(f"Unknown event: {event}. Must be one of {', '.join(EVENTS)}.")
        self._listeners[event].append(callback)

    def _notify(self, event, *args):
        for listener in self._listeners[event]:
            listener(*args)

    def reset(self):
        """Resets the game to initial state."""
        self.board = Board(self.rows, self.columns)
        self.current_team = self.human_team
        logger.info("Game reset.")
        self._notify("reset")
        self._notify("board_changed", self.board.copy())

    def set_ply(self, value):
        self.config.set_ply(value)

    def set_algorithm(self, name):
        self.config.set_algorithm(name)

    def apply_move(self, column, team):
        """
        Drop a piece for the given team in the specified column.

        :return: True if the piece was placed, False if the column is full or off the board.
        """
        if isinstance(column, str) and column.strip().isdigit():
            column = int(column)
        if isinstance(column, bool) or not isinstance(column, numbers.Integral):
            logger.warning(f"Invalid move: column {column!r} is not a column index.")
            return False
        column = int(column)
        row = self.board.drop_row(column)
        if row is None:
            logger.warning(f"Invalid move: Column {column} is full or out of bounds.")
            return False

        self.board.place(row, column, team)
        logger.debug(f"Team {team} placed in column {column}, row {row}.")
        self._notify("board_changed", self.board.copy())
        return True

    def _finish_if_over(self, team):
        if self.board.has_line(team):
            logger.info(f"Team {team} wins!\n{self.board.to_string()}")
            self._notify("win", team)
            self.reset()
            return team
        if self.board.is_full():
            logger.info(f"Draw.\n{self.board.to_string()}")
            self._notify("draw")
            self.reset()
            return "Draw"
        return None

    def after_move(self, team):
        """
        Settles the turn after ``team`` has moved: ends the game on a line or a
        full board, otherwise passes the turn and lets the AI answer.

        :return: Winning team, "Draw", or None while the game goes on.
        """
        outcome = self._finish_if_over(team)
        if outcome is not None:
            return outcome

        self.current_team = other_team(team)
        if self.current_team != self.ai_team:
            return None

        column = self.agent.select_move(self.board)
        if column is None or not self.apply_move(column, self.ai_team):
            logger.error(f"AI could not produce a legal move (got {column}).")
        else:
            outcome = self._finish_if_over(self.ai_team)
        self.current_team = self.human_team
        return outcome

    def request_human_move(self, column):
        """Entry point for the human's clicks. Ignored when it is not the human's turn."""
        if self.current_team != self.human_team:
            logger.warning(f"Ignoring move in column {column}: it is team {self.current_team}'s turn.")
            return False
        if not self.apply_move(column, self.human_team):
            return False
        self.after_move(self.human_team)
        return True

    def get_game_state(self):
        """Return the current game state."""
        if self.board.has_line(RED_TEAM):
            return RED_TEAM
        elif self.board.has_line(YEL_TEAM):
            return YEL_TEAM
        elif self.board.is_full():
            return "Draw"
        return "ONGOING"

    def get_board(self):
        """Return copy of current board state."""
        return self.board.copy()

    def board_to_string(self):
        return self.board.to_string()
