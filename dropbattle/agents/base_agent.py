# FILE: agents/base_agent.py

from abc import ABC, abstractmethod


class Agent(ABC):
    def __init__(self, team):
        self.team = team

    @abstractmethod
    def select_move(self, board):
        """
        Given the current board state, return the column number where the agent wants to drop its piece.
        """
        pass
