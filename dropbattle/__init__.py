# FILE: __init__.py

from .agents import MinimaxAgent, SearchResult
from .config import ConfigurationError, SearchConfig
from .game import Board, ConnectFourGame, InvalidMoveError
from .tournament import run_tournament

__all__ = [
    'MinimaxAgent',
    'SearchResult',
    'SearchConfig',
    'ConfigurationError',
    'Board',
    'ConnectFourGame',
    'InvalidMoveError',
    'run_tournament',
]
