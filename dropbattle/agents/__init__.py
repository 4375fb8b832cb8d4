# FILE: agents/__init__.py

from .base_agent import Agent
from .minimax import MinimaxAgent, SearchResult, evaluate

__all__ = [
    'Agent',
    'MinimaxAgent',
    'SearchResult',
    'evaluate',
]
