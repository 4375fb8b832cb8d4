from .agent_code import MinimaxAgent, SearchResult
from .evaluator import evaluate, window_scores

__all__ = [
    'MinimaxAgent',
    'SearchResult',
    'evaluate',
    'window_scores',
]
