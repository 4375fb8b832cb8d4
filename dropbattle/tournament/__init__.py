from .run_tournament import play_game, run_tournament

__all__ = [
    'play_game',
    'run_tournament',
]
