from .board import Board, InvalidMoveError
from .connect_four_game import ConnectFourGame

__all__ = [
    'Board',
    'InvalidMoveError',
    'ConnectFourGame',
]
