"""Game loop and contest mode"""

from .runner import GameOutcome, play_game, propose_move

__all__ = [
    'GameOutcome',
    'play_game',
    'propose_move',
]
