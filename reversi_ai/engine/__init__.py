"""Bitboard Reversi engine: board state, move generation and search"""

from .board import (
    Board,
    Disc,
    Move,
    Score,
    apply,
    clone,
    create_default,
    create_from_cells,
    current_mover,
    get_cell,
    is_terminal,
    legal_move_count,
    legal_moves,
    next_legal_move,
    no_move,
    resign_move,
    score,
)
from .players import Strategy, decide, make_decider

__all__ = [
    'Board',
    'Disc',
    'Move',
    'Score',
    'Strategy',
    'apply',
    'clone',
    'create_default',
    'create_from_cells',
    'current_mover',
    'decide',
    'get_cell',
    'is_terminal',
    'legal_move_count',
    'legal_moves',
    'make_decider',
    'next_legal_move',
    'no_move',
    'resign_move',
    'score',
]
