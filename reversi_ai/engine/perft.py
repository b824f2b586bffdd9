from __future__ import annotations

from typing import Iterable, Optional

from .board import Board, apply, clone, create_default, is_terminal, legal_moves
from .notation import notation_to_move


def perft(board: Board, depth: int) -> int:
    """Count positions `depth` moves ahead; finished games count as leaves."""
    if depth == 0 or is_terminal(board):
        return 1
    total = 0
    for move in legal_moves(board):
        child = clone(board)
        apply(child, move)
        total += perft(child, depth - 1)
    return total


def play_moves(board: Optional[Board], moves: Iterable[str], size: int = 8) -> Board:
    b = create_default(size) if board is None else clone(board)
    if b is None:
        raise ValueError(f"bad board size: {size}")
    for mv in moves:
        move = notation_to_move(mv, b.size)
        if not apply(b, move):
            raise ValueError(f"illegal move: {mv}")
    return b
