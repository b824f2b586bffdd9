from __future__ import annotations

from .board import Board, Disc, is_terminal, score


def score_heuristic(board: Board, perspective: Disc) -> int:
    """Zero-sum value of `board` for `perspective`.

    Finished games are worth size^2 plus the disc margin (0 for a draw), so any
    win outranks any unfinished position. Unfinished positions are worth the
    raw disc margin, whoever is to move.
    """
    s = score(board)
    diff = s.black - s.white
    if diff == 0:
        return 0
    leader = Disc.BLACK if diff > 0 else Disc.WHITE
    value = abs(diff)
    if is_terminal(board):
        value += board.size * board.size
    return value if perspective is leader else -value
