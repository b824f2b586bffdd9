from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .analysis import border_candidates, corner_candidates, corners_to_exam, interesting_borders, is_corner
from .bitboard import MAX_BOARD_SIZE, popcount
from .board import Board, Disc, Move, apply, bit_to_move, is_terminal, legal_moves, no_move, try_clone
from .eval import score_heuristic
from .rng import shared_rng
from .strength import PROFILES

logger = logging.getLogger(__name__)

# Larger than any evaluator result (size^2 + margin <= 200).
INFINITY = 3 * MAX_BOARD_SIZE * MAX_BOARD_SIZE


@dataclass
class SearchResult:
    best_move: Move
    value: Optional[int]
    depth: int
    nodes: int
    time_ms: int
    reason: str = "search"


@dataclass
class _Context:
    root: Disc
    initial_depth: int
    newton: bool = False
    nodes: int = 0


def _next_depth(child: Board, mover: Disc, depth: int) -> int:
    # The opponent had to pass: the extra ply is free.
    if child.player is mover:
        return max(depth - 2, 0)
    return depth - 1


def _minimax(board: Board, depth: int, ctx: _Context) -> int:
    ctx.nodes += 1
    mover = board.player
    if depth == 0 or mover is None or not board.moves:
        return score_heuristic(board, ctx.root)

    maximizing = mover is ctx.root
    best = -INFINITY if maximizing else INFINITY
    for move in legal_moves(board):
        child = try_clone(board)
        if child is None:
            value = -INFINITY if maximizing else INFINITY
        else:
            apply(child, move)
            value = _minimax(child, _next_depth(child, mover, depth), ctx)
        if maximizing:
            best = max(best, value)
        else:
            best = min(best, value)
    return best


def _alphabeta(board: Board, depth: int, alpha: int, beta: int, ctx: _Context) -> int:
    ctx.nodes += 1
    mover = board.player
    if depth == 0 or mover is None or not board.moves:
        return score_heuristic(board, ctx.root)

    maximizing = mover is ctx.root
    best = -INFINITY if maximizing else INFINITY
    for move in legal_moves(board):
        if ctx.newton and is_corner(board.size, move):
            # A corner settles the line: stop here instead of searching past it.
            if maximizing and depth == ctx.initial_depth - 2:
                return board.size * board.size
            if not maximizing and depth == ctx.initial_depth - 1:
                return -INFINITY

        child = try_clone(board)
        if child is None:
            value = -INFINITY if maximizing else INFINITY
        else:
            apply(child, move)
            value = _alphabeta(child, _next_depth(child, mover, depth), alpha, beta, ctx)

        if maximizing:
            best = max(best, value)
            alpha = max(alpha, best)
        else:
            best = min(best, value)
            beta = min(beta, best)
        if alpha >= beta:
            break
    return best


def _ab_root(board: Board, candidates: List[Move], fallback: Move, ctx: _Context) -> Tuple[Move, Optional[int]]:
    """Pick among root candidates in order; the first best move wins ties.

    A candidate that wins on the spot is played at once and one that loses on
    the spot is never picked.
    """
    alpha = -INFINITY
    best_move, best_value = fallback, None
    for move in candidates:
        child = try_clone(board)
        if child is None:
            continue
        apply(child, move)
        if is_terminal(child):
            value = score_heuristic(child, ctx.root)
            if value > 0:
                return move, value
            if value < 0:
                continue
        else:
            value = _alphabeta(child, ctx.initial_depth, alpha, INFINITY, ctx)
        if value > alpha:
            alpha = value
            best_move, best_value = move, value
    return best_move, best_value


def _finish(result: SearchResult, start: float, strategy: str) -> SearchResult:
    result.time_ms = int((time.perf_counter() - start) * 1000)
    logger.debug(
        "%s: move=(%d, %d) value=%s depth=%d nodes=%d time=%dms reason=%s",
        strategy, result.best_move.row, result.best_move.column, result.value,
        result.depth, result.nodes, result.time_ms, result.reason,
    )
    return result


def random_search(board: Board, rng: Optional[random.Random] = None) -> SearchResult:
    rng = rng or shared_rng()
    moves = legal_moves(board)
    if not moves:
        return SearchResult(no_move(board.size), None, 0, 0, 0, "no-move")
    return SearchResult(rng.choice(moves), None, 0, 0, 0, "random")


def minimax_search(board: Board, rng: Optional[random.Random] = None, depth: Optional[int] = None) -> SearchResult:
    """Plain minimax; equally good root moves are sampled uniformly."""
    start = time.perf_counter()
    rng = rng or shared_rng()
    depth = PROFILES["minimax"].depth_for(board.size) if depth is None else depth
    moves = legal_moves(board)
    if board.player is None or not moves:
        return _finish(SearchResult(no_move(board.size), None, depth, 0, 0, "no-move"), start, "minimax")
    if len(moves) == 1:
        return _finish(SearchResult(moves[0], None, depth, 0, 0, "forced"), start, "minimax")

    ctx = _Context(board.player, depth)
    best_value = -INFINITY
    best_moves: List[Move] = []
    for move in moves:
        child = try_clone(board)
        if child is None:
            continue
        apply(child, move)
        value = _minimax(child, depth, ctx)
        if value > best_value or not best_moves:
            best_value = value
            best_moves = [move]
        elif value == best_value:
            best_moves.append(move)

    if not best_moves:
        return _finish(SearchResult(rng.choice(moves), None, depth, ctx.nodes, 0, "fallback"), start, "minimax")
    return _finish(SearchResult(rng.choice(best_moves), best_value, depth, ctx.nodes, 0), start, "minimax")


def alphabeta_search(board: Board, rng: Optional[random.Random] = None, depth: Optional[int] = None) -> SearchResult:
    start = time.perf_counter()
    rng = rng or shared_rng()
    depth = PROFILES["alphabeta"].depth_for(board.size) if depth is None else depth
    moves = legal_moves(board)
    if board.player is None or not moves:
        return _finish(SearchResult(no_move(board.size), None, depth, 0, 0, "no-move"), start, "alphabeta")
    fallback = rng.choice(moves)
    if len(moves) == 1:
        return _finish(SearchResult(moves[0], None, depth, 0, 0, "forced"), start, "alphabeta")

    ctx = _Context(board.player, depth)
    move, value = _ab_root(board, moves, fallback, ctx)
    return _finish(SearchResult(move, value, depth, ctx.nodes, 0), start, "alphabeta")


def newton_search(board: Board, rng: Optional[random.Random] = None, depth: Optional[int] = None) -> SearchResult:
    """Alpha/beta that first narrows the root to corners, then to safe edges."""
    start = time.perf_counter()
    rng = rng or shared_rng()
    depth = PROFILES["alphabeta"].depth_for(board.size) if depth is None else depth
    moves = legal_moves(board)
    if board.player is None or not moves:
        return _finish(SearchResult(no_move(board.size), None, depth, 0, 0, "no-move"), start, "newton")
    fallback = rng.choice(moves)
    if len(moves) == 1:
        return _finish(SearchResult(moves[0], None, depth, 0, 0, "forced"), start, "newton")

    size = board.size
    ctx = _Context(board.player, depth, newton=True)

    corners = corners_to_exam(board)
    if popcount(corners) == 1:
        move = bit_to_move(size, corners.bit_length() - 1)
        return _finish(SearchResult(move, None, depth, 0, 0, "corner"), start, "newton")
    if corners:
        move, value = _ab_root(board, corner_candidates(size, corners), fallback, ctx)
        return _finish(SearchResult(move, value, depth, ctx.nodes, 0, "corner"), start, "newton")

    borders = interesting_borders(board)
    if popcount(borders) == 1:
        move = bit_to_move(size, borders.bit_length() - 1)
        return _finish(SearchResult(move, None, depth, 0, 0, "border"), start, "newton")
    if borders:
        move, value = _ab_root(board, border_candidates(size, borders), fallback, ctx)
        return _finish(SearchResult(move, value, depth, ctx.nodes, 0, "border"), start, "newton")

    move, value = _ab_root(board, moves, fallback, ctx)
    return _finish(SearchResult(move, value, depth, ctx.nodes, 0), start, "newton")


def random_decide(board: Board, rng: Optional[random.Random] = None) -> Move:
    return random_search(board, rng).best_move


def minimax_decide(board: Board, rng: Optional[random.Random] = None, depth: Optional[int] = None) -> Move:
    return minimax_search(board, rng, depth).best_move


def alphabeta_decide(board: Board, rng: Optional[random.Random] = None, depth: Optional[int] = None) -> Move:
    return alphabeta_search(board, rng, depth).best_move


def newton_decide(board: Board, rng: Optional[random.Random] = None, depth: Optional[int] = None) -> Move:
    return newton_search(board, rng, depth).best_move


def minimax_value(board: Board, depth: int, root: Optional[Disc] = None) -> int:
    """Full-width minimax value of `board` for `root` (default: the mover)."""
    root = root or board.player or Disc.BLACK
    return _minimax(board, depth, _Context(root, depth))

