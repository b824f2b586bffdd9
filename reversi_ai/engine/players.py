from __future__ import annotations

import random
from enum import IntEnum
from typing import Any, Callable, Mapping, Optional

from ..tools.diag import log_event
from .board import Board, Move
from .search import SearchResult, alphabeta_search, minimax_search, newton_search, random_search
from .strength import get_depth_profile

Decider = Callable[[Board], Move]


class Strategy(IntEnum):
    HUMAN = 0
    RANDOM = 1
    MINIMAX = 2
    ALPHABETA = 3
    NEWTON = 4

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def profile(self) -> Optional[str]:
        """Name of the depth profile the strategy searches with."""
        if self is Strategy.MINIMAX:
            return "minimax"
        if self in (Strategy.ALPHABETA, Strategy.NEWTON):
            return "alphabeta"
        return None


_LABELS = {
    Strategy.HUMAN: "human",
    Strategy.RANDOM: "random AI",
    Strategy.MINIMAX: "minimax AI",
    Strategy.ALPHABETA: "alpha/beta AI",
    Strategy.NEWTON: "Newton AI",
}


def search(strategy: Strategy, board: Board, rng: Optional[random.Random] = None,
           depth: Optional[int] = None) -> SearchResult:
    if strategy is Strategy.RANDOM:
        result = random_search(board, rng)
    elif strategy is Strategy.MINIMAX:
        result = minimax_search(board, rng, depth)
    elif strategy is Strategy.ALPHABETA:
        result = alphabeta_search(board, rng, depth)
    elif strategy is Strategy.NEWTON:
        result = newton_search(board, rng, depth)
    else:
        raise ValueError(f"{strategy!r} does not search")
    log_event(
        "engine.search", "search_done",
        strategy=strategy.name.lower(), size=board.size,
        move=[result.best_move.row, result.best_move.column],
        value=result.value, depth=result.depth, nodes=result.nodes,
        time_ms=result.time_ms, reason=result.reason,
    )
    return result


def decide(strategy: Strategy, board: Board, rng: Optional[random.Random] = None,
           depth: Optional[int] = None) -> Move:
    if strategy is Strategy.HUMAN:
        from ..tools.human import human_decide
        return human_decide(board)
    return search(strategy, board, rng, depth).best_move


def make_decider(strategy: Strategy, config: Optional[Mapping[str, Any]] = None,
                 rng: Optional[random.Random] = None) -> Decider:
    """Bind a strategy, its configured depth profile and an rng into a decider."""
    strategy = Strategy(strategy)
    profile = get_depth_profile(strategy.profile, config) if strategy.profile else None

    def _decider(board: Board) -> Move:
        depth = profile.depth_for(board.size) if profile is not None else None
        return decide(strategy, board, rng, depth)

    _decider.__name__ = f"{strategy.name.lower()}_decider"
    return _decider
