from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..engine.board import (
    Board,
    Disc,
    Move,
    Score,
    apply,
    current_mover,
    legal_move_count,
    resign_move,
    score,
)
from ..engine.notation import move_to_notation
from ..engine.players import Decider
from ..tools.diag import log_event

logger = logging.getLogger(__name__)

# A decider that keeps proposing illegal moves is treated as resigning.
MAX_ILLEGAL_ATTEMPTS = 3


@dataclass
class GameOutcome:
    winner: Optional[Disc]  # None for a draw
    score: Score
    resigned: Optional[Disc] = None
    moves_played: int = 0

    @property
    def message(self) -> str:
        if self.resigned is not None:
            return (f"Player '{self.resigned.value}' resigned. "
                    f"Player '{self.resigned.opponent().value}' win the game.")
        if self.winner is None:
            return "Draw game, no winner."
        return f"Player '{self.winner.value}' win the game."


def _winner(s: Score) -> Optional[Disc]:
    if s.black > s.white:
        return Disc.BLACK
    if s.white > s.black:
        return Disc.WHITE
    return None


def play_game(black: Decider, white: Decider, board: Board, black_label: str = "human",
              white_label: str = "human", announce: bool = True) -> GameOutcome:
    """Alternate the two deciders on `board` (in place) until the game ends.

    The game ends when nobody can move or a decider returns the resign move.
    """
    mover = current_mover(board)
    if mover is not None and announce:
        print(f"\nWelcome to this reversi game!\n"
              f"Black player ({Disc.BLACK.value}) is {black_label} and "
              f"white player ({Disc.WHITE.value}) is {white_label}.\n"
              f"{'Black' if mover is Disc.BLACK else 'White'} player start!\n")

    played = 0
    illegal = 0
    resigned: Optional[Disc] = None
    while (mover := current_mover(board)) is not None:
        decider = black if mover is Disc.BLACK else white
        move = decider(board)
        if move == resign_move(board.size):
            resigned = mover
            break
        if not apply(board, move):
            illegal += 1
            logger.warning("%s proposed illegal move (%d, %d)", mover.name.lower(), move.row, move.column)
            if illegal >= MAX_ILLEGAL_ATTEMPTS:
                resigned = mover
                break
            continue
        illegal = 0
        played += 1
        log_event("game.move", "move_played", player=mover.value,
                  move=move_to_notation(move), ply=played)

    s = score(board)
    outcome = GameOutcome(
        winner=resigned.opponent() if resigned is not None else _winner(s),
        score=s,
        resigned=resigned,
        moves_played=played,
    )
    log_event("game.end", "game_over",
              winner=outcome.winner.value if outcome.winner else None,
              black=s.black, white=s.white,
              resigned=resigned.value if resigned else None, moves=played)
    if announce:
        print(f"\n{outcome.message}")
    return outcome


def propose_move(decider: Decider, board: Board) -> Optional[Move]:
    """One move for the side to play, or None when it has no legal move."""
    if legal_move_count(board) == 0:
        return None
    return decider(board)
