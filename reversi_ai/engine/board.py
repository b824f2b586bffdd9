from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence

from .bitboard import (
    DIRECTIONS,
    RAYS,
    check_size,
    full_mask,
    iter_bits,
    popcount,
    ray_end,
    run_length,
    square_bit,
)

logger = logging.getLogger(__name__)


class Disc(str, Enum):
    BLACK = "X"
    WHITE = "O"
    EMPTY = "_"
    HINT = "*"

    def opponent(self) -> "Disc":
        if self is Disc.BLACK:
            return Disc.WHITE
        if self is Disc.WHITE:
            return Disc.BLACK
        raise ValueError(f"{self!r} has no opponent")


@dataclass(frozen=True)
class Move:
    row: int
    column: int


def resign_move(size: int) -> Move:
    """Sentinel returned by a player who gives up."""
    return Move(size, size)


def no_move(size: int) -> Move:
    """Sentinel for "no move could be computed"."""
    return Move(size + 1, size + 1)


def is_on_board(size: int, move: Move) -> bool:
    return 0 <= move.row < size and 0 <= move.column < size


class Score(NamedTuple):
    black: int
    white: int


@dataclass
class Board:
    size: int
    player: Optional[Disc]  # None once nobody can move
    black: int = 0
    white: int = 0
    moves: int = 0  # legal moves of `player`
    cursor: int = 0  # undrained part of `moves` for next_legal_move()


def compute_moves(size: int, player: int, opponent: int) -> int:
    """Legal-move mask for the side owning `player` against `opponent`.

    For every own disc and every direction, skip the run of opponent discs; the
    square right after the run is a move when the run is non-empty, the square
    is on the board and it is empty.
    """
    possible = 0
    occupied = player | opponent
    for sq in iter_bits(player):
        row, col = divmod(sq, size)
        for d in range(DIRECTIONS):
            gap = run_length(size, opponent, row, col, d)
            if gap <= 1:
                continue
            end = ray_end(size, row, col, d, gap)
            if end is None:
                continue
            bit = square_bit(size, end[0], end[1])
            if not bit & occupied:
                possible |= bit
    return possible


def flip_mask(size: int, player: int, opponent: int, move: Move) -> int:
    """Opponent discs bracketed between `move` and an existing `player` disc."""
    flips = 0
    for d in range(DIRECTIONS):
        gap = run_length(size, opponent, move.row, move.column, d)
        if gap <= 1:
            continue
        end = ray_end(size, move.row, move.column, d, gap)
        if end is None or not player & square_bit(size, end[0], end[1]):
            continue
        _, drow, dcol = RAYS[d]
        for t in range(1, gap):
            flips |= square_bit(size, move.row + drow * t, move.column + dcol * t)
    return flips


def _planes(board: Board, disc: Disc):
    if disc is Disc.BLACK:
        return board.black, board.white
    return board.white, board.black


def _refresh(board: Board) -> None:
    if board.player is None:
        board.moves = 0
    else:
        own, opp = _planes(board, board.player)
        board.moves = compute_moves(board.size, own, opp)
    board.cursor = 0


# Construction

def alloc(size: int, mover: Disc) -> Optional[Board]:
    if not check_size(size) or mover not in (Disc.BLACK, Disc.WHITE):
        return None
    return Board(size=size, player=mover)


def create_default(size: int) -> Optional[Board]:
    """Starting layout: two discs of each colour on the centre diagonals."""
    board = alloc(size, Disc.BLACK)
    if board is None:
        return None
    half = size // 2
    board.white = square_bit(size, half - 1, half - 1) | square_bit(size, half, half)
    board.black = square_bit(size, half - 1, half) | square_bit(size, half, half - 1)
    if size == 2:
        # Nobody can ever move on a 2x2 board.
        board.player = None
    _refresh(board)
    return board


def _as_disc(value) -> Optional[Disc]:
    try:
        return Disc(value)
    except ValueError:
        return None


def create_from_cells(size: int, mover, cells: Sequence[Iterable]) -> Optional[Board]:
    """Build a board from explicit rows of cells, or None if anything is off.

    After loading, the pass rule is applied once so the returned board is
    always in a consistent turn state.
    """
    mover = _as_disc(mover)
    board = alloc(size, mover) if mover is not None else None
    if board is None:
        return None
    rows = [list(r) for r in cells]
    if len(rows) != size:
        logger.debug("create_from_cells: %d rows for size %d", len(rows), size)
        return None
    for r, row in enumerate(rows):
        if len(row) != size:
            logger.debug("create_from_cells: row %d has %d cells", r, len(row))
            return None
        for c, value in enumerate(row):
            disc = _as_disc(value)
            if disc is None or disc is Disc.HINT:
                logger.debug("create_from_cells: bad cell %r at (%d, %d)", value, r, c)
                return None
            bit = square_bit(size, r, c)
            if disc is Disc.BLACK:
                board.black |= bit
            elif disc is Disc.WHITE:
                board.white |= bit
    _refresh(board)
    _apply_pass_rule(board)
    return board


def clone(board: Board) -> Board:
    return Board(board.size, board.player, board.black, board.white, board.moves, board.cursor)


def try_clone(board: Board) -> Optional[Board]:
    """clone(), or None when memory runs out."""
    try:
        return clone(board)
    except MemoryError:
        logger.warning("board clone failed: out of memory")
        return None


# Queries

def get_cell(board: Board, row: int, column: int) -> Disc:
    bit = square_bit(board.size, row, column)
    if not bit:
        return Disc.EMPTY
    if board.black & bit:
        return Disc.BLACK
    if board.white & bit:
        return Disc.WHITE
    if board.moves & bit:
        return Disc.HINT
    return Disc.EMPTY


def current_mover(board: Board) -> Optional[Disc]:
    return board.player


def is_terminal(board: Board) -> bool:
    return board.player is None


def legal_move_count(board: Board) -> int:
    if board.player is None:
        return 0
    return popcount(board.moves)


def score(board: Board) -> Score:
    return Score(popcount(board.black), popcount(board.white))


def is_move_valid(board: Board, move: Move) -> bool:
    if board.player is None:
        return False
    return bool(square_bit(board.size, move.row, move.column) & board.moves)


def bit_to_move(size: int, sq: int) -> Move:
    row, col = divmod(sq, size)
    return Move(row, col)


def legal_moves(board: Board) -> List[Move]:
    """Legal moves in row-major order; leaves the cursor alone."""
    return [bit_to_move(board.size, sq) for sq in iter_bits(board.moves)]


def next_legal_move(board: Board) -> Move:
    """Drain the enumeration cursor one move at a time, row-major.

    An empty cursor is refilled from the legal-move mask, so a drained board
    starts over on the next call.
    """
    if board.moves == 0:
        return no_move(board.size)
    if board.cursor == 0:
        board.cursor = board.moves
    lsb = board.cursor & -board.cursor
    board.cursor ^= lsb
    return bit_to_move(board.size, lsb.bit_length() - 1)


# Mutation

def set_mover(board: Board, mover: Optional[Disc]) -> None:
    if mover is Disc.HINT or mover is Disc.EMPTY:
        mover = None
    board.player = mover
    _refresh(board)


def set_cell(board: Board, disc: Disc, row: int, column: int) -> None:
    bit = square_bit(board.size, row, column)
    if not bit:
        return
    if disc is Disc.BLACK:
        board.black |= bit
        board.white &= ~bit
    elif disc is Disc.WHITE:
        board.white |= bit
        board.black &= ~bit
    elif disc is Disc.EMPTY:
        board.black &= ~bit
        board.white &= ~bit
    else:
        return
    _refresh(board)


def _apply_pass_rule(board: Board) -> None:
    if board.player is None or board.moves:
        return
    set_mover(board, board.player.opponent())
    if not board.moves:
        set_mover(board, None)


def apply(board: Board, move: Move) -> bool:
    """Play `move` for the current mover; False (board untouched) if illegal.

    After the flips the turn passes to the opponent, comes back when the
    opponent cannot move, and the board turns terminal when neither can.
    """
    if not is_move_valid(board, move):
        return False
    mover = board.player
    bit = square_bit(board.size, move.row, move.column)
    own, opp = _planes(board, mover)
    flips = flip_mask(board.size, own, opp, move)
    own = (own | bit | flips) & full_mask(board.size)
    opp &= ~flips
    if mover is Disc.BLACK:
        board.black, board.white = own, opp
    else:
        board.white, board.black = own, opp
    board.player = mover.opponent()
    _refresh(board)
    _apply_pass_rule(board)
    return True
