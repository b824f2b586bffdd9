"""Corner and edge safety analysis used by the Newton player.

Both analyses simulate candidate moves on clones of the position and return a
bitboard of the squares worth a closer look.
"""

from __future__ import annotations

from typing import Optional

from .bitboard import (
    border_masks,
    border_origins,
    border_steps,
    corner_bits,
    corners_mask,
    popcount,
    square_bit,
)
from .board import Board, Disc, Move, apply, bit_to_move, current_mover, is_terminal, no_move, try_clone
from .eval import score_heuristic


def is_corner(size: int, move: Move) -> bool:
    return bool(square_bit(size, move.row, move.column) & corners_mask(size))


def corner_as_move(size: int, index: int) -> Move:
    """Corner `index` in top-left, top-right, bottom-left, bottom-right order."""
    if not 0 <= index <= 3:
        return no_move(size)
    row = 0 if index < 2 else size - 1
    column = size - 1 if index % 2 == 1 else 0
    return Move(row, column)


def border_as_move(size: int, bit: int, border: int) -> Move:
    """Translate a single-bit mask lying on `border` into a move."""
    if popcount(bit) != 1 or not 0 <= border <= 3 or border_masks(size)[border] & bit != bit:
        return no_move(size)
    return bit_to_move(size, bit.bit_length() - 1)


def playable_corners(board: Board) -> int:
    return board.moves & corners_mask(board.size)


def joint_movement(actual: Board, following: Optional[Board]) -> int:
    """Squares the mover threatens now that the opponent still threatens next."""
    if following is None or current_mover(actual) == current_mover(following):
        return 0
    return actual.moves & following.moves


def corners_to_exam(board: Board) -> int:
    """Corners the mover should take care of.

    With zero or one playable corner that is the answer. Otherwise each
    playable corner is tried in turn, and any playable corner the opponent can
    still reach afterwards is dangerous. Dangerous corners win when there are any.
    """
    playable = playable_corners(board)
    if popcount(playable) <= 1:
        return playable
    dangerous = 0
    for index, bit in enumerate(corner_bits(board.size)):
        if not playable & bit:
            continue
        copy = try_clone(board)
        if copy is None:
            continue
        apply(copy, corner_as_move(board.size, index))
        dangerous |= playable & joint_movement(board, copy)
    return dangerous or playable


def _anchored(at_corner: bool, beyond: int, opponent: int, opponent_moves: int) -> bool:
    return at_corner or bool(beyond & (opponent | opponent_moves))


def interesting_borders(board: Board) -> int:
    """Non-corner edge moves that look safe for the mover.

    A move qualifies when it ends the game without losing, leaves the opponent
    without a move, drives the opponent (discs and replies) off that edge, or
    leaves a run of own discs along the edge that is closed at both ends by a
    corner, an opponent disc or an opponent reply.
    """
    player = current_mover(board)
    if player is None:
        return 0
    size = board.size
    borders = border_masks(size)
    origins = border_origins(size)
    steps = border_steps(size)
    interesting = 0

    for i in range(4):
        playable = borders[i] & board.moves
        if not playable:
            continue
        for j in range(1, size - 1):
            bit = origins[i] << (j * steps[i])
            if not bit & playable:
                continue
            copy = try_clone(board)
            if copy is None:
                continue
            apply(copy, border_as_move(size, bit, i))

            if is_terminal(copy):
                if score_heuristic(copy, player) >= 0:
                    interesting |= bit
                continue

            if player is Disc.BLACK:
                own, opponent = copy.black, copy.white
            else:
                own, opponent = copy.white, copy.black
            opponent_moves = 0 if current_mover(copy) == player else copy.moves

            if not opponent_moves or not (opponent | opponent_moves) & borders[i]:
                interesting |= bit
                continue

            low = high = j
            while low - 1 >= 0 and own & (origins[i] << ((low - 1) * steps[i])):
                low -= 1
            while high + 1 < size and own & (origins[i] << ((high + 1) * steps[i])):
                high += 1
            beyond_low = origins[i] << ((low - 1) * steps[i]) if low > 0 else 0
            beyond_high = origins[i] << ((high + 1) * steps[i]) if high < size - 1 else 0
            if (_anchored(low == 0, beyond_low, opponent, opponent_moves)
                    and _anchored(high == size - 1, beyond_high, opponent, opponent_moves)):
                interesting |= bit

    return interesting


def corner_candidates(size: int, mask: int) -> list[Move]:
    """Corners in `mask`, in corner_as_move() order."""
    return [corner_as_move(size, i) for i, bit in enumerate(corner_bits(size)) if mask & bit]


def border_candidates(size: int, mask: int) -> list[Move]:
    """Non-corner edge squares in `mask`: north, south, east then west edge."""
    origins = border_origins(size)
    steps = border_steps(size)
    found = []
    for i in range(4):
        for j in range(1, size - 1):
            bit = origins[i] << (j * steps[i])
            if mask & bit:
                found.append(border_as_move(size, bit, i))
    return found
