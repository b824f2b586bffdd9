from __future__ import annotations

from functools import lru_cache
from typing import Callable, Tuple

# Boards are size x size with size even in [2, 10]; squares are numbered
# row * size + column, so (0, 0) is the least significant bit. A 10x10 board
# needs 100 bits, which Python ints hold natively.

MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = 10
DIRECTIONS = 8


def check_size(size: int) -> bool:
    return MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE and size % 2 == 0


@lru_cache(maxsize=None)
def full_mask(size: int) -> int:
    return (1 << (size * size)) - 1


def square_bit(size: int, row: int, column: int) -> int:
    """Single-bit mask for (row, column), or 0 when outside the board."""
    if not check_size(size) or not (0 <= row < size) or not (0 <= column < size):
        return 0
    return 1 << (row * size + column)


def popcount(x: int) -> int:
    return x.bit_count()


def iter_bits(bb: int):
    """Yield square indices of set bits, lowest first (row-major order)."""
    while bb:
        lsb = bb & -bb
        yield lsb.bit_length() - 1
        bb ^= lsb


# Shifts move every bit one square at once. The four orthogonal shifts rotate
# the row or column that falls off one edge back onto the opposite edge, so a
# shifted mask is toroidal. Ray walks must recheck coordinates against the
# direction deltas to discard anything that came through the wrap.

def shift_north(size: int, bb: int) -> int:
    if not check_size(size):
        return 0
    ones = ((1 << (size * (size - 1))) - 1) << size
    first_row = bb & ~ones
    rest = bb & ones
    return (rest >> size) | (first_row << ((size - 1) * size))


def shift_south(size: int, bb: int) -> int:
    if not check_size(size):
        return 0
    ones = (1 << (size * (size - 1))) - 1
    last_row = bb & ~ones & full_mask(size)
    rest = bb & ones
    return (rest << size) | (last_row >> ((size - 1) * size))


@lru_cache(maxsize=None)
def _columns_mask(size: int, first: int, last: int) -> int:
    row = 0
    for c in range(first, last + 1):
        row |= 1 << c
    mask = 0
    for r in range(size):
        mask |= row << (r * size)
    return mask


def shift_east(size: int, bb: int) -> int:
    if not check_size(size):
        return 0
    ones = _columns_mask(size, 0, size - 2)
    last_column = bb & ~ones & full_mask(size)
    rest = bb & ones
    return (rest << 1) | (last_column >> (size - 1))


def shift_west(size: int, bb: int) -> int:
    if not check_size(size):
        return 0
    ones = _columns_mask(size, 1, size - 1)
    first_column = bb & ~ones & full_mask(size)
    rest = bb & ones
    return (rest >> 1) | (first_column << (size - 1))


def shift_ne(size: int, bb: int) -> int:
    return shift_north(size, shift_east(size, bb))


def shift_se(size: int, bb: int) -> int:
    return shift_south(size, shift_east(size, bb))


def shift_sw(size: int, bb: int) -> int:
    return shift_south(size, shift_west(size, bb))


def shift_nw(size: int, bb: int) -> int:
    return shift_north(size, shift_west(size, bb))


Shift = Callable[[int, int], int]

# Each entry pairs a shift with the (row, column) step it walks. Shifting the
# opponent plane north and testing a square tests the square below it, so the
# walk direction is the opposite of the shift.
RAYS: Tuple[Tuple[Shift, int, int], ...] = (
    (shift_north, 1, 0),
    (shift_ne, 1, -1),
    (shift_east, 0, -1),
    (shift_se, -1, -1),
    (shift_south, -1, 0),
    (shift_sw, -1, 1),
    (shift_west, 0, 1),
    (shift_nw, 1, 1),
)


def run_length(size: int, opponent: int, row: int, column: int, ray: int) -> int:
    """Distance from (row, column) to the first non-opponent square along a ray.

    Returns 1 when the neighbour is not an opponent disc. The walk goes through
    the wrapped shift, so the caller must bound-check the end point.
    """
    shift = RAYS[ray][0]
    bit = square_bit(size, row, column)
    adversary = opponent
    gap = 0
    while True:
        adversary = shift(size, adversary)
        gap += 1
        if not adversary & bit:
            return gap


def ray_end(size: int, row: int, column: int, ray: int, gap: int) -> Tuple[int, int] | None:
    """End square of a walk, or None when the deltas leave the board."""
    _, drow, dcol = RAYS[ray]
    i = row + drow * gap
    j = column + dcol * gap
    if i < 0 or i >= size or j < 0 or j >= size:
        return None
    return i, j


# Corners and edges

def corners_mask(size: int) -> int:
    if not check_size(size):
        return 0
    corners = 1
    corners = (corners << (size - 1)) | corners
    corners = (corners << ((size - 1) * size)) | corners
    return corners


def corner_bits(size: int) -> Tuple[int, int, int, int]:
    """Top-left, top-right, bottom-left, bottom-right."""
    top_left = 1
    top_right = top_left << (size - 1)
    bottom_right = top_left << (size * size - 1)
    bottom_left = bottom_right >> (size - 1)
    return top_left, top_right, bottom_left, bottom_right


def border_masks(size: int) -> Tuple[int, int, int, int]:
    """North, south, east and west edge lines, corners included."""
    if not check_size(size):
        return 0, 0, 0, 0
    north = (1 << size) - 1
    south = north << ((size - 1) * size)
    west = 0
    for r in range(size):
        west |= 1 << (r * size)
    east = west << (size - 1)
    return north, south, east, west


def border_origins(size: int) -> Tuple[int, int, int, int]:
    """Low-index end of each edge line, in border_masks() order."""
    if not check_size(size):
        return 0, 0, 0, 0
    return 1, 1 << (size * (size - 1)), 1 << (size - 1), 1


def border_steps(size: int) -> Tuple[int, int, int, int]:
    """Bit distance between neighbours along each edge line."""
    return 1, 1, size, size
