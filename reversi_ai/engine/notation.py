"""
Coordinate notation for Reversi moves.

Columns are letters starting at 'a', rows are numbers starting at 1, so the
top-left square is 'a1' and the bottom-right square of a 10x10 board is 'j10'.
"""

from __future__ import annotations

from .bitboard import MAX_BOARD_SIZE
from .board import Move


def move_to_notation(move: Move, upper: bool = False) -> str:
    """Convert a move to coordinate notation (e.g., 'c4')."""
    if not (0 <= move.row < MAX_BOARD_SIZE and 0 <= move.column < MAX_BOARD_SIZE):
        raise ValueError(f"Invalid move: {move}")
    file_char = chr(ord('A' if upper else 'a') + move.column)
    return f"{file_char}{move.row + 1}"


def notation_to_move(notation: str, size: int = MAX_BOARD_SIZE) -> Move:
    """Convert coordinate notation (e.g., 'C4' or 'c4') to a move on a `size` board."""
    text = "".join(notation.split())
    if len(text) < 2 or len(text) > 3:
        raise ValueError(f"Invalid notation format: {notation}")

    file_char = text[0].lower()
    rank_text = text[1:]
    if not file_char.isalpha() or not rank_text.isdigit() or rank_text.startswith("0"):
        raise ValueError(f"Invalid notation format: {notation}")

    column = ord(file_char) - ord('a')
    row = int(rank_text) - 1
    if column < 0 or column >= size or row < 0 or row >= size:
        raise ValueError(f"Invalid notation: {notation}")
    return Move(row, column)


def moves_to_string(moves: list[Move]) -> str:
    """Comma-separated notation; row numbers have one or two digits."""
    return ",".join(move_to_notation(m) for m in moves)


def string_to_moves(moves_str: str, size: int = MAX_BOARD_SIZE) -> list[Move]:
    if not moves_str:
        return []
    return [notation_to_move(part, size) for part in moves_str.split(",") if part.strip()]
