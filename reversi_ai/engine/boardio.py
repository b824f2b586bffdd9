"""Board text files and console rendering.

File format::

    # comments run to the end of the line
    X
    _ _ _ _
    _ O X _
    _ X O _
    _ _ _ _

The first meaningful character is the side to move; each following line is
one row. Spaces and tabs are optional, blank lines are ignored.
"""

from __future__ import annotations

import logging
import pathlib
from typing import IO, List, Optional, Union

from .bitboard import MAX_BOARD_SIZE, check_size
from .board import Board, Disc, create_from_cells, current_mover, get_cell, score

logger = logging.getLogger(__name__)

_DISCS = {Disc.BLACK.value, Disc.WHITE.value, Disc.EMPTY.value}
_COLUMNS = "ABCDEFGHIJ"


class BoardFileError(ValueError):
    """Raised for a board file that cannot be turned into a board."""


def parse_board_text(text: str, source: str = "<string>") -> Board:
    mover: Optional[str] = None
    rows: List[List[str]] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0]
        cells = [ch for ch in line if ch not in " \t\r"]
        for ch in cells:
            if ch not in _DISCS:
                raise BoardFileError(f"{source}: wrong character {ch!r} at line {lineno}")
        if not cells:
            continue
        if mover is None:
            mover, cells = cells[0], cells[1:]
            if mover == Disc.EMPTY.value:
                raise BoardFileError(f"{source}: the player {mover!r} is not correct")
            if not cells:
                continue

        if not rows:
            if len(cells) > MAX_BOARD_SIZE:
                raise BoardFileError(
                    f"{source}: the first row contains more than {MAX_BOARD_SIZE} cells"
                )
            if not check_size(len(cells)):
                raise BoardFileError(f"{source}: the size {len(cells)} is not correct")
        else:
            size = len(rows[0])
            if len(rows) == size:
                raise BoardFileError(
                    f"{source}: the board is not a square: it has {size} column(s) "
                    f"and more than {size} row(s)"
                )
            if len(cells) < size:
                raise BoardFileError(
                    f"{source}: line {lineno} is not complete, {size - len(cells)} cell(s) missing"
                )
            if len(cells) > size:
                raise BoardFileError(f"{source}: too many cells at line {lineno}")
        rows.append(cells)

    if mover is None or not rows:
        raise BoardFileError(f"{source}: the file is empty")
    size = len(rows[0])
    if len(rows) != size:
        raise BoardFileError(f"{source}: the board is not a square: {size} column(s) x {len(rows)} row(s)")

    board = create_from_cells(size, mover, rows)
    if board is None:
        raise BoardFileError(f"{source}: invalid board")
    logger.debug("parsed %dx%d board from %s, mover=%s", size, size, source, current_mover(board))
    return board


def read_board(path: Union[str, pathlib.Path]) -> Board:
    path = pathlib.Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise BoardFileError(f"the file {path} can't be opened: {exc.strerror}") from exc
    return parse_board_text(text, source=str(path))


def format_board_file(board: Board) -> str:
    mover = current_mover(board)
    lines = [mover.value if mover is not None else Disc.EMPTY.value]
    for i in range(board.size):
        cells = []
        for j in range(board.size):
            disc = get_cell(board, i, j)
            cells.append(Disc.EMPTY.value if disc is Disc.HINT else disc.value)
        lines.append(" ".join(cells) + " ")
    return "\n".join(lines) + "\n"


def write_board(board: Board, dest: Union[str, pathlib.Path, IO[str]]) -> None:
    text = format_board_file(board)
    if hasattr(dest, "write"):
        dest.write(text)  # type: ignore[union-attr]
        return
    pathlib.Path(dest).write_text(text, encoding="utf-8")
    logger.info("board saved to %s", dest)


def render_board(board: Board) -> str:
    """Console view with row/column labels, hints and the score."""
    mover = current_mover(board)
    banner = mover.value if mover is not None else Disc.EMPTY.value
    out = [f"\n'{banner}' player's turn.\n", f"   {' '.join(_COLUMNS[:board.size])}"]
    for i in range(board.size):
        cells = " ".join(get_cell(board, i, j).value for j in range(board.size))
        out.append(f"{i + 1:>2} {cells} ")
    s = score(board)
    out.append(f"\nScore: '{Disc.BLACK.value}' = {s.black}, '{Disc.WHITE.value}' = {s.white}.\n\n")
    return "\n".join(out)
