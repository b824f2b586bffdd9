"""Keyboard player for the console game.

Accepted input is a column letter (either case) followed by a row number,
e.g. 'c4', 'C4' or 'j10'; spaces are ignored. 'q' or 'Q' quits, optionally
saving the position. Quitting, and end of input, return the resign move.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..engine.bitboard import MAX_BOARD_SIZE
from ..engine.board import Board, Move, is_move_valid, resign_move
from ..engine.boardio import render_board, write_board

logger = logging.getLogger(__name__)

MOVE_PROMPT = "Give your move (e.g. 'A5' or 'a5'), press 'q' or 'Q' to quit: "
QUIT_PROMPT = "Quitting, do you want to save this game (y/N)? "
DEFAULT_SAVE_FILENAME = "board.txt"


def _read(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        print()
        return None


def _strip(text: str) -> str:
    return "".join(text.split())


def parse_move_input(text: str, size: int) -> Move:
    """Turn one line of input into a move on a `size` board.

    Raises ValueError with the message shown to the player.
    """
    text = _strip(text)
    if not text:
        raise ValueError("Wrong input, try again!")
    col_char, rank = text[0], text[1:]
    if (not col_char.isascii() or not col_char.isalpha()
            or ord(col_char.lower()) - ord("a") >= MAX_BOARD_SIZE
            or not rank.isdigit() or rank.startswith("0")
            or not 1 <= int(rank) <= MAX_BOARD_SIZE):
        raise ValueError("This move is invalid. Wrong input, try again!")
    row = int(rank) - 1
    column = ord(col_char.lower()) - ord("a")
    if row >= size:
        raise ValueError("Row out of bounds. Wrong input, try again!")
    if column >= size:
        raise ValueError("Column out of bounds. Wrong input, try again!")
    return Move(row, column)


def save_dialog(board: Board, default: str = DEFAULT_SAVE_FILENAME) -> Optional[str]:
    answer = _read(f"Give a filename to save the game (default: '{default}'): ")
    filename = _strip(answer or "") or default
    print(f"\nYou choose '{filename}' as filename.")
    try:
        write_board(board, filename)
    except OSError as exc:
        logger.warning("saving to %s failed: %s", filename, exc)
        print(f"Error: The file {filename} can't be open.")
        return None
    print(f"\nBoard saved in '{filename}'. ")
    return filename


def _quit(board: Board, save_filename: str) -> Move:
    while True:
        answer = _read(QUIT_PROMPT)
        if answer is None:
            return resign_move(board.size)
        answer = _strip(answer).lower()
        if answer in ("", "n"):
            return resign_move(board.size)
        if answer == "y":
            save_dialog(board, save_filename)
            return resign_move(board.size)
        print("Wrong input, try again!\n")


def human_decide(board: Board, save_filename: str = DEFAULT_SAVE_FILENAME) -> Move:
    print(render_board(board), end="")
    while True:
        line = _read(MOVE_PROMPT)
        if line is None:
            logger.info("end of input, player resigns")
            return resign_move(board.size)
        if _strip(line).lower() == "q":
            return _quit(board, save_filename)
        try:
            move = parse_move_input(line, board.size)
        except ValueError as exc:
            print(f"{exc}\n")
            continue
        if not is_move_valid(board, move):
            print("This move is invalid. Wrong input, try again! (Choose a valid move from the '*').\n")
            continue
        return move
