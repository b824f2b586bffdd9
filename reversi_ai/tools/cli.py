from __future__ import annotations

import argparse
import functools
import logging
import sys
from typing import Any, List, Mapping, Optional

from .. import __version__
from ..engine.bitboard import MAX_BOARD_SIZE, MIN_BOARD_SIZE, check_size
from ..engine.board import Board, Move, create_default, current_mover
from ..engine.boardio import BoardFileError, read_board, render_board
from ..engine.notation import move_to_notation
from ..engine.players import Decider, Strategy, make_decider
from ..engine.rng import init_rng
from ..game.runner import play_game, propose_move
from ..logging_setup import setup_logging
from .diag import ensure_config, load_config
from .human import DEFAULT_SAVE_FILENAME, human_decide

logger = logging.getLogger(__name__)

EPILOG = """\
Tactic list:        Size list:
  0 : human           1 : 2x2
  1 : random          2 : 4x4
  2 : minimax         3 : 6x6
  3 : alpha/beta      4 : 8x8
  4 : Newton          5 : 10x10

Example: reversi -s3 -b4 -w1 -v
         for a 6x6 board, black Newton AI against white random AI, verbose.
"""


def _tactic(value: str) -> Strategy:
    try:
        return Strategy(int(value))
    except ValueError:
        raise argparse.ArgumentTypeError("Please select tactic in [0,..,4].") from None


def _half_size(value: str) -> int:
    try:
        size = int(value) * 2
    except ValueError:
        size = 0
    if not check_size(size):
        raise argparse.ArgumentTypeError(
            f"Please select a size between {MIN_BOARD_SIZE // 2} and {MAX_BOARD_SIZE // 2}."
        )
    return size


# Like getopt, a tactic value must be attached (-b3, --black-ai=3); a bare flag
# takes its default and never consumes the next word.
_BARE_FLAGS = {
    "-b": "--black-ai=0",
    "--black-ai": "--black-ai=0",
    "-w": "--white-ai=0",
    "--white-ai": "--white-ai=0",
    "-c": "--contest=4",
    "--contest": "--contest=4",
}


def _expand_bare_flags(argv: List[str]) -> List[str]:
    out = []
    for i, arg in enumerate(argv):
        if arg == "--":
            return out + argv[i:]
        out.append(_BARE_FLAGS.get(arg, arg))
    return out


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="reversi",
        description="Play a reversi game with human or program players.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-s", "--size", type=_half_size, default=None, metavar="SIZE",
                   help="board size (min=1, max=5 (default: 4))")
    p.add_argument("-b", "--black-ai", type=_tactic,
                   default=Strategy.HUMAN, metavar="N", help="set tactic of black player (default: 0)")
    p.add_argument("-w", "--white-ai", type=_tactic,
                   default=Strategy.HUMAN, metavar="N", help="set tactic of white player (default: 0)")
    p.add_argument("-c", "--contest", type=_tactic,
                   default=None, metavar="N", help="enable 'contest' mode and set its tactic (default: 4)")
    p.add_argument("-a", "--all", action="store_true", help="process every file, not only the first")
    p.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    p.add_argument("-V", "--version", action="store_true", help="display version and exit")
    p.add_argument("--seed", type=int, default=None, help="seed the shared random generator")
    p.add_argument("--config", default=None, help="path to an alternate TOML config")
    p.add_argument("files", nargs="*", metavar="FILE", help="board files to play from")
    return p


def _player(strategy: Strategy, config: Mapping[str, Any], verbose: bool) -> Decider:
    if strategy is Strategy.HUMAN:
        save_filename = (config.get("game", {}) or {}).get("save_filename", DEFAULT_SAVE_FILENAME)
        decider: Decider = functools.partial(human_decide, save_filename=save_filename)
    else:
        decider = make_decider(strategy, config)
    if not verbose:
        return decider

    def _announce(board: Board) -> Move:
        mover = current_mover(board)
        move = decider(board)
        if 0 <= move.row < board.size and 0 <= move.column < board.size:
            print(f"{strategy.label[0].upper()}{strategy.label[1:]} '{mover.value}' played the "
                  f"{move_to_notation(move, upper=True)} move.\n")
        return move

    return _announce


def _play(board: Board, args: argparse.Namespace, config: Mapping[str, Any]) -> None:
    black = _player(args.black_ai, config, args.verbose)
    white = _player(args.white_ai, config, args.verbose)
    play_game(black, white, board, args.black_ai.label, args.white_ai.label)
    print(render_board(board), end="")
    print("Thanks for playing, see you soon!")


def _contest(board: Board, strategy: Strategy, config: Mapping[str, Any], verbose: bool) -> None:
    move = propose_move(make_decider(strategy, config), board)
    if move is None:
        print("No move possible.\n")
        return
    if verbose:
        print(f"\nThe {strategy.label} proposed this move: {move_to_notation(move)}\n")
    else:
        print(move_to_notation(move))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(_expand_bare_flags(sys.argv[1:] if argv is None else list(argv)))
    if args.version:
        print(f"\nreversi {__version__}\nThis software allows to play to reversi game.\n")
        return 0
    if args.contest is not None and not args.files:
        parser.error("The contest mode need a file.")

    if args.config is None:
        ensure_config()
    config = load_config(args.config)
    log_cfg = config.get("logging", {}) or {}
    setup_logging(
        overwrite=True,
        level=log_cfg.get("level", "DEBUG"),
        verbose=args.verbose,
        file_name=log_cfg.get("file"),
    )
    init_rng(args.seed)
    logger.info("reversi %s started: %s", __version__, vars(args))

    if not args.files:
        size = args.size or int((config.get("game", {}) or {}).get("default_size", 8))
        board = create_default(size)
        if board is None:
            parser.error(f"Impossible to init board of size {size}.")
        _play(board, args, config)
        return 0

    error = False
    files = args.files if args.all else args.files[:1]
    for path in files:
        try:
            board = read_board(path)
        except BoardFileError as exc:
            error = True
            logger.warning("Impossible to parse the file %s: %s", path, exc)
            continue
        if args.contest is not None:
            _contest(board, args.contest, config, args.verbose)
        else:
            _play(board, args, config)
    return 1 if error else 0


if __name__ == "__main__":
    sys.exit(main())
