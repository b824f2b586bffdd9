from __future__ import annotations

import argparse
import sys
from time import perf_counter
from typing import List, Optional

from reversi_ai.engine.bitboard import check_size
from reversi_ai.engine.board import create_default
from reversi_ai.engine.perft import perft, play_moves


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="reversi-perft")
    p.add_argument("--depth", type=int, required=True)
    p.add_argument("--size", type=int, default=8, help="board side (even, 2..10)")
    p.add_argument("--position", type=str, default=None, help="comma-separated moves like d3,c5")
    args = p.parse_args(argv)

    if not check_size(args.size):
        p.error(f"bad board size: {args.size}")
    b = create_default(args.size)
    if args.position:
        try:
            b = play_moves(b, args.position.split(","), args.size)
        except ValueError as exc:
            p.error(str(exc))
    t0 = perf_counter()
    n = perft(b, args.depth)
    dt = perf_counter() - t0
    print(f"perft(size={args.size}, d={args.depth})={n} in {dt:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
