"""Reversi (Othello) on even square boards from 2x2 to 10x10, with search AIs."""

__version__ = "1.0.0"
