import random

from reversi_ai.engine.board import Disc, Move, apply, create_default, create_from_cells, legal_moves
from reversi_ai.engine.eval import score_heuristic


def test_start_position_is_even():
    b = create_default(8)
    assert score_heuristic(b, Disc.BLACK) == 0
    assert score_heuristic(b, Disc.WHITE) == 0


def test_unfinished_game_scores_disc_margin():
    b = create_default(4)
    apply(b, Move(0, 1))
    assert score_heuristic(b, Disc.BLACK) == 3
    assert score_heuristic(b, Disc.WHITE) == -3


def test_finished_game_outranks_any_margin():
    b = create_from_cells(4, "X", ["_OX_", "____", "____", "__OX"])
    apply(b, Move(0, 0))
    apply(b, Move(3, 1))
    assert score_heuristic(b, Disc.BLACK) == 16 + 6
    assert score_heuristic(b, Disc.WHITE) == -(16 + 6)


def test_finished_draw_is_zero():
    assert score_heuristic(create_default(2), Disc.BLACK) == 0


def test_zero_sum_along_random_games():
    rng = random.Random(7)
    for size in (4, 6, 8):
        b = create_default(size)
        while b.player is not None:
            assert score_heuristic(b, Disc.BLACK) == -score_heuristic(b, Disc.WHITE)
            apply(b, rng.choice(legal_moves(b)))
        assert score_heuristic(b, Disc.BLACK) == -score_heuristic(b, Disc.WHITE)
