from reversi_ai.engine.analysis import (
    border_as_move,
    border_candidates,
    corner_as_move,
    corner_candidates,
    corners_to_exam,
    interesting_borders,
    is_corner,
    joint_movement,
)
from reversi_ai.engine.board import Move, apply, clone, create_default, create_from_cells, no_move


def bit(size, row, column):
    return 1 << (row * size + column)


def test_corner_helpers():
    assert [corner_as_move(4, i) for i in range(4)] == [Move(0, 0), Move(0, 3), Move(3, 0), Move(3, 3)]
    assert corner_as_move(4, 4) == no_move(4)
    assert is_corner(6, Move(5, 0))
    assert not is_corner(6, Move(0, 1))
    assert corner_candidates(4, bit(4, 3, 3) | bit(4, 0, 0)) == [Move(0, 0), Move(3, 3)]


def test_border_helpers():
    assert border_as_move(4, bit(4, 0, 2), 0) == Move(0, 2)
    assert border_as_move(4, bit(4, 2, 3), 2) == Move(2, 3)
    # not on that edge, or more than one bit
    assert border_as_move(4, bit(4, 1, 1), 0) == no_move(4)
    assert border_as_move(4, 0b110, 0) == no_move(4)
    mask = bit(4, 1, 0) | bit(4, 3, 2) | bit(4, 0, 1) | bit(4, 2, 3)
    assert border_candidates(4, mask) == [Move(0, 1), Move(3, 2), Move(2, 3), Move(1, 0)]


def test_joint_movement_needs_a_change_of_mover():
    b = create_default(4)
    assert joint_movement(b, None) == 0
    assert joint_movement(b, clone(b)) == 0


def test_no_playable_corner():
    assert corners_to_exam(create_default(8)) == 0


def test_single_playable_corner():
    b = create_from_cells(4, "X", ["_OX_", "____", "____", "__OX"])
    assert corners_to_exam(b) == bit(4, 0, 0)


def test_two_safe_corners_are_both_kept():
    b = create_from_cells(4, "X", ["_OX_", "____", "____", "_XO_"])
    assert corners_to_exam(b) == bit(4, 0, 0) | bit(4, 3, 3)


def test_corners_the_opponent_could_take_are_flagged():
    b = create_from_cells(4, "X", ["_OX_", "___O", "___X", "_XO_"])
    # after X takes a1, O can answer on d4; after d4, O can answer on d1
    assert corners_to_exam(b) == bit(4, 0, 3) | bit(4, 3, 3)


def test_start_edges_are_interesting():
    b = create_default(4)
    expected = bit(4, 0, 1) | bit(4, 1, 0) | bit(4, 2, 3) | bit(4, 3, 2)
    assert interesting_borders(b) == expected


def test_no_edge_moves_no_interest():
    assert interesting_borders(create_default(6)) == 0
    assert interesting_borders(create_default(2)) == 0


def test_edge_cleared_of_opponent():
    b = create_from_cells(4, "X", ["_OX_", "____", "____", "__OX"])
    assert interesting_borders(b) == bit(4, 3, 1)


def test_analysis_leaves_board_alone():
    b = create_from_cells(4, "X", ["_OX_", "___O", "___X", "_XO_"])
    before = clone(b)
    corners_to_exam(b)
    interesting_borders(b)
    assert b == before
    assert apply(b, Move(0, 0))


def test_corners_are_all_kept_when_none_is_dangerous():
    rows = ["_OXXXX", "______", "__OX__", "______", "______", "XXXXO_"]
    b = create_from_cells(6, "X", rows)
    # after either corner O can only answer on e3, which is no corner,
    # so nothing is dangerous and every playable corner comes back
    assert corners_to_exam(b) == bit(6, 0, 0) | bit(6, 5, 5)
    rows[5] = "XXXXX_"
    b = create_from_cells(6, "X", rows)
    assert corners_to_exam(b) == bit(6, 0, 0)


def test_edge_move_ending_in_a_draw_is_interesting():
    # b1 fills the board at 8-8
    b = create_from_cells(4, "X", ["O_OX", "OXXO", "XOOO", "XXOO"])
    assert interesting_borders(b) == bit(4, 0, 1)


def test_edge_move_ending_in_a_loss_is_not():
    b = create_from_cells(4, "X", ["O_OX", "OXXO", "XOOO", "XOOO"])
    assert interesting_borders(b) == 0


def test_edge_cleared_of_opponent_for_white():
    b = create_from_cells(4, "O", ["_XO_", "____", "____", "__XO"])
    assert interesting_borders(b) == bit(4, 3, 1)
