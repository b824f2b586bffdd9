import builtins

import pytest

from reversi_ai.engine.board import Move, create_default, resign_move
from reversi_ai.engine.boardio import format_board_file
from reversi_ai.tools.human import human_decide, parse_move_input


def feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        print(prompt, end="")
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_parse_move_input():
    assert parse_move_input("c4", 4) == Move(3, 2)
    assert parse_move_input(" B 1 ", 4) == Move(0, 1)
    assert parse_move_input("j10", 10) == Move(9, 9)
    assert parse_move_input("A10", 10) == Move(9, 0)


@pytest.mark.parametrize(
    "text,message",
    [
        ("", "Wrong input"),
        ("   ", "Wrong input"),
        ("z1", "This move is invalid"),
        ("a", "This move is invalid"),
        ("a0", "This move is invalid"),
        ("a11", "This move is invalid"),
        ("1a", "This move is invalid"),
        ("a5", "Row out of bounds"),
        ("e1", "Column out of bounds"),
    ],
)
def test_parse_move_input_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_move_input(text, 4)


def test_reprompts_until_a_legal_move(monkeypatch, capsys):
    feed(monkeypatch, ["a1", "z9", "e1", "", " b 1"])
    assert human_decide(create_default(4)) == Move(0, 1)
    out = capsys.readouterr().out
    assert "Give your move (e.g. 'A5' or 'a5'), press 'q' or 'Q' to quit: " in out
    assert "(Choose a valid move from the '*')" in out
    assert "Column out of bounds" in out
    assert "Wrong input, try again!" in out


def test_quit_without_saving(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, ["Q", "n"])
    assert human_decide(create_default(4)) == resign_move(4)
    assert not (tmp_path / "board.txt").exists()


def test_quit_default_answer_is_no(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, ["q", ""])
    assert human_decide(create_default(4)) == resign_move(4)
    assert list(tmp_path.iterdir()) == []


def test_quit_and_save(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, ["q", "maybe", "y", ""])
    b = create_default(4)
    assert human_decide(b) == resign_move(4)
    assert (tmp_path / "board.txt").read_text() == format_board_file(b)
    out = capsys.readouterr().out
    assert "Quitting, do you want to save this game (y/N)? " in out
    assert "Board saved in 'board.txt'." in out


def test_quit_and_save_under_given_name(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, ["q", "Y", "my game.txt"])
    b = create_default(6)
    assert human_decide(b, save_filename="other.txt") == resign_move(6)
    assert (tmp_path / "mygame.txt").read_text() == format_board_file(b)


def test_end_of_input_resigns(monkeypatch):
    feed(monkeypatch, [])
    assert human_decide(create_default(8)) == resign_move(8)


def test_end_of_input_in_quit_dialog(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, ["q"])
    assert human_decide(create_default(4)) == resign_move(4)
    assert list(tmp_path.iterdir()) == []
