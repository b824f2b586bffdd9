import builtins

import pytest

from reversi_ai import __version__
from reversi_ai.engine.boardio import format_board_file
from reversi_ai.engine.board import create_default
from reversi_ai.tools import cli

FAST_CONFIG = """\
[search.minimax]
default = 1
4 = 2

[search.alphabeta]
default = 1
4 = 2
"""


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "ensure_config", lambda: False)
    (tmp_path / "config.toml").write_text(FAST_CONFIG, encoding="utf-8")
    (tmp_path / "start.txt").write_text(format_board_file(create_default(4)), encoding="utf-8")
    (tmp_path / "broken.txt").write_text("X\n___\n", encoding="utf-8")
    (tmp_path / "over.txt").write_text("X\nXO\nOX\n", encoding="utf-8")
    return tmp_path


START_MOVES = {"b1", "a2", "d3", "c4"}


def test_version(capsys):
    assert cli.main(["-V"]) == 0
    assert f"reversi {__version__}" in capsys.readouterr().out


def test_contest_prints_one_move(workdir, capsys):
    assert cli.main(["--config", "config.toml", "-c3", "start.txt"]) == 0
    assert capsys.readouterr().out.strip() in START_MOVES


def test_bare_contest_flag_does_not_eat_the_file(workdir, capsys):
    assert cli.main(["--config", "config.toml", "-c", "start.txt"]) == 0
    assert capsys.readouterr().out.strip() in START_MOVES


def test_contest_verbose(workdir, capsys):
    assert cli.main(["--config", "config.toml", "--contest=2", "-v", "start.txt"]) == 0
    assert "The minimax AI proposed this move: " in capsys.readouterr().out


def test_contest_on_finished_board(workdir, capsys):
    assert cli.main(["--config", "config.toml", "-c1", "over.txt"]) == 0
    assert "No move possible." in capsys.readouterr().out


def test_only_first_file_without_all(workdir, capsys):
    assert cli.main(["--config", "config.toml", "-c1", "start.txt", "broken.txt"]) == 0
    assert len(capsys.readouterr().out.split()) == 1


def test_all_files_and_parse_errors(workdir, capsys):
    assert cli.main(["--config", "config.toml", "-a", "-c1", "broken.txt", "start.txt", "start.txt"]) == 1
    moves = capsys.readouterr().out.split()
    assert len(moves) == 2
    assert set(moves) <= START_MOVES


def test_ai_game_from_start(workdir, capsys):
    assert cli.main(["--config", "config.toml", "-s2", "-b3", "-w1", "--seed", "4", "-v"]) == 0
    out = capsys.readouterr().out
    assert "Black player (X) is alpha/beta AI and white player (O) is random AI." in out
    assert "Alpha/beta AI 'X' played the " in out
    assert "Thanks for playing, see you soon!" in out


def test_game_from_file(workdir, capsys):
    assert cli.main(["--config", "config.toml", "-b4", "-w2", "start.txt"]) == 0
    assert "Thanks for playing, see you soon!" in capsys.readouterr().out


def test_human_can_quit(workdir, monkeypatch, capsys):
    answers = iter(["q", "n"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    assert cli.main(["--config", "config.toml", "-s1", "-b1"]) == 0
    out = capsys.readouterr().out
    # 2x2 is over before anyone plays
    assert "Draw game, no winner." in out
    assert cli.main(["--config", "config.toml", "-s2", "-w1"]) == 0
    assert "Player 'X' resigned. Player 'O' win the game." in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["-b7"],
        ["--white-ai=x"],
        ["-s6"],
        ["-s0"],
        ["-c"],
        ["-c3"],
    ],
)
def test_usage_errors(workdir, argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--config", "config.toml"] + argv)
    assert exc.value.code == 2
