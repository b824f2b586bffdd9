import random

from reversi_ai.engine.board import Disc, Move, create_default, legal_moves, resign_move
from reversi_ai.engine import players
from reversi_ai.engine.players import Strategy, make_decider
from reversi_ai.game import runner
from reversi_ai.game.runner import GameOutcome, play_game, propose_move


def test_random_game_runs_to_the_end():
    board = create_default(6)
    black = make_decider(Strategy.RANDOM, rng=random.Random(1))
    white = make_decider(Strategy.RANDOM, rng=random.Random(2))
    outcome = play_game(black, white, board, announce=False)
    assert board.player is None
    assert outcome.resigned is None
    assert outcome.moves_played >= 1
    s = outcome.score
    if s.black > s.white:
        assert outcome.winner is Disc.BLACK
    elif s.white > s.black:
        assert outcome.winner is Disc.WHITE
    else:
        assert outcome.winner is None


def test_ai_against_random():
    board = create_default(4)
    cfg = {"search": {"alphabeta": {"4": 3}}}
    black = make_decider(Strategy.NEWTON, cfg, random.Random(3))
    white = make_decider(Strategy.RANDOM, rng=random.Random(4))
    outcome = play_game(black, white, board, announce=False)
    assert board.player is None
    assert outcome.score.black + outcome.score.white <= 16


def test_resignation(capsys):
    board = create_default(4)
    outcome = play_game(lambda b: resign_move(b.size), lambda b: legal_moves(b)[0], board)
    assert outcome == GameOutcome(winner=Disc.WHITE, score=outcome.score, resigned=Disc.BLACK, moves_played=0)
    out = capsys.readouterr().out
    assert "Welcome to this reversi game!" in out
    assert "Player 'X' resigned. Player 'O' win the game." in out


def test_finished_board_is_a_draw(capsys):
    outcome = play_game(lambda b: resign_move(b.size), lambda b: resign_move(b.size), create_default(2))
    assert outcome.winner is None
    assert outcome.moves_played == 0
    out = capsys.readouterr().out
    assert "Welcome" not in out
    assert "Draw game, no winner." in out


def test_repeated_illegal_moves_count_as_resignation():
    calls = []

    def stubborn(board):
        calls.append(board.player)
        return Move(0, 0)

    outcome = play_game(stubborn, stubborn, create_default(4), announce=False)
    assert outcome.resigned is Disc.BLACK
    assert len(calls) == runner.MAX_ILLEGAL_ATTEMPTS


def test_events_are_logged(monkeypatch):
    events = []
    monkeypatch.setattr(runner, "log_event", lambda module, event, **kw: events.append((event, kw)))
    first = lambda b: legal_moves(b)[0]
    play_game(first, first, create_default(4), announce=False)
    names = [e for e, _ in events]
    assert names[-1] == "game_over"
    assert names.count("move_played") == len(names) - 1
    assert events[0][1]["move"] == "b1"
    assert events[0][1]["player"] == "X"


def test_propose_move():
    first = lambda b: legal_moves(b)[0]
    assert propose_move(first, create_default(2)) is None
    assert propose_move(first, create_default(8)) == Move(2, 3)


def test_runner_shares_the_decider_type():
    assert runner.Decider is players.Decider
