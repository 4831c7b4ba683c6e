import random

import pygame
import pytest

from gamedevquiz.app import handle_event, handle_key, main, shuffle_questions
from gamedevquiz.game import LEVELS, Game, Lifeline, State
from gamedevquiz.questions import Question


def make_game():
    questions = [
        Question(f"Question {i}", ("w", "x", "y", "z"), 0) for i in range(LEVELS)
    ]
    return Game(questions, random.Random(7))


def test_shuffle_is_permutation_and_keeps_input():
    items = list(range(20))
    result = shuffle_questions(items, random.Random(1))
    assert sorted(result) == items
    assert items == list(range(20))


def test_shuffle_is_deterministic_for_seed():
    items = list(range(30))
    first = shuffle_questions(items, random.Random(42))
    second = shuffle_questions(items, random.Random(42))
    assert first == second


def test_shuffle_short_lists():
    assert shuffle_questions([], random.Random(0)) == []
    assert shuffle_questions(["only"], random.Random(0)) == ["only"]


def test_title_enter_starts():
    game = make_game()
    assert handle_key(game, pygame.K_RETURN) is True
    assert game.state is State.QUESTION


def test_title_ignores_other_keys():
    game = make_game()
    assert handle_key(game, pygame.K_a) is True
    assert game.state is State.TITLE


def test_escape_quits_without_change():
    game = make_game()
    assert handle_key(game, pygame.K_ESCAPE) is False
    assert game.state is State.TITLE


def test_select_and_back():
    game = make_game()
    game.start()
    handle_key(game, pygame.K_c)
    assert game.state is State.CONFIRM
    assert game.pending == "C"
    handle_key(game, pygame.K_BACKSPACE)
    assert game.state is State.QUESTION


def test_confirm_correct_then_next():
    game = make_game()
    game.start()
    handle_key(game, pygame.K_a)
    handle_key(game, pygame.K_KP_ENTER)
    assert game.state is State.CORRECT
    handle_key(game, pygame.K_SPACE)
    assert game.level == 1
    assert game.state is State.QUESTION


def test_confirm_wrong_then_keys_ignored():
    game = make_game()
    game.start()
    handle_key(game, pygame.K_d)
    handle_key(game, pygame.K_RETURN)
    assert game.state is State.WRONG
    assert handle_key(game, pygame.K_SPACE) is True
    assert game.state is State.WRONG


def test_lifeline_keys():
    game = make_game()
    game.start()
    handle_key(game, pygame.K_2)
    assert game.phone_active is True
    assert Lifeline.PHONE not in game.lifelines
    handle_key(game, pygame.K_1)
    assert sum(game.hidden) == 2


def test_walk_away_key():
    game = make_game()
    game.start()
    handle_key(game, pygame.K_w)
    assert game.state is State.GAMEOVER


def test_handle_event_quit():
    game = make_game()
    assert handle_event(game, pygame.event.Event(pygame.QUIT)) is False


def test_handle_event_ignores_key_up():
    game = make_game()
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN)
    assert handle_event(game, event) is True
    assert game.state is State.TITLE


def test_handle_event_key_down():
    game = make_game()
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)
    assert handle_event(game, event) is True
    assert game.state is State.QUESTION


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    out = capsys.readouterr().out
    assert "cannot open" in out
    assert f"need at least {LEVELS} questions, got 0" in out


@pytest.mark.parametrize("count", [0, 2, LEVELS - 1])
def test_main_too_few_questions(tmp_path, capsys, count):
    path = tmp_path / "questions.txt"
    path.write_text(
        "# comment\n" + "".join(f"Q{i}|a|b|c|d|1\n" for i in range(count)),
        encoding="utf-8",
    )
    assert main([str(path)]) == 1
    assert f"need at least {LEVELS} questions, got {count}" in capsys.readouterr().out