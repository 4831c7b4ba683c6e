"""The quiz window: event handling and the main loop."""

from __future__ import annotations

import os
import random
import sys
from typing import Any, Optional, Sequence, TypeVar

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from gamedevquiz.ctext import printf  # noqa: E402
from gamedevquiz.game import LEVELS, WINDOW_HEIGHT, WINDOW_WIDTH, Game, State  # noqa: E402
from gamedevquiz.questions import load_questions  # noqa: E402
from gamedevquiz.render import Renderer  # noqa: E402

T = TypeVar("T")

WINDOW_TITLE = "Who Wants to Be a Game Developer?"
FONT_PATH = "assets/font.ttf"
FONT_SIZE = 16
FRAME_DELAY_MS = 16
_BACKGROUND_FILES = {
    "studio": "assets/bg_studio.png",
    "correct": "assets/bg_correct.png",
    "wrong": "assets/bg_wrong.png",
}
_PROGRAM = "gamedevquiz"

_CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
_ANSWER_KEYS = {pygame.K_a: "A", pygame.K_b: "B", pygame.K_c: "C", pygame.K_d: "D"}
_LIFELINE_KEYS = {pygame.K_1: 1, pygame.K_2: 2, pygame.K_3: 3}


def shuffle_questions(questions: Sequence[T], rng: random.Random) -> list[T]:
    """Return the questions in a random order (Fisher-Yates with ``rng``)."""
    shuffled = list(questions)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def handle_key(game: Game, key: int) -> bool:
    """Apply a key press to the game; return False when the player quits."""
    if key == pygame.K_ESCAPE:
        return False
    if game.state is State.TITLE:
        if key in _CONFIRM_KEYS:
            game.start()
    elif game.state is State.QUESTION:
        if key in _ANSWER_KEYS:
            game.select(_ANSWER_KEYS[key])
        elif key in _LIFELINE_KEYS:
            game.use_lifeline(_LIFELINE_KEYS[key])
        elif key == pygame.K_w:
            game.walk_away()
    elif game.state is State.CONFIRM:
        if key in _CONFIRM_KEYS:
            game.evaluate_answer()
        elif key == pygame.K_BACKSPACE:
            game.back()
    elif game.state is State.CORRECT:
        if key == pygame.K_SPACE:
            game.next_question()
    return True


def handle_event(game: Game, event: Any) -> bool:
    """Apply a pygame event to the game; return False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type != pygame.KEYDOWN:
        return True
    return handle_key(game, event.key)


def _log(message: str) -> None:
    print(message, file=sys.stderr)


def _load_backgrounds() -> dict[str, Any]:
    size = (WINDOW_WIDTH, WINDOW_HEIGHT)
    return {
        name: pygame.transform.scale(pygame.image.load(path).convert(), size)
        for name, path in _BACKGROUND_FILES.items()
    }


def _run(game: Game) -> int:
    try:
        pygame.display.init()
        pygame.font.init()
    except pygame.error as exc:
        _log(f"init: {exc}")
        pygame.quit()
        return 1
    try:
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        except pygame.error as exc:
            _log(f"set_mode: {exc}")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            font = pygame.font.Font(FONT_PATH, FONT_SIZE)
        except (pygame.error, OSError) as exc:
            _log(f"font_load: {exc}")
            return 1
        try:
            backgrounds = _load_backgrounds()
        except (pygame.error, OSError) as exc:
            _log(f"render_init: {exc}")
            return 1
        renderer = Renderer(screen, font, backgrounds)
        running = True
        while running:
            for event in pygame.event.get():
                if not handle_event(game, event):
                    running = False
            renderer.draw_frame(game)
            pygame.display.flip()
            pygame.time.wait(FRAME_DELAY_MS)
        return 0
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the question file named on the command line and play."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        printf("usage: %s questions.txt\n", _PROGRAM)
        return 1
    rng = random.Random()
    path = args[0]
    try:
        questions = load_questions(path)
    except OSError:
        printf("load_questions: cannot open %s\n", path)
        questions = []
    if len(questions) < LEVELS:
        printf("need at least %d questions, got %d\n", LEVELS, len(questions))
        return 1
    questions = shuffle_questions(questions, rng)
    return _run(Game(questions, rng))


if __name__ == "__main__":
    sys.exit(main())