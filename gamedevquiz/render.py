"""Drawing the quiz screens: text layout helpers and a frame renderer."""

from __future__ import annotations

from typing import Any, Callable, Collection, Mapping, Sequence

from gamedevquiz.game import (
    LETTERS,
    LEVELS,
    PRIZES,
    SAFE_LEVELS,
    Game,
    Lifeline,
    State,
)

PAD = 16
LINE_HEIGHT = 22
QUESTION_Y = 10
ANSWERS_Y = 188
HELP_Y = 424
LADDER_X = 572
LADDER_Y = 12
LADDER_STEP = 38
TEXT_WIDTH = 560 - PAD * 2

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

_MAX_BAR = 52
_LIFELINE_LABELS = (
    (Lifeline.FIFTY_FIFTY, "[1] 50:50  "),
    (Lifeline.PHONE, "[2] Phone  "),
    (Lifeline.AUDIENCE, "[3] Audience  "),
)
_WALK_AWAY_LABEL = "[W] Walk away"


def lifeline_bar_text(lifelines: Collection[Lifeline]) -> str:
    """The help line listing the lifelines still available."""
    labels = "".join(label for lifeline, label in _LIFELINE_LABELS if lifeline in lifelines)
    return labels + _WALK_AWAY_LABEL


def audience_lines(audience: Sequence[int]) -> list[str]:
    """One bar-chart line per answer letter for the audience vote."""
    lines = []
    for letter, percent in zip(LETTERS, audience):
        bar = "#" * min(max(percent // 5, 0), _MAX_BAR)
        shown = "100" if percent >= 100 else str(percent)
        lines.append(f"{letter}: {bar} {shown}%")
    return lines


def ladder_lines(level: int) -> list[str]:
    """The prize ladder, top prize first, with markers for the current level."""
    lines = []
    for i in reversed(range(LEVELS)):
        if i == level:
            marker = ">"
        elif i in SAFE_LEVELS:
            marker = "*"
        elif i < level:
            marker = "+"
        else:
            marker = " "
        lines.append(f"{marker} {PRIZES[i]}")
    return lines


def wrap_text(text: str, max_width: int, measure: Callable[[str], int]) -> list[str]:
    """Break ``text`` into lines no wider than ``max_width`` where possible.

    Words are separated by spaces; a single word wider than the limit gets a
    line of its own.
    """
    space_width = measure(" ")
    lines: list[str] = []
    current: list[str] = []
    width = 0
    for word in (w for w in text.split(" ") if w):
        word_width = measure(word)
        if width > 0 and width + space_width + word_width > max_width:
            lines.append(" ".join(current))
            current = []
            width = 0
        if width > 0:
            width += space_width
        current.append(word)
        width += word_width
    if current:
        lines.append(" ".join(current))
    return lines


class Renderer:
    """Draws the current game state onto a surface with a single font."""

    def __init__(self, screen: Any, font: Any, backgrounds: Mapping[str, Any]) -> None:
        self.screen = screen
        self.font = font
        self.backgrounds = dict(backgrounds)

    def draw_string(self, x: int, y: int, text: str) -> None:
        if not text:
            return
        surface = self.font.render(text, False, WHITE)
        self.screen.blit(surface, (x, y))

    def _measure(self, text: str) -> int:
        return self.font.size(text)[0]

    def draw_wrapped(self, x: int, y: int, max_width: int, text: str) -> int:
        """Draw wrapped text and return the y coordinate below it."""
        for line in wrap_text(text, max_width, self._measure):
            self.draw_string(x, y, line)
            y += LINE_HEIGHT
        return y

    def draw_frame(self, game: Game) -> None:
        self.screen.fill(BLACK)
        self._draw_background(game.state)
        painters = {
            State.TITLE: self._draw_title,
            State.QUESTION: self._draw_question,
            State.CONFIRM: self._draw_confirm,
            State.CORRECT: self._draw_correct,
            State.WRONG: self._draw_wrong,
            State.WIN: self._draw_win,
            State.GAMEOVER: self._draw_gameover,
        }
        painters[game.state](game)
        if game.state is not State.TITLE:
            self._draw_ladder(game.level)

    def _draw_background(self, state: State) -> None:
        if state in (State.CORRECT, State.WIN):
            key = "correct"
        elif state in (State.WRONG, State.GAMEOVER):
            key = "wrong"
        else:
            key = "studio"
        self.screen.blit(self.backgrounds[key], (0, 0))

    def _draw_ladder(self, level: int) -> None:
        for row, line in enumerate(ladder_lines(level)):
            self.draw_string(LADDER_X, LADDER_Y + row * LADDER_STEP, line)

    def _draw_header_and_options(self, game: Game) -> None:
        question = game.question
        self.draw_string(PAD, QUESTION_Y, PRIZES[game.level])
        self.draw_wrapped(PAD, QUESTION_Y + LINE_HEIGHT, TEXT_WIDTH, question.text)
        y = ANSWERS_Y
        for letter, option, hidden in zip(LETTERS, question.options, game.hidden):
            if hidden:
                continue
            self.draw_string(PAD, y, f"{letter}. {option}")
            y += LINE_HEIGHT + 4

    def _draw_title(self, game: Game) -> None:
        self.draw_string(PAD, QUESTION_Y, "WHO WANTS TO BE A GAME DEVELOPER?")
        self.draw_string(PAD, ANSWERS_Y, "Press Enter to start.")
        self.draw_string(PAD, ANSWERS_Y + LINE_HEIGHT, "Press Escape to quit.")

    def _draw_question(self, game: Game) -> None:
        question = game.question
        self._draw_header_and_options(game)
        y = HELP_Y + PAD
        self.draw_string(PAD, y, lifeline_bar_text(game.lifelines))
        y += LINE_HEIGHT
        if game.phone_active:
            if question.hint:
                y = self.draw_wrapped(PAD, y, TEXT_WIDTH, question.hint)
            else:
                self.draw_string(PAD, y, f"The answer is {question.answer_letter}.")
                y += LINE_HEIGHT
        if any(game.audience):
            self.draw_string(PAD, y, "Ask the Audience:")
            y += LINE_HEIGHT
            for row, line in enumerate(audience_lines(game.audience)):
                self.draw_string(PAD, y + row * LINE_HEIGHT, line)

    def _draw_confirm(self, game: Game) -> None:
        self._draw_header_and_options(game)
        self.draw_string(PAD, HELP_Y + PAD, "Is that your final answer?")
        self.draw_string(
            PAD,
            HELP_Y + PAD + LINE_HEIGHT,
            f"Answer: {game.pending or ''}  --  Enter to confirm, Backspace to go back.",
        )

    def _draw_result(self, game: Game, heading: str) -> None:
        question = game.question
        self.draw_string(PAD, QUESTION_Y, heading)
        y = self.draw_wrapped(PAD, ANSWERS_Y, TEXT_WIDTH, question.text)
        self.draw_string(PAD, y + 4, "The answer was:")
        self.draw_string(PAD, y + 4 + LINE_HEIGHT, question.answer_text)

    def _draw_correct(self, game: Game) -> None:
        self._draw_result(game, "Correct!")
        self.draw_string(PAD, HELP_Y + PAD, "Press Space to continue.")

    def _draw_wrong(self, game: Game) -> None:
        self._draw_result(game, "Wrong!")
        self.draw_string(PAD, HELP_Y + PAD, "You leave with:")
        self.draw_string(PAD, HELP_Y + PAD + LINE_HEIGHT, game.winnings)
        self.draw_string(PAD, HELP_Y + PAD + LINE_HEIGHT * 2, "Press Escape to quit.")

    def _draw_win(self, game: Game) -> None:
        self.draw_string(PAD, QUESTION_Y, "YOU HAVE JUST WON £1,000,000!")
        self.draw_string(PAD, ANSWERS_Y, "Congratulations!")
        self.draw_string(PAD, HELP_Y + PAD, "Press Escape to quit.")

    def _draw_gameover(self, game: Game) -> None:
        self.draw_string(PAD, QUESTION_Y, "You walk away with:")
        self.draw_string(PAD, ANSWERS_Y, game.winnings)
        self.draw_string(PAD, HELP_Y + PAD, "Press Escape to quit.")