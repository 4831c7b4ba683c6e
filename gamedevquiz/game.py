"""Game state and rules of the quiz."""

from __future__ import annotations

import enum
import random
from typing import Optional, Sequence

from gamedevquiz.questions import Question

LEVELS = 15
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

PRIZES: tuple[str, ...] = (
    "£100", "£200", "£300", "£500", "£1,000",
    "£2,000", "£4,000", "£8,000", "£16,000", "£32,000",
    "£64,000", "£125,000", "£250,000", "£500,000", "£1,000,000",
)
SAFE_LEVELS = frozenset({4, 9})
NO_PRIZE = "£0"
LETTERS = "ABCD"


class State(enum.Enum):
    TITLE = enum.auto()
    QUESTION = enum.auto()
    CONFIRM = enum.auto()
    CORRECT = enum.auto()
    WRONG = enum.auto()
    WIN = enum.auto()
    GAMEOVER = enum.auto()


class Lifeline(enum.IntEnum):
    FIFTY_FIFTY = 1
    PHONE = 2
    AUDIENCE = 3


class Game:
    """A single run through the prize ladder."""

    def __init__(
        self, questions: Sequence[Question], rng: Optional[random.Random] = None
    ) -> None:
        self.questions = list(questions)
        self.rng = rng if rng is not None else random.Random()
        self.state = State.TITLE
        self.level = 0
        self.safe_level: Optional[int] = None
        self.lifelines: set[Lifeline] = set(Lifeline)
        self._reset_round()

    def _reset_round(self) -> None:
        self.hidden = [False] * len(LETTERS)
        self.audience = [0] * len(LETTERS)
        self.phone_active = False
        self.pending: Optional[str] = None

    @property
    def question(self) -> Question:
        return self.questions[self.level]

    @property
    def winnings(self) -> str:
        """The prize kept on leaving now: the last safe level reached."""
        return PRIZES[self.safe_level] if self.safe_level is not None else NO_PRIZE

    def start(self) -> None:
        self.state = State.QUESTION

    def select(self, letter: str) -> None:
        """Choose an answer letter and ask for confirmation."""
        letter = letter.upper()
        if len(letter) != 1 or letter not in LETTERS:
            raise ValueError(f"answer must be one of {LETTERS}, not {letter!r}")
        self.pending = letter
        self.state = State.CONFIRM

    def back(self) -> None:
        self.state = State.QUESTION

    def evaluate_answer(self) -> None:
        chosen = LETTERS.index(self.pending) if self.pending else None
        self.state = State.CORRECT if chosen == self.question.answer else State.WRONG

    def use_lifeline(self, lifeline: int) -> bool:
        """Spend a lifeline if still available; return whether it was used."""
        lifeline = Lifeline(lifeline)
        if lifeline not in self.lifelines:
            return False
        self.lifelines.discard(lifeline)
        answer = self.question.answer
        if lifeline is Lifeline.FIFTY_FIFTY:
            wrong = [i for i in range(len(LETTERS)) if i != answer]
            for i in wrong[:2]:
                self.hidden[i] = True
        elif lifeline is Lifeline.PHONE:
            self.phone_active = True
        else:
            correct = 55 + self.rng.randrange(30)
            self.audience[answer] = correct
            spread = 100 - correct
            for i in range(len(LETTERS)):
                if i == answer:
                    continue
                if self.hidden[i]:
                    self.audience[i] = 0
                else:
                    portion = spread // 3
                    self.audience[i] = portion
                    spread -= portion
        return True

    def next_question(self) -> None:
        self.level += 1
        if self.level >= LEVELS:
            self.state = State.WIN
            return
        self._reset_round()
        if self.level in SAFE_LEVELS:
            self.safe_level = self.level
        self.state = State.QUESTION

    def walk_away(self) -> None:
        self.state = State.GAMEOVER