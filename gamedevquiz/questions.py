"""Loading quiz questions from pipe-separated text files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from gamedevquiz.ctext import parse_int

OPTION_COUNT = 4
_SEPARATOR = "|"


class QuestionFormatError(ValueError):
    """Raised when a question record cannot be parsed."""


@dataclass(frozen=True)
class Question:
    """One multiple-choice question with four options."""

    text: str
    options: tuple[str, str, str, str]
    answer: int
    hint: Optional[str] = None

    @property
    def answer_letter(self) -> str:
        return "ABCD"[self.answer]

    @property
    def answer_text(self) -> str:
        return self.options[self.answer]


def split_record(line: str) -> list[str]:
    """Split a record on ``|``, where ``||`` stands for a literal ``|``.

    A trailing separator does not start an empty final field.
    """
    fields: list[str] = []
    pos = 0
    end = len(line)
    while pos < end:
        chars: list[str] = []
        while pos < end:
            ch = line[pos]
            if ch == _SEPARATOR:
                if line[pos + 1 : pos + 2] == _SEPARATOR:
                    chars.append(_SEPARATOR)
                    pos += 2
                    continue
                pos += 1
                break
            chars.append(ch)
            pos += 1
        fields.append("".join(chars))
    return fields


def parse_question(line: str) -> Question:
    """Parse ``text|A|B|C|D|answer[|hint]`` into a :class:`Question`."""
    fields = split_record(line)
    if len(fields) < 2 + OPTION_COUNT:
        raise QuestionFormatError(
            f"expected at least {2 + OPTION_COUNT} fields, got {len(fields)}"
        )
    text = fields[0]
    options = tuple(fields[1 : 1 + OPTION_COUNT])
    answer = parse_int(fields[1 + OPTION_COUNT])
    if not 0 <= answer < OPTION_COUNT:
        raise QuestionFormatError(f"answer index {answer} is out of range")
    hint = fields[2 + OPTION_COUNT] if len(fields) > 2 + OPTION_COUNT else None
    return Question(text, options, answer, hint)  # type: ignore[arg-type]


def read_questions(lines: Iterable[str]) -> list[Question]:
    """Parse questions from lines, skipping blanks, comments and bad records."""
    questions: list[Question] = []
    for raw in lines:
        line = raw.split("\n", 1)[0]
        if not line or line.startswith("#"):
            continue
        try:
            questions.append(parse_question(line))
        except QuestionFormatError:
            continue
    return questions


def load_questions(path: Union[str, os.PathLike]) -> list[Question]:
    """Read every valid question from the UTF-8 file at ``path``."""
    with open(path, encoding="utf-8", newline="\n") as handle:
        return read_questions(handle)