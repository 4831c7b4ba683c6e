# gamedevquiz

A quiz game in the style of "Who Wants to Be a Game Developer?". You answer
fifteen multiple-choice questions in turn. Each correct answer moves you up a
prize ladder that runs from £100 to £1,000,000. The safe havens are at £1,000
and £32,000. You have three lifelines.

## Installing

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Playing

```
gamedevquiz questions.txt
```

If you give no file name, the command prints a usage line and exits with
status 1. It does the same when the file cannot be opened or holds fewer than
fifteen valid questions.

The package ships no font, images or questions. Run the game from a directory
that holds an `assets/` folder with `font.ttf`, `bg_studio.png`,
`bg_correct.png` and `bg_wrong.png`. The window is 800×600 pixels.

Keys:

- **Enter** starts the game and confirms a final answer.
- **A**, **B**, **C**, **D** choose an answer. **Backspace** goes back to the
  question.
- **1** is 50:50. It hides two wrong answers.
- **2** is Phone a Friend. It shows the question's hint, or the answer letter
  if the question has no hint.
- **3** is Ask the Audience. It shows a vote in percentages as a bar chart.
- **W** walks away with the last safe prize reached.
- **Space** moves on to the next question after a correct answer.
- **Escape** quits. Closing the window also quits.

After a wrong answer, you keep the last safe prize, or £0 if you reached none.

## Question file

Each line holds one question, with its fields separated by `|`:

```
question text|option A|option B|option C|option D|answer index|optional hint
```

The answer index runs from 0 to 3. To put a literal `|` in a field, write `||`.
The game skips blank lines, lines that start with `#`, and lines that cannot be
parsed. The questions are shuffled before play begins.

## Library use

The game logic in `gamedevquiz.game` and `gamedevquiz.questions` runs without
a display:

```python
import random
from gamedevquiz.questions import load_questions
from gamedevquiz.game import Game, Lifeline, State

game = Game(load_questions("questions.txt"), random.Random())
game.start()
game.use_lifeline(Lifeline.FIFTY_FIFTY)   # True the first time, False after
game.select("A")
game.evaluate_answer()
if game.state is State.CORRECT:
    game.next_question()
print(game.state, game.winnings)
```

- `gamedevquiz.questions` has `load_questions(path)`,
  `read_questions(lines)`, `parse_question(line)` and `split_record(line)`.
  It also defines the `Question` dataclass. `parse_question` raises
  `QuestionFormatError` for a bad record.
- `gamedevquiz.game` has `Game`, `State`, `Lifeline` and the `PRIZES`
  ladder.
- `gamedevquiz.render` has the text layout helpers `lifeline_bar_text`,
  `audience_lines`, `ladder_lines` and `wrap_text`. It also has the
  `Renderer`, which draws a game onto a pygame surface.
- `gamedevquiz.ctext` has `parse_int` (lenient, in the style of `atoi`),
  `split_fields`, `format_printf` and `printf`.

## Running the tests

```
pytest
```