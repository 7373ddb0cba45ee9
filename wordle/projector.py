from dataclasses import dataclass

from wordle.consts import BLANK
from wordle.state import Feedback, State

FEEDBACK_PRIORITY = {Feedback.ABSENT: 0, Feedback.PRESENT: 1, Feedback.CORRECT: 2}


@dataclass(frozen=True)
class CellUpdate:
    row: int
    column: int
    character: str
    feedback: Feedback | None


def project(state: State) -> list[CellUpdate]:
    """Full re-render payload for every row up to the active one, in row-major order."""
    cells = []
    for guess_row in state.guess_rows():
        for column in range(state.columns):
            character = guess_row.guess[column] if column < len(guess_row.guess) else BLANK
            feedback = guess_row.feedback[column] if guess_row.feedback is not None else None
            cells.append(CellUpdate(row=guess_row.row, column=column, character=character, feedback=feedback))
    return cells


def keyboard_feedback(state: State) -> dict[str, Feedback]:
    letters: dict[str, Feedback] = {}
    for guess, hint in zip(state.guesses, state.hints):
        for letter, feedback in zip(guess, hint):
            if letter not in letters or FEEDBACK_PRIORITY[feedback] > FEEDBACK_PRIORITY[letters[letter]]:
                letters[letter] = feedback
    return letters
