import enum
from dataclasses import dataclass

from wordle.consts import MAX_GUESSES, WORD_LENGTH


class Feedback(enum.StrEnum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class RunState(enum.StrEnum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GuessRow:
    row: int
    guess: str
    feedback: list[Feedback] | None


@dataclass
class State:
    """Guess store: every guess made so far plus the feedback of the submitted ones.

    The last guess is the active one. `hints[i]` belongs to `guesses[i]`, so a guess
    without a matching hint has not been submitted yet.
    """
    guesses: list[str]
    hints: list[list[Feedback]]
    columns: int = WORD_LENGTH
    rows: int = MAX_GUESSES

    @classmethod
    def initial(cls, columns: int = WORD_LENGTH, rows: int = MAX_GUESSES) -> "State":
        return cls(guesses=[""], hints=[], columns=columns, rows=rows)

    @property
    def current_index(self) -> int:
        return len(self.guesses) - 1

    @property
    def active_guess(self) -> str:
        return self.guesses[-1]

    @property
    def win(self) -> bool:
        return bool(self.hints) and all(feedback == Feedback.CORRECT for feedback in self.hints[-1])

    @property
    def lost(self) -> bool:
        return len(self.hints) == self.rows and not self.win

    @property
    def terminal(self) -> bool:
        return self.win or self.lost

    @property
    def run_state(self) -> RunState:
        if self.win:
            return RunState.WON
        if self.lost:
            return RunState.LOST
        return RunState.PLAYING

    def submitted(self, row: int) -> bool:
        return row < len(self.hints)

    def guess_rows(self) -> list[GuessRow]:
        return [
            GuessRow(row=row, guess=guess, feedback=self.hints[row] if self.submitted(row) else None)
            for row, guess in enumerate(self.guesses)
        ]


@dataclass(frozen=True)
class Append:
    letter: str


@dataclass(frozen=True)
class Delete:
    pass


@dataclass(frozen=True)
class Submit:
    pass


InputAction = Append | Delete | Submit
