import abc
import random
from typing import Callable

from wordle.consts import BACKSPACE_KEYS, DELETE_KEY, ENTER_KEY
from wordle.state import State
from wordle.vocab import Vocab, get_letter


class Policy(abc.ABC):
    @abc.abstractmethod
    def choose_keys(self, states: list[State]) -> list[str]:
        """Returns the next raw key to press for every state."""


class UniformRandomPolicy(Policy):
    """Types random vocabulary words, one letter per step, then submits them."""

    def __init__(self, vocab: Vocab, seed: int = 0) -> None:
        self.vocab = vocab
        self.rng = random.Random(seed)

    def choose_keys(self, states: list[State]) -> list[str]:
        keys = []
        for state in states:
            if len(state.active_guess) == state.columns:
                keys.append(ENTER_KEY)
                continue

            mask = self.vocab.get_mask(state.active_guess)
            letter_ids = [letter_id for letter_id, allowed in enumerate(mask) if allowed]
            keys.append(get_letter(self.rng.choice(letter_ids)))

        return keys


class KeyboardInputPolicy(Policy):
    """Replays lines typed in the terminal as keys.

    Every character is one key, `<` stands for backspace and the end of the line
    presses enter.
    """

    def __init__(self, read_line: Callable[[str], str] = input) -> None:
        self.read_line = read_line
        self.pending: list[str] = []

    def choose_keys(self, states: list[State]) -> list[str]:
        assert len(states) == 1, "Keyboard input drives a single game"

        if not self.pending:
            self.pending = self.parse_line(self.read_line("> "))
        return [self.pending.pop(0)]

    @staticmethod
    def parse_line(line: str) -> list[str]:
        keys = []
        for char in line.strip():
            if char == "<" or char in BACKSPACE_KEYS:
                keys.append(DELETE_KEY)
            elif char.isascii() and char.isalpha():
                keys.append(char.upper())
        keys.append(ENTER_KEY)
        return keys
