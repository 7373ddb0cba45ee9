import abc
import collections
import copy
import enum
import logging
from dataclasses import dataclass

from wordle.config import GameConfig, normalize_target
from wordle.consts import MAX_GUESSES, WORD_LENGTH
from wordle.decoder import decode
from wordle.policy import Policy
from wordle.state import Append, Delete, Feedback, InputAction, RunState, State, Submit
from wordle.vocab import Vocab

logger = logging.getLogger(__name__)


def evaluate(guess: str, target: str) -> list[Feedback]:
    """Scores a guess against the target, one feedback per position.

    Exact matches are claimed first and consume their letter from the pool of target
    letters. The remaining positions are then scanned left to right and only marked
    present while the pool still holds that letter, so a repeated letter is never
    reported more often than it occurs in the target.
    """
    assert len(guess) == len(target), (guess, target)

    hint = [Feedback.ABSENT] * len(target)
    remaining = collections.Counter(target)
    for idx, (guessed_letter, target_letter) in enumerate(zip(guess, target)):
        if guessed_letter == target_letter:
            hint[idx] = Feedback.CORRECT
            remaining[target_letter] -= 1

    for idx, guessed_letter in enumerate(guess):
        if hint[idx] == Feedback.CORRECT:
            continue

        if remaining[guessed_letter] > 0:
            hint[idx] = Feedback.PRESENT
            remaining[guessed_letter] -= 1

    return hint


class RejectReason(enum.StrEnum):
    GUESS_FULL = "guess_full"
    GUESS_EMPTY = "guess_empty"
    GUESS_INCOMPLETE = "guess_incomplete"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Applied:
    state: State


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason
    message: str | None = None


@dataclass(frozen=True)
class GameEnded:
    run_state: RunState
    feedback: list[Feedback]
    state: State


EngineResult = Applied | Rejected | GameEnded


class GuessEngine:
    state: State
    target: str

    def __init__(self, columns: int = WORD_LENGTH, rows: int = MAX_GUESSES) -> None:
        self.columns = columns
        self.rows = rows
        self.target = ""
        self.state = State.initial(columns=columns, rows=rows)

    @classmethod
    def from_config(cls, config: GameConfig) -> "GuessEngine":
        return cls(columns=config.columns, rows=config.rows)

    def reset(self, target: str) -> State:
        self.target = normalize_target(target, self.columns)
        self.state = State.initial(columns=self.columns, rows=self.rows)
        logger.debug("New game with %d rows of %d letters", self.rows, self.columns)
        return self.state

    def apply(self, action: InputAction) -> EngineResult:
        assert self.target, "Must reset the engine before applying actions"

        if self.state.terminal:
            return self._reject(action, RejectReason.GAME_OVER)

        state = copy.deepcopy(self.state)
        guess = state.guesses.pop()

        if isinstance(action, Append):
            letter = action.letter
            if len(letter) != 1 or not letter.isascii() or not letter.isalpha():
                raise ValueError(f"Can only append a single letter, got {letter!r}")
            if len(guess) + len(letter) > self.columns:
                return self._reject(action, RejectReason.GUESS_FULL)
            state.guesses.append(guess + letter.upper())
        elif isinstance(action, Delete):
            if not guess:
                return self._reject(action, RejectReason.GUESS_EMPTY)
            state.guesses.append(guess[:-1])
        elif isinstance(action, Submit):
            if len(guess) != self.columns:
                message = f"{self.columns} characters required to submit guess"
                return self._reject(action, RejectReason.GUESS_INCOMPLETE, message)
            return self._submit(state, guess)
        else:
            raise TypeError(f"Unsupported action: {action!r}")

        self.state = state
        return Applied(state=state)

    def _submit(self, state: State, guess: str) -> EngineResult:
        feedback = evaluate(guess, self.target)
        state.guesses.append(guess)
        state.hints.append(feedback)
        logger.debug("Row %d submitted %s -> %s", state.current_index, guess, [str(f) for f in feedback])

        if not state.terminal:
            state.guesses.append("")

        self.state = state
        if state.terminal:
            logger.debug("Game ended: %s", state.run_state)
            return GameEnded(run_state=state.run_state, feedback=list(feedback), state=state)
        return Applied(state=state)

    def _reject(self, action: InputAction, reason: RejectReason, message: str | None = None) -> Rejected:
        logger.debug("Rejected %r: %s", action, reason)
        return Rejected(reason=reason, message=message)


@dataclass(frozen=True)
class Transition:
    source_state: State
    target_state: State
    action: InputAction
    result: EngineResult


@dataclass(frozen=True)
class Rollout:
    target: str
    transitions: list[Transition]

    @property
    def end_state(self) -> State:
        return self.transitions[-1].target_state


class Roller(abc.ABC):
    @abc.abstractmethod
    def run(self, policy: Policy, seeds: list[int]) -> list[Rollout]:
        ...


class BatchRoller(Roller):
    def __init__(self, vocab: Vocab, config: GameConfig | None = None) -> None:
        self.vocab = vocab
        self.config = config or GameConfig()

    def run(self, policy: Policy, seeds: list[int]) -> list[Rollout]:
        episodes = list(range(len(seeds)))
        engines = [GuessEngine.from_config(self.config) for _ in episodes]
        states = [engine.reset(target=self.vocab.pick_secret(seed)) for engine, seed in zip(engines, seeds)]

        transitions: list[list[Transition]] = [[] for _ in episodes]
        while episodes:
            keys = policy.choose_keys([states[episode_id] for episode_id in episodes])

            active_episodes = []
            for episode_id, key in zip(episodes, keys):
                action = decode(key)
                result = engines[episode_id].apply(action)
                next_state = engines[episode_id].state
                transitions[episode_id].append(Transition(states[episode_id], next_state, action, result))
                states[episode_id] = next_state
                if not next_state.terminal:
                    active_episodes.append(episode_id)

            episodes = active_episodes

        return [
            Rollout(target=engine.target, transitions=episode_transitions)
            for episode_transitions, engine in zip(transitions, engines)
        ]
