import logging
from dataclasses import dataclass

from wordle.config import GameConfig
from wordle.decoder import decode
from wordle.environment import GameEnded, GuessEngine, Rejected
from wordle.projector import CellUpdate, project
from wordle.state import RunState, State
from wordle.tracker import Tracker
from wordle.vocab import Vocab

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    cells: list[CellUpdate]
    run_state: RunState
    message: str | None = None


class RunController:
    """Owns one engine across games: one raw key in, one frame out."""

    def __init__(self, config: GameConfig, vocab: Vocab | None, tracker: Tracker | None = None) -> None:
        self.config = config
        self.vocab = vocab
        self.tracker = tracker
        self.engine = GuessEngine.from_config(config)

    @property
    def state(self) -> State:
        return self.engine.state

    @property
    def target(self) -> str:
        return self.engine.target

    @property
    def run_state(self) -> RunState:
        return self.engine.state.run_state

    def new_game(self, target: str | None = None, seed: int | None = None) -> Frame:
        if target is None:
            assert self.vocab is not None, "A target word or a vocabulary is required"
            target = self.vocab.pick_secret(seed)
        state = self.engine.reset(target)
        logger.info("Started a new game (%d rows)", state.rows)
        return self.frame()

    def press(self, raw_key: str) -> Frame:
        result = self.engine.apply(decode(raw_key))

        if isinstance(result, GameEnded):
            logger.info("Game %s after %d guesses", result.run_state, len(result.state.hints))
            if self.tracker is not None:
                self.tracker.log_game(result.state)

        message = result.message if isinstance(result, Rejected) else None
        return self.frame(message=message)

    def frame(self, message: str | None = None) -> Frame:
        return Frame(cells=project(self.state), run_state=self.run_state, message=message)
