import collections
import contextlib
import time
from dataclasses import dataclass, field
from typing import Generator

import numpy as np

from wordle.state import State


@dataclass
class Tracker:
    metrics: dict[str, list[float]] = field(default_factory=lambda: collections.defaultdict(list))

    def log_value(self, metric_name: str, value: float | np.float64) -> None:
        self.metrics[metric_name].append(float(value))

    def log_game(self, state: State) -> None:
        assert state.terminal, "Only finished games can be logged"

        self.log_value("games", 1)
        self.log_value("wins", state.win)
        self.log_value("losses", state.lost)
        self.log_value("guesses", len(state.hints))
        if state.win:
            self.log_value("turns_to_win", len(state.hints))
            for turn_id in range(1, state.rows + 1):
                self.log_value(f"win_on_turn_{turn_id}", len(state.hints) == turn_id)

    @contextlib.contextmanager
    def timer(self, metric_name: str) -> Generator[None, None, None]:
        start_time = time.time()
        yield
        self.log_value(metric_name, time.time() - start_time)

    def report(self) -> dict[str, float]:
        metrics = {}
        for metric_name, values in sorted(self.metrics.items()):
            metrics[f"{metric_name}_mean"] = np.mean(values).item()
            metrics[f"{metric_name}_sum"] = np.sum(values).item()

        return metrics
