import contextlib
from typing import Any, Generator

import wandb

from wordle.tracker import Tracker


@contextlib.contextmanager
def wandb_run(project: str | None, name: str | None, config: dict[str, Any]) -> Generator[None, None, None]:
    """Starts a Weights & Biases run when a project is given, otherwise does nothing."""
    if project is None:
        yield
        return

    wandb.init(project=project, name=name, config=config)
    try:
        yield
    finally:
        wandb.finish()


def wandb_log_report(tracker: Tracker, step: int | None = None) -> None:
    if wandb.run is not None:
        wandb.log(tracker.report(), step=step)
