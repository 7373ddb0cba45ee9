import json
import logging
from argparse import ArgumentParser

import more_itertools
import tqdm

from wordle.config import GameConfig
from wordle.consts import MAX_GUESSES, WORD_LENGTH
from wordle.environment import BatchRoller
from wordle.policy import UniformRandomPolicy
from wordle.tracker import Tracker
from wordle.vocab import Vocab, load_words
from wordle.wandb import wandb_log_report, wandb_run


def main() -> None:
    parser = ArgumentParser()
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--num_episodes", type=int, default=1000, help="Number of games to simulate")
    parser.add_argument("--batch_size", type=int, default=100, help="Games played side by side")
    parser.add_argument("--columns", type=int, default=WORD_LENGTH, help="Letters per guess")
    parser.add_argument("--rows", type=int, default=MAX_GUESSES, help="Number of guesses allowed")
    parser.add_argument("--vocab_path", type=str, default=None, help="File containing the list of eligible words")
    parser.add_argument("--wandb_project", type=str, default=None, help="Log the report to this W&B project")
    parser.add_argument("--name", type=str, default=None, help="W&B run name")
    parser.add_argument("--verbose", action="store_true", default=False, help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = GameConfig(columns=args.columns, rows=args.rows)
    words = load_words(args.vocab_path) if args.vocab_path is not None else None
    try:
        vocab = Vocab(words=words, word_length=config.columns)
    except ValueError as e:
        parser.error(str(e))
    roller = BatchRoller(vocab=vocab, config=config)
    policy = UniformRandomPolicy(vocab=vocab, seed=args.seed)
    tracker = Tracker()

    seeds = list(range(args.seed, args.seed + args.num_episodes))
    with wandb_run(project=args.wandb_project, name=args.name, config=vars(args)):
        for step, batch_seeds in enumerate(tqdm.tqdm(list(more_itertools.chunked(seeds, args.batch_size)))):
            with tracker.timer("batch_seconds"):
                rollouts = roller.run(policy, seeds=batch_seeds)

            for rollout in rollouts:
                tracker.log_game(rollout.end_state)
                tracker.log_value("steps", len(rollout.transitions))

            wandb_log_report(tracker, step=step)

    print(json.dumps(tracker.report(), indent=2))


if __name__ == "__main__":
    main()
