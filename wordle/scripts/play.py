import logging
from argparse import ArgumentParser

from wordle.config import GameConfig
from wordle.consts import MAX_GUESSES, WORD_LENGTH
from wordle.controller import RunController
from wordle.policy import KeyboardInputPolicy
from wordle.projector import keyboard_feedback
from wordle.render_utils import print_banner, print_board, print_keyboard, print_message
from wordle.state import RunState
from wordle.theme import Theme
from wordle.tracker import Tracker
from wordle.vocab import Vocab, load_words


def play_game(controller: RunController, policy: KeyboardInputPolicy, theme: Theme) -> None:
    frame = controller.frame()
    print_board(frame.cells, controller.config, theme)

    while frame.run_state == RunState.PLAYING:
        key = policy.choose_keys([controller.state])[0]
        frame = controller.press(key)

        if frame.message is not None:
            print_message(frame.message)
        if not policy.pending:
            print_board(frame.cells, controller.config, theme)
            print_keyboard(keyboard_feedback(controller.state), theme)

    print_banner(frame.run_state, controller.target)


def main() -> None:
    parser = ArgumentParser()
    parser.add_argument("--seed", type=int, default=None, help="Random seed for picking the target word")
    parser.add_argument("--target", type=str, default=None, help="Play against a fixed target word")
    parser.add_argument("--columns", type=int, default=WORD_LENGTH, help="Letters per guess")
    parser.add_argument("--rows", type=int, default=MAX_GUESSES, help="Number of guesses allowed")
    parser.add_argument("--vocab_path", type=str, default=None, help="File containing the list of target words")
    parser.add_argument("--verbose", action="store_true", default=False, help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = GameConfig(columns=args.columns, rows=args.rows)
    words = load_words(args.vocab_path) if args.vocab_path is not None else None
    try:
        vocab = Vocab(words=words, word_length=config.columns) if args.target is None else None
    except ValueError as e:
        parser.error(str(e))
    tracker = Tracker()
    controller = RunController(config=config, vocab=vocab, tracker=tracker)
    policy = KeyboardInputPolicy()
    theme = Theme()

    print("Type a guess and press enter. Use < to delete a letter.")
    seed = args.seed
    try:
        while True:
            controller.new_game(target=args.target, seed=seed)
            play_game(controller, policy, theme)

            if args.target is not None or input("Play again? [y/N] ").strip().lower() != "y":
                break
            seed = None if seed is None else seed + 1
    except (EOFError, KeyboardInterrupt):
        print()

    if not tracker.metrics:
        return

    report = tracker.report()
    print(f"Played {report['games_sum']:.0f} games, won {100 * report['wins_mean']:.0f}%")


if __name__ == "__main__":
    main()
