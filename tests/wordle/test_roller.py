import more_itertools

from tests.wordle.mock_policy import MockPolicy
from wordle.config import GameConfig
from wordle.environment import BatchRoller, GameEnded, Rejected, RejectReason
from wordle.policy import KeyboardInputPolicy, UniformRandomPolicy
from wordle.state import Feedback, RunState, State
from wordle.vocab import Vocab

C, P, A = Feedback.CORRECT, Feedback.PRESENT, Feedback.ABSENT


def test_batch_roller() -> None:
    keys = list("RAISE") + ["ENTER"] + list("SOULX") + ["<-", "S", "ENTER"] + list("BONUS") + ["ENTER"]
    hints = [
        [A, A, A, P, A],
        [A, C, P, A, C],
        [C, C, C, C, C],
    ]

    roller = BatchRoller(vocab=Vocab(words=["bonus"]))
    rollouts = roller.run(policy=MockPolicy(keys=keys), seeds=[0, 1])

    assert len(rollouts) == 2
    for rollout in rollouts:
        assert rollout.target == "BONUS"
        assert len(rollout.transitions) == len(keys)
        assert rollout.end_state.guesses == ["RAISE", "SOULS", "BONUS"]
        assert rollout.end_state.hints == hints
        assert rollout.end_state.run_state == RunState.WON
        assert isinstance(rollout.transitions[-1].result, GameEnded)

        guesses = ["".join(chunk) for chunk in more_itertools.chunked(keys[:5], n=5)]
        assert rollout.transitions[4].target_state.guesses == guesses


def test_batch_roller_records_rejections() -> None:
    keys = ["ENTER"] + list("ABCDEF") + ["ENTER"]
    roller = BatchRoller(vocab=Vocab(words=["bonus"]), config=GameConfig(rows=1))
    rollout = roller.run(policy=MockPolicy(keys=keys), seeds=[0])[0]

    assert rollout.transitions[0].result == Rejected(
        reason=RejectReason.GUESS_INCOMPLETE,
        message="5 characters required to submit guess",
    )
    assert rollout.transitions[6].result == Rejected(reason=RejectReason.GUESS_FULL)
    assert rollout.transitions[6].source_state == rollout.transitions[6].target_state
    assert rollout.end_state.run_state == RunState.LOST


def test_uniform_random_policy_guesses_vocab_words() -> None:
    vocab = Vocab()
    roller = BatchRoller(vocab=vocab)
    rollouts = roller.run(policy=UniformRandomPolicy(vocab=vocab, seed=0), seeds=list(range(20)))

    for rollout in rollouts:
        end_state = rollout.end_state
        assert end_state.terminal
        for guess in end_state.guesses:
            assert guess in vocab.words
        for transition in rollout.transitions:
            assert not isinstance(transition.result, Rejected)


def test_uniform_random_policy_is_deterministic() -> None:
    vocab = Vocab()
    first = BatchRoller(vocab=vocab).run(UniformRandomPolicy(vocab=vocab, seed=3), seeds=[0, 1, 2])
    second = BatchRoller(vocab=vocab).run(UniformRandomPolicy(vocab=vocab, seed=3), seeds=[0, 1, 2])
    assert [r.end_state for r in first] == [r.end_state for r in second]


def test_keyboard_input_policy() -> None:
    lines = iter(["cranx<e", "Tr4in"])
    policy = KeyboardInputPolicy(read_line=lambda prompt: next(lines))
    state = State.initial()

    keys = [policy.choose_keys([state])[0] for _ in range(8)]
    assert keys == ["C", "R", "A", "N", "X", "<-", "E", "ENTER"]
    assert not policy.pending

    keys = [policy.choose_keys([state])[0] for _ in range(5)]
    assert keys == ["T", "R", "I", "N", "ENTER"]
