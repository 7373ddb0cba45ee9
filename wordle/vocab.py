import random

from wordle.consts import WORD_LENGTH

DEFAULT_WORDS = [
    "ABOUT", "ALLOW", "BLAST", "BONUS", "BRAIN", "CHAOS", "CLIMB", "CRANE", "CRISP", "DAISY",
    "DRAIN", "EAGER", "EERIE", "FLAME", "GLINT", "GRAIN", "HOVER", "IONIC", "JOULE", "KNOCK",
    "LEMON", "LLAMA", "MANGO", "MIRTH", "NOBLE", "OCEAN", "PIANO", "PRIDE", "PROUD", "QUAKE",
    "QUEEN", "RAISE", "ROBOT", "SAINT", "SLATE", "SPEED", "STARE", "STEEP", "TANGY", "TIGER",
    "TRAIN", "ULTRA", "VAPOR", "VIVID", "WALTZ", "WHARF", "XENON", "YIELD", "YOUNG", "ZESTY",
]


def load_words(path: str) -> list[str]:
    words = []
    with open(path, "r") as f:
        for line in f:
            word = line.strip().upper()
            if word:
                words.append(word)
    return words


def letter_index(letter: str) -> int:
    return ord(letter.upper()) - ord("A")


def get_letter(letter_id: int) -> str:
    assert 0 <= letter_id < 26
    return chr(ord("A") + letter_id)


class Vocab:
    def __init__(self, words: list[str] | None = None, word_length: int = WORD_LENGTH) -> None:
        words = DEFAULT_WORDS if words is None else words
        self.words = [word.upper() for word in words if len(word) == word_length and word.isascii() and word.isalpha()]
        if not self.words:
            raise ValueError(f"No {word_length} letter words in the vocabulary")
        self.word_length = word_length
        self.mask_cache: dict[str, list[bool]] = {}

    def pick_secret(self, seed: int | None = None) -> str:
        return random.Random(seed).choice(self.words)

    def build_mask(self, prefix: str) -> list[bool]:
        mask = [False] * 26
        for word in self.words:
            if word.startswith(prefix):
                mask[letter_index(word[len(prefix)])] = True
        return mask

    def get_mask(self, prefix: str) -> list[bool]:
        """Letters that extend `prefix` towards at least one vocabulary word."""
        prefix = prefix.upper()
        assert len(prefix) < self.word_length

        if (mask := self.mask_cache.get(prefix)) is not None:
            return mask

        mask = self.build_mask(prefix)
        self.mask_cache[prefix] = mask
        return mask
