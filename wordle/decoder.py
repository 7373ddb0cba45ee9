from wordle.consts import BACKSPACE_KEYS, ENTER_KEY
from wordle.state import Append, Delete, InputAction, Submit


def decode(raw_key: str) -> InputAction:
    """Maps a key identifier from the on-screen or terminal keyboard to an input action."""
    key = raw_key.upper()
    if key == ENTER_KEY:
        return Submit()
    if key in BACKSPACE_KEYS:
        return Delete()
    if len(key) == 1 and key.isascii() and key.isalpha():
        return Append(letter=key)

    raise ValueError(f"Unknown key: {raw_key!r}")
