from pydantic import BaseModel, ConfigDict, Field

from wordle.consts import MAX_GUESSES, WORD_LENGTH


class GameConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    columns: int = Field(default=WORD_LENGTH, gt=0)
    rows: int = Field(default=MAX_GUESSES, gt=0)


def normalize_target(word: str, columns: int) -> str:
    target = word.strip().upper()
    if not target.isalpha() or not target.isascii():
        raise ValueError(f"Target word must only contain letters, got {word!r}")
    if len(target) != columns:
        raise ValueError(f"Target word must have {columns} letters, got {word!r}")
    return target
