import string

from pydantic import BaseModel, ConfigDict, field_validator

from wordle.state import Feedback


class Theme(BaseModel):
    model_config = ConfigDict(frozen=True)

    board: str = "#ffffff"
    tile_placeholder: str = "#808080"
    tile: str = "#ffffff"
    right_spot_color: str = "#6aaa64"
    wrong_spot_color: str = "#c9b458"
    not_in_word_color: str = "#787c7e"
    kb_btn_background: str = "#d3d6da"
    kb_btn_letter: str = "#1a1a1b"

    @field_validator("*")
    @classmethod
    def check_hex_color(cls, value: str) -> str:
        if len(value) != 7 or not value.startswith("#") or not all(c in string.hexdigits for c in value[1:]):
            raise ValueError(f"Expected a #rrggbb color, got {value!r}")
        return value.lower()

    def color_for(self, feedback: Feedback | None) -> str:
        if feedback == Feedback.CORRECT:
            return self.right_spot_color
        if feedback == Feedback.PRESENT:
            return self.wrong_spot_color
        if feedback == Feedback.ABSENT:
            return self.not_in_word_color
        return self.tile


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    value = int(color[1:], 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
