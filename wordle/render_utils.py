import more_itertools

from wordle.config import GameConfig
from wordle.consts import BLANK, KEYBOARD_LETTERS, KEYBOARD_ROW_SIZES
from wordle.projector import CellUpdate
from wordle.state import Feedback, RunState
from wordle.theme import Theme, hex_to_rgb

RESET = "\033[0m"


def paint(text: str, background: str, foreground: str = "#ffffff") -> str:
    bg = ";".join(str(channel) for channel in hex_to_rgb(background))
    fg = ";".join(str(channel) for channel in hex_to_rgb(foreground))
    return f"\033[1;38;2;{fg}m\033[48;2;{bg}m{text}{RESET}"


def format_tile(character: str, feedback: Feedback | None, theme: Theme) -> str:
    if feedback is None:
        return paint(f" {character} ", theme.tile_placeholder if character == BLANK else theme.kb_btn_background,
                     theme.kb_btn_letter)
    return paint(f" {character} ", theme.color_for(feedback))


def format_board(cells: list[CellUpdate], config: GameConfig, theme: Theme) -> list[str]:
    grid = [[format_tile(BLANK, None, theme)] * config.columns for _ in range(config.rows)]
    for cell in cells:
        grid[cell.row][cell.column] = format_tile(cell.character, cell.feedback, theme)
    return [" ".join(row) for row in grid]


def format_keyboard(letters: dict[str, Feedback], theme: Theme) -> list[str]:
    lines = []
    for row in more_itertools.split_into(KEYBOARD_LETTERS, KEYBOARD_ROW_SIZES):
        keys = []
        for key in row:
            if key in letters:
                keys.append(paint(f" {key} ", theme.color_for(letters[key])))
            else:
                keys.append(paint(f" {key} ", theme.kb_btn_background, theme.kb_btn_letter))
        lines.append(" ".join(keys))
    return lines


def print_board(cells: list[CellUpdate], config: GameConfig, theme: Theme) -> None:
    print()
    for line in format_board(cells, config, theme):
        print(line)
    print()


def print_keyboard(letters: dict[str, Feedback], theme: Theme) -> None:
    for line in format_keyboard(letters, theme):
        print(line)
    print()


def print_message(message: str) -> None:
    print(f"  {message}")


def print_banner(run_state: RunState, target: str) -> None:
    if run_state == RunState.WON:
        print(f"You won! The word was {target}.")
    elif run_state == RunState.LOST:
        print(f"Out of guesses. The word was {target}.")
