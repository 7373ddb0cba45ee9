WORD_LENGTH = 5
MAX_GUESSES = 6

ENTER_KEY = "ENTER"
DELETE_KEY = "<-"
BACKSPACE_KEYS = (DELETE_KEY, "BACKSPACE", "\b", "\x7f")

KEYBOARD_LETTERS = [
    "Q", "W", "E", "R", "T", "Y", "U", "I", "O", "P",
    "A", "S", "D", "F", "G", "H", "J", "K", "L",
    ENTER_KEY, "Z", "X", "C", "V", "B", "N", "M", DELETE_KEY,
]
KEYBOARD_ROW_SIZES = [10, 9, 9]

BLANK = " "
