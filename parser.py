import re

# --- Input kinds returned by classify_input ---
ONE_NUMBER = "one_number"
FOUR_NUMBERS = "four_numbers"
WORD = "word"
UNKNOWN = "unknown"

NUMBER_RE = re.compile(r"[0-9]+")
WORD_RE = re.compile(r"[A-Za-z]{4}")


def classify_input(line: str) -> tuple[str, object]:
    """
    Work out what shape of puzzle a line of input is.

    Returns (kind, value):
      ONE_NUMBER   -> int, to be split into four
      WORD         -> the upper-cased 4-letter word
      FOUR_NUMBERS -> list of four ints, e.g. from "8,6,45,5"
      UNKNOWN      -> None
    """
    line = line.strip()

    # int() refuses digit strings past sys.get_int_max_str_digits()
    if NUMBER_RE.fullmatch(line):
        try:
            return ONE_NUMBER, int(line)
        except ValueError:
            return UNKNOWN, None

    if WORD_RE.fullmatch(line):
        return WORD, line.upper()

    parts = [p.strip() for p in line.split(",")]
    if len(parts) == 4 and all(NUMBER_RE.fullmatch(p) for p in parts):
        try:
            return FOUR_NUMBERS, [int(p) for p in parts]
        except ValueError:
            return UNKNOWN, None

    return UNKNOWN, None


def word_to_numbers(word: str) -> list[int]:
    """A=1 ... Z=26 for each letter of a 4-letter word."""
    if not WORD_RE.fullmatch(word):
        raise ValueError(f"Expected a 4-letter word, got {word!r}.")
    return [ord(ch) - ord("A") + 1 for ch in word.upper()]


def number_to_letter(num: int) -> str | None:
    if 0 < num < 27:
        return chr(ord("A") + num - 1)
    return None
