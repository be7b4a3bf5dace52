#!/usr/bin/env python3
"""
Interactive core solver.

Type a 4-letter word (CORE), one number of 4+ digits (86455) or four
comma-separated numbers (8,6,45,5) at the prompt. Ctrl-D to quit.
"""

from core_solver import core, split_number
from parser import (
    FOUR_NUMBERS,
    ONE_NUMBER,
    WORD,
    classify_input,
    number_to_letter,
    word_to_numbers,
)

NO_CORE = "No valid cores possible"


def format_core(result):
    return NO_CORE if result is None else str(result)


def describe(line: str) -> str:
    """Classify one line of input and render its core."""
    kind, value = classify_input(line)

    if kind == WORD:
        numbers = word_to_numbers(value)
        text = f"{value} -> {numbers} -> "
        result = core(numbers)
        if result is None:
            return text + "no valid cores possible"
        text += str(result)
        letter = number_to_letter(result)
        if letter:
            text += f" -> {letter}"
        return text

    if kind == ONE_NUMBER:
        try:
            numbers = split_number(value)
        except ValueError as e:
            return f"⚠️ {e}"
        return format_core(core(numbers))

    if kind == FOUR_NUMBERS:
        return format_core(core(value))

    return "Unrecognized input style"


def main():
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print("done, exiting.")
            break
        print(describe(line))


if __name__ == "__main__":
    main()
