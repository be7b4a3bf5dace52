#!/usr/bin/env python3
"""
Core Puzzle Solver
------------------
Provides callable functions `split_number(n)`, `core(operands)` and
`solve_core(operands)` that find the "core" of four numbers: the smallest
whole result of using each number once and each of subtract, multiply
and divide once, with every step staying a whole number.

Usage (example):
    from core_solver import core, split_number
    result = core(split_number(86455))   # 18
"""

from itertools import permutations

from parser import number_to_letter


def extract_digit(source, position):
    """Return the digit of `source` at `position`, counted from 1 at the most significant end."""
    if position < 1:
        raise ValueError("Digit position must be 1 or greater.")
    if source == 0:
        return 0
    offset = len(str(source)) - position
    if offset < 0:
        raise ValueError(f"{source} has no digit at position {position}.")
    return (source // 10 ** offset) % 10


def partition_layouts(digits):
    """
    Every distinct ordering of the balanced group lengths for a number
    with `digits` digits, in the order permutations() first produces them.
    """
    small_size = digits // 4
    large_size = small_size + 1  # large groups are only ever one digit longer
    large_count = digits % 4

    if large_count > 3:
        raise RuntimeError("large count should never be greater than 3")
    base_splits = (small_size,) * (4 - large_count) + (large_size,) * large_count

    # dict keeps first-seen order while dropping repeated arrangements
    return list(dict.fromkeys(permutations(base_splits)))


def split_number(n):
    """
    Split `n` into four contiguous digit groups of near-equal length,
    choosing the layout whose groups have the lowest total.
    """
    if n <= 999:
        raise ValueError("Number must have at least 4 digits to split into four.")

    lowest_sum = None
    result = None

    for layout in partition_layouts(len(str(n))):
        next_digit = 0
        candidate = [0, 0, 0, 0]
        for number, size in enumerate(layout):
            for power in reversed(range(size)):
                next_digit += 1
                candidate[number] += extract_digit(n, next_digit) * 10 ** power

        total = sum(candidate)
        if lowest_sum is None or total < lowest_sum:
            lowest_sum = total
            result = candidate

    return result


# --- Optional-int operations: None means "no whole result" and propagates ---

def s_sub(a, b):
    # going negative can never come back to a valid core
    if a is None or b is None or a < b:
        return None
    return a - b


def s_mul(a, b):
    if a is None or b is None:
        return None
    return a * b


def s_div(a, b):
    if a is None or b is None or b == 0 or a % b != 0:
        return None
    return a // b


SYMBOLS = {s_sub: "-", s_mul: "×", s_div: "/"}

# Each pattern starts from operand 0 and applies three (operation, operand index)
# steps left to right. Fractions may not appear part way through, so wherever a
# divide sits next to a multiply the operands are swapped to multiply first;
# the operators themselves keep their order.
PATTERNS = (
    ((s_sub, 1), (s_mul, 2), (s_div, 3)),  # sub-mul-div
    ((s_sub, 1), (s_mul, 3), (s_div, 2)),  # sub-div-mul, swapped
    ((s_mul, 1), (s_sub, 2), (s_div, 3)),  # mul-sub-div
    ((s_mul, 1), (s_div, 2), (s_sub, 3)),  # mul-div-sub
    ((s_div, 1), (s_sub, 2), (s_mul, 3)),  # div-sub-mul
    ((s_mul, 2), (s_div, 1), (s_sub, 3)),  # div-mul-sub, swapped
)


def _check_operands(operands):
    operands = list(operands)
    if len(operands) != 4:
        raise ValueError(f"Exactly four numbers are needed, got {len(operands)}.")
    return operands


def run_pattern(operands, pattern):
    acc = operands[0]
    for operation, index in pattern:
        acc = operation(acc, operands[index])
        if acc is None:
            return None
    return acc


def pattern_expression(operands, pattern):
    expr = str(operands[0])
    for i, (operation, index) in enumerate(pattern):
        if i > 0:
            expr = f"({expr})"
        expr = f"{expr} {SYMBOLS[operation]} {operands[index]}"
    return expr


def core(operands):
    """Smallest whole result over all six patterns, or None if none stays whole."""
    operands = _check_operands(operands)
    results = [run_pattern(operands, p) for p in PATTERNS]
    valid = [r for r in results if r is not None]
    return min(valid) if valid else None


def solve_core(operands):
    """
    Solve a core puzzle.
    Returns dict: { operands, core, letter, results: [(value, expression), ...] }
    """
    operands = _check_operands(operands)
    best = None
    results = []

    for pattern in PATTERNS:
        value = run_pattern(operands, pattern)
        if value is None:
            continue
        if best is None or value < best:
            best = value
            results = []
        if value == best:
            results.append((value, pattern_expression(operands, pattern)))

    letter = number_to_letter(best) if best is not None else None
    return {
        "operands": operands,
        "core": best,
        "letter": letter,
        "results": results,
    }


# Optional: run standalone for testing
if __name__ == "__main__":
    numbers = split_number(86455)
    result = solve_core(numbers)
    print(f"86455 splits into {numbers}, core {result['core']}:\n")
    for val, expr in result["results"]:
        print(f"{val} = {expr}")
