"""
patterns.py

Builds the universe of Wordle feedback patterns.

A pattern is a tuple with one symbol per letter position:

    0 = absent  (gray)
    1 = present (yellow)
    2 = exact   (green)

Patterns are encoded as base-3 integers with the first position as the most
significant digit, so for five letters every code lies in 0..242.
"""

import numpy as np


ABSENT = 0
PRESENT = 1
EXACT = 2

FEEDBACK_SYMBOLS = (EXACT, PRESENT, ABSENT)

_SYMBOL_CHARS = {ABSENT: ".", PRESENT: "Y", EXACT: "G"}


def enumerate_patterns(length: int, symbols=FEEDBACK_SYMBOLS) -> list[tuple]:
    """
    Return every feedback pattern of the given length.

    Patterns are built depth first from a work stack of (index, partial)
    pairs. The result holds len(symbols) ** length distinct patterns; callers
    must not rely on their order.
    """
    if length < 0:
        raise ValueError(f"pattern length must be non-negative, got {length}")

    results = []
    stack = [(0, ())]

    while stack:
        index, current = stack.pop()
        if index == length:
            results.append(current)
            continue
        for symbol in symbols:
            stack.append((index + 1, current + (symbol,)))

    return results


def encode_pattern(pattern) -> int:
    """Encode a pattern as a single base-3 integer."""
    code = 0
    for symbol in pattern:
        code = code * 3 + symbol
    return code


def decode_pattern(code: int, length: int) -> tuple:
    digits = []
    for _ in range(length):
        code, digit = divmod(code, 3)
        digits.append(digit)
    return tuple(reversed(digits))


def encode_patterns(patterns) -> np.ndarray:
    """Encode a sequence of patterns into an int64 array of codes."""
    return np.fromiter((encode_pattern(p) for p in patterns), dtype=np.int64)


def format_pattern(pattern) -> str:
    return "".join(_SYMBOL_CHARS[symbol] for symbol in pattern)
