"""
words.py

Handles loading, validating and writing word lists.
"""

from pathlib import Path

import numpy as np


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
ALLOWED_PATH = DATA_DIR / "allowed_words.txt"
RESULTS_PATH = Path("expected_information.txt")

DEFAULT_PRECISION = 6


def load_word_list(path):
    """Load a newline-separated word list, lowercased, skipping blank lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip().lower() for line in f if line.strip()]


def validate_vocabulary(words) -> int:
    """
    Check that the vocabulary is usable for scoring and return its word length.

    Every word must have the same length. Raises ValueError naming the first
    offending word otherwise.
    """
    if not words:
        raise ValueError("vocabulary is empty: at least one word is required")

    length = len(words[0])
    if length == 0:
        raise ValueError("vocabulary contains an empty word")

    for position, word in enumerate(words):
        if len(word) != length:
            raise ValueError(
                f"inconsistent word length: {word!r} (line {position + 1}) has "
                f"{len(word)} letters, expected {length} like {words[0]!r}"
            )

    return length


def encode_words(words) -> np.ndarray:
    """
    Encode equal-length words as an (n_words, length) array of code points.

    Code points rather than bytes keep non-ASCII alphabets intact.
    """
    length = validate_vocabulary(words)
    return np.array([[ord(ch) for ch in word] for word in words], dtype=np.int32).reshape(
        len(words), length
    )


def format_results(results, precision=DEFAULT_PRECISION):
    """Yield one "word=score" line per (word, score) pair."""
    for word, score in results:
        yield f"{word}={score:.{precision}f}"


def save_results(results, path, precision=DEFAULT_PRECISION, append=False):
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    lines = [line + "\n" for line in format_results(results, precision)]

    mode = "a" if append else "w"
    with open(path, mode, encoding="utf-8") as handle:
        handle.writelines(lines)
