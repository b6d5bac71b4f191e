"""
feedback.py

Simulates the feedback the game returns for a guess against a secret word.

Two rules are supported:

    positional  Each position is judged on its own. A guessed letter that is
                not in place is marked present whenever the secret contains
                it anywhere, however many times the guess repeats it. This is
                the rule the published rankings were computed with.

    wordle      Standard duplicate-letter accounting. Greens consume one
                instance of their letter first, then yellows are handed out
                left to right only while unconsumed instances remain.

Both rules are total functions of (target, guess): exactly one pattern of the
universe matches any pair.
"""

from collections import Counter

import numpy as np

from .patterns import ABSENT, EXACT, PRESENT, encode_pattern


POSITIONAL = "positional"
WORDLE = "wordle"
RULES = (POSITIONAL, WORDLE)
DEFAULT_RULE = POSITIONAL


def _check_rule(rule):
    if rule not in RULES:
        raise ValueError(f"unknown feedback rule {rule!r}, expected one of {RULES}")


def matches(target: str, guess: str, pattern, rule=DEFAULT_RULE) -> bool:
    """
    Return True if guessing `guess` against secret `target` yields `pattern`.

    Raises ValueError if either word is shorter than the pattern.
    """
    _check_rule(rule)
    if len(target) < len(pattern) or len(guess) < len(pattern):
        raise ValueError(
            f"words {target!r} and {guess!r} must have at least "
            f"{len(pattern)} letters to match a pattern"
        )

    for i, symbol in enumerate(pattern):
        if symbol not in (EXACT, PRESENT, ABSENT):
            raise ValueError(f"invalid feedback symbol {symbol!r} at position {i}")

    if rule == WORDLE:
        return feedback(target, guess, rule) == tuple(pattern)

    for i, symbol in enumerate(pattern):
        letter = guess[i]
        if symbol == EXACT:
            if letter != target[i]:
                return False
        elif symbol == PRESENT:
            if letter == target[i] or letter not in target:
                return False
        elif letter in target:
            return False
    return True


def feedback(target: str, guess: str, rule=DEFAULT_RULE) -> tuple:
    """Return the feedback pattern for `guess` against secret `target`."""
    _check_rule(rule)
    if len(target) != len(guess):
        raise ValueError(f"length mismatch between {target!r} and {guess!r}")

    if rule == POSITIONAL:
        return tuple(
            EXACT if g == t else PRESENT if g in target else ABSENT
            for g, t in zip(guess, target)
        )

    result = [ABSENT] * len(guess)
    counts = Counter(target)

    # First pass: greens consume their letter
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            result[i] = EXACT
            counts[g] -= 1

    # Second pass: yellows while unused instances remain
    for i, g in enumerate(guess):
        if result[i] == ABSENT and counts[g] > 0:
            result[i] = PRESENT
            counts[g] -= 1

    return tuple(result)


def feedback_code(target: str, guess: str, rule=DEFAULT_RULE) -> int:
    return encode_pattern(feedback(target, guess, rule))


def feedback_codes(candidate: str, encoded_vocabulary: np.ndarray, rule=DEFAULT_RULE) -> np.ndarray:
    """
    Feedback codes of one guess against every target in the vocabulary.

    `encoded_vocabulary` is the (n_words, length) code point array produced
    by words.encode_words. Returns an int64 array of base-3 pattern codes,
    one per target, identical to calling feedback_code on each pair.
    """
    _check_rule(rule)
    n_words, length = encoded_vocabulary.shape
    if len(candidate) != length:
        raise ValueError(
            f"guess {candidate!r} has {len(candidate)} letters, "
            f"vocabulary words have {length}"
        )

    guess = np.array([ord(ch) for ch in candidate], dtype=encoded_vocabulary.dtype)
    exact = encoded_vocabulary == guess

    # same_letter[n, i, j]: target n has guess letter i at position j
    same_letter = encoded_vocabulary[:, None, :] == guess[None, :, None]

    if rule == POSITIONAL:
        present = ~exact & same_letter.any(axis=2)
    else:
        unmatched = (same_letter & ~exact[:, None, :]).sum(axis=2)
        earlier = np.tril(guess[:, None] == guess[None, :], k=-1)
        prior = (~exact).astype(np.int64) @ earlier.T.astype(np.int64)
        present = ~exact & (prior < unmatched)

    symbols = np.where(exact, EXACT, np.where(present, PRESENT, ABSENT)).astype(np.int64)
    powers = 3 ** np.arange(length - 1, -1, -1, dtype=np.int64)
    return symbols @ powers
