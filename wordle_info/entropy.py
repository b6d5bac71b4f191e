"""
entropy.py

Expected information (Shannon entropy of the feedback distribution) for a
single guess against a vocabulary of equally likely secrets.
"""

import numpy as np

from .feedback import DEFAULT_RULE, feedback_codes, matches
from .patterns import decode_pattern, encode_patterns, enumerate_patterns
from .words import encode_words, validate_vocabulary


BINCOUNT = "bincount"
SCAN = "scan"
METHODS = (BINCOUNT, SCAN)
DEFAULT_METHOD = BINCOUNT


def entropy_from_counts(counts, total=None):
    """
    Compute Shannon entropy in bits from bucket counts.

    Empty buckets contribute nothing. `total` defaults to the sum of the
    counts and is the denominator of every probability.
    """
    counts = np.asarray(counts, dtype=np.float64)
    if total is None:
        total = counts.sum()
    if total <= 0:
        raise ValueError("cannot compute entropy of an empty distribution")

    probs = counts[counts > 0] / total
    # max() folds -0.0 into 0.0
    return max(0.0, float(-np.sum(probs * np.log2(probs))))


def check_method(method):
    if method not in METHODS:
        raise ValueError(f"unknown scoring method {method!r}, expected one of {METHODS}")


def check_patterns(patterns, length):
    if not patterns:
        raise ValueError("pattern universe is empty")
    for pattern in patterns:
        if len(pattern) != length:
            raise ValueError(
                f"pattern {pattern!r} has length {len(pattern)}, "
                f"vocabulary words have {length} letters"
            )


def scan_pattern_counts(candidate, vocabulary, patterns, rule=DEFAULT_RULE):
    """
    For every pattern, count the vocabulary words consistent with it.

    This is the direct O(#patterns * #words) scan using the matcher.
    """
    return np.array(
        [
            sum(1 for target in vocabulary if matches(target, candidate, pattern, rule))
            for pattern in patterns
        ],
        dtype=np.int64,
    )


def bincount_pattern_counts(candidate, encoded_vocabulary, pattern_codes, rule=DEFAULT_RULE):
    """
    Same counts as scan_pattern_counts, in pattern_codes order.

    Each target falls into exactly one pattern, so binning the feedback codes
    of all targets partitions the vocabulary in one pass.
    """
    length = encoded_vocabulary.shape[1]
    codes = feedback_codes(candidate, encoded_vocabulary, rule)
    histogram = np.bincount(codes, minlength=3**length)
    return histogram[pattern_codes]


def expected_information(
    candidate,
    vocabulary,
    patterns=None,
    rule=DEFAULT_RULE,
    method=DEFAULT_METHOD,
):
    """
    Entropy in bits of the feedback pattern when `candidate` is guessed
    against a uniformly random secret from `vocabulary`.

    Raises ValueError for an empty or mixed-length vocabulary, or when the
    candidate length differs from the vocabulary's.
    """
    check_method(method)
    length = validate_vocabulary(vocabulary)
    if len(candidate) != length:
        raise ValueError(
            f"candidate {candidate!r} has {len(candidate)} letters, "
            f"vocabulary words have {length}"
        )
    if patterns is None:
        patterns = enumerate_patterns(length)
    check_patterns(patterns, length)

    if method == SCAN:
        counts = scan_pattern_counts(candidate, vocabulary, patterns, rule)
    else:
        counts = bincount_pattern_counts(
            candidate, encode_words(vocabulary), encode_patterns(patterns), rule
        )
    return entropy_from_counts(counts, total=len(vocabulary))


def pattern_distribution(candidate, vocabulary, rule=DEFAULT_RULE):
    """
    Non-empty partitions of the vocabulary induced by guessing `candidate`.

    Returns (pattern, count, probability) tuples, largest partition first.
    """
    length = validate_vocabulary(vocabulary)
    if len(candidate) != length:
        raise ValueError(
            f"candidate {candidate!r} has {len(candidate)} letters, "
            f"vocabulary words have {length}"
        )

    codes = feedback_codes(candidate, encode_words(vocabulary), rule)
    unique_codes, counts = np.unique(codes, return_counts=True)
    total = len(vocabulary)

    rows = [
        (decode_pattern(int(code), length), int(count), int(count) / total)
        for code, count in zip(unique_codes, counts)
    ]
    rows.sort(key=lambda row: row[1], reverse=True)
    return rows
