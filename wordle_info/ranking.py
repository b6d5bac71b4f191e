"""
ranking.py

Scores every vocabulary word as a guess against the vocabulary itself and
ranks the results.

Candidates are farmed out to a process pool. Each worker receives the
read-only inputs once through the pool initializer and returns only
(index, score) pairs, so nothing is shared or locked during scoring.
"""

import multiprocessing as mp

from tqdm import tqdm

from .entropy import (
    DEFAULT_METHOD,
    SCAN,
    bincount_pattern_counts,
    check_method,
    check_patterns,
    entropy_from_counts,
    scan_pattern_counts,
)
from .feedback import DEFAULT_RULE, RULES
from .patterns import encode_patterns, enumerate_patterns
from .words import encode_words, validate_vocabulary


DEFAULT_WORKERS = 8
DEFAULT_CHUNK_SIZE = 16


_WORKER_STATE = {}


def _init_worker(vocabulary, patterns, rule, method):
    _WORKER_STATE["vocabulary"] = vocabulary
    _WORKER_STATE["patterns"] = patterns
    _WORKER_STATE["rule"] = rule
    _WORKER_STATE["method"] = method
    _WORKER_STATE["encoded"] = encode_words(vocabulary)
    _WORKER_STATE["pattern_codes"] = encode_patterns(patterns)


def _score_index(index):
    vocabulary = _WORKER_STATE["vocabulary"]
    rule = _WORKER_STATE["rule"]
    candidate = vocabulary[index]

    if _WORKER_STATE["method"] == SCAN:
        counts = scan_pattern_counts(candidate, vocabulary, _WORKER_STATE["patterns"], rule)
    else:
        counts = bincount_pattern_counts(
            candidate, _WORKER_STATE["encoded"], _WORKER_STATE["pattern_codes"], rule
        )
    return index, entropy_from_counts(counts, total=len(vocabulary))


def rank_vocabulary(
    vocabulary,
    patterns=None,
    workers=DEFAULT_WORKERS,
    rule=DEFAULT_RULE,
    method=DEFAULT_METHOD,
    chunk_size=DEFAULT_CHUNK_SIZE,
    progress=True,
):
    """
    Return (word, entropy) for every vocabulary word, ascending by entropy.

    The sort is stable, so words with equal entropy keep their vocabulary
    order. `workers=1` scores in the calling process without a pool. Input is
    validated before any scoring starts; an exception while scoring any
    candidate aborts the whole ranking.
    """
    vocabulary = list(vocabulary)
    length = validate_vocabulary(vocabulary)
    if rule not in RULES:
        raise ValueError(f"unknown feedback rule {rule!r}, expected one of {RULES}")
    check_method(method)
    if patterns is None:
        patterns = enumerate_patterns(length)
    patterns = list(patterns)
    check_patterns(patterns, length)

    worker_count = max(1, int(workers))
    chunk_size = max(1, int(chunk_size))
    n_words = len(vocabulary)
    scores = [None] * n_words

    with tqdm(total=n_words, desc="Scoring guesses", disable=not progress) as bar:
        if worker_count == 1:
            _init_worker(vocabulary, patterns, rule, method)
            try:
                for index in range(n_words):
                    _, scores[index] = _score_index(index)
                    bar.update(1)
            finally:
                _WORKER_STATE.clear()
        else:
            start_methods = mp.get_all_start_methods()
            start_method = "fork" if "fork" in start_methods else "spawn"
            ctx = mp.get_context(start_method)

            with ctx.Pool(
                processes=worker_count,
                initializer=_init_worker,
                initargs=(vocabulary, patterns, rule, method),
            ) as pool:
                for index, score in pool.imap_unordered(
                    _score_index, range(n_words), chunksize=chunk_size
                ):
                    scores[index] = score
                    bar.update(1)

    results = list(zip(vocabulary, scores))
    results.sort(key=lambda item: item[1])
    return results
