import math

import pytest

from wordle_info.entropy import (
    BINCOUNT,
    SCAN,
    bincount_pattern_counts,
    entropy_from_counts,
    expected_information,
    pattern_distribution,
    scan_pattern_counts,
)
from wordle_info.feedback import RULES
from wordle_info.patterns import EXACT, encode_patterns, enumerate_patterns
from wordle_info.words import encode_words


SMALL_VOCAB = ["crane", "slate", "eerie", "speed", "geese", "llama", "total", "allot", "crane"]


def test_entropy_from_counts():
    assert entropy_from_counts([1, 1, 1, 1]) == pytest.approx(2.0)
    assert entropy_from_counts([0, 7, 0]) == 0.0
    assert entropy_from_counts([2, 1, 1]) == pytest.approx(1.5)


def test_entropy_from_counts_uses_given_total():
    # half the mass is outside the listed buckets
    assert entropy_from_counts([1, 1], total=4) == pytest.approx(1.0)


def test_entropy_from_counts_rejects_empty_distribution():
    with pytest.raises(ValueError):
        entropy_from_counts([0, 0, 0])


@pytest.mark.parametrize("method", [BINCOUNT, SCAN])
def test_hand_computed_scenario(method):
    # abcde -> GGGGG, edcba -> YYGYY, aaaaa -> G....: three singleton partitions
    vocabulary = ["abcde", "edcba", "aaaaa"]
    score = expected_information("abcde", vocabulary, method=method)
    assert score == pytest.approx(math.log2(3), abs=1e-5)


@pytest.mark.parametrize("method", [BINCOUNT, SCAN])
def test_zero_entropy_when_every_target_gives_same_feedback(method):
    score = expected_information("abcde", ["fghij", "klmno", "pqrst"], method=method)
    assert score == 0.0


@pytest.mark.parametrize("method", [BINCOUNT, SCAN])
def test_even_split_reaches_maximum(method):
    vocabulary = ["abcde", "fghij", "abxyz", "edcba"]
    score = expected_information("abcde", vocabulary, method=method)
    assert score == pytest.approx(math.log2(min(243, len(vocabulary))))


@pytest.mark.parametrize("rule", RULES)
def test_entropy_is_non_negative_and_bounded(rule):
    for candidate in SMALL_VOCAB:
        score = expected_information(candidate, SMALL_VOCAB, rule=rule)
        assert 0.0 <= score <= math.log2(len(SMALL_VOCAB)) + 1e-9


@pytest.mark.parametrize("rule", RULES)
def test_scan_and_bincount_counts_agree(rule):
    patterns = enumerate_patterns(5)
    encoded = encode_words(SMALL_VOCAB)
    codes = encode_patterns(patterns)
    for candidate in SMALL_VOCAB:
        scanned = scan_pattern_counts(candidate, SMALL_VOCAB, patterns, rule)
        binned = bincount_pattern_counts(candidate, encoded, codes, rule)
        assert scanned.tolist() == binned.tolist()
        assert scanned.sum() == len(SMALL_VOCAB)


def test_duplicates_count_as_separate_targets():
    assert expected_information("crane", ["crane", "crane"]) == 0.0
    assert expected_information("crane", ["crane", "slate"]) == pytest.approx(1.0)


def test_rules_disagree_on_repeated_letters():
    # positional: YY... for both targets; wordle: Y.... versus YY...
    vocabulary = ["qqaqq", "qqaaq"]
    assert expected_information("aaxyz", vocabulary, rule="positional") == 0.0
    assert expected_information("aaxyz", vocabulary, rule="wordle") == pytest.approx(1.0)


def test_empty_vocabulary_rejected():
    with pytest.raises(ValueError, match="empty"):
        expected_information("crane", [])


def test_mixed_length_vocabulary_rejected():
    with pytest.raises(ValueError, match="inconsistent"):
        expected_information("crane", ["crane", "cranes"])


def test_candidate_length_must_match_vocabulary():
    with pytest.raises(ValueError):
        expected_information("cranes", ["crane", "slate"])


def test_unknown_method_rejected():
    with pytest.raises(ValueError):
        expected_information("crane", ["crane"], method="guess")


def test_patterns_must_match_word_length():
    with pytest.raises(ValueError):
        expected_information("crane", ["crane"], patterns=enumerate_patterns(4))


def test_pattern_distribution():
    rows = pattern_distribution("crane", ["crane", "crane", "slate", "pious"])

    assert [count for _, count, _ in rows] == [2, 1, 1]
    assert rows[0][0] == (EXACT,) * 5
    assert sum(probability for _, _, probability in rows) == pytest.approx(1.0)
