"""
wordle_entropy.py

CLI for ranking every word of a list by its single-guess expected information.

By default every word in data/allowed_words.txt is scored against the whole
list and the results are written, least informative first, as "word=score"
lines to expected_information.txt.

Optional:
-word WORD: score one word and show how it splits the list by feedback.
-rules wordle: use standard duplicate-letter feedback instead of the
  positional rule the published rankings use.
-method scan: count each pattern by scanning the list with the matcher
  (slow, mirrors the definition directly).
"""

import argparse
import time

from wordle_info.entropy import METHODS, DEFAULT_METHOD, expected_information, pattern_distribution
from wordle_info.feedback import DEFAULT_RULE, RULES
from wordle_info.patterns import enumerate_patterns, format_pattern
from wordle_info.ranking import DEFAULT_CHUNK_SIZE, DEFAULT_WORKERS, rank_vocabulary
from wordle_info.words import (
    ALLOWED_PATH,
    DEFAULT_PRECISION,
    RESULTS_PATH,
    load_word_list,
    save_results,
    validate_vocabulary,
)


TOP_SINGLE = 20


def load_vocabulary(path):
    print(f"Loading word list from {path}...")
    try:
        words = load_word_list(path)
    except OSError as exc:
        raise ValueError(f"cannot read word list {path}: {exc.strerror}") from exc

    length = validate_vocabulary(words)
    print(f"Loaded {len(words):,} words of {length} letters.")
    return words


def run_ranking(words, args):
    patterns = enumerate_patterns(len(words[0]))
    worker_count = max(1, args.workers)

    print(
        f"Scoring {len(words):,} guesses against {len(patterns)} patterns using "
        f"{worker_count} worker(s), rules: {args.rules}, method: {args.method}..."
    )
    start_time = time.time()
    results = rank_vocabulary(
        words,
        patterns=patterns,
        workers=worker_count,
        rule=args.rules,
        method=args.method,
        chunk_size=args.chunk_size,
        progress=args.progress == "bar",
    )
    elapsed = time.time() - start_time
    print(f"Scored {len(results):,} guesses in {elapsed:.1f}s.")

    save_results(results, args.output, precision=args.precision, append=args.append)
    print(f"Saved results to {args.output}.")

    if args.top > 0:
        print(f"\nTop {min(args.top, len(results))} single guesses:")
        for word, score in reversed(results[-args.top:]):
            print(f"{word}: {score:.4f} bits")

    return results


def run_specific_word(words, word, args):
    if word not in set(words):
        print(f"Note: {word} is not in the word list; scoring it anyway.")

    score = expected_information(word, words, rule=args.rules, method=args.method)
    rows = pattern_distribution(word, words, rule=args.rules)

    print(f"\n{word}: {score:.{args.precision}f} bits over {len(rows)} feedback pattern(s)")
    print("Legend: G exact, Y present, . absent")
    for pattern, count, probability in rows[: args.top if args.top > 0 else len(rows)]:
        print(f"{format_pattern(pattern)}  {count:>6,}  {probability:8.4%}")
    return score


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Rank words by the expected information of a single Wordle guess."
    )
    parser.add_argument(
        "-input",
        type=str,
        default=str(ALLOWED_PATH),
        help="Word list, one word per line (default: data/allowed_words.txt).",
    )
    parser.add_argument(
        "-output",
        type=str,
        default=str(RESULTS_PATH),
        help="Where to write word=score lines (default: expected_information.txt).",
    )
    parser.add_argument(
        "-append",
        action="store_true",
        help="Append to the output file instead of overwriting it.",
    )
    parser.add_argument(
        "-word",
        type=str,
        default=None,
        help="Score one specific word and show its feedback partitions.",
    )
    parser.add_argument(
        "-rules",
        choices=RULES,
        default=DEFAULT_RULE,
        help=f"Feedback rule (default: {DEFAULT_RULE}).",
    )
    parser.add_argument(
        "-method",
        choices=METHODS,
        default=DEFAULT_METHOD,
        help=f"How pattern counts are computed (default: {DEFAULT_METHOD}).",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=DEFAULT_WORKERS,
        help=f"Worker processes; 1 scores in-process (default: {DEFAULT_WORKERS}).",
    )
    parser.add_argument(
        "-chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Guesses per worker task (default: {DEFAULT_CHUNK_SIZE}).",
    )
    parser.add_argument(
        "-precision",
        type=int,
        default=DEFAULT_PRECISION,
        help=f"Decimal places for written scores (default: {DEFAULT_PRECISION}).",
    )
    parser.add_argument(
        "-progress",
        choices=("bar", "off"),
        default="bar",
        help="Progress output style (default: bar).",
    )
    parser.add_argument(
        "-top",
        type=int,
        default=TOP_SINGLE,
        help=f"How many best guesses or partitions to print (default: {TOP_SINGLE}).",
    )
    args = parser.parse_args(argv)
    if args.precision < 0:
        parser.error(f"-precision must be non-negative, got {args.precision}")
    return args


def main(argv=None):
    args = parse_args(argv)

    try:
        words = load_vocabulary(args.input)
        if args.word is not None:
            run_specific_word(words, args.word.strip().lower(), args)
        else:
            run_ranking(words, args)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
