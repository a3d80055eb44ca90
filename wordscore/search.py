"""
search.py

Two-round opener search.

Round 1 scores every candidate against the answers and keeps the words
tied for the best score. Round 2 runs once per top first word: the
answers have that word's letters discounted, every candidate is scored
again, and the best second words are kept.
"""

from typing import Callable, NamedTuple, Optional

from tqdm import tqdm

from wordscore.patterns import decode_words, discount_codes, encode_word, encode_words
from wordscore.scoring import rank_scored, score_words, select_top


Trace = Optional[Callable[[str], None]]


class SecondWordResult(NamedTuple):
    first_word: str
    first_score: int
    second_words: list[str]
    second_score: int


def _trace_ranking(trace, scored, top_score, top_words):
    trace("All words in descending order by score:")
    for word, score in rank_scored(scored):
        trace(f"{score} {word}")
    trace("Top scoring words:")
    for word in top_words:
        trace(f"{word} {top_score}")


def _score_and_select(candidates, candidate_codes, answer_codes, trace):
    scored = score_words(candidates, answer_codes, candidate_codes)
    top_score, top_words = select_top(scored)
    if trace is not None:
        _trace_ranking(trace, scored, top_score, top_words)
    return top_score, top_words


def rank_first_words(candidates: list[str], answers: list[str], trace: Trace = None):
    """
    Best opening words.

    Returns (top_score, top_words), top_words sorted alphabetically.
    Raises EmptyCorpusError when there are no candidates.
    """
    candidate_codes = encode_words(candidates)
    answer_codes = encode_words(answers)
    return _score_and_select(candidates, candidate_codes, answer_codes, trace)


def best_second_words(
    candidates: list[str],
    answers: list[str],
    first_word: str,
    trace: Trace = None,
    candidate_codes=None,
    answer_codes=None,
):
    """
    Best follow-up words after `first_word`.

    The answers are discounted by `first_word` so the returned score only
    counts letters the first word did not already cover.
    """
    if candidate_codes is None:
        candidate_codes = encode_words(candidates)
    if answer_codes is None:
        answer_codes = encode_words(answers)

    discounted = discount_codes(encode_word(first_word), answer_codes)
    if trace is not None:
        trace(f"Answer words after letters from {first_word} removed:")
        for i, word in enumerate(decode_words(discounted)):
            trace(f"{i:2d}. {word}")

    return _score_and_select(candidates, candidate_codes, discounted, trace)


def rank_first_and_second_words(
    candidates: list[str],
    answers: list[str],
    trace: Trace = None,
    progress: bool = False,
) -> list[SecondWordResult]:
    """
    Best opening words, each paired with its best second words.

    Results follow the alphabetical order of the tied first words. Each
    second round starts again from the unmodified answers.
    """
    candidate_codes = encode_words(candidates)
    answer_codes = encode_words(answers)
    first_score, first_words = _score_and_select(
        candidates, candidate_codes, answer_codes, trace
    )

    results = []
    for first_word in tqdm(first_words, desc="Second words", disable=not progress):
        second_score, second_words = best_second_words(
            candidates,
            answers,
            first_word,
            trace=trace,
            candidate_codes=candidate_codes,
            answer_codes=answer_codes,
        )
        results.append(
            SecondWordResult(first_word, first_score, second_words, second_score)
        )

    return results
