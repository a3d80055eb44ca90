"""
scoring.py

Scores guess words against an answer corpus and picks the top scorers.

A guess's corpus score is the sum of compare_codes(guess, answer) over
every answer. Higher means the guess matches more letters on average,
which is the information proxy used to rank openers.
"""

from itertools import takewhile
from typing import NamedTuple

import numpy as np
from numba import njit, prange, set_num_threads

from wordscore.errors import EmptyCorpusError
from wordscore.patterns import compare_codes, encode_word, encode_words


class ScoredWord(NamedTuple):
    word: str
    score: int


@njit(cache=True, parallel=True)
def _score_candidates_kernel(candidates, answers):
    n_candidates = candidates.shape[0]
    n_answers = answers.shape[0]
    scores = np.zeros(n_candidates, dtype=np.int64)

    # Each candidate writes only its own slot, so the loop needs no locking.
    for c in prange(n_candidates):
        total = 0
        for a in range(n_answers):
            total += compare_codes(candidates[c], answers[a])
        scores[c] = total

    return scores


def set_workers(workers):
    """Limit the number of threads used by score_candidates."""
    if workers is not None:
        set_num_threads(workers)


def score_candidates(candidates, answers) -> np.ndarray:
    """
    Corpus score of every candidate, in candidate order.

    Both arguments may be word lists or already encoded code arrays.
    Every candidate is scored independently against the full `answers`.
    """
    candidate_codes = encode_words(candidates)
    answer_codes = encode_words(answers)
    if candidate_codes.shape[0] == 0:
        return np.zeros(0, dtype=np.int64)
    return _score_candidates_kernel(candidate_codes, answer_codes)


def score_against_corpus(word: str, answers) -> int:
    """Corpus score of a single word."""
    return int(score_candidates(encode_word(word)[np.newaxis, :], answers)[0])


def score_words(candidates: list[str], answers, candidate_codes=None) -> list[ScoredWord]:
    """Pair each candidate word with its corpus score."""
    if candidate_codes is None:
        candidate_codes = candidates
    scores = score_candidates(candidate_codes, answers)
    return [ScoredWord(word, int(score)) for word, score in zip(candidates, scores)]


def rank_scored(scored) -> list[ScoredWord]:
    """Sort by score descending, then alphabetically within equal scores."""
    return sorted(
        (ScoredWord(*item) for item in scored),
        key=lambda item: (-item.score, item.word),
    )


def select_top(scored) -> tuple[int, list[str]]:
    """
    Return the top score and every word tied at it, alphabetically.

    Raises EmptyCorpusError if there is nothing to rank.
    """
    ranked = rank_scored(scored)
    if not ranked:
        raise EmptyCorpusError("cannot select top words from an empty corpus")

    top_score = ranked[0].score
    top_words = [item.word for item in takewhile(lambda item: item.score == top_score, ranked)]
    return top_score, top_words
