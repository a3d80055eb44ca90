"""
patterns.py

Letter matching between two words, and the letter discounting used to
score a second guess.

Words are handled as uint8 arrays of letter codes:

    0..25 = a..z
    255   = BLANK, a consumed letter that can never match again

Both the comparator and the discounter run the same two-pass consumption:

1. Exact-position pass. Same letter in the same position; both letters
   are consumed.

2. Repositioned pass. Each unconsumed letter of the original word,
   scanned left to right, consumes the first unconsumed equal letter of
   the other word.

The passes are order-sensitive, so compare_words(a, b) and
compare_words(b, a) can differ when the words repeat letters a different
number of times. Always pass the guess being scored as `original` and the
answer as `candidate`.
"""

import numpy as np
from numba import njit

from wordscore.errors import InvalidWordError, InvalidWordLengthError


WORD_LENGTH = 5
EXACT_MATCH_POINTS = 3
REPOSITIONED_MATCH_POINTS = 1
MAX_SCORE = EXACT_MATCH_POINTS * WORD_LENGTH

BLANK = 255
BLANK_CHAR = " "


def encode_word(word: str) -> np.ndarray:
    """
    Encode a word as an array of letter codes.

    Spaces are accepted and encode to BLANK, so that discounted answers
    can be compared again. Anything else that is not an ASCII letter is
    rejected.
    """
    word = word.lower()
    if len(word) != WORD_LENGTH:
        raise InvalidWordLengthError(
            f"expected {WORD_LENGTH} letters, got {len(word)}: {word!r}"
        )

    codes = np.empty(WORD_LENGTH, dtype=np.uint8)
    for i, ch in enumerate(word):
        if ch == BLANK_CHAR:
            codes[i] = BLANK
        elif "a" <= ch <= "z":
            codes[i] = ord(ch) - ord("a")
        else:
            raise InvalidWordError(f"word contains a non-letter: {word!r}")
    return codes


def encode_words(words) -> np.ndarray:
    """Encode a sequence of words into an (n_words, WORD_LENGTH) array."""
    if isinstance(words, np.ndarray):
        if words.ndim != 2 or words.shape[1] != WORD_LENGTH:
            raise InvalidWordLengthError(
                f"expected an (n, {WORD_LENGTH}) code array, got shape {words.shape}"
            )
        return words.astype(np.uint8, copy=False)

    codes = np.empty((len(words), WORD_LENGTH), dtype=np.uint8)
    for i, word in enumerate(words):
        codes[i] = encode_word(word)
    return codes


def decode_word(codes: np.ndarray) -> str:
    return "".join(
        BLANK_CHAR if code == BLANK else chr(int(code) + ord("a")) for code in codes
    )


def decode_words(codes: np.ndarray) -> list[str]:
    return [decode_word(row) for row in codes]


@njit(cache=True)
def compare_codes(original, candidate):
    """Two-pass match score of two encoded words, in [0, MAX_SCORE]."""
    orig = original.copy()
    cand = candidate.copy()
    score = 0

    # First pass: exact-position matches consume both letters
    for i in range(WORD_LENGTH):
        if orig[i] != BLANK and orig[i] == cand[i]:
            score += EXACT_MATCH_POINTS
            orig[i] = BLANK
            cand[i] = BLANK

    # Second pass: each remaining original letter takes the first free match
    for i in range(WORD_LENGTH):
        letter = orig[i]
        if letter == BLANK:
            continue
        for j in range(WORD_LENGTH):
            if cand[j] == letter:
                score += REPOSITIONED_MATCH_POINTS
                orig[i] = BLANK
                cand[j] = BLANK
                break

    return score


@njit(cache=True)
def discount_codes(claimed, answers):
    """
    Copy of `answers` with every letter `claimed` would match blanked out.

    `claimed` plays the original role and each answer row the candidate
    role of compare_codes, but consumed answer letters are overwritten
    with BLANK instead of being scored.
    """
    result = answers.copy()

    for row in range(result.shape[0]):
        word = result[row]
        claim = claimed.copy()

        for i in range(WORD_LENGTH):
            if claim[i] != BLANK and claim[i] == word[i]:
                claim[i] = BLANK
                word[i] = BLANK

        for i in range(WORD_LENGTH):
            letter = claim[i]
            if letter == BLANK:
                continue
            for j in range(WORD_LENGTH):
                if word[j] == letter:
                    word[j] = BLANK
                    break

    return result


def compare_words(original: str, candidate: str) -> int:
    """
    Score how well `original` matches `candidate`.

    3 points per letter in the correct position, 1 point per letter that
    is present elsewhere. Each letter instance counts at most once.
    """
    return int(compare_codes(encode_word(original), encode_word(candidate)))


def discount_corpus(answers, claimed_word: str) -> np.ndarray:
    """
    Remove the letters of `claimed_word` from every answer.

    Returns a fresh (n_answers, WORD_LENGTH) code array in the same order
    as `answers`; `answers` itself is never modified.
    """
    return discount_codes(encode_word(claimed_word), encode_words(answers))


def discount_word(claimed_word: str, answer: str) -> str:
    """Single-answer form of discount_corpus, with blanks rendered as spaces."""
    return decode_word(discount_corpus([answer], claimed_word)[0])
