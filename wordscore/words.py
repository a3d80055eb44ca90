"""
words.py

Loads the answer and guess word lists.
No numpy here, just clean text handling.
"""

from pathlib import Path

from wordscore.errors import InvalidWordError, InvalidWordLengthError
from wordscore.patterns import WORD_LENGTH


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
ANSWERS_FILE_NAME = "answers.txt"
GUESSES_FILE_NAME = "guesses.txt"


def validate_word(word: str) -> str:
    """Return `word` lower-cased, or raise if it is not a 5-letter word."""
    word = word.lower()
    if len(word) != WORD_LENGTH:
        raise InvalidWordLengthError(
            f"expected {WORD_LENGTH} letters, got {len(word)}: {word!r}"
        )
    if not (word.isascii() and word.isalpha()):
        raise InvalidWordError(f"word contains a non-letter: {word!r}")
    return word


def resolve_path(file_name) -> Path:
    """Bare file names are looked up in the data directory."""
    path = Path(file_name)
    if path.exists() or path.is_absolute() or len(path.parts) > 1:
        return path
    return DATA_DIR / path


def load_word_list(path) -> list[str]:
    """Load a whitespace-separated word list, one word per token."""
    with open(path, "r") as f:
        tokens = f.read().split()

    words = []
    for token in tokens:
        try:
            words.append(validate_word(token))
        except InvalidWordLengthError as exc:
            raise InvalidWordLengthError(f"{path}: {exc}") from exc
        except InvalidWordError as exc:
            raise InvalidWordError(f"{path}: {exc}") from exc
    return words


def merge_candidates(answers: list[str], guesses: list[str]) -> list[str]:
    """Answers followed by guess-only words, each word kept once."""
    seen = set()
    candidates = []
    for word in answers + guesses:
        if word not in seen:
            seen.add(word)
            candidates.append(word)
    return candidates


def load_words(answers_file=ANSWERS_FILE_NAME, guesses_file=GUESSES_FILE_NAME):
    """
    Returns:
        answers: list of possible solution words
        candidates: list of valid guess words (includes answers)
    """
    answers = load_word_list(resolve_path(answers_file))
    guesses = load_word_list(resolve_path(guesses_file))
    return answers, merge_candidates(answers, guesses)
