"""
errors.py

Error types raised by the scoring core. They are all precondition
violations: nothing here is retryable.
"""


class WordScoreError(ValueError):
    """Base class for word scoring errors."""


class InvalidWordLengthError(WordScoreError):
    """A word that is not exactly WORD_LENGTH letters reached the core."""


class InvalidWordError(WordScoreError):
    """A word contains characters other than ASCII letters."""


class EmptyCorpusError(WordScoreError):
    """Top-word selection was asked to rank an empty set of words."""
