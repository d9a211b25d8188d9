"""Exceptions raised by the tokenization pipeline.

Only two conditions are errors. Everything else (words that are too long,
words with no vocabulary match, empty input) is handled by falling back to
the unknown token or returning an empty list.
"""

from typing import Optional


class BertTokenizationError(Exception):
    """Base class for all errors raised by this package."""


class VocabLoadError(BertTokenizationError, OSError):
    """
    The vocabulary resource is missing or unreadable.

    Raised while constructing a tokenizer; the tokenizer is never built with an
    empty or partial vocabulary as a result of a failed read.
    """

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class UnknownTokenError(BertTokenizationError, KeyError):
    """
    A token (or ID) was looked up but is not part of the vocabulary.

    WordPiece only ever emits vocabulary members or the unknown token, so this
    points to a vocabulary / tokenizer mismatch.
    """

    def __init__(self, token):
        super().__init__(token)
        self.token = token

    def __str__(self):
        # KeyError quotes its argument, keep a readable message instead
        return f"{self.token!r} is not in the vocabulary"


__all__ = ["BertTokenizationError", "VocabLoadError", "UnknownTokenError"]
