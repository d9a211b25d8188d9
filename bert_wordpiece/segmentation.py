"""
Word Segmentation Helpers

The basic tokenizer turns normalized text into words with three helpers:

1. whitespace_tokenize: split on runs of whitespace
2. strip_accents: "café" → "cafe" (NFD decomposition, combining marks removed)
3. split_on_punctuation: "hello,world!" → ["hello", ",", "world", "!"]

All three are pure functions returning new objects.
"""

import unicodedata
from typing import AbstractSet, List, Optional

from .char_utils import is_nonspacing_mark, is_punctuation


def whitespace_tokenize(text: str) -> List[str]:
    """Runs basic whitespace cleaning and splitting on a piece of text."""
    text = text.strip()
    if not text:
        return []
    return text.split()


def strip_accents(text: str) -> str:
    """
    Strips accents from a piece of text.

    The text is decomposed (NFD) so that "é" becomes "e" + U+0301, then the
    non-spacing marks are dropped. The result is NOT recomposed.
    """
    text = unicodedata.normalize("NFD", text)
    return "".join(char for char in text if not is_nonspacing_mark(char))


def split_on_punctuation(text: str, never_split: Optional[AbstractSet[str]] = None) -> List[str]:
    """
    Splits punctuation on a piece of text.

    Every punctuation character becomes its own token; runs of other characters
    stay together. A token listed in `never_split` is returned untouched.

    Example:
        >>> split_on_punctuation("hello,world!")
        ['hello', ',', 'world', '!']
        >>> split_on_punctuation("[CLS]", never_split={"[CLS]"})
        ['[CLS]']
    """
    if never_split is not None and text in never_split:
        return [text]

    output = []
    pending = []
    for char in text:
        if is_punctuation(char):
            if pending:
                output.append("".join(pending))
                pending = []
            output.append(char)
        else:
            pending.append(char)
    if pending:
        output.append("".join(pending))
    return output


__all__ = ["whitespace_tokenize", "strip_accents", "split_on_punctuation"]
