"""
WordPiece Tokenizer

WORDPIECE ALGORITHM:
====================
WordPiece is a subword tokenization algorithm that breaks words into smaller units.
This helps handle rare words and reduces vocabulary size.

Example: "playing" → ["play", "##ing"]
The "##" prefix indicates a subword continuation (not a word start).

GREEDY LONGEST-MATCH-FIRST:
===========================
For each word, starting at position 0:
1. Try the longest remaining substring, then shorter and shorter ones
2. Pieces after the first are looked up with the "##" prefix
3. Take the first (longest) piece found in the vocabulary and continue after it
4. If no piece matches at some position, the WHOLE word becomes [UNK]

Example with vocabulary {"un", "##aff", "##able"}:
    "unaffable" → "un" + "##aff" + "##able"
"""

from typing import List

from .segmentation import whitespace_tokenize
from .vocab_utils import Vocabulary


# Marks a piece that continues the previous one without a word boundary
CONTINUING_SUBWORD_PREFIX = "##"


class WordpieceTokenizer:
    """
    Runs WordPiece tokenization.

    Args:
        vocab (Vocabulary): Vocabulary the pieces are looked up in
        unk_token (str): Token emitted for words that cannot be split
        max_input_chars_per_word (int, optional): Longer words become `unk_token`. Defaults to 100.
    """

    def __init__(self, vocab: Vocabulary, unk_token: str, max_input_chars_per_word: int = 100):
        self.vocab = vocab
        self.unk_token = unk_token
        self.max_input_chars_per_word = max_input_chars_per_word

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenizes a piece of text into its word pieces. This uses a greedy longest-match-first algorithm to perform
        tokenization using the given vocabulary.

        For example, `input = "unaffable"` will return as output `["un", "##aff", "##able"]`.

        Args:
            text: A single token or whitespace separated tokens. This should have
                already been passed through *BasicTokenizer*.

        Returns:
            A list of wordpiece tokens.
        """
        output_tokens = []
        for token in whitespace_tokenize(text):
            output_tokens.extend(self.tokenize_word(token))
        return output_tokens

    def tokenize_word(self, word: str) -> List[str]:
        """Splits a single word (no whitespace) into pieces, or `[unk_token]`."""
        if len(word) > self.max_input_chars_per_word:
            return [self.unk_token]

        sub_tokens = []
        start = 0
        while start < len(word):
            end = len(word)
            cur_substr = None
            while start < end:
                substr = word[start:end]
                if start > 0:
                    substr = CONTINUING_SUBWORD_PREFIX + substr
                if substr in self.vocab:
                    cur_substr = substr
                    break
                end -= 1
            if cur_substr is None:
                # No partial credit
                return [self.unk_token]
            sub_tokens.append(cur_substr)
            start = end
        return sub_tokens


__all__ = ["CONTINUING_SUBWORD_PREFIX", "WordpieceTokenizer"]
