"""
Basic Tokenizer

Runs the pre-WordPiece part of the BERT pipeline: cleanup, CJK spacing,
whitespace splitting, lowercasing, accent removal and punctuation splitting.

EXAMPLE FLOW:
=============
Input text: " Héllo,\tWORLD! 所有 "
→ After cleanup: " Héllo, WORLD! 所有 "
→ After CJK spacing: " Héllo, WORLD!  所  有  "
→ After whitespace split: ["Héllo,", "WORLD!", "所", "有"]
→ After lowercase + accents: ["hello,", "world!", "所", "有"]
→ After punctuation split: ["hello", ",", "world", "!", "所", "有"]
"""

from typing import Iterable, List, Optional

from .configuration import as_token_set
from .normalization import clean_text, tokenize_chinese_chars
from .segmentation import split_on_punctuation, strip_accents, whitespace_tokenize


class BasicTokenizer:
    """
    Constructs a BasicTokenizer that will run basic tokenization (punctuation splitting, lower casing, etc.).

    Every whitespace-separated word contributes to the output. Words listed in
    `never_split` are passed through verbatim: no lowercasing, no accent
    stripping and no punctuation splitting.

    Args:
        do_lower_case (bool, optional): Whether or not to lowercase the input. Defaults to True.
        never_split (Iterable[str], optional): Tokens which will never be split or normalized.
        tokenize_chinese_chars (bool, optional): Whether or not to isolate CJK ideographs. Defaults to True.
        strip_accents (bool, optional): Whether or not to strip accents. If None, follows
            `do_lower_case`. Defaults to None.

    Example:
        >>> BasicTokenizer().tokenize("Hello, World!")
        ['hello', ',', 'world', '!']
    """

    def __init__(
        self,
        do_lower_case: bool = True,
        never_split: Optional[Iterable[str]] = None,
        tokenize_chinese_chars: bool = True,
        strip_accents: Optional[bool] = None,
    ):
        self.do_lower_case = do_lower_case
        self.never_split = as_token_set(never_split)
        self.tokenize_chinese_chars = tokenize_chinese_chars
        self.strip_accents = do_lower_case if strip_accents is None else strip_accents

    def tokenize(self, text: str, never_split: Optional[Iterable[str]] = None) -> List[str]:
        """
        Tokenizes a piece of text into normalized words and punctuation.

        Args:
            text (str): Raw input text
            never_split (Iterable[str], optional): Extra tokens to keep intact for this call only

        Returns:
            List[str]: Whitespace-free tokens, in reading order
        """
        if not isinstance(text, str):
            raise TypeError(f"Text to tokenize must be a string, got {type(text).__name__}")

        never_split = self.never_split.union(as_token_set(never_split)) if never_split else self.never_split

        text = clean_text(text)

        # This was added on November 1st, 2018 for the multilingual and Chinese
        # models. This is also applied to the English models now, but it doesn't
        # matter since the English models were not trained on any Chinese data
        # and generally don't have any Chinese data in them (there are Chinese
        # characters in the vocabulary because Wikipedia does have some Chinese
        # words in the English Wikipedia.).
        if self.tokenize_chinese_chars:
            text = tokenize_chinese_chars(text)

        split_tokens = []
        for token in whitespace_tokenize(text):
            if token not in never_split:
                if self.do_lower_case:
                    token = token.lower()
                if self.strip_accents:
                    token = strip_accents(token)
            split_tokens.extend(split_on_punctuation(token, never_split))

        return whitespace_tokenize(" ".join(split_tokens))


__all__ = ["BasicTokenizer"]
