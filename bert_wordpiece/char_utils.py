"""
Character Classification for BERT Tokenization

Every stage of the basic tokenizer asks the same few questions about a single
character. They are answered here, from the Unicode database shipped with
Python (`unicodedata`).

CATEGORIES USED:
================
- Control:     General Category Cc, Cf, Co, Cs, Cn (every "C*" category)
               and Me (enclosing mark, e.g. U+20DD)
               \t, \n and \r are NOT control, they count as whitespace
- Whitespace:  " ", \t, \n, \r and category Zs (space separator)
- Punctuation: all non-alphanumeric printable ASCII, plus categories
               Pc, Pd, Pe, Pf, Pi, Po, Ps (every "P*" category)
- CJK:         the CJK Unified Ideographs blocks and their extensions
- Mark:        category Mn (non-spacing combining mark, e.g. U+0301)

Characters such as "^", "$" and "`" are not Unicode punctuation (they are
symbols), but BERT treats them as punctuation anyway for consistency.
"""

import unicodedata


# Inclusive code point ranges of the CJK Unified Ideographs blocks.
# https://en.wikipedia.org/wiki/CJK_Unified_Ideographs_(Unicode_block)
# Hangul, Hiragana and Katakana live in other blocks. Those scripts are written
# with spaces between words, so they are handled like every other language.
CJK_RANGES = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B73F),
    (0x2B740, 0x2B81F),
    (0x2B820, 0x2CEAF),
    (0xF900, 0xFAFF),
    (0x2F800, 0x2FA1F),
)

# ASCII code point ranges treated as punctuation: !"#$%&'()*+,-./ :;<=>?@ [\]^_` {|}~
ASCII_PUNCTUATION_RANGES = (
    (33, 47),
    (58, 64),
    (91, 96),
    (123, 126),
)


def is_whitespace(char: str) -> bool:
    """Checks whether `char` is a whitespace character."""
    # \t, \n, and \r are technically control characters but we treat them
    # as whitespace since they are generally considered as such.
    if char in (" ", "\t", "\n", "\r"):
        return True
    return unicodedata.category(char) == "Zs"


def is_control(char: str) -> bool:
    """Checks whether `char` is a control character."""
    # These are technically control characters but we count them as whitespace
    # characters.
    if char in ("\t", "\n", "\r"):
        return False
    cat = unicodedata.category(char)
    # Enclosing marks are dropped along with the control characters
    return cat.startswith("C") or cat == "Me"


def is_punctuation(char: str) -> bool:
    """Checks whether `char` is a punctuation character."""
    cp = ord(char)
    if any(start <= cp <= end for start, end in ASCII_PUNCTUATION_RANGES):
        return True
    return unicodedata.category(char).startswith("P")


def is_chinese_char(cp: int) -> bool:
    """Checks whether `cp` is the code point of a CJK ideograph."""
    return any(start <= cp <= end for start, end in CJK_RANGES)


def is_nonspacing_mark(char: str) -> bool:
    """Checks whether `char` is a non-spacing combining mark (category Mn)."""
    return unicodedata.category(char) == "Mn"


__all__ = [
    "CJK_RANGES",
    "is_whitespace",
    "is_control",
    "is_punctuation",
    "is_chinese_char",
    "is_nonspacing_mark",
]
