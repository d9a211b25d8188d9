"""Text cleanup applied before any splitting: invalid characters and CJK spacing."""

from .char_utils import is_chinese_char, is_control, is_whitespace


def clean_text(text: str) -> str:
    """
    Performs invalid character removal and whitespace cleanup on text.

    - NUL (U+0000), the replacement character (U+FFFD) and control characters are dropped
    - every whitespace character becomes a single ASCII space
    - everything else is kept as is

    Example:
        >>> clean_text("a\\tb\\x00c\\u200bd")
        'a bcd'
    """
    output = []
    for char in text:
        cp = ord(char)
        if cp == 0 or cp == 0xFFFD or is_control(char):
            continue
        output.append(" " if is_whitespace(char) else char)
    return "".join(output)


def tokenize_chinese_chars(text: str) -> str:
    """
    Adds whitespace around any CJK character.

    CJK text is written without spaces, so every ideograph is turned into its
    own whitespace-delimited word before the whitespace split runs.

    Example:
        >>> tokenize_chinese_chars("ab所有")
        'ab 所  有 '
    """
    output = []
    for char in text:
        if is_chinese_char(ord(char)):
            output.extend((" ", char, " "))
        else:
            output.append(char)
    return "".join(output)


__all__ = ["clean_text", "tokenize_chinese_chars"]
