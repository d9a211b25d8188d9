"""BERT tokenizer configuration

CONFIGURATION PURPOSE:
======================
This module defines the BertTokenizerConfig class which stores every option that
controls the tokenization pipeline. It is created once, when the tokenizer is
built, and never changes afterwards.

DEFAULTS (bert-base-uncased):
=============================
- do_lower_case: True
- do_basic_tokenize: True
- tokenize_chinese_chars: True
- never_split: empty
- special tokens: [UNK], [SEP], [PAD], [CLS], [MASK]
- max_input_chars_per_word: 100
- model_max_length: 512 (stored only, nothing is truncated or padded)
"""

import dataclasses
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple


def as_token_set(tokens: Optional[Iterable[str]]) -> FrozenSet[str]:
    """Turns None, a single token or an iterable of tokens into a frozenset."""
    if tokens is None:
        return frozenset()
    if isinstance(tokens, str):
        return frozenset((tokens,))
    return frozenset(tokens)


@dataclasses.dataclass(frozen=True)
class BertTokenizerConfig:
    """
    Configuration class to store the options of a [`BertTokenizer`].

    Args:
        do_lower_case (bool, optional): Whether or not to lowercase the input when tokenizing.
            Defaults to True.

        do_basic_tokenize (bool, optional): Whether or not to run the basic tokenizer
            (cleanup, whitespace and punctuation splitting) before WordPiece. Defaults to True.

        tokenize_chinese_chars (bool, optional): Whether or not to put spaces around CJK
            ideographs so that each one becomes a word. This should likely be deactivated
            for Japanese (see https://github.com/huggingface/transformers/issues/328).
            Defaults to True.

        never_split (Iterable[str], optional): Tokens which will never be lowercased, stripped
            or split during basic tokenization. Defaults to empty.

        unk_token (str, optional): The unknown token. A word that cannot be split into vocabulary
            pieces is replaced by this token. Defaults to "[UNK]".

        sep_token (str, optional): The separator token, used when building a sequence from two
            sequences and as the last token of a sequence. Defaults to "[SEP]".

        pad_token (str, optional): The token used for padding. Defaults to "[PAD]".

        cls_token (str, optional): The classifier token, first token of a sequence built with
            special tokens. Defaults to "[CLS]".

        mask_token (str, optional): The token used for masked language modeling. Defaults to "[MASK]".

        max_input_chars_per_word (int, optional): Words longer than this many characters are
            replaced by `unk_token` without trying WordPiece. Defaults to 100.

        strip_accents (bool, optional): Whether or not to strip accents. If None, accents are
            stripped exactly when `do_lower_case` is True (as in the original BERT). Defaults to None.

        model_max_length (int, optional): Maximum sequence length of the model the vocabulary
            belongs to. Stored for reference only. Defaults to 512.

    Example:
        >>> config = BertTokenizerConfig(do_lower_case=False, never_split=["[CLS]"])
        >>> config.never_split
        frozenset({'[CLS]'})
    """

    do_lower_case: bool = True
    do_basic_tokenize: bool = True
    tokenize_chinese_chars: bool = True
    never_split: FrozenSet[str] = frozenset()
    unk_token: str = "[UNK]"
    sep_token: str = "[SEP]"
    pad_token: str = "[PAD]"
    cls_token: str = "[CLS]"
    mask_token: str = "[MASK]"
    max_input_chars_per_word: int = 100
    strip_accents: Optional[bool] = None
    model_max_length: int = 512

    def __post_init__(self):
        # Accept any iterable for never_split but always store a frozenset
        object.__setattr__(self, "never_split", as_token_set(self.never_split))

        if (
            isinstance(self.max_input_chars_per_word, bool)
            or not isinstance(self.max_input_chars_per_word, int)
            or self.max_input_chars_per_word <= 0
        ):
            raise ValueError(
                f"max_input_chars_per_word must be a positive integer, got {self.max_input_chars_per_word!r}"
            )

    @property
    def all_special_tokens(self) -> Tuple[str, ...]:
        return (self.unk_token, self.sep_token, self.pad_token, self.cls_token, self.mask_token)

    @property
    def should_strip_accents(self) -> bool:
        """Resolved accent stripping flag (`strip_accents=None` follows `do_lower_case`)."""
        if self.strip_accents is None:
            return self.do_lower_case
        return self.strip_accents

    def replace(self, **changes: Any) -> "BertTokenizerConfig":
        """Returns a copy of this configuration with some fields changed."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        output = dataclasses.asdict(self)
        output["never_split"] = sorted(self.never_split)
        return output

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "BertTokenizerConfig":
        fields = {field.name for field in dataclasses.fields(cls)}
        unknown = set(config_dict) - fields
        if unknown:
            raise ValueError(f"Unknown tokenizer configuration keys: {sorted(unknown)}")
        return cls(**config_dict)


__all__ = ["BertTokenizerConfig", "as_token_set"]
