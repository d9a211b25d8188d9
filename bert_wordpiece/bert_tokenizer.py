# coding=utf-8
# Copyright 2018 The Google AI Language Team Authors and The HuggingFace Inc. team.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
BERT Tokenizer Implementation

This module implements the BertTokenizer class which handles the complete
tokenization pipeline for BERT models using the WordPiece algorithm.

TOKENIZATION PIPELINE:
======================
The BERT tokenization process consists of several stages executed in sequence:

1. Normalization: Clean and preprocess text (lowercasing, accent removal, etc.)
2. Pre-tokenization: Split text into words (by whitespace and punctuation)
3. WordPiece: Split words into subword tokens using the WordPiece algorithm
4. Post-processing (optional): Add special tokens ([CLS], [SEP]) and create token_type_ids

EXAMPLE FLOW:
=============
Input text: "Hello, world!"
→ After normalization: "hello, world!" (if do_lower_case=True)
→ After pre-tokenization: ["hello", ",", "world", "!"]
→ After WordPiece: ["hello", ",", "world", "!"]
→ After post-processing: ["[CLS]", "hello", ",", "world", "!", "[SEP]"]

SPECIAL TOKENS:
===============
- [PAD]: Padding token to make sequences the same length in a batch
- [UNK]: Unknown token for out-of-vocabulary words
- [CLS]: Classification token placed at the start of every sequence
- [SEP]: Separator token used to separate sequences in sequence pairs
- [MASK]: Mask token used in masked language modeling pretraining

COMPOSITION:
============
BasicTokenizer, WordpieceTokenizer and BertTokenizer all satisfy the
`Tokenizer` protocol (a single `tokenize(text)` method). BertTokenizer holds
one of each of the other two and delegates to them.
"""

import os
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Union, runtime_checkable

from transformers.utils import logging

from .basic_tokenizer import BasicTokenizer
from .configuration import BertTokenizerConfig
from .errors import UnknownTokenError
from .vocab_utils import VOCAB_FILES_NAMES, Vocabulary, VocabSource
from .wordpiece import CONTINUING_SUBWORD_PREFIX, WordpieceTokenizer


logger = logging.get_logger(__name__)


@runtime_checkable
class Tokenizer(Protocol):
    """Anything that turns a string into a list of string tokens."""

    def tokenize(self, text: str) -> List[str]:
        ...


class BertTokenizer:
    r"""
    Construct a BERT tokenizer. Based on WordPiece.

    The vocabulary is handed in explicitly, either as a ready object, as a file
    path or as a loader function. Exactly one of `vocab`, `vocab_file` and
    `vocab_loader` must be given.

    Args:
        vocab (`Vocabulary`, `dict` or list of `str`, *optional*):
            The vocabulary itself: a `Vocabulary`, a token -> ID mapping or the vocabulary lines.
        vocab_file (`str`, *optional*):
            File containing the vocabulary, one token per line.
        vocab_loader (callable, *optional*):
            Zero-argument function returning the vocabulary lines.
        config (`BertTokenizerConfig`, *optional*):
            Complete configuration. Cannot be combined with the keyword options below.
        do_lower_case (`bool`, *optional*, defaults to `True`):
            Whether or not to lowercase the input when tokenizing.
        do_basic_tokenize (`bool`, *optional*, defaults to `True`):
            Whether or not to do basic tokenization before WordPiece.
        never_split (`Iterable`, *optional*):
            Collection of tokens which will never be split during tokenization. Only has an effect when
            `do_basic_tokenize=True`
        unk_token (`str`, *optional*, defaults to `"[UNK]"`):
            The unknown token. A token that is not in the vocabulary cannot be converted to an ID and is set to be this
            token instead.
        sep_token (`str`, *optional*, defaults to `"[SEP]"`):
            The separator token, which is used when building a sequence from multiple sequences, e.g. two sequences for
            sequence classification or for a text and a question for question answering. It is also used as the last
            token of a sequence built with special tokens.
        pad_token (`str`, *optional*, defaults to `"[PAD]"`):
            The token used for padding, for example when batching sequences of different lengths.
        cls_token (`str`, *optional*, defaults to `"[CLS]"`):
            The classifier token which is used when doing sequence classification (classification of the whole sequence
            instead of per-token classification). It is the first token of the sequence when built with special tokens.
        mask_token (`str`, *optional*, defaults to `"[MASK]"`):
            The token used for masking values. This is the token used when training this model with masked language
            modeling. This is the token which the model will try to predict.
        tokenize_chinese_chars (`bool`, *optional*, defaults to `True`):
            Whether or not to tokenize Chinese characters.
        strip_accents (`bool`, *optional*):
            Whether or not to strip all accents. If this option is not specified, then it will be determined by the
            value for `lowercase` (as in the original BERT).
        max_input_chars_per_word (`int`, *optional*, defaults to 100):
            Words longer than this are replaced by `unk_token`.

    Example:
        >>> tokenizer = BertTokenizer(vocab_file="vocab.txt")
        >>> tokens = tokenizer.tokenize("Hello, world!")
        >>> print(tokens)
        ['hello', ',', 'world', '!']
        >>> tokenizer.convert_tokens_to_ids(tokens)
        [7592, 1010, 2088, 999]
    """

    # Class-level attributes
    vocab_files_names = VOCAB_FILES_NAMES
    model_input_names = ["input_ids", "token_type_ids", "attention_mask"]

    def __init__(
        self,
        vocab: Optional[VocabSource] = None,
        vocab_file: Optional[Union[str, os.PathLike]] = None,
        vocab_loader: Optional[Callable[[], Iterable[str]]] = None,
        config: Optional[BertTokenizerConfig] = None,
        **kwargs,
    ):
        # Step 1: Resolve the configuration
        # Either a ready config object or keyword options, never both
        if config is not None and kwargs:
            raise ValueError(f"Pass either `config` or keyword options, not both (got {sorted(kwargs)})")
        self.config = config if config is not None else BertTokenizerConfig(**kwargs)

        # Step 2: Load the vocabulary from exactly one source
        self.vocab = self._resolve_vocab(vocab, vocab_file, vocab_loader)
        if len(self.vocab) and self.config.unk_token not in self.vocab:
            logger.warning(
                f"The unknown token {self.config.unk_token!r} is not in the vocabulary, "
                "converting unknown words to IDs will fail."
            )

        # Step 3: Build the basic tokenizer (cleanup, whitespace and punctuation splitting)
        self.basic_tokenizer = None
        if self.config.do_basic_tokenize:
            self.basic_tokenizer = BasicTokenizer(
                do_lower_case=self.config.do_lower_case,
                never_split=self.config.never_split,
                tokenize_chinese_chars=self.config.tokenize_chinese_chars,
                strip_accents=self.config.should_strip_accents,
            )

        # Step 4: Build the WordPiece tokenizer on top of the vocabulary
        self.wordpiece_tokenizer = WordpieceTokenizer(
            vocab=self.vocab,
            unk_token=self.config.unk_token,
            max_input_chars_per_word=self.config.max_input_chars_per_word,
        )

    @staticmethod
    def _resolve_vocab(vocab, vocab_file, vocab_loader) -> Vocabulary:
        given = [name for name, value in (("vocab", vocab), ("vocab_file", vocab_file), ("vocab_loader", vocab_loader))
                 if value is not None]
        if not given:
            raise ValueError(
                "No vocabulary given. Pass one of `vocab`, `vocab_file` or `vocab_loader` "
                "(use `Vocabulary.from_special_tokens()` for a vocabulary of special tokens only)."
            )
        if len(given) > 1:
            raise ValueError(f"Pass only one vocabulary source, got {given}")

        if vocab_file is not None:
            return Vocabulary.from_file(vocab_file)
        if vocab_loader is not None:
            return Vocabulary.from_loader(vocab_loader)
        return Vocabulary.coerce(vocab)

    @classmethod
    def from_vocab_file(cls, vocab_file: Union[str, os.PathLike], **kwargs) -> "BertTokenizer":
        return cls(vocab_file=vocab_file, **kwargs)

    # ============================================================
    # CONFIGURATION SHORTCUTS
    # ============================================================

    @property
    def do_lower_case(self) -> bool:
        return self.config.do_lower_case

    @property
    def unk_token(self) -> str:
        return self.config.unk_token

    @property
    def sep_token(self) -> str:
        return self.config.sep_token

    @property
    def pad_token(self) -> str:
        return self.config.pad_token

    @property
    def cls_token(self) -> str:
        return self.config.cls_token

    @property
    def mask_token(self) -> str:
        return self.config.mask_token

    @property
    def unk_token_id(self) -> Optional[int]:
        return self.vocab.id_of(self.unk_token)

    @property
    def sep_token_id(self) -> Optional[int]:
        return self.vocab.id_of(self.sep_token)

    @property
    def pad_token_id(self) -> Optional[int]:
        return self.vocab.id_of(self.pad_token)

    @property
    def cls_token_id(self) -> Optional[int]:
        return self.vocab.id_of(self.cls_token)

    @property
    def mask_token_id(self) -> Optional[int]:
        return self.vocab.id_of(self.mask_token)

    @property
    def vocab_size(self) -> int:
        return len(self.vocab)

    def __len__(self) -> int:
        return self.vocab_size

    def get_vocab(self) -> Dict[str, int]:
        return self.vocab.as_dict()

    # ============================================================
    # TOKENIZATION
    # ============================================================

    def tokenize(self, text: str) -> List[str]:
        """
        Converts a string into a sequence of WordPiece tokens.

        With basic tokenization enabled, the text is first cleaned and split into
        words and every word goes through WordPiece. Otherwise WordPiece runs
        directly on the raw text, split on whitespace only.
        """
        if not isinstance(text, str):
            raise TypeError(f"Text to tokenize must be a string, got {type(text).__name__}")

        if self.basic_tokenizer is None:
            return self.wordpiece_tokenizer.tokenize(text)

        split_tokens = []
        for token in self.basic_tokenizer.tokenize(text):
            split_tokens.extend(self.wordpiece_tokenizer.tokenize(token))
        return split_tokens

    def convert_tokens_to_ids(self, tokens: Sequence[str]) -> List[int]:
        """
        Converts a sequence of tokens into IDs using the vocabulary.

        Raises:
            UnknownTokenError: If a token is not in the vocabulary
        """
        ids = []
        for token in tokens:
            index = self.vocab.id_of(token)
            if index is None:
                raise UnknownTokenError(token)
            ids.append(index)
        return ids

    def convert_ids_to_tokens(self, ids: Sequence[int]) -> List[str]:
        """
        Converts a sequence of IDs back into tokens using the vocabulary.

        Raises:
            UnknownTokenError: If an ID is not in the vocabulary
        """
        tokens = []
        for index in ids:
            token = self.vocab.token_of(index)
            if token is None:
                raise UnknownTokenError(index)
            tokens.append(token)
        return tokens

    def convert_tokens_to_string(self, tokens: Sequence[str]) -> str:
        """Converts a sequence of tokens (string) in a single string."""
        # Lossy: "##" markers are dropped and pieces are joined with spaces
        return " ".join(token.replace(CONTINUING_SUBWORD_PREFIX, "") for token in tokens)

    def convert_tokens_to_masks(self, ids: Sequence[int]) -> List[int]:
        """
        Derives an attention mask from a sequence of IDs.

        IDs before the first 0 become 1. The first 0 and everything after it are
        returned unchanged, so `[5, 7, 0, 9]` gives `[1, 1, 0, 9]`.

        Note:
            ID 0 is assumed to be the padding token. With a vocabulary where ID 0
            is a real token the mask is wrong from that token onwards.
        """
        mask = list(ids)
        for i, index in enumerate(mask):
            if index == 0:
                return mask
            mask[i] = 1
        return mask

    # ============================================================
    # POST-PROCESSING
    # ============================================================

    def build_inputs_with_special_tokens(
        self, token_ids_0: List[int], token_ids_1: Optional[List[int]] = None
    ) -> List[int]:
        """
        Build model inputs from a sequence or a pair of sequence for sequence classification tasks by concatenating and
        adding special tokens. A BERT sequence has the following format:

        - single sequence: `[CLS] X [SEP]`
        - pair of sequences: `[CLS] A [SEP] B [SEP]`
        """
        cls = self.convert_tokens_to_ids([self.cls_token])
        sep = self.convert_tokens_to_ids([self.sep_token])
        if token_ids_1 is None:
            return cls + list(token_ids_0) + sep
        return cls + list(token_ids_0) + sep + list(token_ids_1) + sep

    def create_token_type_ids(
        self, token_ids_0: List[int], token_ids_1: Optional[List[int]] = None, add_special_tokens: bool = True
    ) -> List[int]:
        """
        Create the token type IDs of a sequence or a pair of sequences:

        ```
        0 0 0 0 0 0 0 0 0 0 0 1 1 1 1 1 1 1 1 1
        | first sequence    | second sequence |
        ```

        With special tokens, `[CLS]` and the first `[SEP]` belong to the first
        sequence and the last `[SEP]` to the second.
        """
        extra = 2 if add_special_tokens else 0
        if token_ids_1 is None:
            return [0] * (len(token_ids_0) + extra)
        return [0] * (len(token_ids_0) + extra) + [1] * (len(token_ids_1) + (1 if add_special_tokens else 0))

    def encode(
        self,
        text: str,
        text_pair: Optional[str] = None,
        add_special_tokens: bool = True,
        return_tensors: Optional[str] = None,
    ) -> Dict[str, object]:
        """
        Tokenizes a text (or a pair of texts) into model inputs.

        Nothing is padded or truncated, so the attention mask is all ones.

        Args:
            text (str): First sequence
            text_pair (str, optional): Second sequence
            add_special_tokens (bool, optional): Wrap with [CLS] / [SEP]. Defaults to True.
            return_tensors (str, optional): "pt" to return `torch.LongTensor` of shape (1, seq_len)
                instead of lists. Defaults to None.

        Returns:
            dict: `input_ids`, `token_type_ids` and `attention_mask`
        """
        if return_tensors not in (None, "pt"):
            raise ValueError(f"Unsupported return_tensors value {return_tensors!r}, only 'pt' is supported")

        ids_0 = self.convert_tokens_to_ids(self.tokenize(text))
        ids_1 = self.convert_tokens_to_ids(self.tokenize(text_pair)) if text_pair is not None else None

        if add_special_tokens:
            input_ids = self.build_inputs_with_special_tokens(ids_0, ids_1)
        else:
            input_ids = ids_0 + (ids_1 or [])
        token_type_ids = self.create_token_type_ids(ids_0, ids_1, add_special_tokens=add_special_tokens)

        encoding = {
            "input_ids": input_ids,
            "token_type_ids": token_type_ids,
            "attention_mask": [1] * len(input_ids),
        }
        if return_tensors == "pt":
            import torch

            encoding = {name: torch.tensor([values], dtype=torch.long) for name, values in encoding.items()}
        return encoding

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vocab_size={self.vocab_size}, do_lower_case={self.config.do_lower_case}, "
            f"do_basic_tokenize={self.config.do_basic_tokenize}, "
            f"tokenize_chinese_chars={self.config.tokenize_chinese_chars})"
        )


__all__ = ["BertTokenizer", "Tokenizer"]
