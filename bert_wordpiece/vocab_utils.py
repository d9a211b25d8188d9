"""
Vocabulary Loading Utilities for BERT Tokenization

This module provides utilities for loading and managing BERT vocabularies.
The vocabulary maps tokens (words and subwords) to unique integer IDs.

VOCABULARY FORMAT:
==================
BERT uses a vocabulary file (typically vocab.txt) where each line contains one token.
The line number (0-indexed) becomes the token's ID.

Example vocab.txt:
    [PAD]       # ID: 0
    [UNK]       # ID: 1
    [CLS]       # ID: 2
    [SEP]       # ID: 3
    [MASK]      # ID: 4
    the         # ID: 5
    a           # ID: 6
    ...

LINE HANDLING:
==============
- Trailing "\\n" / "\\r\\n" is removed from every line
- Empty lines are skipped, but still consume their ID (line number = ID)
- A token listed twice keeps the ID of its LAST occurrence; the earlier ID
  maps to no token

WHY ORDERED DICTIONARY:
=======================
We use OrderedDict to preserve the exact order of tokens as they appear in the file.
This ensures consistent token IDs across different program runs.
"""

import collections
import os
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from transformers.utils import logging

from .errors import VocabLoadError


logger = logging.get_logger(__name__)

# Default filename of a BERT vocabulary
VOCAB_FILES_NAMES = {"vocab_file": "vocab.txt"}

# Anything that can be turned into a Vocabulary
VocabSource = Union["Vocabulary", Mapping[str, int], Iterable[str]]


def read_vocab_lines(vocab_file: Union[str, os.PathLike]) -> List[str]:
    """
    Reads the raw lines of a vocabulary file.

    Args:
        vocab_file (str or os.PathLike): Path to the vocabulary file (e.g., "vocab.txt")

    Returns:
        List[str]: The lines of the file, newline characters included

    Raises:
        VocabLoadError: If the file is missing, unreadable or not valid UTF-8
    """
    try:
        with open(vocab_file, "r", encoding="utf-8") as reader:
            return reader.readlines()
    except (OSError, UnicodeDecodeError) as err:
        raise VocabLoadError(f"Unable to load vocabulary from {vocab_file}: {err}", source=str(vocab_file)) from err


class Vocabulary:
    """
    Immutable two-way mapping between token strings and integer IDs.

    Built once from an ordered list of lines, where the position of a line is
    the token's ID. After construction nothing can be added or removed, so a
    single instance can be shared freely between tokenizers and threads.

    Example:
        >>> vocab = Vocabulary.from_lines(["[PAD]", "[UNK]", "hello"])
        >>> vocab.id_of("hello")
        2
        >>> vocab.token_of(0)
        '[PAD]'
        >>> len(vocab)
        3
    """

    __slots__ = ("_token_to_id", "_id_to_token")

    def __init__(self, token_to_id: Mapping[str, int], id_to_token: Optional[Mapping[int, str]] = None):
        # Copies, so that the caller's dicts can't change us later
        self._token_to_id = collections.OrderedDict(token_to_id)
        if id_to_token is None:
            id_to_token = {idx: token for token, idx in self._token_to_id.items()}
        self._id_to_token = dict(id_to_token)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Vocabulary":
        """
        Builds a vocabulary from lines, one token per line.

        Args:
            lines (Iterable[str]): Tokens in ID order, with or without trailing newlines

        Returns:
            Vocabulary: The vocabulary; empty when `lines` is empty
        """
        token_to_id = collections.OrderedDict()
        id_to_token = {}
        duplicates = []

        for index, line in enumerate(lines):
            token = line.rstrip("\n").rstrip("\r")
            # Empty lines still take up their ID
            if not token:
                continue
            if token in token_to_id:
                duplicates.append(token)
                # Last occurrence wins, the earlier ID no longer maps back
                id_to_token.pop(token_to_id.pop(token))
            token_to_id[token] = index
            id_to_token[index] = token

        if duplicates:
            logger.warning(
                f"Vocabulary contains {len(duplicates)} duplicated token(s), the last occurrence is kept: "
                f"{duplicates[:5]}"
            )
        return cls(token_to_id, id_to_token)

    @classmethod
    def from_file(cls, vocab_file: Union[str, os.PathLike]) -> "Vocabulary":
        """Loads a vocabulary file (see `read_vocab_lines`)."""
        vocab = cls.from_lines(read_vocab_lines(vocab_file))
        logger.info(f"Loaded vocabulary of size {len(vocab)} from {vocab_file}")
        return vocab

    @classmethod
    def from_loader(cls, loader: Callable[[], Iterable[str]]) -> "Vocabulary":
        """
        Builds a vocabulary from an injected loader.

        `loader` takes no arguments and returns the vocabulary lines. It may
        read them from anywhere (a file, a package resource, the network); an
        `OSError` it raises is reported as a `VocabLoadError`.
        """
        name = getattr(loader, "__name__", repr(loader))
        try:
            lines = list(loader())
        except (OSError, UnicodeDecodeError) as err:
            if isinstance(err, VocabLoadError):
                raise
            raise VocabLoadError(f"Unable to load vocabulary with {name}: {err}", source=name) from err
        vocab = cls.from_lines(lines)
        logger.info(f"Loaded vocabulary of size {len(vocab)} with {name}")
        return vocab

    @classmethod
    def from_special_tokens(
        cls,
        pad_token: str = "[PAD]",
        unk_token: str = "[UNK]",
        cls_token: str = "[CLS]",
        sep_token: str = "[SEP]",
        mask_token: str = "[MASK]",
    ) -> "Vocabulary":
        """
        Creates a minimal vocabulary with only the special tokens.

        Every real word maps to the unknown token with this vocabulary. It is
        never used implicitly: callers must ask for it.
        """
        return cls.from_lines([str(pad_token), str(unk_token), str(cls_token), str(sep_token), str(mask_token)])

    @classmethod
    def coerce(cls, source: VocabSource) -> "Vocabulary":
        """Turns a Vocabulary, a token -> ID mapping or a sequence of lines into a Vocabulary."""
        if isinstance(source, Vocabulary):
            return source
        if isinstance(source, Mapping):
            return cls(source)
        if isinstance(source, (str, bytes)):
            raise TypeError("Expected a sequence of vocabulary lines, got a single string. Use `vocab_file` for paths.")
        return cls.from_lines(source)

    def id_of(self, token: str) -> Optional[int]:
        """Returns the ID of `token`, or None when it is not in the vocabulary."""
        return self._token_to_id.get(token)

    def token_of(self, index: int) -> Optional[str]:
        """Returns the token with ID `index`, or None when there is none."""
        return self._id_to_token.get(index)

    def size(self) -> int:
        """Number of distinct tokens."""
        return len(self._token_to_id)

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self._token_to_id.items())

    def as_dict(self) -> Dict[str, int]:
        """Returns a copy of the token -> ID mapping."""
        return dict(self._token_to_id)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, token) -> bool:
        return token in self._token_to_id

    def __iter__(self) -> Iterator[str]:
        # ID order
        return (self._id_to_token[idx] for idx in sorted(self._id_to_token))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._token_to_id == other._token_to_id and self._id_to_token == other._id_to_token

    def __hash__(self):
        return hash(tuple(self._token_to_id.items()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"


def load_vocab(vocab_file: Union[str, os.PathLike]) -> Dict[str, int]:
    """
    Loads a vocabulary file into a dictionary mapping tokens to IDs.

    This function reads a vocabulary file where each line contains one token.
    The position (line number) of each token becomes its unique ID.

    Args:
        vocab_file (str): Path to the vocabulary file (e.g., "vocab.txt")

    Returns:
        Dict[str, int]: Ordered dictionary mapping token strings to integer IDs

    Example:
        >>> vocab = load_vocab("vocab.txt")
        >>> vocab["[CLS]"]
        2
        >>> vocab["the"]
        5
    """
    return collections.OrderedDict(Vocabulary.from_file(vocab_file).items())


__all__ = ["VOCAB_FILES_NAMES", "Vocabulary", "load_vocab", "read_vocab_lines"]
