"""
Tokenization Module for BERT

This package provides a pure-Python implementation of the BERT tokenization pipeline:
- Character classification and text cleanup (control characters, whitespace, CJK)
- Basic tokenization (lowercasing, accent removal, punctuation splitting)
- Vocabulary utilities for loading and managing token vocabularies
- WordPiece subword tokenization (greedy longest-match-first)
- BertTokenizer, which composes all of the above and converts tokens to IDs

The tokenization process is a critical first step in using BERT models,
converting raw text into numerical representations that the model can process.
"""

from .basic_tokenizer import BasicTokenizer
from .bert_tokenizer import BertTokenizer, Tokenizer
from .configuration import BertTokenizerConfig
from .errors import BertTokenizationError, UnknownTokenError, VocabLoadError
from .vocab_utils import Vocabulary, load_vocab, read_vocab_lines
from .wordpiece import WordpieceTokenizer

__version__ = "0.1.0"

__all__ = [
    "BasicTokenizer",
    "BertTokenizer",
    "BertTokenizerConfig",
    "BertTokenizationError",
    "Tokenizer",
    "UnknownTokenError",
    "Vocabulary",
    "VocabLoadError",
    "WordpieceTokenizer",
    "load_vocab",
    "read_vocab_lines",
]
