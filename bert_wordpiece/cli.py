"""Command line demo: tokenize a sentence and print the tokens and their IDs."""

import argparse
import json
import sys
from argparse import RawTextHelpFormatter
from functools import partial
from logging import StreamHandler

from transformers.utils import logging

from .bert_tokenizer import BertTokenizer
from .errors import BertTokenizationError


logger = logging.get_logger(__name__)

# Cleaner help display
MyFormatter = partial(RawTextHelpFormatter, max_help_position=50, width=100)

DEFAULT_TEXT = "所有的数据在存储和运算时都要使用二进制数表示"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bert-wordpiece",
        description="Tokenize text with a BERT WordPiece vocabulary and print tokens and IDs.\n",
        formatter_class=MyFormatter,
        epilog=(
            "Usage examples:\n\n"
            "  Tokenize the demo sentence:\n"
            "    bert-wordpiece --vocab vocab.txt\n"
            "  Tokenize a cased sentence and wrap it with [CLS] / [SEP]:\n"
            "    bert-wordpiece --vocab vocab.txt --no-lower-case --special-tokens \"Hello, World!\"\n"
            "  Emit JSON:\n"
            "    bert-wordpiece --vocab vocab.txt --json \"unaffable\"\n"
        ),
    )

    # Text to tokenize
    parser.add_argument(
        "text",
        nargs="?",
        default=DEFAULT_TEXT,
        help=f"text to tokenize (default: {DEFAULT_TEXT!r})",
    )

    # Vocabulary file
    parser.add_argument(
        "--vocab",
        required=True,
        metavar="VOCAB_FILE",
        help="path to the vocabulary file, one token per line (required)",
    )

    # Pipeline switches
    parser.add_argument("--no-lower-case", action="store_true", help="keep the original casing and accents")
    parser.add_argument("--no-chinese-chars", action="store_true", help="do not isolate CJK ideographs")
    parser.add_argument("--no-basic-tokenize", action="store_true", help="run WordPiece directly on the raw text")
    parser.add_argument(
        "--never-split",
        nargs="+",
        default=[],
        metavar="TOKEN",
        help="tokens that are never lowercased or split",
    )

    # Output
    parser.add_argument("--special-tokens", action="store_true", help="wrap the sequence with [CLS] and [SEP]")
    parser.add_argument("--json", action="store_true", help="print tokens, IDs and mask as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="log vocabulary loading")
    return parser


def enable_verbose_logging():
    """Sends our INFO messages to stderr. Safe to call more than once."""
    # Our loggers live outside the `transformers` namespace, its verbosity setters don't reach them
    package_logger = logging.get_logger(__package__)
    package_logger.setLevel(logging.INFO)
    if not package_logger.handlers:
        package_logger.addHandler(StreamHandler())


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        enable_verbose_logging()

    try:
        tokenizer = BertTokenizer(
            vocab_file=args.vocab,
            do_lower_case=not args.no_lower_case,
            do_basic_tokenize=not args.no_basic_tokenize,
            tokenize_chinese_chars=not args.no_chinese_chars,
            never_split=args.never_split,
        )
        logger.info(f"Built {tokenizer!r}")
        tokens = tokenizer.tokenize(args.text)
        if args.special_tokens:
            tokens = [tokenizer.cls_token] + tokens + [tokenizer.sep_token]
        ids = tokenizer.convert_tokens_to_ids(tokens)
    except BertTokenizationError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    if args.json:
        output = {"tokens": tokens, "input_ids": ids, "attention_mask": tokenizer.convert_tokens_to_masks(ids)}
        print(json.dumps(output, ensure_ascii=False))
    else:
        print(tokens)
        print(ids)
    return 0


if __name__ == "__main__":
    sys.exit(main())
