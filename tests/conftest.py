import pytest

from bert_wordpiece import BertTokenizer, Vocabulary


# IDs are the list positions
VOCAB_LINES = [
    "[PAD]",   # 0
    "[UNK]",   # 1
    "[CLS]",   # 2
    "[SEP]",   # 3
    "[MASK]",  # 4
    "un",      # 5
    "##aff",   # 6
    "##able",  # 7
    "hello",   # 8
    "world",   # 9
    ",",       # 10
    "!",       # 11
    "the",     # 12
    "cafe",    # 13
    "所",      # 14
    "有",      # 15
    "的",      # 16
    "数",      # 17
    "据",      # 18
    "play",    # 19
    "##ing",   # 20
]


@pytest.fixture
def vocab_lines():
    return list(VOCAB_LINES)


@pytest.fixture
def vocab():
    return Vocabulary.from_lines(VOCAB_LINES)


@pytest.fixture
def vocab_file(tmp_path):
    path = tmp_path / "vocab.txt"
    path.write_text("\n".join(VOCAB_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def tokenizer(vocab):
    return BertTokenizer(vocab=vocab)
