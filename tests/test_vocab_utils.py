import collections
import logging

import pytest

from bert_wordpiece import VocabLoadError, Vocabulary, load_vocab, read_vocab_lines


def test_from_lines_assigns_ids_in_line_order():
    vocab = Vocabulary.from_lines(["a\n", "b\r\n", "c"])

    assert vocab.id_of("a") == 0
    assert vocab.id_of("b") == 1
    assert vocab.id_of("c") == 2
    assert vocab.token_of(1) == "b"
    assert vocab.size() == 3


def test_empty_lines_keep_their_id():
    vocab = Vocabulary.from_lines(["a\n", "\n", "b\n", ""])

    assert vocab.id_of("b") == 2
    assert vocab.token_of(1) is None
    assert len(vocab) == 2
    assert list(vocab) == ["a", "b"]

    vocab = Vocabulary.from_lines(["[PAD]\n", "\n", "hello\n"])
    assert vocab.id_of("hello") == 2


def test_empty_source_is_a_valid_empty_vocabulary():
    vocab = Vocabulary.from_lines([])

    assert vocab.size() == 0
    assert list(vocab) == []
    assert vocab.id_of("a") is None


def test_duplicates_keep_last_occurrence(caplog):
    with caplog.at_level(logging.WARNING):
        vocab = Vocabulary.from_lines(["a", "b", "a"])

    assert vocab.id_of("a") == 2
    assert vocab.token_of(0) is None
    assert vocab.token_of(2) == "a"
    assert vocab.size() == 2
    assert list(vocab) == ["b", "a"]
    assert list(vocab.items()) == [("b", 1), ("a", 2)]
    assert "duplicated" in caplog.text


def test_lookup_misses_return_none(vocab):
    assert vocab.id_of("missing") is None
    assert vocab.token_of(10_000) is None
    assert vocab.token_of(-1) is None


def test_round_trip(vocab):
    for token, index in vocab.items():
        assert vocab.token_of(vocab.id_of(token)) == token
        assert vocab.id_of(vocab.token_of(index)) == index
    assert [vocab.id_of(token) for token in vocab] == list(range(len(vocab)))


def test_container_protocol(vocab, vocab_lines):
    assert "hello" in vocab
    assert "missing" not in vocab
    assert list(vocab) == vocab_lines
    assert vocab.as_dict()["##aff"] == 6


def test_as_dict_is_a_copy(vocab):
    mapping = vocab.as_dict()
    mapping["new"] = 99

    assert "new" not in vocab


def test_from_file(vocab_file, vocab_lines):
    vocab = Vocabulary.from_file(vocab_file)

    assert list(vocab) == vocab_lines
    assert vocab == Vocabulary.from_lines(vocab_lines)


def test_from_file_missing(tmp_path):
    missing = tmp_path / "nope.txt"

    with pytest.raises(VocabLoadError) as excinfo:
        Vocabulary.from_file(missing)

    assert isinstance(excinfo.value, OSError)
    assert excinfo.value.source == str(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_from_file_not_utf8(tmp_path):
    path = tmp_path / "vocab.txt"
    path.write_bytes(b"ok\n\xff\xfe\xfa\n")

    with pytest.raises(VocabLoadError):
        Vocabulary.from_file(path)


def test_read_vocab_lines(vocab_file):
    lines = read_vocab_lines(vocab_file)

    assert lines[0] == "[PAD]\n"


def test_load_vocab(vocab_file):
    vocab = load_vocab(vocab_file)

    assert isinstance(vocab, collections.OrderedDict)
    assert vocab["[CLS]"] == 2
    assert list(vocab)[:2] == ["[PAD]", "[UNK]"]


def test_from_loader():
    vocab = Vocabulary.from_loader(lambda: ["x\n", "y\n"])

    assert vocab.id_of("y") == 1


def test_from_loader_failure_is_vocab_load_error():
    def broken_loader():
        raise PermissionError("denied")

    with pytest.raises(VocabLoadError) as excinfo:
        Vocabulary.from_loader(broken_loader)

    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert excinfo.value.source == "broken_loader"


def test_from_special_tokens():
    vocab = Vocabulary.from_special_tokens()

    assert list(vocab) == ["[PAD]", "[UNK]", "[CLS]", "[SEP]", "[MASK]"]


def test_coerce(vocab):
    assert Vocabulary.coerce(vocab) is vocab
    assert Vocabulary.coerce({"a": 0, "b": 1}).id_of("b") == 1
    assert Vocabulary.coerce(["a", "b"]).token_of(0) == "a"

    with pytest.raises(TypeError):
        Vocabulary.coerce("vocab.txt")


def test_every_id_maps_back_to_itself():
    vocab = Vocabulary.from_lines(["a", "", "b", "a", "c", "b"])

    for index in range(6):
        token = vocab.token_of(index)
        if token is not None:
            assert vocab.id_of(token) == index
    assert vocab.as_dict() == {"a": 3, "c": 4, "b": 5}
