import unicodedata

from bert_wordpiece.segmentation import split_on_punctuation, strip_accents, whitespace_tokenize


def test_whitespace_tokenize_empty():
    assert whitespace_tokenize("") == []
    assert whitespace_tokenize("   \t\n ") == []


def test_whitespace_tokenize():
    assert whitespace_tokenize("  a  b\tc\n") == ["a", "b", "c"]


def test_strip_accents():
    assert strip_accents("café") == "cafe"
    assert strip_accents("Ñandú") == "Nandu"
    assert strip_accents("naïve") == "naive"


def test_strip_accents_does_not_recompose():
    # Hangul syllables decompose into jamo, which are letters, not marks
    assert strip_accents("한") == unicodedata.normalize("NFD", "한")
    assert strip_accents("한") != "한"


def test_split_on_punctuation():
    assert split_on_punctuation("hello,world!") == ["hello", ",", "world", "!"]
    assert split_on_punctuation("hello,world!", set()) == ["hello", ",", "world", "!"]


def test_split_on_punctuation_runs():
    assert split_on_punctuation("...") == [".", ".", "."]
    assert split_on_punctuation("a-b") == ["a", "-", "b"]
    assert split_on_punctuation("abc") == ["abc"]
    assert split_on_punctuation("") == []


def test_split_on_punctuation_never_split():
    assert split_on_punctuation("[CLS]", {"[CLS]"}) == ["[CLS]"]
    assert split_on_punctuation("[CLS]") == ["[", "CLS", "]"]
