import pytest

from bert_wordpiece import BertTokenizerConfig


def test_defaults():
    config = BertTokenizerConfig()

    assert config.do_lower_case is True
    assert config.do_basic_tokenize is True
    assert config.tokenize_chinese_chars is True
    assert config.never_split == frozenset()
    assert config.all_special_tokens == ("[UNK]", "[SEP]", "[PAD]", "[CLS]", "[MASK]")
    assert config.max_input_chars_per_word == 100
    assert config.model_max_length == 512
    assert config.strip_accents is None


def test_never_split_is_frozen():
    assert BertTokenizerConfig(never_split=["[CLS]", "[SEP]", "[CLS]"]).never_split == frozenset({"[CLS]", "[SEP]"})
    assert BertTokenizerConfig(never_split="[CLS]").never_split == frozenset({"[CLS]"})
    assert BertTokenizerConfig(never_split=None).never_split == frozenset()


@pytest.mark.parametrize("value", [0, -1, "100", 1.5, True])
def test_invalid_max_input_chars_per_word(value):
    with pytest.raises(ValueError):
        BertTokenizerConfig(max_input_chars_per_word=value)


def test_should_strip_accents_follows_lower_case():
    assert BertTokenizerConfig().should_strip_accents is True
    assert BertTokenizerConfig(do_lower_case=False).should_strip_accents is False
    assert BertTokenizerConfig(do_lower_case=False, strip_accents=True).should_strip_accents is True
    assert BertTokenizerConfig(strip_accents=False).should_strip_accents is False


def test_to_dict_and_back():
    config = BertTokenizerConfig(do_lower_case=False, never_split=["b", "a"])
    config_dict = config.to_dict()

    assert config_dict["never_split"] == ["a", "b"]
    assert BertTokenizerConfig.from_dict(config_dict) == config


def test_from_dict_unknown_key():
    with pytest.raises(ValueError):
        BertTokenizerConfig.from_dict({"do_lower_case": True, "hidden_size": 768})


def test_replace():
    config = BertTokenizerConfig()
    cased = config.replace(do_lower_case=False)

    assert cased.do_lower_case is False
    assert config.do_lower_case is True
