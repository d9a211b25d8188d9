import json
import logging

from bert_wordpiece.cli import main


def test_cli_prints_tokens_and_ids(vocab_file, capsys):
    assert main(["Hello, world!", "--vocab", str(vocab_file)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["['hello', ',', 'world', '!']", "[8, 10, 9, 11]"]


def test_cli_default_sentence(vocab_file, capsys):
    assert main(["--vocab", str(vocab_file)]) == 0

    tokens_line = capsys.readouterr().out.splitlines()[0]
    assert tokens_line.startswith("['所', '有', '的', '数', '据', '[UNK]'")


def test_cli_json_with_special_tokens(vocab_file, capsys):
    assert main(["hello", "--vocab", str(vocab_file), "--json", "--special-tokens"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output == {
        "tokens": ["[CLS]", "hello", "[SEP]"],
        "input_ids": [2, 8, 3],
        "attention_mask": [1, 1, 1],
    }


def test_cli_never_split(vocab_file, capsys):
    assert main(["hello [MASK]", "--vocab", str(vocab_file), "--never-split", "[MASK]"]) == 0

    assert capsys.readouterr().out.splitlines()[0] == "['hello', '[MASK]']"


def test_cli_missing_vocab(tmp_path, capsys):
    assert main(["hello", "--vocab", str(tmp_path / "missing.txt")]) == 1

    assert capsys.readouterr().err.startswith("error: Unable to load vocabulary")


def test_cli_verbose_logs_once_per_run(vocab_file, capsys):
    package_logger = logging.getLogger("bert_wordpiece")
    try:
        assert main(["hello", "--vocab", str(vocab_file), "-v"]) == 0
        assert main(["hello", "--vocab", str(vocab_file), "-v"]) == 0

        assert len(package_logger.handlers) == 1
        assert capsys.readouterr().err.count("Built BertTokenizer") == 2
    finally:
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)
