from pathlib import Path

import pytest
from wordlebot.datasets import Dictionary, load_answers, load_dictionary, parse_dictionary
from wordlebot.engine import DictionaryFormatError, InvalidWordLength


def test_parse_dictionary_happy_path():
    d = parse_dictionary(["slate 3", "", "crane 10", "zzzzz 0"])
    assert d.words == frozenset({"slate", "crane", "zzzzz"})
    # zero-frequency words are legal guesses but never candidates
    assert d.entries == (("crane", 10), ("slate", 3))
    assert "crane" in d and len(d) == 3


@pytest.mark.parametrize("line", ["crane10", "crane ten", "crane 1.5", "crane -2", "crane "])
def test_parse_dictionary_format_errors(line):
    with pytest.raises(DictionaryFormatError) as exc:
        parse_dictionary(["slate 3", line], source="dict.txt")
    assert "dict.txt:2" in str(exc.value)


@pytest.mark.parametrize("line", ["cranes 4", "cran 4", "cr4ne 4"])
def test_parse_dictionary_word_length(line):
    with pytest.raises(InvalidWordLength):
        parse_dictionary([line])


def test_load_dictionary_is_parsed_once(tmp_path: Path):
    p = tmp_path / "dictionary.txt"
    p.write_text("crane 10\nslate 3\n", encoding="utf-8")
    d1 = load_dictionary(p)
    d2 = load_dictionary(str(p))
    assert d1 is d2
    assert d1.entries == (("crane", 10), ("slate", 3))


def test_load_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "nope.txt")


def test_load_answers(tmp_path: Path):
    p = tmp_path / "answers.txt"
    p.write_text("crane slate\n  TRACE\n", encoding="utf-8")
    assert load_answers(p) == ["crane", "slate", "trace"]

    p.write_text("crane slates\n", encoding="utf-8")
    with pytest.raises(InvalidWordLength):
        load_answers(p)


def test_dictionary_from_frequencies():
    d = Dictionary.from_frequencies({"abcde": 10})
    assert d.words == frozenset({"abcde"})
    assert d.entries == (("abcde", 10),)
