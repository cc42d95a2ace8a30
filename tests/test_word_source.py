import json
import random

import pytest

from wordgrid.config import get_word_statistics, load_word_list, validate_word_list_integrity
from wordgrid.engine import WordListError, WordSource


def test_empty_dictionary_is_fatal():
    with pytest.raises(WordListError):
        WordSource([]).draw()


def test_word_list_error_is_a_value_error():
    assert issubclass(WordListError, ValueError)


def test_draw_comes_from_dictionary_uppercased():
    source = WordSource(["crane", "cat", "zebras"], rng=random.Random(7))
    draws = {source.draw() for _ in range(50)}

    assert draws <= {"CRANE", "CAT", "ZEBRAS"}
    assert len(draws) > 1


def test_draws_may_repeat():
    source = WordSource(["ONLY"])
    assert [source.draw() for _ in range(3)] == ["ONLY"] * 3


def test_bundled_word_list_is_valid():
    words = load_word_list()
    assert words
    assert validate_word_list_integrity(words)


@pytest.mark.parametrize("words", [[" "], ["cr4ne"], ["CRANE", ""], ["caf\u00e9"]])
def test_unplayable_words_are_rejected(words):
    with pytest.raises(ValueError):
        WordSource(words)


def test_load_word_list_from_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["cat", "crane"]), encoding="utf-8")

    assert load_word_list(str(path)) == ["CAT", "CRANE"]


@pytest.mark.parametrize("content", ["[]", "{\"word\": \"crane\"}", "[\"cr4ne\"]", "[\"\"]", "not json"])
def test_load_word_list_rejects_bad_files(tmp_path, content):
    path = tmp_path / "words.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_word_list(str(path))


def test_load_word_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / "missing.json"))


def test_word_statistics():
    stats = get_word_statistics(["CAT", "CRANE"])

    assert stats["total_words"] == 2
    assert stats["word_lengths"] == {3: 1, 5: 1}
    assert stats["letter_frequency"]["A"] == 2
