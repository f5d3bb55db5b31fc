import logging

import pytest

from src.domain.errors import NotARealWord, WordListUnavailable
from src.domain.models import GameState
from src.games.word_scramble import rules
from src.services.dictionary import LocalDictionary, build_dictionary


@pytest.fixture(scope="module")
def english():
    return build_dictionary(source="wordfreq", language="en")


def test_lookup_is_case_insensitive(dictionary):
    assert dictionary.is_correct("silk", "en")
    assert dictionary.is_correct("SILK", "en")
    assert not dictionary.is_correct("slik", "en")
    assert "Worm" in dictionary


def test_other_language_is_never_correct(dictionary, caplog):
    with caplog.at_level(logging.WARNING, logger="src.services.dictionary"):
        assert not dictionary.is_correct("silk", "fr")
        assert not dictionary.is_correct("worm", "fr")

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1


def test_load_skips_blank_and_non_alpha_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Silk\n\nworm\nco-op\n42\n  milk  \n", encoding="utf-8")

    d = LocalDictionary.load_from_txt(path)

    assert len(d) == 3
    assert d.is_correct("silk", "en")
    assert d.is_correct("milk", "en")
    assert not d.is_correct("co-op", "en")


def test_load_with_language(tmp_path):
    path = tmp_path / "mots.txt"
    path.write_text("soie\nver\n", encoding="utf-8")

    d = LocalDictionary.load_from_txt(path, language="fr")

    assert d.is_correct("soie", "fr")
    assert not d.is_correct("soie", "en")


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(WordListUnavailable):
        LocalDictionary.load_from_txt(tmp_path / "missing.txt")


@pytest.mark.parametrize(
    "root, word",
    [
        ("silkworm", "work"),
        ("silkworm", "row"),
        ("silkworm", "ski"),
        ("silkworm", "milk"),
        ("landlord", "lord"),
        ("landlord", "land"),
        ("filmmaker", "film"),
        ("filmmaker", "maker"),
    ],
)
def test_default_dictionary_accepts_common_words(english, root, word):
    state = rules.submit_word(GameState(root_word=root), word, english)
    assert state.used_words == (word,)


def test_default_dictionary_rejects_made_up_words(english):
    assert english.language == "en"
    assert len(english) > 10_000
    with pytest.raises(NotARealWord):
        rules.submit_word(GameState(root_word="silkworm"), "klsiwm", english)


def test_wordfreq_tokens_are_alphabetic(english):
    assert not english.is_correct("don't", "en")
    assert not english.is_correct("2020", "en")


def test_build_file_dictionary(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("silk\nworm\n", encoding="utf-8")

    d = build_dictionary(source="file", path=path)

    assert d.is_correct("silk", "en")
    assert len(d) == 2


def test_build_file_dictionary_needs_path():
    with pytest.raises(WordListUnavailable):
        build_dictionary(source="file")


def test_build_unknown_source():
    with pytest.raises(ValueError):
        build_dictionary(source="hunspell")
