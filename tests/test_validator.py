from collections import Counter

import pytest

from src.games.word_scramble.validator import is_original, is_possible, is_real


def test_is_original():
    used = ("silk", "worm")
    assert is_original("milk", used)
    assert not is_original("silk", used)
    assert not is_original("worm", used)
    assert is_original("silk", ())


@pytest.mark.parametrize(
    "word, expected",
    [
        ("silk", True),
        ("worm", True),
        ("silkworm", True),
        ("milks", True),
        ("zzz", False),
        ("silkx", False),
        ("mm", False),
        ("", True),
    ],
)
def test_is_possible_silkworm(word, expected):
    assert is_possible(word, "silkworm") is expected


def test_is_possible_respects_multiplicity():
    assert is_possible("ll", "hello")
    assert not is_possible("lll", "hello")
    assert is_possible("hole", "hello")
    assert not is_possible("hoo", "hello")


def test_is_possible_matches_counter_subset():
    roots = ["silkworm", "banana", "mississippi", "abc"]
    words = ["ana", "nab", "banana", "bananas", "sip", "ssss", "sssss", "pipi", "cab", "abca", "kilo"]
    for root in roots:
        for word in words:
            expected = not (Counter(word) - Counter(root))
            assert is_possible(word, root) is expected, (word, root)


def test_is_real_delegates_to_checker(checker):
    assert is_real("silk", checker)
    assert not is_real("slik", checker)
    assert checker.calls == [("silk", "en"), ("slik", "en")]


def test_is_real_passes_language(checker):
    is_real("silk", checker, "fr")
    assert checker.calls == [("silk", "fr")]
