from __future__ import annotations

import pytest

from src.domain.models import GameState
from src.services.dictionary import LocalDictionary
from src.services.wordlist import WordList


class RecordingChecker:
    """Spell checker that remembers every lookup."""

    def __init__(self, words):
        self.words = set(words)
        self.calls: list[tuple[str, str]] = []

    def is_correct(self, word: str, language: str) -> bool:
        self.calls.append((word, language))
        return word in self.words


@pytest.fixture
def dictionary():
    return LocalDictionary(["silk", "worm", "milk", "slim", "wok", "owl", "skim", "word", "silkworm"])


@pytest.fixture
def checker():
    return RecordingChecker(["silk", "worm", "milk", "slim", "wok", "owl", "skim"])


@pytest.fixture
def silkworm_state():
    return GameState(root_word="silkworm")


@pytest.fixture
def single_word_list():
    return WordList(words=("silkworm",))
