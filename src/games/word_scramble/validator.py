from __future__ import annotations

from collections import Counter
from typing import Sequence

from src.services.dictionary import DEFAULT_LANGUAGE, SpellChecker


def is_original(word: str, used_words: Sequence[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    True if ``word`` can be spelled from the letters of ``root_word``,
    using each letter at most as many times as it appears there.
    """
    available = Counter(root_word)
    for letter in word:
        if available[letter] <= 0:
            return False
        available[letter] -= 1
    return True


def is_real(word: str, checker: SpellChecker, language: str = DEFAULT_LANGUAGE) -> bool:
    return checker.is_correct(word, language)
