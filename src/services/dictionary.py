from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Protocol

from wordfreq import top_n_list

from src.domain.errors import WordListUnavailable

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

# How many of wordfreq's most frequent words count as "real".
DEFAULT_TOP_N = 100_000

DICTIONARY_SOURCES = ("wordfreq", "file")


class SpellChecker(Protocol):
    def is_correct(self, word: str, language: str) -> bool:
        """True if ``word`` is spelled correctly in ``language``."""
        ...


class LocalDictionary:
    """
    Word-set backed spell checker for a single language.

    Lookups are case-insensitive. Asking about any other language
    answers False (logged once per language).
    """

    def __init__(self, words: Iterable[str], *, language: str = DEFAULT_LANGUAGE) -> None:
        self.language = language
        self._words: frozenset[str] = frozenset(w.strip().lower() for w in words if w and w.strip())
        self._warned_languages: set[str] = set()

    @classmethod
    def load_from_txt(cls, path: Path, *, language: str = DEFAULT_LANGUAGE) -> "LocalDictionary":
        if not path.exists():
            raise WordListUnavailable(f"Dictionary file not found: {path}")

        words: set[str] = set()
        try:
            # utf-8 with errors ignored to be resilient to odd characters
            with path.open("r", encoding="utf-8", errors="ignore") as f:
                for line in f:
                    w = line.strip().lower()
                    if not w or not w.isalpha():
                        continue
                    words.add(w)
        except OSError as e:
            raise WordListUnavailable(f"Could not read dictionary {path}: {e}") from e

        logger.info("Loaded %s dictionary words (%s) from %s", len(words), language, path)
        return cls(words, language=language)

    @classmethod
    def from_wordfreq(
        cls,
        *,
        language: str = DEFAULT_LANGUAGE,
        n_top: int = DEFAULT_TOP_N,
        wordlist: str = "best",
    ) -> "LocalDictionary":
        """
        Build from wordfreq's ``n_top`` most frequent words in ``language``.
        Tokens with digits, apostrophes or hyphens are skipped.
        """
        try:
            words = [w for w in top_n_list(language, n_top, wordlist=wordlist) if w.isalpha()]
        except LookupError as e:
            raise WordListUnavailable(f"wordfreq has no {wordlist!r} word list for language {language!r}") from e
        if not words:
            raise WordListUnavailable(f"wordfreq has no {wordlist!r} word list for language {language!r}")

        logger.info("Loaded %s dictionary words (%s) from wordfreq", len(words), language)
        return cls(words, language=language)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def is_correct(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language:
            if language not in self._warned_languages:
                self._warned_languages.add(language)
                logger.warning("No dictionary loaded for language %r (have %r)", language, self.language)
            return False
        return word.lower() in self._words


def build_dictionary(
    *,
    source: str,
    language: str = DEFAULT_LANGUAGE,
    path: Path | None = None,
    n_top: int = DEFAULT_TOP_N,
) -> LocalDictionary:
    if source == "wordfreq":
        return LocalDictionary.from_wordfreq(language=language, n_top=n_top)
    if source == "file":
        if path is None:
            raise WordListUnavailable("Dictionary source 'file' needs a dictionary path")
        return LocalDictionary.load_from_txt(path, language=language)
    raise ValueError(f"Unknown dictionary source {source!r} (expected one of {DICTIONARY_SOURCES})")
