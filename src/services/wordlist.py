from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path

from src.domain.errors import WordListUnavailable

logger = logging.getLogger(__name__)

DEFAULT_ROOT_WORD = "silkworm"


@dataclass(frozen=True)
class WordList:
    """
    Ordered list of candidate root words loaded from a text file (one word per line).
    Designed to be loaded once at startup and reused across rounds.

    File format:
      silkworm
      blackout
      ...
    """

    words: tuple[str, ...]

    @classmethod
    def load_from_txt(cls, path: Path) -> "WordList":
        if not path.exists():
            raise WordListUnavailable(f"Word list file not found: {path}")

        try:
            text = path.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            raise WordListUnavailable(f"Could not read word list {path}: {e}") from e

        # Stray blank lines and capitalization are tolerated, not fatal.
        words = tuple(w for w in (line.strip().lower() for line in text.splitlines()) if w)

        logger.info("Loaded %s start words from %s", len(words), path)
        return cls(words=words)

    def __len__(self) -> int:
        return len(self.words)

    def random_word(self, rng: random.Random | None = None) -> str:
        """
        Uniformly random entry; DEFAULT_ROOT_WORD when the list is empty.
        """
        if not self.words:
            return DEFAULT_ROOT_WORD
        return (rng or random).choice(self.words)
