from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GameState:
    """
    One round of Word Scramble.

    used_words is most-recent-first; score always equals len(used_words).
    Instances are never mutated: submit/restart return a new GameState.
    """

    root_word: str
    used_words: tuple[str, ...] = field(default_factory=tuple)
    score: int = 0

    def with_word(self, word: str) -> "GameState":
        return GameState(
            root_word=self.root_word,
            used_words=(word, *self.used_words),
            score=self.score + 1,
        )
