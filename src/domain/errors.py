from __future__ import annotations


class WordScrambleError(Exception):
    """Base class for all domain/service errors."""


# -------------------------
# Startup / resources
# -------------------------

class WordListUnavailable(WordScrambleError):
    """A bundled word resource is missing or unreadable. Fatal at startup."""


# -------------------------
# Submission errors (user-facing)
# -------------------------

class ValidationError(WordScrambleError):
    """
    A submitted word was rejected.

    Carries a short ``title`` and a ``message`` meant for the player.
    The game state is left unchanged whenever one of these is raised.
    """

    kind: str = "invalid"

    def __init__(self, title: str, message: str) -> None:
        super().__init__(f"{title}: {message}")
        self.title = title
        self.message = message


class AlreadyUsed(ValidationError):
    """The word was already accepted this round."""

    kind = "already_used"

    def __init__(self, word: str) -> None:
        super().__init__("Word used already", "Be more original!")
        self.word = word


class NotConstructible(ValidationError):
    """The word needs letters the root word doesn't have (or not enough of them)."""

    kind = "not_constructible"

    def __init__(self, word: str, root_word: str) -> None:
        super().__init__("Word not possible", f"You can't spell that word from '{root_word}'!")
        self.word = word
        self.root_word = root_word


class NotARealWord(ValidationError):
    """The dictionary doesn't know the word."""

    kind = "not_a_real_word"

    def __init__(self, word: str) -> None:
        super().__init__("Word not recognized", "You can't just make them up, you know!")
        self.word = word


# -------------------------
# Game / session errors
# -------------------------

class GameNotActive(WordScrambleError):
    """No active game session found for the player/channel."""
