from __future__ import annotations

import logging
import random

from src.domain.errors import AlreadyUsed, NotARealWord, NotConstructible
from src.domain.models import GameState
from src.games.word_scramble.validator import is_original, is_possible, is_real
from src.services.dictionary import DEFAULT_LANGUAGE, SpellChecker
from src.services.wordlist import WordList
from src.utils.text import normalize_word

logger = logging.getLogger(__name__)


def start(word_list: WordList, rng: random.Random | None = None) -> GameState:
    return GameState(root_word=word_list.random_word(rng))


def restart(state: GameState, word_list: WordList, rng: random.Random | None = None) -> GameState:
    # Nothing carries over from the previous round.
    return start(word_list, rng)


def submit_word(
    state: GameState,
    raw_input: str,
    checker: SpellChecker,
    language: str = DEFAULT_LANGUAGE,
) -> GameState:
    """
    Apply one submission to ``state``.

    Returns a new state with the word prepended and score + 1 when accepted,
    or ``state`` itself when the input is blank. Raises a ValidationError
    subclass on rejection; the checks run originality -> feasibility ->
    dictionary, stopping at the first failure, so the dictionary is only
    consulted for words that could actually be played.
    """
    word = normalize_word(raw_input)
    if not word:
        return state

    if not is_original(word, state.used_words):
        raise AlreadyUsed(word)

    if not is_possible(word, state.root_word):
        raise NotConstructible(word, state.root_word)

    if not is_real(word, checker, language):
        raise NotARealWord(word)

    logger.debug("Accepted %r for root %r", word, state.root_word)
    return state.with_word(word)
