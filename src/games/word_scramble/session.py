from __future__ import annotations

import logging
import random
from typing import Callable

from src.domain.models import GameState
from src.games.word_scramble import rules
from src.services.dictionary import DEFAULT_LANGUAGE, SpellChecker
from src.services.wordlist import WordList

logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


class WordScrambleSession:
    """
    Owns the current GameState of one player and tells subscribers
    whenever it is replaced.

    ValidationError from submit() propagates to the caller untouched;
    the state is not replaced in that case and nobody is notified.
    """

    def __init__(
        self,
        *,
        word_list: WordList,
        checker: SpellChecker,
        language: str = DEFAULT_LANGUAGE,
        rng: random.Random | None = None,
    ) -> None:
        self._word_list = word_list
        self._checker = checker
        self._language = language
        self._rng = rng
        self._listeners: list[StateListener] = []
        self._state = rules.start(word_list, rng)

    @property
    def state(self) -> GameState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def submit(self, raw_input: str) -> GameState:
        new_state = rules.submit_word(self._state, raw_input, self._checker, self._language)
        if new_state is not self._state:
            self._replace(new_state)
        return self._state

    def restart(self) -> GameState:
        self._replace(rules.restart(self._state, self._word_list, self._rng))
        logger.debug("Session restarted with root %r", self._state.root_word)
        return self._state

    def _replace(self, state: GameState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
