from __future__ import annotations

import asyncio
import logging
import sys

from src.config.settings import Settings
from src.domain.errors import WordListUnavailable
from src.games.word_scramble.discord_game import WordScrambleGame
from src.logging.setup import setup_logging
from src.platforms.discord.bot import build_discord_bot
from src.services.dictionary import build_dictionary
from src.services.game_registry import GameRegistry
from src.services.wordlist import WordList

logger = logging.getLogger(__name__)


async def main() -> None:
    settings = Settings.load()
    setup_logging(settings)

    # --- Load word resources once; the game has no content without them ---
    try:
        wordlist = WordList.load_from_txt(settings.start_words_path)
        dictionary = build_dictionary(
            source=settings.dictionary_source,
            language=settings.dictionary_language,
            path=settings.dictionary_path,
            n_top=settings.dictionary_top_n,
        )
    except WordListUnavailable as e:
        logger.critical("Cannot start: %s", e)
        sys.exit(1)

    game_registry = GameRegistry()

    # --- Games: Word Scramble ---
    word_scramble = WordScrambleGame(
        wordlist=wordlist,
        checker=dictionary,
        language=settings.dictionary_language,
        allowed_channel_ids=set(settings.wordscramble_channel_ids),
    )
    game_registry.register(word_scramble)

    # --- DI container ---
    services = {
        "game_registry": game_registry,
        "wordlist": wordlist,
        "dictionary": dictionary,
        "word_scramble": word_scramble,
    }

    # --- Discord bot ---
    discord_bot = build_discord_bot(settings=settings, services=services)
    await discord_bot.start(settings.discord_token)


if __name__ == "__main__":
    asyncio.run(main())
