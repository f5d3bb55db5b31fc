from __future__ import annotations

import logging

from src.games.base import DiscordMessageLike, Game

logger = logging.getLogger(__name__)


class GameRegistry:
    def __init__(self) -> None:
        self._games: list[Game] = []

    def register(self, game: Game) -> None:
        self._games.append(game)
        logger.info("Registered game: %s", game.key)

    async def handle_discord_message(self, message: DiscordMessageLike) -> bool:
        """
        Try all registered games. The first one that consumes the message wins.
        """
        for game in self._games:
            consumed = await game.handle_discord_message(message)
            if consumed:
                return True
        return False
